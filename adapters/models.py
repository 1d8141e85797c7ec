"""
백엔드 API 응답 모델

회계 백엔드 REST API 응답을 파싱하여 데이터클래스로 변환.
모든 금액은 Decimal 사용. 백엔드 키는 camelCase, 여기서는 snake_case.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any

from core.ledger.statement import OpeningBalance, TransactionLine, _to_decimal
from core.ledger.types import EntrySide
from core.session import User


def _object_id(data: dict[str, Any]) -> str:
    """MongoDB _id (없으면 id)"""
    return str(data.get("_id") or data.get("id") or "")


@dataclass(frozen=True)
class AuthResult:
    """로그인/회원가입 응답"""

    token: str
    user: User

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "AuthResult":
        return cls(token=data["token"], user=User.from_api(data.get("user") or {}))


@dataclass(frozen=True)
class Company:
    """회사

    Attributes:
        id: 회사 ID
        name: 회사명
        short_code: 약칭
        financial_year_start: 회계연도 시작일 (YYYY-MM-DD)
        currency_code: 통화 코드 (예: INR)
        address: 주소
    """

    id: str
    name: str
    short_code: str
    financial_year_start: str
    currency_code: str
    address: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Company":
        """API 응답에서 생성"""
        return cls(
            id=_object_id(data),
            name=data.get("name", ""),
            short_code=data.get("shortCode", ""),
            financial_year_start=str(data.get("financialYearStart", ""))[:10],
            currency_code=data.get("currencyCode", ""),
            address=data.get("address"),
        )


# 회사 필드 매핑 (snake_case → 백엔드 키)
COMPANY_FIELD_MAP: dict[str, str] = {
    "name": "name",
    "short_code": "shortCode",
    "financial_year_start": "financialYearStart",
    "currency_code": "currencyCode",
    "address": "address",
}


def company_payload(values: dict[str, Any]) -> dict[str, Any]:
    """회사 생성/수정 본문 (None 값 제외, 날짜는 ISO 문자열)"""
    payload: dict[str, Any] = {}
    for key, value in values.items():
        if value is None or key not in COMPANY_FIELD_MAP:
            continue
        if hasattr(value, "isoformat"):
            value = value.isoformat()
        payload[COMPANY_FIELD_MAP[key]] = value
    return payload


# 계정 필드 매핑 (snake_case → 백엔드 키)
LEDGER_FIELD_MAP: dict[str, str] = {
    "company_id": "companyId",
    "name": "name",
    "alias": "alias",
    "group": "group",
    "opening_balance": "openingBalance",
    "ob_type": "obType",
    "credit_days": "creditDays",
    "credit_limit": "creditLimit",
    "address": "address",
    "city": "city",
    "pincode": "pincode",
    "area": "area",
    "state": "state",
    "gstin": "GSTIN",
    "vatin": "VATIN",
    "pan_no": "PANNo",
    "ecc_no": "ECCNo",
    "dlr_type": "dlrType",
    "cstin": "CSTIN",
    "contact_person": "contactPerson",
    "aadhar_no": "aadharNo",
    "phone_no_o": "phoneNoO",
    "fax": "fax",
    "mobile_no": "mobileNo",
    "email": "email",
    "website": "website",
    "status": "status",
}


def ledger_payload(values: dict[str, Any]) -> dict[str, Any]:
    """계정 생성/수정 본문 (None 값 제외, Decimal은 숫자로, Enum은 값으로)"""
    payload: dict[str, Any] = {}
    for key, value in values.items():
        if value is None or key not in LEDGER_FIELD_MAP:
            continue
        if isinstance(value, Decimal):
            value = float(value)
        elif isinstance(value, Enum):
            value = value.value
        payload[LEDGER_FIELD_MAP[key]] = value
    return payload


@dataclass(frozen=True)
class Ledger:
    """계정 (Chart of Accounts 1건)

    기본 식별/회계 정보 외 주소, 세무 등록, 연락처 필드는 details에 보관.
    """

    id: str
    company_id: str
    name: str
    group: str
    opening_balance: Decimal
    ob_type: EntrySide
    status: str
    alias: str | None = None
    credit_days: int = 0
    credit_limit: Decimal = Decimal("0")
    details: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Ledger":
        """API 응답에서 생성"""
        core_keys = {
            "company_id", "name", "alias", "group", "opening_balance",
            "ob_type", "credit_days", "credit_limit", "status",
        }
        details = {
            key: data[api_key]
            for key, api_key in LEDGER_FIELD_MAP.items()
            if key not in core_keys and data.get(api_key) not in (None, "")
        }
        return cls(
            id=_object_id(data),
            company_id=str(data.get("companyId", "")),
            name=data.get("name", ""),
            group=data.get("group", ""),
            opening_balance=_to_decimal(data.get("openingBalance")),
            ob_type=EntrySide.CREDIT if data.get("obType") == EntrySide.CREDIT.value else EntrySide.DEBIT,
            status=data.get("status") or "Active",
            alias=data.get("alias") or None,
            credit_days=int(data.get("creditDays") or 0),
            credit_limit=_to_decimal(data.get("creditLimit")),
            details=details,
        )


@dataclass(frozen=True)
class LedgerOption:
    """계정 선택지 (드롭다운용)"""

    id: str
    name: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "LedgerOption":
        return cls(id=_object_id(data), name=data.get("name", ""))


@dataclass(frozen=True)
class LedgerDetails:
    """계정 기초잔액 정보 (명세서 계산 입력)"""

    id: str
    name: str
    opening_balance: Decimal
    ob_type: EntrySide

    @property
    def opening(self) -> OpeningBalance:
        return OpeningBalance(amount=self.opening_balance, side=self.ob_type)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "LedgerDetails":
        """API 응답에서 생성 (obType이 Credit가 아니면 Debit)"""
        return cls(
            id=_object_id(data),
            name=data.get("name", ""),
            opening_balance=_to_decimal(data.get("openingBalance")),
            ob_type=EntrySide.CREDIT if data.get("obType") == EntrySide.CREDIT.value else EntrySide.DEBIT,
        )


@dataclass(frozen=True)
class JournalLineRecord:
    """저장된 전표 라인"""

    ledger_id: str
    ledger_name: str
    debit: Decimal
    credit: Decimal
    line_narration: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "JournalLineRecord":
        ledger = data.get("ledgerId")
        # populate된 경우 {_id, name} 객체로 내려옴
        if isinstance(ledger, dict):
            ledger_id = _object_id(ledger)
            ledger_name = data.get("ledgerName") or ledger.get("name", "")
        else:
            ledger_id = str(ledger or "")
            ledger_name = data.get("ledgerName", "")
        return cls(
            ledger_id=ledger_id,
            ledger_name=ledger_name,
            debit=_to_decimal(data.get("debit")),
            credit=_to_decimal(data.get("credit")),
            line_narration=data.get("lineNarration") or "",
        )


@dataclass(frozen=True)
class JournalRecord:
    """저장된 전표 (전표번호는 백엔드가 채번)"""

    id: str
    company_id: str
    voucher_no: str
    date: str
    voucher_type: str
    narration: str
    lines: tuple[JournalLineRecord, ...]
    total_debit: Decimal
    total_credit: Decimal
    created_at: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "JournalRecord":
        """API 응답에서 생성"""
        return cls(
            id=_object_id(data),
            company_id=str(data.get("companyId", "")),
            voucher_no=str(data.get("voucherNo", "")),
            date=str(data.get("date", ""))[:10],
            voucher_type=data.get("voucherType", ""),
            narration=data.get("narration", ""),
            lines=tuple(JournalLineRecord.from_api(line) for line in data.get("lines", [])),
            total_debit=_to_decimal(data.get("totalDebit")),
            total_credit=_to_decimal(data.get("totalCredit")),
            created_at=data.get("createdAt"),
        )


def transaction_lines_from_api(data: list[dict[str, Any]]) -> list[TransactionLine]:
    """원장 보고서 응답 → 거래 라인 목록 (순서 유지)"""
    return [TransactionLine.from_api(item) for item in data]
