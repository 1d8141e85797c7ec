"""
요청 스키마 (Pydantic)

Web API 요청 데이터 검증
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from core.ledger.types import BalanceType, EntrySide
from core.types import DealerType, LedgerStatus, VoucherType


class LoginRequest(BaseModel):
    """로그인 요청"""

    email: str = Field(..., description="이메일")
    password: str = Field(..., description="비밀번호")


class RegisterRequest(BaseModel):
    """회원가입 요청"""

    name: str = Field(..., description="이름")
    email: str = Field(..., description="이메일")
    password: str = Field(..., description="비밀번호")


class CompanyRequest(BaseModel):
    """회사 생성 요청"""

    name: str = Field(..., description="회사명")
    short_code: str = Field(..., description="약칭")
    financial_year_start: date = Field(..., description="회계연도 시작일")
    currency_code: str = Field(default="INR", description="통화 코드")
    address: str | None = Field(default=None, description="주소")


class CompanyUpdateRequest(BaseModel):
    """회사 수정 요청 (보낸 필드만 변경)"""

    name: str | None = None
    short_code: str | None = None
    financial_year_start: date | None = None
    currency_code: str | None = None
    address: str | None = None


class LedgerRequest(BaseModel):
    """계정 생성/수정 요청

    name, group 필수 여부는 서비스에서 검증 (사용자 메시지 통일).
    """

    name: str = Field(default="", description="계정명")
    group: str = Field(default="", description="계정 그룹 (예: Sundry Debtors)")
    alias: str | None = None

    opening_balance: Decimal = Field(default=Decimal("0"), ge=0, description="기초잔액")
    ob_type: EntrySide = Field(default=EntrySide.DEBIT, description="기초잔액 방향")
    credit_days: int | None = Field(default=None, ge=0)
    credit_limit: Decimal | None = Field(default=None, ge=0)

    address: str | None = None
    city: str | None = None
    pincode: str | None = None
    area: str | None = None
    state: str | None = None

    gstin: str | None = None
    vatin: str | None = None
    pan_no: str | None = None
    ecc_no: str | None = None
    dlr_type: DealerType | None = None
    cstin: str | None = None

    contact_person: str | None = None
    aadhar_no: str | None = None
    phone_no_o: str | None = None
    fax: str | None = None
    mobile_no: str | None = None
    email: str | None = None
    website: str | None = None
    status: LedgerStatus = Field(default=LedgerStatus.ACTIVE, description="상태")


class JournalLineRequest(BaseModel):
    """전표 라인 입력 (유형 + 금액)"""

    ledger_id: str = Field(default="", description="계정 ID")
    ledger_name: str = Field(default="", description="계정명 (비어 있으면 서버에서 채움)")
    entry_type: BalanceType = Field(default=BalanceType.DR, description="Dr 또는 Cr")
    amount: Decimal | str | None = Field(default=None, description="금액 (빈 값/음수는 0)")
    line_narration: str = Field(default="", description="라인 적요")


class JournalEntryRequest(BaseModel):
    """전표 입력 요청"""

    company_id: str = Field(..., description="회사 ID")
    entry_date: date | None = Field(default=None, alias="date", description="전표 일자 (없으면 오늘)")
    voucher_type: VoucherType = Field(default=VoucherType.JOURNAL, description="전표 유형")
    narration: str = Field(default="", description="적요")
    lines: list[JournalLineRequest] = Field(default_factory=list, description="분개 라인")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "company_id": "665f1c...",
                    "date": "2024-04-15",
                    "voucher_type": "Journal",
                    "narration": "Cash sales",
                    "lines": [
                        {"ledger_id": "cash", "entry_type": "Dr", "amount": "1000"},
                        {"ledger_id": "sales", "entry_type": "Cr", "amount": "1000"},
                    ],
                }
            ]
        }
    }
