"""
응답 스키마 (Pydantic)

Web API 응답 데이터 직렬화.
금액은 정밀도 보존을 위해 문자열, 표시용 값은 formatted_* 필드에 별도 제공.
"""

from typing import Any

from pydantic import BaseModel, Field

from adapters.models import AuthResult, Company, JournalRecord, Ledger, LedgerDetails
from core.constants import Defaults
from core.ledger.formatting import (
    format_amount,
    format_balance,
    format_entry_amount,
    format_report_date,
)
from core.ledger.statement import StatementRow
from core.ledger.validation import BalanceCheck
from web.services.report_service import LedgerReport


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str = Field(default="ok", description="서비스 상태")
    mode: str = Field(..., description="백엔드 모드 (production/local)")
    version: str = Field(..., description="API 버전")


# =========================================================================
# 인증 / 회사 / 계정
# =========================================================================


class UserResponse(BaseModel):
    id: str
    name: str
    email: str


class AuthResponse(BaseModel):
    """로그인/회원가입 응답"""

    token: str = Field(..., description="Bearer 토큰")
    user: UserResponse

    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthResponse":
        user = result.user
        return cls(token=result.token, user=UserResponse(id=user.id, name=user.name, email=user.email))


class CompanyResponse(BaseModel):
    """회사 응답"""

    id: str
    name: str
    short_code: str
    financial_year_start: str
    currency_code: str
    address: str | None = None

    @classmethod
    def from_company(cls, company: Company) -> "CompanyResponse":
        return cls(
            id=company.id,
            name=company.name,
            short_code=company.short_code,
            financial_year_start=company.financial_year_start,
            currency_code=company.currency_code,
            address=company.address,
        )


class LedgerResponse(BaseModel):
    """계정 응답"""

    id: str
    company_id: str
    name: str
    group: str
    alias: str | None = None
    opening_balance: str = Field(..., description="기초잔액")
    ob_type: str = Field(..., description="Debit 또는 Credit")
    credit_days: int = 0
    credit_limit: str = "0"
    status: str
    details: dict[str, Any] = Field(default_factory=dict, description="주소/세무/연락처")

    @classmethod
    def from_ledger(cls, ledger: Ledger) -> "LedgerResponse":
        return cls(
            id=ledger.id,
            company_id=ledger.company_id,
            name=ledger.name,
            group=ledger.group,
            alias=ledger.alias,
            opening_balance=str(ledger.opening_balance),
            ob_type=ledger.ob_type.value,
            credit_days=ledger.credit_days,
            credit_limit=str(ledger.credit_limit),
            status=ledger.status,
            details=ledger.details,
        )


class LedgerOptionResponse(BaseModel):
    id: str
    name: str


class LedgerDetailsResponse(BaseModel):
    """계정 기초잔액 응답"""

    id: str
    name: str
    opening_balance: str
    ob_type: str
    formatted_opening_balance: str

    @classmethod
    def from_details(cls, details: LedgerDetails, locale: str = Defaults.LOCALE) -> "LedgerDetailsResponse":
        return cls(
            id=details.id,
            name=details.name,
            opening_balance=str(details.opening_balance),
            ob_type=details.ob_type.value,
            formatted_opening_balance=format_amount(details.opening_balance, locale),
        )


# =========================================================================
# 전표
# =========================================================================


class BalanceErrorResponse(BaseModel):
    kind: str = Field(..., description="Unbalanced / ZeroAmount / IncompleteLine")
    message: str
    line_numbers: list[int] = Field(default_factory=list, description="문제 라인 (1부터)")


class BalanceCheckResponse(BaseModel):
    """실시간 균형 검증 결과"""

    ok: bool
    total_debit: str
    total_credit: str
    difference: str = Field(..., description="차변 합계 - 대변 합계")
    error: BalanceErrorResponse | None = None

    @classmethod
    def from_check(cls, check: BalanceCheck) -> "BalanceCheckResponse":
        error = None
        if check.error is not None:
            error = BalanceErrorResponse(
                kind=check.error.kind.value,
                message=check.error.message,
                line_numbers=list(check.error.line_numbers),
            )
        return cls(
            ok=check.ok,
            total_debit=str(check.total_debit),
            total_credit=str(check.total_credit),
            difference=str(check.difference),
            error=error,
        )


class JournalLineResponse(BaseModel):
    ledger_id: str
    ledger_name: str
    debit: str
    credit: str
    line_narration: str = ""


class JournalResponse(BaseModel):
    """전표 응답"""

    id: str
    company_id: str
    voucher_no: str
    date: str
    voucher_type: str
    narration: str
    lines: list[JournalLineResponse]
    total_debit: str
    total_credit: str
    created_at: str | None = None

    @classmethod
    def from_record(cls, record: JournalRecord) -> "JournalResponse":
        return cls(
            id=record.id,
            company_id=record.company_id,
            voucher_no=record.voucher_no,
            date=record.date,
            voucher_type=record.voucher_type,
            narration=record.narration,
            lines=[
                JournalLineResponse(
                    ledger_id=line.ledger_id,
                    ledger_name=line.ledger_name,
                    debit=str(line.debit),
                    credit=str(line.credit),
                    line_narration=line.line_narration,
                )
                for line in record.lines
            ],
            total_debit=str(record.total_debit),
            total_credit=str(record.total_credit),
            created_at=record.created_at,
        )


# =========================================================================
# 원장 보고서
# =========================================================================


class StatementRowResponse(BaseModel):
    """명세서 행 (원시 값 + 표시 값)"""

    journal_id: str
    date: str | None = Field(default=None, description="ISO 날짜 (기초잔액 행은 None)")
    formatted_date: str = Field(..., description="dd/mm/yyyy (기초잔액 행은 '-')")
    voucher_type: str
    voucher_no: str
    narration: str
    line_narration: str
    opponent_ledger_name: str | None = None
    debit: str
    credit: str
    balance: str = Field(..., description="부호 있는 누적 잔액 (차변 +)")
    balance_type: str = Field(..., description="Dr 또는 Cr")
    formatted_debit: str
    formatted_credit: str
    formatted_balance: str

    @classmethod
    def from_row(cls, row: StatementRow, locale: str = Defaults.LOCALE) -> "StatementRowResponse":
        return cls(
            journal_id=row.journal_id,
            date=row.date.isoformat() if row.date else None,
            formatted_date=format_report_date(row.date),
            voucher_type=row.voucher_type,
            voucher_no=row.voucher_no,
            narration=row.narration,
            line_narration=row.line_narration,
            opponent_ledger_name=row.opponent_ledger_name,
            debit=str(row.debit),
            credit=str(row.credit),
            balance=str(row.balance),
            balance_type=row.balance_type.value,
            formatted_debit=format_entry_amount(row.debit, locale),
            formatted_credit=format_entry_amount(row.credit, locale),
            formatted_balance=format_balance(row.balance, locale),
        )


class LedgerReportResponse(BaseModel):
    """원장 보고서 응답"""

    ledger: LedgerDetailsResponse
    start_date: str | None = None
    end_date: str | None = None
    rows: list[StatementRowResponse]
    total_debit: str
    total_credit: str
    final_balance: str = Field(..., description="기말 잔액 절대값")
    final_balance_type: str
    formatted_total_debit: str
    formatted_total_credit: str
    formatted_final_balance: str

    @classmethod
    def from_report(cls, report: LedgerReport, locale: str = Defaults.LOCALE) -> "LedgerReportResponse":
        statement = report.statement
        return cls(
            ledger=LedgerDetailsResponse.from_details(report.ledger, locale),
            start_date=report.start_date.isoformat() if report.start_date else None,
            end_date=report.end_date.isoformat() if report.end_date else None,
            rows=[StatementRowResponse.from_row(row, locale) for row in statement.rows],
            total_debit=str(statement.total_debit),
            total_credit=str(statement.total_credit),
            final_balance=str(statement.final_balance),
            final_balance_type=statement.final_balance_type.value,
            formatted_total_debit=format_amount(statement.total_debit, locale),
            formatted_total_credit=format_amount(statement.total_credit, locale),
            formatted_final_balance=format_balance(statement.closing_balance, locale),
        )
