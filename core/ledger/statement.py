"""
원장 명세서 계산

기초잔액 + 시간순 거래 목록 → 행별 누적 잔액, 차변/대변 합계, 기말 잔액.

부호 규칙: 차변(+), 대변(-). 표시 부호(Dr/Cr)는 항상 숫자에서 파생.

사용 예시:
```python
opening = OpeningBalance(amount=Decimal("500"), side=EntrySide.CREDIT)
statement = compute_ledger_statement(opening, [TransactionLine(debit=Decimal("700"))])

statement.final_balance       # Decimal("200")
statement.final_balance_type  # BalanceType.DR
```
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from core.ledger.formatting import balance_type_of
from core.ledger.types import (
    OPENING_JOURNAL_ID,
    OPENING_NARRATION,
    OPENING_OPPONENT,
    OPENING_VOUCHER_NO,
    OPENING_VOUCHER_TYPE,
    BalanceType,
    EntrySide,
)

ZERO = Decimal("0")


def _to_decimal(value: Any) -> Decimal:
    """API 숫자 값을 Decimal로 변환 (None은 0)"""
    if value is None or value == "":
        return ZERO
    return Decimal(str(value))


def _parse_date(value: Any) -> date | None:
    """ISO 날짜/일시 문자열 → date"""
    if value is None or value == "" or value == "N/A":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00")).date()


@dataclass(frozen=True)
class OpeningBalance:
    """기초잔액

    Attributes:
        amount: 금액 (0 이상)
        side: 차변/대변 방향
    """

    amount: Decimal
    side: EntrySide

    @property
    def signed(self) -> Decimal:
        """부호 있는 기초잔액 (차변 +, 대변 -)"""
        return self.amount if self.side is EntrySide.DEBIT else -self.amount


@dataclass(frozen=True)
class TransactionLine:
    """원장 보고서 거래 라인 (백엔드 보고서 조회 결과 1행)"""

    debit: Decimal = ZERO
    credit: Decimal = ZERO
    journal_id: str = ""
    date: date | None = None
    voucher_type: str = ""
    voucher_no: str = ""
    narration: str = ""
    line_narration: str = ""
    opponent_ledger_name: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "TransactionLine":
        """API 응답에서 생성"""
        return cls(
            debit=_to_decimal(data.get("debit")),
            credit=_to_decimal(data.get("credit")),
            journal_id=str(data.get("journalId", "")),
            date=_parse_date(data.get("date")),
            voucher_type=data.get("voucherType") or "",
            voucher_no=data.get("voucherNo") or "",
            narration=data.get("narration") or "",
            line_narration=data.get("lineNarration") or "",
            opponent_ledger_name=data.get("opponentLedgerName"),
        )


@dataclass(frozen=True)
class StatementRow:
    """명세서 행 (거래 필드 + 누적 잔액)"""

    journal_id: str
    date: date | None
    voucher_type: str
    voucher_no: str
    narration: str
    line_narration: str
    debit: Decimal
    credit: Decimal
    opponent_ledger_name: str | None
    balance: Decimal

    @property
    def balance_type(self) -> BalanceType:
        """누적 잔액의 표시 부호"""
        return balance_type_of(self.balance)

    @property
    def is_opening(self) -> bool:
        """기초잔액 가상 행 여부"""
        return self.voucher_type == OPENING_VOUCHER_TYPE

    @classmethod
    def opening(cls, opening: OpeningBalance) -> "StatementRow":
        """기초잔액 가상 행 생성"""
        return cls(
            journal_id=OPENING_JOURNAL_ID,
            date=None,
            voucher_type=OPENING_VOUCHER_TYPE,
            voucher_no=OPENING_VOUCHER_NO,
            narration=OPENING_NARRATION,
            line_narration="",
            debit=opening.amount if opening.side is EntrySide.DEBIT else ZERO,
            credit=opening.amount if opening.side is EntrySide.CREDIT else ZERO,
            opponent_ledger_name=OPENING_OPPONENT,
            balance=opening.signed,
        )

    @classmethod
    def from_line(cls, line: TransactionLine, balance: Decimal) -> "StatementRow":
        """거래 라인 + 누적 잔액으로 행 생성"""
        return cls(
            journal_id=line.journal_id,
            date=line.date,
            voucher_type=line.voucher_type,
            voucher_no=line.voucher_no,
            narration=line.narration,
            line_narration=line.line_narration,
            debit=line.debit,
            credit=line.credit,
            opponent_ledger_name=line.opponent_ledger_name,
            balance=balance,
        )


@dataclass(frozen=True)
class LedgerStatement:
    """원장 명세서 계산 결과

    rows[0]은 항상 기초잔액 행.
    """

    rows: tuple[StatementRow, ...]
    total_debit: Decimal
    total_credit: Decimal
    closing_balance: Decimal  # 마지막 행의 부호 있는 잔액

    @property
    def final_balance(self) -> Decimal:
        """기말 잔액 절대값"""
        return abs(self.closing_balance)

    @property
    def final_balance_type(self) -> BalanceType:
        """기말 잔액 표시 부호"""
        return balance_type_of(self.closing_balance)

    @property
    def opening_row(self) -> StatementRow:
        return self.rows[0]

    @property
    def transaction_rows(self) -> tuple[StatementRow, ...]:
        return self.rows[1:]


def compute_ledger_statement(
    opening: OpeningBalance,
    transactions: Iterable[TransactionLine],
) -> LedgerStatement:
    """기초잔액과 거래 목록으로 원장 명세서 계산

    거래는 호출자가 시간순으로 전달해야 하며 여기서 정렬하지 않음.
    차변과 대변이 동시에 있는 라인도 거부하지 않고 차감 합산.

    Args:
        opening: 기초잔액
        transactions: 시간순 거래 라인

    Returns:
        LedgerStatement (행, 합계, 기말 잔액)
    """
    opening_row = StatementRow.opening(opening)
    running = opening_row.balance
    total_debit = opening_row.debit
    total_credit = opening_row.credit

    rows = [opening_row]
    for line in transactions:
        running = running + line.debit - line.credit
        total_debit += line.debit
        total_credit += line.credit
        rows.append(StatementRow.from_line(line, running))

    return LedgerStatement(
        rows=tuple(rows),
        total_debit=total_debit,
        total_credit=total_credit,
        closing_balance=running,
    )
