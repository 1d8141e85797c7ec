"""
분개 입력 폼 모델

사용자가 편집하는 전표 초안(JournalDraft)과 백엔드 제출 문서(JournalSubmission).

라인은 (유형 Dr/Cr, 금액) 한 쌍으로 입력받고 debit/credit은 이로부터 파생되므로
초안 라인이 차변과 대변을 동시에 가질 수 없다.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Protocol

from core.constants import Defaults
from core.ledger.types import BalanceType
from core.ledger.validation import (
    BalanceCheck,
    JournalValidationError,
    validate_balanced,
)
from core.types import VoucherType

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

MIN_LINES_MESSAGE = "A Journal Entry must have at least two lines."


class JournalFormError(Exception):
    """폼 편집 규칙 위반"""

    pass


class LedgerChoice(Protocol):
    """계정 선택지 (id, name 보유)"""

    id: str
    name: str


@dataclass
class DraftLine:
    """전표 초안 라인"""

    line_id: int
    ledger_id: str = ""
    ledger_name: str = ""
    entry_type: BalanceType = BalanceType.DR
    amount: Decimal = ZERO
    line_narration: str = ""

    def __post_init__(self) -> None:
        self.entry_type = BalanceType(self.entry_type)
        self.amount = _coerce_amount(self.amount)

    @property
    def debit(self) -> Decimal:
        return self.amount if self.entry_type is BalanceType.DR else ZERO

    @property
    def credit(self) -> Decimal:
        return self.amount if self.entry_type is BalanceType.CR else ZERO


@dataclass(frozen=True)
class SubmissionLine:
    """백엔드 제출 라인"""

    ledger_id: str
    ledger_name: str
    debit: Decimal
    credit: Decimal
    line_narration: str = ""

    def to_api(self) -> dict[str, Any]:
        return {
            "ledgerId": self.ledger_id,
            "ledgerName": self.ledger_name,
            "debit": float(self.debit),
            "credit": float(self.credit),
            "lineNarration": self.line_narration,
        }


@dataclass(frozen=True)
class JournalSubmission:
    """검증을 통과한 전표 문서 (POST /journal 본문)"""

    company_id: str
    date: date
    voucher_type: str
    narration: str
    lines: tuple[SubmissionLine, ...]
    total_debit: Decimal
    total_credit: Decimal

    def to_api(self) -> dict[str, Any]:
        """백엔드 JSON 본문 (camelCase)"""
        return {
            "companyId": self.company_id,
            "date": self.date.isoformat(),
            "voucherType": self.voucher_type,
            "narration": self.narration,
            "lines": [line.to_api() for line in self.lines],
            "totalDebit": float(self.total_debit),
            "totalCredit": float(self.total_credit),
        }


@dataclass
class JournalDraft:
    """전표 초안 (폼 상태)

    사용 예시:
    ```python
    draft = JournalDraft.new(company_id="c1")
    first, second = draft.lines
    draft.set_ledger(first.line_id, "cash", ledgers)
    draft.set_amount(first.line_id, Decimal("100"))
    draft.set_ledger(second.line_id, "sales", ledgers)
    draft.set_entry_type(second.line_id, BalanceType.CR)
    draft.set_amount(second.line_id, Decimal("100"))

    if draft.check().ok:
        submission = draft.to_submission()
    ```
    """

    company_id: str
    date: date
    voucher_type: str = VoucherType.JOURNAL.value
    narration: str = ""
    lines: list[DraftLine] = field(default_factory=list)
    _line_ids: Iterator[int] = field(
        default_factory=lambda: itertools.count(1), repr=False, compare=False
    )

    @classmethod
    def new(cls, company_id: str, today: date | None = None) -> JournalDraft:
        """빈 라인 2개를 가진 새 초안"""
        draft = cls(company_id=company_id, date=today or date.today())
        for _ in range(Defaults.MIN_JOURNAL_LINES):
            draft.add_line()
        return draft

    # -------------------------------------------------------------------------
    # 라인 편집
    # -------------------------------------------------------------------------

    def add_line(self, **values: Any) -> DraftLine:
        """라인 추가 (기본값: 차변, 금액 0)"""
        line = DraftLine(line_id=next(self._line_ids), **values)
        self.lines.append(line)
        return line

    def remove_line(self, line_id: int) -> None:
        """라인 삭제

        Raises:
            JournalFormError: 최소 라인 수 이하로 줄이려는 경우
        """
        if len(self.lines) <= Defaults.MIN_JOURNAL_LINES:
            raise JournalFormError(MIN_LINES_MESSAGE)
        self.lines.remove(self.get_line(line_id))

    def get_line(self, line_id: int) -> DraftLine:
        for line in self.lines:
            if line.line_id == line_id:
                return line
        raise JournalFormError(f"Journal line {line_id} not found.")

    def set_ledger(
        self,
        line_id: int,
        ledger_id: str,
        ledgers: Iterable[LedgerChoice] = (),
    ) -> DraftLine:
        """계정 선택 (선택지에서 계정명도 함께 설정)"""
        line = self.get_line(line_id)
        line.ledger_id = ledger_id
        line.ledger_name = next(
            (ledger.name for ledger in ledgers if ledger.id == ledger_id),
            "",
        )
        return line

    def set_entry_type(self, line_id: int, entry_type: BalanceType | str) -> DraftLine:
        line = self.get_line(line_id)
        line.entry_type = BalanceType(entry_type)
        return line

    def set_amount(self, line_id: int, amount: Decimal | str | int | None) -> DraftLine:
        """금액 설정 (빈 값/해석 불가 값은 0)"""
        line = self.get_line(line_id)
        line.amount = _coerce_amount(amount)
        return line

    # -------------------------------------------------------------------------
    # 합계 / 검증 / 제출
    # -------------------------------------------------------------------------

    @property
    def total_debit(self) -> Decimal:
        return sum((line.debit for line in self.lines), ZERO)

    @property
    def total_credit(self) -> Decimal:
        return sum((line.credit for line in self.lines), ZERO)

    @property
    def is_balanced(self) -> bool:
        return self.total_debit == self.total_credit

    def check(self) -> BalanceCheck:
        return validate_balanced(self.lines)

    def to_submission(self) -> JournalSubmission:
        """백엔드 제출 문서 생성

        Raises:
            JournalValidationError: 균형 검증 실패 시
        """
        result = self.check()
        if result.error is not None:
            logger.info(
                f"전표 제출 거부: {result.error.kind.value} "
                f"(debit={result.total_debit}, credit={result.total_credit})"
            )
            raise JournalValidationError(result.error)

        return JournalSubmission(
            company_id=self.company_id,
            date=self.date,
            voucher_type=self.voucher_type,
            narration=self.narration,
            lines=tuple(
                SubmissionLine(
                    ledger_id=line.ledger_id,
                    ledger_name=line.ledger_name,
                    debit=line.debit,
                    credit=line.credit,
                    line_narration=line.line_narration,
                )
                for line in self.lines
            ),
            total_debit=result.total_debit,
            total_credit=result.total_credit,
        )


def _coerce_amount(amount: Decimal | str | int | None) -> Decimal:
    """폼 입력 금액 → Decimal (음수/해석 불가 값은 0)"""
    if amount is None or amount == "":
        return ZERO
    try:
        value = Decimal(str(amount))
    except ArithmeticError:
        return ZERO
    if not value.is_finite() or value < 0:
        return ZERO
    return value
