"""
분개 균형 검증

전표 제출 전 클라이언트 측 즉시 검증.
최종 검증 권한은 백엔드에 있으며 여기서는 빠른 피드백만 제공.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Protocol

from core.ledger.types import BalanceErrorKind

ZERO = Decimal("0")

UNBALANCED_MESSAGE = (
    "Journal Entry must be balanced (Total Debit must equal Total Credit) "
    "and must not be zero."
)
INCOMPLETE_LINE_MESSAGE = (
    "Every line must have a selected ledger account and a non-zero Debit or Credit amount."
)


class BalanceLine(Protocol):
    """검증 대상 라인 (ledger_id, debit, credit 보유)"""

    ledger_id: str | None
    debit: Decimal
    credit: Decimal


@dataclass(frozen=True)
class BalanceError:
    """검증 오류

    Attributes:
        kind: 오류 유형
        message: 사용자 표시 메시지
        line_numbers: 문제 라인 번호 (1부터, IncompleteLine에서만 사용)
    """

    kind: BalanceErrorKind
    message: str
    line_numbers: tuple[int, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class BalanceCheck:
    """검증 결과"""

    total_debit: Decimal
    total_credit: Decimal
    error: BalanceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def difference(self) -> Decimal:
        """차변 합계 - 대변 합계"""
        return self.total_debit - self.total_credit


class JournalValidationError(Exception):
    """검증 실패 상태로 제출을 시도한 경우"""

    def __init__(self, error: BalanceError):
        super().__init__(error.message)
        self.error = error


def validate_balanced(lines: Sequence[BalanceLine]) -> BalanceCheck:
    """분개 라인 균형 검증

    평가 순서:
    1. 차변 합계 != 대변 합계 → Unbalanced
    2. 두 합계 모두 0 → ZeroAmount
    3. 계정 미선택 또는 금액 0인 라인 → IncompleteLine
    4. 통과

    Args:
        lines: 분개 라인 목록

    Returns:
        BalanceCheck (예외를 던지지 않음)
    """
    total_debit = sum((line.debit for line in lines), ZERO)
    total_credit = sum((line.credit for line in lines), ZERO)

    if total_debit != total_credit:
        error = BalanceError(BalanceErrorKind.UNBALANCED, UNBALANCED_MESSAGE)
        return BalanceCheck(total_debit, total_credit, error)

    if total_debit == ZERO:
        error = BalanceError(BalanceErrorKind.ZERO_AMOUNT, UNBALANCED_MESSAGE)
        return BalanceCheck(total_debit, total_credit, error)

    incomplete = tuple(
        index
        for index, line in enumerate(lines, start=1)
        if not line.ledger_id or (line.debit == ZERO and line.credit == ZERO)
    )
    if incomplete:
        error = BalanceError(
            BalanceErrorKind.INCOMPLETE_LINE,
            INCOMPLETE_LINE_MESSAGE,
            line_numbers=incomplete,
        )
        return BalanceCheck(total_debit, total_credit, error)

    return BalanceCheck(total_debit, total_credit)
