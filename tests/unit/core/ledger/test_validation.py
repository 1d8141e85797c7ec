"""
분개 균형 검증 테스트
"""

from dataclasses import dataclass
from decimal import Decimal

from core.ledger.types import BalanceErrorKind
from core.ledger.validation import (
    INCOMPLETE_LINE_MESSAGE,
    UNBALANCED_MESSAGE,
    BalanceError,
    JournalValidationError,
    validate_balanced,
)


@dataclass
class Line:
    ledger_id: str | None
    debit: Decimal = Decimal("0")
    credit: Decimal = Decimal("0")


def dr(amount: str, ledger_id: str | None = "cash") -> Line:
    return Line(ledger_id=ledger_id, debit=Decimal(amount))


def cr(amount: str, ledger_id: str | None = "sales") -> Line:
    return Line(ledger_id=ledger_id, credit=Decimal(amount))


class TestValidateBalanced:
    """validate_balanced 규칙"""

    def test_balanced_entry_passes(self) -> None:
        """[100 Dr, 100 Cr] → 통과"""
        result = validate_balanced([dr("100"), cr("100")])

        assert result.ok
        assert result.error is None
        assert result.total_debit == Decimal("100")
        assert result.total_credit == Decimal("100")
        assert result.difference == Decimal("0")

    def test_unbalanced(self) -> None:
        """[100 Dr, 50 Cr] → Unbalanced"""
        result = validate_balanced([dr("100"), cr("50")])

        assert not result.ok
        assert result.error.kind is BalanceErrorKind.UNBALANCED
        assert result.error.message == UNBALANCED_MESSAGE
        assert result.difference == Decimal("50")

    def test_zero_amount(self) -> None:
        """[0/0] → ZeroAmount"""
        result = validate_balanced([Line(ledger_id="cash")])

        assert result.error.kind is BalanceErrorKind.ZERO_AMOUNT
        assert result.error.message == UNBALANCED_MESSAGE

    def test_empty_lines_is_zero_amount(self) -> None:
        result = validate_balanced([])

        assert result.error.kind is BalanceErrorKind.ZERO_AMOUNT

    def test_missing_ledger_is_incomplete(self) -> None:
        result = validate_balanced([dr("100"), cr("100", ledger_id="")])

        assert result.error.kind is BalanceErrorKind.INCOMPLETE_LINE
        assert result.error.message == INCOMPLETE_LINE_MESSAGE
        assert result.error.line_numbers == (2,)

    def test_zero_line_is_incomplete(self) -> None:
        """금액 0 라인 번호 나열 (1부터)"""
        result = validate_balanced([Line(ledger_id="misc"), dr("100"), cr("100"), Line(ledger_id=None)])

        assert result.error.kind is BalanceErrorKind.INCOMPLETE_LINE
        assert result.error.line_numbers == (1, 4)

    def test_unbalanced_takes_precedence(self) -> None:
        """불균형이 미완성 라인보다 먼저 보고됨"""
        result = validate_balanced([dr("100", ledger_id=None), cr("40")])

        assert result.error.kind is BalanceErrorKind.UNBALANCED
        assert result.error.line_numbers == ()

    def test_exact_decimal_comparison(self) -> None:
        result = validate_balanced([dr("0.1"), dr("0.2"), cr("0.3")])

        assert result.ok

    def test_multi_line_entry(self) -> None:
        result = validate_balanced([dr("700"), dr("300", ledger_id="bank"), cr("1000")])

        assert result.ok
        assert result.total_debit == Decimal("1000")


class TestJournalValidationError:
    """검증 실패 예외"""

    def test_wraps_error(self) -> None:
        error = BalanceError(BalanceErrorKind.UNBALANCED, UNBALANCED_MESSAGE)
        exc = JournalValidationError(error)

        assert exc.error is error
        assert str(exc) == UNBALANCED_MESSAGE
