"""
원장 계산 엔진 (BalanceEngine)

원장 명세서의 누적 잔액/합계 계산과 분개 균형 검증.
I/O 없는 순수 함수만 포함하며 호출할 때마다 처음부터 다시 계산.

사용 예시:
```python
from core.ledger import OpeningBalance, EntrySide, compute_ledger_statement, format_balance

statement = compute_ledger_statement(
    OpeningBalance(amount=Decimal("1000"), side=EntrySide.DEBIT),
    transactions,
)
print(format_balance(statement.closing_balance))  # "1,000.00 Dr"

check = validate_balanced(draft.lines)
if not check.ok:
    print(check.error.message)
```
"""

from core.ledger.formatting import (
    balance_type_of,
    format_amount,
    format_balance,
    format_report_date,
)
from core.ledger.journal_form import (
    DraftLine,
    JournalDraft,
    JournalFormError,
    JournalSubmission,
    SubmissionLine,
)
from core.ledger.statement import (
    LedgerStatement,
    OpeningBalance,
    StatementRow,
    TransactionLine,
    compute_ledger_statement,
)
from core.ledger.types import BalanceErrorKind, BalanceType, EntrySide
from core.ledger.validation import (
    BalanceCheck,
    BalanceError,
    JournalValidationError,
    validate_balanced,
)

__all__ = [
    # 명세서 계산
    "compute_ledger_statement",
    "LedgerStatement",
    "StatementRow",
    "OpeningBalance",
    "TransactionLine",
    # 균형 검증
    "validate_balanced",
    "BalanceCheck",
    "BalanceError",
    "JournalValidationError",
    # 분개 폼
    "JournalDraft",
    "DraftLine",
    "JournalSubmission",
    "SubmissionLine",
    "JournalFormError",
    # 표시 형식
    "balance_type_of",
    "format_amount",
    "format_balance",
    "format_report_date",
    # Enum
    "BalanceType",
    "EntrySide",
    "BalanceErrorKind",
]
