"""
전표 서비스 테스트
"""

from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from adapters.backend.rest_client import BackendApiError
from adapters.mock.backend_client import MockBackendClient
from core.ledger.journal_form import JournalFormError
from core.ledger.types import BalanceErrorKind
from core.ledger.validation import JournalValidationError
from web.services.journal_service import JournalService


@pytest.fixture
def backend() -> MockBackendClient:
    return MockBackendClient()


@pytest.fixture
def ledgers(backend: MockBackendClient) -> dict:
    company = backend.add_company("Acme Traders")
    return {
        "company": company,
        "cash": backend.add_ledger(company.id, "Cash", "Cash-in-hand"),
        "sales": backend.add_ledger(company.id, "Sales", "Sales Accounts"),
    }


def balanced_lines(ledgers: dict, amount: str = "1000") -> list[dict]:
    return [
        {"ledger_id": ledgers["cash"].id, "entry_type": "Dr", "amount": amount},
        {"ledger_id": ledgers["sales"].id, "entry_type": "Cr", "amount": amount},
    ]


class TestCheck:
    """실시간 균형 검증"""

    def test_balanced(self, backend, ledgers) -> None:
        result = JournalService(backend).check(ledgers["company"].id, balanced_lines(ledgers))

        assert result.ok
        assert result.total_debit == Decimal("1000")

    def test_single_line_still_checked(self, backend, ledgers) -> None:
        """라인 수 부족이어도 검증 결과 반환"""
        result = JournalService(backend).check(
            ledgers["company"].id, balanced_lines(ledgers)[:1]
        )

        assert result.error.kind is BalanceErrorKind.UNBALANCED

    def test_unparseable_amount_counts_as_zero(self, backend, ledgers) -> None:
        lines = balanced_lines(ledgers)
        lines[1]["amount"] = "abc"

        result = JournalService(backend).check(ledgers["company"].id, lines)

        assert result.total_credit == Decimal("0")
        assert result.error.kind is BalanceErrorKind.UNBALANCED


class TestBuildDraft:
    def test_requires_two_lines(self, backend) -> None:
        with pytest.raises(JournalFormError):
            JournalService(backend).build_draft("c1", [{"amount": "10"}])

    def test_defaults(self, backend, ledgers) -> None:
        draft = JournalService(backend).build_draft("c1", balanced_lines(ledgers))

        assert draft.date == date.today()
        assert draft.voucher_type == "Journal"
        assert [line.line_id for line in draft.lines] == [1, 2]


class TestSubmit:
    """검증 후 등록"""

    @pytest.mark.asyncio
    async def test_submit_fills_ledger_names(self, backend, ledgers) -> None:
        service = JournalService(backend)

        record = await service.submit(
            ledgers["company"].id,
            balanced_lines(ledgers),
            entry_date=date(2024, 4, 15),
            voucher_type="Receipt",
            narration="Cash sales",
        )

        assert record.voucher_no == "JV-0001"
        assert record.date == "2024-04-15"
        assert record.voucher_type == "Receipt"
        assert [line.ledger_name for line in record.lines] == ["Cash", "Sales"]
        assert [j.id for j in await service.list_journals(ledgers["company"].id)] == [record.id]
        assert (await service.get_journal(record.id)).narration == "Cash sales"

    @pytest.mark.asyncio
    async def test_unbalanced_never_reaches_backend(self, ledgers) -> None:
        backend = AsyncMock()
        lines = balanced_lines(ledgers)
        lines[1]["amount"] = "900"

        with pytest.raises(JournalValidationError) as exc_info:
            await JournalService(backend).submit("c1", lines)

        assert exc_info.value.error.kind is BalanceErrorKind.UNBALANCED
        backend.create_journal_entry.assert_not_called()
        backend.list_ledger_options.assert_not_called()

    @pytest.mark.asyncio
    async def test_incomplete_line(self, backend, ledgers) -> None:
        lines = balanced_lines(ledgers) + [{"ledger_id": "", "amount": "0"}]

        with pytest.raises(JournalValidationError) as exc_info:
            await JournalService(backend).submit(ledgers["company"].id, lines)

        assert exc_info.value.error.line_numbers == (3,)

    @pytest.mark.asyncio
    async def test_too_few_lines(self, backend) -> None:
        with pytest.raises(JournalFormError):
            await JournalService(backend).submit("c1", [])

    @pytest.mark.asyncio
    async def test_backend_rejection(self, backend, ledgers) -> None:
        backend.fail_next("Failed to post Journal Entry.", status_code=500)

        with pytest.raises(BackendApiError, match="Failed to post Journal Entry."):
            await JournalService(backend).submit(
                ledgers["company"].id,
                [{**line, "ledger_name": "x"} for line in balanced_lines(ledgers)],
            )
