"""
원장 보고서 서비스 테스트 (MockBackendClient 사용)
"""

from datetime import date
from decimal import Decimal

import pytest

from adapters.backend.rest_client import BackendAuthError
from adapters.mock.backend_client import MockBackendClient
from core.ledger.journal_form import JournalSubmission, SubmissionLine
from core.ledger.types import BalanceType, EntrySide
from web.services.report_service import (
    REPORT_FETCH_FAILED_MESSAGE,
    SELECT_COMPANY_AND_LEDGER_MESSAGE,
    ReportRequestError,
    ReportService,
    UpstreamFetchFailure,
)


@pytest.fixture
def backend() -> MockBackendClient:
    return MockBackendClient()


@pytest.fixture
def books(backend: MockBackendClient) -> dict:
    """회사 1개, 계정 2개, 전표 2건"""
    company = backend.add_company("Acme Traders")
    capital = backend.add_ledger(
        company.id, "Capital", "Capital Account",
        opening_balance=Decimal("500"), ob_type=EntrySide.CREDIT,
    )
    cash = backend.add_ledger(company.id, "Cash", "Cash-in-hand")
    for on, amount in [(date(2024, 4, 2), Decimal("700")), (date(2024, 5, 2), Decimal("100"))]:
        backend.state.journals[f"seed{on.month}"] = {
            "_id": f"seed{on.month}",
            "voucherNo": f"JV-{on.month:04d}",
            **JournalSubmission(
                company_id=company.id,
                date=on,
                voucher_type="Journal",
                narration="Owner drawing reversal",
                lines=(
                    SubmissionLine(capital.id, capital.name, amount, Decimal("0")),
                    SubmissionLine(cash.id, cash.name, Decimal("0"), amount),
                ),
                total_debit=amount,
                total_credit=amount,
            ).to_api(),
        }
    return {"company": company, "capital": capital, "cash": cash}


class TestGenerate:
    """generate() 테스트"""

    @pytest.mark.asyncio
    async def test_credit_opening_report(self, backend, books) -> None:
        """기초 500 대변 + 차변 700, 100 → 300 Dr"""
        service = ReportService(backend)

        report = await service.generate(books["company"].id, books["capital"].id)

        statement = report.statement
        assert report.ledger.name == "Capital"
        assert statement.opening_row.balance == Decimal("-500")
        assert [row.balance for row in statement.transaction_rows] == [Decimal("200"), Decimal("300")]
        assert statement.final_balance_type is BalanceType.DR
        assert statement.transaction_rows[0].opponent_ledger_name == "Cash"

    @pytest.mark.asyncio
    async def test_date_range(self, backend, books) -> None:
        service = ReportService(backend)

        report = await service.generate(
            books["company"].id, books["capital"].id, date(2024, 5, 1), date(2024, 5, 31)
        )

        assert len(report.statement.transaction_rows) == 1
        assert report.start_date == date(2024, 5, 1)
        # 기초잔액은 조회 기간과 무관하게 계정 기초잔액
        assert report.statement.opening_row.balance == Decimal("-500")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("company_id, ledger_id", [(None, "l1"), ("c1", None), ("", "")])
    async def test_missing_selection(self, backend, company_id, ledger_id) -> None:
        service = ReportService(backend)

        with pytest.raises(ReportRequestError, match=SELECT_COMPANY_AND_LEDGER_MESSAGE):
            await service.generate(company_id, ledger_id)

    @pytest.mark.asyncio
    async def test_upstream_failure(self, backend, books) -> None:
        """백엔드 실패 시 부분 보고서 없이 실패"""
        backend.fail_next("Failed to fetch ledger details.", status_code=500)
        service = ReportService(backend)

        with pytest.raises(UpstreamFetchFailure) as exc_info:
            await service.generate(books["company"].id, books["cash"].id)

        assert exc_info.value.message == "Failed to fetch ledger details."
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_unknown_ledger(self, backend, books) -> None:
        service = ReportService(backend)

        with pytest.raises(UpstreamFetchFailure) as exc_info:
            await service.generate(books["company"].id, "ledger9999")

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_auth_error_propagates(self, backend, books) -> None:
        backend.fail_next("Token expired", status_code=401)
        service = ReportService(backend)

        with pytest.raises(BackendAuthError):
            await service.generate(books["company"].id, books["cash"].id)

    @pytest.mark.asyncio
    async def test_non_credit_ob_type_seeds_debit(self, backend, books) -> None:
        """obType이 Credit가 아니면 차변 기초잔액"""
        backend.state.ledgers[books["capital"].id]["obType"] = "Cr"

        report = await ReportService(backend).generate(books["company"].id, books["capital"].id)

        assert report.statement.opening_row.balance == Decimal("500")
        assert report.statement.closing_balance == Decimal("1300")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field, value",
        [("debit", "abc"), ("credit", "1,000")],
    )
    async def test_malformed_amount(self, backend, books, field, value) -> None:
        backend.state.journals["seed4"]["lines"][0][field] = value

        with pytest.raises(UpstreamFetchFailure) as exc_info:
            await ReportService(backend).generate(books["company"].id, books["capital"].id)

        assert exc_info.value.message == REPORT_FETCH_FAILED_MESSAGE
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_malformed_date(self, backend, books) -> None:
        backend.state.journals["seed4"]["date"] = "2024-13-45"

        with pytest.raises(UpstreamFetchFailure, match=REPORT_FETCH_FAILED_MESSAGE):
            await ReportService(backend).generate(books["company"].id, books["capital"].id)


class TestExportPdf:
    """export_pdf() 테스트"""

    @pytest.mark.asyncio
    async def test_file_name_and_bytes(self, backend, books) -> None:
        service = ReportService(backend, locale="en-IN", currency_code="INR")

        file_name, pdf = await service.export_pdf(
            books["company"].id,
            books["cash"].id,
            date(2024, 4, 1),
            date(2025, 3, 31),
            print_particulars=False,
            exported_on=date(2025, 4, 9),
        )

        assert file_name == "Ledger_Statement_Cash_4-9-2025.pdf"
        assert pdf.startswith(b"%PDF")

    @pytest.mark.asyncio
    async def test_missing_selection(self, backend) -> None:
        with pytest.raises(ReportRequestError):
            await ReportService(backend).export_pdf(None, None)
