"""
원장 명세서 내보내기 스크립트 테스트
"""

from decimal import Decimal

import pytest

from adapters.mock.backend_client import MockBackendClient
from core.ledger.types import EntrySide
from scripts.export_ledger_statement import print_report
from web.services.report_service import ReportService


@pytest.mark.asyncio
async def test_print_report_console_table(capsys) -> None:
    backend = MockBackendClient()
    company = backend.add_company("Acme Traders")
    cash = backend.add_ledger(
        company.id, "Cash", "Cash-in-hand",
        opening_balance=Decimal("150000"), ob_type=EntrySide.DEBIT,
    )
    report = await ReportService(backend).generate(company.id, cash.id)

    print_report(report, "en-IN")

    out = capsys.readouterr().out
    assert "Ledger Statement for Cash" in out
    assert "O. Bal" in out
    assert "GRAND TOTALS" in out
    assert "1,50,000.00 Dr" in out
