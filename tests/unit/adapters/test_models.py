"""
백엔드 응답 모델 테스트

Company, Ledger, LedgerDetails, JournalRecord 파싱과 요청 본문 매핑 테스트.
"""

from datetime import date
from decimal import Decimal

import pytest

from adapters.models import (
    AuthResult,
    Company,
    JournalRecord,
    Ledger,
    LedgerDetails,
    LedgerOption,
    company_payload,
    ledger_payload,
    transaction_lines_from_api,
)
from core.ledger.types import EntrySide
from core.types import DealerType, LedgerStatus


class TestAuthResult:
    def test_from_api(self) -> None:
        result = AuthResult.from_api(
            {"token": "t", "user": {"_id": "u1", "name": "Asha", "email": "a@example.com"}}
        )

        assert result.token == "t"
        assert result.user.id == "u1"

    def test_missing_token(self) -> None:
        with pytest.raises(KeyError):
            AuthResult.from_api({"user": {}})


class TestCompany:
    """Company 모델 테스트"""

    def test_from_api(self) -> None:
        company = Company.from_api(
            {
                "_id": "c1",
                "name": "Acme Traders",
                "shortCode": "ACME",
                "financialYearStart": "2024-04-01T00:00:00.000Z",
                "currencyCode": "INR",
                "address": "MG Road",
            }
        )

        assert company.id == "c1"
        assert company.short_code == "ACME"
        assert company.financial_year_start == "2024-04-01"
        assert company.address == "MG Road"

    def test_is_frozen(self) -> None:
        company = Company.from_api({"_id": "c1"})

        with pytest.raises(AttributeError):
            company.name = "Other"  # type: ignore

    def test_payload(self) -> None:
        payload = company_payload(
            {
                "name": "Acme",
                "short_code": "AC",
                "financial_year_start": date(2024, 4, 1),
                "currency_code": "INR",
                "address": None,
                "unknown": "ignored",
            }
        )

        assert payload == {
            "name": "Acme",
            "shortCode": "AC",
            "financialYearStart": "2024-04-01",
            "currencyCode": "INR",
        }


class TestLedger:
    """Ledger 모델 테스트"""

    def test_from_api(self) -> None:
        ledger = Ledger.from_api(
            {
                "_id": "l1",
                "companyId": "c1",
                "name": "Sharma Suppliers",
                "group": "Sundry Creditors",
                "openingBalance": 12500.75,
                "obType": "Credit",
                "creditDays": "30",
                "creditLimit": 50000,
                "GSTIN": "27AAAPL1234C1ZV",
                "dlrType": "Regular",
                "city": "",
                "status": "Active",
            }
        )

        assert ledger.opening_balance == Decimal("12500.75")
        assert ledger.ob_type is EntrySide.CREDIT
        assert ledger.credit_days == 30
        assert ledger.credit_limit == Decimal("50000")
        assert ledger.details == {"gstin": "27AAAPL1234C1ZV", "dlr_type": "Regular"}

    def test_defaults(self) -> None:
        ledger = Ledger.from_api({"_id": "l1", "name": "Cash"})

        assert ledger.opening_balance == Decimal("0")
        assert ledger.ob_type is EntrySide.DEBIT
        assert ledger.status == "Active"
        assert ledger.alias is None

    def test_payload(self) -> None:
        payload = ledger_payload(
            {
                "company_id": "c1",
                "name": "Sharma Suppliers",
                "group": "Sundry Creditors",
                "opening_balance": Decimal("12500.75"),
                "ob_type": EntrySide.CREDIT,
                "gstin": "27AAAPL1234C1ZV",
                "dlr_type": DealerType.REGULAR,
                "status": LedgerStatus.ACTIVE,
                "alias": None,
            }
        )

        assert payload == {
            "companyId": "c1",
            "name": "Sharma Suppliers",
            "group": "Sundry Creditors",
            "openingBalance": 12500.75,
            "obType": "Credit",
            "GSTIN": "27AAAPL1234C1ZV",
            "dlrType": "Regular",
            "status": "Active",
        }


class TestLedgerDetails:
    def test_opening(self) -> None:
        details = LedgerDetails.from_api(
            {"_id": "l1", "name": "Capital", "openingBalance": 500, "obType": "Credit"}
        )

        assert details.opening.amount == Decimal("500")
        assert details.opening.signed == Decimal("-500")

    def test_missing_ob_type_is_debit(self) -> None:
        details = LedgerDetails.from_api({"_id": "l1", "openingBalance": 100})

        assert details.ob_type is EntrySide.DEBIT

    @pytest.mark.parametrize("ob_type", ["Cr", "credit", "Sideways"])
    def test_non_credit_ob_type_is_debit(self, ob_type: str) -> None:
        details = LedgerDetails.from_api({"_id": "l1", "openingBalance": 500, "obType": ob_type})

        assert details.ob_type is EntrySide.DEBIT
        assert details.opening.signed == Decimal("500")


class TestJournalRecord:
    """JournalRecord 모델 테스트"""

    def test_from_api(self) -> None:
        record = JournalRecord.from_api(
            {
                "_id": "j1",
                "companyId": "c1",
                "voucherNo": "JV-0007",
                "date": "2024-06-30T00:00:00.000Z",
                "voucherType": "Payment",
                "narration": "Rent",
                "lines": [
                    {"ledgerId": "l1", "ledgerName": "Rent", "debit": 1500, "credit": 0, "lineNarration": "June"},
                    {"ledgerId": {"_id": "l2", "name": "Bank"}, "debit": 0, "credit": 1500},
                ],
                "totalDebit": 1500,
                "totalCredit": 1500,
                "createdAt": "2024-06-30T10:00:00.000Z",
            }
        )

        assert record.voucher_no == "JV-0007"
        assert record.date == "2024-06-30"
        assert record.lines[0].line_narration == "June"
        assert record.lines[1].ledger_id == "l2"
        assert record.lines[1].ledger_name == "Bank"
        assert record.total_credit == Decimal("1500")

    def test_without_lines(self) -> None:
        record = JournalRecord.from_api({"_id": "j1"})

        assert record.lines == ()
        assert record.total_debit == Decimal("0")


class TestLedgerOption:
    def test_from_api(self) -> None:
        option = LedgerOption.from_api({"_id": "l1", "name": "Cash"})

        assert option == LedgerOption(id="l1", name="Cash")


class TestTransactionLines:
    def test_order_preserved(self) -> None:
        lines = transaction_lines_from_api(
            [{"journalId": "2", "debit": 10}, {"journalId": "1", "credit": 5}]
        )

        assert [line.journal_id for line in lines] == ["2", "1"]
