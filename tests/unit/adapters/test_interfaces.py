"""
Protocol 인터페이스 테스트

Protocol 타입 검증 및 구현 확인.
"""

from adapters.backend.rest_client import AccountingBackendClient
from adapters.interfaces import IAccountingBackend
from adapters.mock.backend_client import MockBackendClient

REQUIRED_METHODS = [
    "login",
    "register",
    "list_companies",
    "get_company",
    "create_company",
    "update_company",
    "delete_company",
    "list_ledgers",
    "get_ledger",
    "create_ledger",
    "update_ledger",
    "delete_ledger",
    "get_ledger_details",
    "list_ledger_options",
    "create_journal_entry",
    "list_journals",
    "get_journal",
    "get_ledger_report",
    "close",
]


class TestIAccountingBackend:
    """IAccountingBackend Protocol 테스트"""

    def test_mock_client_implements_protocol(self) -> None:
        """Mock 클라이언트가 Protocol을 구현하는지 확인"""
        assert isinstance(MockBackendClient(), IAccountingBackend)

    def test_rest_client_implements_protocol(self) -> None:
        assert isinstance(AccountingBackendClient("http://backend.test/api"), IAccountingBackend)

    def test_protocol_has_required_methods(self) -> None:
        """Protocol에 필수 메서드가 정의되어 있는지 확인"""
        for method_name in REQUIRED_METHODS:
            assert hasattr(IAccountingBackend, method_name), f"Missing method: {method_name}"

    def test_unrelated_object_does_not_match(self) -> None:
        assert not isinstance(object(), IAccountingBackend)
