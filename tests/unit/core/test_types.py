"""
core/types.py 테스트

모든 Enum이 백엔드 문자열 값과 일치하는지 확인
"""

import pytest

from core.types import BackendMode, DealerType, LedgerStatus, VoucherType


class TestBackendMode:
    """BackendMode 테스트"""

    def test_values(self) -> None:
        assert BackendMode.PRODUCTION.value == "production"
        assert BackendMode.LOCAL.value == "local"

    def test_invalid_value(self) -> None:
        with pytest.raises(ValueError):
            BackendMode("staging")


class TestVoucherType:
    """VoucherType 테스트"""

    def test_values(self) -> None:
        assert {v.value for v in VoucherType} == {"Journal", "Payment", "Receipt"}

    def test_is_string(self) -> None:
        assert VoucherType.JOURNAL == "Journal"


class TestLedgerEnums:
    """계정 관련 Enum 테스트"""

    def test_status(self) -> None:
        assert LedgerStatus.ACTIVE.value == "Active"
        assert LedgerStatus.INACTIVE.value == "Inactive"

    def test_dealer_type(self) -> None:
        assert DealerType("Unregistered") is DealerType.UNREGISTERED
        assert len(DealerType) == 4
