"""
어댑터 레이어

외부 서비스(회계 백엔드, PDF 렌더링)와의 연동을 담당.
Protocol 기반 인터페이스로 Mock 교체 가능.
"""

from adapters.interfaces import IAccountingBackend
from adapters.models import (
    AuthResult,
    Company,
    JournalRecord,
    Ledger,
    LedgerDetails,
    LedgerOption,
)

__all__ = [
    # Interfaces
    "IAccountingBackend",
    # Models
    "AuthResult",
    "Company",
    "JournalRecord",
    "Ledger",
    "LedgerDetails",
    "LedgerOption",
]
