"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.requests import (
    CompanyRequest,
    CompanyUpdateRequest,
    JournalEntryRequest,
    JournalLineRequest,
    LedgerRequest,
    LoginRequest,
    RegisterRequest,
)
from web.models.responses import (
    AuthResponse,
    BalanceCheckResponse,
    CompanyResponse,
    HealthResponse,
    JournalResponse,
    LedgerDetailsResponse,
    LedgerOptionResponse,
    LedgerReportResponse,
    LedgerResponse,
)

__all__ = [
    # Requests
    "CompanyRequest",
    "CompanyUpdateRequest",
    "JournalEntryRequest",
    "JournalLineRequest",
    "LedgerRequest",
    "LoginRequest",
    "RegisterRequest",
    # Responses
    "AuthResponse",
    "BalanceCheckResponse",
    "CompanyResponse",
    "HealthResponse",
    "JournalResponse",
    "LedgerDetailsResponse",
    "LedgerOptionResponse",
    "LedgerReportResponse",
    "LedgerResponse",
]
