"""
회계 백엔드 어댑터

Node/Express 회계 백엔드 REST API 클라이언트.
"""

from adapters.backend.rest_client import (
    AccountingBackendClient,
    BackendApiError,
    BackendAuthError,
)

__all__ = [
    "AccountingBackendClient",
    "BackendApiError",
    "BackendAuthError",
]
