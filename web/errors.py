"""
도메인 예외 → HTTP 응답 변환

라우트는 DOMAIN_ERRORS를 잡아 to_http_exception()으로 변환한다.
백엔드 메시지는 그대로 detail에 전달.
"""

import logging

from fastapi import HTTPException

from adapters.backend.rest_client import BackendApiError, BackendAuthError
from core.ledger.journal_form import JournalFormError
from core.ledger.validation import JournalValidationError
from web.services.ledger_service import LedgerFormError
from web.services.report_service import ReportRequestError, UpstreamFetchFailure

logger = logging.getLogger(__name__)

DOMAIN_ERRORS = (
    BackendApiError,
    JournalFormError,
    JournalValidationError,
    LedgerFormError,
    ReportRequestError,
    UpstreamFetchFailure,
)

# 백엔드 응답 중 그대로 전달하는 클라이언트 오류 코드
PASS_THROUGH_STATUS = {400, 403, 404, 409}


def to_http_exception(exc: Exception) -> HTTPException:
    """도메인 예외를 HTTPException으로 변환

    - 인증 실패 → 401
    - 입력 오류 (회사/계정 미선택, 라인 수, 필수 필드) → 400
    - 분개 균형 검증 실패 → 422 (kind, message, line_numbers)
    - 백엔드 클라이언트 오류 (400/403/404/409) → 같은 코드
    - 그 외 백엔드/네트워크 오류 → 502
    """
    if isinstance(exc, BackendAuthError):
        return HTTPException(status_code=401, detail=exc.message)

    if isinstance(exc, (ReportRequestError, JournalFormError, LedgerFormError)):
        return HTTPException(status_code=400, detail=str(exc))

    if isinstance(exc, JournalValidationError):
        return HTTPException(
            status_code=422,
            detail={
                "kind": exc.error.kind.value,
                "message": exc.error.message,
                "line_numbers": list(exc.error.line_numbers),
            },
        )

    if isinstance(exc, (BackendApiError, UpstreamFetchFailure)):
        if exc.status_code in PASS_THROUGH_STATUS:
            return HTTPException(status_code=exc.status_code, detail=exc.message)
        logger.error(f"Upstream failure: {exc.message} (status={exc.status_code})")
        return HTTPException(status_code=502, detail=exc.message)

    logger.error(f"Unhandled domain error: {exc!r}")
    return HTTPException(status_code=500, detail=str(exc))
