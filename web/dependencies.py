"""
의존성 주입

FastAPI의 Depends를 사용한 의존성 관리.
세션과 백엔드 클라이언트는 요청마다 생성 (전역 사용자/회사 상태 없음).
"""

import logging
from typing import AsyncGenerator

from fastapi import Depends, Header, HTTPException

from adapters.backend.rest_client import AccountingBackendClient
from adapters.interfaces import IAccountingBackend
from core.config.loader import Settings, get_settings
from core.session import Session
from web.services.journal_service import JournalService
from web.services.ledger_service import LedgerService
from web.services.report_service import ReportService

logger = logging.getLogger(__name__)


def get_app_settings() -> Settings:
    """애플리케이션 설정 반환"""
    return get_settings()


def get_session(authorization: str | None = Header(default=None)) -> Session:
    """Authorization 헤더에서 세션 생성

    Raises:
        HTTPException: 토큰 없음/만료 시 401
    """
    session = Session.from_authorization_header(authorization)
    if session is None:
        raise HTTPException(status_code=401, detail="Not authenticated.")
    if session.is_expired():
        logger.info("만료된 토큰으로 요청")
        raise HTTPException(status_code=401, detail="Session expired. Please log in again.")
    return session


async def get_backend_client(
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_app_settings),
) -> AsyncGenerator[IAccountingBackend, None]:
    """인증된 백엔드 클라이언트 (요청 종료 시 close)"""
    backend = settings.backend
    client = AccountingBackendClient(
        base_url=backend.base_url,
        token=session.token,
        timeout=backend.timeout_sec,
    )
    try:
        yield client
    finally:
        await client.close()


async def get_public_backend_client(
    settings: Settings = Depends(get_app_settings),
) -> AsyncGenerator[IAccountingBackend, None]:
    """토큰 없는 백엔드 클라이언트 (로그인/회원가입용)"""
    backend = settings.backend
    client = AccountingBackendClient(base_url=backend.base_url, timeout=backend.timeout_sec)
    try:
        yield client
    finally:
        await client.close()


def get_report_service(
    client: IAccountingBackend = Depends(get_backend_client),
    settings: Settings = Depends(get_app_settings),
) -> ReportService:
    return ReportService(client, locale=settings.locale, currency_code=settings.currency_code)


def get_journal_service(
    client: IAccountingBackend = Depends(get_backend_client),
) -> JournalService:
    return JournalService(client)


def get_ledger_service(
    client: IAccountingBackend = Depends(get_backend_client),
) -> LedgerService:
    return LedgerService(client)
