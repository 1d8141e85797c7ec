"""
계정(Chart of Accounts) API 라우터

계정 CRUD, 전표 입력용 선택지, 기초잔액 조회.
"""

from fastapi import APIRouter, Depends, Query

from adapters.interfaces import IAccountingBackend
from core.config.loader import Settings
from web.dependencies import get_app_settings, get_backend_client, get_ledger_service
from web.errors import DOMAIN_ERRORS, to_http_exception
from web.models.requests import LedgerRequest
from web.models.responses import LedgerDetailsResponse, LedgerOptionResponse, LedgerResponse
from web.services.ledger_service import LedgerService

router = APIRouter(prefix="/api/ledgers", tags=["Ledgers"])


@router.get("", response_model=list[LedgerResponse])
async def list_ledgers(
    company_id: str = Query(..., description="회사 ID"),
    client: IAccountingBackend = Depends(get_backend_client),
) -> list[LedgerResponse]:
    """회사의 계정 목록"""
    try:
        ledgers = await client.list_ledgers(company_id)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return [LedgerResponse.from_ledger(ledger) for ledger in ledgers]


@router.post("", response_model=LedgerResponse, status_code=201)
async def create_ledger(
    request: LedgerRequest,
    company_id: str = Query(..., description="회사 ID"),
    service: LedgerService = Depends(get_ledger_service),
) -> LedgerResponse:
    """계정 생성 (계정명, 그룹 필수)"""
    try:
        ledger = await service.create(company_id, request.model_dump())
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return LedgerResponse.from_ledger(ledger)


@router.get("/options", response_model=list[LedgerOptionResponse])
async def list_ledger_options(
    company_id: str = Query(..., description="회사 ID"),
    client: IAccountingBackend = Depends(get_backend_client),
) -> list[LedgerOptionResponse]:
    """전표 입력 드롭다운용 계정 선택지"""
    try:
        options = await client.list_ledger_options(company_id)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return [LedgerOptionResponse(id=option.id, name=option.name) for option in options]


@router.get("/{ledger_id}", response_model=LedgerResponse)
async def get_ledger(
    ledger_id: str,
    client: IAccountingBackend = Depends(get_backend_client),
) -> LedgerResponse:
    try:
        ledger = await client.get_ledger(ledger_id)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return LedgerResponse.from_ledger(ledger)


@router.get("/{ledger_id}/details", response_model=LedgerDetailsResponse)
async def get_ledger_details(
    ledger_id: str,
    client: IAccountingBackend = Depends(get_backend_client),
    settings: Settings = Depends(get_app_settings),
) -> LedgerDetailsResponse:
    """계정 기초잔액"""
    try:
        details = await client.get_ledger_details(ledger_id)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return LedgerDetailsResponse.from_details(details, settings.locale)


@router.put("/{ledger_id}", response_model=LedgerResponse)
async def update_ledger(
    ledger_id: str,
    request: LedgerRequest,
    service: LedgerService = Depends(get_ledger_service),
) -> LedgerResponse:
    """계정 수정 (폼 전체 전송)"""
    try:
        ledger = await service.update(ledger_id, request.model_dump())
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return LedgerResponse.from_ledger(ledger)


@router.delete("/{ledger_id}", status_code=204)
async def delete_ledger(
    ledger_id: str,
    client: IAccountingBackend = Depends(get_backend_client),
) -> None:
    try:
        await client.delete_ledger(ledger_id)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
