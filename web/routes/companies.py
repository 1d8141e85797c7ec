"""
회사 API 라우터

회사 CRUD와 작업 대상 회사 선택.
"""

from fastapi import APIRouter, Depends, Query

from adapters.interfaces import IAccountingBackend
from web.dependencies import get_backend_client
from web.errors import DOMAIN_ERRORS, to_http_exception
from web.models.requests import CompanyRequest, CompanyUpdateRequest
from web.models.responses import CompanyResponse
from web.services.company_service import select_company

router = APIRouter(prefix="/api/companies", tags=["Companies"])


@router.get("", response_model=list[CompanyResponse])
async def list_companies(
    client: IAccountingBackend = Depends(get_backend_client),
) -> list[CompanyResponse]:
    """회사 목록"""
    try:
        companies = await client.list_companies()
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return [CompanyResponse.from_company(company) for company in companies]


@router.get("/selected", response_model=CompanyResponse | None)
async def get_selected_company(
    preferred_id: str | None = Query(default=None, description="이전에 선택한 회사 ID"),
    client: IAccountingBackend = Depends(get_backend_client),
) -> CompanyResponse | None:
    """작업 대상 회사 (선호 ID → 첫 번째 회사 → 없음)"""
    try:
        companies = await client.list_companies()
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    company = select_company(companies, preferred_id)
    return CompanyResponse.from_company(company) if company else None


@router.post("", response_model=CompanyResponse, status_code=201)
async def create_company(
    request: CompanyRequest,
    client: IAccountingBackend = Depends(get_backend_client),
) -> CompanyResponse:
    try:
        company = await client.create_company(request.model_dump())
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return CompanyResponse.from_company(company)


@router.get("/{company_id}", response_model=CompanyResponse)
async def get_company(
    company_id: str,
    client: IAccountingBackend = Depends(get_backend_client),
) -> CompanyResponse:
    try:
        company = await client.get_company(company_id)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return CompanyResponse.from_company(company)


@router.put("/{company_id}", response_model=CompanyResponse)
async def update_company(
    company_id: str,
    request: CompanyUpdateRequest,
    client: IAccountingBackend = Depends(get_backend_client),
) -> CompanyResponse:
    """회사 수정 (보낸 필드만)"""
    try:
        company = await client.update_company(company_id, request.model_dump(exclude_unset=True))
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return CompanyResponse.from_company(company)


@router.delete("/{company_id}", status_code=204)
async def delete_company(
    company_id: str,
    client: IAccountingBackend = Depends(get_backend_client),
) -> None:
    try:
        await client.delete_company(company_id)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
