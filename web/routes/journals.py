"""
전표 API 라우터

POST /api/journals/check - 실시간 균형 검증 (항상 200)
POST /api/journals       - 검증 후 등록 (검증 실패 시 422, 백엔드 호출 없음)
"""

from fastapi import APIRouter, Depends, Query

from web.dependencies import get_journal_service
from web.errors import DOMAIN_ERRORS, to_http_exception
from web.models.requests import JournalEntryRequest
from web.models.responses import BalanceCheckResponse, JournalResponse
from web.services.journal_service import JournalService

router = APIRouter(prefix="/api/journals", tags=["Journals"])


def _line_values(request: JournalEntryRequest) -> list[dict]:
    return [line.model_dump() for line in request.lines]


@router.post("/check", response_model=BalanceCheckResponse)
async def check_journal(
    request: JournalEntryRequest,
    service: JournalService = Depends(get_journal_service),
) -> BalanceCheckResponse:
    """차변/대변 합계와 검증 오류 (입력 중 실시간 표시용)"""
    check = service.check(request.company_id, _line_values(request))
    return BalanceCheckResponse.from_check(check)


@router.post("", response_model=JournalResponse, status_code=201)
async def create_journal(
    request: JournalEntryRequest,
    service: JournalService = Depends(get_journal_service),
) -> JournalResponse:
    """전표 등록"""
    try:
        record = await service.submit(
            request.company_id,
            _line_values(request),
            entry_date=request.entry_date,
            voucher_type=request.voucher_type.value,
            narration=request.narration,
        )
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return JournalResponse.from_record(record)


@router.get("", response_model=list[JournalResponse])
async def list_journals(
    company_id: str = Query(..., description="회사 ID"),
    service: JournalService = Depends(get_journal_service),
) -> list[JournalResponse]:
    try:
        records = await service.list_journals(company_id)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return [JournalResponse.from_record(record) for record in records]


@router.get("/{journal_id}", response_model=JournalResponse)
async def get_journal(
    journal_id: str,
    service: JournalService = Depends(get_journal_service),
) -> JournalResponse:
    try:
        record = await service.get_journal(journal_id)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return JournalResponse.from_record(record)
