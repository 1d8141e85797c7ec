"""
원장 보고서 API 라우터

GET /api/reports/ledger     - 명세서 JSON (원시 값 + 표시 값)
GET /api/reports/ledger/pdf - 명세서 PDF 다운로드
"""

from datetime import date

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from core.config.loader import Settings
from web.dependencies import get_app_settings, get_report_service
from web.errors import DOMAIN_ERRORS, to_http_exception
from web.models.responses import LedgerReportResponse
from web.services.report_service import ReportService

router = APIRouter(prefix="/api/reports", tags=["Reports"])


@router.get("/ledger", response_model=LedgerReportResponse)
async def get_ledger_report(
    company_id: str | None = Query(default=None),
    ledger_id: str | None = Query(default=None),
    start_date: date | None = Query(default=None),
    end_date: date | None = Query(default=None),
    service: ReportService = Depends(get_report_service),
    settings: Settings = Depends(get_app_settings),
) -> LedgerReportResponse:
    """원장 명세서"""
    try:
        report = await service.generate(company_id, ledger_id, start_date, end_date)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return LedgerReportResponse.from_report(report, settings.locale)


@router.get("/ledger/pdf")
async def download_ledger_report_pdf(
    company_id: str | None = Query(default=None),
    ledger_id: str | None = Query(default=None),
    start_date: date | None = Query(default=None),
    end_date: date | None = Query(default=None),
    print_particulars: bool = Query(default=True, description="상대 계정 열 출력"),
    service: ReportService = Depends(get_report_service),
) -> Response:
    """원장 명세서 PDF"""
    try:
        file_name, pdf = await service.export_pdf(
            company_id, ledger_id, start_date, end_date, print_particulars
        )
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{file_name}"'},
    )
