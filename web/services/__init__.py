"""
Web 서비스 패키지

비즈니스 로직 처리
"""

from web.services.company_service import select_company
from web.services.journal_service import JournalService
from web.services.ledger_service import LedgerFormError, LedgerService
from web.services.report_service import (
    LedgerReport,
    ReportRequestError,
    ReportService,
    UpstreamFetchFailure,
)

__all__ = [
    "select_company",
    "JournalService",
    "LedgerFormError",
    "LedgerService",
    "LedgerReport",
    "ReportRequestError",
    "ReportService",
    "UpstreamFetchFailure",
]
