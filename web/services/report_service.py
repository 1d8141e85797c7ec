"""
원장 보고서 서비스

계정 기초잔액 + 백엔드 원장 보고서 라인 → 명세서 계산 → JSON/PDF.
백엔드 조회가 하나라도 실패하면 부분 보고서 없이 실패로 처리.
"""

import logging
from dataclasses import dataclass
from datetime import date

from adapters.backend.rest_client import BackendApiError, BackendAuthError
from adapters.interfaces import IAccountingBackend
from adapters.models import LedgerDetails
from adapters.pdf.ledger_statement import build_ledger_statement_pdf, statement_file_name
from core.constants import Defaults
from core.ledger.statement import LedgerStatement, compute_ledger_statement

logger = logging.getLogger(__name__)

SELECT_COMPANY_AND_LEDGER_MESSAGE = "Please select a company and a ledger account."
REPORT_FETCH_FAILED_MESSAGE = "Failed to generate ledger report."


class ReportRequestError(Exception):
    """보고서 요청 파라미터 오류 (회사/계정 미선택)"""

    pass


class UpstreamFetchFailure(Exception):
    """백엔드 조회 실패 (메시지는 백엔드 메시지 그대로)"""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


@dataclass(frozen=True)
class LedgerReport:
    """계산된 원장 보고서"""

    ledger: LedgerDetails
    statement: LedgerStatement
    start_date: date | None = None
    end_date: date | None = None


class ReportService:
    """원장 보고서 서비스

    Args:
        backend: 회계 백엔드 클라이언트
        locale: 금액 표시 로케일
        currency_code: PDF 금액 열 통화 코드
    """

    def __init__(
        self,
        backend: IAccountingBackend,
        locale: str = Defaults.LOCALE,
        currency_code: str = Defaults.CURRENCY_CODE,
    ):
        self.backend = backend
        self.locale = locale
        self.currency_code = currency_code

    async def generate(
        self,
        company_id: str | None,
        ledger_id: str | None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> LedgerReport:
        """원장 보고서 생성

        Raises:
            ReportRequestError: 회사 또는 계정 미선택
            BackendAuthError: 인증 만료
            UpstreamFetchFailure: 기초잔액/보고서 조회 실패
        """
        if not company_id or not ledger_id:
            raise ReportRequestError(SELECT_COMPANY_AND_LEDGER_MESSAGE)

        try:
            ledger = await self.backend.get_ledger_details(ledger_id)
            lines = await self.backend.get_ledger_report(
                company_id, ledger_id, start_date, end_date
            )
        except BackendAuthError:
            raise
        except BackendApiError as e:
            logger.error(f"원장 보고서 조회 실패: ledger={ledger_id} - {e.message}")
            raise UpstreamFetchFailure(e.message, e.status_code) from e
        except (ValueError, ArithmeticError) as e:
            logger.error(f"원장 보고서 응답 파싱 실패: ledger={ledger_id} - {e}")
            raise UpstreamFetchFailure(REPORT_FETCH_FAILED_MESSAGE) from e

        try:
            statement = compute_ledger_statement(ledger.opening, lines)
        except (ValueError, ArithmeticError) as e:
            logger.error(f"원장 명세서 계산 실패: ledger={ledger_id} - {e}")
            raise UpstreamFetchFailure(REPORT_FETCH_FAILED_MESSAGE) from e

        logger.info(
            f"원장 보고서 생성: ledger={ledger.name}, rows={len(statement.rows)}, "
            f"closing={statement.closing_balance}"
        )
        return LedgerReport(
            ledger=ledger,
            statement=statement,
            start_date=start_date,
            end_date=end_date,
        )

    async def export_pdf(
        self,
        company_id: str | None,
        ledger_id: str | None,
        start_date: date | None = None,
        end_date: date | None = None,
        print_particulars: bool = True,
        exported_on: date | None = None,
    ) -> tuple[str, bytes]:
        """원장 보고서 PDF

        Returns:
            (파일명, PDF 바이트)
        """
        report = await self.generate(company_id, ledger_id, start_date, end_date)
        pdf = build_ledger_statement_pdf(
            report.statement,
            ledger_name=report.ledger.name,
            from_date=start_date,
            to_date=end_date,
            print_particulars=print_particulars,
            locale=self.locale,
            currency_code=self.currency_code,
        )
        return statement_file_name(report.ledger.name, exported_on), pdf
