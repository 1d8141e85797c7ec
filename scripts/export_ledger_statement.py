"""
원장 명세서 내보내기 스크립트

실행 방법:
    python -m scripts.export_ledger_statement --email me@example.com --ledger Cash
    python -m scripts.export_ledger_statement --token <JWT> --ledger Cash \\
        --from 2024-04-01 --to 2025-03-31 --pdf out/

로그인 후 회사(지정하지 않으면 첫 번째 회사)와 계정을 골라
명세서를 콘솔에 출력하거나 PDF로 저장한다.
"""

import argparse
import asyncio
import getpass
import logging
import os
import sys
from datetime import date
from pathlib import Path

# 프로젝트 루트를 path에 추가
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from adapters.backend.rest_client import AccountingBackendClient, BackendApiError
from core.config.loader import get_settings
from core.ledger.formatting import (
    format_amount,
    format_balance,
    format_entry_amount,
    format_report_date,
)
from core.logging import setup_logging
from web.services.company_service import select_company
from web.services.report_service import (
    LedgerReport,
    ReportRequestError,
    ReportService,
    UpstreamFetchFailure,
)

logger = logging.getLogger(__name__)

PASSWORD_ENV = "LEDGERDESK_PASSWORD"


def print_report(report: LedgerReport, locale: str) -> None:
    """명세서를 콘솔 표로 출력"""
    statement = report.statement
    print("=" * 100)
    print(f"Ledger Statement for {report.ledger.name}")
    print(
        f"Reporting Period: {format_report_date(report.start_date)} "
        f"to {format_report_date(report.end_date)}"
    )
    print("=" * 100)
    print(f"{'Date':<11} {'Voucher No':<14} {'Narration':<30} {'Debit':>13} {'Credit':>13} {'Balance':>16}")
    print("-" * 100)

    for row in statement.rows:
        date_text = "O. Bal" if row.is_opening else format_report_date(row.date)
        debit = format_entry_amount(row.debit, locale)
        credit = format_entry_amount(row.credit, locale)
        print(
            f"{date_text:<11} {row.voucher_no:<14} {row.narration[:30]:<30} "
            f"{debit:>13} {credit:>13} {format_balance(row.balance, locale):>16}"
        )

    print("-" * 100)
    print(
        f"{'GRAND TOTALS':<57} {format_amount(statement.total_debit, locale):>13} "
        f"{format_amount(statement.total_credit, locale):>13} "
        f"{format_balance(statement.closing_balance, locale):>16}"
    )


async def main(args: argparse.Namespace) -> int:
    settings = get_settings()
    backend = settings.backend

    async with AccountingBackendClient(backend.base_url, timeout=backend.timeout_sec) as client:
        try:
            if args.token:
                client.token = args.token
            else:
                password = os.environ.get(PASSWORD_ENV) or getpass.getpass("Password: ")
                auth = await client.login(args.email, password)
                client.token = auth.token
                logger.info(f"로그인: {auth.user.name} <{auth.user.email}>")

            company = select_company(await client.list_companies(), args.company)
            if company is None:
                logger.error("회사가 없습니다. 먼저 회사를 생성하세요.")
                return 1

            options = await client.list_ledger_options(company.id)
        except BackendApiError as e:
            logger.error(f"백엔드 조회 실패: {e.message}")
            return 1

        ledger = next(
            (option for option in options if args.ledger in (option.id, option.name)),
            None,
        )
        service = ReportService(client, locale=settings.locale, currency_code=settings.currency_code)
        ledger_id = ledger.id if ledger else None

        try:
            if args.pdf:
                file_name, pdf = await service.export_pdf(
                    company.id,
                    ledger_id,
                    args.start_date,
                    args.end_date,
                    print_particulars=not args.no_particulars,
                )
                output_dir = Path(args.pdf)
                output_dir.mkdir(parents=True, exist_ok=True)
                output_path = output_dir / file_name
                output_path.write_bytes(pdf)
                logger.info(f"PDF 저장: {output_path} ({len(pdf)} bytes)")
            else:
                report = await service.generate(company.id, ledger_id, args.start_date, args.end_date)
                print_report(report, settings.locale)
        except (ReportRequestError, UpstreamFetchFailure, BackendApiError) as e:
            logger.error(f"명세서 생성 실패: {e}")
            return 1

    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="원장 명세서 내보내기")
    auth_group = parser.add_mutually_exclusive_group(required=True)
    auth_group.add_argument("--email", help=f"로그인 이메일 (비밀번호는 {PASSWORD_ENV} 또는 프롬프트)")
    auth_group.add_argument("--token", help="이미 발급받은 Bearer 토큰")
    parser.add_argument("--company", default=None, help="회사 ID (기본: 첫 번째 회사)")
    parser.add_argument("--ledger", required=True, help="계정 ID 또는 계정명")
    parser.add_argument("--from", dest="start_date", type=date.fromisoformat, default=None, help="시작일 (YYYY-MM-DD)")
    parser.add_argument("--to", dest="end_date", type=date.fromisoformat, default=None, help="종료일 (YYYY-MM-DD)")
    parser.add_argument("--pdf", default=None, help="PDF 저장 디렉토리 (없으면 콘솔 출력)")
    parser.add_argument("--no-particulars", action="store_true", help="PDF에서 상대 계정 열 생략")

    setup_logging("cli")
    sys.exit(asyncio.run(main(parser.parse_args())))
