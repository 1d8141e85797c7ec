"""
전표 서비스

요청 라인 → JournalDraft → 균형 검증 → 백엔드 등록.
"""

import logging
from collections.abc import Sequence
from datetime import date
from typing import Any

from adapters.interfaces import IAccountingBackend
from adapters.models import JournalRecord
from core.constants import Defaults
from core.ledger.journal_form import MIN_LINES_MESSAGE, JournalDraft, JournalFormError
from core.ledger.validation import BalanceCheck, JournalValidationError
from core.types import VoucherType

logger = logging.getLogger(__name__)


class JournalService:
    """전표 입력/조회 서비스"""

    def __init__(self, backend: IAccountingBackend):
        self.backend = backend

    def build_draft(
        self,
        company_id: str,
        lines: Sequence[dict[str, Any]],
        entry_date: date | None = None,
        voucher_type: str = VoucherType.JOURNAL.value,
        narration: str = "",
    ) -> JournalDraft:
        """요청 값으로 초안 구성

        Raises:
            JournalFormError: 라인이 2개 미만
        """
        if len(lines) < Defaults.MIN_JOURNAL_LINES:
            raise JournalFormError(MIN_LINES_MESSAGE)
        return self._draft(company_id, lines, entry_date, voucher_type, narration)

    def _draft(
        self,
        company_id: str,
        lines: Sequence[dict[str, Any]],
        entry_date: date | None = None,
        voucher_type: str = VoucherType.JOURNAL.value,
        narration: str = "",
    ) -> JournalDraft:
        draft = JournalDraft(
            company_id=company_id,
            date=entry_date or date.today(),
            voucher_type=voucher_type,
            narration=narration,
        )
        for values in lines:
            draft.add_line(**values)
        return draft

    def check(self, company_id: str, lines: Sequence[dict[str, Any]]) -> BalanceCheck:
        """실시간 균형 검증 (라인 수와 관계없이 결과 반환)"""
        return self._draft(company_id, lines).check()

    async def submit(
        self,
        company_id: str,
        lines: Sequence[dict[str, Any]],
        entry_date: date | None = None,
        voucher_type: str = VoucherType.JOURNAL.value,
        narration: str = "",
    ) -> JournalRecord:
        """검증 후 전표 등록

        계정명이 비어 있는 라인은 백엔드 계정 선택지로 채운다.

        Raises:
            JournalFormError: 라인 수 부족
            JournalValidationError: 균형 검증 실패 (백엔드 호출 없음)
            BackendApiError: 등록 실패
        """
        draft = self.build_draft(company_id, lines, entry_date, voucher_type, narration)

        result = draft.check()
        if result.error is not None:
            raise JournalValidationError(result.error)

        if any(not line.ledger_name for line in draft.lines):
            options = await self.backend.list_ledger_options(company_id)
            for line in draft.lines:
                if not line.ledger_name:
                    draft.set_ledger(line.line_id, line.ledger_id, options)

        record = await self.backend.create_journal_entry(draft.to_submission())
        logger.info(f"전표 등록: company={company_id}, voucher_no={record.voucher_no}")
        return record

    async def list_journals(self, company_id: str) -> list[JournalRecord]:
        return await self.backend.list_journals(company_id)

    async def get_journal(self, journal_id: str) -> JournalRecord:
        return await self.backend.get_journal(journal_id)
