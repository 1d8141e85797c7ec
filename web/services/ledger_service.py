"""
계정(Chart of Accounts) 서비스
"""

import logging
from typing import Any

from adapters.interfaces import IAccountingBackend
from adapters.models import Ledger

logger = logging.getLogger(__name__)

LEDGER_REQUIRED_MESSAGE = "Ledger Name and Group are required fields."


class LedgerFormError(Exception):
    """계정 입력값 오류"""

    pass


def require_ledger_fields(values: dict[str, Any]) -> None:
    """계정명과 그룹 필수 확인

    Raises:
        LedgerFormError: 둘 중 하나라도 비어 있는 경우
    """
    name = (values.get("name") or "").strip()
    group = (values.get("group") or "").strip()
    if not name or not group:
        raise LedgerFormError(LEDGER_REQUIRED_MESSAGE)


class LedgerService:
    """계정 생성/수정 서비스 (필수 필드 검증 후 백엔드 호출)"""

    def __init__(self, backend: IAccountingBackend):
        self.backend = backend

    async def create(self, company_id: str, values: dict[str, Any]) -> Ledger:
        require_ledger_fields(values)
        ledger = await self.backend.create_ledger({**values, "company_id": company_id})
        logger.info(f"계정 생성: {ledger.name} ({ledger.group})")
        return ledger

    async def update(self, ledger_id: str, values: dict[str, Any]) -> Ledger:
        require_ledger_fields(values)
        return await self.backend.update_ledger(ledger_id, values)
