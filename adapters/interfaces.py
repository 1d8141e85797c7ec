"""
어댑터 인터페이스 정의

Protocol 기반으로 정의하여 의존성 주입 및 Mock 교체 가능.
모든 구현체는 이 Protocol을 준수해야 함.
"""

from datetime import date
from typing import Any, Protocol, runtime_checkable

from adapters.models import (
    AuthResult,
    Company,
    JournalRecord,
    Ledger,
    LedgerDetails,
    LedgerOption,
)
from core.ledger.journal_form import JournalSubmission
from core.ledger.statement import TransactionLine


@runtime_checkable
class IAccountingBackend(Protocol):
    """회계 백엔드 클라이언트 인터페이스

    REST 클라이언트와 인메모리 Mock이 이 Protocol을 구현.
    금액은 반드시 Decimal 타입 사용.
    """

    # -------------------------------------------------------------------------
    # 인증
    # -------------------------------------------------------------------------

    async def login(self, email: str, password: str) -> AuthResult:
        ...

    async def register(self, name: str, email: str, password: str) -> AuthResult:
        ...

    # -------------------------------------------------------------------------
    # 회사
    # -------------------------------------------------------------------------

    async def list_companies(self) -> list[Company]:
        ...

    async def get_company(self, company_id: str) -> Company:
        """회사 단건 조회

        Raises:
            BackendApiError: 목록에 없으면 "Company not found."
        """
        ...

    async def create_company(self, data: dict[str, Any]) -> Company:
        ...

    async def update_company(self, company_id: str, data: dict[str, Any]) -> Company:
        ...

    async def delete_company(self, company_id: str) -> None:
        ...

    # -------------------------------------------------------------------------
    # 계정 (Chart of Accounts)
    # -------------------------------------------------------------------------

    async def list_ledgers(self, company_id: str) -> list[Ledger]:
        ...

    async def get_ledger(self, ledger_id: str) -> Ledger:
        ...

    async def create_ledger(self, data: dict[str, Any]) -> Ledger:
        ...

    async def update_ledger(self, ledger_id: str, data: dict[str, Any]) -> Ledger:
        ...

    async def delete_ledger(self, ledger_id: str) -> None:
        ...

    async def get_ledger_details(self, ledger_id: str) -> LedgerDetails:
        """기초잔액 정보 조회"""
        ...

    async def list_ledger_options(self, company_id: str) -> list[LedgerOption]:
        """전표 입력 드롭다운용 계정 목록"""
        ...

    # -------------------------------------------------------------------------
    # 전표 / 보고서
    # -------------------------------------------------------------------------

    async def create_journal_entry(self, submission: JournalSubmission) -> JournalRecord:
        ...

    async def list_journals(self, company_id: str) -> list[JournalRecord]:
        ...

    async def get_journal(self, journal_id: str) -> JournalRecord:
        ...

    async def get_ledger_report(
        self,
        company_id: str,
        ledger_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[TransactionLine]:
        """원장 보고서 거래 라인 (시간순)"""
        ...

    async def close(self) -> None:
        ...
