"""
Mock 회계 백엔드 클라이언트

테스트/오프라인용 인메모리 백엔드. IAccountingBackend Protocol 준수.
백엔드와 같은 camelCase 문서를 저장하고 응답 모델로 변환해 돌려준다.
"""

import itertools
import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Any

import jwt

from adapters.backend.rest_client import BackendApiError, BackendAuthError
from adapters.models import (
    AuthResult,
    Company,
    JournalRecord,
    Ledger,
    LedgerDetails,
    LedgerOption,
    company_payload,
    ledger_payload,
)
from core.ledger.journal_form import JournalSubmission
from core.ledger.statement import TransactionLine
from core.session import User

logger = logging.getLogger(__name__)

MOCK_TOKEN_SECRET = "mock-backend-secret"


@dataclass
class MockBackendState:
    """Mock 상태 (메모리 내 저장)"""

    # email -> {"_id", "name", "email", "password"}
    users: dict[str, dict[str, Any]] = field(default_factory=dict)

    # id -> 백엔드 문서 (camelCase)
    companies: dict[str, dict[str, Any]] = field(default_factory=dict)
    ledgers: dict[str, dict[str, Any]] = field(default_factory=dict)
    journals: dict[str, dict[str, Any]] = field(default_factory=dict)

    # 시뮬레이션 옵션: 다음 호출 1회 실패
    next_error: BackendApiError | None = None

    id_counter: Any = field(default_factory=lambda: itertools.count(1))
    voucher_counter: Any = field(default_factory=lambda: itertools.count(1))


class MockBackendClient:
    """Mock 회계 백엔드 클라이언트

    사용 예시:
    ```python
    client = MockBackendClient()
    company = client.add_company("Acme Traders")
    cash = client.add_ledger(company.id, "Cash", opening_balance=Decimal("500"))

    report = await client.get_ledger_report(company.id, cash.id)

    # 실패 시뮬레이션
    client.fail_next("Failed to generate ledger report.", status_code=500)
    ```
    """

    def __init__(self, state: MockBackendState | None = None):
        self.state = state or MockBackendState()
        self.closed = False

    # -------------------------------------------------------------------------
    # 상태 조작 메서드 (테스트용)
    # -------------------------------------------------------------------------

    def _next_id(self, prefix: str) -> str:
        return f"{prefix}{next(self.state.id_counter):04d}"

    def fail_next(self, message: str, status_code: int | None = 500) -> None:
        """다음 API 호출 1회를 실패시킴 (401이면 BackendAuthError)"""
        error_cls = BackendAuthError if status_code == 401 else BackendApiError
        self.state.next_error = error_cls(message, status_code)

    def add_user(self, name: str, email: str, password: str) -> User:
        user_id = self._next_id("user")
        self.state.users[email] = {
            "_id": user_id,
            "name": name,
            "email": email,
            "password": password,
        }
        return User(id=user_id, name=name, email=email)

    def add_company(self, name: str, **values: Any) -> Company:
        values.setdefault("short_code", name[:3].upper())
        values.setdefault("financial_year_start", "2024-04-01")
        values.setdefault("currency_code", "INR")
        company_id = self._next_id("company")
        self.state.companies[company_id] = {
            "_id": company_id,
            **company_payload({"name": name, **values}),
        }
        return Company.from_api(self.state.companies[company_id])

    def add_ledger(self, company_id: str, name: str, group: str = "Current Assets", **values: Any) -> Ledger:
        ledger_id = self._next_id("ledger")
        payload = ledger_payload({"company_id": company_id, "name": name, "group": group, **values})
        payload.setdefault("openingBalance", 0)
        payload.setdefault("obType", "Debit")
        payload.setdefault("status", "Active")
        self.state.ledgers[ledger_id] = {"_id": ledger_id, **payload}
        return Ledger.from_api(self.state.ledgers[ledger_id])

    def _raise_pending_error(self) -> None:
        error, self.state.next_error = self.state.next_error, None
        if error is not None:
            raise error

    def _issue_token(self, user: dict[str, Any]) -> str:
        expires = datetime.now(timezone.utc) + timedelta(days=1)
        return jwt.encode(
            {"id": user["_id"], "exp": int(expires.timestamp())},
            MOCK_TOKEN_SECRET,
            algorithm="HS256",
        )

    async def close(self) -> None:
        self.closed = True

    # -------------------------------------------------------------------------
    # 인증
    # -------------------------------------------------------------------------

    async def login(self, email: str, password: str) -> AuthResult:
        self._raise_pending_error()
        user = self.state.users.get(email)
        if user is None or user["password"] != password:
            raise BackendAuthError("Invalid email or password.", 401)
        return AuthResult(token=self._issue_token(user), user=User.from_api(user))

    async def register(self, name: str, email: str, password: str) -> AuthResult:
        self._raise_pending_error()
        if email in self.state.users:
            raise BackendApiError("User already exists.", 400)
        self.add_user(name, email, password)
        user = self.state.users[email]
        return AuthResult(token=self._issue_token(user), user=User.from_api(user))

    # -------------------------------------------------------------------------
    # 회사
    # -------------------------------------------------------------------------

    async def list_companies(self) -> list[Company]:
        self._raise_pending_error()
        return [Company.from_api(doc) for doc in self.state.companies.values()]

    async def get_company(self, company_id: str) -> Company:
        for company in await self.list_companies():
            if company.id == company_id:
                return company
        raise BackendApiError("Company not found.", 404)

    async def create_company(self, data: dict[str, Any]) -> Company:
        self._raise_pending_error()
        values = dict(data)
        return self.add_company(values.pop("name", ""), **values)

    async def update_company(self, company_id: str, data: dict[str, Any]) -> Company:
        self._raise_pending_error()
        doc = self._find(self.state.companies, company_id, "Company not found.")
        doc.update(company_payload(data))
        return Company.from_api(doc)

    async def delete_company(self, company_id: str) -> None:
        self._raise_pending_error()
        self._find(self.state.companies, company_id, "Company not found.")
        del self.state.companies[company_id]

    # -------------------------------------------------------------------------
    # 계정
    # -------------------------------------------------------------------------

    async def list_ledgers(self, company_id: str) -> list[Ledger]:
        self._raise_pending_error()
        return [
            Ledger.from_api(doc)
            for doc in self.state.ledgers.values()
            if doc.get("companyId") == company_id
        ]

    async def get_ledger(self, ledger_id: str) -> Ledger:
        self._raise_pending_error()
        return Ledger.from_api(self._find(self.state.ledgers, ledger_id, "Ledger not found."))

    async def create_ledger(self, data: dict[str, Any]) -> Ledger:
        self._raise_pending_error()
        values = dict(data)
        company_id = values.pop("company_id", "")
        name = values.pop("name", "")
        group = values.pop("group", "")
        return self.add_ledger(company_id, name, group, **values)

    async def update_ledger(self, ledger_id: str, data: dict[str, Any]) -> Ledger:
        self._raise_pending_error()
        doc = self._find(self.state.ledgers, ledger_id, "Ledger not found.")
        doc.update(ledger_payload(data))
        return Ledger.from_api(doc)

    async def delete_ledger(self, ledger_id: str) -> None:
        self._raise_pending_error()
        self._find(self.state.ledgers, ledger_id, "Ledger not found.")
        del self.state.ledgers[ledger_id]

    async def get_ledger_details(self, ledger_id: str) -> LedgerDetails:
        self._raise_pending_error()
        return LedgerDetails.from_api(
            self._find(self.state.ledgers, ledger_id, "Ledger not found.")
        )

    async def list_ledger_options(self, company_id: str) -> list[LedgerOption]:
        return [
            LedgerOption(id=ledger.id, name=ledger.name)
            for ledger in await self.list_ledgers(company_id)
        ]

    # -------------------------------------------------------------------------
    # 전표 / 보고서
    # -------------------------------------------------------------------------

    async def create_journal_entry(self, submission: JournalSubmission) -> JournalRecord:
        self._raise_pending_error()
        journal_id = self._next_id("journal")
        doc = {
            "_id": journal_id,
            "voucherNo": f"JV-{next(self.state.voucher_counter):04d}",
            "createdAt": datetime.now(timezone.utc).isoformat(),
            **submission.to_api(),
        }
        self.state.journals[journal_id] = doc
        logger.debug(f"Mock 전표 등록: {doc['voucherNo']}")
        return JournalRecord.from_api(doc)

    async def list_journals(self, company_id: str) -> list[JournalRecord]:
        self._raise_pending_error()
        return [
            JournalRecord.from_api(doc)
            for doc in self.state.journals.values()
            if doc.get("companyId") == company_id
        ]

    async def get_journal(self, journal_id: str) -> JournalRecord:
        self._raise_pending_error()
        return JournalRecord.from_api(
            self._find(self.state.journals, journal_id, "Journal Entry not found.")
        )

    async def get_ledger_report(
        self,
        company_id: str,
        ledger_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[TransactionLine]:
        """전표에서 계정 라인을 뽑아 날짜순(동일 날짜는 등록순)으로 반환"""
        self._raise_pending_error()
        journals = sorted(
            (doc for doc in self.state.journals.values() if doc.get("companyId") == company_id),
            key=lambda doc: doc["date"],
        )

        lines: list[TransactionLine] = []
        for doc in journals:
            journal_date = date.fromisoformat(doc["date"][:10])
            if start_date is not None and journal_date < start_date:
                continue
            if end_date is not None and journal_date > end_date:
                continue
            for line in doc["lines"]:
                if line["ledgerId"] != ledger_id:
                    continue
                opponents = [
                    other["ledgerName"]
                    for other in doc["lines"]
                    if other["ledgerId"] != ledger_id
                ]
                lines.append(
                    TransactionLine.from_api(
                        {
                            "journalId": doc["_id"],
                            "date": doc["date"],
                            "voucherType": doc["voucherType"],
                            "voucherNo": doc["voucherNo"],
                            "narration": doc["narration"],
                            "lineNarration": line.get("lineNarration", ""),
                            "debit": line["debit"],
                            "credit": line["credit"],
                            "opponentLedgerName": ", ".join(opponents) or None,
                        }
                    )
                )
        return lines

    @staticmethod
    def _find(docs: dict[str, dict[str, Any]], doc_id: str, message: str) -> dict[str, Any]:
        if doc_id not in docs:
            raise BackendApiError(message, 404)
        return docs[doc_id]
