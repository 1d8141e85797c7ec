"""
회계 백엔드 REST API 클라이언트

인증, 회사, 계정(Chart of Accounts), 전표, 원장 보고서 API 호출.
모든 요청은 Bearer 토큰 인증 사용 (로그인/회원가입 제외).

에러 메시지는 백엔드 응답의 message 필드를 그대로 사용자에게 전달.
"""

import logging
from datetime import date
from typing import Any

import httpx

from adapters.models import (
    AuthResult,
    Company,
    JournalRecord,
    Ledger,
    LedgerDetails,
    LedgerOption,
    company_payload,
    ledger_payload,
    transaction_lines_from_api,
)
from core.constants import Defaults
from core.ledger.journal_form import JournalSubmission
from core.ledger.statement import TransactionLine

logger = logging.getLogger(__name__)


class BackendApiError(Exception):
    """회계 백엔드 API 에러

    Attributes:
        message: 사용자 표시 메시지 (백엔드 message 또는 기본 메시지)
        status_code: HTTP 상태 코드 (네트워크 오류 시 None)
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class BackendAuthError(BackendApiError):
    """인증 실패 (401). 토큰 만료 또는 로그인 실패."""

    pass


class AccountingBackendClient:
    """회계 백엔드 REST API 클라이언트

    Args:
        base_url: API 기본 URL (예: https://.../api)
        token: Bearer 토큰 (없으면 인증 헤더 생략)
        timeout: HTTP 요청 타임아웃 (초)

    사용 예시:
    ```python
    async with AccountingBackendClient(base_url, token=session.token) as client:
        companies = await client.list_companies()
    ```
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = Defaults.HTTP_TIMEOUT_SEC,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTP 클라이언트 가져오기 (lazy initialization)"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def close(self) -> None:
        """HTTP 클라이언트 종료"""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "AccountingBackendClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        *,
        error_message: str,
        operation: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """API 요청 실행

        Args:
            method: HTTP 메서드 (GET, POST, PUT, DELETE)
            path: API 경로 (예: /journal)
            error_message: 백엔드 message가 없을 때 사용할 메시지
            operation: 네트워크 오류 메시지에 들어갈 작업 이름
            params: 쿼리 파라미터
            body: 요청 본문 (JSON)

        Returns:
            JSON 응답 (본문 없으면 None)

        Raises:
            BackendAuthError: 401 응답 시
            BackendApiError: 기타 에러 응답 또는 네트워크 오류 시
        """
        client = await self._get_client()
        url = f"{self.base_url}{path}"

        try:
            response = await client.request(
                method,
                url,
                params=params,
                json=body,
                headers=self._headers(),
            )
        except httpx.RequestError as e:
            logger.error(f"Backend request error: {method} {path} - {e}")
            raise BackendApiError(f"Network or server error during {operation}.") from e

        if response.status_code >= 400:
            message = _error_message(response, error_message)
            logger.warning(f"Backend API error: {response.status_code} {method} {path} - {message}")
            if response.status_code == 401:
                raise BackendAuthError(message, response.status_code)
            raise BackendApiError(message, response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Backend response is not JSON: {method} {path} - {e}")
            raise BackendApiError(f"Network or server error during {operation}.") from e

    # =========================================================================
    # 인증
    # =========================================================================

    async def login(self, email: str, password: str) -> AuthResult:
        """로그인 → 토큰과 사용자 정보"""
        data = await self._request(
            "POST",
            "/auth/login",
            body={"email": email, "password": password},
            error_message="Login failed. Please check your credentials.",
            operation="login",
        )
        return AuthResult.from_api(data)

    async def register(self, name: str, email: str, password: str) -> AuthResult:
        """회원가입 → 토큰과 사용자 정보"""
        data = await self._request(
            "POST",
            "/auth/register",
            body={"name": name, "email": email, "password": password},
            error_message="Registration failed due to a server error.",
            operation="registration",
        )
        return AuthResult.from_api(data)

    # =========================================================================
    # 회사
    # =========================================================================

    async def list_companies(self) -> list[Company]:
        data = await self._request(
            "GET",
            "/company",
            error_message="Failed to fetch companies.",
            operation="company list fetching",
        )
        return [Company.from_api(item) for item in data or []]

    async def get_company(self, company_id: str) -> Company:
        """회사 단건 조회

        백엔드에 단건 조회 API가 없으므로 목록에서 찾는다.

        Raises:
            BackendApiError: 목록에 없는 경우
        """
        for company in await self.list_companies():
            if company.id == company_id:
                return company
        raise BackendApiError("Company not found.", 404)

    async def create_company(self, data: dict[str, Any]) -> Company:
        result = await self._request(
            "POST",
            "/company",
            body=company_payload(data),
            error_message="Failed to create company. Check server status.",
            operation="company creation",
        )
        return Company.from_api(result)

    async def update_company(self, company_id: str, data: dict[str, Any]) -> Company:
        result = await self._request(
            "PUT",
            f"/company/{company_id}",
            body=company_payload(data),
            error_message="Failed to update company. Check server logs.",
            operation="company update",
        )
        return Company.from_api(result)

    async def delete_company(self, company_id: str) -> None:
        await self._request(
            "DELETE",
            f"/company/{company_id}",
            error_message="Failed to delete company.",
            operation="company deletion",
        )
        logger.info(f"회사 삭제: {company_id}")

    # =========================================================================
    # 계정 (Chart of Accounts)
    # =========================================================================

    async def list_ledgers(self, company_id: str) -> list[Ledger]:
        data = await self._request(
            "GET",
            "/ledger",
            params={"companyId": company_id},
            error_message="Failed to load ledger list.",
            operation="ledger list fetching",
        )
        return [Ledger.from_api(item) for item in data or []]

    async def get_ledger(self, ledger_id: str) -> Ledger:
        data = await self._request(
            "GET",
            f"/ledger/{ledger_id}",
            error_message=f"Failed to load ledger data for ID: {ledger_id}.",
            operation="ledger fetching",
        )
        return Ledger.from_api(data)

    async def create_ledger(self, data: dict[str, Any]) -> Ledger:
        result = await self._request(
            "POST",
            "/ledger",
            body=ledger_payload(data),
            error_message="Failed to create ledger account. Check server status.",
            operation="ledger creation",
        )
        return Ledger.from_api(result)

    async def update_ledger(self, ledger_id: str, data: dict[str, Any]) -> Ledger:
        result = await self._request(
            "PUT",
            f"/ledger/{ledger_id}",
            body=ledger_payload(data),
            error_message="Failed to update ledger account.",
            operation="ledger update",
        )
        return Ledger.from_api(result)

    async def delete_ledger(self, ledger_id: str) -> None:
        await self._request(
            "DELETE",
            f"/ledger/{ledger_id}",
            error_message="Failed to delete ledger account.",
            operation="ledger deletion",
        )
        logger.info(f"계정 삭제: {ledger_id}")

    async def get_ledger_details(self, ledger_id: str) -> LedgerDetails:
        """기초잔액 정보 조회 (명세서 계산용)"""
        data = await self._request(
            "GET",
            f"/ledger/details/{ledger_id}",
            error_message="Failed to fetch ledger details.",
            operation="ledger details fetching",
        )
        return LedgerDetails.from_api(data)

    async def list_ledger_options(self, company_id: str) -> list[LedgerOption]:
        """전표 입력용 계정 선택지"""
        data = await self._request(
            "GET",
            f"/journal/ledgers/{company_id}",
            error_message="Failed to fetch ledger list.",
            operation="ledger list fetching",
        )
        return [LedgerOption.from_api(item) for item in data or []]

    # =========================================================================
    # 전표
    # =========================================================================

    async def create_journal_entry(self, submission: JournalSubmission) -> JournalRecord:
        """전표 등록

        전표번호는 백엔드가 채번하여 응답 data에 포함.
        """
        result = await self._request(
            "POST",
            "/journal",
            body=submission.to_api(),
            error_message="Failed to post Journal Entry.",
            operation="Journal Entry creation",
        )
        data = result.get("data") if isinstance(result, dict) else None
        record = JournalRecord.from_api(data or {})
        logger.info(
            f"전표 등록 완료: voucher_no={record.voucher_no}, "
            f"total={submission.total_debit}"
        )
        return record

    async def list_journals(self, company_id: str) -> list[JournalRecord]:
        data = await self._request(
            "GET",
            "/journal",
            params={"companyId": company_id},
            error_message="Failed to fetch Journal Entries list.",
            operation="Journal list fetching",
        )
        return [JournalRecord.from_api(item) for item in data or []]

    async def get_journal(self, journal_id: str) -> JournalRecord:
        data = await self._request(
            "GET",
            f"/journal/details/{journal_id}",
            error_message="Failed to fetch Journal Entry details.",
            operation="Journal detail fetching",
        )
        return JournalRecord.from_api(data)

    # =========================================================================
    # 원장 보고서
    # =========================================================================

    async def get_ledger_report(
        self,
        company_id: str,
        ledger_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[TransactionLine]:
        """원장 보고서 거래 라인 조회

        날짜 범위 필터링은 백엔드가 수행. 응답 순서(시간순)를 그대로 유지.

        Args:
            company_id: 회사 ID
            ledger_id: 계정 ID
            start_date: 시작일 (없으면 생략)
            end_date: 종료일 (없으면 생략)
        """
        params: dict[str, Any] = {"companyId": company_id, "ledgerId": ledger_id}
        if start_date is not None:
            params["startDate"] = start_date.isoformat()
        if end_date is not None:
            params["endDate"] = end_date.isoformat()

        data = await self._request(
            "GET",
            "/journal/report/ledger",
            params=params,
            error_message="Failed to generate ledger report.",
            operation="report generation",
        )
        return transaction_lines_from_api(data or [])


def _error_message(response: httpx.Response, default: str) -> str:
    """에러 응답의 message 필드 (없으면 기본 메시지)"""
    try:
        data = response.json()
    except ValueError:
        return default
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return default
