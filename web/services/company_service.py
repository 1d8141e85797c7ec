"""
회사 선택 서비스

선택된 회사는 서버에 저장하지 않는다. 클라이언트가 기억한 ID를
preferred_id로 넘기면 현재 목록 기준으로 다시 결정한다.
"""

from collections.abc import Sequence

from adapters.models import Company


def select_company(companies: Sequence[Company], preferred_id: str | None = None) -> Company | None:
    """작업 대상 회사 결정

    1. preferred_id가 목록에 있으면 해당 회사
    2. 없으면 첫 번째 회사
    3. 목록이 비어 있으면 None
    """
    if preferred_id:
        for company in companies:
            if company.id == preferred_id:
                return company
    return companies[0] if companies else None
