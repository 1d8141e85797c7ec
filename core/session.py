"""
사용자 세션

백엔드가 발급한 토큰과 사용자 정보를 명시적으로 전달하기 위한 값 객체.
전역 상태 없이 요청마다 생성하여 서비스에 넘긴다.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

import jwt


@dataclass(frozen=True)
class User:
    """로그인 사용자"""

    id: str
    name: str
    email: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "User":
        """API 응답에서 생성"""
        return cls(
            id=str(data.get("id") or data.get("_id") or ""),
            name=data.get("name", ""),
            email=data.get("email", ""),
        )


@dataclass(frozen=True)
class Session:
    """인증 세션

    토큰 서명 검증은 백엔드 책임. 여기서는 만료 시각만 읽는다.
    """

    token: str
    user: User | None = None

    @classmethod
    def from_authorization_header(cls, header: str | None) -> "Session | None":
        """'Authorization: Bearer <token>' 헤더에서 생성

        Returns:
            Session 또는 None (헤더 없음/형식 오류)
        """
        if not header:
            return None
        scheme, _, token = header.partition(" ")
        token = token.strip()
        if scheme.lower() != "bearer" or not token:
            return None
        return cls(token=token)

    @property
    def expires_at(self) -> datetime | None:
        """토큰 exp 클레임 (JWT가 아니거나 exp 없으면 None)"""
        try:
            claims = jwt.decode(self.token, options={"verify_signature": False})
        except jwt.PyJWTError:
            return None

        exp = claims.get("exp")
        if exp is None:
            return None
        return datetime.fromtimestamp(int(exp), tz=timezone.utc)

    def is_expired(self, now: datetime | None = None) -> bool:
        expires_at = self.expires_at
        if expires_at is None:
            return False
        return (now or datetime.now(timezone.utc)) >= expires_at

    def auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}
