"""
core/session.py 테스트

Bearer 헤더 파싱과 토큰 만료 판정
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from core.session import Session, User


def _token(**claims) -> str:
    return jwt.encode(claims, "test-secret", algorithm="HS256")


class TestUser:
    def test_from_api_with_mongo_id(self) -> None:
        user = User.from_api({"_id": "u1", "name": "Asha", "email": "asha@example.com"})

        assert user.id == "u1"
        assert user.name == "Asha"
        assert user.email == "asha@example.com"

    def test_from_api_missing_fields(self) -> None:
        user = User.from_api({"id": 7})

        assert user.id == "7"
        assert user.name == ""


class TestFromAuthorizationHeader:
    """Authorization 헤더 파싱"""

    def test_bearer_token(self) -> None:
        session = Session.from_authorization_header("Bearer abc.def.ghi")

        assert session is not None
        assert session.token == "abc.def.ghi"
        assert session.auth_headers() == {"Authorization": "Bearer abc.def.ghi"}

    def test_scheme_is_case_insensitive(self) -> None:
        session = Session.from_authorization_header("bearer token123")

        assert session is not None
        assert session.token == "token123"

    @pytest.mark.parametrize("header", [None, "", "Bearer", "Bearer   ", "Basic dXNlcjpwYXNz", "token123"])
    def test_invalid_header(self, header) -> None:
        assert Session.from_authorization_header(header) is None


class TestExpiry:
    """토큰 만료 판정 (서명 검증 없음)"""

    def test_future_exp_not_expired(self) -> None:
        exp = datetime.now(timezone.utc) + timedelta(hours=1)
        session = Session(token=_token(exp=int(exp.timestamp())))

        assert session.expires_at == datetime.fromtimestamp(int(exp.timestamp()), tz=timezone.utc)
        assert not session.is_expired()

    def test_past_exp_is_expired(self) -> None:
        exp = datetime(2024, 1, 1, tzinfo=timezone.utc)
        session = Session(token=_token(exp=int(exp.timestamp())))

        assert session.is_expired()

    def test_expiry_against_given_time(self) -> None:
        exp = datetime(2024, 1, 1, tzinfo=timezone.utc)
        session = Session(token=_token(exp=int(exp.timestamp())))

        assert not session.is_expired(now=exp - timedelta(seconds=1))
        assert session.is_expired(now=exp)

    def test_token_without_exp(self) -> None:
        session = Session(token=_token(sub="u1"))

        assert session.expires_at is None
        assert not session.is_expired()

    def test_opaque_token(self) -> None:
        """JWT가 아닌 토큰은 만료 판정을 백엔드에 맡김"""
        session = Session(token="not-a-jwt")

        assert session.expires_at is None
        assert not session.is_expired()
