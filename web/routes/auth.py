"""
인증 API 라우터

백엔드 로그인/회원가입 프록시. 발급된 토큰은 클라이언트가 보관하고
이후 요청에 Authorization: Bearer 헤더로 보낸다.
"""

import logging

from fastapi import APIRouter, Depends

from adapters.interfaces import IAccountingBackend
from web.dependencies import get_public_backend_client
from web.errors import DOMAIN_ERRORS, to_http_exception
from web.models.requests import LoginRequest, RegisterRequest
from web.models.responses import AuthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    client: IAccountingBackend = Depends(get_public_backend_client),
) -> AuthResponse:
    """로그인"""
    try:
        result = await client.login(request.email, request.password)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    logger.info(f"로그인: {result.user.email}")
    return AuthResponse.from_result(result)


@router.post("/register", response_model=AuthResponse)
async def register(
    request: RegisterRequest,
    client: IAccountingBackend = Depends(get_public_backend_client),
) -> AuthResponse:
    """회원가입 (성공 시 바로 로그인 상태)"""
    try:
        result = await client.register(request.name, request.email, request.password)
    except DOMAIN_ERRORS as e:
        raise to_http_exception(e) from e
    logger.info(f"회원가입: {result.user.email}")
    return AuthResponse.from_result(result)
