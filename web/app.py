"""
FastAPI 애플리케이션

라우터 등록 및 앱 설정.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.logging import setup_logging

# 로깅 설정 (콘솔 + 파일)
setup_logging("web")

from web.routes import (
    auth,
    companies,
    health,
    journals,
    ledgers,
    reports,
)

app = FastAPI(
    title="LedgerDesk API",
    description="회계 백엔드 연동 원장 명세서/전표 입력 API",
    version=health.API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS 설정 (개발용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =========================================================================
# API 라우터 등록
# =========================================================================

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(companies.router)
app.include_router(ledgers.router)
app.include_router(journals.router)
app.include_router(reports.router)
