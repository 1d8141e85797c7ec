"""
LedgerDesk API 서버 진입점

실행 방법:
    python -m web
    python -m web --host 0.0.0.0 --port 8080 --reload
"""

import argparse

import uvicorn

from core.constants import Defaults


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="LedgerDesk API 서버")
    parser.add_argument("--host", default=Defaults.WEB_HOST, help=f"바인드 주소 (기본: {Defaults.WEB_HOST})")
    parser.add_argument("--port", type=int, default=Defaults.WEB_PORT, help=f"포트 (기본: {Defaults.WEB_PORT})")
    parser.add_argument("--reload", action="store_true", help="코드 변경 시 자동 재시작 (개발용)")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    uvicorn.run(
        "web.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )
