"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → ledgerdesk/)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class BackendEndpoints:
    """회계 백엔드 API 엔드포인트 (고정값)

    모든 장부 데이터(회사, 계정, 전표)는 백엔드가 소유.
    """

    # Production (Render 배포)
    PROD_API_URL: str = "https://accounting-backend-euge.onrender.com/api"

    # Local (개발용 Express 서버)
    LOCAL_API_URL: str = "http://localhost:5000/api"


class Defaults:
    """기본값 상수"""

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 8000

    HTTP_TIMEOUT_SEC: float = 30.0

    # 보고서 표시 형식 (인도식 자릿수 구분)
    LOCALE: str = "en-IN"
    CURRENCY_CODE: str = "INR"

    # 분개 입력 폼 최소 라인 수
    MIN_JOURNAL_LINES: int = 2


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    WEB_LOGS_DIR: Path = LOGS_DIR / "web"
    CLI_LOGS_DIR: Path = LOGS_DIR / "cli"

    # 설정 파일
    SETTINGS_FILE: Path = CONFIG_DIR / "settings.yaml"
