"""
설정 로더

settings.yaml 로드 및 백엔드 연결 설정 생성
"""

from dataclasses import dataclass
from pathlib import Path

import yaml

from core.constants import BackendEndpoints, Defaults, Paths
from core.types import BackendMode


@dataclass(frozen=True)
class AppConfig:
    """애플리케이션 설정 (settings.yaml에서 로드)

    불변 데이터 구조로 설정 변경 방지
    """

    mode: BackendMode
    base_url_override: str | None
    timeout_sec: float
    locale: str
    currency_code: str


@dataclass(frozen=True)
class BackendConfig:
    """회계 백엔드 연결 설정"""

    base_url: str
    timeout_sec: float


class SettingsLoadError(Exception):
    """Settings 로드 실패 예외"""

    pass


def load_config(path: Path | None = None) -> AppConfig:
    """settings.yaml 파일 로드

    Args:
        path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        AppConfig 인스턴스

    Raises:
        SettingsLoadError: 파일이 없거나 형식이 잘못된 경우
        ValueError: 유효하지 않은 mode인 경우
    """
    if path is None:
        path = Paths.SETTINGS_FILE

    if not path.exists():
        raise SettingsLoadError(f"settings.yaml 파일을 찾을 수 없습니다: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SettingsLoadError(f"settings.yaml 파싱 실패: {e}") from e

    if data is None:
        raise SettingsLoadError("settings.yaml이 비어 있습니다")

    if not isinstance(data, dict):
        raise SettingsLoadError("settings.yaml 최상위는 매핑이어야 합니다")

    # mode 검증
    mode_str = data.get("mode")
    if mode_str is None:
        raise SettingsLoadError("settings.yaml에 'mode' 필드가 없습니다")

    try:
        mode = BackendMode(mode_str)
    except ValueError as e:
        valid_modes = [m.value for m in BackendMode]
        raise ValueError(
            f"유효하지 않은 mode입니다: '{mode_str}'. "
            f"유효한 값: {valid_modes}"
        ) from e

    backend_config = data.get("backend") or {}
    report_config = data.get("report") or {}

    base_url = backend_config.get("base_url") or None

    try:
        timeout_sec = float(backend_config.get("timeout_sec", Defaults.HTTP_TIMEOUT_SEC))
    except (TypeError, ValueError) as e:
        raise SettingsLoadError(
            f"settings.yaml의 backend.timeout_sec 값이 잘못되었습니다: {e}"
        ) from e

    if timeout_sec <= 0:
        raise SettingsLoadError("backend.timeout_sec은 0보다 커야 합니다")

    return AppConfig(
        mode=mode,
        base_url_override=base_url.rstrip("/") if base_url else None,
        timeout_sec=timeout_sec,
        locale=report_config.get("locale") or Defaults.LOCALE,
        currency_code=report_config.get("currency_code") or Defaults.CURRENCY_CODE,
    )


def get_backend_config(config: AppConfig) -> BackendConfig:
    """모드에 따른 백엔드 설정 반환

    base_url이 명시되어 있으면 모드와 관계없이 우선 사용.

    Args:
        config: AppConfig 인스턴스

    Returns:
        BackendConfig 인스턴스
    """
    if config.base_url_override:
        base_url = config.base_url_override
    elif config.mode == BackendMode.PRODUCTION:
        base_url = BackendEndpoints.PROD_API_URL
    else:
        base_url = BackendEndpoints.LOCAL_API_URL

    return BackendConfig(base_url=base_url, timeout_sec=config.timeout_sec)


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    settings.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _config: AppConfig | None = None

    def __new__(cls, settings_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, settings_path: Path | None = None) -> None:
        if self._config is None:
            type(self)._config = load_config(settings_path)

    @property
    def mode(self) -> BackendMode:
        """현재 백엔드 모드"""
        assert self._config is not None
        return self._config.mode

    @property
    def backend(self) -> BackendConfig:
        """현재 모드의 백엔드 설정"""
        assert self._config is not None
        return get_backend_config(self._config)

    @property
    def locale(self) -> str:
        """보고서 숫자 표시 로케일"""
        assert self._config is not None
        return self._config.locale

    @property
    def currency_code(self) -> str:
        """보고서 통화 코드"""
        assert self._config is not None
        return self._config.currency_code

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._config = None


def get_settings(settings_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        settings_path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(settings_path)
