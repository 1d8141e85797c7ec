"""
core/constants.py 테스트

모든 경로가 pathlib.Path 타입이고, 상수가 정상적으로 접근 가능한지 확인
"""

from pathlib import Path

from core.constants import (
    PROJECT_ROOT,
    BackendEndpoints,
    Defaults,
    Paths,
)


class TestProjectRoot:
    """PROJECT_ROOT 테스트"""

    def test_project_root_is_path(self) -> None:
        """PROJECT_ROOT가 Path 타입인지 확인"""
        assert isinstance(PROJECT_ROOT, Path)

    def test_project_root_is_absolute(self) -> None:
        assert PROJECT_ROOT.is_absolute()

    def test_project_root_contains_core_directory(self) -> None:
        """PROJECT_ROOT에 core 디렉토리가 있는지 확인"""
        assert (PROJECT_ROOT / "core").exists()


class TestBackendEndpoints:
    """BackendEndpoints 테스트"""

    def test_production_url(self) -> None:
        assert BackendEndpoints.PROD_API_URL == "https://accounting-backend-euge.onrender.com/api"

    def test_local_url(self) -> None:
        assert BackendEndpoints.LOCAL_API_URL == "http://localhost:5000/api"

    def test_urls_have_no_trailing_slash(self) -> None:
        assert not BackendEndpoints.PROD_API_URL.endswith("/")
        assert not BackendEndpoints.LOCAL_API_URL.endswith("/")


class TestDefaults:
    """Defaults 테스트"""

    def test_report_format(self) -> None:
        assert Defaults.LOCALE == "en-IN"
        assert Defaults.CURRENCY_CODE == "INR"

    def test_min_journal_lines(self) -> None:
        assert Defaults.MIN_JOURNAL_LINES == 2

    def test_timeout_positive(self) -> None:
        assert Defaults.HTTP_TIMEOUT_SEC > 0


class TestPaths:
    """Paths 테스트"""

    def test_all_paths_are_path_objects(self) -> None:
        for name in ("CONFIG_DIR", "LOGS_DIR", "WEB_LOGS_DIR", "CLI_LOGS_DIR", "SETTINGS_FILE"):
            assert isinstance(getattr(Paths, name), Path)

    def test_log_dirs_under_logs(self) -> None:
        assert Paths.WEB_LOGS_DIR.parent == Paths.LOGS_DIR
        assert Paths.CLI_LOGS_DIR.parent == Paths.LOGS_DIR

    def test_settings_file_in_config_dir(self) -> None:
        assert Paths.SETTINGS_FILE.parent == Paths.CONFIG_DIR
        assert Paths.SETTINGS_FILE.name == "settings.yaml"
