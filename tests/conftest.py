"""
pytest 공통 fixture 정의

설정 파일, 세션, 명세서 입력 데이터 fixture
"""

import tempfile
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from core.config.loader import Settings
from core.ledger.statement import OpeningBalance, TransactionLine
from core.ledger.types import EntrySide


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_settings_file(temp_dir: Path) -> Path:
    """테스트용 settings.yaml 파일 생성 (production 모드)"""
    settings_content = """# 테스트용 settings.yaml
mode: production

backend:
  timeout_sec: 15

report:
  locale: en-IN
  currency_code: INR
"""
    settings_path = temp_dir / "settings.yaml"
    settings_path.write_text(settings_content, encoding="utf-8")
    return settings_path


@pytest.fixture
def temp_settings_file_local(temp_dir: Path) -> Path:
    """local 모드 + base_url 미지정"""
    settings_path = temp_dir / "settings_local.yaml"
    settings_path.write_text("mode: local\n", encoding="utf-8")
    return settings_path


@pytest.fixture
def temp_settings_file_override(temp_dir: Path) -> Path:
    """base_url 명시 (모드보다 우선)"""
    settings_content = """mode: local

backend:
  base_url: "http://backend.test/api/"
  timeout_sec: 5

report:
  locale: en-US
  currency_code: USD
"""
    settings_path = temp_dir / "settings_override.yaml"
    settings_path.write_text(settings_content, encoding="utf-8")
    return settings_path


@pytest.fixture
def temp_settings_file_invalid_mode(temp_dir: Path) -> Path:
    """잘못된 모드의 settings.yaml 파일 생성"""
    settings_path = temp_dir / "settings_invalid.yaml"
    settings_path.write_text("mode: staging\n", encoding="utf-8")
    return settings_path


@pytest.fixture
def reset_settings():
    """Settings 싱글턴 초기화 (테스트 전후)"""
    Settings.reset()
    yield
    Settings.reset()


# -------------------------------------------------------------------------
# 명세서 입력 데이터
# -------------------------------------------------------------------------


@pytest.fixture
def debit_opening() -> OpeningBalance:
    return OpeningBalance(amount=Decimal("1000"), side=EntrySide.DEBIT)


@pytest.fixture
def sample_transactions() -> list[TransactionLine]:
    """시간순 거래 3건 (차변 500, 대변 2000, 차변 300)"""
    return [
        TransactionLine(
            debit=Decimal("500"),
            journal_id="j1",
            date=date(2024, 4, 5),
            voucher_type="Receipt",
            voucher_no="RV-001",
            narration="Cash received",
            opponent_ledger_name="Sales",
        ),
        TransactionLine(
            credit=Decimal("2000"),
            journal_id="j2",
            date=date(2024, 4, 12),
            voucher_type="Payment",
            voucher_no="PV-001",
            narration="Rent paid",
            line_narration="April rent",
            opponent_ledger_name="Rent",
        ),
        TransactionLine(
            debit=Decimal("300"),
            journal_id="j3",
            date=date(2024, 4, 20),
            voucher_type="Journal",
            voucher_no="JV-001",
            narration="Adjustment",
        ),
    ]
