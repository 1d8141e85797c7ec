"""
타입 정의 모듈

Enum, Dataclass 등 핵심 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class BackendMode(str, Enum):
    """백엔드 연결 모드 (배포 서버 / 로컬 서버)"""

    PRODUCTION = "production"
    LOCAL = "local"


class VoucherType(str, Enum):
    """전표 유형"""

    JOURNAL = "Journal"
    PAYMENT = "Payment"
    RECEIPT = "Receipt"


class LedgerStatus(str, Enum):
    """계정 상태"""

    ACTIVE = "Active"
    INACTIVE = "Inactive"


class DealerType(str, Enum):
    """거래처 세무 등록 유형 (GST)"""

    REGULAR = "Regular"
    COMPOSITION = "Composition"
    UNREGISTERED = "Unregistered"
    CONSUMER = "Consumer"
