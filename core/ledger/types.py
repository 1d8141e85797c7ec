"""
장부 타입 정의

잔액 부호(Dr/Cr), 기초잔액 방향, 검증 오류 유형 등
Ledger 계산 모듈에서 사용하는 Enum 정의
"""

from enum import Enum


class BalanceType(str, Enum):
    """잔액 표시 부호

    부호 있는 잔액에서만 파생. 숫자와 별도로 저장하지 않음.
    str을 상속하여 JSON 직렬화 가능.
    """

    DR = "Dr"  # 차변 잔액 (0 포함)
    CR = "Cr"  # 대변 잔액


class EntrySide(str, Enum):
    """기초잔액 방향 (백엔드 obType 값)"""

    DEBIT = "Debit"
    CREDIT = "Credit"

    @property
    def balance_type(self) -> BalanceType:
        """대응하는 표시 부호"""
        return BalanceType.DR if self is EntrySide.DEBIT else BalanceType.CR


class BalanceErrorKind(str, Enum):
    """분개 균형 검증 오류 유형 (평가 순서대로 정의)"""

    UNBALANCED = "Unbalanced"  # 차변 합계 != 대변 합계
    ZERO_AMOUNT = "ZeroAmount"  # 차변/대변 합계가 모두 0
    INCOMPLETE_LINE = "IncompleteLine"  # 계정 미선택 또는 금액 0인 라인


# 기초잔액 가상 행 고정값
OPENING_JOURNAL_ID = "OPENING"
OPENING_VOUCHER_TYPE = "Opening"
OPENING_VOUCHER_NO = "OPN"
OPENING_NARRATION = "Opening Balance carried forward"
OPENING_OPPONENT = "N/A"
