"""
잔액 표시 형식

모든 렌더링 경로(JSON 응답, PDF, CLI)가 이 모듈을 통해서만
금액과 Dr/Cr 부호를 표시한다.
"""

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

from core.constants import Defaults
from core.ledger.types import BalanceType


CENT = Decimal("0.01")

# 인도식 자릿수 구분 (12,34,567.00)을 사용하는 로케일
INDIAN_GROUPING_LOCALES = {"en-IN", "hi-IN"}


def balance_type_of(signed: Decimal) -> BalanceType:
    """부호 있는 잔액의 표시 부호

    0은 차변(Dr)으로 취급.
    """
    return BalanceType.DR if signed >= 0 else BalanceType.CR


def _group_digits(digits: str, locale: str) -> str:
    """정수부 자릿수 구분 쉼표 삽입"""
    if len(digits) <= 3:
        return digits

    if locale in INDIAN_GROUPING_LOCALES:
        # 마지막 3자리, 그 앞은 2자리씩
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        return ",".join(groups + [tail])

    return f"{int(digits):,}"


def format_amount(amount: Decimal, locale: str = Defaults.LOCALE) -> str:
    """금액 표시 (소수점 2자리 고정, 로케일별 천 단위 구분)

    Args:
        amount: 금액 (음수면 '-' 접두)
        locale: 표시 로케일 (en-IN이면 인도식 구분)

    Returns:
        예: format_amount(Decimal("1234567.5")) -> "12,34,567.50"
    """
    quantized = Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    sign = "-" if quantized < 0 else ""
    integer_part, _, fraction = f"{abs(quantized):.2f}".partition(".")
    return f"{sign}{_group_digits(integer_part, locale)}.{fraction}"


def format_entry_amount(amount: Decimal, locale: str = Defaults.LOCALE) -> str:
    """차변/대변 열 표시 (0 이하는 "-")"""
    return format_amount(amount, locale) if amount > 0 else "-"


def format_balance(signed: Decimal, locale: str = Defaults.LOCALE) -> str:
    """부호 있는 잔액을 "<절대값> Dr|Cr" 형식으로 표시"""
    return f"{format_amount(abs(signed), locale)} {balance_type_of(signed).value}"


def format_report_date(value: date | datetime | str | None) -> str:
    """보고서 날짜 표시 (dd/mm/yyyy)

    값이 없거나 'N/A'이면 '-', 해석할 수 없는 문자열은 그대로 반환.
    """
    if value is None or value == "" or value == "N/A":
        return "-"

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value

    return value.strftime("%d/%m/%Y")
