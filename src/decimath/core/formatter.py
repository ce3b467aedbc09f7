"""
Formatter — Строковое представление DecimalValue

- to_plain_string: цифры с собственным масштабом значения
- to_fixed_string: ровно N знаков, half-away-from-zero
- to_bankers_rounded_string: ровно N знаков, half-to-even (отдельный алгоритм)
- to_money_string: округление + разделитель тысяч в целой части

Отличие fixed vs banker's на ровно половине:
    2.125 → "2.13" (half-away) vs "2.12" (half-even, 2 чётная)
    2.135 → "2.14" (half-away) vs "2.14" (half-even, 3 нечётная)
"""

from typing import Final

from decimath.core.decimal_value import DecimalValue
from decimath.core.precision import round_to
from decimath.core.rounding import RoundingMode

MONEY_GROUP_SEPARATOR: Final[str] = ","
MONEY_GROUP_SIZE: Final[int] = 3


def to_plain_string(value: DecimalValue) -> str:
    """Десятичная строка без экспоненты, масштаб значения сохраняется."""
    return str(value)


def _render_fixed(value: DecimalValue, places: int, mode: RoundingMode) -> str:
    """Округлить по mode и дописать нули до ровно max(places, 0) знаков."""
    rounded = round_to(value, places, mode)
    target_scale = max(places, 0)
    if rounded.scale < target_scale:
        rounded = rounded.rescale(target_scale)
    return str(rounded)


def to_fixed_string(value: DecimalValue, places: int) -> str:
    """
    Строка ровно с `places` знаками после запятой (half-away-from-zero).

    При places <= 0 дробная часть не выводится; places < 0 округляет
    целую часть до 10^(-places).

    Examples:
        >>> to_fixed_string(DecimalValue.from_string("3.14159"), 2)
        '3.14'
        >>> to_fixed_string(DecimalValue.from_string("12.5"), 2)
        '12.50'
        >>> to_fixed_string(DecimalValue.from_string("2.125"), 2)
        '2.13'
    """
    return _render_fixed(value, places, RoundingMode.HALF_AWAY_FROM_ZERO)


def to_bankers_rounded_string(value: DecimalValue, places: int) -> str:
    """
    Строка ровно с `places` знаками, округление half-to-even.

    На ровно половине выбирается ближайшая чётная цифра:

    Examples:
        >>> to_bankers_rounded_string(DecimalValue.from_string("2.125"), 2)
        '2.12'
        >>> to_bankers_rounded_string(DecimalValue.from_string("2.135"), 2)
        '2.14'
        >>> to_bankers_rounded_string(DecimalValue.from_string("2.1251"), 2)
        '2.13'
    """
    return _render_fixed(value, places, RoundingMode.HALF_EVEN)


def group_thousands(digits: str, separator: str = MONEY_GROUP_SEPARATOR) -> str:
    """
    Разделитель каждые 3 цифры справа. Ожидаются только цифры (без знака).

    Examples:
        >>> group_thousands("1234567")
        '1,234,567'
        >>> group_thousands("123")
        '123'
    """
    if len(digits) <= MONEY_GROUP_SIZE:
        return digits
    head = len(digits) % MONEY_GROUP_SIZE or MONEY_GROUP_SIZE
    groups = [digits[:head]]
    for start in range(head, len(digits), MONEY_GROUP_SIZE):
        groups.append(digits[start : start + MONEY_GROUP_SIZE])
    return separator.join(groups)


def to_money_string(value: DecimalValue, places: int) -> str:
    """
    Денежный формат: округление до `places` и разделитель тысяч.

    Разделитель вставляется только в целую часть; знак минус остаётся
    вне группировки.

    Examples:
        >>> to_money_string(DecimalValue.from_string("1234567.89"), 2)
        '1,234,567.89'
        >>> to_money_string(DecimalValue.from_string("-1234567.89"), 2)
        '-1,234,567.89'
        >>> to_money_string(DecimalValue.from_string("123.45"), 2)
        '123.45'
    """
    fixed = to_fixed_string(value, places)

    sign = ""
    if fixed.startswith("-"):
        sign, fixed = "-", fixed[1:]

    integer_part, dot, fractional_part = fixed.partition(".")
    return f"{sign}{group_thousands(integer_part)}{dot}{fractional_part}"
