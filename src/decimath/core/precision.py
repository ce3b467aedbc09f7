"""
PrecisionOps — Округление, отбрасывание цифр, очистка хвостовых нулей

Модуль обеспечивает:
- round_to: half-away-from-zero до N знаков, N может быть отрицательным
- truncate_to: отбрасывание к нулю до N знаков, N может быть отрицательным
- clean: удаление хвостовых нулей дробной части
- is_equal_within_precision: сравнение с толерантностью 10^(-places)

Отрицательная точность — ОТДЕЛЬНАЯ явная ветка:
    value / 10^(-places) → округление до 0 знаков → * 10^(-places)
DecimalValue не допускает отрицательного масштаба, поэтому отрицательное
places никогда не передаётся в quantize напрямую.

Примеры:
    round_to(123.456, -1)    = 120
    truncate_to(123.456, -1) = 120
    round_to(3.145, 2)       = 3.15
    truncate_to(3.145, 2)    = 3.14
"""

from decimath.core.arithmetic import absolute, divide, divide_truncate, multiply, subtract
from decimath.core.decimal_value import DecimalValue
from decimath.core.rounding import RoundingMode, quantize


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def _power_of_ten(exponent: int) -> DecimalValue:
    return DecimalValue(10**exponent)


def round_to(
    value: DecimalValue,
    places: int,
    mode: RoundingMode = RoundingMode.HALF_AWAY_FROM_ZERO,
) -> DecimalValue:
    """
    Округление до `places` знаков после запятой.

    Args:
        value: Исходное значение
        places: Знаков после запятой; places < 0 округляет до 10^(-places)
        mode: Режим округления (default: half-away-from-zero)

    Returns:
        Округлённое значение. Если масштаб value меньше places, значение
        не меняется (нули не дописываются)

    Examples:
        >>> round_to(DecimalValue.from_string("3.145"), 2)
        DecimalValue('3.15')
        >>> round_to(DecimalValue.from_string("-2.5"), 0)
        DecimalValue('-3')
        >>> round_to(DecimalValue.from_string("123.456"), -1)
        DecimalValue('120')
    """
    if places >= 0:
        return quantize(value, places, mode)

    step = _power_of_ten(-places)
    return multiply(divide(value, step, 0, mode), step)


def truncate_to(value: DecimalValue, places: int) -> DecimalValue:
    """
    Отбрасывание цифр (к нулю) до `places` знаков после запятой.

    Examples:
        >>> truncate_to(DecimalValue.from_string("3.145"), 2)
        DecimalValue('3.14')
        >>> truncate_to(DecimalValue.from_string("-3.9"), 0)
        DecimalValue('-3')
        >>> truncate_to(DecimalValue.from_string("123.456"), -1)
        DecimalValue('120')
    """
    if places >= 0:
        return quantize(value, places, RoundingMode.TRUNCATE)

    step = _power_of_ten(-places)
    return multiply(divide_truncate(value, step, 0), step)


# =============================================================================
# ОЧИСТКА
# =============================================================================


def clean(value: DecimalValue) -> DecimalValue:
    """
    Удаление хвостовых нулей дробной части и пустой дробной части.

    Нули целой части не затрагиваются. Идемпотентна: clean(clean(x)) == clean(x).

    Examples:
        >>> clean(DecimalValue.from_string("3.140"))
        DecimalValue('3.14')
        >>> clean(DecimalValue.from_string("4.00"))
        DecimalValue('4')
        >>> clean(DecimalValue.from_string("100"))
        DecimalValue('100')
    """
    return value.normalized()


# =============================================================================
# СРАВНЕНИЕ С ТОЛЕРАНТНОСТЬЮ
# =============================================================================


def is_equal_within_precision(a: DecimalValue, b: DecimalValue, places: int) -> bool:
    """
    True если |a - b| < 10^(-places).

    Это сравнение с толерантностью, а не точное равенство DecimalValue.

    Examples:
        >>> is_equal_within_precision(DecimalValue.from_string("3.14"),
        ...                           DecimalValue.from_string("3.1400000001"), 8)
        True
        >>> is_equal_within_precision(DecimalValue.from_string("3.14"),
        ...                           DecimalValue.from_string("3.15"), 2)
        False
    """
    diff = absolute(subtract(a, b))
    if places >= 0:
        tolerance = DecimalValue(1, places)
    else:
        tolerance = _power_of_ten(-places)
    return diff < tolerance
