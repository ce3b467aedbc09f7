"""
Rounding — Режимы округления и целочисленный примитив округления

Все операции округления decimath сводятся к одной задаче: округлить
рациональное число numerator / denominator (denominator > 0) до целого
по заданному режиму. Коэффициенты DecimalValue — целые числа Python,
поэтому округление выполняется точно, без промежуточных float.

Точка выбора режима:
- HALF_AWAY_FROM_ZERO — round, divide, to_fixed_string, to_money_string
- HALF_EVEN           — только to_bankers_rounded_string
- TRUNCATE            — truncate, divide_truncate
- CEILING / FLOOR     — ceil / floor
"""

from enum import Enum

from decimath.core.decimal_value import DecimalValue


# =============================================================================
# ENUMS
# =============================================================================


class RoundingMode(str, Enum):
    """Политика округления на отрезаемой цифре"""

    HALF_AWAY_FROM_ZERO = "half_away_from_zero"
    HALF_EVEN = "half_even"
    TRUNCATE = "truncate"
    CEILING = "ceiling"
    FLOOR = "floor"


# =============================================================================
# ЦЕЛОЧИСЛЕННОЕ ОКРУГЛЕНИЕ
# =============================================================================


def round_ratio(numerator: int, denominator: int, mode: RoundingMode) -> int:
    """
    Округление рационального numerator / denominator до целого.

    Args:
        numerator: Числитель (любой знак)
        denominator: Знаменатель, строго положительный
        mode: Режим округления

    Returns:
        Целое число, округлённое согласно mode

    Raises:
        ValueError: Если denominator <= 0

    Examples:
        >>> round_ratio(25, 10, RoundingMode.HALF_AWAY_FROM_ZERO)
        3
        >>> round_ratio(-25, 10, RoundingMode.HALF_AWAY_FROM_ZERO)
        -3
        >>> round_ratio(25, 10, RoundingMode.HALF_EVEN)
        2
        >>> round_ratio(-29, 10, RoundingMode.TRUNCATE)
        -2
    """
    if denominator <= 0:
        raise ValueError(f"denominator must be positive, got {denominator}")

    negative = numerator < 0
    quotient, remainder = divmod(abs(numerator), denominator)

    if remainder == 0:
        return -quotient if negative else quotient

    if mode is RoundingMode.TRUNCATE:
        round_up = False
    elif mode is RoundingMode.CEILING:
        round_up = not negative
    elif mode is RoundingMode.FLOOR:
        round_up = negative
    else:
        twice = 2 * remainder
        if twice > denominator:
            round_up = True
        elif twice < denominator:
            round_up = False
        elif mode is RoundingMode.HALF_EVEN:
            # Ровно половина: к ближайшему чётному
            round_up = quotient % 2 == 1
        else:
            round_up = True

    if round_up:
        quotient += 1

    return -quotient if negative else quotient


def drop_digits(coefficient: int, digits: int, mode: RoundingMode) -> int:
    """
    Отбросить `digits` младших десятичных цифр коэффициента с округлением.

    Эквивалентно round_ratio(coefficient, 10**digits, mode).

    Examples:
        >>> drop_digits(3145, 1, RoundingMode.HALF_AWAY_FROM_ZERO)
        315
        >>> drop_digits(3145, 1, RoundingMode.TRUNCATE)
        314
    """
    if digits < 0:
        raise ValueError(f"digits must be non-negative, got {digits}")
    if digits == 0:
        return coefficient
    return round_ratio(coefficient, 10**digits, mode)


# =============================================================================
# КВАНТОВАНИЕ DECIMAL VALUE
# =============================================================================


def quantize(value: DecimalValue, places: int, mode: RoundingMode) -> DecimalValue:
    """
    Округлить value до `places` знаков после запятой (places >= 0).

    Если масштаб value уже не больше places, значение возвращается как есть
    (без дописывания нулей).

    Raises:
        ValueError: Если places < 0 (отрицательная точность обрабатывается
                    явной веткой в вызывающем коде)
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")
    if value.scale <= places:
        return value
    return DecimalValue(drop_digits(value.coefficient, value.scale - places, mode), places)


def quantize_ratio(numerator: int, denominator: int, places: int, mode: RoundingMode) -> DecimalValue:
    """
    Округлить рациональное numerator / denominator до `places` знаков (places >= 0).

    Знак знаменателя переносится в числитель.

    Raises:
        ValueError: Если places < 0 или denominator == 0
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")
    if denominator == 0:
        raise ValueError("denominator must be non-zero")
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    return DecimalValue(round_ratio(numerator * 10**places, denominator, mode), places)
