"""
Numeric — Float-хелперы поверх точной десятичной арифметики

Модуль обеспечивает:
- Явно названную политику деления на ноль: safe_div возвращает 0.0
- Сравнения float с толерантностью (is_zero / is_equal)
- Знак, clamp, линейную интерполяцию
- Процент и сложный процент

Все промежуточные вычисления выполняются в DecimalValue; float появляется
только на входе и на выходе.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. safe_div — ЕДИНСТВЕННОЕ место, где нулевой делитель даёт 0;
   core.arithmetic.divide для нулевого делителя всегда бросает DivisionByZero
2. Толерантности берутся из ArithmeticConfig, а не захардкожены
"""

import math
from typing import Optional

from decimath.config import DEFAULT_CONFIG, ArithmeticConfig
from decimath.core import arithmetic, precision
from decimath.core.decimal_value import ONE, DecimalValue
from decimath.logger import get_logger

logger = get_logger(__name__)


def _d(value: float) -> DecimalValue:
    return DecimalValue.from_float(value)


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def safe_div(dividend: float, divisor: float, places: int, fallback: float = 0.0) -> float:
    """
    Деление с политикой "нулевой делитель → fallback".

    В отличие от core.arithmetic.divide (DivisionByZero) эта функция
    намеренно возвращает fallback (default: 0.0) при divisor == 0.

    Args:
        dividend: Делимое
        divisor: Делитель
        places: Знаков после запятой (half-away-from-zero)
        fallback: Значение при нулевом делителе

    Returns:
        Частное как float или fallback

    Examples:
        >>> safe_div(10.0, 2.0, 2)
        5.0
        >>> safe_div(10.0, 0.0, 2)
        0.0
    """
    if divisor == 0:
        logger.debug("safe_div: zero divisor for dividend %r, returning fallback %r", dividend, fallback)
        return fallback

    return arithmetic.divide(_d(dividend), _d(divisor), places).to_float()


# =============================================================================
# КОРРЕКТНОСТЬ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Только такие значения имеют десятичное представление.
    """
    return math.isfinite(value)


# =============================================================================
# СРАВНЕНИЯ С ТОЛЕРАНТНОСТЬЮ
# =============================================================================


def is_zero(value: float, config: ArithmeticConfig = DEFAULT_CONFIG) -> bool:
    """
    Проверка, близко ли значение к нулю: |value| < config.zero_tolerance.

    Examples:
        >>> is_zero(1e-11)
        True
        >>> is_zero(1e-9)
        False
    """
    return abs(value) < config.zero_tolerance


def is_equal(a: float, b: float, config: ArithmeticConfig = DEFAULT_CONFIG) -> bool:
    """
    Равенство float с толерантностью: |a - b| < config.equality_tolerance.

    Разность считается точно (в DecimalValue), сравнивается с порогом.

    Examples:
        >>> is_equal(0.1 + 0.2, 0.3)
        True
        >>> is_equal(1.0, 1.1)
        False
    """
    diff = arithmetic.absolute(arithmetic.subtract(_d(a), _d(b)))
    return diff < _d(config.equality_tolerance)


def is_positive(value: float) -> bool:
    return value > 0


def is_negative(value: float) -> bool:
    return value < 0


def sign(value: float) -> int:
    """-1, 0 или 1."""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


# =============================================================================
# ОГРАНИЧЕНИЕ И ИНТЕРПОЛЯЦИЯ
# =============================================================================


def clamp(
    value: float,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
) -> float:
    """
    value, прижатое к отрезку [min_value, max_value].

    Границы сравниваются точно (через DecimalValue), как в result.clamp_safe;
    None снимает соответствующую границу.

    Raises:
        ValueError: Если обе границы заданы и min_value > max_value

    Examples:
        >>> clamp(12.5, 0.0, 10.0)
        10.0
        >>> clamp(-0.25, min_value=0.0)
        0.0
        >>> clamp(3.0, max_value=2.5)
        2.5
    """
    current = _d(value)
    lower = None if min_value is None else _d(min_value)
    upper = None if max_value is None else _d(max_value)

    if lower is not None and upper is not None and lower > upper:
        raise ValueError(f"lower bound {min_value} is greater than upper bound {max_value}")

    if lower is not None and current < lower:
        return float(min_value)
    if upper is not None and current > upper:
        return float(max_value)
    return float(value)


def lerp(a: float, b: float, t: float) -> float:
    """
    Линейная интерполяция a + (b - a) * t в десятичной арифметике.

    Examples:
        >>> lerp(0.0, 10.0, 0.5)
        5.0
        >>> lerp(10.0, 20.0, 0.25)
        12.5
    """
    start = _d(a)
    span = arithmetic.subtract(_d(b), start)
    return arithmetic.add(start, arithmetic.multiply(span, _d(t))).to_float()


# =============================================================================
# ПРОЦЕНТЫ
# =============================================================================


def percentage(value: float, percent: float, config: ArithmeticConfig = DEFAULT_CONFIG) -> float:
    """
    percent% от value.

    Доля percent / 100 округляется до config.division_precision знаков.

    Examples:
        >>> percentage(200.0, 15.0)
        30.0
    """
    fraction = arithmetic.divide(_d(percent), DecimalValue(100), config.division_precision)
    return arithmetic.multiply(_d(value), fraction).to_float()


def compound_interest(
    principal: float,
    rate: float,
    periods: int,
    config: ArithmeticConfig = DEFAULT_CONFIG,
) -> float:
    """
    Итоговая сумма principal * (1 + rate) ** periods.

    Степень целая, поэтому считается точно; перед переводом во float
    результат округляется до config.division_precision знаков, так что
    длина коэффициента не растёт с числом периодов на выходе.

    Args:
        principal: Начальная сумма
        rate: Ставка за период (0.05 = 5%)
        periods: Число периодов; periods <= 0 возвращает principal
        config: Точность округления результата

    Examples:
        >>> compound_interest(1000.0, 0.1, 2)
        1210.0
    """
    if periods <= 0:
        return principal

    growth = arithmetic.power(arithmetic.add(ONE, _d(rate)), DecimalValue(periods))
    amount = arithmetic.multiply(_d(principal), growth)
    return precision.round_to(amount, config.division_precision).to_float()
