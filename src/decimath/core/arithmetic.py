"""
ArithmeticOps — Точная десятичная арифметика над DecimalValue

Модуль обеспечивает:
- Точные add / subtract / multiply (масштаб результата — алгебраический)
- divide с округлением half-away-from-zero до заданной точности
- divide_truncate — отдельный путь с отбрасыванием цифр к нулю
- power (целая и дробная степень), sqrt (метод Ньютона с ограниченным числом итераций)
- ceil / floor / absolute / negate

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. add/subtract/multiply не теряют информации
2. Делитель 0 → DivisionByZero, никогда не 0
3. divide и divide_truncate не смешиваются: 2/3 до 2 знаков = 0.67 vs 0.66
4. sqrt отрицательного → 0 (sentinel), а не исключение
5. Все циклы ограничены (sqrt_iterations)
"""

from decimal import ROUND_HALF_EVEN, localcontext
from typing import Final, Optional

from decimath.config import DEFAULT_CONFIG, ArithmeticConfig
from decimath.core.decimal_value import ONE, TWO, ZERO, DecimalValue
from decimath.core.errors import DivisionByZero
from decimath.core.rounding import RoundingMode, quantize, quantize_ratio, round_ratio
from decimath.logger import get_logger

logger = get_logger(__name__)

# Дополнительные знаки для промежуточных шагов sqrt
SQRT_GUARD_DIGITS: Final[int] = 2

# Дополнительные значащие цифры контекста для дробной степени
POWER_GUARD_DIGITS: Final[int] = 10


# =============================================================================
# СЛОЖЕНИЕ, ВЫЧИТАНИЕ, УМНОЖЕНИЕ
# =============================================================================


def add(a: DecimalValue, b: DecimalValue) -> DecimalValue:
    """
    Точная сумма; масштаб = max(a.scale, b.scale).

    Examples:
        >>> add(DecimalValue.from_string("0.1"), DecimalValue.from_string("0.2"))
        DecimalValue('0.3')
    """
    x, y = a.aligned_with(b)
    return DecimalValue(x + y, max(a.scale, b.scale))


def subtract(a: DecimalValue, b: DecimalValue) -> DecimalValue:
    """Точная разность; масштаб = max(a.scale, b.scale)."""
    x, y = a.aligned_with(b)
    return DecimalValue(x - y, max(a.scale, b.scale))


def multiply(a: DecimalValue, b: DecimalValue) -> DecimalValue:
    """
    Точное произведение; масштаб = a.scale + b.scale.

    Examples:
        >>> multiply(DecimalValue.from_string("0.1"), DecimalValue.from_string("0.2"))
        DecimalValue('0.02')
    """
    return DecimalValue(a.coefficient * b.coefficient, a.scale + b.scale)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def _quotient_terms(a: DecimalValue, b: DecimalValue) -> tuple[int, int]:
    """
    Числитель и знаменатель точного частного a / b.

    a / b = (ca / 10^sa) / (cb / 10^sb) = ca * 10^sb / (cb * 10^sa)

    Raises:
        DivisionByZero: Если b == 0
    """
    if b.is_zero():
        raise DivisionByZero(f"division by zero: {a} / {b}")
    return a.coefficient * 10**b.scale, b.coefficient * 10**a.scale


def divide(
    a: DecimalValue,
    b: DecimalValue,
    precision: int,
    mode: RoundingMode = RoundingMode.HALF_AWAY_FROM_ZERO,
) -> DecimalValue:
    """
    Деление с ОКРУГЛЕНИЕМ до `precision` знаков после запятой.

    Args:
        a: Делимое
        b: Делитель
        precision: Знаков после запятой; отрицательное значение округляет
                   до 10^(-precision) (результат с масштабом 0)
        mode: Режим округления (default: half-away-from-zero)

    Returns:
        Частное с масштабом precision (или 0 при precision < 0)

    Raises:
        DivisionByZero: Если b == 0

    Examples:
        >>> divide(DecimalValue(10), DecimalValue(3), 2)
        DecimalValue('3.33')
        >>> divide(DecimalValue(2), DecimalValue(3), 2)
        DecimalValue('0.67')
    """
    numerator, denominator = _quotient_terms(a, b)

    if precision < 0:
        factor = 10**-precision
        return DecimalValue(quantize_ratio(numerator, denominator * factor, 0, mode).coefficient * factor)

    return quantize_ratio(numerator, denominator, precision, mode)


def divide_truncate(a: DecimalValue, b: DecimalValue, precision: int) -> DecimalValue:
    """
    Деление с ОТБРАСЫВАНИЕМ цифр (к нулю) до `precision` знаков.

    Отдельный путь от divide: 2 / 3 до 2 знаков даёт 0.66, а не 0.67.

    Raises:
        DivisionByZero: Если b == 0

    Examples:
        >>> divide_truncate(DecimalValue(2), DecimalValue(3), 2)
        DecimalValue('0.66')
        >>> divide_truncate(DecimalValue(-10), DecimalValue(3), 2)
        DecimalValue('-3.33')
    """
    numerator, denominator = _quotient_terms(a, b)
    if denominator < 0:
        numerator, denominator = -numerator, -denominator

    if precision < 0:
        factor = 10**-precision
        return DecimalValue(round_ratio(numerator, denominator * factor, RoundingMode.TRUNCATE) * factor)

    return DecimalValue(
        round_ratio(numerator * 10**precision, denominator, RoundingMode.TRUNCATE),
        precision,
    )


# =============================================================================
# СТЕПЕНЬ И КОРЕНЬ
# =============================================================================


def power(
    base: DecimalValue,
    exponent: DecimalValue,
    precision: Optional[int] = None,
    config: ArithmeticConfig = DEFAULT_CONFIG,
) -> DecimalValue:
    """
    Возведение в степень.

    - Целая неотрицательная степень: точно (масштаб base.scale * n)
    - Целая отрицательная: 1 / base^|n| с округлением до precision знаков,
      хвостовые нули убираются
    - Дробная степень положительного base: вычисляется в decimal-контексте
      повышенной точности, округляется до precision знаков, хвостовые нули
      убираются
    - Дробная степень отрицательного base: 0 (sentinel, как у sqrt)

    Args:
        base: Основание
        exponent: Показатель
        precision: Знаков после запятой для нецелых результатов
                   (default: config.power_precision)
        config: Конфигурация точностей

    Raises:
        DivisionByZero: 0 в отрицательной степени

    Examples:
        >>> power(DecimalValue(2), DecimalValue(3))
        DecimalValue('8')
        >>> power(DecimalValue(2), DecimalValue(-1))
        DecimalValue('0.5')
        >>> power(DecimalValue(4), DecimalValue.from_string("0.5"))
        DecimalValue('2')
    """
    if precision is None:
        precision = config.power_precision

    if exponent.is_integer():
        n = exponent.coefficient // 10**exponent.scale
        if n >= 0:
            return DecimalValue(base.coefficient**n, base.scale * n)
        if base.is_zero():
            raise DivisionByZero(f"zero raised to negative power {exponent}")
        denominator = DecimalValue(base.coefficient**-n, base.scale * -n)
        return divide(ONE, denominator, precision).normalized()

    if base.is_zero():
        if exponent.is_negative():
            raise DivisionByZero(f"zero raised to negative power {exponent}")
        return ZERO

    if base.is_negative():
        logger.debug("fractional power %s of negative base %s, returning zero", exponent, base)
        return ZERO

    # Порядок результата ~ exponent * (magnitude + 1); цифр контекста
    # должно хватить на целую часть, precision знаков и запас
    estimated_int_digits = int(abs(exponent.to_fraction()) * (abs(base.magnitude()) + 1)) + 1
    with localcontext() as ctx:
        ctx.prec = estimated_int_digits + precision + POWER_GUARD_DIGITS
        ctx.rounding = ROUND_HALF_EVEN
        raw = base.to_decimal() ** exponent.to_decimal()

    return quantize(DecimalValue.from_decimal(raw), precision, RoundingMode.HALF_AWAY_FROM_ZERO).normalized()


def _initial_sqrt_guess(value: DecimalValue) -> DecimalValue:
    """Начальное приближение того же порядка, что и sqrt(value)."""
    m = value.magnitude()
    half = m // 2
    lead = 3 if m % 2 else 1
    if half >= 0:
        return DecimalValue(lead * 10**half)
    return DecimalValue(lead, -half)


def sqrt(
    value: DecimalValue,
    precision: Optional[int] = None,
    iterations: Optional[int] = None,
    config: ArithmeticConfig = DEFAULT_CONFIG,
) -> DecimalValue:
    """
    Квадратный корень методом Ньютона с фиксированным лимитом итераций.

    ПОЛИТИКА: sqrt отрицательного числа возвращает 0 (sentinel), а не
    исключение. Вызывающий код может опираться на это значение.

    Args:
        value: Подкоренное значение
        precision: Знаков после запятой (default: config.sqrt_precision)
        iterations: Максимум итераций (default: config.sqrt_iterations)
        config: Конфигурация точностей

    Returns:
        Корень с масштабом precision; 0 для value <= 0

    Examples:
        >>> sqrt(DecimalValue(16))
        DecimalValue('4.0000000000')
        >>> sqrt(DecimalValue(-4))
        DecimalValue('0')
    """
    if precision is None:
        precision = config.sqrt_precision
    if iterations is None:
        iterations = config.sqrt_iterations

    if value.is_negative():
        logger.debug("sqrt of negative value %s, returning zero", value)
        return ZERO
    if value.is_zero():
        return ZERO

    working = precision + SQRT_GUARD_DIGITS
    guess = _initial_sqrt_guess(value)

    for _ in range(iterations):
        candidate = divide(add(guess, divide(value, guess, working)), TWO, working)
        if candidate == guess or candidate.is_zero():
            guess = candidate
            break
        guess = candidate

    result = quantize(guess, precision, RoundingMode.HALF_AWAY_FROM_ZERO)
    if result.scale < precision:
        result = result.rescale(precision)
    return result


# =============================================================================
# ЦЕЛАЯ ЧАСТЬ, МОДУЛЬ, ЗНАК
# =============================================================================


def ceil(value: DecimalValue) -> DecimalValue:
    """
    Наименьшее целое >= value (масштаб 0).

    Examples:
        >>> ceil(DecimalValue.from_string("-3.2"))
        DecimalValue('-3')
    """
    if value.scale == 0:
        return value
    return quantize(value, 0, RoundingMode.CEILING)


def floor(value: DecimalValue) -> DecimalValue:
    """Наибольшее целое <= value (масштаб 0)."""
    if value.scale == 0:
        return value
    return quantize(value, 0, RoundingMode.FLOOR)


def absolute(value: DecimalValue) -> DecimalValue:
    """Модуль; масштаб сохраняется."""
    if value.coefficient >= 0:
        return value
    return DecimalValue(-value.coefficient, value.scale)


def negate(value: DecimalValue) -> DecimalValue:
    """Смена знака; масштаб сохраняется."""
    return DecimalValue(-value.coefficient, value.scale)
