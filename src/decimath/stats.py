"""
Stats — Агрегаты над коллекциями чисел

Листовые потребители ядра: каждое значение проходит через DecimalValue,
сумма и разности считаются точно, деление — с округлением до
config.division_precision знаков.

Три семьи:
- float/int: maximum, minimum, total, average, median, standard_deviation, describe
- DecimalValue: decimal_sum, decimal_max, decimal_min
- Result (safe): sum_safe, max_safe, min_safe, average_safe

Пустой вход возвращает 0 (или default для maximum/minimum), а не исключение.
"""

from typing import Iterable, NamedTuple, Sequence, TypeVar, Union

from decimath.config import DEFAULT_CONFIG, ArithmeticConfig
from decimath.core import arithmetic
from decimath.core.decimal_value import TWO, ZERO, DecimalValue
from decimath.result import Exact, Result, coerce_exact

T = TypeVar("T")

Number = Union[int, float]


class SummaryStatistics(NamedTuple):
    """Сводка по выборке."""

    count: int
    total: float
    mean: float
    median: float
    std_dev: float
    minimum: float
    maximum: float


# =============================================================================
# FLOAT / INT
# =============================================================================


def _exact(value: Number) -> DecimalValue:
    return DecimalValue.from_float(value)


def _exact_total(values: Iterable[Number]) -> DecimalValue:
    result = ZERO
    for value in values:
        result = arithmetic.add(result, _exact(value))
    return result


def maximum(*values: T, default: T = 0) -> T:
    """
    Наибольшее значение любого упорядоченного типа; пустой вход → default.

    Examples:
        >>> maximum(3, 7, 5)
        7
        >>> maximum("a", "c", "b")
        'c'
    """
    if not values:
        return default
    best = values[0]
    for value in values[1:]:
        if value > best:
            best = value
    return best


def minimum(*values: T, default: T = 0) -> T:
    """Наименьшее значение любого упорядоченного типа; пустой вход → default."""
    if not values:
        return default
    best = values[0]
    for value in values[1:]:
        if value < best:
            best = value
    return best


def total(*values: Number) -> Number:
    """
    Точная сумма. Для одних int возвращается int, иначе float.

    Examples:
        >>> total(1, 2, 3)
        6
        >>> total(0.5, 0.25)
        0.75
    """
    if all(isinstance(v, int) and not isinstance(v, bool) for v in values):
        return sum(values)
    return _exact_total(values).to_float()


def average(*values: Number, config: ArithmeticConfig = DEFAULT_CONFIG) -> float:
    """
    Среднее арифметическое; пустой вход → 0.0.

    Examples:
        >>> average(1, 2, 3, 4)
        2.5
    """
    if not values:
        return 0.0
    return _mean(values, config).to_float()


def _mean(values: Sequence[Number], config: ArithmeticConfig) -> DecimalValue:
    return arithmetic.divide(_exact_total(values), DecimalValue(len(values)), config.division_precision)


def median(*values: Number, config: ArithmeticConfig = DEFAULT_CONFIG) -> float:
    """
    Медиана; входная последовательность не изменяется. Пустой вход → 0.0.

    Examples:
        >>> median(3, 1, 2)
        2.0
        >>> median(4, 1, 3, 2)
        2.5
    """
    if not values:
        return 0.0

    ordered = sorted(values)
    n = len(ordered)
    if n % 2 == 1:
        return float(ordered[n // 2])

    pair = arithmetic.add(_exact(ordered[n // 2 - 1]), _exact(ordered[n // 2]))
    return arithmetic.divide(pair, TWO, config.division_precision).to_float()


def standard_deviation(*values: Number, config: ArithmeticConfig = DEFAULT_CONFIG) -> float:
    """
    Выборочное стандартное отклонение (делитель n - 1).

    Меньше двух значений → 0.0.

    Examples:
        >>> round(standard_deviation(85, 92, 78, 96, 88), 2)
        6.87
    """
    if len(values) < 2:
        return 0.0

    mean = _mean(values, config)
    squares = ZERO
    for value in values:
        diff = arithmetic.subtract(_exact(value), mean)
        squares = arithmetic.add(squares, arithmetic.multiply(diff, diff))

    variance = arithmetic.divide(squares, DecimalValue(len(values) - 1), config.division_precision)
    return arithmetic.sqrt(variance, config=config).to_float()


def describe(values: Sequence[Number], config: ArithmeticConfig = DEFAULT_CONFIG) -> SummaryStatistics:
    """
    Сводная статистика выборки.

    Examples:
        >>> describe([1, 2, 3]).mean
        2.0
    """
    if not values:
        return SummaryStatistics(0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)

    return SummaryStatistics(
        count=len(values),
        total=_exact_total(values).to_float(),
        mean=average(*values, config=config),
        median=median(*values, config=config),
        std_dev=standard_deviation(*values, config=config),
        minimum=float(minimum(*values)),
        maximum=float(maximum(*values)),
    )


# =============================================================================
# DECIMAL VALUE
# =============================================================================


def decimal_sum(*values: DecimalValue) -> DecimalValue:
    """Точная сумма; пустой вход → 0."""
    result = ZERO
    for value in values:
        result = arithmetic.add(result, value)
    return result


def decimal_max(*values: DecimalValue) -> DecimalValue:
    """Наибольшее; пустой вход → 0."""
    return maximum(*values, default=ZERO)


def decimal_min(*values: DecimalValue) -> DecimalValue:
    """Наименьшее; пустой вход → 0."""
    return minimum(*values, default=ZERO)


# =============================================================================
# SAFE (RESULT)
# =============================================================================


def sum_safe(*values: Exact) -> Result:
    return Result(decimal_sum(*(coerce_exact(v, "sum_safe") for v in values)))


def max_safe(*values: Exact) -> Result:
    return Result(decimal_max(*(coerce_exact(v, "max_safe") for v in values)))


def min_safe(*values: Exact) -> Result:
    return Result(decimal_min(*(coerce_exact(v, "min_safe") for v in values)))


def average_safe(*values: Exact, config: ArithmeticConfig = DEFAULT_CONFIG) -> Result:
    """
    Среднее, округлённое до config.division_precision знаков, без хвостовых нулей.

    Пустой вход → 0.
    """
    if not values:
        return Result(ZERO)
    exact = [coerce_exact(v, "average_safe") for v in values]
    mean = arithmetic.divide(decimal_sum(*exact), DecimalValue(len(exact)), config.division_precision)
    return Result(mean.normalized())
