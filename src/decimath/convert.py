"""
Convert — Float-удобства: float на входе, float/str на выходе

Каждая функция конвертирует float через DecimalValue.from_float (точное
двоичное значение), выполняет операцию в десятичной арифметике и
возвращает float или строку.

ВАЖНО: строковые функции показывают ТОЧНОЕ значение float.
to_string(0.1) == "0.1000000000000000055511151231257827021181583404541015625".
Для коротких строк используйте функции с фиксированным числом знаков.

parse_float — единственная точка входа для разбора произвольной строки в
число общего назначения; некорректная строка → ParseError.
"""

from decimath.config import DEFAULT_CONFIG, ArithmeticConfig
from decimath.core import arithmetic, formatter, precision
from decimath.core.decimal_value import DecimalValue
from decimath.core.errors import ParseError


def _d(value: float) -> DecimalValue:
    return DecimalValue.from_float(value)


# =============================================================================
# МАТЕМАТИЧЕСКИЕ ФУНКЦИИ
# =============================================================================


def abs_value(value: float) -> float:
    return arithmetic.absolute(_d(value)).to_float()


def ceil(value: float) -> float:
    """
    Examples:
        >>> ceil(3.14)
        4.0
        >>> ceil(-3.14)
        -3.0
    """
    return arithmetic.ceil(_d(value)).to_float()


def floor(value: float) -> float:
    return arithmetic.floor(_d(value)).to_float()


def power(base: float, exponent: float, config: ArithmeticConfig = DEFAULT_CONFIG) -> float:
    """
    Examples:
        >>> power(2.0, 3.0)
        8.0
        >>> power(4.0, 0.5)
        2.0
    """
    return arithmetic.power(_d(base), _d(exponent), config=config).to_float()


def sqrt(value: float, config: ArithmeticConfig = DEFAULT_CONFIG) -> float:
    """
    Квадратный корень; для отрицательного value возвращает 0.0.

    Examples:
        >>> sqrt(16.0)
        4.0
        >>> sqrt(-1.0)
        0.0
    """
    return arithmetic.sqrt(_d(value), config=config).to_float()


def to_fixed(value: float, places: int) -> float:
    """
    Округление half-away-from-zero до places знаков, результат — float.

    Examples:
        >>> to_fixed(3.14159, 2)
        3.14
    """
    return precision.round_to(_d(value), places).to_float()


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ОПЕРАЦИИ
# =============================================================================


def int_div(dividend: int, divisor: int, places: int) -> float:
    """
    Деление целых с округлением до places знаков.

    Raises:
        DivisionByZero: Если divisor == 0

    Examples:
        >>> int_div(1, 3, 4)
        0.3333
    """
    return arithmetic.divide(DecimalValue.from_int(dividend), DecimalValue.from_int(divisor), places).to_float()


def int_div_trunc(dividend: int, divisor: int, places: int) -> float:
    """
    Деление целых с отбрасыванием цифр до places знаков.

    Raises:
        DivisionByZero: Если divisor == 0
    """
    return arithmetic.divide_truncate(
        DecimalValue.from_int(dividend), DecimalValue.from_int(divisor), places
    ).to_float()


def int_mul_float(multiplicand: int, multiplier: float) -> float:
    """
    Examples:
        >>> int_mul_float(10, 2.5)
        25.0
    """
    return arithmetic.multiply(DecimalValue.from_int(multiplicand), _d(multiplier)).to_float()


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_float(text: str) -> float:
    """
    Разбор строки в float через точный десятичный литерал.

    Raises:
        ParseError: Пустая/нечисловая/некорректная строка (сообщение
                    содержит исходный текст и причину)

    Examples:
        >>> parse_float("3.14")
        3.14
        >>> parse_float("-1e3")
        -1000.0
    """
    if not isinstance(text, str):
        raise ParseError(repr(text), f"expected str, got {type(text).__name__}")
    return DecimalValue.from_string(text).to_float()


# =============================================================================
# СТРОКОВОЕ ПРЕДСТАВЛЕНИЕ
# =============================================================================


def to_string(value: float) -> str:
    """Точное десятичное значение float."""
    return formatter.to_plain_string(_d(value))


def to_string_fixed(value: float, places: int) -> str:
    """
    Examples:
        >>> to_string_fixed(3.14159, 2)
        '3.14'
    """
    return formatter.to_fixed_string(_d(value), places)


def to_string_bank(value: float, places: int) -> str:
    """
    Banker's rounding. Для float "ровно половина" встречается только у
    точно представимых значений (2.125, 0.5, ...).

    Examples:
        >>> to_string_bank(2.125, 2)
        '2.12'
    """
    return formatter.to_bankers_rounded_string(_d(value), places)


def format_money(amount: float, places: int) -> str:
    """
    Examples:
        >>> format_money(1234567.89, 2)
        '1,234,567.89'
    """
    return formatter.to_money_string(_d(amount), places)


def format_money_int(amount: int, places: int) -> str:
    """
    Examples:
        >>> format_money_int(1234567, 2)
        '1,234,567.00'
    """
    return formatter.to_money_string(DecimalValue.from_int(amount), places)


def format_currency(amount: float, places: int) -> str:
    """
    Сумма с фиксированным числом знаков без разделителя тысяч.

    Examples:
        >>> format_currency(1234.5, 2)
        '1234.50'
    """
    return formatter.to_fixed_string(_d(amount), places)


# =============================================================================
# ХВОСТОВЫЕ НУЛИ
# =============================================================================


def remove_trailing_zeros(value: float) -> str:
    """
    Точное значение float без хвостовых нулей.

    Examples:
        >>> remove_trailing_zeros(42.0)
        '42'
        >>> remove_trailing_zeros(2.5)
        '2.5'
    """
    return formatter.to_plain_string(precision.clean(_d(value)))


def remove_trailing_zeros_fixed(value: float, places: int) -> str:
    """
    Округление до places знаков, затем удаление хвостовых нулей.

    Examples:
        >>> remove_trailing_zeros_fixed(3.14, 4)
        '3.14'
        >>> remove_trailing_zeros_fixed(42.0, 2)
        '42'
    """
    return formatter.to_plain_string(precision.clean(precision.round_to(_d(value), places)))


def clean_float(value: float) -> float:
    """
    float → DecimalValue без хвостовых нулей → float.

    Разложение точное, поэтому clean_float(x) == x для любого конечного x.
    """
    return precision.clean(_d(value)).to_float()


def clean_float_string(value: float) -> str:
    """Точное значение float; у разложения float нет хвостовых нулей."""
    return formatter.to_plain_string(precision.clean(_d(value)))
