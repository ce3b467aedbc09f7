"""
Result — Chainable обёртка над DecimalValue и две семьи точек входа

Две семьи методов и функций различаются по ИМЕНИ, а не по типу аргумента:

1. Float-семья (add, sub, mul, div, div_trunc, round_value, truncate_value):
   принимает float/int и конвертирует через DecimalValue.from_float.
   Точность, потерянная в самом float, НЕ восстанавливается:
       add(0.1, 0.2) == 0.3000000000000000166533453693773481063544750213623046875

2. Safe-семья (суффикс _safe): принимает DecimalValue / decimal.Decimal / int
   без конвертации через float:
       add_safe(D("0.1"), D("0.2")) == 0.3

Передача float в safe-метод и DecimalValue в float-метод — TypeError:
выбор между удобством и точностью виден в месте вызова.

Каждый метод возвращает НОВЫЙ Result; порядок цепочки важен.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from decimath.config import DEFAULT_CONFIG, ArithmeticConfig
from decimath.core import arithmetic, formatter, precision
from decimath.core.decimal_value import DecimalValue

Number = Union[int, float]
Exact = Union["Result", DecimalValue, Decimal, int]


# =============================================================================
# КОНВЕРСИЯ АРГУМЕНТОВ
# =============================================================================


def coerce_number(value: Number, operation: str) -> DecimalValue:
    """Аргумент float-семьи → DecimalValue (через точное разложение float)."""
    if isinstance(value, (DecimalValue, Decimal, Result)):
        raise TypeError(
            f"{operation}() takes a float; use {operation}_safe() for "
            f"{type(value).__name__} arguments"
        )
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{operation}() takes a float, got {type(value).__name__}")
    return DecimalValue.from_float(value)


def coerce_exact(value: Exact, operation: str) -> DecimalValue:
    """Аргумент safe-семьи → DecimalValue (без float)."""
    if isinstance(value, Result):
        return value.value
    if isinstance(value, DecimalValue):
        return value
    if isinstance(value, Decimal):
        return DecimalValue.from_decimal(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return DecimalValue.from_int(value)
    if isinstance(value, float):
        base = operation[: -len("_safe")] if operation.endswith("_safe") else operation
        raise TypeError(
            f"{operation}() does not accept float (precision may already be lost); "
            f"convert with DecimalValue.from_string() or use {base}()"
        )
    raise TypeError(f"{operation}() takes a DecimalValue, got {type(value).__name__}")


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Result:
    """
    Неизменяемый результат вычисления с chainable методами.

    Examples:
        >>> add(0.1, 0.2).mul(10).div(3, 2).round(2).to_string_fixed(2)
        '1.00'
    """

    value: DecimalValue

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_float(cls, value: float) -> "Result":
        return cls(DecimalValue.from_float(value))

    @classmethod
    def from_string(cls, text: str) -> "Result":
        """Сохраняет все цифры литерала. Raises: ParseError."""
        return cls(DecimalValue.from_string(text))

    @classmethod
    def from_int(cls, value: int) -> "Result":
        return cls(DecimalValue.from_int(value))

    @classmethod
    def from_decimal(cls, value: Union[DecimalValue, Decimal]) -> "Result":
        """DecimalValue или decimal.Decimal без потерь; float → TypeError."""
        if isinstance(value, float):
            raise TypeError(
                "Result.from_decimal() does not accept float; use Result.from_float() "
                "for the exact binary value or Result.from_string() for the written digits"
            )
        return cls(coerce_exact(value, "Result.from_decimal"))

    # -------------------------------------------------------------------------
    # Вывод
    # -------------------------------------------------------------------------

    def to_float(self) -> float:
        """Ближайший float; для экстремальных порядков цифры теряются."""
        return self.value.to_float()

    def to_decimal(self) -> Decimal:
        return self.value.to_decimal()

    def to_string(self) -> str:
        return formatter.to_plain_string(self.value)

    def to_string_fixed(self, places: int) -> str:
        return formatter.to_fixed_string(self.value, places)

    def to_string_bank(self, places: int) -> str:
        return formatter.to_bankers_rounded_string(self.value, places)

    def format_money(self, places: int) -> str:
        return formatter.to_money_string(self.value, places)

    def __str__(self) -> str:
        return self.to_string()

    def __float__(self) -> float:
        return self.to_float()

    # -------------------------------------------------------------------------
    # Точность
    # -------------------------------------------------------------------------

    def clean(self) -> "Result":
        return Result(precision.clean(self.value))

    def round(self, places: int) -> "Result":
        return Result(precision.round_to(self.value, places))

    def truncate(self, places: int) -> "Result":
        return Result(precision.truncate_to(self.value, places))

    def abs(self) -> "Result":
        return Result(arithmetic.absolute(self.value))

    def neg(self) -> "Result":
        return Result(arithmetic.negate(self.value))

    # -------------------------------------------------------------------------
    # Float-семья
    # -------------------------------------------------------------------------

    def add(self, other: Number) -> "Result":
        return Result(arithmetic.add(self.value, coerce_number(other, "add")))

    def sub(self, other: Number) -> "Result":
        return Result(arithmetic.subtract(self.value, coerce_number(other, "sub")))

    def mul(self, other: Number) -> "Result":
        return Result(arithmetic.multiply(self.value, coerce_number(other, "mul")))

    def div(self, other: Number, places: int) -> "Result":
        """Деление с округлением. Raises: DivisionByZero."""
        return Result(arithmetic.divide(self.value, coerce_number(other, "div"), places))

    def div_trunc(self, other: Number, places: int) -> "Result":
        """Деление с отбрасыванием цифр. Raises: DivisionByZero."""
        return Result(arithmetic.divide_truncate(self.value, coerce_number(other, "div_trunc"), places))

    # -------------------------------------------------------------------------
    # Safe-семья
    # -------------------------------------------------------------------------

    def add_safe(self, other: Exact) -> "Result":
        return Result(arithmetic.add(self.value, coerce_exact(other, "add_safe")))

    def sub_safe(self, other: Exact) -> "Result":
        return Result(arithmetic.subtract(self.value, coerce_exact(other, "sub_safe")))

    def mul_safe(self, other: Exact) -> "Result":
        return Result(arithmetic.multiply(self.value, coerce_exact(other, "mul_safe")))

    def div_safe(self, other: Exact, places: int) -> "Result":
        return Result(arithmetic.divide(self.value, coerce_exact(other, "div_safe"), places))

    def div_trunc_safe(self, other: Exact, places: int) -> "Result":
        return Result(arithmetic.divide_truncate(self.value, coerce_exact(other, "div_trunc_safe"), places))


def new_result(value: float) -> Result:
    """Result из float (точное разложение двоичного значения)."""
    return Result.from_float(value)


# =============================================================================
# FLOAT-СЕМЬЯ: МОДУЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def add(a: Number, b: Number) -> Result:
    """a + b для float-аргументов."""
    return Result(arithmetic.add(coerce_number(a, "add"), coerce_number(b, "add")))


def sub(a: Number, b: Number) -> Result:
    return Result(arithmetic.subtract(coerce_number(a, "sub"), coerce_number(b, "sub")))


def mul(a: Number, b: Number) -> Result:
    return Result(arithmetic.multiply(coerce_number(a, "mul"), coerce_number(b, "mul")))


def div(a: Number, b: Number, places: int) -> Result:
    """a / b с округлением half-away-from-zero. Raises: DivisionByZero."""
    return Result(arithmetic.divide(coerce_number(a, "div"), coerce_number(b, "div"), places))


def div_trunc(a: Number, b: Number, places: int) -> Result:
    """a / b с отбрасыванием цифр. Raises: DivisionByZero."""
    return Result(
        arithmetic.divide_truncate(coerce_number(a, "div_trunc"), coerce_number(b, "div_trunc"), places)
    )


def round_value(value: Number, places: int) -> Result:
    return Result(precision.round_to(coerce_number(value, "round_value"), places))


def truncate_value(value: Number, places: int) -> Result:
    return Result(precision.truncate_to(coerce_number(value, "truncate_value"), places))


# =============================================================================
# SAFE-СЕМЬЯ: МОДУЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def add_safe(a: Exact, b: Exact) -> Result:
    return Result(arithmetic.add(coerce_exact(a, "add_safe"), coerce_exact(b, "add_safe")))


def sub_safe(a: Exact, b: Exact) -> Result:
    return Result(arithmetic.subtract(coerce_exact(a, "sub_safe"), coerce_exact(b, "sub_safe")))


def mul_safe(a: Exact, b: Exact) -> Result:
    return Result(arithmetic.multiply(coerce_exact(a, "mul_safe"), coerce_exact(b, "mul_safe")))


def div_safe(a: Exact, b: Exact, places: int) -> Result:
    return Result(arithmetic.divide(coerce_exact(a, "div_safe"), coerce_exact(b, "div_safe"), places))


def div_trunc_safe(a: Exact, b: Exact, places: int) -> Result:
    return Result(
        arithmetic.divide_truncate(
            coerce_exact(a, "div_trunc_safe"), coerce_exact(b, "div_trunc_safe"), places
        )
    )


def round_safe(value: Exact, places: int) -> Result:
    return Result(precision.round_to(coerce_exact(value, "round_safe"), places))


def truncate_safe(value: Exact, places: int) -> Result:
    return Result(precision.truncate_to(coerce_exact(value, "truncate_safe"), places))


def abs_safe(value: Exact) -> Result:
    return Result(arithmetic.absolute(coerce_exact(value, "abs_safe")))


def ceil_safe(value: Exact) -> Result:
    return Result(arithmetic.ceil(coerce_exact(value, "ceil_safe")))


def floor_safe(value: Exact) -> Result:
    return Result(arithmetic.floor(coerce_exact(value, "floor_safe")))


def pow_safe(base: Exact, exponent: Exact, config: ArithmeticConfig = DEFAULT_CONFIG) -> Result:
    """base ** exponent; см. core.arithmetic.power."""
    return Result(
        arithmetic.power(coerce_exact(base, "pow_safe"), coerce_exact(exponent, "pow_safe"), config=config)
    )


def sqrt_safe(value: Exact, config: ArithmeticConfig = DEFAULT_CONFIG) -> Result:
    """Корень; для отрицательного value — 0 (sentinel)."""
    return Result(arithmetic.sqrt(coerce_exact(value, "sqrt_safe"), config=config))


def is_equal_safe(a: Exact, b: Exact, places: int) -> bool:
    """|a - b| < 10^(-places)."""
    return precision.is_equal_within_precision(
        coerce_exact(a, "is_equal_safe"), coerce_exact(b, "is_equal_safe"), places
    )


def clamp_safe(value: Exact, lower: Exact, upper: Exact) -> Result:
    """
    Ограничение value диапазоном [lower, upper].

    Raises:
        ValueError: Если lower > upper
    """
    v = coerce_exact(value, "clamp_safe")
    lo = coerce_exact(lower, "clamp_safe")
    hi = coerce_exact(upper, "clamp_safe")
    if lo > hi:
        raise ValueError(f"lower bound {lo} is greater than upper bound {hi}")
    if v < lo:
        return Result(lo)
    if v > hi:
        return Result(hi)
    return Result(v)
