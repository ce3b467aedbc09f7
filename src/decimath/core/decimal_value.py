"""
DecimalValue — Точное десятичное число (coefficient / 10^scale)

Неизменяемое значение, представленное целым коэффициентом со знаком и
неотрицательным масштабом. Все операции возвращают новый экземпляр.

Способы конструирования:
- from_float: ТОЧНОЕ двоичное значение float, переведённое в десятичное.
  0.1 становится 0.1000000000000000055511151231257827021181583404541015625.
  Потеря точности, случившаяся выше по стеку, не скрывается.
- from_string: литерал разбирается без потерь, все записанные цифры
  сохраняются ("1.50" имеет scale 2).
- from_int / from_decimal: без потерь.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. scale >= 0 всегда
2. Равенство и порядок точные и не зависят от масштаба (1.50 == 1.5)
3. hash согласован с равенством
4. Строковое представление никогда не использует экспоненту
"""

import math
import re
from dataclasses import dataclass
from decimal import MAX_EMAX, MIN_EMIN, Context, Decimal, InvalidOperation
from fractions import Fraction
from functools import total_ordering
from typing import Final

from decimath.core.errors import InvalidFloatError, ParseError

# =============================================================================
# ПАРАМЕТРЫ РАЗБОРА
# =============================================================================

# [+-]digits[.digits][e[+-]digits], допускаются ".5" и "5."
_LITERAL_RE: Final = re.compile(
    r"^(?P<sign>[+-]?)(?P<int>[0-9]*)(?:\.(?P<frac>[0-9]*))?(?:[eE](?P<exp>[+-]?[0-9]+))?$"
)

# Ограничение экспоненты в литерале: 10**exp материализуется как int
MAX_LITERAL_EXPONENT: Final[int] = 10_000

# log10(2) с запасом вверх: оценка числа десятичных цифр по bit_length
_LOG10_2_NUM: Final[int] = 30103
_LOG10_2_DEN: Final[int] = 100000


def _exact_context(digits: int) -> Context:
    """
    Контекст, в котором операции над числом из `digits` цифр не округляют.

    Конверсии int <-> Decimal идут через него, а не через str(int):
    str/int для чисел длиннее sys.get_int_max_str_digits() запрещены.
    """
    return Context(prec=max(digits, 1) + 1, Emax=MAX_EMAX, Emin=MIN_EMIN)


def _digit_bound(coefficient: int) -> int:
    """Верхняя оценка числа десятичных цифр |coefficient|."""
    return abs(coefficient).bit_length() * _LOG10_2_NUM // _LOG10_2_DEN + 1


# =============================================================================
# DECIMAL VALUE
# =============================================================================


@total_ordering
@dataclass(frozen=True, eq=False)
class DecimalValue:
    """
    Точное десятичное число coefficient / 10**scale.

    Знак хранится в coefficient, поэтому отрицательного нуля не существует.
    """

    coefficient: int
    scale: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.coefficient, bool) or not isinstance(self.coefficient, int):
            raise TypeError(f"coefficient must be int, got {type(self.coefficient).__name__}")
        if isinstance(self.scale, bool) or not isinstance(self.scale, int):
            raise TypeError(f"scale must be int, got {type(self.scale).__name__}")
        if self.scale < 0:
            raise ValueError(f"scale must be non-negative, got {self.scale}")

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_float(cls, value: float) -> "DecimalValue":
        """
        Точное десятичное разложение двоичного float.

        float — это m / 2**k, а m / 2**k == m * 5**k / 10**k, поэтому
        разложение всегда конечно и минимально по масштабу.

        Raises:
            InvalidFloatError: Для NaN/Inf
            TypeError: Если value не float/int
        """
        if isinstance(value, bool) or not isinstance(value, (float, int)):
            raise TypeError(f"expected float, got {type(value).__name__}")
        if isinstance(value, int):
            return cls(value, 0)
        if not math.isfinite(value):
            raise InvalidFloatError(f"non-finite float has no decimal value: {value!r}")

        numerator, denominator = value.as_integer_ratio()
        # denominator это степень двойки
        k = denominator.bit_length() - 1
        return cls(numerator * 5**k, k)

    @classmethod
    def from_string(cls, text: str) -> "DecimalValue":
        """
        Разбор десятичного литерала без потерь.

        Examples:
            >>> DecimalValue.from_string("1.50")
            DecimalValue('1.50')
            >>> DecimalValue.from_string("-.5")
            DecimalValue('-0.5')
            >>> DecimalValue.from_string("1.5e3")
            DecimalValue('1500')

        Raises:
            ParseError: Пустая строка, нечисловой текст, NaN/Infinity,
                        некорректный формат
        """
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")

        stripped = text.strip()
        if not stripped:
            raise ParseError(text, "empty string")

        match = _LITERAL_RE.match(stripped)
        if match is None:
            raise ParseError(text)

        int_digits = match.group("int")
        frac_digits = match.group("frac") or ""
        if not int_digits and not frac_digits:
            raise ParseError(text, "no digits")

        exp_digits = (match.group("exp") or "0").lstrip("+-").lstrip("0") or "0"
        if len(exp_digits) > len(str(MAX_LITERAL_EXPONENT)) or int(exp_digits) > MAX_LITERAL_EXPONENT:
            raise ParseError(text, f"exponent out of range (|exp| > {MAX_LITERAL_EXPONENT})")

        # Decimal(str) не ограничен длиной, в отличие от int(str)
        try:
            parsed = Decimal(stripped)
        except InvalidOperation as exc:
            raise ParseError(text) from exc

        return cls.from_decimal(parsed)

    @classmethod
    def from_int(cls, value: int) -> "DecimalValue":
        """Целое число, scale = 0."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        return cls(value, 0)

    @classmethod
    def from_decimal(cls, value: Decimal) -> "DecimalValue":
        """
        Конверсия из decimal.Decimal без потерь (экспонента сохраняется).

        Raises:
            InvalidFloatError: Для NaN/Infinity
        """
        if not isinstance(value, Decimal):
            raise TypeError(f"expected Decimal, got {type(value).__name__}")
        if not value.is_finite():
            raise InvalidFloatError(f"non-finite Decimal has no decimal value: {value!r}")

        _, digits, exponent = value.as_tuple()
        if exponent >= 0:
            return cls(int(value), 0)
        integral = value.scaleb(-exponent, context=_exact_context(len(digits)))
        return cls(int(integral), -exponent)

    # -------------------------------------------------------------------------
    # Знак и свойства
    # -------------------------------------------------------------------------

    def sign(self) -> int:
        """-1, 0 или 1."""
        if self.coefficient > 0:
            return 1
        if self.coefficient < 0:
            return -1
        return 0

    def is_zero(self) -> bool:
        return self.coefficient == 0

    def is_negative(self) -> bool:
        return self.coefficient < 0

    def is_positive(self) -> bool:
        return self.coefficient > 0

    def is_integer(self) -> bool:
        """True если дробная часть равна нулю (независимо от масштаба)."""
        return self.coefficient % 10**self.scale == 0

    def magnitude(self) -> int:
        """
        Десятичный порядок старшей значащей цифры.

        Examples:
            >>> DecimalValue.from_string("123.4").magnitude()
            2
            >>> DecimalValue.from_string("0.005").magnitude()
            -3

        Raises:
            ValueError: Для нуля
        """
        if self.coefficient == 0:
            raise ValueError("zero has no magnitude")
        return Decimal(self.coefficient).adjusted() - self.scale

    def rescale(self, scale: int) -> "DecimalValue":
        """
        То же значение с бОльшим масштабом (дописывает нули).

        Raises:
            ValueError: Если scale меньше текущего (потеря цифр)
        """
        if scale < self.scale:
            raise ValueError(f"cannot rescale from {self.scale} down to {scale} without rounding")
        return DecimalValue(self.coefficient * 10 ** (scale - self.scale), scale)

    def normalized(self) -> "DecimalValue":
        """
        То же значение с минимальным масштабом (без хвостовых нулей дробной части).

        Нули целой части не затрагиваются: 100 остаётся 100.
        """
        coefficient, scale = self.coefficient, self.scale
        while scale > 0 and coefficient % 10 == 0:
            coefficient //= 10
            scale -= 1
        if scale == self.scale:
            return self
        return DecimalValue(coefficient, scale)

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def to_float(self) -> float:
        """
        Ближайший float (с потерей точности).

        Очень большие по модулю значения превращаются в ±inf, очень малые —
        в 0.0; значащие цифры сверх точности float64 теряются.
        """
        return float(self.to_decimal())

    def to_decimal(self) -> Decimal:
        """decimal.Decimal с тем же коэффициентом и экспонентой, без округления."""
        context = _exact_context(_digit_bound(self.coefficient))
        return Decimal(self.coefficient).scaleb(-self.scale, context=context)

    def to_fraction(self) -> Fraction:
        return Fraction(self.coefficient, 10**self.scale)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def aligned_with(self, other: "DecimalValue") -> tuple[int, int]:
        """Коэффициенты self и other, приведённые к общему масштабу."""
        if self.scale == other.scale:
            return self.coefficient, other.coefficient
        if self.scale > other.scale:
            return self.coefficient, other.coefficient * 10 ** (self.scale - other.scale)
        return self.coefficient * 10 ** (other.scale - self.scale), other.coefficient

    def compare(self, other: "DecimalValue") -> int:
        """
        Точное сравнение: -1, 0 или 1.

        Examples:
            >>> DecimalValue.from_string("3.140").compare(DecimalValue.from_string("3.14"))
            0
        """
        a, b = self.aligned_with(other)
        return (a > b) - (a < b)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DecimalValue):
            return self.compare(other) == 0
        if isinstance(other, int) and not isinstance(other, bool):
            return self.compare(DecimalValue(other)) == 0
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, DecimalValue):
            return self.compare(other) < 0
        if isinstance(other, int) and not isinstance(other, bool):
            return self.compare(DecimalValue(other)) < 0
        return NotImplemented

    def __hash__(self) -> int:
        # Fraction хешируется как int для целых, что согласовано с __eq__
        return hash(self.to_fraction())

    def __bool__(self) -> bool:
        return self.coefficient != 0

    # -------------------------------------------------------------------------
    # Строковое представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return format(self.to_decimal(), "f")

    def __repr__(self) -> str:
        return f"DecimalValue('{self}')"


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Final[DecimalValue] = DecimalValue(0)
ONE: Final[DecimalValue] = DecimalValue(1)
TWO: Final[DecimalValue] = DecimalValue(2)
