"""
Core decimal primitives для decimath

Точное десятичное значение, арифметика, округление и форматирование.
Не зависит от float-удобств верхнего уровня (Result, convert, stats).
"""

# DecimalValue
from decimath.core.decimal_value import ONE, TWO, ZERO, DecimalValue

# Errors
from decimath.core.errors import DecimathError, DivisionByZero, InvalidFloatError, ParseError

# Rounding
from decimath.core.rounding import RoundingMode

# ArithmeticOps
from decimath.core.arithmetic import (
    absolute,
    add,
    ceil,
    divide,
    divide_truncate,
    floor,
    multiply,
    negate,
    power,
    sqrt,
    subtract,
)

# PrecisionOps
from decimath.core.precision import clean, is_equal_within_precision, round_to, truncate_to

# Formatter
from decimath.core.formatter import (
    to_bankers_rounded_string,
    to_fixed_string,
    to_money_string,
    to_plain_string,
)

__all__ = [
    # DecimalValue
    "DecimalValue",
    "ONE",
    "TWO",
    "ZERO",
    # Errors
    "DecimathError",
    "DivisionByZero",
    "InvalidFloatError",
    "ParseError",
    # Rounding
    "RoundingMode",
    # ArithmeticOps
    "absolute",
    "add",
    "ceil",
    "divide",
    "divide_truncate",
    "floor",
    "multiply",
    "negate",
    "power",
    "sqrt",
    "subtract",
    # PrecisionOps
    "clean",
    "is_equal_within_precision",
    "round_to",
    "truncate_to",
    # Formatter
    "to_bankers_rounded_string",
    "to_fixed_string",
    "to_money_string",
    "to_plain_string",
]
