"""
decimath — точная десятичная арифметика вместо двоичного float

Chainable Result, две семьи точек входа (float-удобство и _safe без потерь),
статистика и форматирование денежных сумм.
"""

import logging

from decimath.logger import ROOT_LOGGER_NAME, configure_logging, get_logger

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

# Config
from decimath.config import DEFAULT_CONFIG, ArithmeticConfig

# Core
from decimath.core import (
    DecimalValue,
    DecimathError,
    DivisionByZero,
    InvalidFloatError,
    ParseError,
    RoundingMode,
)

# Result: float-семья и safe-семья
from decimath.result import (
    Result,
    abs_safe,
    add,
    add_safe,
    ceil_safe,
    clamp_safe,
    div,
    div_safe,
    div_trunc,
    div_trunc_safe,
    floor_safe,
    is_equal_safe,
    mul,
    mul_safe,
    new_result,
    pow_safe,
    round_safe,
    round_value,
    sqrt_safe,
    sub,
    sub_safe,
    truncate_safe,
    truncate_value,
)

# Numeric
from decimath.numeric import (
    clamp,
    compound_interest,
    is_equal,
    is_negative,
    is_positive,
    is_valid_float,
    is_zero,
    lerp,
    percentage,
    safe_div,
    sign,
)

# Convert
from decimath.convert import (
    abs_value,
    ceil,
    clean_float,
    clean_float_string,
    floor,
    format_currency,
    format_money,
    format_money_int,
    int_div,
    int_div_trunc,
    int_mul_float,
    parse_float,
    power,
    remove_trailing_zeros,
    remove_trailing_zeros_fixed,
    sqrt,
    to_fixed,
    to_string,
    to_string_bank,
    to_string_fixed,
)

# Stats
from decimath.stats import (
    SummaryStatistics,
    average,
    average_safe,
    decimal_max,
    decimal_min,
    decimal_sum,
    describe,
    max_safe,
    maximum,
    median,
    min_safe,
    minimum,
    standard_deviation,
    sum_safe,
    total,
)

__version__ = "0.1.0"

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    # Config
    "DEFAULT_CONFIG",
    "ArithmeticConfig",
    # Core
    "DecimalValue",
    "DecimathError",
    "DivisionByZero",
    "InvalidFloatError",
    "ParseError",
    "RoundingMode",
    # Result
    "Result",
    "new_result",
    # Result: float-семья
    "add",
    "sub",
    "mul",
    "div",
    "div_trunc",
    "round_value",
    "truncate_value",
    # Result: safe-семья
    "abs_safe",
    "add_safe",
    "ceil_safe",
    "clamp_safe",
    "div_safe",
    "div_trunc_safe",
    "floor_safe",
    "is_equal_safe",
    "mul_safe",
    "pow_safe",
    "round_safe",
    "sqrt_safe",
    "sub_safe",
    "truncate_safe",
    # Numeric
    "clamp",
    "compound_interest",
    "is_equal",
    "is_negative",
    "is_positive",
    "is_valid_float",
    "is_zero",
    "lerp",
    "percentage",
    "safe_div",
    "sign",
    # Convert
    "abs_value",
    "ceil",
    "clean_float",
    "clean_float_string",
    "floor",
    "format_currency",
    "format_money",
    "format_money_int",
    "int_div",
    "int_div_trunc",
    "int_mul_float",
    "parse_float",
    "power",
    "remove_trailing_zeros",
    "remove_trailing_zeros_fixed",
    "sqrt",
    "to_fixed",
    "to_string",
    "to_string_bank",
    "to_string_fixed",
    # Stats
    "SummaryStatistics",
    "average",
    "average_safe",
    "decimal_max",
    "decimal_min",
    "decimal_sum",
    "describe",
    "max_safe",
    "maximum",
    "median",
    "min_safe",
    "minimum",
    "standard_deviation",
    "sum_safe",
    "total",
]
