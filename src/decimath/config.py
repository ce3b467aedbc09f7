"""
ArithmeticConfig — Настраиваемые точности и толерантности

Immutable Pydantic модель. Операции, которым нужна настраиваемая точность
(power, sqrt, статистика, float-толерантности), принимают `config=` явно;
по умолчанию используется DEFAULT_CONFIG.
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ЗНАЧЕНИЯ ПО УМОЛЧАНИЮ
# =============================================================================

# Знаков после запятой при делении в статистике и float-хелперах
DIVISION_PRECISION_DEFAULT: Final[int] = 10

# Знаков после запятой для отрицательной и дробной степени
POWER_PRECISION_DEFAULT: Final[int] = 16

# Знаков после запятой для sqrt и число итераций Ньютона
SQRT_PRECISION_DEFAULT: Final[int] = 10
SQRT_ITERATIONS_DEFAULT: Final[int] = 10

# Толерантности для float-сравнений (is_zero / is_equal)
ZERO_TOLERANCE_DEFAULT: Final[float] = 1e-10
EQUALITY_TOLERANCE_DEFAULT: Final[float] = 1e-8


# =============================================================================
# CONFIG
# =============================================================================


class ArithmeticConfig(BaseModel):
    """
    Конфигурация точностей decimath.

    Все поля валидируются при создании; невалидные значения вызывают
    pydantic.ValidationError.
    """

    division_precision: int = Field(
        DIVISION_PRECISION_DEFAULT, ge=0, le=1000, description="Знаков после запятой при делении"
    )
    power_precision: int = Field(
        POWER_PRECISION_DEFAULT, ge=0, le=1000, description="Знаков после запятой для power"
    )
    sqrt_precision: int = Field(
        SQRT_PRECISION_DEFAULT, ge=0, le=1000, description="Знаков после запятой для sqrt"
    )
    sqrt_iterations: int = Field(
        SQRT_ITERATIONS_DEFAULT, ge=1, le=100, description="Итераций метода Ньютона"
    )
    zero_tolerance: float = Field(ZERO_TOLERANCE_DEFAULT, gt=0, description="Порог is_zero")
    equality_tolerance: float = Field(
        EQUALITY_TOLERANCE_DEFAULT, gt=0, description="Порог is_equal"
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("zero_tolerance", "equality_tolerance")
    @classmethod
    def validate_tolerance_finite(cls, v: float) -> float:
        """Толерантность должна быть конечной (inf пропускается gt=0)"""
        if v == float("inf"):
            raise ValueError("tolerance must be finite")
        return v


DEFAULT_CONFIG: Final[ArithmeticConfig] = ArithmeticConfig()
