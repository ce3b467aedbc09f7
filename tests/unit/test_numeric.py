"""
Тесты для модуля Numeric

Проверяет:
1. safe_div — единственная политика "делитель 0 → 0"
2. Сравнения float с толерантностью из ArithmeticConfig
3. Знак, clamp, линейную интерполяцию
4. Процент и сложный процент
"""

import logging

import pytest

from decimath.config import ArithmeticConfig
from decimath.core.decimal_value import DecimalValue
from decimath.core.errors import DivisionByZero, InvalidFloatError
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
from decimath.result import clamp_safe, div

# =============================================================================
# ТЕСТЫ БЕЗОПАСНОГО ДЕЛЕНИЯ
# =============================================================================


class TestSafeDiv:
    """Тесты для safe_div"""

    def test_normal_division(self) -> None:
        """Обычное деление работает корректно"""
        assert safe_div(10.0, 2.0, 2) == 5.0
        assert safe_div(100.0, 4.0, 2) == 25.0
        assert safe_div(-10.0, 2.0, 2) == -5.0

    def test_rounds_to_places(self) -> None:
        """Частное округляется до places знаков"""
        assert safe_div(1.0, 3.0, 2) == 0.33
        assert safe_div(2.0, 3.0, 2) == 0.67

    def test_division_by_zero_returns_fallback(self) -> None:
        """Деление на ноль возвращает fallback"""
        assert safe_div(10.0, 0.0, 2) == 0.0
        assert safe_div(10.0, 0.0, 2, fallback=1.0) == 1.0
        assert safe_div(10.0, -0.0, 2) == 0.0

    def test_contrast_with_core_division(self) -> None:
        """Основная арифметика на ноль бросает исключение"""
        assert safe_div(1.0, 0.0, 2) == 0.0
        with pytest.raises(DivisionByZero):
            div(1.0, 0.0, 2)

    def test_zero_divisor_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Подмена результата фиксируется в debug-логе"""
        with caplog.at_level(logging.DEBUG, logger="decimath"):
            safe_div(1.0, 0.0, 2)
        assert "zero divisor" in caplog.text

    def test_nan_rejected(self) -> None:
        """NaN не имеет десятичного значения"""
        with pytest.raises(InvalidFloatError):
            safe_div(float("nan"), 2.0, 2)


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ И СРАВНЕНИЙ
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1.5)
        assert is_valid_float(1e308)

    def test_nan_and_inf_invalid(self) -> None:
        """NaN и Inf невалидны"""
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestIsZero:
    """Тесты для is_zero"""

    def test_exact_zero(self) -> None:
        """Точный ноль"""
        assert is_zero(0.0)
        assert is_zero(-0.0)

    def test_below_tolerance(self) -> None:
        """|x| < 1e-10 считается нулём"""
        assert is_zero(1e-11)
        assert is_zero(-1e-11)

    def test_above_tolerance(self) -> None:
        """|x| >= 1e-10 не ноль"""
        assert not is_zero(1e-9)
        assert not is_zero(1.0)

    def test_custom_tolerance(self) -> None:
        """Толерантность из config"""
        config = ArithmeticConfig(zero_tolerance=1e-6)
        assert is_zero(1e-7, config)
        assert not is_zero(1e-5, config)


class TestIsEqual:
    """Тесты для is_equal"""

    def test_float_noise_ignored(self) -> None:
        """0.1 + 0.2 равно 0.3 в пределах толерантности"""
        assert is_equal(0.1 + 0.2, 0.3)
        assert is_equal(1.0, 1.0 + 1e-9)

    def test_different_values(self) -> None:
        """Различие больше толерантности"""
        assert not is_equal(1.0, 1.0001)
        assert not is_equal(1.0, 1.1)

    def test_custom_tolerance(self) -> None:
        """Толерантность из config"""
        config = ArithmeticConfig(equality_tolerance=0.01)
        assert is_equal(1.0, 1.005, config)
        assert not is_equal(1.0, 1.02, config)


class TestSign:
    """Тесты для sign, is_positive, is_negative"""

    def test_sign(self) -> None:
        """-1, 0, 1"""
        assert sign(-2.5) == -1
        assert sign(0.0) == 0
        assert sign(3.0) == 1

    def test_positive(self) -> None:
        """Положительные значения"""
        assert is_positive(0.5)
        assert not is_positive(0.0)
        assert not is_positive(-0.5)

    def test_negative(self) -> None:
        """Отрицательные значения"""
        assert is_negative(-0.5)
        assert not is_negative(0.0)
        assert not is_negative(0.5)


# =============================================================================
# ТЕСТЫ ОГРАНИЧЕНИЯ И ИНТЕРПОЛЯЦИИ
# =============================================================================


class TestClamp:
    """Тесты для clamp"""

    def test_inside_bounds(self) -> None:
        """Значение внутри отрезка возвращается как есть"""
        assert clamp(2.5, 0.0, 10.0) == 2.5
        assert clamp(0.0, 0.0, 10.0) == 0.0
        assert clamp(10.0, 0.0, 10.0) == 10.0

    def test_outside_bounds(self) -> None:
        """Выход за отрезок прижимается к ближайшей границе"""
        assert clamp(12.5, 0.0, 10.0) == 10.0
        assert clamp(-0.25, 0.0, 10.0) == 0.0

    def test_single_bound(self) -> None:
        """None снимает границу"""
        assert clamp(-0.25, min_value=0.0) == 0.0
        assert clamp(1e9, min_value=0.0) == 1e9
        assert clamp(3.0, max_value=2.5) == 2.5
        assert clamp(-7.0) == -7.0

    def test_returns_float(self) -> None:
        """Целые на входе, float на выходе"""
        result = clamp(5, 0, 3)
        assert result == 3.0
        assert isinstance(result, float)

    def test_inverted_bounds_raise(self) -> None:
        """min_value > max_value → ValueError, как в clamp_safe"""
        with pytest.raises(ValueError, match="greater than upper bound"):
            clamp(5.0, 10.0, 0.0)
        with pytest.raises(ValueError, match="greater than upper bound"):
            clamp_safe(DecimalValue(5), DecimalValue(10), DecimalValue(0))

    def test_agrees_with_clamp_safe(self) -> None:
        """Результат совпадает с clamp_safe на тех же границах"""
        for value in (-1.5, 0.75, 4.0):
            exact = clamp_safe(DecimalValue.from_float(value), DecimalValue(0), DecimalValue(2))
            assert clamp(value, 0.0, 2.0) == exact.to_float()


class TestLerp:
    """Тесты для lerp"""

    def test_midpoint(self) -> None:
        """t = 0.5 — середина"""
        assert lerp(0.0, 10.0, 0.5) == 5.0
        assert lerp(10.0, 20.0, 0.25) == 12.5

    def test_endpoints(self) -> None:
        """t = 0 и t = 1 дают концы отрезка"""
        assert lerp(0.0, 10.0, 0.0) == 0.0
        assert lerp(0.0, 10.0, 1.0) == 10.0

    def test_degenerate_segment(self) -> None:
        """a == b"""
        assert lerp(5.0, 5.0, 0.7) == 5.0

    def test_extrapolation(self) -> None:
        """t вне [0, 1] не ограничивается"""
        assert lerp(0.0, 10.0, 2.0) == 20.0
        assert lerp(0.0, 10.0, -0.5) == -5.0


# =============================================================================
# ТЕСТЫ ПРОЦЕНТОВ
# =============================================================================


class TestPercentage:
    """Тесты для percentage"""

    def test_percentage(self) -> None:
        """15% от 200 = 30"""
        assert percentage(200.0, 15.0) == 30.0
        assert percentage(50.0, 10.0) == 5.0
        assert percentage(80.0, 0.0) == 0.0

    def test_negative(self) -> None:
        """Отрицательный процент"""
        assert percentage(200.0, -25.0) == -50.0


class TestCompoundInterest:
    """Тесты для compound_interest"""

    def test_two_periods(self) -> None:
        """1000 * 1.1^2 = 1210"""
        assert compound_interest(1000.0, 0.1, 2) == pytest.approx(1210.0)

    def test_zero_rate(self) -> None:
        """Нулевая ставка"""
        assert compound_interest(100.0, 0.0, 5) == 100.0

    def test_non_positive_periods_return_principal(self) -> None:
        """periods <= 0 → principal"""
        assert compound_interest(1000.0, 0.05, 0) == 1000.0
        assert compound_interest(1000.0, 0.05, -1) == 1000.0

    def test_many_periods(self) -> None:
        """Долгий срок без накопления ошибки"""
        assert compound_interest(1000.0, 0.05, 10) == pytest.approx(1628.894626777442, rel=1e-12)
        # 1.005 ** 120 и 1.005 ** 360: точный коэффициент длиннее тысяч цифр
        assert compound_interest(1000.0, 0.005, 120) == pytest.approx(1819.3967340322, rel=1e-9)
        assert compound_interest(1000.0, 0.005, 360) == pytest.approx(6022.575212263, rel=1e-8)

    def test_result_rounded_to_division_precision(self) -> None:
        """Результат округляется до config.division_precision знаков"""
        config = ArithmeticConfig(division_precision=2)
        assert compound_interest(1000.0, 0.005, 120, config=config) == 1819.4
        assert compound_interest(100.0, 0.1, 3, config=config) == 133.1
