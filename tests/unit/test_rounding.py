"""
Тесты для rounding (режимы округления и целочисленный примитив)
"""

import pytest

from decimath.core.decimal_value import DecimalValue
from decimath.core.rounding import RoundingMode, drop_digits, quantize, quantize_ratio, round_ratio

HALF_AWAY = RoundingMode.HALF_AWAY_FROM_ZERO


class TestRoundRatio:
    """Тесты для round_ratio"""

    def test_exact_division_unaffected_by_mode(self) -> None:
        """Без остатка режим не важен"""
        for mode in RoundingMode:
            assert round_ratio(30, 10, mode) == 3
            assert round_ratio(-30, 10, mode) == -3

    def test_half_away_from_zero(self) -> None:
        """Половина — от нуля"""
        assert round_ratio(25, 10, HALF_AWAY) == 3
        assert round_ratio(-25, 10, HALF_AWAY) == -3
        assert round_ratio(24, 10, HALF_AWAY) == 2
        assert round_ratio(26, 10, HALF_AWAY) == 3

    def test_half_even(self) -> None:
        """Половина — к чётному"""
        assert round_ratio(25, 10, RoundingMode.HALF_EVEN) == 2
        assert round_ratio(35, 10, RoundingMode.HALF_EVEN) == 4
        assert round_ratio(-25, 10, RoundingMode.HALF_EVEN) == -2
        assert round_ratio(251, 100, RoundingMode.HALF_EVEN) == 3

    def test_truncate(self) -> None:
        """Отбрасывание к нулю"""
        assert round_ratio(29, 10, RoundingMode.TRUNCATE) == 2
        assert round_ratio(-29, 10, RoundingMode.TRUNCATE) == -2

    def test_ceiling_and_floor(self) -> None:
        """К +inf и к -inf"""
        assert round_ratio(21, 10, RoundingMode.CEILING) == 3
        assert round_ratio(-21, 10, RoundingMode.CEILING) == -2
        assert round_ratio(29, 10, RoundingMode.FLOOR) == 2
        assert round_ratio(-21, 10, RoundingMode.FLOOR) == -3

    def test_non_positive_denominator_rejected(self) -> None:
        """Знаменатель должен быть > 0"""
        with pytest.raises(ValueError, match="denominator must be positive"):
            round_ratio(1, 0, HALF_AWAY)
        with pytest.raises(ValueError):
            round_ratio(1, -3, HALF_AWAY)


class TestDropDigits:
    """Тесты для drop_digits"""

    def test_drop(self) -> None:
        """Отбрасывание младших цифр"""
        assert drop_digits(3145, 1, HALF_AWAY) == 315
        assert drop_digits(3145, 1, RoundingMode.TRUNCATE) == 314
        assert drop_digits(3145, 1, RoundingMode.HALF_EVEN) == 314

    def test_zero_digits_identity(self) -> None:
        """digits=0 → без изменений"""
        assert drop_digits(3145, 0, HALF_AWAY) == 3145

    def test_negative_digits_rejected(self) -> None:
        """digits < 0 → ValueError"""
        with pytest.raises(ValueError):
            drop_digits(1, -1, HALF_AWAY)


class TestQuantize:
    """Тесты для quantize и quantize_ratio"""

    def test_quantize_reduces_scale(self) -> None:
        """Масштаб уменьшается до places"""
        result = quantize(DecimalValue.from_string("3.14159"), 2, HALF_AWAY)
        assert str(result) == "3.14"
        assert result.scale == 2

    def test_quantize_keeps_smaller_scale(self) -> None:
        """Нули не дописываются"""
        value = DecimalValue.from_string("1.5")
        assert quantize(value, 4, HALF_AWAY) is value

    def test_quantize_negative_places_rejected(self) -> None:
        """places < 0 → ValueError"""
        with pytest.raises(ValueError, match="places must be non-negative"):
            quantize(DecimalValue(1), -1, HALF_AWAY)

    def test_quantize_ratio(self) -> None:
        """Рациональное → DecimalValue"""
        assert str(quantize_ratio(2, 3, 2, HALF_AWAY)) == "0.67"
        assert str(quantize_ratio(2, 3, 2, RoundingMode.TRUNCATE)) == "0.66"

    def test_quantize_ratio_negative_denominator(self) -> None:
        """Знак знаменателя переносится в числитель"""
        assert str(quantize_ratio(2, -3, 2, HALF_AWAY)) == "-0.67"
        assert str(quantize_ratio(-1, -8, 2, HALF_AWAY)) == "0.13"

    def test_quantize_ratio_zero_denominator(self) -> None:
        """Нулевой знаменатель → ValueError"""
        with pytest.raises(ValueError):
            quantize_ratio(1, 0, 2, HALF_AWAY)
