"""
Тесты для PrecisionOps (round_to, truncate_to, clean, is_equal_within_precision)
"""

from decimath.core.decimal_value import DecimalValue
from decimath.core.precision import clean, is_equal_within_precision, round_to, truncate_to
from decimath.core.rounding import RoundingMode

D = DecimalValue.from_string


# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ
# =============================================================================


class TestRoundTo:
    """Тесты для round_to"""

    def test_round_half_away(self) -> None:
        """3.145 → 3.15, -2.5 → -3"""
        assert str(round_to(D("3.145"), 2)) == "3.15"
        assert str(round_to(D("2.5"), 0)) == "3"
        assert str(round_to(D("-2.5"), 0)) == "-3"
        assert str(round_to(D("2.125"), 2)) == "2.13"

    def test_round_keeps_smaller_scale(self) -> None:
        """Масштаб не увеличивается"""
        assert str(round_to(D("1.5"), 3)) == "1.5"

    def test_round_negative_places(self) -> None:
        """Отрицательная точность: десятки, сотни, тысячи"""
        assert round_to(D("123.456"), -1) == DecimalValue(120)
        assert str(round_to(D("123.456"), -1)) == "120"
        assert round_to(D("125"), -1) == DecimalValue(130)
        assert round_to(D("-125"), -1) == DecimalValue(-130)
        assert round_to(D("123.456"), -2) == DecimalValue(100)
        assert round_to(D("950"), -3) == DecimalValue(1000)
        assert round_to(D("0.4"), -1) == DecimalValue(0)

    def test_round_explicit_mode(self) -> None:
        """Режим передаётся явно"""
        assert str(round_to(D("2.125"), 2, RoundingMode.HALF_EVEN)) == "2.12"
        assert str(round_to(D("125"), -1, RoundingMode.HALF_EVEN)) == "120"


class TestTruncateTo:
    """Тесты для truncate_to"""

    def test_truncate_positive_places(self) -> None:
        """3.145 → 3.14, -3.9 → -3"""
        assert str(truncate_to(D("3.145"), 2)) == "3.14"
        assert str(truncate_to(D("3.999"), 2)) == "3.99"
        assert str(truncate_to(D("-3.9"), 0)) == "-3"

    def test_truncate_negative_places(self) -> None:
        """Отрицательная точность, к нулю"""
        assert truncate_to(D("123.456"), -1) == DecimalValue(120)
        assert truncate_to(D("129"), -1) == DecimalValue(120)
        assert truncate_to(D("-129"), -1) == DecimalValue(-120)
        assert truncate_to(D("99"), -2) == DecimalValue(0)

    def test_round_and_truncate_diverge(self) -> None:
        """Округление и отбрасывание — разные операции"""
        value = D("3.145")
        assert round_to(value, 2) != truncate_to(value, 2)


# =============================================================================
# ТЕСТЫ ОЧИСТКИ
# =============================================================================


class TestClean:
    """Тесты для clean"""

    def test_trailing_zeros_removed(self) -> None:
        """Хвостовые нули дробной части"""
        assert str(clean(D("3.140"))) == "3.14"
        assert str(clean(D("4.00"))) == "4"
        assert str(clean(D("-1.500"))) == "-1.5"
        assert str(clean(D("0.000"))) == "0"

    def test_integer_zeros_untouched(self) -> None:
        """100 остаётся 100"""
        assert str(clean(D("100"))) == "100"
        assert str(clean(D("100.0"))) == "100"

    def test_idempotent(self) -> None:
        """clean(clean(x)) == clean(x), включая строку"""
        for text in ["3.140", "4.00", "100", "0.000", "-1.500", "2.5", "1e-7"]:
            once = clean(D(text))
            twice = clean(once)
            assert twice == once
            assert str(twice) == str(once)

    def test_value_preserved(self) -> None:
        """Значение не меняется"""
        assert clean(D("3.140")) == D("3.140")


# =============================================================================
# ТЕСТЫ СРАВНЕНИЯ
# =============================================================================


class TestIsEqualWithinPrecision:
    """Тесты для is_equal_within_precision"""

    def test_within_tolerance(self) -> None:
        """|a - b| < 10^-places"""
        assert is_equal_within_precision(D("3.14"), D("3.1400000001"), 8)
        assert not is_equal_within_precision(D("3.14"), D("3.15"), 2)
        assert is_equal_within_precision(D("3.14"), D("3.15"), 1)

    def test_boundary_is_exclusive(self) -> None:
        """Ровно 10^-places — уже не равны"""
        assert not is_equal_within_precision(D("1.00"), D("1.01"), 2)

    def test_symmetric(self) -> None:
        """Порядок аргументов не важен"""
        assert is_equal_within_precision(D("1"), D("1.004"), 2) == is_equal_within_precision(
            D("1.004"), D("1"), 2
        )

    def test_negative_places(self) -> None:
        """Отрицательная точность: толерантность 10^n"""
        assert is_equal_within_precision(D("100"), D("105"), -1)
        assert not is_equal_within_precision(D("100"), D("110"), -1)

    def test_identical_values(self) -> None:
        """Равные значения равны при любой точности"""
        for places in [0, 2, 10]:
            assert is_equal_within_precision(D("7.25"), D("7.250"), places)
