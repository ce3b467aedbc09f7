"""
Errors — Иерархия исключений decimath

Все исключения библиотеки наследуются от DecimathError и одновременно от
соответствующего встроенного исключения Python, чтобы вызывающий код мог
перехватывать их как `ValueError` / `ZeroDivisionError` без импорта decimath.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Некорректная строка никогда не превращается в 0 молча (ParseError)
2. Деление на ноль в базовой арифметике никогда не возвращает 0 (DivisionByZero)
3. sqrt отрицательного числа НЕ является ошибкой: возвращается 0 (sentinel)
"""


class DecimathError(Exception):
    """Базовое исключение decimath."""


class ParseError(DecimathError, ValueError):
    """
    Строка не является корректным десятичным литералом.

    Возникает при конструировании DecimalValue из строки и в parse_float.
    Всегда пробрасывается вызывающему коду.
    """

    def __init__(self, text: str, reason: str = "not a valid decimal literal") -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"cannot parse {text!r}: {reason}")


class DivisionByZero(DecimathError, ZeroDivisionError):
    """
    Деление на ноль в базовой арифметике.

    Политика "вернуть 0 при нулевом делителе" существует только в явно
    названной обёртке numeric.safe_div, но не в divide / divide_truncate.
    """


class InvalidFloatError(DecimathError, ValueError):
    """NaN или Inf не имеют точного десятичного представления."""
