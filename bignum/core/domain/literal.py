"""
Literal - Грамматика десятичных литералов BigInt

Единственная точка разбора строкового представления числа:
    [+-]?[0-9]+

Цифры читаются в обратном порядке (последний символ строки становится
младшим разрядом digits[0]), знак исключается. Избыточные старшие нули
нормализуются: "007" → 7, "-0" → 0.
"""

import re
from typing import Final

from bignum.core.math.digit_arithmetic import is_zero_digits, strip_leading_zeros

# Допустимый литерал: необязательный знак и минимум одна цифра
LITERAL_PATTERN: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")

SIGN_CHARACTERS: Final[str] = "+-"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidNumericLiteral(ValueError):
    """
    Строка не является корректным десятичным литералом.

    Attributes:
        literal: Исходная строка
        reason: Краткое описание нарушения
    """

    def __init__(self, literal: str, reason: str):
        self.literal = literal
        self.reason = reason
        super().__init__(f"Invalid numeric literal {literal!r}: {reason}")


# =============================================================================
# РАЗБОР
# =============================================================================


def is_valid_literal(text: str) -> bool:
    """Проверка соответствия грамматике без exception."""
    return LITERAL_PATTERN.fullmatch(text) is not None


def parse_literal(text: str) -> tuple[bool, list[int]]:
    """
    Разбор литерала в пару (sign, digits).

    Args:
        text: Строка вида [+-]?[0-9]+

    Returns:
        sign (True = неотрицательное) и цифры в канонической форме,
        младший разряд первым

    Raises:
        InvalidNumericLiteral: Пустая строка, знак без цифр или
            недопустимый символ

    Examples:
        >>> parse_literal("-120")
        (False, [0, 2, 1])
        >>> parse_literal("-0")
        (True, [0])
    """
    if not text:
        raise InvalidNumericLiteral(text, "empty string")

    sign = True
    body = text
    if text[0] in SIGN_CHARACTERS:
        sign = text[0] == "+"
        body = text[1:]

    if not body:
        raise InvalidNumericLiteral(text, "sign without digits")

    if not is_valid_literal(text):
        raise InvalidNumericLiteral(text, "non-digit character")

    digits = [ord(char) - ord("0") for char in reversed(body)]
    digits = strip_leading_zeros(digits)

    if is_zero_digits(digits):
        sign = True

    return sign, digits
