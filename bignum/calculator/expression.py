"""
Expression - Разбор строк вида op(a,b)

Грамматика строки:
    OP "(" operand ("," operand)? ")"
    OP ∈ {+, -, *}

- '+' и '*' требуют ровно два операнда
- '-' допускает один операнд (унарное отрицание) или два

Строгая проверка операндов (по умолчанию):
- только цифры и необязательный ведущий '-'
- "-0" трактуется как "0"
- отрицательное число с ведущим нулём ("-05") отклоняется
"""

from dataclasses import dataclass
from enum import Enum

from bignum.core.domain.bigint import BigInt
from bignum.core.domain.literal import InvalidNumericLiteral


# =============================================================================
# ENUMS & EXCEPTIONS
# =============================================================================


class Operator(str, Enum):
    """Оператор выражения"""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"


class ExpressionError(ValueError):
    """Строка не является корректным выражением калькулятора."""

    pass


# =============================================================================
# PARSED EXPRESSION
# =============================================================================


@dataclass(frozen=True)
class ParsedExpression:
    """Результат разбора строки: оператор и операнды."""

    operator: Operator
    operands: tuple[BigInt, ...]

    @property
    def is_unary(self) -> bool:
        return len(self.operands) == 1


# =============================================================================
# ОПЕРАНДЫ
# =============================================================================


def validate_operand(text: str, strict: bool = True) -> BigInt:
    """
    Проверка и конверсия одного операнда.

    Args:
        text: Текст операнда
        strict: Применять строгие правила (иначе только грамматика BigInt)

    Returns:
        BigInt значение операнда

    Raises:
        ExpressionError: Если операнд некорректен
    """
    if not text:
        raise ExpressionError("Empty operand")

    if not strict:
        try:
            return BigInt(text)
        except InvalidNumericLiteral as e:
            raise ExpressionError(f"Invalid operand: {e.reason}") from e

    is_negative = text[0] == "-"
    if is_negative and len(text) == 1:
        raise ExpressionError("Invalid operand: '-' without number")

    if is_negative and text[1] == "0":
        if len(text) != 2:
            raise ExpressionError("Invalid operand: negative number starts with 0")
        # "-0" → "0"
        text = "0"
        is_negative = False

    body = text[1:] if is_negative else text
    if not all("0" <= char <= "9" for char in body):
        raise ExpressionError("Invalid character in operand")

    return BigInt(text)


def split_operands(body: str) -> list[str]:
    """
    Разбиение текста между скобками на операнды по ",".

    Одна завершающая запятая не образует операнда, пустое тело даёт
    ноль операндов. Пустые операнды в начале или середине сохраняются.

    Examples:
        >>> split_operands("1,2")
        ['1', '2']
        >>> split_operands("5,")
        ['5']
        >>> split_operands("")
        []
        >>> split_operands(",1")
        ['', '1']
    """
    parts = body.split(",")
    if parts[-1] == "":
        parts.pop()
    return parts


# =============================================================================
# ВЫРАЖЕНИЕ
# =============================================================================


def parse_expression(line: str, strict: bool = True) -> ParsedExpression:
    """
    Разбор строки op(a,b).

    Порядок проверок:
    1. Пустая строка
    2. Допустимость оператора
    3. Скобки
    4. Операнды (каждый по отдельности)
    5. Количество операндов для оператора

    Raises:
        ExpressionError: При любом нарушении грамматики
    """
    if not line:
        raise ExpressionError("Empty line")

    try:
        operator = Operator(line[0])
    except ValueError as e:
        raise ExpressionError("Illegal input or operator") from e

    if len(line) < 3 or line[1] != "(" or line[-1] != ")":
        raise ExpressionError("Malformed expression: expected op(a,b)")

    operands = tuple(
        validate_operand(part, strict=strict) for part in split_operands(line[2:-1])
    )

    if operator in (Operator.ADD, Operator.MULTIPLY) and len(operands) != 2:
        raise ExpressionError("Invalid number of operands")
    if operator == Operator.SUBTRACT and not 1 <= len(operands) <= 2:
        raise ExpressionError("Invalid number of operands")

    return ParsedExpression(operator=operator, operands=operands)
