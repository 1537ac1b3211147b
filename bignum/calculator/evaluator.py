"""Evaluator - вычисление одной строки калькулятора.

Каждая строка обрабатывается независимо: ошибка разбора не прерывает
обработку, а возвращается в EvaluationResult (partial-failure семантика).

Формат вывода:
- бинарный оператор: "<a> <op> <b> = <result>"
- унарный минус:     "- <a> = <result>"
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from bignum.calculator.expression import (
    ExpressionError,
    Operator,
    ParsedExpression,
    parse_expression,
)
from bignum.core.domain.bigint import BigInt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluatorConfig:
    """Конфигурация калькулятора.

    - skip_blank_lines: пустые строки пропускаются вместо ошибки "Empty line"
    - strict_operands: строгая проверка операндов (см. expression.validate_operand)
    """
    skip_blank_lines: bool = False
    strict_operands: bool = True


@dataclass(frozen=True)
class EvaluationResult:
    """Результат вычисления строки."""

    line_number: int
    expression: str
    ok: bool

    # Успех
    output: Optional[str] = None
    result: Optional[BigInt] = None

    # Ошибка
    error: Optional[str] = None

    def to_record(self) -> Dict[str, Any]:
        """JSON-совместимая запись (контракт evaluation_record)."""
        return {
            "line_number": self.line_number,
            "expression": self.expression,
            "ok": self.ok,
            "output": self.output,
            "result": self.result.to_state().model_dump() if self.result is not None else None,
            "error": self.error,
        }


def compute(expression: ParsedExpression) -> BigInt:
    """Выполнение разобранного выражения."""
    operands = expression.operands

    if expression.operator == Operator.ADD:
        return operands[0] + operands[1]
    if expression.operator == Operator.MULTIPLY:
        return operands[0] * operands[1]
    if expression.is_unary:
        return -operands[0]
    return operands[0] - operands[1]


def render_equation(expression: ParsedExpression, result: BigInt) -> str:
    """Текстовая запись равенства для вывода пользователю."""
    op = expression.operator.value
    if expression.is_unary:
        return f"{op} {expression.operands[0]} = {result}"
    left, right = expression.operands
    return f"{left} {op} {right} = {result}"


class ExpressionEvaluator:
    """Вычислитель строк op(a,b).

    Stateless относительно строк: результат зависит только от входной
    строки и конфигурации.
    """

    def __init__(self, config: Optional[EvaluatorConfig] = None):
        self.config = config or EvaluatorConfig()

    def evaluate(self, line: str, line_number: int = 1) -> EvaluationResult:
        """Вычисление одной строки.

        Args:
            line: строка без завершающего перевода строки
            line_number: номер строки (с 1) для диагностики

        Returns:
            EvaluationResult (ok=False и error при ошибке разбора)
        """
        try:
            expression = parse_expression(line, strict=self.config.strict_operands)
        except ExpressionError as e:
            logger.debug("line %d rejected: %r (%s)", line_number, line, e)
            return EvaluationResult(
                line_number=line_number,
                expression=line,
                ok=False,
                error=str(e),
            )

        result = compute(expression)
        output = render_equation(expression, result)
        logger.debug("line %d evaluated: %s", line_number, output)

        return EvaluationResult(
            line_number=line_number,
            expression=line,
            ok=True,
            output=output,
            result=result,
        )
