"""Calculator - текстовый front end для BigInt.

- expression: разбор строк op(a,b) и проверка операндов
- evaluator:  вычисление строки с partial-failure семантикой
- session:    file mode и demo mode
- cli:        argparse интерфейс командной строки
"""

from .evaluator import (
    EvaluationResult,
    EvaluatorConfig,
    ExpressionEvaluator,
    compute,
    render_equation,
)
from .expression import (
    ExpressionError,
    Operator,
    ParsedExpression,
    parse_expression,
    split_operands,
    validate_operand,
)
from .session import SessionSummary, run_demo, run_file, run_lines

__all__ = [
    # Expression
    "ExpressionError",
    "Operator",
    "ParsedExpression",
    "parse_expression",
    "split_operands",
    "validate_operand",
    # Evaluator
    "EvaluationResult",
    "EvaluatorConfig",
    "ExpressionEvaluator",
    "compute",
    "render_equation",
    # Session
    "SessionSummary",
    "run_demo",
    "run_file",
    "run_lines",
]
