"""Session - режимы работы калькулятора.

- File mode: построчное вычисление файла с выражениями op(a,b)
- Demo mode: демонстрация API BigInt (конструкторы, арифметика, сравнения,
  присваивание)
"""

import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, TextIO, Union

from bignum.calculator.evaluator import EvaluatorConfig, ExpressionEvaluator
from bignum.core.contracts import EvaluationRecordValidator
from bignum.core.domain.bigint import BigInt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSummary:
    """Итоги обработки набора строк."""

    lines_total: int
    lines_ok: int
    lines_failed: int
    lines_skipped: int

    @property
    def all_ok(self) -> bool:
        return self.lines_failed == 0


# =============================================================================
# FILE MODE
# =============================================================================


def run_lines(
    lines: Iterable[str],
    config: Optional[EvaluatorConfig] = None,
    out: TextIO = sys.stdout,
    err: TextIO = sys.stderr,
    json_output: bool = False,
) -> SessionSummary:
    """Вычисление последовательности строк (нумерация с 1).

    Успешные результаты печатаются в out, ошибки в err в формате
    "Error in line N: <message>"; обработка продолжается со следующей строки.
    В режиме json_output каждая строка даёт одну JSON-запись в out
    (контракт evaluation_record).
    """
    evaluator = ExpressionEvaluator(config)
    record_validator = EvaluationRecordValidator() if json_output else None
    total = ok = failed = skipped = 0

    for line_number, raw_line in enumerate(lines, start=1):
        total += 1
        line = raw_line.rstrip("\r\n")

        if not line and evaluator.config.skip_blank_lines:
            skipped += 1
            continue

        result = evaluator.evaluate(line, line_number)
        if result.ok:
            ok += 1
        else:
            failed += 1

        if json_output:
            record = result.to_record()
            record_validator.validate(record)
            print(json.dumps(record), file=out)
        elif result.ok:
            print(result.output, file=out)
        else:
            print(f"Error in line {line_number}: {result.error}", file=err)

    summary = SessionSummary(
        lines_total=total,
        lines_ok=ok,
        lines_failed=failed,
        lines_skipped=skipped,
    )
    logger.info(
        "processed %d lines: %d ok, %d failed, %d skipped",
        total, ok, failed, skipped,
    )
    return summary


def run_file(
    path: Union[str, Path],
    config: Optional[EvaluatorConfig] = None,
    out: TextIO = sys.stdout,
    err: TextIO = sys.stderr,
    json_output: bool = False,
) -> SessionSummary:
    """File mode: вычисление каждой строки файла.

    Байты, не декодируемые как UTF-8, заменяются на U+FFFD и отклоняются
    проверкой операнда только в своей строке.

    Raises:
        OSError: если файл не удаётся открыть
    """
    logger.debug("opening %s", path)
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return run_lines(f, config=config, out=out, err=err, json_output=json_output)


# =============================================================================
# DEMO MODE
# =============================================================================


def run_demo(out: TextIO = sys.stdout) -> None:
    """Demo mode: пошаговая демонстрация возможностей BigInt."""

    def emit(text: str = "") -> None:
        print(text, file=out)

    def flag(value: bool) -> str:
        return "true" if value else "false"

    emit(f"Default constructor: {BigInt()}")
    emit(f"Constructor that takes signed 64-bit integer: {BigInt(-234343246)}")
    emit(f"Constructor that takes string: {BigInt('-23948723487901461543613452341325325')}")
    emit(f"Constructor that takes another BigInt: {BigInt(BigInt('22222222222244444444'))}")
    emit()

    emit("Addition: ")
    emit(
        "234326685623523 + 980927189936952374194 = "
        f"{BigInt(234326685623523) + BigInt('980927189936952374194')}"
    )
    test1 = BigInt(234)
    test1 += BigInt(-556)
    emit(f"test1=234, test1 += (-556): {test1}")
    emit()

    emit("Subtraction: ")
    emit(f"7897013827597535246 - 2187454325 = {BigInt(7897013827597535246) - BigInt(2187454325)}")
    test1 -= BigInt(-31415926)
    emit(f"test1 -= (-31415926): {test1}")
    emit()

    emit("Multiplication: ")
    emit(
        "212353526236 * (-3462930817434286) = "
        f"{BigInt(212353526236) * BigInt(-3462930817434286)}"
    )
    test1 *= BigInt(-2)
    emit(f"test1 *= (-2): {test1}")
    emit()

    emit("Negation: ")
    emit(f"-test1 = {-test1}")
    emit()

    emit("Comparison: ")
    emit(f"422 == 345: {flag(BigInt(422) == BigInt(345))}")
    emit(f"24 != 24: {flag(BigInt(24) != BigInt(24))}")
    emit(f"5 < 250: {flag(BigInt(5) < BigInt(250))}")
    emit(f"10 <= 10: {flag(BigInt(10) <= BigInt(10))}")
    emit(f"343 > -919: {flag(BigInt(343) > BigInt(-919))}")
    emit(f"-13 >= -15: {flag(BigInt(-13) >= BigInt(-15))}")
    emit()

    emit("Assignment: ")
    test2 = BigInt(2)
    emit(f"test2 = {test2}")
    test2.assign(-256)
    emit(f"Assign with a 64-bit integer: test2 = -256: {test2}")
    test2.assign("9090")
    emit(f'Assign with a string: test2 = "9090": {test2}')
    test2.assign(test1)
    emit(f"Assign with another BigInt: test2 = test1: {test2}")
    emit()
