"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей и типов
- Детекция нарушений constraints (min/max)
- Интеграция с BigIntState и EvaluationResult
"""

import json

import pytest
from jsonschema import ValidationError

from bignum.calculator import ExpressionEvaluator
from bignum.core.contracts import (
    BigIntStateValidator,
    EvaluationRecordValidator,
    SchemaLoader,
)
from bignum.core.domain import BigInt


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_bigint_state():
    """Валидный bigint_state (-322)."""
    return {"sign": False, "digits": [2, 2, 3]}


@pytest.fixture
def valid_success_record(valid_bigint_state):
    """Валидная запись успешного вычисления."""
    return {
        "line_number": 1,
        "expression": "+(234,-556)",
        "ok": True,
        "output": "234 + -556 = -322",
        "result": valid_bigint_state,
        "error": None,
    }


@pytest.fixture
def valid_failure_record():
    """Валидная запись ошибки."""
    return {
        "line_number": 2,
        "expression": "/(1,2)",
        "ok": False,
        "output": None,
        "result": None,
        "error": "Illegal input or operator",
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    @pytest.mark.parametrize("schema_name", ["bigint_state", "evaluation_record"])
    def test_schemas_load(self, schema_name: str) -> None:
        schema = SchemaLoader().load_schema(schema_name)
        assert schema["title"] == schema_name

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("bigint_state") is loader.load_schema("bigint_state")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nowhere")

    def test_invalid_schema_rejected(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# BIGINT STATE CONTRACT
# =============================================================================


class TestBigIntStateContract:
    """Контракт bigint_state"""

    def test_valid(self, valid_bigint_state) -> None:
        BigIntStateValidator().validate(valid_bigint_state)

    def test_missing_sign(self, valid_bigint_state) -> None:
        del valid_bigint_state["sign"]
        with pytest.raises(ValidationError):
            BigIntStateValidator().validate(valid_bigint_state)

    def test_digit_out_of_range(self, valid_bigint_state) -> None:
        valid_bigint_state["digits"] = [2, 10]
        with pytest.raises(ValidationError):
            BigIntStateValidator().validate(valid_bigint_state)

    def test_empty_digits(self, valid_bigint_state) -> None:
        valid_bigint_state["digits"] = []
        with pytest.raises(ValidationError):
            BigIntStateValidator().validate(valid_bigint_state)

    def test_wrong_sign_type(self, valid_bigint_state) -> None:
        valid_bigint_state["sign"] = "negative"
        with pytest.raises(ValidationError):
            BigIntStateValidator().validate(valid_bigint_state)

    def test_additional_properties(self, valid_bigint_state) -> None:
        valid_bigint_state["base"] = 10
        with pytest.raises(ValidationError, match="Additional properties"):
            BigIntStateValidator().validate(valid_bigint_state)

    def test_bigint_dump_matches(self) -> None:
        for value in (0, -1, 10**40, -(10**40) + 1):
            BigIntStateValidator().validate(BigInt(value).to_state().model_dump())


# =============================================================================
# EVALUATION RECORD CONTRACT
# =============================================================================


class TestEvaluationRecordContract:
    """Контракт evaluation_record"""

    def test_valid_success(self, valid_success_record) -> None:
        EvaluationRecordValidator().validate(valid_success_record)

    def test_valid_failure(self, valid_failure_record) -> None:
        EvaluationRecordValidator().validate(valid_failure_record)

    def test_success_without_result(self, valid_success_record) -> None:
        valid_success_record["result"] = None
        with pytest.raises(ValidationError):
            EvaluationRecordValidator().validate(valid_success_record)

    def test_failure_without_error(self, valid_failure_record) -> None:
        valid_failure_record["error"] = None
        with pytest.raises(ValidationError):
            EvaluationRecordValidator().validate(valid_failure_record)

    def test_line_number_positive(self, valid_failure_record) -> None:
        valid_failure_record["line_number"] = 0
        with pytest.raises(ValidationError):
            EvaluationRecordValidator().validate(valid_failure_record)

    def test_nested_result_checked_against_bigint_state(self, valid_success_record) -> None:
        """result проверяется контрактом bigint_state"""
        valid_success_record["result"] = {"sign": False, "digits": [2, 12]}
        with pytest.raises(ValidationError):
            EvaluationRecordValidator().validate(valid_success_record)

    def test_nested_result_extra_field(self, valid_success_record) -> None:
        valid_success_record["result"]["base"] = 10
        with pytest.raises(ValidationError, match="Additional properties"):
            EvaluationRecordValidator().validate(valid_success_record)

    def test_evaluator_records_match(self) -> None:
        evaluator = ExpressionEvaluator()
        validator = EvaluationRecordValidator()
        for number, line in enumerate(["*(12,-3)", "-(5)", "+(1)", ""], start=1):
            validator.validate(evaluator.evaluate(line, number).to_record())
