"""
Tests for BigIntState Pydantic Model

Покрывает:
- Создание снимка из BigInt и восстановление
- Валидаторы инвариантов (пустые цифры, диапазон, старшие нули, -0)
- JSON сериализацию/десериализацию
- Immutability (frozen=True)
- Соответствие JSON Schema контракту bigint_state
"""

import pytest
from pydantic import ValidationError

from bignum.core.contracts import BigIntStateValidator
from bignum.core.domain import BigInt, BigIntState


class TestBigIntStateFromValue:
    """Снимок BigInt → BigIntState → BigInt"""

    def test_to_state(self) -> None:
        state = BigInt(-1203).to_state()
        assert state.sign is False
        assert state.digits == [3, 0, 2, 1]

    def test_restore(self) -> None:
        original = BigInt("980927189936952374194")
        restored = BigInt.from_state(original.to_state())
        assert restored == original
        assert restored is not original

    def test_restored_value_is_independent(self) -> None:
        state = BigInt(42).to_state()
        restored = BigInt.from_state(state)
        restored += 1
        assert state.digits == [2, 4]

    def test_to_literal(self) -> None:
        assert BigInt(-907).to_state().to_literal() == "-907"
        assert BigInt(0).to_state().to_literal() == "0"


class TestBigIntStateValidation:
    """Валидаторы канонической формы"""

    def test_empty_digits_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BigIntState(sign=True, digits=[])

    def test_digit_out_of_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BigIntState(sign=True, digits=[1, 12])

    def test_leading_zero_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BigIntState(sign=True, digits=[5, 0])

    def test_negative_zero_rejected(self) -> None:
        with pytest.raises(ValidationError, match="negative zero"):
            BigIntState(sign=False, digits=[0])

    def test_positive_zero_accepted(self) -> None:
        state = BigIntState(sign=True, digits=[0])
        assert BigInt.from_state(state) == BigInt(0)


class TestBigIntStateSerialization:
    """JSON сериализация и immutability"""

    def test_json_roundtrip(self) -> None:
        state = BigInt(-735365570193484578306927496).to_state()
        restored = BigIntState.model_validate_json(state.model_dump_json())
        assert restored == state
        assert BigInt.from_state(restored) == BigInt("-735365570193484578306927496")

    def test_frozen(self) -> None:
        state = BigInt(1).to_state()
        with pytest.raises(ValidationError):
            state.sign = False  # type: ignore[misc]

    def test_dump_matches_contract(self) -> None:
        BigIntStateValidator().validate(BigInt(-31415604).to_state().model_dump())
