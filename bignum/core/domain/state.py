"""
BigIntState - Immutable снимок значения BigInt

Pydantic модель для сериализации/десериализации BigInt.
Соответствует схеме bigint_state (bignum/core/contracts/schema).

Инварианты канонической формы проверяются валидаторами модели, поэтому
любой успешно созданный BigIntState можно безопасно восстановить в BigInt.
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from bignum.core.math.digit_arithmetic import (
    digits_to_str,
    is_zero_digits,
    validate_digits,
)


class BigIntState(BaseModel):
    """
    Снимок BigInt: знак и цифры (младший разряд первым).

    Immutable модель (frozen=True).
    """

    sign: bool = Field(..., description="True = неотрицательное значение")
    digits: list[int] = Field(
        ..., min_length=1, description="Десятичные цифры, младший разряд первым"
    )

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_canonical_digits(cls, v: list[int]) -> list[int]:
        """Каждая цифра в [0, 9], без старших нулей."""
        validate_digits(v)
        return v

    @model_validator(mode="after")
    def validate_zero_is_positive(self) -> "BigIntState":
        """Отрицательный ноль непредставим."""
        if not self.sign and is_zero_digits(self.digits):
            raise ValueError("zero must have sign=True (negative zero is not representable)")
        return self

    def to_literal(self) -> str:
        """Каноническая строковая запись значения."""
        prefix = "" if self.sign else "-"
        return prefix + digits_to_str(self.digits)
