"""
Contract Validation Module

Модуль для валидации JSON контрактов bignum.
"""

from .validators import (
    BigIntStateValidator,
    ContractValidator,
    EvaluationRecordValidator,
    SchemaLoader,
)

__all__ = [
    "SchemaLoader",
    "ContractValidator",
    "BigIntStateValidator",
    "EvaluationRecordValidator",
]
