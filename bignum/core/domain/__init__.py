"""
Domain models and value objects.

Contains the BigInt value type, its literal grammar and serializable state.
"""

from bignum.core.domain.bigint import BigInt, BigIntLike
from bignum.core.domain.literal import (
    LITERAL_PATTERN,
    InvalidNumericLiteral,
    is_valid_literal,
    parse_literal,
)
from bignum.core.domain.state import BigIntState

__all__ = [
    # Value type
    "BigInt",
    "BigIntLike",
    # Literal grammar
    "LITERAL_PATTERN",
    "InvalidNumericLiteral",
    "is_valid_literal",
    "parse_literal",
    # State model
    "BigIntState",
]
