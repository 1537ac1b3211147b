"""
bignum - arbitrary-precision decimal integers.

- bignum.core        : BigInt value type, digit arithmetic, contracts
- bignum.calculator  : line-oriented op(a,b) calculator and CLI
"""

from bignum.core.domain import BigInt, BigIntState, InvalidNumericLiteral

__all__ = [
    "BigInt",
    "BigIntState",
    "InvalidNumericLiteral",
]

__version__ = "0.1.0"
