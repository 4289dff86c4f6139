"""
Domain models and value objects.

Contains the BigInt value type and its error taxonomy.
"""

from src.bigint.domain.bigint import BigInt, InvalidOperation, Word
from src.bigint.math.radix import BigIntParseError, HexFormat

__all__ = [
    "BigInt",
    "Word",
    "InvalidOperation",
    "BigIntParseError",
    "HexFormat",
]
