"""
Contract Validation Module

Модуль для валидации JSON контракта сериализованного BigInt.
"""

from .validators import (
    BigIntValidator,
    ContractValidator,
    SchemaLoader,
    bigint_from_contract,
    bigint_to_contract,
    validate_bigint,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntValidator",
    # Functions
    "validate_bigint",
    "bigint_from_contract",
    "bigint_to_contract",
]
