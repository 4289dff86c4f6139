"""
Test suite for bigint-core

Contains:
- tests/unit/          : Unit tests for word primitives, radix conversion,
                         the BigInt model and the JSON contract
"""
