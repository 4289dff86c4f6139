"""
Word-level math primitives для BigInt

Операции над магнитудами (последовательностями 64-битных слов) и
текстовое представление в hex/decimal.
"""

# Words (магнитуды)
from src.bigint.math.words import (
    # Constants
    MAX_WORD,
    WORD_BITS,
    WORD_MASK,
    ZERO_MAGNITUDE,
    # Access
    bit_length,
    is_zero_magnitude,
    normalize_magnitude,
    word_at,
    # Primitives
    add_magnitudes,
    compare_magnitudes,
    divide_magnitudes,
    divmod_word,
    halve_magnitude,
    magnitude_bit,
    multiply_magnitudes,
    shift_left_magnitude,
    subtract_magnitudes,
)

# Radix (hex / decimal)
from src.bigint.math.radix import (
    DEC_CHUNK,
    DEC_DIGITS_PER_CHUNK,
    HEX_DIGITS_PER_WORD,
    BigIntParseError,
    HexFormat,
    format_dec,
    format_hex,
    parse_dec,
    parse_hex,
)

__all__ = [
    # Words — Constants
    "MAX_WORD",
    "WORD_BITS",
    "WORD_MASK",
    "ZERO_MAGNITUDE",
    # Words — Access
    "bit_length",
    "is_zero_magnitude",
    "normalize_magnitude",
    "word_at",
    # Words — Primitives
    "add_magnitudes",
    "compare_magnitudes",
    "divide_magnitudes",
    "divmod_word",
    "halve_magnitude",
    "magnitude_bit",
    "multiply_magnitudes",
    "shift_left_magnitude",
    "subtract_magnitudes",
    # Radix — Constants
    "DEC_CHUNK",
    "DEC_DIGITS_PER_CHUNK",
    "HEX_DIGITS_PER_WORD",
    # Radix — Exceptions
    "BigIntParseError",
    # Radix — Config
    "HexFormat",
    # Radix — Functions
    "format_dec",
    "format_hex",
    "parse_dec",
    "parse_hex",
]
