"""
Radix — Текстовое представление магнитуд (hex / decimal)

Форматирование и разбор знаковых целых в шестнадцатеричном и десятичном
виде. Модуль работает на уровне магнитуд (src.bigint.math.words) и не
зависит от модели BigInt; знак передаётся отдельным флагом.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ноль всегда форматируется как "0", без знака
2. Старшие нулевые слова не выводятся вовсе
3. Ведущее слово выводится без дополнения нулями, остальные дополняются
   до полной ширины (16 hex-цифр / 19 десятичных цифр на чанк)
4. format → parse возвращает исходное значение
"""

import re
from dataclasses import dataclass
from typing import Final, List, Optional, Sequence, Tuple

from src.bigint.math.words import (
    WORD_BITS,
    ZERO_MAGNITUDE,
    Words,
    add_magnitudes,
    divmod_word,
    is_zero_magnitude,
    multiply_magnitudes,
    normalize_magnitude,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Hex-цифр на одно 64-битное слово
HEX_DIGITS_PER_WORD: Final[int] = WORD_BITS // 4

# Наибольшая степень 10, помещающаяся в слово
DEC_CHUNK: Final[int] = 10**19

# Десятичных цифр на один чанк
DEC_DIGITS_PER_CHUNK: Final[int] = 19

_HEX_BODY = re.compile(r"[0-9a-fA-F]+")
_DEC_BODY = re.compile(r"[0-9]+")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigIntParseError(ValueError):
    """Текст не является корректной записью целого числа."""

    pass


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class HexFormat:
    """Параметры hex-форматирования.

    - uppercase: цифры A-F в верхнем регистре
    - prefix: добавлять "0x" после знака
    """

    uppercase: bool = False
    prefix: bool = False


DEFAULT_HEX_FORMAT: Final[HexFormat] = HexFormat()


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_hex(
    words: Sequence[int], negative: bool, fmt: Optional[HexFormat] = None
) -> str:
    """
    Знаковая шестнадцатеричная запись магнитуды.

    Слова выводятся от старшего к младшему. Первое выводимое слово —
    первое ненулевое сверху (или единственное оставшееся) — без дополнения,
    все последующие дополняются нулями до 16 цифр.

    Args:
        words: Магнитуда (little-endian)
        negative: Флаг знака (игнорируется для нуля)
        fmt: Параметры форматирования (default: строчные цифры, без префикса)

    Returns:
        Строка вида "-1f", "10000000000000000", "0"

    Examples:
        >>> format_hex((0, 1), False)
        '10000000000000000'
        >>> format_hex((0,), True)
        '0'
        >>> format_hex((2,), True)
        '-2'
    """
    fmt = fmt or DEFAULT_HEX_FORMAT
    canonical = normalize_magnitude(words)

    parts: List[str] = []
    if negative and not is_zero_magnitude(canonical):
        parts.append("-")
    if fmt.prefix:
        parts.append("0x")

    spec = "X" if fmt.uppercase else "x"
    top = len(canonical) - 1
    parts.append(format(canonical[top], spec))
    for index in range(top - 1, -1, -1):
        parts.append(format(canonical[index], f"0{HEX_DIGITS_PER_WORD}{spec}"))

    return "".join(parts)


def format_dec(words: Sequence[int], negative: bool) -> str:
    """
    Знаковая десятичная запись магнитуды.

    Магнитуда многократно делится на 10**19 коротким делением
    (divmod_word); остатки — чанки по 19 цифр, собираемые от младшего к
    старшему. Ведущий чанк выводится без дополнения нулями.

    Examples:
        >>> format_dec((0, 1), False)
        '18446744073709551616'
        >>> format_dec((42,), True)
        '-42'
    """
    remaining: Words = normalize_magnitude(words)
    if is_zero_magnitude(remaining):
        return "0"

    chunks: List[int] = []
    while not is_zero_magnitude(remaining):
        remaining, chunk = divmod_word(remaining, DEC_CHUNK)
        chunks.append(chunk)

    parts: List[str] = ["-"] if negative else []
    parts.append(str(chunks[-1]))
    for chunk in reversed(chunks[:-1]):
        parts.append(f"{chunk:0{DEC_DIGITS_PER_CHUNK}d}")

    return "".join(parts)


# =============================================================================
# РАЗБОР
# =============================================================================


def _split_sign(text: str) -> Tuple[str, bool]:
    if not isinstance(text, str):
        raise BigIntParseError(f"expected str, got {type(text).__name__}")

    body = text.strip().replace("_", "")
    negative = False
    if body[:1] in ("-", "+"):
        negative = body[0] == "-"
        body = body[1:]
    return body, negative


def parse_hex(text: str) -> Tuple[Words, bool]:
    """
    Разбор шестнадцатеричной записи.

    Допускается знак (+/-), префикс 0x/0X, цифры в любом регистре,
    разделители "_".

    Returns:
        (магнитуда, negative); для нуля negative всегда False

    Raises:
        BigIntParseError: Если запись пустая или содержит недопустимые символы

    Examples:
        >>> parse_hex("-0x1_0000000000000000")
        ((0, 1), True)
    """
    body, negative = _split_sign(text)
    if body[:2] in ("0x", "0X"):
        body = body[2:]

    if not _HEX_BODY.fullmatch(body):
        raise BigIntParseError(f"invalid hexadecimal literal: {text!r}")

    words: List[int] = []
    for end in range(len(body), 0, -HEX_DIGITS_PER_WORD):
        start = max(end - HEX_DIGITS_PER_WORD, 0)
        words.append(int(body[start:end], 16))

    magnitude = normalize_magnitude(words)
    return magnitude, negative and not is_zero_magnitude(magnitude)


def parse_dec(text: str) -> Tuple[Words, bool]:
    """
    Разбор десятичной записи.

    Чанки по 19 цифр слева направо: magnitude = magnitude * 10**k + chunk.

    Raises:
        BigIntParseError: Если запись пустая или содержит не-цифры

    Examples:
        >>> parse_dec("18446744073709551616")
        ((0, 1), False)
    """
    body, negative = _split_sign(text)

    if not _DEC_BODY.fullmatch(body):
        raise BigIntParseError(f"invalid decimal literal: {text!r}")

    magnitude: Words = ZERO_MAGNITUDE
    head = len(body) % DEC_DIGITS_PER_CHUNK or DEC_DIGITS_PER_CHUNK
    start = 0
    end = head
    while start < len(body):
        chunk = body[start:end]
        scale = (10 ** len(chunk),)
        magnitude = add_magnitudes(multiply_magnitudes(scale, magnitude), (int(chunk),))
        start = end
        end += DEC_DIGITS_PER_CHUNK

    magnitude = normalize_magnitude(magnitude)
    return magnitude, negative and not is_zero_magnitude(magnitude)
