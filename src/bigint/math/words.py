"""
Words — Примитивы над магнитудами (unsigned 64-bit words)

Магнитуда — упорядоченная последовательность беззнаковых 64-битных слов,
little-endian: индекс 0 = младшее слово.

Все функции модуля работают ТОЛЬКО с магнитудами и ничего не знают о знаке.
Знаковая арифметика собрана в src.bigint.domain.bigint.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Доступ к слову за пределами последовательности возвращает 0
   (магнитуда концептуально бесконечна и дополнена нулями сверху)
2. Функции никогда не мутируют входные последовательности
3. Результат всегда содержит хотя бы одно слово
4. compare_magnitudes использует ИНВЕРТИРОВАННУЮ конвенцию:
   -1 означает a > b, +1 означает a < b
"""

import logging
from typing import Final, List, Sequence, Tuple

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ СЛОВА
# =============================================================================

# Ширина слова в битах
WORD_BITS: Final[int] = 64

# Маска для усечения до ширины слова
WORD_MASK: Final[int] = (1 << WORD_BITS) - 1

# Максимальное значение слова (UINT64_MAX)
MAX_WORD: Final[int] = WORD_MASK

# Старший бит слова
WORD_TOP_BIT: Final[int] = 1 << (WORD_BITS - 1)

Words = Tuple[int, ...]

ZERO_MAGNITUDE: Final[Words] = (0,)
ONE_MAGNITUDE: Final[Words] = (1,)


# =============================================================================
# ДОСТУП К СЛОВАМ
# =============================================================================


def word_at(words: Sequence[int], index: int) -> int:
    """
    Слово с индексом index или 0, если индекс вне последовательности.

    Args:
        words: Магнитуда (little-endian)
        index: Индекс слова (0 = младшее)

    Returns:
        Значение слова, 0 за пределами хранимой длины

    Examples:
        >>> word_at((5, 7), 1)
        7
        >>> word_at((5, 7), 10)
        0
    """
    if 0 <= index < len(words):
        return words[index]
    return 0


def is_zero_magnitude(words: Sequence[int]) -> bool:
    """True если все слова равны нулю (пустая последовательность тоже ноль)."""
    return all(word == 0 for word in words)


def normalize_magnitude(words: Sequence[int]) -> Words:
    """
    Каноническая форма магнитуды: без старших нулевых слов, минимум одно слово.

    Examples:
        >>> normalize_magnitude([1, 0, 0])
        (1,)
        >>> normalize_magnitude([])
        (0,)
        >>> normalize_magnitude([0, 0])
        (0,)
    """
    top = len(words)
    while top > 1 and words[top - 1] == 0:
        top -= 1
    if top == 0:
        return ZERO_MAGNITUDE
    return tuple(words[:top])


def bit_length(words: Sequence[int]) -> int:
    """Количество значащих бит магнитуды (0 для нуля)."""
    canonical = normalize_magnitude(words)
    top = canonical[-1]
    if top == 0:
        return 0
    return (len(canonical) - 1) * WORD_BITS + top.bit_length()


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Сравнение магнитуд с ИНВЕРТИРОВАННОЙ конвенцией.

    Сканирует слова от старшего индекса max(len(a), len(b)) - 1 к нулю
    и возвращает результат на первом различающемся слове.

    Args:
        a: Левая магнитуда
        b: Правая магнитуда

    Returns:
        -1 если a > b
        +1 если a < b
         0 если равны

    Examples:
        >>> compare_magnitudes((9,), (3,))
        -1
        >>> compare_magnitudes((3,), (0, 1))
        1
        >>> compare_magnitudes((4, 0, 0), (4,))
        0
    """
    length = max(len(a), len(b))

    # Одно слово: прямое сравнение
    if length <= 1:
        left = word_at(a, 0)
        right = word_at(b, 0)
        if left > right:
            return -1
        if left < right:
            return 1
        return 0

    for index in range(length - 1, -1, -1):
        left = word_at(a, index)
        right = word_at(b, index)
        if left > right:
            return -1
        if left < right:
            return 1

    return 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> Words:
    """
    Ripple-carry сложение магнитуд.

    Сумма a[i] + b[i] + carry накапливается в аккумуляторе шире слова;
    всё, что выше 64 бит, уходит в перенос. Финальный перенос добавляется
    новым старшим словом. Результат НЕ нормализуется.

    Examples:
        >>> add_magnitudes((0xFFFFFFFFFFFFFFFF,), (1,))
        (0, 1)
        >>> add_magnitudes((2, 3), (5,))
        (7, 3)
    """
    length = max(len(a), len(b))
    output: List[int] = []
    carry = 0

    for index in range(length):
        total = word_at(a, index) + word_at(b, index) + carry
        output.append(total & WORD_MASK)
        carry = total >> WORD_BITS

    if carry:
        output.append(carry)

    if not output:
        return ZERO_MAGNITUDE
    return tuple(output)


def subtract_magnitudes(a: Sequence[int], b: Sequence[int]) -> Words:
    """
    Ripple-borrow вычитание магнитуд: a - b.

    ПРЕДУСЛОВИЕ: a >= b (проверяется вызывающим через compare_magnitudes).
    При нарушении результат некорректен.

    При underflow слово заворачивается по модулю 2**64 и заём уходит в
    следующее слово. Старшие нулевые слова, появившиеся как артефакт
    вычитания, отбрасываются; значащие нули ниже старшего ненулевого
    слова сохраняются.

    Examples:
        >>> subtract_magnitudes((0, 1), (1,))
        (18446744073709551615,)
        >>> subtract_magnitudes((5, 7), (5, 7))
        (0,)
        >>> subtract_magnitudes((0, 0, 1), (1,))
        (18446744073709551615, 18446744073709551615)
    """
    length = max(len(a), len(b))
    output: List[int] = []
    borrow = 0

    for index in range(length):
        diff = word_at(a, index) - word_at(b, index) - borrow
        if diff < 0:
            # (MAX_WORD - (b - a)) + 1 == a - b + 2**64
            diff += MAX_WORD + 1
            borrow = 1
        else:
            borrow = 0
        output.append(diff)

    return normalize_magnitude(output)


# =============================================================================
# БИТОВЫЕ ОПЕРАЦИИ
# =============================================================================


def magnitude_bit(words: Sequence[int], n: int) -> bool:
    """
    Проверка бита n магнитуды (слово n // 64, смещение n % 64).

    Биты выше хранимой длины считаются нулевыми.
    """
    return (word_at(words, n // WORD_BITS) >> (n % WORD_BITS)) & 1 == 1


def shift_left_magnitude(words: Sequence[int], n: int) -> Words:
    """
    Сдвиг магнитуды влево на n бит.

    Сначала сдвиг на остаток n % 64 с межсловным переносом старших бит,
    затем добавление n // 64 нулевых слов в младший конец.

    Args:
        words: Магнитуда
        n: Величина сдвига (n >= 0)

    Examples:
        >>> shift_left_magnitude((1,), 64)
        (0, 1)
        >>> shift_left_magnitude((0x8000000000000000,), 1)
        (0, 1)
    """
    if n < 0:
        raise ValueError(f"shift amount must be non-negative, got {n}")

    shift_words = n // WORD_BITS
    shift_bits = n % WORD_BITS

    output: List[int] = []
    carry = 0

    for word in words:
        output.append(((word << shift_bits) & WORD_MASK) | carry)
        # shift_bits == 0: сдвиг на полную ширину слова не выполняем
        carry = word >> (WORD_BITS - shift_bits) if shift_bits > 0 else 0

    if carry:
        output.append(carry)

    if not output:
        output.append(0)

    return tuple([0] * shift_words + output)


def halve_magnitude(words: Sequence[int]) -> Words:
    """
    Деление магнитуды на 2 (сдвиг вправо на 1 бит).

    Слова обрабатываются от старшего к младшему: младший бит каждого слова
    переносится в старший бит следующего младшего слова.
    Работает над собственной копией, вход не изменяется.

    Examples:
        >>> halve_magnitude((0, 1))
        (9223372036854775808, 0)
        >>> halve_magnitude((7,))
        (3,)
    """
    output = list(words) or [0]
    carry = 0

    for index in range(len(output) - 1, -1, -1):
        word = output[index]
        output[index] = (word >> 1) | (WORD_TOP_BIT if carry else 0)
        carry = word & 1

    return tuple(output)


# =============================================================================
# УМНОЖЕНИЕ И ДЕЛЕНИЕ
# =============================================================================


def multiply_magnitudes(a: Sequence[int], b: Sequence[int]) -> Words:
    """
    Умножение магнитуд методом shift-and-add.

    Для каждого бита i в диапазоне 0 .. 64 * len(a) - 1, установленного в a,
    к аккумулятору прибавляется b << i. Schoolbook O(bits × words).

    Examples:
        >>> multiply_magnitudes((7,), (6,))
        (42,)
    """
    accumulator: Words = ZERO_MAGNITUDE

    if is_zero_magnitude(b):
        return ZERO_MAGNITUDE

    for i in range(len(a) * WORD_BITS):
        if magnitude_bit(a, i):
            accumulator = add_magnitudes(accumulator, shift_left_magnitude(b, i))

    return normalize_magnitude(accumulator)


def divide_magnitudes(a: Sequence[int], b: Sequence[int]) -> Words:
    """
    Частное floor(a / b) бинарным поиском по магнитуде.

    Ищется единственное q >= 0 такое, что q*b <= a < (q+1)*b.
    Используется сходящийся вариант с верхней серединой:
        lower = 0, upper = a
        while lower < upper:
            mid = (lower + upper + 1) / 2
            mid*b > a  → upper = mid - 1
            иначе      → lower = mid
    Каждая итерация строго сужает интервал, поэтому цикл завершается
    за O(log a) шагов.

    Args:
        a: Делимое (магнитуда)
        b: Делитель (магнитуда, НЕ ноль)

    Raises:
        ZeroDivisionError: Если b равен нулю
    """
    if is_zero_magnitude(b):
        raise ZeroDivisionError("magnitude division by zero")

    dividend = normalize_magnitude(a)
    divisor = normalize_magnitude(b)

    # Быстрые выходы: a < b → 0, a == b → 1
    order = compare_magnitudes(dividend, divisor)
    if order == 1:
        return ZERO_MAGNITUDE
    if order == 0:
        return ONE_MAGNITUDE

    lower: Words = ZERO_MAGNITUDE
    upper: Words = dividend
    iterations = 0

    while compare_magnitudes(lower, upper) == 1:
        iterations += 1
        mid = normalize_magnitude(
            halve_magnitude(add_magnitudes(add_magnitudes(lower, upper), ONE_MAGNITUDE))
        )
        product = multiply_magnitudes(divisor, mid)
        if compare_magnitudes(product, dividend) == -1:
            # mid*b > a: перелёт
            upper = subtract_magnitudes(mid, ONE_MAGNITUDE)
        else:
            lower = mid

    logger.debug(
        "divide_magnitudes: %d-word / %d-word converged in %d iterations",
        len(dividend),
        len(divisor),
        iterations,
    )
    return normalize_magnitude(lower)


def divmod_word(words: Sequence[int], divisor: int) -> Tuple[Words, int]:
    """
    Короткое деление магнитуды на одно слово.

    Идёт от старшего слова к младшему, остаток предыдущего шага становится
    старшей половиной 128-битного промежуточного делимого.

    Args:
        words: Делимое (магнитуда)
        divisor: Делитель, 0 < divisor <= MAX_WORD

    Returns:
        (частное, остаток)

    Examples:
        >>> divmod_word((17,), 5)
        ((3,), 2)
    """
    if divisor <= 0 or divisor > MAX_WORD:
        raise ValueError(f"divisor must be in (0, {MAX_WORD}], got {divisor}")

    quotient = [0] * max(len(words), 1)
    remainder = 0

    for index in range(len(words) - 1, -1, -1):
        current = (remainder << WORD_BITS) | words[index]
        quotient[index], remainder = divmod(current, divisor)

    return normalize_magnitude(quotient), remainder
