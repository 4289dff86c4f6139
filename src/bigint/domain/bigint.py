"""
BigInt — Знаковое целое произвольной точности

Immutable Pydantic модель в представлении sign-magnitude:
- magnitude: кортеж беззнаковых 64-битных слов, little-endian
- negative: True только для строго отрицательных значений

Вся работа со словами делегируется src.bigint.math.words; модель отвечает
за знак, нормализацию и операторы.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. magnitude всегда содержит хотя бы одно слово (ноль = (0,))
2. Каждое слово в диапазоне [0, 2**64 - 1]
3. Ноль НИКОГДА не отрицателен: "negative zero" нормализуется при
   создании любого значения (публичном и внутреннем)
4. Операции не мутируют операнды и возвращают новые значения
"""

from typing import Annotated, Any, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, Field, StrictBool, StrictInt, model_validator

from src.bigint.math.radix import (
    HexFormat,
    format_dec,
    format_hex,
    parse_dec,
    parse_hex,
)
from src.bigint.math.words import (
    MAX_WORD,
    WORD_BITS,
    WORD_MASK,
    ZERO_MAGNITUDE,
    add_magnitudes,
    compare_magnitudes,
    divide_magnitudes,
    is_zero_magnitude,
    magnitude_bit,
    multiply_magnitudes,
    normalize_magnitude,
    shift_left_magnitude,
    subtract_magnitudes,
    word_at,
)

# Беззнаковое 64-битное слово
Word = Annotated[StrictInt, Field(ge=0, le=MAX_WORD)]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidOperation(ValueError):
    """
    Нарушение предусловия операции.

    Возникает синхронно и без частичных результатов:
    - сдвиг влево отрицательного значения
    - проверка бита отрицательного значения
    - отрицательная величина сдвига / индекс бита
    - деление (или остаток) на ноль
    """

    pass


# =============================================================================
# BIGINT MODEL
# =============================================================================


class BigInt(BaseModel):
    """
    Знаковое целое произвольной точности.

    Immutable модель (frozen=True): все операторы возвращают новый экземпляр.

    Examples:
        >>> (BigInt.from_word(5) + BigInt.from_word(3)).to_hex()
        '8'
        >>> (BigInt.from_word(3) - BigInt.from_word(5)).to_hex()
        '-2'
        >>> (BigInt.from_word(0xFFFFFFFFFFFFFFFF) + BigInt.from_word(1)).magnitude
        (0, 1)
    """

    magnitude: Tuple[Word, ...] = Field(
        default=ZERO_MAGNITUDE,
        description="Абсолютное значение, 64-битные слова little-endian",
    )
    negative: StrictBool = Field(default=False, description="Строго отрицательное значение")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="before")
    @classmethod
    def normalize_zero(cls, data: Any) -> Any:
        """
        Нормализация на входе: пустая магнитуда → (0,), ноль → negative=False.
        """
        if not isinstance(data, dict):
            return data

        words = data.get("magnitude", ZERO_MAGNITUDE)
        if isinstance(words, (list, tuple)):
            if len(words) == 0:
                data = {**data, "magnitude": ZERO_MAGNITUDE}
                words = ZERO_MAGNITUDE
            if data.get("negative") is True and all(
                isinstance(word, int) and word == 0 for word in words
            ):
                data = {**data, "negative": False}
        return data

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @classmethod
    def _make(cls, words: Sequence[int], negative: bool) -> "BigInt":
        """Внутренний конструктор для результатов операций (слова уже валидны)."""
        magnitude = tuple(words) or ZERO_MAGNITUDE
        if negative and is_zero_magnitude(magnitude):
            negative = False
        return cls.model_construct(magnitude=magnitude, negative=negative)

    @classmethod
    def zero(cls) -> "BigInt":
        """Канонический ноль."""
        return cls._make(ZERO_MAGNITUDE, False)

    @classmethod
    def from_word(cls, word: int, negative: bool = False) -> "BigInt":
        """Значение из одного машинного слова и флага знака."""
        return cls(magnitude=(word,), negative=negative)

    @classmethod
    def from_words(cls, words: Sequence[int], negative: bool = False) -> "BigInt":
        """Значение из явного списка слов (little-endian)."""
        return cls(magnitude=tuple(words), negative=negative)

    @classmethod
    def copy_of(cls, other: "BigInt") -> "BigInt":
        """Независимая копия значения."""
        return cls._make(tuple(other.magnitude), other.negative)

    @classmethod
    def from_int(cls, value: int) -> "BigInt":
        """Конверсия из встроенного int."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")

        remaining = abs(value)
        words = []
        while remaining:
            words.append(remaining & WORD_MASK)
            remaining >>= WORD_BITS
        return cls._make(words or ZERO_MAGNITUDE, value < 0)

    @classmethod
    def from_hex(cls, text: str) -> "BigInt":
        """Разбор шестнадцатеричной записи ("-0x1f", "ff", ...)."""
        words, negative = parse_hex(text)
        return cls._make(words, negative)

    @classmethod
    def from_dec(cls, text: str) -> "BigInt":
        """Разбор десятичной записи ("-42", "18446744073709551616", ...)."""
        words, negative = parse_dec(text)
        return cls._make(words, negative)

    # -------------------------------------------------------------------------
    # Запросы
    # -------------------------------------------------------------------------

    def is_negative(self) -> bool:
        return self.negative

    def is_zero(self) -> bool:
        return is_zero_magnitude(self.magnitude)

    def word_count(self) -> int:
        """Количество хранимых слов (включая старшие нули, если есть)."""
        return len(self.magnitude)

    def word_at(self, index: int) -> int:
        """Слово index магнитуды или 0 за пределами хранимой длины."""
        return word_at(self.magnitude, index)

    def bit_is_set(self, n: int) -> bool:
        """
        Проверка бита n (слово n // 64, смещение n % 64).

        Raises:
            InvalidOperation: Для отрицательного значения или n < 0
        """
        if self.negative:
            raise InvalidOperation("bit test is undefined for negative BigInt")
        if n < 0:
            raise InvalidOperation(f"bit index must be non-negative, got {n}")
        return magnitude_bit(self.magnitude, n)

    # -------------------------------------------------------------------------
    # Знаковая арифметика
    # -------------------------------------------------------------------------

    @staticmethod
    def _simple_add(a: "BigInt", b: "BigInt") -> "BigInt":
        """Сложение при одинаковых знаках: знак общий, магнитуды складываются."""
        return BigInt._make(add_magnitudes(a.magnitude, b.magnitude), a.negative)

    @staticmethod
    def _mixed_add(a: "BigInt", b: "BigInt") -> "BigInt":
        """
        Сложение при разных знаках.

        Знак результата — у операнда с большей магнитудой;
        равные магнитуды дают канонический ноль.
        """
        order = compare_magnitudes(a.magnitude, b.magnitude)
        if order == -1:
            return BigInt._make(subtract_magnitudes(a.magnitude, b.magnitude), a.negative)
        if order == 1:
            return BigInt._make(subtract_magnitudes(b.magnitude, a.magnitude), b.negative)
        return BigInt.zero()

    @staticmethod
    def _signed_add(a: "BigInt", b: "BigInt") -> "BigInt":
        if a.negative == b.negative:
            return BigInt._simple_add(a, b)
        return BigInt._mixed_add(a, b)

    def __add__(self, other: Union["BigInt", int]) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._signed_add(self, rhs)

    def __radd__(self, other: int) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return self._signed_add(lhs, self)

    def _subtract(self, rhs: "BigInt") -> "BigInt":
        if rhs.is_zero():
            return self
        return self._signed_add(self, -rhs)

    def __sub__(self, other: Union["BigInt", int]) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._subtract(rhs)

    def __rsub__(self, other: int) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._subtract(self)

    def __neg__(self) -> "BigInt":
        # _make гарантирует, что -0 остаётся неотрицательным
        return BigInt._make(self.magnitude, not self.negative)

    def __pos__(self) -> "BigInt":
        return self

    def __abs__(self) -> "BigInt":
        return BigInt._make(self.magnitude, False)

    def __lshift__(self, n: int) -> "BigInt":
        """
        Сдвиг влево на n бит.

        Raises:
            InvalidOperation: Для отрицательного значения или n < 0
        """
        if isinstance(n, bool) or not isinstance(n, int):
            return NotImplemented
        if self.negative:
            raise InvalidOperation("left shift is undefined for negative BigInt")
        if n < 0:
            raise InvalidOperation(f"shift amount must be non-negative, got {n}")
        return BigInt._make(shift_left_magnitude(self.magnitude, n), False)

    @staticmethod
    def _multiply(a: "BigInt", b: "BigInt") -> "BigInt":
        # Аккумулятор неотрицателен, знак (XOR) применяется один раз в конце
        product = multiply_magnitudes(a.magnitude, b.magnitude)
        return BigInt._make(product, a.negative != b.negative)

    def __mul__(self, other: Union["BigInt", int]) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._multiply(self, rhs)

    def __rmul__(self, other: int) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return self._multiply(lhs, self)

    @staticmethod
    def _divide(a: "BigInt", b: "BigInt") -> "BigInt":
        """
        Частное с усечением к нулю.

        Поиск ведётся только по магнитудам; знак (XOR знаков операндов)
        применяется к итоговому частному.

        Raises:
            InvalidOperation: Если делитель равен нулю
        """
        if b.is_zero():
            raise InvalidOperation("division by zero")
        quotient = divide_magnitudes(a.magnitude, b.magnitude)
        return BigInt._make(quotient, a.negative != b.negative)

    def __truediv__(self, other: Union["BigInt", int]) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._divide(self, rhs)

    def __rtruediv__(self, other: int) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return self._divide(lhs, self)

    @staticmethod
    def _divmod(a: "BigInt", b: "BigInt") -> Tuple["BigInt", "BigInt"]:
        """Частное и остаток: a == q*b + r, знак r совпадает со знаком a."""
        quotient = BigInt._divide(a, b)
        remainder = a._subtract(BigInt._multiply(quotient, b))
        return quotient, remainder

    def __mod__(self, other: Union["BigInt", int]) -> "BigInt":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._divmod(self, rhs)[1]

    def __rmod__(self, other: int) -> "BigInt":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return self._divmod(lhs, self)[1]

    def __divmod__(self, other: Union["BigInt", int]) -> Tuple["BigInt", "BigInt"]:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._divmod(self, rhs)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: Union["BigInt", int]) -> int:
        """
        Трёхстороннее сравнение с обычной полярностью.

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        rhs = _coerce(other)
        if rhs is None:
            raise TypeError(f"cannot compare BigInt with {type(other).__name__}")

        if self.is_zero() and rhs.is_zero():
            return 0

        if not self.negative and rhs.negative:
            return 1
        if self.negative and not rhs.negative:
            return -1

        # compare_magnitudes инвертирован: -1 означает |self| > |rhs|
        order = -compare_magnitudes(self.magnitude, rhs.magnitude)
        return -order if self.negative else order

    def __eq__(self, other: Any) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) == 0

    def __ne__(self, other: Any) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) != 0

    def __lt__(self, other: Any) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) < 0

    def __le__(self, other: Any) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) <= 0

    def __gt__(self, other: Any) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) > 0

    def __ge__(self, other: Any) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) >= 0

    def __hash__(self) -> int:
        # Согласовано с __eq__, включая сравнение со встроенным int
        return hash(self.to_int())

    def __bool__(self) -> bool:
        return not self.is_zero()

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def to_hex(self, fmt: Optional[HexFormat] = None) -> str:
        """Знаковая hex-запись без ведущих нулей ("0" для нуля)."""
        return format_hex(self.magnitude, self.negative, fmt)

    def to_dec(self) -> str:
        """Знаковая десятичная запись."""
        return format_dec(self.magnitude, self.negative)

    def to_int(self) -> int:
        """Конверсия во встроенный int."""
        value = 0
        for index in range(len(self.magnitude) - 1, -1, -1):
            value = (value << WORD_BITS) | self.magnitude[index]
        return -value if self.negative else value

    def canonical(self) -> "BigInt":
        """То же значение без старших нулевых слов."""
        return BigInt._make(normalize_magnitude(self.magnitude), self.negative)

    def __int__(self) -> int:
        return self.to_int()

    def __str__(self) -> str:
        return self.to_dec()

    def __repr__(self) -> str:
        return f"BigInt.from_hex({self.to_hex()!r})"


def _coerce(value: Any) -> Optional[BigInt]:
    """BigInt как есть, int → BigInt, остальное → None."""
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInt.from_int(value)
    return None
