"""
BigInt - Целое число произвольной точности

Sign-magnitude представление:
- sign: True для неотрицательных значений, False для отрицательных
- digits: десятичные цифры, младший разряд первым (index 0 = единицы)

Арифметика (+, -, *) выполняется schoolbook-алгоритмами из
bignum.core.math.digit_arithmetic. Compound-операторы (+=, -=, *=) и
assign() заменяют состояние объекта на месте, бинарные операторы
возвращают новый объект.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (после каждой публичной операции):
1. digits никогда не пуст
2. Нет старших нулей, кроме нуля, который представлен как [0]
3. Ноль всегда имеет sign=True (отрицательный ноль непредставим)
4. Каждая цифра лежит в [0, 9]
"""

from typing import Optional, Union

from bignum.core.domain.literal import parse_literal
from bignum.core.domain.state import BigIntState
from bignum.core.math.digit_arithmetic import (
    add_digits,
    compare_abs_digits,
    digits_to_int,
    digits_to_str,
    int_to_digits,
    is_zero_digits,
    multiply_digits,
    strip_leading_zeros,
    subtract_abs_digits,
)

BigIntLike = Union["BigInt", int, str]


class BigInt:
    """
    Знаковое целое произвольной точности в десятичной системе.

    Конструкторы:
        BigInt()            → 0
        BigInt(-42)         → из int
        BigInt("-42")       → из строки [+-]?[0-9]+
        BigInt(other)       → глубокая копия

    Объект изменяемый (+=, -=, *=, assign), поэтому не хешируется.
    """

    __slots__ = ("_sign", "_digits")

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Optional[BigIntLike] = None):
        """
        Args:
            value: BigInt, int или десятичная строка (None → ноль)

        Raises:
            InvalidNumericLiteral: Строка не соответствует [+-]?[0-9]+
            TypeError: Неподдерживаемый тип (в т.ч. bool)
        """
        self._sign = True
        self._digits = [0]
        if value is not None:
            self._load(value)

    def _load(self, value: BigIntLike) -> None:
        if isinstance(value, BigInt):
            self._sign = value._sign
            self._digits = list(value._digits)
        elif isinstance(value, bool):
            raise TypeError("BigInt cannot be constructed from bool")
        elif isinstance(value, int):
            self._sign = value >= 0
            self._digits = int_to_digits(value)
        elif isinstance(value, str):
            # parse_literal бросает исключение до изменения состояния
            self._sign, self._digits = parse_literal(value)
        else:
            raise TypeError(f"BigInt cannot be constructed from {type(value).__name__}")

    def _set_normalized(self, sign: bool, digits: list[int]) -> None:
        """Установка состояния с нормализацией: без старших нулей, ноль положителен."""
        self._digits = strip_leading_zeros(digits)
        self._sign = True if is_zero_digits(self._digits) else sign

    @classmethod
    def _coerce(cls, value: object) -> Optional["BigInt"]:
        """BigInt как есть, int → BigInt, остальное → None (NotImplemented)."""
        if isinstance(value, BigInt):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        return None

    # =========================================================================
    # ПРИСВАИВАНИЕ И КОПИРОВАНИЕ
    # =========================================================================

    def assign(self, value: BigIntLike) -> "BigInt":
        """
        Замена значения на месте (аналог operator=).

        Присваивание самому себе ничего не делает.

        Returns:
            self
        """
        if value is self:
            return self
        self._load(value)
        return self

    def copy(self) -> "BigInt":
        return BigInt(self)

    def __copy__(self) -> "BigInt":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "BigInt":
        return self.copy()

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    @property
    def sign(self) -> bool:
        """True для неотрицательных значений."""
        return self._sign

    @property
    def digits(self) -> list[int]:
        """Копия цифр, младший разряд первым."""
        return list(self._digits)

    def size(self) -> int:
        """Количество десятичных цифр (без знака)."""
        return len(self._digits)

    def __len__(self) -> int:
        return self.size()

    def is_zero(self) -> bool:
        return is_zero_digits(self._digits)

    def is_negative(self) -> bool:
        return not self._sign

    # =========================================================================
    # КОНВЕРСИЯ
    # =========================================================================

    def __str__(self) -> str:
        return ("" if self._sign else "-") + digits_to_str(self._digits)

    def __repr__(self) -> str:
        return f"BigInt('{self}')"

    def __int__(self) -> int:
        return self.to_int()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def to_int(self) -> int:
        magnitude = digits_to_int(self._digits)
        return magnitude if self._sign else -magnitude

    def to_state(self) -> BigIntState:
        """Immutable снимок для сериализации."""
        return BigIntState(sign=self._sign, digits=list(self._digits))

    @classmethod
    def from_state(cls, state: BigIntState) -> "BigInt":
        """Восстановление из снимка (инварианты уже проверены моделью)."""
        result = cls()
        result._sign = state.sign
        result._digits = list(state.digits)
        return result

    # =========================================================================
    # ВСПОМОГАТЕЛЬНЫЕ ОПЕРАЦИИ НАД МОДУЛЯМИ
    # =========================================================================

    def _is_abs_greater_or_equal(self, other: "BigInt") -> bool:
        """
        |self| >= |other|.

        Отрицательный операнд заменяется на противоположный, далее
        обычное сравнение >=. Вызывается только при разных знаках.
        """
        left = -self if not self._sign else self
        right = -other if not other._sign else other
        return left >= right

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def __neg__(self) -> "BigInt":
        result = self.copy()
        if not result.is_zero():
            result._sign = not result._sign
        return result

    def __pos__(self) -> "BigInt":
        return self.copy()

    def __abs__(self) -> "BigInt":
        result = self.copy()
        result._sign = True
        return result

    def __iadd__(self, other: object) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented

        if self._sign != rhs._sign:
            if self._is_abs_greater_or_equal(rhs):
                # |self| >= |rhs|: знак self сохраняется
                self._set_normalized(self._sign, subtract_abs_digits(self._digits, rhs._digits))
            else:
                self._set_normalized(rhs._sign, subtract_abs_digits(rhs._digits, self._digits))
        else:
            self._set_normalized(self._sign, add_digits(self._digits, rhs._digits))

        return self

    def __isub__(self, other: object) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.__iadd__(-rhs)

    def __imul__(self, other: object) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented

        self._set_normalized(self._sign == rhs._sign, multiply_digits(self._digits, rhs._digits))
        return self

    def __add__(self, other: object) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        result = self.copy()
        result += rhs
        return result

    def __sub__(self, other: object) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        result = self.copy()
        result -= rhs
        return result

    def __mul__(self, other: object) -> "BigInt":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        result = self.copy()
        result *= rhs
        return result

    __radd__ = __add__
    __rmul__ = __mul__

    def __rsub__(self, other: object) -> "BigInt":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def _less_than(self, other: "BigInt") -> bool:
        if self._sign != other._sign:
            # Неотрицательное всегда больше
            return other._sign
        magnitude = compare_abs_digits(self._digits, other._digits)
        if self._sign:
            return magnitude < 0
        # Оба отрицательные: больший модуль ⇒ меньшее значение
        return magnitude > 0

    def _greater_than(self, other: "BigInt") -> bool:
        if self._sign != other._sign:
            return self._sign
        magnitude = compare_abs_digits(self._digits, other._digits)
        if self._sign:
            return magnitude > 0
        return magnitude < 0

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._sign == rhs._sign and self._digits == rhs._digits

    def __ne__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return not self == rhs

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._less_than(rhs)

    def __gt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._greater_than(rhs)

    def __le__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return not self._greater_than(rhs)

    def __ge__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return not self._less_than(rhs)
