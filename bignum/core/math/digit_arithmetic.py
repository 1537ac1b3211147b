"""
Digit Arithmetic - Schoolbook примитивы над десятичными цифрами

Модуль содержит чистые функции над последовательностями цифр base-10,
хранимыми в порядке little-endian (index 0 = разряд единиц):
- Нормализация (удаление старших нулей)
- Сравнение модулей
- Сложение с переносом, вычитание с заёмом, умножение в столбик
- Конверсия int ↔ digits ↔ str

ИНВАРИАНТЫ КАНОНИЧЕСКОЙ ФОРМЫ:
1. Последовательность цифр никогда не пуста
2. Нет старших нулей, кроме самого нуля, который равен [0]
3. Каждая цифра лежит в [0, 9]

Функции никогда не изменяют входные списки: результат всегда новый список.
"""

from typing import Final, Sequence

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Основание системы счисления
DIGIT_BASE: Final[int] = 10

# Каноническое представление нуля
ZERO_DIGITS: Final[tuple[int, ...]] = (0,)


# =============================================================================
# НОРМАЛИЗАЦИЯ И ПРОВЕРКИ
# =============================================================================


def strip_leading_zeros(digits: Sequence[int]) -> list[int]:
    """
    Удаление старших нулевых цифр (в конце little-endian списка).

    Всегда оставляет минимум одну цифру.

    Examples:
        >>> strip_leading_zeros([3, 0, 0])
        [3]
        >>> strip_leading_zeros([0, 0])
        [0]
    """
    result = list(digits) or [0]
    while len(result) > 1 and result[-1] == 0:
        result.pop()
    return result


def is_zero_digits(digits: Sequence[int]) -> bool:
    """True если последовательность (в канонической форме) представляет ноль."""
    return len(digits) == 1 and digits[0] == 0


def validate_digits(digits: Sequence[int]) -> None:
    """
    Проверка канонической формы последовательности цифр.

    Raises:
        ValueError: Если последовательность пуста, содержит значение вне [0, 9]
            или имеет старшие нули
    """
    if len(digits) == 0:
        raise ValueError("digits must contain at least one element")

    for position, digit in enumerate(digits):
        if isinstance(digit, bool) or not isinstance(digit, int):
            raise ValueError(f"digit at position {position} is not an int: {digit!r}")
        if digit < 0 or digit >= DIGIT_BASE:
            raise ValueError(f"digit at position {position} out of range [0, 9]: {digit}")

    if len(digits) > 1 and digits[-1] == 0:
        raise ValueError("digits must not have leading (most-significant) zeros")


# =============================================================================
# СРАВНЕНИЕ МОДУЛЕЙ
# =============================================================================


def compare_abs_digits(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Сравнение модулей двух канонических последовательностей.

    Больше цифр ⇒ больший модуль. При равной длине решает первая
    несовпадающая цифра, начиная со старшего разряда.

    Returns:
        -1 если |a| < |b|, 0 если равны, 1 если |a| > |b|
    """
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return 1 if a[i] > b[i] else -1

    return 0


# =============================================================================
# SCHOOLBOOK АРИФМЕТИКА
# =============================================================================


def add_digits(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Сложение модулей с переносом от младшего разряда к старшему.

    Более короткий операнд дополняется неявными нулями. Остаточный
    перенос добавляет новый старший разряд.

    Examples:
        >>> add_digits([9, 9], [1])
        [0, 0, 1]
    """
    size = max(len(a), len(b))
    result: list[int] = []
    carry = 0

    for i in range(size):
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        result.append(total % DIGIT_BASE)
        carry = total // DIGIT_BASE

    if carry:
        result.append(carry)

    return strip_leading_zeros(result)


def subtract_abs_digits(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Вычитание модулей |a| - |b| с заёмом.

    Недостающие цифры b считаются нулями.

    ВАЖНО: предусловие |a| >= |b| НЕ проверяется. При его нарушении
    результат не определён. Внутренний примитив: вызывающий код обязан
    сравнить модули заранее (см. compare_abs_digits).

    Examples:
        >>> subtract_abs_digits([0, 0, 1], [1])
        [9, 9]
    """
    result: list[int] = []
    borrow = 0

    for i in range(len(a)):
        diff = a[i] - borrow
        if i < len(b):
            diff -= b[i]
        if diff < 0:
            diff += DIGIT_BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    return strip_leading_zeros(result)


def multiply_digits(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Умножение модулей в столбик, O(len(a) * len(b)).

    Результат заранее заполнен нулями длины len(a) + len(b). Для каждой
    цифры a[i] внутренний цикл продолжается за пределы len(b), пока
    остаётся ненулевой перенос.

    Examples:
        >>> multiply_digits([2, 1], [2, 1])
        [4, 4, 1]
    """
    result = [0] * (len(a) + len(b))

    for i in range(len(a)):
        carry = 0
        j = 0
        while j < len(b) or carry:
            accumulated = result[i + j] + carry
            if j < len(b):
                accumulated += a[i] * b[j]
            result[i + j] = accumulated % DIGIT_BASE
            carry = accumulated // DIGIT_BASE
            j += 1

    return strip_leading_zeros(result)


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def int_to_digits(value: int) -> list[int]:
    """
    Разложение модуля int на цифры (младший разряд первым).

    Повторяет value % 10, value //= 10. Ноль отображается в [0].
    """
    magnitude = abs(value)
    if magnitude == 0:
        return list(ZERO_DIGITS)

    digits: list[int] = []
    while magnitude > 0:
        digits.append(magnitude % DIGIT_BASE)
        magnitude //= DIGIT_BASE
    return digits


def digits_to_int(digits: Sequence[int]) -> int:
    """Сборка неотрицательного int из little-endian цифр (схема Горнера)."""
    value = 0
    for digit in reversed(digits):
        value = value * DIGIT_BASE + digit
    return value


def digits_to_str(digits: Sequence[int]) -> str:
    """Запись цифр от старшего разряда к младшему (без знака)."""
    return "".join(chr(ord("0") + digit) for digit in reversed(digits))
