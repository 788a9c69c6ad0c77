"""
Limbs — примитивы над массивами 32-битных limbs

Magnitude хранится как последовательность беззнаковых 32-битных limbs,
младший limb первым (little-endian). Каноническая форма не содержит
старших нулевых limbs; пустая последовательность означает ноль.

Все функции чистые: входы не изменяются, результат возвращается новым tuple.
Промежуточные суммы и разности вычисляются в double-width аккумуляторе,
из которого carry/borrow переносится в следующий limb.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый limb в диапазоне [0, LIMB_MASK]
2. Результаты add/subtract/divmod возвращаются в канонической форме
3. subtract_limbs требует bigger >= smaller (иначе результат wrapped)
"""

from typing import Final, Iterable, Sequence, Tuple

from src.core.math.errors import DivideByZeroError

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Разрядность одного limb
LIMB_BITS: Final[int] = 32

# Основание системы счисления limbs (2^32)
LIMB_BASE: Final[int] = 1 << LIMB_BITS

# Маска младших 32 бит
LIMB_MASK: Final[int] = LIMB_BASE - 1

Limbs = Tuple[int, ...]

EMPTY_LIMBS: Final[Limbs] = ()


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def validate_limb(value: int) -> int:
    """
    Проверка, что значение является допустимым limb.

    Args:
        value: Кандидат в limb

    Returns:
        value без изменений

    Raises:
        ValueError: Если value не int или вне [0, LIMB_MASK]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Limb must be an int, got {type(value).__name__}")

    if value < 0 or value > LIMB_MASK:
        raise ValueError(f"Limb {value} out of range [0, {LIMB_MASK}]")

    return value


def trim_high_zeros(limbs: Iterable[int]) -> Limbs:
    """
    Удаление старших нулевых limbs.

    Всегда возвращает копию, поэтому последующие изменения исходного
    списка вызывающим кодом не влияют на результат.

    Args:
        limbs: Последовательность limbs (младший первым)

    Returns:
        Каноническая последовательность; () если все limbs нулевые

    Examples:
        >>> trim_high_zeros([5, 0, 0])
        (5,)
        >>> trim_high_zeros([0, 0])
        ()
    """
    result = list(limbs)
    end = len(result)
    while end > 0 and result[end - 1] == 0:
        end -= 1
    return tuple(result[:end])


def limbs_from_magnitude(magnitude: int) -> Limbs:
    """
    Разложение неотрицательного целого на limbs.

    Args:
        magnitude: Абсолютное значение (>= 0)

    Returns:
        Каноническая последовательность limbs, () для нуля

    Raises:
        ValueError: Если magnitude отрицательный
    """
    if magnitude < 0:
        raise ValueError(f"Magnitude cannot be negative: {magnitude}")

    result = []
    while magnitude:
        result.append(magnitude & LIMB_MASK)
        magnitude >>= LIMB_BITS
    return tuple(result)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_limbs(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Сравнение двух канонических magnitudes.

    Сначала сравниваются длины (в канонической форме более длинная
    последовательность всегда больше), затем limbs от старшего к младшему.

    Returns:
        1 если a > b, 0 если a == b, -1 если a < b
    """
    if len(a) > len(b):
        return 1
    if len(a) < len(b):
        return -1

    for i in range(len(a) - 1, -1, -1):
        if a[i] > b[i]:
            return 1
        if a[i] < b[i]:
            return -1

    return 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add_limbs(a: Sequence[int], b: Sequence[int]) -> Limbs:
    """
    Сложение двух magnitudes с переносом.

    Недостающие limbs более короткого операнда считаются нулями.
    Если после старшего limb остаётся carry, он добавляется новым limb,
    поэтому результат может быть на один limb длиннее большего операнда.

    Examples:
        >>> add_limbs([0xFFFFFFFF, 0xFFFFFFFF], [1])
        (0, 0, 1)
    """
    length = max(len(a), len(b))
    result = [0] * (length + 1)
    carry = 0

    for i in range(length):
        av = a[i] if i < len(a) else 0
        bv = b[i] if i < len(b) else 0

        total = av + bv + carry
        result[i] = total & LIMB_MASK
        carry = total >> LIMB_BITS

    if carry:
        result[length] = carry

    return trim_high_zeros(result)


def subtract_limbs(bigger: Sequence[int], smaller: Sequence[int]) -> Limbs:
    """
    Вычитание magnitudes с заёмом: bigger - smaller.

    ВАЖНО: предусловие bigger >= smaller не проверяется. При нарушении
    результат будет wrapped (некорректный), ошибка не поднимается.
    Вызывающий код обязан упорядочить операнды через compare_limbs.

    Args:
        bigger: Уменьшаемое (большая magnitude)
        smaller: Вычитаемое; недостающие старшие limbs считаются нулями

    Returns:
        Каноническая разность
    """
    length = len(bigger)
    result = [0] * length
    borrow = 0

    for i in range(length):
        si = smaller[i] if i < len(smaller) else 0

        diff = bigger[i] - si - borrow
        if diff < 0:
            diff += LIMB_BASE
            borrow = 1
        else:
            borrow = 0

        result[i] = diff

    return trim_high_zeros(result)


# =============================================================================
# ДЕЛЕНИЕ И УМНОЖЕНИЕ НА МАЛОЕ ЦЕЛОЕ
# =============================================================================


def divmod_small(limbs: Sequence[int], divisor: int) -> Tuple[Limbs, int]:
    """
    Деление magnitude на малое целое (один limb).

    Проход от старшего limb к младшему: остаток от предыдущего limb
    становится старшими битами double-width делимого для следующего.

    Args:
        limbs: Делимое (каноническая magnitude)
        divisor: Делитель в [1, LIMB_MASK]

    Returns:
        (quotient, remainder), quotient в канонической форме

    Raises:
        DivideByZeroError: Если divisor == 0
        ValueError: Если divisor вне диапазона limb

    Examples:
        >>> divmod_small([123], 10)
        ((12,), 3)
    """
    if divisor == 0:
        raise DivideByZeroError("Divisor cannot be zero.")
    validate_limb(divisor)

    result = [0] * len(limbs)
    remainder = 0

    for i in range(len(limbs) - 1, -1, -1):
        current = (remainder << LIMB_BITS) | limbs[i]
        result[i] = current // divisor
        remainder = current % divisor

    return trim_high_zeros(result), remainder


def mul_small_add(limbs: Sequence[int], factor: int, addend: int = 0) -> Limbs:
    """
    Вычисление limbs * factor + addend для малых factor и addend.

    Используется расширенным десятичным парсером (multiply-by-10-and-add).
    Это не умножение двух больших чисел: factor и addend — по одному limb.

    Raises:
        ValueError: Если factor или addend вне диапазона limb
    """
    validate_limb(factor)
    validate_limb(addend)

    result = [0] * (len(limbs) + 1)
    carry = addend

    for i, limb in enumerate(limbs):
        product = limb * factor + carry
        result[i] = product & LIMB_MASK
        carry = product >> LIMB_BITS

    result[len(limbs)] = carry
    return trim_high_zeros(result)
