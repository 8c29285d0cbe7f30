"""
Numerical Safeguards — Tolerances & Argument Validation

Модуль задаёт единое понятие "достаточно близко" для всех сравнений
float/complex в библиотеке и единый тип ошибки для невалидных аргументов:
- Относительная погрешность, не зависящая от порядка аргументов
- Epsilon-проверка "практически ноль" (относительная погрешность не определена около нуля)
- Покомпонентное сравнение complex с учётом округления
- InvalidArgumentError — единственный вид ошибки ядра

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. relative_error(a, b) == relative_error(b, a)
2. Два практически нулевых значения всегда считаются близкими
3. Ошибки аргументов выбрасываются сразу, без частичного результата
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Допустимая относительная погрешность при сравнении результатов FFT.
# Также порог "практически нуля" по абсолютному значению.
ACCEPTABLE_ERROR: Final[float] = 1e-8

# Радиусы колец ниже этого порога считаются шумом округления и обнуляются
RADIUS_NOISE_FLOOR: Final[float] = 1e-8


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgumentError(ValueError):
    """
    Невалидный аргумент операции ядра.

    Выбрасывается синхронно и никогда не обрабатывается внутри библиотеки:
    - pure_fft с длиной сигнала, не равной степени двойки
    - principal_root_of_unity с неположительным или нецелым n
    - RingParams с отрицательным радиусом
    """

    pass


# =============================================================================
# ОТНОСИТЕЛЬНАЯ ПОГРЕШНОСТЬ
# =============================================================================


def relative_error(a: float, b: float) -> float:
    """
    Относительная погрешность между двумя числами.

    Делитель — большее по модулю значение, поэтому результат не зависит
    от порядка аргументов.

    Args:
        a: Первое значение
        b: Второе значение

    Returns:
        |a - b| / max(|a|, |b|), либо 0.0 если a == b

    Examples:
        >>> relative_error(1.0, 1.0)
        0.0
        >>> relative_error(100.0, 99.0)
        0.01
        >>> relative_error(0.0, 5.0)
        1.0
    """
    difference = a - b
    if difference == 0:
        return 0.0

    # a != b, значит хотя бы одно из значений ненулевое
    divisor = max(abs(a), abs(b))
    return abs(difference / divisor)


def is_practically_zero(value: float, tol: float = ACCEPTABLE_ERROR) -> bool:
    """
    Проверка, что значение практически равно нулю.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: ACCEPTABLE_ERROR)

    Returns:
        True если abs(value) <= tol
    """
    return abs(value) <= tol


def floats_are_close_enough(a: float, b: float, tol: float = ACCEPTABLE_ERROR) -> bool:
    """
    Сравнение двух float с учётом погрешности округления.

    Значения близки, если их относительная погрешность в пределах tol,
    ИЛИ оба значения практически нулевые (около нуля относительная
    погрешность теряет смысл).

    Args:
        a: Первое значение
        b: Второе значение
        tol: Толерантность (default: ACCEPTABLE_ERROR)

    Returns:
        True если значения достаточно близки

    Examples:
        >>> floats_are_close_enough(1.0, 1.0 + 1e-12)
        True
        >>> floats_are_close_enough(1e-12, -3e-11)
        True
        >>> floats_are_close_enough(1.0, 1.001)
        False
    """
    if relative_error(a, b) <= tol:
        return True

    return is_practically_zero(a, tol) and is_practically_zero(b, tol)


# =============================================================================
# ВАЛИДАЦИЯ АРГУМЕНТОВ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def is_valid_int(value: object) -> bool:
    """True если value — int (bool не считается целым числом)."""
    return isinstance(value, int) and not isinstance(value, bool)


def validate_positive_int(value: object, name: str) -> None:
    """
    Валидация, что значение — положительное целое.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidArgumentError: Если value не int или value <= 0
    """
    if not is_valid_int(value):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")

    if value <= 0:
        raise InvalidArgumentError(f"{name} must be positive, got {value}")


def validate_non_negative_int(value: object, name: str) -> None:
    """
    Валидация, что значение — неотрицательное целое (длина, счётчик, индекс).

    Raises:
        InvalidArgumentError: Если value не int или value < 0
    """
    if not is_valid_int(value):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")

    if value < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidArgumentError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise InvalidArgumentError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {value}")
