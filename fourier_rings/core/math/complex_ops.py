"""
Complex — арифметика комплексных чисел

Комплексное число — встроенный immutable тип complex. Все операции
возвращают новое значение, исходные значения не изменяются.

Сравнение:
- complex_equals: точное покомпонентное равенство
- nums_are_close_enough: покомпонентное сравнение с толерантностью
  (см. numerical_safeguards.floats_are_close_enough)
"""

import cmath
import math
from typing import Final, TypeAlias

from fourier_rings.core.math.numerical_safeguards import (
    ACCEPTABLE_ERROR,
    floats_are_close_enough,
)

Complex: TypeAlias = complex

ZERO: Final[Complex] = complex(0.0, 0.0)
ONE: Final[Complex] = complex(1.0, 0.0)


# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


def make_complex(real: float, imag: float = 0.0) -> Complex:
    """Создание комплексного числа из пары вещественных."""
    return complex(float(real), float(imag))


def clone_complex(z: Complex) -> Complex:
    """
    Копия комплексного числа.

    complex неизменяем, поэтому копия равна исходному значению и не
    может быть изменена через него.
    """
    return complex(z.real, z.imag)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(a: Complex, b: Complex) -> Complex:
    return a + b


def subtract(a: Complex, b: Complex) -> Complex:
    return a - b


def multiply(a: Complex, b: Complex) -> Complex:
    return a * b


def scalar_multiply(z: Complex, scalar: float) -> Complex:
    """Умножение на вещественный скаляр (покомпонентно)."""
    return complex(z.real * scalar, z.imag * scalar)


def magnitude(z: Complex) -> float:
    """Евклидова норма |z|."""
    return abs(z)


def argument(z: Complex) -> float:
    """
    Аргумент числа в радианах: atan2(imag, real).

    Returns:
        Угол в диапазоне [-pi, pi]
    """
    return cmath.phase(z)


def complex_exp(z: Complex) -> Complex:
    """Комплексная экспонента: e^real * (cos(imag) + i*sin(imag))."""
    return cmath.exp(z)


def radians_to_degrees(angle_rad: float) -> float:
    return math.degrees(angle_rad)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def complex_equals(a: Complex, b: Complex) -> bool:
    """Точное равенство (0.0 и -0.0 равны)."""
    return a.real == b.real and a.imag == b.imag


def nums_are_close_enough(a: Complex, b: Complex, tol: float = ACCEPTABLE_ERROR) -> bool:
    """
    Сравнение двух комплексных чисел с учётом ошибки округления.

    Args:
        a: Первое число
        b: Второе число
        tol: Толерантность (default: ACCEPTABLE_ERROR)

    Returns:
        True если и вещественные, и мнимые части достаточно близки

    Examples:
        >>> nums_are_close_enough(1 + 1j, 1 + (1 + 1e-12) * 1j)
        True
        >>> nums_are_close_enough(1 + 0j, 1 + 1e-3j)
        False
    """
    return floats_are_close_enough(a.real, b.real, tol) and floats_are_close_enough(
        a.imag, b.imag, tol
    )
