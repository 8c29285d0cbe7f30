"""
Roots — корни из единицы и дополнение до степени двойки

Вспомогательные функции для radix-2 FFT:
- Главный корень n-й степени из единицы: e^{sign * 2*pi*i / n}
- Проверка "положительная степень двойки"
- Дополнение сигнала нулями до ближайшей степени двойки
"""

import math

from fourier_rings.core.math.complex_ops import ZERO, Complex, complex_exp
from fourier_rings.core.math.numerical_safeguards import (
    InvalidArgumentError,
    is_valid_int,
    validate_positive_int,
)
from fourier_rings.core.math.signal_ops import Signal, clone_signal


def principal_root_of_unity(n: int, sign: int = 1) -> Complex:
    """
    Главный корень n-й степени из единицы.

    Вычисляется как комплексная экспонента от i * sign * 2*pi / n.

    Args:
        n: Степень корня (положительное целое)
        sign: +1 для e^{2*pi*i/n}, -1 для сопряжённого корня e^{-2*pi*i/n}

    Returns:
        e^{sign * 2*pi*i / n}

    Raises:
        InvalidArgumentError: Если n не положительное целое или sign не +-1
    """
    validate_positive_int(n, "n")
    if sign not in (1, -1):
        raise InvalidArgumentError(f"sign must be +1 or -1, got {sign!r}")

    return complex_exp(complex(0.0, sign * 2.0 * math.pi / n))


def is_positive_power_of_two(num: object) -> bool:
    """
    True тогда и только тогда, когда num — целая положительная степень двойки.

    Examples:
        >>> is_positive_power_of_two(1)
        True
        >>> is_positive_power_of_two(96)
        False
        >>> is_positive_power_of_two(0)
        False
    """
    if not is_valid_int(num) or num <= 0:
        return False

    return num & (num - 1) == 0


def next_power_of_two(length: int) -> int:
    """
    Наименьшая степень двойки >= length.

    Длины 0 и 1 дополнения не требуют и возвращаются как есть.

    Raises:
        InvalidArgumentError: Если length отрицательный или не int
    """
    if not is_valid_int(length) or length < 0:
        raise InvalidArgumentError(f"length must be a non-negative integer, got {length!r}")

    if length <= 1:
        return length

    return 1 << (length - 1).bit_length()


def zero_pad_to_power_of_two(signal: Signal) -> Signal:
    """
    Копия сигнала, дополненная нулями до ближайшей степени двойки.

    Исходный сигнал не изменяется.
    """
    padded = clone_signal(signal)
    padded.extend([ZERO] * (next_power_of_two(len(signal)) - len(signal)))
    return padded
