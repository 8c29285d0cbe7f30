"""
SignalOps — алгебра комплекснозначных сигналов

Сигнал — упорядоченная конечная последовательность complex (индексация с 0),
во временной или частотной области в зависимости от контекста.

Все функции чистые: возвращают новый список и никогда не изменяют входные
сигналы. Если сигналы разной длины, более короткий считается дополненным
нулями.
"""

from typing import Sequence, TypeAlias

from fourier_rings.core.math.complex_ops import (
    ZERO,
    Complex,
    clone_complex,
    complex_equals,
    nums_are_close_enough,
    scalar_multiply,
)
from fourier_rings.core.math.numerical_safeguards import (
    InvalidArgumentError,
    validate_non_negative_int,
)

Signal: TypeAlias = list[Complex]


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def zero_signal(length: int) -> Signal:
    """Сигнал из length нулей."""
    validate_non_negative_int(length, "length")
    return [ZERO] * length


def unit_impulse(length: int, shift: int = 0) -> Signal:
    """
    Единичный импульс: 1+0j в позиции shift, нули в остальных позициях.

    Args:
        length: Длина сигнала
        shift: Позиция импульса (0 <= shift < length)

    Returns:
        Новый сигнал длины length

    Raises:
        InvalidArgumentError: Если shift вне диапазона [0, length)
    """
    signal = zero_signal(length)
    validate_non_negative_int(shift, "shift")
    if shift >= length:
        raise InvalidArgumentError(f"shift must be less than length {length}, got {shift}")

    signal[shift] = complex(1.0, 0.0)
    return signal


def clone_signal(signal: Sequence[Complex]) -> Signal:
    """Глубокая копия сигнала."""
    return [clone_complex(z) for z in signal]


# =============================================================================
# ПОТОЧЕЧНЫЕ ОПЕРАЦИИ
# =============================================================================


def _element_or_zero(signal: Sequence[Complex], index: int) -> Complex:
    return signal[index] if index < len(signal) else ZERO


def pointwise_sum(signal1: Sequence[Complex], signal2: Sequence[Complex]) -> Signal:
    """
    Поточечная сумма двух сигналов.

    Args:
        signal1: Первый сигнал
        signal2: Второй сигнал

    Returns:
        Сигнал длины max(len(signal1), len(signal2))
    """
    length = max(len(signal1), len(signal2))
    return [_element_or_zero(signal1, i) + _element_or_zero(signal2, i) for i in range(length)]


def pointwise_product(signal1: Sequence[Complex], signal2: Sequence[Complex]) -> Signal:
    """
    Поточечное произведение двух сигналов.

    Args:
        signal1: Первый сигнал
        signal2: Второй сигнал

    Returns:
        Сигнал длины max(len(signal1), len(signal2)); за пределами более
        короткого сигнала произведение равно нулю
    """
    length = max(len(signal1), len(signal2))
    return [_element_or_zero(signal1, i) * _element_or_zero(signal2, i) for i in range(length)]


def scalar_multiply_signal(signal: Sequence[Complex], scalar: float) -> Signal:
    """Умножение каждого отсчёта на вещественный скаляр. Длина сохраняется."""
    return [scalar_multiply(z, scalar) for z in signal]


def reverse_signal(signal: Sequence[Complex]) -> Signal:
    """Копия сигнала в обратном порядке."""
    return [clone_complex(z) for z in reversed(signal)]


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def signals_are_close_enough(signal1: Sequence[Complex], signal2: Sequence[Complex]) -> bool:
    """
    Равенство сигналов с точностью до ошибки округления.

    Основное понятие равенства для свойств FFT: точное равенство после
    вычислений с плавающей точкой недостижимо.

    Args:
        signal1: Первый сигнал
        signal2: Второй сигнал

    Returns:
        False если длины различаются; иначе True тогда и только тогда,
        когда все пары отсчётов достаточно близки (nums_are_close_enough)
    """
    if len(signal1) != len(signal2):
        return False

    return all(nums_are_close_enough(a, b) for a, b in zip(signal1, signal2))


def signals_are_equal(signal1: Sequence[Complex], signal2: Sequence[Complex]) -> bool:
    """Точное поточечное равенство сигналов одинаковой длины."""
    if len(signal1) != len(signal2):
        return False

    return all(complex_equals(a, b) for a, b in zip(signal1, signal2))


def all_values_are_identical(signal: Sequence[Complex]) -> bool:
    """
    Проверка, что все отсчёты сигнала точно равны друг другу.

    Используется для проверки, что спектр единичного импульса плоский.

    Returns:
        True для длины 0 или 1; иначе True если каждый отсчёт равен предыдущему
    """
    for previous, current in zip(signal, signal[1:]):
        if not complex_equals(previous, current):
            return False

    return True
