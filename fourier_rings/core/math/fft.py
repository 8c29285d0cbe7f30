"""
FFT — рекурсивное radix-2 преобразование Фурье (Cooley-Tukey)

Модуль вычисляет дискретное преобразование Фурье комплексных сигналов:
- pure_fft: длина сигнала строго степень двойки (или 0), иначе InvalidArgumentError
- fft: произвольная длина, сигнал дополняется нулями до степени двойки
- inverse_fft: обратное преобразование с нормировкой 1/N

Соглашение о знаке (единое для всего пакета):
    прямое:   X[k] = sum_n x[n] * e^{-2*pi*i*k*n/N}
    обратное: x[n] = (1/N) * sum_k X[k] * e^{+2*pi*i*k*n/N}

Следствие (теорема о сдвиге): сдвиг во времени на s отсчётов умножает
бин k на e^{-2*pi*i*k*s/N}.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(output) == len(input) для pure_fft
2. Входной сигнал никогда не изменяется
3. Twiddle-множители вычисляются инкрементально (умножением на корень),
   без пересчёта экспоненты на каждой итерации
"""

import logging
from typing import Final, Sequence

from fourier_rings.core.math.complex_ops import ONE, ZERO, Complex, scalar_multiply
from fourier_rings.core.math.numerical_safeguards import InvalidArgumentError
from fourier_rings.core.math.roots import (
    is_positive_power_of_two,
    principal_root_of_unity,
    zero_pad_to_power_of_two,
)
from fourier_rings.core.math.signal_ops import Signal, clone_signal

logger = logging.getLogger(__name__)

# =============================================================================
# СОГЛАШЕНИЕ О ЗНАКЕ
# =============================================================================

# Знак показателя корня из единицы для прямого преобразования
FORWARD_SIGN: Final[int] = -1

# Знак показателя корня из единицы для обратного преобразования
INVERSE_SIGN: Final[int] = 1


# =============================================================================
# RADIX-2 BUTTERFLY
# =============================================================================


def _radix2_transform(signal: Signal, sign: int) -> Signal:
    """
    Рекурсивное разбиение на чётные/нечётные отсчёты и сборка бабочками.

    Длина signal — степень двойки или 0/1 (проверяется вызывающим кодом).
    Глубина рекурсии log2(N).
    """
    n = len(signal)
    if n <= 1:
        return clone_signal(signal)

    even = _radix2_transform(signal[0::2], sign)
    odd = _radix2_transform(signal[1::2], sign)

    omega = principal_root_of_unity(n, sign)
    half = n // 2

    output: Signal = [ZERO] * n
    twiddle = ONE
    for k in range(half):
        # omega^{k + n/2} == -omega^k
        rotated = twiddle * odd[k]
        output[k] = even[k] + rotated
        output[k + half] = even[k] - rotated
        twiddle *= omega

    return output


# =============================================================================
# PUBLIC API
# =============================================================================


def pure_fft(signal: Sequence[Complex], inverse: bool = False) -> Signal:
    """
    FFT сигнала, длина которого — положительная степень двойки.

    Сигнал длины 0 или 1 является собственным преобразованием.

    Args:
        signal: Входной сигнал (не изменяется)
        inverse: Использовать корень обратного преобразования (без нормировки 1/N)

    Returns:
        Новый сигнал той же длины

    Raises:
        InvalidArgumentError: Если длина сигнала не 0 и не степень двойки
    """
    length = len(signal)
    if length != 0 and not is_positive_power_of_two(length):
        raise InvalidArgumentError(
            f"pure_fft requires a signal whose length is a positive power of two, got length {length}"
        )

    sign = INVERSE_SIGN if inverse else FORWARD_SIGN
    return _radix2_transform(list(signal), sign)


def fft(signal: Sequence[Complex]) -> Signal:
    """
    Прямое FFT сигнала произвольной длины.

    Копия сигнала дополняется нулями до ближайшей степени двойки
    (длины 0 и 1 не дополняются), затем вызывается pure_fft.

    Args:
        signal: Входной сигнал любой длины >= 0 (не изменяется)

    Returns:
        Спектр длины next_power_of_two(len(signal))
    """
    padded = zero_pad_to_power_of_two(list(signal))
    if len(padded) != len(signal):
        logger.debug("fft: zero-padded signal from %d to %d samples", len(signal), len(padded))

    return pure_fft(padded)


def inverse_fft(spectrum: Sequence[Complex]) -> Signal:
    """
    Обратное FFT с нормировкой 1/N.

    inverse_fft(fft(x)) восстанавливает x (дополненный нулями до степени
    двойки) с точностью до ошибки округления.

    Args:
        spectrum: Спектр любой длины >= 0 (дополняется нулями как в fft)

    Returns:
        Сигнал во временной области
    """
    padded = zero_pad_to_power_of_two(list(spectrum))
    if len(padded) != len(spectrum):
        logger.debug(
            "inverse_fft: zero-padded spectrum from %d to %d bins", len(spectrum), len(padded)
        )

    if not padded:
        return []

    unscaled = pure_fft(padded, inverse=True)
    return [scalar_multiply(z, 1.0 / len(unscaled)) for z in unscaled]
