"""
Mapping — спектр → параметры вложенных колец (эпициклов)

Преобразует результат FFT замкнутой кривой (точки закодированы как complex)
в упорядоченный список RingParams для рендерера.

Алгоритм:
    для i = 1 .. N//2:
        period_i = floor(base_period_ms / i)
        положительная частота (индекс i):
            RingParams(period_i, |X[i]| * scale, deg(arg X[i]))
        отрицательная частота (индекс N - i), если N - i != i:
            RingParams(-period_i, |X[N-i]| * scale, тот же угол, что у индекса i)

DC-бин (индекс 0) кольцом не является: это центр, вокруг которого
вращается стек (spectrum_center).

Отрицательная частота получает угол положительной частоты, а не arg X[N-i].
"""

import logging
import math
from typing import Any, Sequence

from fourier_rings.core.contracts import validate_ring_stack
from fourier_rings.core.domain.point import Point, points_to_signal
from fourier_rings.core.domain.ring_params import RingParams
from fourier_rings.core.domain.settings import EpicycleSettings
from fourier_rings.core.math.complex_ops import (
    Complex,
    argument,
    magnitude,
    radians_to_degrees,
    scalar_multiply,
)
from fourier_rings.core.math.fft import fft

logger = logging.getLogger(__name__)


def signal_to_ring_params(
    spectrum: Sequence[Complex],
    settings: EpicycleSettings | None = None,
) -> list[RingParams]:
    """
    Отображение частотных коэффициентов в параметры колец.

    Кольца упорядочены от самого медленного (наибольший период) к самому
    быстрому; пары положительная/отрицательная частота идут подряд.

    Args:
        spectrum: Результат fft длины N
        settings: Базовый период и масштаб радиуса (default: EpicycleSettings())

    Returns:
        Список RingParams (пустой для N <= 1)
    """
    settings = settings or EpicycleSettings()
    n = len(spectrum)
    scale = settings.scale_for(n)

    rings: list[RingParams] = []
    for i in range(1, n // 2 + 1):
        period = math.floor(settings.base_period_ms / i)

        positive = spectrum[i]
        angle_deg = radians_to_degrees(argument(positive))
        rings.append(RingParams(period, magnitude(positive) * scale, angle_deg))

        # Бин Найквиста (чётное N) не дублируется
        mirror = n - i
        if mirror == i:
            continue

        negative = spectrum[mirror]
        rings.append(RingParams(-period, magnitude(negative) * scale, angle_deg))

    logger.debug("Mapped spectrum of %d bins to %d rings", n, len(rings))
    return rings


def spectrum_center(
    spectrum: Sequence[Complex],
    settings: EpicycleSettings | None = None,
) -> Complex:
    """
    Центр стека колец: DC-бин спектра, умноженный на масштаб радиуса.

    При масштабе 1/N это среднее всех точек кривой.
    Для пустого спектра — 0j.
    """
    settings = settings or EpicycleSettings()
    if not spectrum:
        return complex(0.0, 0.0)

    return scalar_multiply(spectrum[0], settings.scale_for(len(spectrum)))


def curve_to_ring_params(
    points: Sequence[Point],
    settings: EpicycleSettings | None = None,
) -> list[RingParams]:
    """
    Полный конвейер: точки замкнутой кривой → FFT → RingParams.

    Длина кривой дополняется нулями до степени двойки внутри fft.
    """
    signal = points_to_signal(points)
    spectrum = fft(signal)
    logger.debug("Curve of %d points transformed to %d bins", len(signal), len(spectrum))

    return signal_to_ring_params(spectrum, settings)


def ring_stack_payload(
    spectrum: Sequence[Complex],
    settings: EpicycleSettings | None = None,
) -> dict[str, Any]:
    """
    Payload для рендерера: центр стека и параметры колец.

    Результат проверяется по контракту ring_stack перед возвратом.

    Returns:
        {"center": {"x", "y"} | None, "rings": [RingParams.to_dict(), ...]}

    Raises:
        ValidationError: Если payload нарушает контракт ring_stack
    """
    settings = settings or EpicycleSettings()
    rings = signal_to_ring_params(spectrum, settings)

    center: dict[str, float] | None = None
    if settings.include_center:
        origin = spectrum_center(spectrum, settings)
        center = {"x": origin.real, "y": origin.imag}

    payload = {"center": center, "rings": [ring.to_dict() for ring in rings]}
    validate_ring_stack(payload)
    return payload
