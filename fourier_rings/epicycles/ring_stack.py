"""
RingStack — численная модель вложенных колец

Каждое кольцо вращается вокруг конца вектора родительского кольца.
Конец самого глубокого кольца (курсор) рисует кривую.

В момент t угол кольца:
    angle(t) = initial_angle_deg + 360 * t / angular_period_ms
Период 0 означает неподвижное кольцо. Знак периода задаёт направление.
"""

import cmath
import math
from typing import Sequence

from fourier_rings.core.domain.ring_params import RingParams
from fourier_rings.core.math.complex_ops import Complex
from fourier_rings.core.math.numerical_safeguards import (
    validate_non_negative,
    validate_positive_int,
)
from fourier_rings.core.math.signal_ops import Signal


def ring_angle_deg(ring: RingParams, t_ms: float) -> float:
    """Угол кольца (в градусах, без приведения к диапазону) в момент t_ms."""
    if ring.angular_period_ms == 0:
        return ring.initial_angle_deg

    return ring.initial_angle_deg + 360.0 * t_ms / ring.angular_period_ms


def ring_vector(ring: RingParams, t_ms: float) -> Complex:
    """Вектор кольца от его центра до курсора в момент t_ms."""
    return cmath.rect(ring.radius, math.radians(ring_angle_deg(ring, t_ms)))


def ring_stack_tip(
    rings: Sequence[RingParams],
    t_ms: float,
    center: Complex = 0j,
) -> Complex:
    """
    Положение курсора стека колец в момент t_ms.

    Args:
        rings: Кольца от внешнего к самому вложенному
        t_ms: Время в миллисекундах
        center: Центр внешнего кольца

    Returns:
        center + сумма векторов всех колец
    """
    tip = center
    for ring in rings:
        tip += ring_vector(ring, t_ms)

    return tip


def trace_ring_stack(
    rings: Sequence[RingParams],
    duration_ms: float,
    samples: int,
    center: Complex = 0j,
) -> Signal:
    """
    Траектория курсора: samples равноотстоящих моментов в [0, duration_ms).

    Args:
        rings: Кольца стека
        duration_ms: Длительность (обычно base_period_ms — один полный оборот)
        samples: Количество точек (положительное целое)
        center: Центр внешнего кольца

    Returns:
        Сигнал положений курсора

    Raises:
        InvalidArgumentError: Если samples не положительное целое или
            duration_ms отрицательная
    """
    validate_positive_int(samples, "samples")
    validate_non_negative(duration_ms, "duration_ms")

    step = duration_ms / samples
    return [ring_stack_tip(rings, k * step, center) for k in range(samples)]
