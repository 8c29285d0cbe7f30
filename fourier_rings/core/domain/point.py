"""
Point — 2D точка и её комплексное представление

Точка (x, y) кодируется как complex(x, y). Замкнутая кривая — список
точек, последняя точка соединена с первой.
"""

from dataclasses import dataclass
from typing import Sequence

from fourier_rings.core.math.complex_ops import Complex
from fourier_rings.core.math.numerical_safeguards import validate_non_negative_int
from fourier_rings.core.math.signal_ops import Signal


@dataclass(frozen=True)
class Point:
    """Точка на плоскости."""

    x: float = 0.0
    y: float = 0.0

    def clone(self) -> "Point":
        return Point(self.x, self.y)

    def to_complex(self) -> Complex:
        return complex(self.x, self.y)

    @classmethod
    def from_complex(cls, z: Complex) -> "Point":
        return cls(z.real, z.imag)


def points_to_signal(points: Sequence[Point]) -> Signal:
    """Кодирование последовательности точек в комплексный сигнал."""
    return [p.to_complex() for p in points]


def signal_to_points(signal: Sequence[Complex]) -> list[Point]:
    """Декодирование комплексного сигнала в последовательность точек."""
    return [Point.from_complex(z) for z in signal]


def interpolate_signal(signal: Sequence[Complex]) -> Signal:
    """
    Удвоение плотности замкнутой кривой вставкой середин отрезков.

    Между каждой парой соседних отсчётов (включая пару последний → первый)
    вставляется их среднее.

    Args:
        signal: Отсчёты замкнутой кривой

    Returns:
        Сигнал длины 2 * len(signal)

    Examples:
        >>> interpolate_signal([0j, 2 + 0j])
        [0j, (1+0j), (2+0j), (1+0j)]
    """
    output: Signal = []
    for i, current in enumerate(signal):
        following = signal[(i + 1) % len(signal)]
        output.append(current)
        output.append((current + following) / 2)

    return output


def interpolate_signal_times(signal: Sequence[Complex], times: int) -> Signal:
    """
    Многократная интерполяция: длина увеличивается в 2**times раз.

    Квадрат из 4 углов после 5 интерполяций даёт 128 отсчётов.
    """
    validate_non_negative_int(times, "times")

    result: Signal = list(signal)
    for _ in range(times):
        result = interpolate_signal(result)

    return result
