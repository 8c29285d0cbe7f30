"""
fourier_rings — radix-2 FFT и отображение спектра в эпициклы

Публичный API:
- fft / pure_fft / inverse_fft
- алгебра сигналов (pointwise_sum, pointwise_product, scalar_multiply_signal, ...)
- signal_to_ring_params и RingParams
"""

from fourier_rings.core.domain import EpicycleSettings, Point, RingParams
from fourier_rings.core.math import (
    InvalidArgumentError,
    all_values_are_identical,
    clone_signal,
    fft,
    inverse_fft,
    pointwise_product,
    pointwise_sum,
    principal_root_of_unity,
    pure_fft,
    reverse_signal,
    scalar_multiply_signal,
    signals_are_close_enough,
)
from fourier_rings.epicycles import (
    curve_to_ring_params,
    ring_stack_payload,
    ring_stack_tip,
    signal_to_ring_params,
    trace_ring_stack,
)

__version__ = "0.1.0"

__all__ = [
    "EpicycleSettings",
    "InvalidArgumentError",
    "Point",
    "RingParams",
    "all_values_are_identical",
    "clone_signal",
    "curve_to_ring_params",
    "fft",
    "inverse_fft",
    "pointwise_product",
    "pointwise_sum",
    "principal_root_of_unity",
    "pure_fft",
    "reverse_signal",
    "ring_stack_payload",
    "ring_stack_tip",
    "scalar_multiply_signal",
    "signal_to_ring_params",
    "signals_are_close_enough",
    "trace_ring_stack",
]
