"""
Epicycles — спектр в параметры вложенных колец и их численная модель.
"""

from fourier_rings.epicycles.mapping import (
    curve_to_ring_params,
    ring_stack_payload,
    signal_to_ring_params,
    spectrum_center,
)
from fourier_rings.epicycles.ring_stack import (
    ring_angle_deg,
    ring_stack_tip,
    ring_vector,
    trace_ring_stack,
)

__all__ = [
    # Mapping
    "signal_to_ring_params",
    "spectrum_center",
    "curve_to_ring_params",
    "ring_stack_payload",
    # Ring stack
    "ring_angle_deg",
    "ring_vector",
    "ring_stack_tip",
    "trace_ring_stack",
]
