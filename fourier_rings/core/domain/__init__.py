"""
Domain models and value objects.

Contains the immutable records the epicycle mapping produces and consumes:
RingParams, Point, EpicycleSettings.
"""

from fourier_rings.core.domain.point import (
    Point,
    interpolate_signal,
    interpolate_signal_times,
    points_to_signal,
    signal_to_points,
)
from fourier_rings.core.domain.ring_params import RingParams
from fourier_rings.core.domain.settings import DEFAULT_BASE_PERIOD_MS, EpicycleSettings

__all__ = [
    # Ring params
    "RingParams",
    # Points
    "Point",
    "points_to_signal",
    "signal_to_points",
    "interpolate_signal",
    "interpolate_signal_times",
    # Settings
    "DEFAULT_BASE_PERIOD_MS",
    "EpicycleSettings",
]
