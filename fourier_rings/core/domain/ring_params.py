"""
RingParams — параметры одного вращающегося вектора (эпицикла)

Immutable запись, задающая движение одного кольца в стеке колец:
центр каждого кольца — конец вектора родительского кольца. Сумма векторов
всех колец аппроксимирует исходную замкнутую кривую.

Нормализация при создании:
- radius < RADIUS_NOISE_FLOOR → 0.0 (шум округления после FFT)
- initial_angle_deg практически ноль → 0.0
"""

from dataclasses import dataclass
from typing import Any

from fourier_rings.core.math.numerical_safeguards import (
    RADIUS_NOISE_FLOOR,
    is_practically_zero,
    validate_non_negative,
)


@dataclass(frozen=True)
class RingParams:
    """Начальные условия движения одного кольца.

    Attributes:
        angular_period_ms: Период оборота в миллисекундах. Положительный —
            вращение против часовой стрелки, отрицательный — по часовой.
        radius: Радиус кольца, неотрицательный
        initial_angle_deg: Начальный угол в градусах от оси x
    """

    angular_period_ms: float
    radius: float
    initial_angle_deg: float

    def __post_init__(self) -> None:
        validate_non_negative(self.radius, "RingParams radius")

        if self.radius < RADIUS_NOISE_FLOOR:
            object.__setattr__(self, "radius", 0.0)

        if is_practically_zero(self.initial_angle_deg):
            object.__setattr__(self, "initial_angle_deg", 0.0)

    @property
    def is_clockwise(self) -> bool:
        return self.angular_period_ms < 0

    def clone(self) -> "RingParams":
        return RingParams(self.angular_period_ms, self.radius, self.initial_angle_deg)

    def to_dict(self) -> dict[str, Any]:
        """Словарь в формате контракта ring_stack (элемент rings)."""
        return {
            "angular_period_ms": self.angular_period_ms,
            "radius": self.radius,
            "initial_angle_deg": self.initial_angle_deg,
        }
