"""
EpicycleSettings — параметры отображения спектра в стек колец

Immutable Pydantic модель. Значения по умолчанию дают радиусы, равные
амплитудам ряда Фурье (|X[k]| / N), и период 10 секунд для первой гармоники.
"""

from typing import Final

from pydantic import BaseModel, Field

# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Период (мс) кольца частотного индекса 1; индекс i получает floor(base / i)
DEFAULT_BASE_PERIOD_MS: Final[int] = 10_000


class EpicycleSettings(BaseModel):
    """
    Настройки преобразования спектра в RingParams.

    - base_period_ms: период первой гармоники
    - radius_scale: множитель |X[k]| → радиус; None означает 1/N
    - include_center: включать ли DC-центр в payload для рендерера
    """

    base_period_ms: int = Field(
        DEFAULT_BASE_PERIOD_MS, gt=0, description="Период кольца индекса 1 (мс)"
    )
    radius_scale: float | None = Field(
        None, gt=0, description="Множитель амплитуды; None = 1/N"
    )
    include_center: bool = Field(True, description="Добавлять DC-центр в payload")

    model_config = {"frozen": True}

    def scale_for(self, length: int) -> float:
        """
        Фактический множитель радиуса для спектра длины length.

        Returns:
            radius_scale, либо 1/length если radius_scale не задан
            (1.0 для пустого спектра)
        """
        if self.radius_scale is not None:
            return self.radius_scale

        return 1.0 / length if length > 0 else 1.0
