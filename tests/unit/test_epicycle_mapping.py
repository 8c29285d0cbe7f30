"""
Тесты для Mapping — спектр → параметры вложенных колец

Проверяет:
1. Порядок колец (от медленных к быстрым, пары +/- частота)
2. Пропуск DC-бина и дублирующего бина Найквиста
3. Переиспользование угла положительной частоты для отрицательной
4. Настройки (базовый период, масштаб радиуса) и их валидацию
5. Конвейер точки → FFT → кольца и payload для рендерера
"""

import pytest
from pydantic import ValidationError

from fourier_rings.core.domain.point import Point
from fourier_rings.core.domain.ring_params import RingParams
from fourier_rings.core.domain.settings import DEFAULT_BASE_PERIOD_MS, EpicycleSettings
from fourier_rings.core.math.fft import fft
from fourier_rings.epicycles.mapping import (
    curve_to_ring_params,
    ring_stack_payload,
    signal_to_ring_params,
    spectrum_center,
)

SQUARE = [complex(1, 0), complex(0, 1), complex(-1, 0), complex(0, -1)]


# =============================================================================
# ТЕСТЫ: signal_to_ring_params
# =============================================================================


class TestSignalToRingParams:
    """Тесты отображения спектра в кольца"""

    def test_square_round_trip(self) -> None:
        """Квадрат из 4 точек → непустой список колец с неотрицательными радиусами"""
        rings = signal_to_ring_params(fft(SQUARE))

        assert len(rings) > 0
        assert all(ring.radius >= 0 for ring in rings)

    def test_square_is_single_circle(self) -> None:
        """x[n] = i^n — это одна гармоника с индексом 1"""
        rings = signal_to_ring_params(fft(SQUARE))

        assert len(rings) == 3
        assert rings[0].angular_period_ms == DEFAULT_BASE_PERIOD_MS
        assert rings[0].radius == pytest.approx(1.0)
        assert rings[0].initial_angle_deg == 0.0
        assert rings[1] == RingParams(-DEFAULT_BASE_PERIOD_MS, 0.0, 0.0)
        assert rings[2] == RingParams(DEFAULT_BASE_PERIOD_MS // 2, 0.0, 0.0)

    def test_periods_ordered_slowest_first(self) -> None:
        """N = 8: 4 положительные + 3 отрицательные частоты"""
        spectrum = [complex(1, 1)] * 8

        rings = signal_to_ring_params(spectrum, EpicycleSettings(base_period_ms=10_000))

        assert [ring.angular_period_ms for ring in rings] == [
            10_000,
            -10_000,
            5_000,
            -5_000,
            3_333,
            -3_333,
            2_500,
        ]

    def test_nyquist_bin_not_duplicated(self) -> None:
        """Для чётного N бин N/2 даёт только одно кольцо"""
        spectrum = [0j, 0j, complex(4, 0), 0j]

        rings = signal_to_ring_params(spectrum, EpicycleSettings(radius_scale=1.0))

        assert len(rings) == 3
        assert rings[-1] == RingParams(DEFAULT_BASE_PERIOD_MS // 2, 4.0, 0.0)

    def test_odd_length_spectrum(self) -> None:
        """N = 5: индексы 1, 2 и зеркальные 4, 3"""
        spectrum = [0j, complex(1, 0), complex(2, 0), complex(3, 0), complex(4, 0)]

        rings = signal_to_ring_params(spectrum, EpicycleSettings(radius_scale=1.0))

        assert [ring.radius for ring in rings] == [1.0, 4.0, 2.0, 3.0]
        assert [ring.angular_period_ms for ring in rings] == [10_000, -10_000, 5_000, -5_000]

    def test_dc_bin_skipped(self) -> None:
        """DC-бин не становится кольцом"""
        spectrum = [complex(100, 0), 0j, 0j, 0j]

        rings = signal_to_ring_params(spectrum, EpicycleSettings(radius_scale=1.0))

        assert all(ring.radius == 0.0 for ring in rings)

    @pytest.mark.parametrize("spectrum", [[], [complex(5, 5)]])
    def test_short_spectrum_gives_no_rings(self, spectrum) -> None:
        assert signal_to_ring_params(spectrum) == []

    def test_negative_frequency_reuses_positive_angle(self) -> None:
        """Кольцо индекса N-i получает угол индекса i, а не свой arg"""
        spectrum = [0j, complex(0, 2), 0j, complex(-3, 0)]

        rings = signal_to_ring_params(spectrum, EpicycleSettings(radius_scale=1.0))

        positive, negative = rings[0], rings[1]
        assert positive.initial_angle_deg == pytest.approx(90.0)
        assert negative.initial_angle_deg == positive.initial_angle_deg
        assert negative.radius == pytest.approx(3.0)
        assert negative.angular_period_ms == -positive.angular_period_ms

    def test_angle_in_degrees(self) -> None:
        spectrum = [0j, complex(-1, -1), 0j, 0j]

        rings = signal_to_ring_params(spectrum, EpicycleSettings(radius_scale=1.0))

        assert rings[0].initial_angle_deg == pytest.approx(-135.0)

    def test_custom_settings(self) -> None:
        """Базовый период и масштаб радиуса из настроек"""
        spectrum = [0j, complex(3, 4), 0j, 0j]
        settings = EpicycleSettings(base_period_ms=1_000, radius_scale=2.0)

        rings = signal_to_ring_params(spectrum, settings)

        assert rings[0].angular_period_ms == 1_000
        assert rings[0].radius == pytest.approx(10.0)
        assert rings[2].angular_period_ms == 500

    def test_input_not_mutated(self) -> None:
        spectrum = fft(SQUARE)
        snapshot = list(spectrum)

        signal_to_ring_params(spectrum)

        assert spectrum == snapshot


# =============================================================================
# ТЕСТЫ: EpicycleSettings
# =============================================================================


class TestEpicycleSettings:
    """Тесты модели настроек"""

    def test_defaults(self) -> None:
        settings = EpicycleSettings()

        assert settings.base_period_ms == DEFAULT_BASE_PERIOD_MS
        assert settings.radius_scale is None
        assert settings.include_center is True

    def test_default_scale_is_inverse_length(self) -> None:
        assert EpicycleSettings().scale_for(8) == 0.125
        assert EpicycleSettings().scale_for(0) == 1.0
        assert EpicycleSettings(radius_scale=3.0).scale_for(8) == 3.0

    @pytest.mark.parametrize("period", [0, -100])
    def test_non_positive_period_rejected(self, period: int) -> None:
        with pytest.raises(ValidationError):
            EpicycleSettings(base_period_ms=period)

    def test_non_positive_scale_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EpicycleSettings(radius_scale=0.0)

    def test_frozen(self) -> None:
        settings = EpicycleSettings()

        with pytest.raises(ValidationError):
            settings.base_period_ms = 5  # type: ignore[misc]


# =============================================================================
# ТЕСТЫ: Центр, конвейер и payload
# =============================================================================


class TestPipeline:
    """Тесты spectrum_center, curve_to_ring_params, ring_stack_payload"""

    def test_center_is_mean_of_points(self) -> None:
        signal = [complex(2, 2), complex(4, 2), complex(4, 6), complex(2, 6)]

        center = spectrum_center(fft(signal))

        assert center.real == pytest.approx(3.0)
        assert center.imag == pytest.approx(4.0)

    def test_center_of_empty_spectrum(self) -> None:
        assert spectrum_center([]) == 0j

    def test_curve_to_ring_params(self) -> None:
        """Точки → FFT → кольца, эквивалентно ручной цепочке"""
        points = [Point(z.real, z.imag) for z in SQUARE]

        assert curve_to_ring_params(points) == signal_to_ring_params(fft(SQUARE))

    def test_curve_with_padding(self) -> None:
        """Кривая из 6 точек дополняется до 8 → 7 колец"""
        points = [Point(x, x * x) for x in range(6)]

        assert len(curve_to_ring_params(points)) == 7

    def test_payload(self) -> None:
        payload = ring_stack_payload(fft(SQUARE))

        assert set(payload) == {"center", "rings"}
        assert payload["center"]["x"] == pytest.approx(0.0)
        assert payload["center"]["y"] == pytest.approx(0.0)
        assert len(payload["rings"]) == 3
        assert payload["rings"][0]["angular_period_ms"] == DEFAULT_BASE_PERIOD_MS

    def test_payload_without_center(self) -> None:
        payload = ring_stack_payload(fft(SQUARE), EpicycleSettings(include_center=False))

        assert payload["center"] is None

    def test_payload_of_empty_spectrum(self) -> None:
        assert ring_stack_payload([]) == {"center": {"x": 0.0, "y": 0.0}, "rings": []}
