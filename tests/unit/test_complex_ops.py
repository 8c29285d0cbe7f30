"""
Тесты для Complex — арифметика комплексных чисел
"""

import math

import pytest

from fourier_rings.core.math.complex_ops import (
    ONE,
    ZERO,
    add,
    argument,
    clone_complex,
    complex_equals,
    complex_exp,
    magnitude,
    make_complex,
    multiply,
    nums_are_close_enough,
    radians_to_degrees,
    scalar_multiply,
    subtract,
)


class TestArithmetic:
    """Тесты арифметических операций."""

    def test_make_complex(self) -> None:
        assert make_complex(1, 2) == complex(1.0, 2.0)
        assert make_complex(3) == complex(3.0, 0.0)

    def test_add_subtract_multiply(self) -> None:
        a = complex(1, 2)
        b = complex(3, -1)

        assert add(a, b) == complex(4, 1)
        assert subtract(a, b) == complex(-2, 3)
        assert multiply(a, b) == complex(5, 5)

    def test_operations_return_new_values(self) -> None:
        """Операнды не изменяются"""
        a = complex(1, 2)
        add(a, ONE)
        scalar_multiply(a, 10)

        assert a == complex(1, 2)

    def test_scalar_multiply(self) -> None:
        assert scalar_multiply(complex(1.5, -2), 2) == complex(3, -4)
        assert scalar_multiply(complex(1, 1), 0) == ZERO

    def test_magnitude(self) -> None:
        assert magnitude(complex(3, 4)) == 5.0
        assert magnitude(ZERO) == 0.0

    def test_argument(self) -> None:
        """atan2(imag, real) в радианах"""
        assert argument(complex(0, 1)) == pytest.approx(math.pi / 2)
        assert argument(complex(-1, 0)) == pytest.approx(math.pi)
        assert argument(complex(1, -1)) == pytest.approx(-math.pi / 4)

    def test_exp(self) -> None:
        """Формула Эйлера: e^{i*pi} = -1"""
        assert nums_are_close_enough(complex_exp(complex(0, math.pi)), complex(-1, 0))
        assert complex_exp(complex(1, 0)).real == pytest.approx(math.e)
        assert complex_exp(complex(1, 0)).imag == 0.0

    def test_radians_to_degrees(self) -> None:
        assert radians_to_degrees(math.pi) == pytest.approx(180.0)


class TestComparison:
    """Тесты точного и приближённого сравнения."""

    def test_exact_equality(self) -> None:
        assert complex_equals(complex(1, 2), complex(1, 2))
        assert not complex_equals(complex(1, 2), complex(1, 2 + 1e-15))

    def test_signed_zero_is_equal(self) -> None:
        assert complex_equals(complex(0.0, -0.0), complex(-0.0, 0.0))

    def test_clone(self) -> None:
        z = complex(7, -3)
        assert clone_complex(z) == z

    def test_close_enough_componentwise(self) -> None:
        """Обе компоненты сравниваются по отдельности"""
        assert nums_are_close_enough(complex(1, 1), complex(1, 1 + 1e-12))
        assert not nums_are_close_enough(complex(1, 0), complex(1, 1e-3))
        assert not nums_are_close_enough(complex(1, 0), complex(1.01, 0))

    def test_close_enough_near_zero(self) -> None:
        """Компоненты около нуля считаются равными"""
        assert nums_are_close_enough(complex(5, 1e-14), complex(5, -2e-12))
