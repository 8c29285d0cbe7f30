"""
Core math modules для fourier_rings

Комплексная арифметика, алгебра сигналов и radix-2 FFT.
"""

# Numerical Safeguards
from fourier_rings.core.math.numerical_safeguards import (
    # Epsilon constants
    ACCEPTABLE_ERROR,
    RADIUS_NOISE_FLOOR,
    # Exceptions
    InvalidArgumentError,
    # Comparisons
    floats_are_close_enough,
    is_practically_zero,
    relative_error,
    # Validation
    is_valid_float,
    is_valid_int,
    validate_non_negative,
    validate_non_negative_int,
    validate_positive_int,
)

# Complex
from fourier_rings.core.math.complex_ops import (
    ONE,
    ZERO,
    Complex,
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

# Signal algebra
from fourier_rings.core.math.signal_ops import (
    Signal,
    all_values_are_identical,
    clone_signal,
    pointwise_product,
    pointwise_sum,
    reverse_signal,
    scalar_multiply_signal,
    signals_are_close_enough,
    signals_are_equal,
    unit_impulse,
    zero_signal,
)

# Roots of unity & padding
from fourier_rings.core.math.roots import (
    is_positive_power_of_two,
    next_power_of_two,
    principal_root_of_unity,
    zero_pad_to_power_of_two,
)

# FFT
from fourier_rings.core.math.fft import (
    FORWARD_SIGN,
    INVERSE_SIGN,
    fft,
    inverse_fft,
    pure_fft,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "ACCEPTABLE_ERROR",
    "RADIUS_NOISE_FLOOR",
    # Numerical Safeguards — Exceptions
    "InvalidArgumentError",
    # Numerical Safeguards — Comparisons
    "floats_are_close_enough",
    "is_practically_zero",
    "relative_error",
    # Numerical Safeguards — Validation
    "is_valid_float",
    "is_valid_int",
    "validate_non_negative",
    "validate_non_negative_int",
    "validate_positive_int",
    # Complex
    "ONE",
    "ZERO",
    "Complex",
    "add",
    "argument",
    "clone_complex",
    "complex_equals",
    "complex_exp",
    "magnitude",
    "make_complex",
    "multiply",
    "nums_are_close_enough",
    "radians_to_degrees",
    "scalar_multiply",
    "subtract",
    # Signal algebra
    "Signal",
    "all_values_are_identical",
    "clone_signal",
    "pointwise_product",
    "pointwise_sum",
    "reverse_signal",
    "scalar_multiply_signal",
    "signals_are_close_enough",
    "signals_are_equal",
    "unit_impulse",
    "zero_signal",
    # Roots & padding
    "is_positive_power_of_two",
    "next_power_of_two",
    "principal_root_of_unity",
    "zero_pad_to_power_of_two",
    # FFT
    "FORWARD_SIGN",
    "INVERSE_SIGN",
    "fft",
    "inverse_fft",
    "pure_fft",
]
