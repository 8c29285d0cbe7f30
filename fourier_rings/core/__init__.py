"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks that are independent
of any renderer or animation layer: complex arithmetic, signal algebra,
the radix-2 FFT, and the immutable records describing epicycles.
"""
