"""
Test suite for fourier_rings

Contains:
- tests/unit/          : Unit tests for individual modules
"""
