"""
Contract Validation Module

Модуль для валидации JSON контрактов, которые fourier_rings отдаёт рендереру.
"""

from .validators import (
    ContractValidator,
    RingStackValidator,
    SchemaLoader,
    validate_ring_stack,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RingStackValidator",
    # Functions
    "validate_ring_stack",
]
