"""
Domain models and value objects.

Contains the immutable Complex value type and its named constants.
"""

from src.complexmath.domain.complex_number import (
    E,
    I,
    INFINITY,
    NAN,
    ONE,
    PI,
    ZERO,
    Complex,
)

__all__ = [
    # Value type
    "Complex",
    # Constants
    "ZERO",
    "ONE",
    "I",
    "PI",
    "E",
    "INFINITY",
    "NAN",
]
