"""
Core math modules для complexmath

Вещественные примитивы с гарантией отсутствия переполнения и IEEE-семантикой.
"""

from src.complexmath.math.numerical_safeguards import (
    # Epsilon constants
    EPSILON,
    HYPOT_DIRECT_THRESHOLD,
    LOG_HYPOT_DIRECT_THRESHOLD,
    # Overflow-safe primitives
    cosm1,
    hypot,
    log_hypot,
    # IEEE-754 semantics
    ieee_cos,
    ieee_cosh,
    ieee_divide,
    ieee_exp,
    ieee_expm1,
    ieee_log,
    ieee_pow,
    ieee_sin,
    ieee_sinh,
    # Epsilon comparisons
    is_within_epsilon,
    snap_to_zero,
)

__all__ = [
    # Epsilon constants
    "EPSILON",
    "HYPOT_DIRECT_THRESHOLD",
    "LOG_HYPOT_DIRECT_THRESHOLD",
    # Overflow-safe primitives
    "cosm1",
    "hypot",
    "log_hypot",
    # IEEE-754 semantics
    "ieee_cos",
    "ieee_cosh",
    "ieee_divide",
    "ieee_exp",
    "ieee_expm1",
    "ieee_log",
    "ieee_pow",
    "ieee_sin",
    "ieee_sinh",
    # Epsilon comparisons
    "is_within_epsilon",
    "snap_to_zero",
]
