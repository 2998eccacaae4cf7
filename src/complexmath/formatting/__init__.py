"""
Formatting — строковое представление комплексных значений.
"""

from src.complexmath.formatting.formatter import (
    INTEGER_DIGITS_LIMIT,
    ComplexFormatter,
    FormatConfig,
    format_real,
)

__all__ = [
    "INTEGER_DIGITS_LIMIT",
    "ComplexFormatter",
    "FormatConfig",
    "format_real",
]
