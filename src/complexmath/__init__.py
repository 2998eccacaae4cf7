"""
complexmath — комплексная арифметика с корректным поведением на границах float

Immutable значение Complex (a + bi) с разбором разнородного входа,
арифметикой, трансцендентными функциями, сравнением и форматированием.
Переполнение, потеря значимости, знаковый ноль, бесконечности и NaN
обрабатываются по модели сферы Римана.
"""

from src.complexmath.domain import E, I, INFINITY, NAN, ONE, PI, ZERO, Complex
from src.complexmath.formatting import ComplexFormatter, FormatConfig
from src.complexmath.math import EPSILON
from src.complexmath.parsing import InvalidArgument, ParseResult, parse, try_parse

__all__ = [
    "Complex",
    "ZERO",
    "ONE",
    "I",
    "PI",
    "E",
    "INFINITY",
    "NAN",
    "EPSILON",
    "InvalidArgument",
    "ParseResult",
    "parse",
    "try_parse",
    "ComplexFormatter",
    "FormatConfig",
]
