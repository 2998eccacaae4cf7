"""
Parsing — нормализация разнородного входа в каноническую пару (re, im).
"""

from src.complexmath.parsing.inputs import (
    CartesianInput,
    ComplexInput,
    PairInput,
    PolarAbsArgInput,
    PolarInput,
    PolarRPhiInput,
    SupportsComplexPair,
)
from src.complexmath.parsing.normalizer import (
    InvalidArgument,
    ParseResult,
    coerce_float,
    parse,
    tokenize,
    try_parse,
)

__all__ = [
    # Input variants
    "ComplexInput",
    "CartesianInput",
    "PairInput",
    "PolarInput",
    "PolarAbsArgInput",
    "PolarRPhiInput",
    "SupportsComplexPair",
    # Exceptions
    "InvalidArgument",
    # Types
    "ParseResult",
    # Functions
    "coerce_float",
    "parse",
    "tokenize",
    "try_parse",
]
