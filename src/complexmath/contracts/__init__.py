"""
Contract Validation Module

Модуль для валидации JSON контракта keyed-записей комплексных значений.
"""

from .validators import (
    ComplexRecordValidator,
    ContractValidator,
    SchemaLoader,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ComplexRecordValidator",
]
