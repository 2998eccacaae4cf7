"""
Input Variants — Типизированные формы входа для нормализатора

Immutable Pydantic модели для каждой допустимой keyed/sequence формы:
- CartesianInput  {re, im}   (канонические ключи; алиас {r, i})
- PolarAbsArgInput {abs, arg}
- PolarRPhiInput  {r, phi}
- PairInput       [re, im]

Каждый вариант знает, как свести себя к канонической паре (re, im).
Выбор варианта выполняется нормализатором один раз на входе.
"""

import math
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# BASE
# =============================================================================


class ComplexInput(BaseModel):
    """Базовый класс входного варианта."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    def to_pair(self) -> tuple[float, float]:
        raise NotImplementedError


# =============================================================================
# CARTESIAN
# =============================================================================


class CartesianInput(ComplexInput):
    """
    Декартова форма {re, im}.

    Старая форма {r, i} принимается как алиас (только без ключа phi —
    проверку выполняет нормализатор).
    """

    re: float = Field(..., description="Вещественная часть")
    im: float = Field(..., description="Мнимая часть")

    def to_pair(self) -> tuple[float, float]:
        return (self.re, self.im)


class PairInput(ComplexInput):
    """Упорядоченная пара [re, im]."""

    re: float
    im: float

    @classmethod
    def from_sequence(cls, values) -> "PairInput":
        first, second = values
        return cls(re=first, im=second)

    def to_pair(self) -> tuple[float, float]:
        return (self.re, self.im)


# =============================================================================
# POLAR
# =============================================================================


class PolarInput(ComplexInput):
    """
    Общая логика полярной формы: radius·(cos φ + i·sin φ).

    Бесконечный радиус при конечном угле — это полюс, а не направление:
    возвращается (inf, inf), а не inf·cos(φ).
    """

    def _radius_angle(self) -> tuple[float, float]:
        raise NotImplementedError

    def to_pair(self) -> tuple[float, float]:
        radius, angle = self._radius_angle()

        if not math.isfinite(radius) and math.isfinite(angle):
            return (math.inf, math.inf)

        # math.cos(inf) выбрасывает ValueError вместо NaN
        if math.isinf(angle):
            return (math.nan, math.nan)

        return (radius * math.cos(angle), radius * math.sin(angle))


class PolarAbsArgInput(PolarInput):
    """Полярная форма {abs, arg}, угол в радианах."""

    abs: float = Field(..., description="Модуль (радиус)")
    arg: float = Field(..., description="Аргумент (угол, радианы)")

    def _radius_angle(self) -> tuple[float, float]:
        return (self.abs, self.arg)


class PolarRPhiInput(PolarInput):
    """Полярная форма {r, phi}, угол в радианах."""

    r: float = Field(..., description="Модуль (радиус)")
    phi: float = Field(..., description="Аргумент (угол, радианы)")

    def _radius_angle(self) -> tuple[float, float]:
        return (self.r, self.phi)


# =============================================================================
# PROTOCOL
# =============================================================================


@runtime_checkable
class SupportsComplexPair(Protocol):
    """Любой объект, уже несущий каноническую пару (варианты входа, Complex)."""

    def to_pair(self) -> tuple[float, float]: ...
