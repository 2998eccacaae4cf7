"""
Formatter — Человекочитаемое представление комплексного значения

Правила:
- NaN → "NaN", полюс → "Infinity" (направление не отображается)
- Компоненты с |x| < epsilon округляются к точному 0
- Вещественное значение → только re ("3", "-2.5")
- Иначе: re (если ≠ 0), знак (" + " / " - "), |im| (опускается при 1), "i"

Вывод для конечных значений обратно разбирается нормализатором.
"""

import math
from dataclasses import dataclass
from typing import Final

from src.complexmath.math.numerical_safeguards import EPSILON, snap_to_zero

# Модуль выше которого целые значения выводятся через repr (экспонента)
INTEGER_DIGITS_LIMIT: Final[float] = 1e21


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class FormatConfig:
    """Конфигурация форматирования.

    Параметры округления к нулю и раскладки знака.
    """

    # Толерантность округления к нулю
    epsilon: float = EPSILON

    # " + " (True) или "+" (False) между re и im
    spaced_sign: bool = True

    # Представления вне конечной плоскости
    nan_text: str = "NaN"
    infinity_text: str = "Infinity"


# =============================================================================
# HELPERS
# =============================================================================


def format_real(value: float) -> str:
    """
    Кратчайшее round-trip представление float.

    Целые значения выводятся без ".0".

    Examples:
        >>> format_real(3.0)
        '3'
        >>> format_real(-0.0)
        '0'
        >>> format_real(2.5)
        '2.5'
        >>> format_real(1.5e-07)
        '1.5e-07'
    """
    if math.isfinite(value) and value.is_integer() and abs(value) < INTEGER_DIGITS_LIMIT:
        return str(int(value))
    return repr(value)


# =============================================================================
# FORMATTER
# =============================================================================


class ComplexFormatter:
    """Форматирование канонической пары (re, im) в строку."""

    def __init__(self, config: FormatConfig | None = None):
        """
        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or FormatConfig()

    def format(self, re_part: float, im_part: float) -> str:
        """
        Args:
            re_part: Вещественная часть
            im_part: Мнимая часть

        Returns:
            Строковое представление ("1 + i", "3i", "-2 - 0.5i", "NaN")
        """
        config = self.config

        if math.isnan(re_part) or math.isnan(im_part):
            return config.nan_text

        if not (math.isfinite(re_part) and math.isfinite(im_part)):
            return config.infinity_text

        a = snap_to_zero(re_part, config.epsilon)
        b = snap_to_zero(im_part, config.epsilon)

        if b == 0.0:
            return format_real(a)

        parts = []

        if a != 0.0:
            parts.append(format_real(a))
            sign = "-" if b < 0.0 else "+"
            parts.append(f" {sign} " if config.spaced_sign else sign)
            b = abs(b)
        elif b < 0.0:
            parts.append("-")
            b = -b

        if b != 1.0:
            parts.append(format_real(b))

        parts.append("i")
        return "".join(parts)
