"""
Тесты для Formatter

Проверяет:
- Правила вывода (re, знак, |im|, единичный коэффициент)
- Округление к нулю с толерантностью epsilon
- NaN / Infinity
- FormatConfig
"""

import math

import pytest

from src.complexmath.formatting import ComplexFormatter, FormatConfig, format_real


class TestFormatReal:
    """Тесты для format_real"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (3.0, "3"),
            (-2.0, "-2"),
            (-0.0, "0"),
            (2.5, "2.5"),
            (0.1, "0.1"),
            (1.5e-07, "1.5e-07"),
            (1e20, "100000000000000000000"),
            (1e21, "1e+21"),
        ],
    )
    def test_values(self, value: float, expected: str) -> None:
        assert format_real(value) == expected


class TestComplexFormatter:
    """Тесты для ComplexFormatter (конфигурация по умолчанию)"""

    @pytest.fixture
    def formatter(self):
        return ComplexFormatter()

    @pytest.mark.parametrize(
        "re_part, im_part, expected",
        [
            (0.0, 0.0, "0"),
            (3.0, 0.0, "3"),
            (0.0, 1.0, "i"),
            (0.0, -1.0, "-i"),
            (0.0, 2.0, "2i"),
            (0.0, -0.5, "-0.5i"),
            (1.0, 1.0, "1 + i"),
            (3.0, -1.0, "3 - i"),
            (-2.0, -0.5, "-2 - 0.5i"),
            (1.5, 2.25, "1.5 + 2.25i"),
        ],
    )
    def test_finite(self, formatter, re_part: float, im_part: float, expected: str) -> None:
        assert formatter.format(re_part, im_part) == expected

    def test_noise_snapped_to_zero(self, formatter) -> None:
        """|x| < epsilon выводится как точный 0"""
        assert formatter.format(-1.0, 1.2246467991473532e-16) == "-1"
        assert formatter.format(6.123233995736766e-17, 1.0) == "i"

    def test_nan(self, formatter) -> None:
        assert formatter.format(math.nan, 0.0) == "NaN"
        assert formatter.format(math.inf, math.nan) == "NaN"

    def test_infinity(self, formatter) -> None:
        assert formatter.format(math.inf, 0.0) == "Infinity"
        assert formatter.format(0.0, -math.inf) == "Infinity"


class TestFormatConfig:
    """Тесты для FormatConfig"""

    def test_defaults(self) -> None:
        config = FormatConfig()
        assert config.epsilon == 1e-15
        assert config.spaced_sign is True
        assert config.nan_text == "NaN"
        assert config.infinity_text == "Infinity"

    def test_compact_sign(self) -> None:
        formatter = ComplexFormatter(FormatConfig(spaced_sign=False))
        assert formatter.format(4.0, 3.0) == "4+3i"
        assert formatter.format(3.0, -1.0) == "3-i"

    def test_custom_epsilon(self) -> None:
        formatter = ComplexFormatter(FormatConfig(epsilon=1e-6))
        assert formatter.format(1.0, 1e-9) == "1"

    def test_custom_texts(self) -> None:
        formatter = ComplexFormatter(FormatConfig(nan_text="nan", infinity_text="∞"))
        assert formatter.format(math.nan, 0.0) == "nan"
        assert formatter.format(math.inf, 0.0) == "∞"

    def test_config_immutable(self) -> None:
        from dataclasses import FrozenInstanceError

        config = FormatConfig()
        with pytest.raises(FrozenInstanceError):
            config.spaced_sign = False
