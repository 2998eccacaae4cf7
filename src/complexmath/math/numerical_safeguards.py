"""
Numerical Safeguards — Overflow-Safe Real Primitives

Модуль содержит вещественные примитивы, на которых построен движок
комплексной арифметики:
- hypot без переполнения для значений у границы диапазона float
- log_hypot = log(sqrt(a² + b²)) без формирования суммы квадратов
- cosm1 = cos(x) - 1 без катастрофического сокращения при малых x
- Epsilon-защиты для сравнений и округления к нулю

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Промежуточные значения не переполняются, если результат представим
2. Все операции детерминированы и воспроизводимы
3. NaN/Inf пропагируют без исключений (решение о семантике — уровнем выше)
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность для equals и для округления к нулю при форматировании
EPSILON: Final[float] = 1e-15

# Ниже этого порога hypot считается напрямую по Пифагору
HYPOT_DIRECT_THRESHOLD: Final[float] = 1e8

# Ниже этого порога log_hypot считается как 0.5 * log(a² + b²)
LOG_HYPOT_DIRECT_THRESHOLD: Final[float] = 3000.0


# =============================================================================
# OVERFLOW-SAFE ПРИМИТИВЫ
# =============================================================================


def hypot(x: float, y: float) -> float:
    """
    Длина вектора (x, y) без переполнения.

    Алгоритм:
        x, y = |x|, |y|; x >= y
        x < 1e8  → sqrt(x² + y²)
        иначе    → x * sqrt(1 + (y/x)²)

    Examples:
        >>> hypot(3.0, 4.0)
        5.0
        >>> hypot(1e200, 1e200) > 1e200
        True
    """
    x = abs(x)
    y = abs(y)

    if x < y:
        x, y = y, x

    if x < HYPOT_DIRECT_THRESHOLD:
        return math.sqrt(x * x + y * y)

    # inf/inf дало бы NaN
    if math.isinf(x):
        return math.inf

    y /= x
    return x * math.sqrt(1.0 + y * y)


def log_hypot(a: float, b: float) -> float:
    """
    Вычисление log(sqrt(a² + b²)) без переполнения.

    Для |a|, |b| < 3000 сумма квадратов безопасна: 0.5 * log(a² + b²).
    Иначе операнды масштабируются по большему модулю m, а log m
    добавляется аналитически:
        log|z| = log m + 0.5 * log((a/m)² + (b/m)²)

    Args:
        a: Вещественная часть
        b: Мнимая часть

    Returns:
        Натуральный логарифм модуля (-inf для нуля)
    """
    abs_a = abs(a)
    abs_b = abs(b)

    if a == 0.0:
        return ieee_log(abs_b)

    if b == 0.0:
        return ieee_log(abs_a)

    if abs_a < LOG_HYPOT_DIRECT_THRESHOLD and abs_b < LOG_HYPOT_DIRECT_THRESHOLD:
        return 0.5 * ieee_log(a * a + b * b)

    if math.isinf(abs_a) or math.isinf(abs_b):
        return math.inf

    scale = max(abs_a, abs_b)
    a = abs_a / scale
    b = abs_b / scale

    return ieee_log(scale) + 0.5 * ieee_log(a * a + b * b)


def cosm1(x: float) -> float:
    """
    cos(x) - 1 через тождество -2·sin²(x/2).

    Прямое cos(x) - 1 теряет все значащие цифры при |x| → 0.

    Examples:
        >>> cosm1(0.0)
        -0.0
        >>> abs(cosm1(1e-10) + 5e-21) < 1e-35
        True
    """
    s = math.sin(0.5 * x)
    return -2.0 * s * s


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_within_epsilon(a: float, b: float, eps: float = EPSILON) -> bool:
    """
    Абсолютное сравнение |a - b| <= eps.

    Сравнение с NaN (в том числе inf - inf) всегда False.

    Examples:
        >>> is_within_epsilon(1.0, 1.0 + 1e-16)
        True
        >>> is_within_epsilon(math.inf, math.inf)
        False
    """
    return abs(a - b) <= eps


def snap_to_zero(value: float, eps: float = EPSILON) -> float:
    """
    Округление значения к точному нулю, если |value| < eps.

    Используется форматтером против артефактов вида "1e-16i".

    Raises:
        ValueError: Если eps отрицательный
    """
    if eps < 0:
        raise ValueError(f"eps must be non-negative, got {eps}")

    if abs(value) < eps:
        return 0.0
    return value


# =============================================================================
# IEEE-754 СЕМАНТИКА
# =============================================================================
# Модуль math выбрасывает ZeroDivisionError/OverflowError/ValueError там,
# где IEEE-754 даёт ±inf или NaN. Движок опирается на IEEE-семантику
# (полюс на бесконечности, NaN вне сферы Римана), поэтому все операции
# с возможным выходом за домен идут через функции ниже.


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с IEEE-семантикой: x/0 = ±inf, 0/0 = NaN.

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator):
        return math.nan

    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def ieee_exp(x: float) -> float:
    """exp(x) с +inf вместо OverflowError."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def ieee_expm1(x: float) -> float:
    """expm1(x) с +inf вместо OverflowError."""
    try:
        return math.expm1(x)
    except OverflowError:
        return math.inf


def ieee_sinh(x: float) -> float:
    """sinh(x) с ±inf вместо OverflowError."""
    try:
        return math.sinh(x)
    except OverflowError:
        return math.copysign(math.inf, x)


def ieee_cosh(x: float) -> float:
    """cosh(x) с +inf вместо OverflowError."""
    try:
        return math.cosh(x)
    except OverflowError:
        return math.inf


def ieee_sin(x: float) -> float:
    """sin(x), NaN для ±inf."""
    if math.isinf(x):
        return math.nan
    return math.sin(x)


def ieee_cos(x: float) -> float:
    """cos(x), NaN для ±inf."""
    if math.isinf(x):
        return math.nan
    return math.cos(x)


def ieee_pow(base: float, exponent: float) -> float:
    """
    base ** exponent с IEEE-семантикой pow().

    - 0 ** (y < 0) → +inf (-inf для -0 и нечётного целого y)
    - отрицательное основание, нецелый показатель → NaN
    - переполнение → ±inf

    Examples:
        >>> ieee_pow(2.0, 10.0)
        1024.0
        >>> ieee_pow(0.0, -1.0)
        inf
        >>> ieee_pow(-8.0, 1.0 / 3.0)
        nan
    """
    odd_integer = (
        math.isfinite(exponent) and exponent.is_integer() and exponent % 2.0 == 1.0
    )

    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0.0 and odd_integer:
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0.0:
            if odd_integer:
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def ieee_log(value: float) -> float:
    """
    Натуральный логарифм неотрицательного значения с IEEE-семантикой:
    log(0) = -inf, log(inf) = inf, log(NaN) = NaN.
    """
    if math.isnan(value):
        return math.nan
    if value == 0.0:
        return -math.inf
    if math.isinf(value):
        return math.inf
    return math.log(value)
