"""
Complex — Immutable комплексное число a + bi

Immutable Pydantic модель (frozen=True) на расширенной комплексной плоскости
(модель сферы Римана):
- конечные значения
- единственный полюс INFINITY (направление не различается)
- NaN (вне сферы: хотя бы одна компонента NaN)

Каждая операция принимает вход в любой форме нормализатора, вычисляет
результирующую пару и возвращает новое значение.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. re, im — всегда float (IEEE double), без неявного расширения точности
2. Операции не мутируют receiver и не имеют общего изменяемого состояния
3. Вырожденные формы (0/0, ∞/∞, ∞-∞, ∞·0) → NAN, исключений нет
4. INFINITY.equals(INFINITY) == False (полюса не схлопываются при сравнении)
5. Промежуточные вычисления не переполняются (hypot, log_hypot, Smith)
6. NaN поглощает: NaN в любом операнде даёт NAN раньше правил полюса

ФОРМУЛЫ:
    z^w  = exp(c·logHypot - d·arg) · (cos + i·sin)(d·logHypot + c·arg)
    a/b  = алгоритм Smith (масштабирование по большей компоненте делителя)
    asin = -i·log(iz + sqrt(1 - z²))
    acos = π/2 - asin
    atan = i/2 · log((i + z)/(i - z))
"""

import math
from typing import Any, Callable, ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.complexmath.formatting.formatter import ComplexFormatter, FormatConfig
from src.complexmath.math.numerical_safeguards import (
    EPSILON,
    cosm1,
    hypot,
    ieee_cos,
    ieee_cosh,
    ieee_divide,
    ieee_exp,
    ieee_expm1,
    ieee_log,
    ieee_pow,
    ieee_sin,
    ieee_sinh,
    is_within_epsilon,
    log_hypot,
)
from src.complexmath.parsing.normalizer import InvalidArgument, parse

_HALF_PI = 0.5 * math.pi

_DEFAULT_FORMATTER = ComplexFormatter()


def _round_half_up(value: float) -> float:
    """Округление x.5 в сторону +inf без промежуточного x + 0.5."""
    r = math.floor(value)
    return r + 1.0 if value - r >= 0.5 else float(r)


def _round_scaled(value: float, places: int, rounding: Callable[[float], float]) -> float:
    """
    rounding(value · 10^places) / 10^places.

    Если масштабированное значение не конечно (inf/NaN на входе или
    переполнение масштаба), value возвращается без изменений.
    """
    scale = ieee_pow(10.0, float(places or 0))
    scaled = value * scale

    if not math.isfinite(scaled):
        return value

    return ieee_divide(float(rounding(scaled)), scale)


# =============================================================================
# COMPLEX MODEL
# =============================================================================


class Complex(BaseModel):
    """
    Комплексное число a + bi.

    Конструирование:
        Complex()                      → 0
        Complex(3)                     → 3
        Complex(3, 4)                  → 3 + 4i
        Complex("3-4i")                → 3 - 4i
        Complex([3, 4])                → 3 + 4i
        Complex({"re": 3, "im": 4})    → 3 + 4i
        Complex({"abs": 2, "arg": π})  → -2 (+ ~0i)
        Complex({"r": 2, "phi": π})    → -2 (+ ~0i)
        Complex(3 + 4j)                → 3 + 4i

    Raises:
        InvalidArgument: Если вход не распознан
    """

    re: float = Field(0.0, description="Вещественная часть")
    im: float = Field(0.0, description="Мнимая часть")

    model_config = ConfigDict(frozen=True)  # Immutable

    # Константы (присваиваются после определения класса)
    ZERO: ClassVar["Complex"]
    ONE: ClassVar["Complex"]
    I: ClassVar["Complex"]
    PI: ClassVar["Complex"]
    E: ClassVar["Complex"]
    INFINITY: ClassVar["Complex"]
    NAN: ClassVar["Complex"]
    EPSILON: ClassVar[float] = EPSILON

    def __init__(self, a: Any = None, b: Any = None, /, **data: Any) -> None:
        if data:
            if a is not None or b is not None:
                raise InvalidArgument(
                    "Invalid Param: positional and keyword arguments cannot be mixed"
                )

            # Complex(re=..., im=...): обычная валидация Pydantic
            try:
                super().__init__(**data)
            except ValidationError as e:
                raise InvalidArgument(f"Invalid Param: {e}") from e
            return

        re_part, im_part = parse(a, b)
        super().__init__(re=re_part, im=im_part)

    @classmethod
    def _make(cls, re_part: float, im_part: float) -> "Complex":
        """Конструирование из уже канонической пары без повторной нормализации."""
        return cls.model_construct(re=float(re_part), im=float(im_part))

    @classmethod
    def from_polar(cls, radius: float, angle: float) -> "Complex":
        """
        Явный полярный конструктор radius·e^{i·angle}.

        Бесконечный radius при конечном angle → INFINITY.
        """
        return cls({"abs": radius, "arg": angle})

    # =========================================================================
    # КЛАССИФИКАЦИЯ
    # =========================================================================

    def is_nan(self) -> bool:
        """Хотя бы одна компонента NaN (точка вне сферы Римана)."""
        return math.isnan(self.re) or math.isnan(self.im)

    def is_zero(self) -> bool:
        """Обе компоненты точно 0 (нулевой полюс)."""
        return self.re == 0.0 and self.im == 0.0

    def is_finite(self) -> bool:
        """Обе компоненты конечны."""
        return math.isfinite(self.re) and math.isfinite(self.im)

    def is_infinite(self) -> bool:
        """Бесконечный полюс: не конечное и не NaN значение."""
        return not (self.is_finite() or self.is_nan())

    # =========================================================================
    # БАЗОВЫЕ СВОЙСТВА
    # =========================================================================

    def abs(self) -> float:
        """Модуль |z| без переполнения."""
        return hypot(self.re, self.im)

    def arg(self) -> float:
        """Аргумент atan2(im, re) в (-π, π]."""
        return math.atan2(self.im, self.re)

    def sign(self) -> "Complex":
        """Нормированное значение z / |z| (NaN для нуля)."""
        magnitude = hypot(self.re, self.im)
        return Complex._make(
            ieee_divide(self.re, magnitude),
            ieee_divide(self.im, magnitude),
        )

    def conjugate(self) -> "Complex":
        return Complex._make(self.re, -self.im)

    def neg(self) -> "Complex":
        return Complex._make(-self.re, -self.im)

    def inverse(self) -> "Complex":
        """
        Обратное значение 1/z.

        1/0 = INFINITY, 1/∞ = 0.
        """
        if self.is_zero():
            return Complex.INFINITY

        if self.is_infinite():
            return Complex.ZERO

        a = self.re
        b = self.im
        d = a * a + b * b

        return Complex._make(ieee_divide(a, d), ieee_divide(-b, d))

    def clone(self) -> "Complex":
        return Complex._make(self.re, self.im)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, a: Any = None, b: Any = None) -> "Complex":
        """
        Сумма z + w.

        ∞ + ∞ = NaN, ∞ + w = ∞.
        """
        re_part, im_part = parse(a, b)

        if self.is_nan() or _pair_is_nan(re_part, im_part):
            return Complex.NAN

        self_infinite = self.is_infinite()
        other_infinite = _pair_is_infinite(re_part, im_part)

        if self_infinite or other_infinite:
            if self_infinite and other_infinite:
                return Complex.NAN
            return Complex.INFINITY

        return Complex._make(self.re + re_part, self.im + im_part)

    def sub(self, a: Any = None, b: Any = None) -> "Complex":
        """
        Разность z - w.

        ∞ - ∞ = NaN, ∞ - w = ∞.
        """
        re_part, im_part = parse(a, b)

        if self.is_nan() or _pair_is_nan(re_part, im_part):
            return Complex.NAN

        self_infinite = self.is_infinite()
        other_infinite = _pair_is_infinite(re_part, im_part)

        if self_infinite or other_infinite:
            if self_infinite and other_infinite:
                return Complex.NAN
            return Complex.INFINITY

        return Complex._make(self.re - re_part, self.im - im_part)

    def mul(self, a: Any = None, b: Any = None) -> "Complex":
        """
        Произведение z · w.

        ∞ · 0 = NaN, ∞ · w = ∞ (w ≠ 0).
        """
        re_part, im_part = parse(a, b)

        if self.is_nan() or _pair_is_nan(re_part, im_part):
            return Complex.NAN

        self_infinite = self.is_infinite()
        other_infinite = _pair_is_infinite(re_part, im_part)
        self_zero = self.is_zero()
        other_zero = re_part == 0.0 and im_part == 0.0

        if (self_infinite and other_zero) or (other_infinite and self_zero):
            return Complex.NAN

        if self_infinite or other_infinite:
            return Complex.INFINITY

        # Оба операнда вещественные
        if im_part == 0.0 and self.im == 0.0:
            return Complex._make(self.re * re_part, 0.0)

        return Complex._make(
            self.re * re_part - self.im * im_part,
            self.re * im_part + self.im * re_part,
        )

    def div(self, a: Any = None, b: Any = None) -> "Complex":
        """
        Частное z / w (алгоритм Smith).

        0/0 = NaN, ∞/∞ = NaN, w/0 = ∞, ∞/w = ∞, 0/w = 0, w/∞ = 0.
        """
        c, d = parse(a, b)

        if self.is_nan() or _pair_is_nan(c, d):
            return Complex.NAN

        self_infinite = self.is_infinite()
        other_infinite = _pair_is_infinite(c, d)
        self_zero = self.is_zero()
        other_zero = c == 0.0 and d == 0.0

        if (self_zero and other_zero) or (self_infinite and other_infinite):
            return Complex.NAN

        if other_zero or self_infinite:
            return Complex.INFINITY

        if self_zero or other_infinite:
            return Complex.ZERO

        # Вещественный делитель
        if d == 0.0:
            return Complex._make(ieee_divide(self.re, c), ieee_divide(self.im, c))

        if abs(c) < abs(d):
            x = ieee_divide(c, d)
            t = c * x + d

            return Complex._make(
                ieee_divide(self.re * x + self.im, t),
                ieee_divide(self.im * x - self.re, t),
            )

        x = ieee_divide(d, c)
        t = d * x + c

        return Complex._make(
            ieee_divide(self.re + self.im * x, t),
            ieee_divide(self.im - self.re * x, t),
        )

    def pow(self, a: Any = None, b: Any = None) -> "Complex":
        """
        Степень z^w.

        - w == 0 → ONE (включая 0^0 = 1)
        - вещественный w, положительное вещественное z → обычная степень
        - вещественный целый w, чисто мнимое z → точная форма по w mod 4
        - 0^w при Re(w) > 0 → ZERO
        - иначе exp(w · log z) без промежуточного Complex
        """
        c, d = parse(a, b)

        if c == 0.0 and d == 0.0:
            return Complex.ONE

        if d == 0.0:
            if self.im == 0.0 and self.re > 0.0:
                return Complex._make(ieee_pow(self.re, c), 0.0)

            if self.re == 0.0:
                # i^n без тригонометрической погрешности
                quadrant = c % 4.0
                if quadrant == 0.0:
                    return Complex._make(ieee_pow(self.im, c), 0.0)
                if quadrant == 1.0:
                    return Complex._make(0.0, ieee_pow(self.im, c))
                if quadrant == 2.0:
                    return Complex._make(-ieee_pow(self.im, c), 0.0)
                if quadrant == 3.0:
                    return Complex._make(0.0, -ieee_pow(self.im, c))

        if self.is_zero() and c > 0.0:
            return Complex.ZERO

        arg = math.atan2(self.im, self.re)
        loh = log_hypot(self.re, self.im)

        magnitude = ieee_exp(c * loh - d * arg)
        phase = d * loh + c * arg

        return Complex._make(magnitude * ieee_cos(phase), magnitude * ieee_sin(phase))

    def sqrt(self) -> "Complex":
        """
        Главный квадратный корень.

        re' = sqrt((|z| + |a|) / 2), im' = |b| / (2·re'),
        для a < 0 компоненты меняются местами.
        """
        a = self.re
        b = self.im

        if b == 0.0:
            if a >= 0.0:
                return Complex._make(math.sqrt(a), 0.0)
            if a < 0.0:
                return Complex._make(0.0, math.sqrt(-a))

        r = hypot(a, b)

        re_part = math.sqrt(0.5 * (r + abs(a)))
        im_part = ieee_divide(abs(b), 2.0 * re_part)

        if a >= 0.0:
            return Complex._make(re_part, -im_part if b < 0.0 else im_part)
        return Complex._make(im_part, -re_part if b < 0.0 else re_part)

    def exp(self) -> "Complex":
        er = ieee_exp(self.re)

        if self.im == 0.0:
            return Complex._make(er, 0.0)

        return Complex._make(er * ieee_cos(self.im), er * ieee_sin(self.im))

    def expm1(self) -> "Complex":
        """
        exp(z) - 1, точнее чем exp().sub(1) при малых |z|.

        exp(a + ib) - 1 = expm1(a)·cos(b) + cosm1(b) + i·exp(a)·sin(b)
        """
        a = self.re
        b = self.im

        if math.isinf(b):
            return Complex.NAN

        return Complex._make(
            ieee_expm1(a) * math.cos(b) + cosm1(b),
            ieee_exp(a) * math.sin(b),
        )

    def log(self) -> "Complex":
        """Главная ветвь натурального логарифма: log|z| + i·arg(z)."""
        a = self.re
        b = self.im

        if b == 0.0 and a > 0.0:
            return Complex._make(ieee_log(a), 0.0)

        return Complex._make(log_hypot(a, b), math.atan2(b, a))

    # =========================================================================
    # ТРИГОНОМЕТРИЯ
    # =========================================================================

    def sin(self) -> "Complex":
        # sin(a + bi) = sin(a)cosh(b) + i cos(a)sinh(b)
        a = self.re
        b = self.im

        return Complex._make(
            ieee_sin(a) * ieee_cosh(b),
            ieee_cos(a) * ieee_sinh(b),
        )

    def cos(self) -> "Complex":
        # cos(a + bi) = cos(a)cosh(b) - i sin(a)sinh(b)
        a = self.re
        b = self.im

        return Complex._make(
            ieee_cos(a) * ieee_cosh(b),
            -ieee_sin(a) * ieee_sinh(b),
        )

    def tan(self) -> "Complex":
        # tan(z) = (sin(2a) + i sinh(2b)) / (cos(2a) + cosh(2b))
        a = 2.0 * self.re
        b = 2.0 * self.im
        d = ieee_cos(a) + ieee_cosh(b)

        return Complex._make(
            ieee_divide(ieee_sin(a), d),
            ieee_divide(ieee_sinh(b), d),
        )

    def cot(self) -> "Complex":
        # cot(z) = (-sin(2a) + i sinh(2b)) / (cos(2a) - cosh(2b))
        a = 2.0 * self.re
        b = 2.0 * self.im
        d = ieee_cos(a) - ieee_cosh(b)

        return Complex._make(
            ieee_divide(-ieee_sin(a), d),
            ieee_divide(ieee_sinh(b), d),
        )

    def sec(self) -> "Complex":
        # sec(z) = 2 / (e^(iz) + e^(-iz))
        a = self.re
        b = self.im
        d = 0.5 * ieee_cosh(2.0 * b) + 0.5 * ieee_cos(2.0 * a)

        return Complex._make(
            ieee_divide(ieee_cos(a) * ieee_cosh(b), d),
            ieee_divide(ieee_sin(a) * ieee_sinh(b), d),
        )

    def csc(self) -> "Complex":
        # csc(z) = 2i / (e^(iz) - e^(-iz))
        a = self.re
        b = self.im
        d = 0.5 * ieee_cosh(2.0 * b) - 0.5 * ieee_cos(2.0 * a)

        return Complex._make(
            ieee_divide(ieee_sin(a) * ieee_cosh(b), d),
            ieee_divide(-ieee_cos(a) * ieee_sinh(b), d),
        )

    # =========================================================================
    # ОБРАТНАЯ ТРИГОНОМЕТРИЯ
    # =========================================================================

    def asin(self) -> "Complex":
        # asin(z) = -i · log(iz + sqrt(1 - z²))
        a = self.re
        b = self.im

        t1 = Complex._make(b * b - a * a + 1.0, -2.0 * a * b).sqrt()
        t2 = Complex._make(t1.re - b, t1.im + a).log()

        return Complex._make(t2.im, -t2.re)

    def acos(self) -> "Complex":
        # acos(z) = π/2 - asin(z)
        a = self.re
        b = self.im

        t1 = Complex._make(b * b - a * a + 1.0, -2.0 * a * b).sqrt()
        t2 = Complex._make(t1.re - b, t1.im + a).log()

        return Complex._make(_HALF_PI - t2.im, t2.re)

    def atan(self) -> "Complex":
        """
        atan(z) = i/2 · log((i + z)/(i - z)).

        На точках ветвления ±i возвращается ±i·∞.
        """
        a = self.re
        b = self.im

        if a == 0.0:
            if b == 1.0:
                return Complex._make(0.0, math.inf)
            if b == -1.0:
                return Complex._make(0.0, -math.inf)

        d = a * a + (1.0 - b) * (1.0 - b)

        t1 = Complex._make(
            ieee_divide(1.0 - b * b - a * a, d),
            ieee_divide(-2.0 * a, d),
        ).log()

        return Complex._make(-0.5 * t1.im, 0.5 * t1.re)

    def acot(self) -> "Complex":
        """
        acot(z) = atan(1/z).

        Для вещественного z используется atan2(1, x): результат в (0, π),
        acot(0) = π/2, acot(-1) = 3π/4. Разрыв на отрицательной полуоси —
        принятое поведение ветви.
        """
        a = self.re
        b = self.im

        if b == 0.0:
            return Complex._make(math.atan2(1.0, a), 0.0)

        return _reciprocal(a, b).atan()

    def asec(self) -> "Complex":
        # asec(z) = acos(1/z)
        a = self.re
        b = self.im

        if a == 0.0 and b == 0.0:
            return Complex._make(0.0, math.inf)

        return _reciprocal(a, b).acos()

    def acsc(self) -> "Complex":
        # acsc(z) = asin(1/z)
        a = self.re
        b = self.im

        if a == 0.0 and b == 0.0:
            return Complex._make(_HALF_PI, math.inf)

        return _reciprocal(a, b).asin()

    # =========================================================================
    # ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
    # =========================================================================

    def sinh(self) -> "Complex":
        # sinh(a + bi) = sinh(a)cos(b) + i cosh(a)sin(b)
        a = self.re
        b = self.im

        return Complex._make(
            ieee_sinh(a) * ieee_cos(b),
            ieee_cosh(a) * ieee_sin(b),
        )

    def cosh(self) -> "Complex":
        # cosh(a + bi) = cosh(a)cos(b) + i sinh(a)sin(b)
        a = self.re
        b = self.im

        return Complex._make(
            ieee_cosh(a) * ieee_cos(b),
            ieee_sinh(a) * ieee_sin(b),
        )

    def tanh(self) -> "Complex":
        # tanh(z) = (sinh(2a) + i sin(2b)) / (cosh(2a) + cos(2b))
        a = 2.0 * self.re
        b = 2.0 * self.im
        d = ieee_cosh(a) + ieee_cos(b)

        return Complex._make(
            ieee_divide(ieee_sinh(a), d),
            ieee_divide(ieee_sin(b), d),
        )

    def coth(self) -> "Complex":
        # coth(z) = (sinh(2a) - i sin(2b)) / (cosh(2a) - cos(2b))
        a = 2.0 * self.re
        b = 2.0 * self.im
        d = ieee_cosh(a) - ieee_cos(b)

        return Complex._make(
            ieee_divide(ieee_sinh(a), d),
            ieee_divide(-ieee_sin(b), d),
        )

    def csch(self) -> "Complex":
        # csch(z) = 2 / (e^z - e^-z)
        a = self.re
        b = self.im
        d = ieee_cos(2.0 * b) - ieee_cosh(2.0 * a)

        return Complex._make(
            ieee_divide(-2.0 * ieee_sinh(a) * ieee_cos(b), d),
            ieee_divide(2.0 * ieee_cosh(a) * ieee_sin(b), d),
        )

    def sech(self) -> "Complex":
        # sech(z) = 2 / (e^z + e^-z)
        a = self.re
        b = self.im
        d = ieee_cos(2.0 * b) + ieee_cosh(2.0 * a)

        return Complex._make(
            ieee_divide(2.0 * ieee_cosh(a) * ieee_cos(b), d),
            ieee_divide(-2.0 * ieee_sinh(a) * ieee_sin(b), d),
        )

    # =========================================================================
    # ОБРАТНЫЕ ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
    # =========================================================================

    def asinh(self) -> "Complex":
        """asinh(z) = log(z + sqrt(z² + 1)); на вещественной оси нечётна."""
        a = self.re
        b = self.im

        if b == 0.0:
            if a == 0.0:
                return Complex._make(0.0, 0.0)

            # |a| против сокращения при больших отрицательных a
            x = abs(a)
            r = ieee_log(x + hypot(x, 1.0))

            return Complex._make(-r if a < 0.0 else r, 0.0)

        t = Complex._make(a * a - b * b + 1.0, 2.0 * a * b).sqrt()

        return Complex._make(a + t.re, b + t.im).log()

    def acosh(self) -> "Complex":
        """
        acosh(z) = log(z + sqrt(z - 1)·sqrt(z + 1)).

        На вещественной оси:
            a > 1   → log(a + sqrt(a² - 1))
            a < -1  → log(-a + sqrt(a² - 1)) + iπ
            |a| ≤ 1 → i·acos(a)
        """
        a = self.re
        b = self.im

        if b == 0.0:
            if a > 1.0:
                return Complex._make(ieee_log(a + math.sqrt(a - 1.0) * math.sqrt(a + 1.0)), 0.0)

            if a < -1.0:
                t = math.sqrt(-a - 1.0) * math.sqrt(1.0 - a)
                return Complex._make(ieee_log(-a + t), math.pi)

            return Complex._make(0.0, math.acos(a))

        t1 = Complex._make(a - 1.0, b).sqrt()
        t2 = Complex._make(a + 1.0, b).sqrt()

        return Complex._make(
            a + t1.re * t2.re - t1.im * t2.im,
            b + t1.re * t2.im + t1.im * t2.re,
        ).log()

    def atanh(self) -> "Complex":
        """
        atanh(z) = log((1 + z)/(1 - z)) / 2.

        На вещественной оси:
            a = ±1  → ±∞
            |a| < 1 → вещественный результат
            a > 1   → Im = -π/2
            a < -1  → Im = +π/2
        """
        a = self.re
        b = self.im

        if b == 0.0:
            if a == 0.0:
                return Complex._make(0.0, 0.0)

            if a == 1.0:
                return Complex._make(math.inf, 0.0)

            if a == -1.0:
                return Complex._make(-math.inf, 0.0)

            if -1.0 < a < 1.0:
                return Complex._make(0.5 * ieee_log((1.0 + a) / (1.0 - a)), 0.0)

            if a > 1.0:
                return Complex._make(0.5 * ieee_log((a + 1.0) / (a - 1.0)), -_HALF_PI)

            if a < -1.0:
                return Complex._make(0.5 * ieee_log(-(1.0 + a) / (1.0 - a)), _HALF_PI)

        one_minus = 1.0 - a
        one_plus = 1.0 + a
        d = one_minus * one_minus + b * b

        if d == 0.0:
            return Complex._make(
                ieee_divide(a, 0.0) if a != -1.0 else 0.0,
                ieee_divide(b, 0.0) if b != 0.0 else 0.0,
            )

        # (1 + z) / (1 - z) одним делением
        xr = ieee_divide(one_plus * one_minus - b * b, d)
        xi = ieee_divide(b * one_minus + one_plus * b, d)

        return Complex._make(log_hypot(xr, xi) / 2.0, math.atan2(xi, xr) / 2.0)

    def acoth(self) -> "Complex":
        # acoth(z) = atanh(1/z); acoth(0) = iπ/2
        a = self.re
        b = self.im

        if a == 0.0 and b == 0.0:
            return Complex._make(0.0, _HALF_PI)

        return _reciprocal(a, b).atanh()

    def acsch(self) -> "Complex":
        # acsch(z) = asinh(1/z)
        a = self.re
        b = self.im

        if b == 0.0:
            if a == 0.0:
                return Complex._make(math.inf, 0.0)

            # asinh(1/a) через |1/a|, как в asinh
            inv = abs(ieee_divide(1.0, a))
            r = ieee_log(inv + hypot(inv, 1.0))

            return Complex._make(-r if a < 0.0 else r, 0.0)

        return _reciprocal(a, b).asinh()

    def asech(self) -> "Complex":
        # asech(z) = acosh(1/z); asech(0) = ∞
        if self.is_zero():
            return Complex.INFINITY

        return _reciprocal(self.re, self.im).acosh()

    # =========================================================================
    # ОКРУГЛЕНИЕ
    # =========================================================================

    def ceil(self, places: int = 0) -> "Complex":
        return Complex._make(
            _round_scaled(self.re, places, math.ceil),
            _round_scaled(self.im, places, math.ceil),
        )

    def floor(self, places: int = 0) -> "Complex":
        return Complex._make(
            _round_scaled(self.re, places, math.floor),
            _round_scaled(self.im, places, math.floor),
        )

    def round(self, places: int = 0) -> "Complex":
        """Округление половин в сторону +inf: round(2.5) = 3, round(-2.5) = -2."""
        return Complex._make(
            _round_scaled(self.re, places, _round_half_up),
            _round_scaled(self.im, places, _round_half_up),
        )

    # =========================================================================
    # СРАВНЕНИЕ И ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def equals(self, a: Any = None, b: Any = None) -> bool:
        """
        Покомпонентное сравнение с абсолютной толерантностью EPSILON.

        Два бесконечных значения никогда не равны (∞ - ∞ = NaN).
        """
        re_part, im_part = parse(a, b)

        return is_within_epsilon(re_part, self.re) and is_within_epsilon(im_part, self.im)

    def to_string(self, config: FormatConfig | None = None) -> str:
        """Человекочитаемая форма ("3 - i", "2i", "NaN", "Infinity")."""
        formatter = _DEFAULT_FORMATTER if config is None else ComplexFormatter(config)
        return formatter.format(self.re, self.im)

    def to_vector(self) -> list[float]:
        return [self.re, self.im]

    def to_pair(self) -> tuple[float, float]:
        return (self.re, self.im)

    def value_of(self) -> float | None:
        """Вещественное значение, если im == 0, иначе None."""
        if self.im == 0.0:
            return self.re
        return None

    def to_dict(self) -> dict[str, float]:
        """Сериализация в декартову форму {re, im}."""
        return {"re": self.re, "im": self.im}

    def to_polar(self) -> dict[str, float]:
        """Сериализация в полярную форму {abs, arg}."""
        return {"abs": self.abs(), "arg": self.arg()}

    # =========================================================================
    # ПРОТОКОЛЫ PYTHON
    # =========================================================================

    def __str__(self) -> str:
        return self.to_string()

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __abs__(self) -> float:
        return self.abs()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __neg__(self) -> "Complex":
        return self.neg()

    def __pos__(self) -> "Complex":
        return self.clone()

    def __add__(self, other: Any) -> "Complex":
        return self.add(other)

    def __radd__(self, other: Any) -> "Complex":
        return Complex(other).add(self)

    def __sub__(self, other: Any) -> "Complex":
        return self.sub(other)

    def __rsub__(self, other: Any) -> "Complex":
        return Complex(other).sub(self)

    def __mul__(self, other: Any) -> "Complex":
        return self.mul(other)

    def __rmul__(self, other: Any) -> "Complex":
        return Complex(other).mul(self)

    def __truediv__(self, other: Any) -> "Complex":
        return self.div(other)

    def __rtruediv__(self, other: Any) -> "Complex":
        return Complex(other).div(self)

    def __pow__(self, other: Any) -> "Complex":
        return self.pow(other)

    def __rpow__(self, other: Any) -> "Complex":
        return Complex(other).pow(self)


# =============================================================================
# HELPERS
# =============================================================================


def _pair_is_nan(re_part: float, im_part: float) -> bool:
    return math.isnan(re_part) or math.isnan(im_part)


def _pair_is_infinite(re_part: float, im_part: float) -> bool:
    """Пара на бесконечном полюсе: не конечная и не NaN."""
    if math.isnan(re_part) or math.isnan(im_part):
        return False
    return not (math.isfinite(re_part) and math.isfinite(im_part))


def _reciprocal(a: float, b: float) -> Complex:
    """
    1/z = (a - ib) / (a² + b²) для обратных функций от 1/z.

    Если a² + b² == 0 (переполнение/потеря значимости), компоненты
    заменяются на ±∞ (или 0) покомпонентно.
    """
    d = a * a + b * b

    if d != 0.0:
        return Complex._make(ieee_divide(a, d), ieee_divide(-b, d))

    return Complex._make(
        ieee_divide(a, 0.0) if a != 0.0 else 0.0,
        ieee_divide(-b, 0.0) if b != 0.0 else 0.0,
    )


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO = Complex._make(0.0, 0.0)
ONE = Complex._make(1.0, 0.0)
I = Complex._make(0.0, 1.0)  # noqa: E741
PI = Complex._make(math.pi, 0.0)
E = Complex._make(math.e, 0.0)
INFINITY = Complex._make(math.inf, math.inf)
NAN = Complex._make(math.nan, math.nan)

Complex.ZERO = ZERO
Complex.ONE = ONE
Complex.I = I
Complex.PI = PI
Complex.E = E
Complex.INFINITY = INFINITY
Complex.NAN = NAN
