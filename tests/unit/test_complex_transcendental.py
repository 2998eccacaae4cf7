"""
Тесты для трансцендентных функций Complex

Проверяет:
- exp / expm1 / log (главная ветвь, полюса, переполнение)
- Тригонометрию и гиперболические функции (12 прямых)
- Обратные функции (12 обратных) и их ветви на вещественной оси
- Round-trip f⁻¹(f(z)) ≈ z в главной области
"""

import math

import pytest

from src.complexmath import I, INFINITY, ONE, PI, ZERO, Complex

TOLERANCE = 1e-12


def assert_close(z: Complex, re_part: float, im_part: float, rel: float = TOLERANCE) -> None:
    """Покомпонентное сравнение с относительной толерантностью."""
    assert z.re == pytest.approx(re_part, rel=rel, abs=1e-15)
    assert z.im == pytest.approx(im_part, rel=rel, abs=1e-15)


def assert_round_trip(z: Complex, result: Complex) -> None:
    assert abs(result.re - z.re) < TOLERANCE
    assert abs(result.im - z.im) < TOLERANCE


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def one_plus_i():
    """1 + i"""
    return Complex(1, 1)


# =============================================================================
# EXP / LOG
# =============================================================================


class TestExpLog:
    """Тесты exp / expm1 / log"""

    def test_exp(self, one_plus_i) -> None:
        assert_close(one_plus_i.exp(), 1.4686939399158851, 2.2873552871788423)
        assert_close(Complex("3+2i").exp(), -8.358532650935372, 18.263727040666765)
        assert_close(Complex("4+3i").exp(), -54.05175886107815, 7.7048913727311525)

    def test_exp_real(self) -> None:
        assert Complex(1).exp().re == pytest.approx(math.e)
        assert Complex(1).exp().im == 0.0

    def test_euler_identity(self) -> None:
        """e^(iπ) = -1 (мнимый шум округляется к нулю при выводе)"""
        assert str(I.mul(PI).exp()) == "-1"

    def test_exp_overflow_is_pole(self) -> None:
        assert Complex(1000).exp().is_infinite()
        assert Complex(1000, 1).exp().is_infinite()

    def test_gelfond_constant(self) -> None:
        """i · e^π"""
        z = I.mul(Complex(math.pi).exp())
        assert z.im == pytest.approx(23.140692632779274, rel=TOLERANCE)

    def test_log(self, one_plus_i) -> None:
        assert_close(one_plus_i.log(), 0.34657359027997264, 0.7853981633974483)
        assert_close(Complex("4+3i").log(), 1.6094379124341003, 0.6435011087932844)

    def test_log_axis(self) -> None:
        assert str(Complex(-1).log()) == "3.141592653589793i"
        assert str(I.log()) == "1.5707963267948966i"
        assert Complex(math.e).log().re == pytest.approx(1.0)

    def test_log_zero_is_pole(self) -> None:
        assert ZERO.log().is_infinite()

    def test_log_no_overflow(self) -> None:
        z = Complex(1e300, 1e300).log()
        assert z.re == pytest.approx(300.0 * math.log(10.0) + 0.5 * math.log(2.0), rel=1e-14)
        assert z.im == pytest.approx(math.pi / 4)

    def test_log_exp_round_trip(self) -> None:
        z = Complex(0.5, 1.2)
        assert_round_trip(z, z.exp().log())
        assert_round_trip(Complex(3, 5), Complex(3, 5).log().exp())

    def test_expm1_precision(self) -> None:
        """expm1 сохраняет точность при малых |z|"""
        assert Complex(1e-10).expm1().re == pytest.approx(1e-10, rel=1e-9)
        assert Complex(1e-10).exp().sub(1).re != pytest.approx(1e-10, rel=1e-9)

        z = Complex(0, 1e-10).expm1()
        assert z.re == pytest.approx(-5e-21, rel=1e-9)
        assert z.im == pytest.approx(1e-10, rel=1e-9)

    def test_expm1_matches_exp(self) -> None:
        z = Complex(0.7, -1.3)
        expected = z.exp().sub(ONE)
        assert_close(z.expm1(), expected.re, expected.im)

    def test_expm1_infinite_imaginary_is_nan(self) -> None:
        assert Complex(0, math.inf).expm1().is_nan()

    def test_pow_negative_real_base(self) -> None:
        """Дробная степень отрицательного числа — главная ветвь"""
        assert_close(Complex(-8).pow(1 / 3), 1.0, math.sqrt(3.0), rel=1e-14)


# =============================================================================
# TRIGONOMETRY
# =============================================================================


class TestTrigonometry:
    """Тесты sin / cos / tan / cot / sec / csc"""

    def test_sin_cos_tan(self) -> None:
        z = Complex(1, 2)
        assert_close(z.sin(), 3.1657785132161678, 1.9596010414216063)
        assert_close(z.cos(), 2.0327230070196656, -3.0518977991518)
        assert_close(z.tan(), 0.0338128260798967, 1.0147936161466335)

    def test_one_plus_i(self, one_plus_i) -> None:
        assert_close(one_plus_i.sin(), 1.2984575814159773, 0.6349639147847361)
        assert_close(one_plus_i.cos(), 0.8337300251311491, -0.9888977057628651)
        assert_close(one_plus_i.tan(), 0.2717525853195118, 1.0839233273386948)

    def test_cos_of_i(self) -> None:
        z = I.cos()
        assert z.re == pytest.approx(math.cosh(1.0))
        assert z.im == 0.0

    @pytest.mark.parametrize("z", [Complex(0.7, 0.2), Complex(-1.3, 0.9), Complex(2.1, -0.4)])
    def test_reciprocal_functions(self, z: Complex) -> None:
        """cot / sec / csc согласованы с 1/tan, 1/cos, 1/sin"""
        for direct, reciprocal in ((z.cot(), z.tan()), (z.sec(), z.cos()), (z.csc(), z.sin())):
            expected = reciprocal.inverse()
            assert_close(direct, expected.re, expected.im)


class TestHyperbolic:
    """Тесты sinh / cosh / tanh / coth / sech / csch"""

    def test_sinh_cosh_tanh(self) -> None:
        z = Complex(1, 3)
        assert_close(z.sinh(), -1.1634403637032504, 0.21775955162215221)
        assert_close(z.cosh(), -1.5276382501165433, 0.1658444019189788)
        assert_close(z.tanh(), 0.7680176472869114, -0.05916853956605073)

    @pytest.mark.parametrize("z", [Complex(0.7, 0.2), Complex(-1.3, 0.9), Complex(2.1, -0.4)])
    def test_reciprocal_functions(self, z: Complex) -> None:
        for direct, reciprocal in ((z.coth(), z.tanh()), (z.sech(), z.cosh()), (z.csch(), z.sinh())):
            expected = reciprocal.inverse()
            assert_close(direct, expected.re, expected.im)

    def test_real_axis(self) -> None:
        assert Complex(0.5).sinh().re == pytest.approx(math.sinh(0.5))
        assert Complex(0.5).cosh().re == pytest.approx(math.cosh(0.5))
        assert Complex(0.5).tanh().re == pytest.approx(math.tanh(0.5))


# =============================================================================
# INVERSE FUNCTIONS
# =============================================================================


class TestInverseTrigonometry:
    """Тесты asin / acos / atan / acot / asec / acsc"""

    def test_values(self, one_plus_i) -> None:
        assert_close(one_plus_i.asin(), 0.6662394324925153, 1.0612750619050355)
        assert_close(one_plus_i.acos(), 0.9045568943023813, -1.0612750619050357)
        assert_close(one_plus_i.atan(), 1.0172219678978514, 0.40235947810852507)

    def test_acos_of_i(self) -> None:
        assert_close(I.acos(), math.pi / 2, -0.8813735870195429)

    @pytest.mark.parametrize(
        "z", [Complex(2.3, 1.4), Complex(2.3, -1.4), Complex(-2.3, 1.4), Complex(-2.3, -1.4)]
    )
    def test_forward_of_inverse(self, z: Complex) -> None:
        """f(f⁻¹(z)) = z для любой ветви"""
        assert_round_trip(z, z.asin().sin())
        assert_round_trip(z, z.acos().cos())
        assert_round_trip(z, z.atan().tan())

    def test_inverse_of_forward_principal(self) -> None:
        """f⁻¹(f(z)) = z в главной области"""
        z = Complex(0.3, 0.4)
        assert_round_trip(z, z.sin().asin())
        assert_round_trip(z, z.tan().atan())
        assert_round_trip(z, z.cot().acot())
        assert_round_trip(z, z.csc().acsc())

        w = Complex(0.5, 0.3)
        assert_round_trip(w, w.cos().acos())
        assert_round_trip(w, w.sec().asec())

    def test_atan_branch_points(self) -> None:
        assert I.atan().to_pair() == (0.0, math.inf)
        assert Complex(0, -1).atan().to_pair() == (0.0, -math.inf)
        assert I.atan().is_infinite()

    def test_acot_real_axis(self) -> None:
        """acot на вещественной оси через atan2(1, x): результат в (0, π)"""
        assert Complex(1).acot().re == pytest.approx(math.pi / 4)
        assert Complex(0).acot().re == pytest.approx(math.pi / 2)
        assert Complex(-1).acot().re == pytest.approx(3 * math.pi / 4)

    def test_zero_special_cases(self) -> None:
        assert ZERO.asec().to_pair() == (0.0, math.inf)
        assert ZERO.acsc().to_pair() == (math.pi / 2, math.inf)

    def test_real_asin(self) -> None:
        assert Complex(0.5).asin().re == pytest.approx(math.asin(0.5))
        assert Complex(0.5).acos().re == pytest.approx(math.acos(0.5))


class TestInverseHyperbolic:
    """Тесты asinh / acosh / atanh / acoth / asech / acsch"""

    def test_inverse_of_forward_principal(self) -> None:
        z = Complex(0.3, 0.4)
        assert_round_trip(z, z.sinh().asinh())
        assert_round_trip(z, z.tanh().atanh())
        assert_round_trip(z, z.coth().acoth())
        assert_round_trip(z, z.csch().acsch())

        w = Complex(0.5, 0.3)
        assert_round_trip(w, w.cosh().acosh())
        assert_round_trip(w, w.sech().asech())

    def test_asinh_real_odd(self) -> None:
        assert Complex(2).asinh().re == pytest.approx(math.asinh(2.0))
        assert Complex(-2).asinh().re == pytest.approx(-math.asinh(2.0))
        assert Complex(-1e10).asinh().re == pytest.approx(-math.asinh(1e10))

    def test_acosh_real_regions(self) -> None:
        assert_close(Complex(2).acosh(), math.acosh(2.0), 0.0)
        assert_close(Complex(-2).acosh(), math.acosh(2.0), math.pi)
        assert_close(Complex(0.5).acosh(), 0.0, math.acos(0.5))

    def test_acosh_large_negative(self) -> None:
        z = Complex(-1e200).acosh()
        assert math.isfinite(z.re)
        assert z.im == math.pi

    def test_atanh_real_regions(self) -> None:
        assert_close(Complex(0.5).atanh(), math.atanh(0.5), 0.0)
        assert_close(Complex(2).atanh(), math.atanh(0.5), -math.pi / 2)
        assert_close(Complex(-2).atanh(), -math.atanh(0.5), math.pi / 2)

    def test_atanh_branch_points(self) -> None:
        assert Complex(1).atanh().to_pair() == (math.inf, 0.0)
        assert Complex(-1).atanh().to_pair() == (-math.inf, 0.0)

    def test_acsch_real(self) -> None:
        assert Complex(2).acsch().re == pytest.approx(math.asinh(0.5))
        assert Complex(-2).acsch().re == pytest.approx(-math.asinh(0.5))

    def test_zero_special_cases(self) -> None:
        assert ZERO.acoth().to_pair() == (0.0, math.pi / 2)
        assert ZERO.asech() is INFINITY
        assert ZERO.acsch().is_infinite()
        assert ZERO.atanh().is_zero()
        assert ZERO.asinh().is_zero()
