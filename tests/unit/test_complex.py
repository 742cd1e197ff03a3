"""
Тесты для ComplexPair / ConstructedImaginary

Проверяемые инварианты:
1. (a, b)(c, d) = (ac − bd, ad + bc)
2. Деление через сопряжённое; нулевой делитель → DomainArithmeticError
3. (b·i)(d·i) — РЕАЛЬНОЕ −(b·d), никогда не комплексное
4. Вложения r ↦ (r, 0) и b·i ↦ (0, b)
5. Корни из единицы удовлетворяют z^n = 1 в пределах допуска
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from numtower.construction.complex import (
    I,
    ONE,
    ZERO,
    ConstructedComplex,
    ConstructedImaginary,
    all_roots,
    verify_equation,
    zeta,
)
from numtower.construction.real import ConstructedReal
from numtower.core.errors import ConstructionPreconditionError, DomainArithmeticError
from numtower.kernel.complex_numbers import ComplexNumber, ImaginaryNumber

TIGHT = Decimal("1e-15")


def r(value) -> ConstructedReal:
    return ConstructedReal.from_rational(Fraction(value))


def c(a, b) -> ConstructedComplex:
    return ConstructedComplex.of(r(a), r(b))


def efficient(value: ConstructedComplex, digits: int = 10) -> ComplexNumber:
    return value.to_efficient(digits)


# =============================================================================
# ТЕСТЫ: ConstructedComplex
# =============================================================================


class TestComplexArithmetic:
    def test_add_subtract(self) -> None:
        total = efficient(c(1, 2) + c(3, -1))
        assert (total.real, total.imaginary) == (4, 1)
        difference = efficient(c(1, 2) - c(3, -1))
        assert (difference.real, difference.imaginary) == (-2, 3)

    def test_multiply(self) -> None:
        product = efficient(c(1, 2) * c(3, -1))
        assert (product.real, product.imaginary) == (5, 5)

    def test_i_squared(self) -> None:
        assert (I * I).equals(-ONE, TIGHT)
        assert I.power(4).equals(ONE, TIGHT)

    def test_divide(self) -> None:
        quotient = efficient(c(5, 5) / c(3, -1))
        assert (quotient.real, quotient.imaginary) == (1, 2)

    def test_divide_by_zero(self) -> None:
        with pytest.raises(DomainArithmeticError, match="Division by zero complex"):
            c(1, 1) / ZERO

    def test_conjugate_and_modulus(self) -> None:
        z = c(3, 4)
        conjugate = efficient(z.conjugate())
        assert (conjugate.real, conjugate.imaginary) == (3, -4)
        assert z.modulus_squared().to_efficient(5) == 25
        assert (z * z.conjugate()).equals(c(25, 0), TIGHT)

    def test_power(self) -> None:
        cube = efficient(c(1, 1).power(3))
        assert (cube.real, cube.imaginary) == (-2, 2)
        assert c(7, -3).power(0).equals(ONE, TIGHT)
        with pytest.raises(ConstructionPreconditionError):
            c(1, 1).power(-1)

    def test_is_zero(self) -> None:
        assert (c(1, 2) - c(1, 2)).is_zero(TIGHT)
        assert not c(0, Fraction(1, 100)).is_zero(TIGHT)

    def test_purely_real_and_imaginary(self) -> None:
        assert c(2, 0).is_purely_real(TIGHT)
        assert not c(2, 0).is_purely_imaginary(TIGHT)
        assert I.is_purely_imaginary(TIGHT)
        assert not I.is_purely_real(TIGHT)
        assert not c(1, 1).is_purely_real(TIGHT)
        assert not c(1, 1).is_purely_imaginary(TIGHT)
        assert ZERO.is_purely_real(TIGHT)
        assert not ZERO.is_purely_imaginary(TIGHT)

    def test_purely_real_respects_tolerance(self) -> None:
        nearly_real = c(3, Fraction(1, 10**20))
        assert nearly_real.is_purely_real(TIGHT)
        assert not nearly_real.is_purely_real(Decimal("1e-25"))

    def test_identity_equality(self) -> None:
        """== — тождество, сравнение компонент только через equals."""
        assert c(1, 2) != c(1, 2)
        assert c(1, 2).equals(c(1, 2), TIGHT)


class TestComplexEmbedding:
    def test_from_real(self) -> None:
        """r ↦ (r, 0)."""
        z = efficient(ConstructedComplex.from_real(r(Fraction(3, 2))))
        assert (z.real, z.imaginary) == (Decimal("1.5"), 0)

    def test_efficient_round_trip(self) -> None:
        value = ComplexNumber.of("1.25", "-0.5")
        assert ConstructedComplex.from_efficient(value).to_efficient() == value


# =============================================================================
# ТЕСТЫ: ConstructedImaginary
# =============================================================================


class TestImaginary:
    def test_product_collapses_to_real(self) -> None:
        """(2i)(3i) = −6: ConstructedReal, не комплексное и не мнимое."""
        product = ConstructedImaginary(r(2)) * ConstructedImaginary(r(3))
        assert isinstance(product, ConstructedReal)
        assert not isinstance(product, (ConstructedComplex, ConstructedImaginary))
        assert product.to_efficient(5) == -6

    @pytest.mark.parametrize("b, d", [(1, 1), (-2, 3), (Fraction(1, 2), Fraction(-3, 4)), (0, 5)])
    def test_collapse_value(self, b, d) -> None:
        product = ConstructedImaginary(r(b)).times_imaginary(ConstructedImaginary(r(d)))
        assert product.equals(r(-Fraction(b) * Fraction(d)), TIGHT)

    def test_scaling_by_real(self) -> None:
        scaled = ConstructedImaginary(r(2)) * r(Fraction(3, 2))
        assert isinstance(scaled, ConstructedImaginary)
        assert scaled.to_efficient(5) == ImaginaryNumber.of(3)

    def test_scaling_from_left(self) -> None:
        scaled = r(-3) * ConstructedImaginary(r(2))
        assert isinstance(scaled, ConstructedImaginary)
        assert scaled.coefficient.to_efficient(5) == -6

    def test_add_subtract_negate(self) -> None:
        a, b = ConstructedImaginary(r(2)), ConstructedImaginary(r(5))
        assert (a + b).equals(ConstructedImaginary(r(7)), TIGHT)
        assert (a - b).equals(ConstructedImaginary(r(-3)), TIGHT)
        assert (-a).equals(ConstructedImaginary(r(-2)), TIGHT)

    def test_divide_by_real(self) -> None:
        quotient = ConstructedImaginary(r(3)).divide_by(r(4))
        assert quotient.to_efficient(5).coefficient == Decimal("0.75")
        with pytest.raises(DomainArithmeticError):
            ConstructedImaginary(r(3)).divide_by(r(0))

    def test_embedding(self) -> None:
        """b·i ↦ (0, b)."""
        z = efficient(ConstructedImaginary(r(4)).to_complex())
        assert (z.real, z.imaginary) == (0, 4)

    def test_efficient_round_trip(self) -> None:
        value = ImaginaryNumber.of("-2.75")
        assert ConstructedImaginary.from_efficient(value).to_efficient() == value


# =============================================================================
# ТЕСТЫ: корни из единицы
# =============================================================================


class TestRootsOfUnity:
    def test_zeta_values(self) -> None:
        assert zeta(1).equals(ONE, Decimal("1e-12"))
        assert zeta(4).equals(I, Decimal("1e-12"))
        assert zeta(2).equals(-ONE, Decimal("1e-12"))

    def test_all_roots_count(self) -> None:
        assert len(all_roots(6)) == 6

    @pytest.mark.parametrize("order", [1, 2, 3, 4, 5, 6])
    def test_equation_holds(self, order: int) -> None:
        assert verify_equation(order)

    def test_invalid_order(self) -> None:
        with pytest.raises(ConstructionPreconditionError, match="positive integer"):
            zeta(0)
        with pytest.raises(ConstructionPreconditionError):
            all_roots(-3)
