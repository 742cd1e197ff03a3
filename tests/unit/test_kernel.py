"""
Тесты для Kernel — эффективные примитивы и схема Пеано

Проверяет:
1. Capability-наборы NATURAL / INTEGER / RATIONAL / REAL / COMPLEX
2. Ошибки деления на ноль и выхода из ℕ
3. real_of / real_to_text / real_pi
4. ComplexNumber / ImaginaryNumber
5. PeanoSystem: iterate, проверки аксиом, рекурсия
"""

from decimal import Decimal
from fractions import Fraction

import pytest
from pydantic import ValidationError

from numtower.core.config import TowerSettings
from numtower.core.errors import ConstructionPreconditionError, DomainArithmeticError
from numtower.kernel.arithmetic import (
    INTEGER_ARITHMETIC,
    NATURAL_ARITHMETIC,
    RATIONAL_ARITHMETIC,
    REAL_ARITHMETIC,
    AlgebraicArithmetic,
    OrderedArithmetic,
    compare_values,
    exact_divide,
    natural_subtract,
    real_arithmetic,
    real_divide,
    real_of,
    real_pi,
    real_to_text,
    validate_natural,
)
from numtower.kernel.complex_numbers import COMPLEX_ARITHMETIC, ComplexNumber, ImaginaryNumber, complex_arithmetic
from numtower.kernel.peano import INT_PEANO_SYSTEM, IntPeanoSystem

# =============================================================================
# ТЕСТЫ: валидация и сравнение
# =============================================================================


class TestValidateNatural:
    def test_accepts_naturals(self) -> None:
        assert validate_natural(0) == 0
        assert validate_natural(42, "n") == 42

    def test_rejects_negative(self) -> None:
        with pytest.raises(ConstructionPreconditionError, match="bound must be non-negative"):
            validate_natural(-1, "bound")

    def test_rejects_non_int(self) -> None:
        with pytest.raises(ConstructionPreconditionError, match="natural number"):
            validate_natural(1.5, "n")
        with pytest.raises(ConstructionPreconditionError, match="natural number"):
            validate_natural(True, "n")


class TestCompareValues:
    def test_three_way(self) -> None:
        assert compare_values(1, 2) == -1
        assert compare_values(2, 2) == 0
        assert compare_values(3, 2) == 1
        assert compare_values(Fraction(1, 3), Fraction(1, 2)) == -1


# =============================================================================
# ТЕСТЫ: capability-наборы
# =============================================================================


class TestNaturalArithmetic:
    def test_is_ordered(self) -> None:
        assert isinstance(NATURAL_ARITHMETIC, OrderedArithmetic)
        assert NATURAL_ARITHMETIC.zero == 0
        assert NATURAL_ARITHMETIC.one == 1

    def test_subtract_underflow(self) -> None:
        assert natural_subtract(5, 3) == 2
        with pytest.raises(ConstructionPreconditionError, match="underflow"):
            NATURAL_ARITHMETIC.subtract(3, 5)

    def test_divide(self) -> None:
        assert NATURAL_ARITHMETIC.divide(12, 4) == 3
        with pytest.raises(DomainArithmeticError, match="Division by zero"):
            NATURAL_ARITHMETIC.divide(3, 0)
        with pytest.raises(ConstructionPreconditionError, match="not divisible"):
            NATURAL_ARITHMETIC.divide(7, 2)


class TestIntegerArithmetic:
    def test_operations(self) -> None:
        assert INTEGER_ARITHMETIC.add(-3, 5) == 2
        assert INTEGER_ARITHMETIC.subtract(-3, 5) == -8
        assert INTEGER_ARITHMETIC.multiply(-3, 5) == -15
        assert INTEGER_ARITHMETIC.compare(-3, 5) == -1

    def test_exact_divide(self) -> None:
        assert exact_divide(-12, 4) == -3
        with pytest.raises(DomainArithmeticError):
            exact_divide(1, 0)
        with pytest.raises(ConstructionPreconditionError):
            exact_divide(-7, 2)


class TestRationalArithmetic:
    def test_operations(self) -> None:
        half, third = Fraction(1, 2), Fraction(1, 3)
        assert RATIONAL_ARITHMETIC.add(half, third) == Fraction(5, 6)
        assert RATIONAL_ARITHMETIC.divide(half, third) == Fraction(3, 2)
        assert RATIONAL_ARITHMETIC.compare(half, third) == 1

    def test_divide_by_zero(self) -> None:
        with pytest.raises(DomainArithmeticError, match="zero rational"):
            RATIONAL_ARITHMETIC.divide(Fraction(1), Fraction(0))


class TestRealArithmetic:
    def test_real_of_sources(self) -> None:
        assert real_of(3) == Decimal(3)
        assert real_of("3.25") == Decimal("3.25")
        assert real_of(Fraction(7, 2)) == Decimal("3.5")
        assert real_of(Decimal("-0.125")) == Decimal("-0.125")

    def test_real_of_rejects(self) -> None:
        with pytest.raises(ConstructionPreconditionError, match="Not a decimal literal"):
            real_of("abc")
        with pytest.raises(ConstructionPreconditionError, match="finite"):
            real_of("Infinity")
        with pytest.raises(ConstructionPreconditionError, match="Cannot build"):
            real_of(1.5)

    def test_operations(self) -> None:
        a, b = Decimal("1.5"), Decimal("0.25")
        assert REAL_ARITHMETIC.add(a, b) == Decimal("1.75")
        assert REAL_ARITHMETIC.subtract(a, b) == Decimal("1.25")
        assert REAL_ARITHMETIC.multiply(a, b) == Decimal("0.375")
        assert REAL_ARITHMETIC.divide(a, b) == Decimal(6)

    def test_divide_by_zero(self) -> None:
        with pytest.raises(DomainArithmeticError, match="zero real"):
            REAL_ARITHMETIC.divide(Decimal(1), Decimal(0))

    def test_precision_follows_settings(self) -> None:
        """1/3 несёт ровно decimal_precision значащих цифр."""
        settings = TowerSettings(decimal_precision=100)
        assert len(real_divide(Decimal(1), Decimal(3), settings).as_tuple().digits) == 100
        assert len(real_arithmetic(settings).divide(Decimal(1), Decimal(3)).as_tuple().digits) == 100
        assert len(REAL_ARITHMETIC.divide(Decimal(1), Decimal(3)).as_tuple().digits) == 60

    def test_to_text(self) -> None:
        assert real_to_text(Decimal("1.500")) == "1.5"
        assert real_to_text(Decimal("1E+3")) == "1000"

    def test_pi(self) -> None:
        assert str(real_pi())[:32] == "3.141592653589793238462643383279"


# =============================================================================
# ТЕСТЫ: ComplexNumber / ImaginaryNumber
# =============================================================================


class TestComplexNumber:
    def test_is_only_algebraic(self) -> None:
        """У комплексных нет compare."""
        assert isinstance(COMPLEX_ARITHMETIC, AlgebraicArithmetic)
        assert not isinstance(COMPLEX_ARITHMETIC, OrderedArithmetic)
        assert not hasattr(COMPLEX_ARITHMETIC, "compare")

    def test_multiply(self) -> None:
        # (1 + 2i)(3 - i) = 5 + 5i
        product = ComplexNumber.of(1, 2) * ComplexNumber.of(3, -1)
        assert product.real == 5
        assert product.imaginary == 5

    def test_divide(self) -> None:
        # (5 + 5i) / (3 - i) = 1 + 2i
        quotient = ComplexNumber.of(5, 5) / ComplexNumber.of(3, -1)
        assert quotient.real == 1
        assert quotient.imaginary == 2

    def test_divide_by_zero(self) -> None:
        with pytest.raises(DomainArithmeticError, match="zero complex"):
            ComplexNumber.of(1, 1) / ComplexNumber.of(0, 0)

    def test_divide_precision_follows_settings(self) -> None:
        settings = TowerSettings(decimal_precision=100)
        quotient = complex_arithmetic(settings).divide(ComplexNumber.of(1, 0), ComplexNumber.of(3, 0))
        assert len(quotient.real.as_tuple().digits) == 100
        assert len((ComplexNumber.of(1, 0) / ComplexNumber.of(3, 0)).real.as_tuple().digits) == 60

    def test_conjugate_and_modulus(self) -> None:
        z = ComplexNumber.of(3, 4)
        assert z.conjugate().imaginary == -4
        assert z.modulus_squared() == 25

    def test_predicates(self) -> None:
        assert ComplexNumber.of(0, 0).is_zero()
        assert ComplexNumber.of(2, 0).is_purely_real()
        assert ComplexNumber.of(0, 2).is_purely_imaginary()

    def test_str(self) -> None:
        assert str(ComplexNumber.of("1.50", -2)) == "1.5 - 2i"

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            ComplexNumber.of(1, 1).real = Decimal(2)


class TestImaginaryNumber:
    def test_times_imaginary_is_decimal(self) -> None:
        """(2i)(3i) = -6: результат Decimal, не ImaginaryNumber."""
        product = ImaginaryNumber.of(2).times_imaginary(ImaginaryNumber.of(3))
        assert isinstance(product, Decimal)
        assert product == -6

    def test_scale_and_embed(self) -> None:
        scaled = ImaginaryNumber.of("1.5").scale(Decimal(2))
        assert scaled.coefficient == 3
        z = scaled.to_complex()
        assert z.real == 0
        assert z.imaginary == 3

    def test_str(self) -> None:
        assert str(ImaginaryNumber.of("-0.50")) == "-0.5i"


# =============================================================================
# ТЕСТЫ: PeanoSystem
# =============================================================================


class TestIntPeanoSystem:
    def test_basics(self) -> None:
        assert INT_PEANO_SYSTEM.zero == 0
        assert INT_PEANO_SYSTEM.succ(4) == 5
        assert INT_PEANO_SYSTEM.pred(0) is None
        assert INT_PEANO_SYSTEM.pred(5) == 4

    def test_iterate(self) -> None:
        assert list(INT_PEANO_SYSTEM.iterate(4)) == [0, 1, 2, 3]
        with pytest.raises(ConstructionPreconditionError):
            list(INT_PEANO_SYSTEM.iterate(-1))

    def test_axioms(self) -> None:
        assert INT_PEANO_SYSTEM.satisfies_axioms(20)

    def test_recursion(self) -> None:
        factorial = INT_PEANO_SYSTEM.recursion(1, lambda n, acc: acc * (n + 1))
        assert factorial(0) == 1
        assert factorial(5) == 120

    def test_recursion_is_not_limited_by_stack(self) -> None:
        count = INT_PEANO_SYSTEM.recursion(0, lambda n, acc: acc + 1)
        assert count(5000) == 5000

    def test_broken_system_fails_axioms(self) -> None:
        """Система, где succ не инъективен, проваливает проверку."""

        class Saturating(IntPeanoSystem):
            def succ(self, n: int) -> int:
                return min(n + 1, 3)

        assert not Saturating().satisfies_axioms(6)
