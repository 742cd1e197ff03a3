"""
Тесты для ConstructedIrrational — именованные иррациональные константы

Проверяет:
1. Алгебраические константы (√2, √3, φ): точные сечения и свидетели
2. Аксиоматические константы (π, e): приближения по десятичной записи
3. Арифметика возвращает ConstructedReal
4. Валидацию символа
"""

from decimal import Decimal

import pytest

from numtower.construction.irrational import (
    CUT_PRECISION_BITS,
    E,
    GOLDEN_RATIO,
    KNOWN_CONSTANTS,
    PI,
    SQRT2,
    SQRT3,
    ConstructedIrrational,
    IrrationalFoundation,
)
from numtower.construction.rational import ConstructedRational
from numtower.construction.real import ONE, TWO, ConstructedReal
from numtower.core.errors import ConstructionPreconditionError

TIGHT = Decimal("1e-12")


def q(p: int, d: int = 1) -> ConstructedRational:
    return ConstructedRational.of(p, d)


# =============================================================================
# ТЕСТЫ: константы
# =============================================================================


class TestKnownConstants:
    def test_symbols(self) -> None:
        assert [str(constant) for constant in KNOWN_CONSTANTS] == ["sqrt(2)", "sqrt(3)", "phi", "pi", "e"]

    def test_foundations(self) -> None:
        assert SQRT2.foundation is IrrationalFoundation.ALGEBRAIC_CONSTRUCTION
        assert GOLDEN_RATIO.foundation is IrrationalFoundation.ALGEBRAIC_CONSTRUCTION
        assert PI.foundation is IrrationalFoundation.AXIOMATIC_SYMBOL
        assert E.foundation is IrrationalFoundation.AXIOMATIC_SYMBOL

    @pytest.mark.parametrize(
        "constant, expected",
        [
            (SQRT2, "1.414213562373"),
            (SQRT3, "1.732050807569"),
            (GOLDEN_RATIO, "1.618033988750"),
            (PI, "3.141592653590"),
            (E, "2.718281828459"),
        ],
    )
    def test_digits(self, constant: ConstructedIrrational, expected: str) -> None:
        assert constant.to_efficient(12) == Decimal(expected)

    def test_repr(self) -> None:
        assert repr(PI) == "ConstructedIrrational(pi)"


class TestCuts:
    def test_sqrt2_cut(self) -> None:
        """q ∈ L ⟺ q < 0 или q² < 2."""
        assert SQRT2.lower_cut_contains(q(-5))
        assert SQRT2.lower_cut_contains(q(141, 100))
        assert not SQRT2.lower_cut_contains(q(142, 100))

    def test_sqrt2_witness(self) -> None:
        """Ни одно рациональное не равно √2."""
        assert all(SQRT2.refutes_as_exact_rational(q(p, d)) for p in range(-20, 21) for d in range(1, 8))

    def test_sqrt3_cut(self) -> None:
        assert SQRT3.lower_cut_contains(q(17, 10))
        assert not SQRT3.lower_cut_contains(q(7, 4))
        assert SQRT3.refutes_as_exact_rational(q(7, 4))

    def test_golden_ratio_cut(self) -> None:
        assert GOLDEN_RATIO.lower_cut_contains(q(8, 5))
        assert not GOLDEN_RATIO.lower_cut_contains(q(13, 8))
        assert GOLDEN_RATIO.refutes_as_exact_rational(q(8, 5))

    def test_pi_cut(self) -> None:
        assert PI.lower_cut_contains(q(314, 100))
        assert not PI.lower_cut_contains(q(315, 100))

    def test_cut_precision(self) -> None:
        """Сечение аксиоматических констант опирается на 2^-CUT_PRECISION_BITS."""
        assert CUT_PRECISION_BITS > 20


# =============================================================================
# ТЕСТЫ: арифметика
# =============================================================================


class TestArithmetic:
    def test_results_are_reals(self) -> None:
        for result in (SQRT2 + SQRT3, SQRT2 - ONE, SQRT2 * SQRT2, PI / TWO, -E):
            assert isinstance(result, ConstructedReal)

    def test_sqrt2_squared(self) -> None:
        assert (SQRT2 * SQRT2).equals(TWO, TIGHT)

    def test_golden_ratio_identity(self) -> None:
        """φ² = φ + 1."""
        assert (GOLDEN_RATIO * GOLDEN_RATIO).equals(GOLDEN_RATIO + ONE, TIGHT)

    def test_compare(self) -> None:
        assert PI.compare(E, TIGHT) == 1
        assert SQRT2.compare(SQRT3, TIGHT) == -1
        assert SQRT2.compare(SQRT2.to_constructed_real(), TIGHT) == 0

    def test_rejects_foreign_operand(self) -> None:
        with pytest.raises(ConstructionPreconditionError, match="constructed real or irrational"):
            SQRT2 + 1


class TestConstruction:
    def test_blank_symbol(self) -> None:
        with pytest.raises(ConstructionPreconditionError, match="blank"):
            ConstructedIrrational.of("  ", ONE)

    def test_of_custom_constant(self) -> None:
        root5 = ConstructedIrrational.of("sqrt(5)", ConstructedReal.square_root_of(5, 64))
        assert root5.symbol == "sqrt(5)"
        assert root5.foundation is IrrationalFoundation.AXIOMATIC_SYMBOL
        assert root5.lower_cut_contains(q(2))
        assert not root5.lower_cut_contains(q(3))

    def test_from_decimal_expansion(self) -> None:
        ln2 = ConstructedIrrational.from_decimal_expansion("ln(2)", "0.693147180559945309417232121458")
        assert ln2.to_efficient(6) == Decimal("0.693147")
