"""
Тесты для IntegerQuotient — целые как классы пар натуральных

Проверяемые инварианты:
1. (a, b) ~ (c, d) ⟺ a + d = b + c; равенство и hash реализуют отношение
2. Арифметика не зависит от выбора представителя
3. Вложение ℕ ↪ ℤ: n ↦ (n, 0)
4. Деление на ноль → DomainArithmeticError
5. Компоненты пары — натуральные (иначе ConstructionPreconditionError)
"""

import pytest

from numtower.construction.integer import ONE, ZERO, ConstructedInteger
from numtower.construction.natural import VonNeumannNatural
from numtower.core.errors import ConstructionPreconditionError, DomainArithmeticError


@pytest.fixture
def left() -> ConstructedInteger:
    """(3, 1) = 2."""
    return ConstructedInteger.of(3, 1)


@pytest.fixture
def right() -> ConstructedInteger:
    """(2, 5) = −3."""
    return ConstructedInteger.of(2, 5)


# =============================================================================
# ТЕСТЫ: отношение эквивалентности
# =============================================================================


class TestEquivalence:
    def test_equal_classes(self) -> None:
        """(3, 1) и (4, 2) — одно и то же целое 2."""
        assert ConstructedInteger.of(3, 1) == ConstructedInteger.of(4, 2)
        assert ConstructedInteger.of(3, 1).to_efficient() == 2

    def test_not_structural(self) -> None:
        """Пары различаются, классы совпадают."""
        a, b = ConstructedInteger.of(3, 1), ConstructedInteger.of(4, 2)
        assert a.representative() != b.representative()
        assert a == b

    def test_hash_consistent(self) -> None:
        assert hash(ConstructedInteger.of(3, 1)) == hash(ConstructedInteger.of(10, 8))
        assert len({ConstructedInteger.of(3, 1), ConstructedInteger.of(4, 2), ConstructedInteger.of(0, 1)}) == 2

    def test_are_equivalent(self) -> None:
        assert ConstructedInteger.are_equivalent((3, 1), (4, 2))
        assert not ConstructedInteger.are_equivalent((3, 1), (4, 1))

    def test_normalized(self) -> None:
        assert ConstructedInteger.of(9, 4).normalized().representative() == (5, 0)
        assert ConstructedInteger.of(4, 9).normalized().representative() == (0, 5)

    def test_von_neumann_components(self) -> None:
        pair = ConstructedInteger.of(VonNeumannNatural.of(2), VonNeumannNatural.of(7))
        assert pair.to_efficient() == -5


class TestConstruction:
    def test_negative_component_rejected(self) -> None:
        with pytest.raises(ConstructionPreconditionError, match="non-negative"):
            ConstructedInteger.of(-1, 0)

    def test_from_efficient(self) -> None:
        assert ConstructedInteger.from_efficient(-4).representative() == (0, 4)
        assert ConstructedInteger.from_efficient(4).representative() == (4, 0)

    def test_from_efficient_rejects_non_int(self) -> None:
        with pytest.raises(ConstructionPreconditionError, match="must be int"):
            ConstructedInteger.from_efficient(2.5)

    def test_natural_embedding(self) -> None:
        """n ↦ (n, 0)."""
        embedded = ConstructedInteger.from_natural(VonNeumannNatural.of(6))
        assert embedded.representative() == (6, 0)

    def test_immutable(self, left: ConstructedInteger) -> None:
        with pytest.raises(AttributeError):
            left.positive = 10


# =============================================================================
# ТЕСТЫ: арифметика
# =============================================================================


class TestArithmetic:
    def test_add(self, left: ConstructedInteger, right: ConstructedInteger) -> None:
        assert (left + right).to_efficient() == -1

    def test_subtract(self, left: ConstructedInteger, right: ConstructedInteger) -> None:
        assert (left - right).to_efficient() == 5

    def test_multiply(self, left: ConstructedInteger, right: ConstructedInteger) -> None:
        assert (left * right).to_efficient() == -6

    def test_negate(self, left: ConstructedInteger) -> None:
        assert (-left).to_efficient() == -2

    def test_representative_independence(self, right: ConstructedInteger) -> None:
        """Результаты не зависят от выбора пары."""
        a, b = ConstructedInteger.of(3, 1), ConstructedInteger.of(13, 11)
        assert a + right == b + right
        assert a * right == b * right
        assert a - right == b - right
        assert -a == -b

    def test_divide(self) -> None:
        assert ConstructedInteger.from_efficient(-12).divide(ConstructedInteger.of(3)).to_efficient() == -4

    def test_divide_by_zero(self, left: ConstructedInteger) -> None:
        with pytest.raises(DomainArithmeticError, match="Division by zero integer"):
            left.divide(ConstructedInteger.of(5, 5))

    def test_divide_inexact(self) -> None:
        with pytest.raises(ConstructionPreconditionError, match="not divisible"):
            ConstructedInteger.of(7).divide(ConstructedInteger.of(2))

    def test_identities(self, left: ConstructedInteger) -> None:
        assert left + ZERO == left
        assert left * ONE == left
        assert (left - left).is_zero()


class TestOrder:
    def test_compare(self, left: ConstructedInteger, right: ConstructedInteger) -> None:
        assert left.compare(right) == 1
        assert right.compare(left) == -1
        assert left.compare(ConstructedInteger.of(7, 5)) == 0

    def test_operators(self, left: ConstructedInteger, right: ConstructedInteger) -> None:
        assert right < left
        assert left > right
        assert left <= ConstructedInteger.of(4, 2)
        assert left >= ConstructedInteger.of(4, 2)

    def test_sign_and_abs(self, left: ConstructedInteger, right: ConstructedInteger) -> None:
        assert left.sign() == 1
        assert right.sign() == -1
        assert ZERO.sign() == 0
        assert abs(right).to_efficient() == 3

    def test_str_and_repr(self, right: ConstructedInteger) -> None:
        assert str(right) == "-3"
        assert repr(right) == "ConstructedInteger(2 - 5)"
