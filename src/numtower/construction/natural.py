"""
NaturalTower — натуральные числа фон Неймана

Натуральное n представлено множеством своих n предшественников:
    0 = {}
    n + 1 = n ∪ {n}

Представление — явный sum type из двух вариантов: Zero | Successor(predecessor).
Подклассов кроме этих двух нет; любая обработка разбирает ровно два случая.

Стоимостная модель аксиоматическая (унарный счёт):
- of(n) / to_efficient() линейны по значению
- add линейно по второму аргументу, multiply — по произведению
Проверки аксиом и изоморфизмов поэтому выполняются только на ограниченных
выборках; границы задаёт вызывающий код.

Цепочки могут быть глубже recursion limit интерпретатора: равенство, hash,
счёт и рекурсия реализованы итеративно.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional

from numtower.core.errors import ConstructionPreconditionError
from numtower.kernel.arithmetic import NATURAL_ARITHMETIC, validate_natural
from numtower.kernel.peano import PeanoSystem

# =============================================================================
# SUM TYPE
# =============================================================================


class VonNeumannNatural:
    """
    Натуральное число фон Неймана (базовый тип sum type).

    Равенство структурное: две цепочки равны, когда обе заканчиваются в Zero
    после одинакового числа шагов Successor.
    """

    __slots__ = ()

    def __new__(cls, *args, **kwargs):
        if cls is VonNeumannNatural:
            raise ConstructionPreconditionError(
                "VonNeumannNatural has exactly two variants: build Zero() or Successor(n)"
            )
        return super().__new__(cls)

    # --- структура ----------------------------------------------------------

    def succ(self) -> "Successor":
        return Successor(self)

    def pred_or_none(self) -> Optional["VonNeumannNatural"]:
        """Предшественник или None для нуля (не ошибка)."""
        if isinstance(self, Successor):
            return self.predecessor
        return None

    def is_zero(self) -> bool:
        return isinstance(self, Zero)

    def to_set_view(self) -> FrozenSet["VonNeumannNatural"]:
        """
        Множество строгих предшественников: {0, 1, ..., n-1}.

        Единственная операция, которую потребляет абстракция множеств.
        """
        predecessors: List[VonNeumannNatural] = []
        cursor = self.pred_or_none()
        while cursor is not None:
            predecessors.append(cursor)
            cursor = cursor.pred_or_none()
        return frozenset(predecessors)

    # --- эффективные натуральные ------------------------------------------

    def to_efficient(self) -> int:
        """Счёт шагов Successor до Zero (линейно по значению)."""
        count = 0
        cursor = self.pred_or_none()
        while cursor is not None:
            count += 1
            cursor = cursor.pred_or_none()
        return count

    @staticmethod
    def of(n: int) -> "VonNeumannNatural":
        """
        Натуральное фон Неймана из эффективного натурального (n применений succ).

        Raises:
            ConstructionPreconditionError: Если n не натуральное
        """
        validate_natural(n, "n")
        result: VonNeumannNatural = ZERO
        for _ in range(n):
            result = result.succ()
        return result

    from_efficient = of

    @staticmethod
    def from_set_representation(elements: Iterable["VonNeumannNatural"]) -> "VonNeumannNatural":
        """
        Натуральное по его множеству-представлению {0, ..., n-1}.

        Raises:
            ConstructionPreconditionError: Если множество не является
                начальным отрезком натуральных
        """
        members = frozenset(elements)
        candidate = VonNeumannNatural.of(len(members))
        if candidate.to_set_view() != members:
            raise ConstructionPreconditionError(
                f"Set of {len(members)} elements is not a von Neumann natural"
            )
        return candidate

    @staticmethod
    def finite_prefix(size: int) -> FrozenSet["VonNeumannNatural"]:
        """Множество первых size натуральных {0, ..., size-1}."""
        return VonNeumannNatural.of(size).to_set_view()

    # --- равенство ----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VonNeumannNatural):
            return NotImplemented
        left: Optional[VonNeumannNatural] = self
        right: Optional[VonNeumannNatural] = other
        while left is not None and right is not None:
            if left is right:
                return True
            left = left.pred_or_none()
            right = right.pred_or_none()
        return left is None and right is None

    def __hash__(self) -> int:
        return hash(("VonNeumannNatural", self.to_efficient()))

    # --- операторы ----------------------------------------------------------

    def __add__(self, other: "VonNeumannNatural") -> "VonNeumannNatural":
        if not isinstance(other, VonNeumannNatural):
            return NotImplemented
        return add(self, other)

    def __mul__(self, other: "VonNeumannNatural") -> "VonNeumannNatural":
        if not isinstance(other, VonNeumannNatural):
            return NotImplemented
        return multiply(self, other)

    def __pow__(self, other: "VonNeumannNatural") -> "VonNeumannNatural":
        if not isinstance(other, VonNeumannNatural):
            return NotImplemented
        return power(self, other)

    def __sub__(self, other: "VonNeumannNatural") -> "VonNeumannNatural":
        if not isinstance(other, VonNeumannNatural):
            return NotImplemented
        return subtract(self, other)

    def __lt__(self, other: "VonNeumannNatural") -> bool:
        return compare(self, other) < 0

    def __le__(self, other: "VonNeumannNatural") -> bool:
        return compare(self, other) <= 0

    def __gt__(self, other: "VonNeumannNatural") -> bool:
        return compare(self, other) > 0

    def __ge__(self, other: "VonNeumannNatural") -> bool:
        return compare(self, other) >= 0


@dataclass(frozen=True, eq=False, repr=False, slots=True)
class Zero(VonNeumannNatural):
    """Пустое множество: натуральное 0."""

    def __repr__(self) -> str:
        return "Zero"


@dataclass(frozen=True, eq=False, repr=False, slots=True)
class Successor(VonNeumannNatural):
    """Последователь: predecessor ∪ {predecessor}."""

    predecessor: VonNeumannNatural

    def __post_init__(self) -> None:
        if not isinstance(self.predecessor, VonNeumannNatural):
            raise ConstructionPreconditionError(
                f"Successor requires a von Neumann natural, got {type(self.predecessor).__name__}"
            )

    def __repr__(self) -> str:
        return f"VonNeumannNatural({self.to_efficient()})"


ZERO: Zero = Zero()
ONE: Successor = ZERO.succ()


# =============================================================================
# ARITHMETIC (структурная рекурсия по второму аргументу)
# =============================================================================


def add(a: VonNeumannNatural, b: VonNeumannNatural) -> VonNeumannNatural:
    """
    a + 0 = a
    a + succ(b) = succ(a + b)
    """
    return VON_NEUMANN_PEANO_SYSTEM.recursion(a, lambda _, acc: acc.succ())(b)


def multiply(a: VonNeumannNatural, b: VonNeumannNatural) -> VonNeumannNatural:
    """
    a · 0 = 0
    a · succ(b) = a · b + a
    """
    return VON_NEUMANN_PEANO_SYSTEM.recursion(ZERO, lambda _, acc: add(acc, a))(b)


def power(base: VonNeumannNatural, exponent: VonNeumannNatural) -> VonNeumannNatural:
    """
    a ^ 0 = 1
    a ^ succ(b) = a ^ b · a
    """
    return VON_NEUMANN_PEANO_SYSTEM.recursion(ONE, lambda _, acc: multiply(acc, base))(exponent)


def subtract(a: VonNeumannNatural, b: VonNeumannNatural) -> VonNeumannNatural:
    """
    a - b в ℕ (через эффективные натуральные).

    Raises:
        ConstructionPreconditionError: Если b > a
    """
    return VonNeumannNatural.of(NATURAL_ARITHMETIC.subtract(a.to_efficient(), b.to_efficient()))


def divide(a: VonNeumannNatural, b: VonNeumannNatural) -> VonNeumannNatural:
    """
    Точное деление a / b в ℕ (через эффективные натуральные).

    Raises:
        DomainArithmeticError: Если b == 0
        ConstructionPreconditionError: Если a не делится на b
    """
    return VonNeumannNatural.of(NATURAL_ARITHMETIC.divide(a.to_efficient(), b.to_efficient()))


def compare(a: VonNeumannNatural, b: VonNeumannNatural) -> int:
    """
    Сравнение спуском по обеим цепочкам одновременно.

    Returns:
        -1 / 0 / +1
    """
    left: Optional[VonNeumannNatural] = a
    right: Optional[VonNeumannNatural] = b
    while left is not None and right is not None:
        if left is right:
            return 0
        left = left.pred_or_none()
        right = right.pred_or_none()
    if left is None and right is None:
        return 0
    return -1 if left is None else 1


# =============================================================================
# ORDER (через свидетеля: a ≤ b ⟺ ∃ c. a + c = b)
# =============================================================================


def order_witness(a: VonNeumannNatural, b: VonNeumannNatural) -> Optional[VonNeumannNatural]:
    """
    Свидетель c с a + c = b, или None если a > b.

    Поиск перебором c = 0, 1, ..., b: свидетель не может превышать b.
    """
    witness: VonNeumannNatural = ZERO
    accumulated = a
    for _ in range(b.to_efficient() + 1):
        if accumulated == b:
            return witness
        witness = witness.succ()
        accumulated = accumulated.succ()
    return None


def less_or_equal(a: VonNeumannNatural, b: VonNeumannNatural) -> bool:
    return order_witness(a, b) is not None


def less_than(a: VonNeumannNatural, b: VonNeumannNatural) -> bool:
    return less_or_equal(a.succ(), b)


def greater_or_equal(a: VonNeumannNatural, b: VonNeumannNatural) -> bool:
    return less_or_equal(b, a)


def greater_than(a: VonNeumannNatural, b: VonNeumannNatural) -> bool:
    return less_than(b, a)


# =============================================================================
# PEANO SYSTEM
# =============================================================================


class VonNeumannPeanoSystem(PeanoSystem[VonNeumannNatural]):
    """Схема аксиом Пеано над натуральными фон Неймана."""

    @property
    def zero(self) -> VonNeumannNatural:
        return ZERO

    def succ(self, n: VonNeumannNatural) -> VonNeumannNatural:
        return n.succ()

    def pred(self, n: VonNeumannNatural) -> Optional[VonNeumannNatural]:
        return n.pred_or_none()

    def is_zero(self, n: VonNeumannNatural) -> bool:
        return n.is_zero()


VON_NEUMANN_PEANO_SYSTEM: VonNeumannPeanoSystem = VonNeumannPeanoSystem()
