"""
IntegerQuotient — целые как классы эквивалентности пар натуральных

Пара (a, b) натуральных обозначает a − b.

ОТНОШЕНИЕ ЭКВИВАЛЕНТНОСТИ (не структурное равенство пар!):
    (a, b) ~ (c, d)  ⟺  a + d = b + c

__eq__ и __hash__ реализуют именно это отношение. Автоматически
сгенерированное равенство по полям (dataclass eq=True) сломало бы всю
факторконструкцию: (3, 1) и (4, 2) обязаны быть одним и тем же целым 2.

Компоненты хранятся как эффективные натуральные (int >= 0); натуральные
фон Неймана принимаются на входе и конвертируются. Арифметика на парах
выражена через capability-набор натуральных (NATURAL_ARITHMETIC).

Формулы:
    (a, b) + (c, d) = (a + c, b + d)
    −(a, b)         = (b, a)
    (a, b) · (c, d) = (ac + bd, ad + bc)
    (a, b) ≤ (c, d) ⟺ a + d ≤ b + c
"""

from dataclasses import dataclass
from typing import Tuple, Union

from numtower.construction.natural import VonNeumannNatural
from numtower.core.errors import ConstructionPreconditionError, DomainArithmeticError
from numtower.kernel.arithmetic import INTEGER_ARITHMETIC, NATURAL_ARITHMETIC, validate_natural

NaturalLike = Union[int, VonNeumannNatural]

_N = NATURAL_ARITHMETIC


def _efficient_natural(value: NaturalLike, name: str) -> int:
    if isinstance(value, VonNeumannNatural):
        return value.to_efficient()
    return validate_natural(value, name)


@dataclass(frozen=True, eq=False)
class ConstructedInteger:
    """
    Целое число как класс эквивалентности пары (positive, negative).

    Значение: positive − negative. Представитель не канонизируется при
    построении; normalized() возвращает минимальную пару по запросу.
    """

    positive: int
    negative: int

    def __post_init__(self) -> None:
        validate_natural(self.positive, "positive")
        validate_natural(self.negative, "negative")

    @classmethod
    def of(cls, a: NaturalLike, b: NaturalLike = 0) -> "ConstructedInteger":
        """
        Целое из пары натуральных (a, b) = a − b.

        Args:
            a: Уменьшаемое (int >= 0 или VonNeumannNatural)
            b: Вычитаемое (int >= 0 или VonNeumannNatural)

        Raises:
            ConstructionPreconditionError: Если компонента не натуральная

        Examples:
            >>> ConstructedInteger.of(3, 1) == ConstructedInteger.of(4, 2)
            True
        """
        return cls(_efficient_natural(a, "a"), _efficient_natural(b, "b"))

    @classmethod
    def from_efficient(cls, value: int) -> "ConstructedInteger":
        """Минимальный представитель: (n, 0) или (0, n)."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConstructionPreconditionError(
                f"Integer value must be int, got {type(value).__name__}"
            )
        return cls(value, 0) if value >= 0 else cls(0, -value)

    @classmethod
    def from_natural(cls, n: NaturalLike) -> "ConstructedInteger":
        """Вложение ℕ ↪ ℤ: n ↦ (n, 0)."""
        return cls.of(n, 0)

    def to_efficient(self) -> int:
        return self.positive - self.negative

    def representative(self) -> Tuple[int, int]:
        """Хранимая пара (без нормализации)."""
        return self.positive, self.negative

    def normalized(self) -> "ConstructedInteger":
        return ConstructedInteger.from_efficient(self.to_efficient())

    # =========================================================================
    # ОТНОШЕНИЕ ЭКВИВАЛЕНТНОСТИ
    # =========================================================================

    @staticmethod
    def are_equivalent(p: Tuple[NaturalLike, NaturalLike], q: Tuple[NaturalLike, NaturalLike]) -> bool:
        """(a, b) ~ (c, d) ⟺ a + d = b + c."""
        a, b = _efficient_natural(p[0], "a"), _efficient_natural(p[1], "b")
        c, d = _efficient_natural(q[0], "c"), _efficient_natural(q[1], "d")
        return _N.add(a, d) == _N.add(b, c)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstructedInteger):
            return NotImplemented
        return _N.add(self.positive, other.negative) == _N.add(self.negative, other.positive)

    def __hash__(self) -> int:
        # Инвариант класса: одинаков для всех эквивалентных пар
        return hash(self.to_efficient())

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: "ConstructedInteger") -> "ConstructedInteger":
        return ConstructedInteger(
            _N.add(self.positive, other.positive),
            _N.add(self.negative, other.negative),
        )

    def negate(self) -> "ConstructedInteger":
        return ConstructedInteger(self.negative, self.positive)

    def subtract(self, other: "ConstructedInteger") -> "ConstructedInteger":
        return self.add(other.negate())

    def multiply(self, other: "ConstructedInteger") -> "ConstructedInteger":
        a, b, c, d = self.positive, self.negative, other.positive, other.negative
        return ConstructedInteger(
            _N.add(_N.multiply(a, c), _N.multiply(b, d)),
            _N.add(_N.multiply(a, d), _N.multiply(b, c)),
        )

    def divide(self, other: "ConstructedInteger") -> "ConstructedInteger":
        """
        Точное частное.

        Raises:
            DomainArithmeticError: Если other == 0
            ConstructionPreconditionError: Если self не кратно other
        """
        if other.is_zero():
            raise DomainArithmeticError(f"Division by zero integer: {self} / 0")
        quotient = INTEGER_ARITHMETIC.divide(self.to_efficient(), other.to_efficient())
        return ConstructedInteger.from_efficient(quotient)

    def compare(self, other: "ConstructedInteger") -> int:
        """(a, b) vs (c, d): сравнение a + d и b + c в ℕ."""
        return _N.compare(
            _N.add(self.positive, other.negative),
            _N.add(self.negative, other.positive),
        )

    def sign(self) -> int:
        return _N.compare(self.positive, self.negative)

    def is_zero(self) -> bool:
        return self.positive == self.negative

    def __add__(self, other: "ConstructedInteger") -> "ConstructedInteger":
        if not isinstance(other, ConstructedInteger):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "ConstructedInteger") -> "ConstructedInteger":
        if not isinstance(other, ConstructedInteger):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: "ConstructedInteger") -> "ConstructedInteger":
        if not isinstance(other, ConstructedInteger):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self) -> "ConstructedInteger":
        return self.negate()

    def __abs__(self) -> "ConstructedInteger":
        return self.negate() if self.sign() < 0 else self

    def __lt__(self, other: "ConstructedInteger") -> bool:
        return self.compare(other) < 0

    def __le__(self, other: "ConstructedInteger") -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: "ConstructedInteger") -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: "ConstructedInteger") -> bool:
        return self.compare(other) >= 0

    def __repr__(self) -> str:
        return f"ConstructedInteger({self.positive} - {self.negative})"

    def __str__(self) -> str:
        return str(self.to_efficient())


ZERO: ConstructedInteger = ConstructedInteger(0, 0)
ONE: ConstructedInteger = ConstructedInteger(1, 0)
