"""
RationalQuotient — рациональные как классы эквивалентности пар целых

Пара (p, q) ConstructedInteger с q ≠ 0 обозначает p / q.

ОТНОШЕНИЕ ЭКВИВАЛЕНТНОСТИ:
    (p, q) ~ (r, s)  ⟺  p · s = q · r

Равенство и hash реализуют отношение (hash — сокращённая эффективная дробь,
инвариант класса). Нулевой знаменатель отвергается при построении.

Формулы (через арифметику ConstructedInteger):
    p/q + r/s = (p·s + r·q) / (q·s)
    p/q · r/s = (p·r) / (q·s)
    p/q ÷ r/s = (p·s) / (q·r),  r ≠ 0
    sign(p/q − r/s) = sign(p·s − r·q) · sign(q·s)

Результаты арифметики возвращаются сокращёнными (normalized()): класс
эквивалентности тот же, а длинные вычисления Cauchy-последовательностей
не раздувают представителей.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Tuple, Union

from numtower.construction.integer import ConstructedInteger
from numtower.core.errors import ConstructionPreconditionError, DomainArithmeticError
from numtower.kernel.arithmetic import validate_natural

IntegerLike = Union[int, ConstructedInteger]


def _as_integer(value: IntegerLike, name: str) -> ConstructedInteger:
    if isinstance(value, ConstructedInteger):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConstructionPreconditionError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    return ConstructedInteger.from_efficient(value)


@dataclass(frozen=True, eq=False)
class ConstructedRational:
    """
    Рациональное число как класс эквивалентности пары (numerator, denominator).

    Инвариант: denominator ≠ 0 (проверяется в __post_init__).
    """

    numerator: ConstructedInteger
    denominator: ConstructedInteger

    def __post_init__(self) -> None:
        if self.denominator.is_zero():
            raise ConstructionPreconditionError(
                f"Rational denominator must be non-zero: {self.numerator}/0"
            )

    @classmethod
    def of(cls, p: IntegerLike, q: IntegerLike = 1) -> "ConstructedRational":
        """
        Рациональное p / q.

        Raises:
            ConstructionPreconditionError: Если q == 0 или компонента не целая

        Examples:
            >>> ConstructedRational.of(1, 2) == ConstructedRational.of(2, 4)
            True
        """
        return cls(_as_integer(p, "numerator"), _as_integer(q, "denominator"))

    @classmethod
    def from_efficient(cls, value: Union[Fraction, int]) -> "ConstructedRational":
        fraction = Fraction(value)
        return cls.of(fraction.numerator, fraction.denominator)

    @classmethod
    def from_integer(cls, z: ConstructedInteger) -> "ConstructedRational":
        """Вложение ℤ ↪ ℚ: z ↦ z / 1."""
        return cls(z, ConstructedInteger.from_efficient(1))

    def to_efficient(self) -> Fraction:
        return Fraction(self.numerator.to_efficient(), self.denominator.to_efficient())

    def representative(self) -> Tuple[ConstructedInteger, ConstructedInteger]:
        return self.numerator, self.denominator

    def normalized(self) -> "ConstructedRational":
        """Сокращённый представитель с положительным знаменателем."""
        return ConstructedRational.from_efficient(self.to_efficient())

    # =========================================================================
    # ОТНОШЕНИЕ ЭКВИВАЛЕНТНОСТИ
    # =========================================================================

    @staticmethod
    def are_equivalent(p: Tuple[IntegerLike, IntegerLike], q: Tuple[IntegerLike, IntegerLike]) -> bool:
        """
        (a, b) ~ (c, d) ⟺ a·d = b·c.

        Raises:
            ConstructionPreconditionError: Если знаменатель пары равен нулю
        """
        return ConstructedRational.of(*p) == ConstructedRational.of(*q)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstructedRational):
            return NotImplemented
        return self.numerator * other.denominator == self.denominator * other.numerator

    def __hash__(self) -> int:
        return hash(self.to_efficient())

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: "ConstructedRational") -> "ConstructedRational":
        p, q, r, s = self.numerator, self.denominator, other.numerator, other.denominator
        return ConstructedRational(p * s + r * q, q * s).normalized()

    def negate(self) -> "ConstructedRational":
        return ConstructedRational(self.numerator.negate(), self.denominator)

    def subtract(self, other: "ConstructedRational") -> "ConstructedRational":
        return self.add(other.negate())

    def multiply(self, other: "ConstructedRational") -> "ConstructedRational":
        return ConstructedRational(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        ).normalized()

    def reciprocal(self) -> "ConstructedRational":
        """
        Raises:
            DomainArithmeticError: Если self == 0
        """
        if self.is_zero():
            raise DomainArithmeticError("Reciprocal of zero rational")
        return ConstructedRational(self.denominator, self.numerator).normalized()

    def divide(self, other: "ConstructedRational") -> "ConstructedRational":
        """
        Raises:
            DomainArithmeticError: Если числитель делителя равен нулю
        """
        if other.is_zero():
            raise DomainArithmeticError(f"Division by zero rational: {self} / 0")
        return ConstructedRational(
            self.numerator * other.denominator,
            self.denominator * other.numerator,
        ).normalized()

    def power(self, exponent: int) -> "ConstructedRational":
        """Натуральная степень повторным умножением."""
        validate_natural(exponent, "exponent")
        result = ONE
        for _ in range(exponent):
            result = result.multiply(self)
        return result

    def compare(self, other: "ConstructedRational") -> int:
        p, q, r, s = self.numerator, self.denominator, other.numerator, other.denominator
        return (p * s - r * q).sign() * (q * s).sign()

    def sign(self) -> int:
        return self.numerator.sign() * self.denominator.sign()

    def is_zero(self) -> bool:
        return self.numerator.is_zero()

    @staticmethod
    def between(a: "ConstructedRational", b: "ConstructedRational") -> "ConstructedRational":
        """
        Рациональное строго между a и b (при a ≠ b): (a + b) / 2.

        Демонстрирует плотность порядка ℚ.
        """
        return a.add(b).divide(TWO)

    # =========================================================================
    # ОПЕРАТОРЫ
    # =========================================================================

    def __add__(self, other: "ConstructedRational") -> "ConstructedRational":
        if not isinstance(other, ConstructedRational):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "ConstructedRational") -> "ConstructedRational":
        if not isinstance(other, ConstructedRational):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: "ConstructedRational") -> "ConstructedRational":
        if not isinstance(other, ConstructedRational):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: "ConstructedRational") -> "ConstructedRational":
        if not isinstance(other, ConstructedRational):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> "ConstructedRational":
        return self.negate()

    def __abs__(self) -> "ConstructedRational":
        return self.negate() if self.sign() < 0 else self

    def __lt__(self, other: "ConstructedRational") -> bool:
        return self.compare(other) < 0

    def __le__(self, other: "ConstructedRational") -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: "ConstructedRational") -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: "ConstructedRational") -> bool:
        return self.compare(other) >= 0

    def __repr__(self) -> str:
        return f"ConstructedRational({self.numerator}/{self.denominator})"

    def __str__(self) -> str:
        return str(self.to_efficient())


ZERO: ConstructedRational = ConstructedRational.of(0)
ONE: ConstructedRational = ConstructedRational.of(1)
TWO: ConstructedRational = ConstructedRational.of(2)
