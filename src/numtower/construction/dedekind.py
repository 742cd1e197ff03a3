"""
DedekindReal — реальные как вычислимые сечения Дедекинда

Сечение задаётся реальным-свидетелем bound: q ∈ L ⟺ q < bound.
Вычислимо сравнивается не сам предел, а его рациональное приближение
bound.approximate_rational(precision_bits), отстоящее от предела не более
чем на 2^-precision_bits. Для рациональных bound приближение точное.

Свойства сечения (замкнутость вниз, отсутствие наибольшего элемента)
проверяются только на конечной выборке рациональных.

DedekindReal хранит сечение и свидетеля; арифметика идёт через свидетеля
(Cauchy-представление ConstructedReal) и снова оборачивается в сечение:
    from_cauchy(x).to_real() is x
"""

from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from functools import cached_property
from typing import Iterable, Optional, Union

from numtower.construction.rational import ConstructedRational
from numtower.construction.real import ConstructedReal, Tolerance
from numtower.core.config import DEFAULT_SETTINGS, TowerSettings
from numtower.core.errors import ConstructionPreconditionError
from numtower.kernel.arithmetic import validate_natural

# Бит рационального приближения свидетеля, по которому решается членство
DEDEKIND_PRECISION_INDEX: int = 32

RationalCandidate = Union[ConstructedRational, Fraction, int]


def _as_rational(value: RationalCandidate) -> ConstructedRational:
    if isinstance(value, ConstructedRational):
        return value
    return ConstructedRational.from_efficient(value)


# =============================================================================
# CUT
# =============================================================================


@dataclass(frozen=True, eq=False)
class DedekindCut:
    """
    Нижнее сечение L = {q ∈ ℚ : q < bound}.

    Порог вычисляется лениво при первом вопросе о членстве и кешируется.
    """

    bound: ConstructedReal
    precision_bits: int = DEDEKIND_PRECISION_INDEX

    def __post_init__(self) -> None:
        if not isinstance(self.bound, ConstructedReal):
            raise ConstructionPreconditionError(f"Cut bound must be a ConstructedReal, got {self.bound!r}")
        validate_natural(self.precision_bits, "precision_bits")

    @cached_property
    def threshold(self) -> ConstructedRational:
        """Рациональное приближение bound, с которым сравниваются кандидаты."""
        return self.bound.approximate_rational(self.precision_bits)

    def contains(self, candidate: RationalCandidate) -> bool:
        return _as_rational(candidate) < self.threshold

    def larger_member(self, member: RationalCandidate) -> ConstructedRational:
        """
        Элемент L строго больше member: середина между member и порогом.

        Raises:
            ConstructionPreconditionError: Если member не лежит в L
        """
        member = _as_rational(member)
        if not self.contains(member):
            raise ConstructionPreconditionError(f"{member} is not in the cut below {self.threshold}")
        return ConstructedRational.between(member, self.threshold)

    def is_lower_set_on_samples(self, samples: Iterable[RationalCandidate]) -> bool:
        """x ∈ L и y ≤ x ⟹ y ∈ L для всех x, y из выборки."""
        rationals = [_as_rational(sample) for sample in samples]
        members = [x for x in rationals if self.contains(x)]
        return all(self.contains(y) for x in members for y in rationals if y <= x)

    def has_no_greatest_element_on_samples(self, samples: Iterable[RationalCandidate]) -> bool:
        """Для каждого x ∈ L из выборки найдётся y ∈ L с y > x (y = larger_member(x))."""
        members = [x for x in map(_as_rational, samples) if self.contains(x)]
        for x in members:
            y = self.larger_member(x)
            if not (y > x and self.contains(y)):
                return False
        return True

    def __repr__(self) -> str:
        return f"DedekindCut(q < {self.bound!r})"


# =============================================================================
# DEDEKIND REAL
# =============================================================================


@dataclass(frozen=True, eq=False)
class DedekindReal:
    """
    Реальное число как сечение плюс Cauchy-свидетель.

    == остаётся тождеством, как у ConstructedReal; сравнение значений
    только с явным допуском через compare/equals.
    """

    cut: DedekindCut
    witness: ConstructedReal

    def __post_init__(self) -> None:
        if self.cut.bound is not self.witness:
            raise ConstructionPreconditionError("Dedekind real witness must be the bound of its cut")

    @classmethod
    def from_cauchy(cls, value: ConstructedReal, precision_bits: int = DEDEKIND_PRECISION_INDEX) -> "DedekindReal":
        """Cauchy → Dedekind: сечение q < value."""
        return cls(DedekindCut(value, precision_bits), value)

    @classmethod
    def from_rational(cls, value: RationalCandidate) -> "DedekindReal":
        return cls.from_cauchy(ConstructedReal.from_rational(_as_rational(value)))

    @classmethod
    def from_efficient(cls, value: Decimal) -> "DedekindReal":
        return cls.from_cauchy(ConstructedReal.from_efficient(value))

    def to_real(self) -> ConstructedReal:
        """Dedekind → Cauchy: свидетель без изменений."""
        return self.witness

    def to_efficient(self, digits: Optional[int] = None, settings: TowerSettings = DEFAULT_SETTINGS) -> Decimal:
        return self.witness.to_efficient(digits, settings)

    def approximate_rational(self, precision: int = DEDEKIND_PRECISION_INDEX) -> ConstructedRational:
        return self.witness.approximate_rational(precision)

    def contains(self, candidate: RationalCandidate) -> bool:
        return self.cut.contains(candidate)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def _wrap(self, value: ConstructedReal) -> "DedekindReal":
        return DedekindReal.from_cauchy(value, self.cut.precision_bits)

    def add(self, other: "DedekindReal") -> "DedekindReal":
        return self._wrap(self.witness + other.witness)

    def subtract(self, other: "DedekindReal") -> "DedekindReal":
        return self._wrap(self.witness - other.witness)

    def multiply(self, other: "DedekindReal") -> "DedekindReal":
        return self._wrap(self.witness * other.witness)

    def divide(self, other: "DedekindReal", settings: TowerSettings = DEFAULT_SETTINGS) -> "DedekindReal":
        """
        Raises:
            DomainArithmeticError: Если делитель неотличим от нуля
        """
        return self._wrap(self.witness.divide(other.witness, settings))

    def negate(self) -> "DedekindReal":
        return self._wrap(self.witness.negate())

    def compare(self, other: "DedekindReal", tolerance: Tolerance) -> int:
        return self.witness.compare(other.witness, tolerance)

    def equals(self, other: "DedekindReal", tolerance: Tolerance) -> bool:
        return self.witness.equals(other.witness, tolerance)

    def __add__(self, other: "DedekindReal") -> "DedekindReal":
        if not isinstance(other, DedekindReal):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "DedekindReal") -> "DedekindReal":
        if not isinstance(other, DedekindReal):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: "DedekindReal") -> "DedekindReal":
        if not isinstance(other, DedekindReal):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: "DedekindReal") -> "DedekindReal":
        if not isinstance(other, DedekindReal):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> "DedekindReal":
        return self.negate()

    def __repr__(self) -> str:
        return f"DedekindReal({self.witness!r})"
