"""
ConstructedIrrational — именованные иррациональные числа

Иррациональное состоит из:
- символа ("sqrt(2)", "pi", ...)
- основания: алгебраическая конструкция или аксиоматический символ
- Cauchy-представителя (ConstructedReal)
- предиката нижнего сечения над ℚ (q ∈ L ⟺ q < x)
- свидетеля нерациональности: refutes_as_exact_rational(q) истинно, если q
  заведомо не равно x

Для алгебраических констант (√2, √3, φ) оба предиката точные и выражены
рациональной арифметикой: для √2 q ∈ L ⟺ q < 0 или q² < 2.
Для аксиоматических (π, e) сечение сравнивает с рациональным приближением, а свидетель доверяет символу.

Арифметика с реальными или иррациональными возвращает ConstructedReal.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Callable, Optional, Union

from numtower.construction.rational import ONE as RATIONAL_ONE
from numtower.construction.rational import ZERO as RATIONAL_ZERO
from numtower.construction.rational import ConstructedRational
from numtower.construction.real import ONE as REAL_ONE
from numtower.construction.real import TWO as REAL_TWO
from numtower.construction.real import ConstructedReal, Tolerance
from numtower.core.config import DEFAULT_SETTINGS
from numtower.core.errors import ConstructionPreconditionError

# Точность (бит) рационального приближения в сечении аксиоматических констант
CUT_PRECISION_BITS: int = 28

# Десятичные разложения аксиоматических констант
PI_EXPANSION: str = "3.141592653589793238462643383279"
E_EXPANSION: str = "2.718281828459045235360287471352"

RationalPredicate = Callable[[ConstructedRational], bool]


class IrrationalFoundation(str, Enum):
    """Происхождение иррационального числа."""

    ALGEBRAIC_CONSTRUCTION = "ALGEBRAIC_CONSTRUCTION"
    AXIOMATIC_SYMBOL = "AXIOMATIC_SYMBOL"


@dataclass(frozen=True, eq=False)
class ConstructedIrrational:
    """Иррациональное с символом, Cauchy-представителем и сечением."""

    symbol: str
    foundation: IrrationalFoundation
    representative: ConstructedReal
    lower_cut: RationalPredicate
    irrationality_witness: RationalPredicate

    def __post_init__(self) -> None:
        if not self.symbol or not self.symbol.strip():
            raise ConstructionPreconditionError("Irrational symbol cannot be blank")

    @classmethod
    def of(
        cls,
        symbol: str,
        approximation: ConstructedReal,
        foundation: IrrationalFoundation = IrrationalFoundation.AXIOMATIC_SYMBOL,
    ) -> "ConstructedIrrational":
        """
        Иррациональное по произвольному представителю.

        Сечение сравнивает с approximate_rational(CUT_PRECISION_BITS);
        свидетель нерациональности доверяет вызывающему коду.
        """
        bound = approximation.approximate_rational(CUT_PRECISION_BITS)
        return cls(
            symbol=symbol.strip(),
            foundation=foundation,
            representative=approximation,
            lower_cut=lambda q: q < bound,
            irrationality_witness=lambda q: True,
        )

    @classmethod
    def from_decimal_expansion(cls, symbol: str, expansion: str) -> "ConstructedIrrational":
        return cls.of(symbol, ConstructedReal.from_decimal_expansion(expansion))

    def to_constructed_real(self) -> ConstructedReal:
        return self.representative

    def to_efficient(self, digits: Optional[int] = None) -> Decimal:
        """Decimal-приближение представителя."""
        return self.representative.to_efficient(digits)

    def lower_cut_contains(self, candidate: ConstructedRational) -> bool:
        return self.lower_cut(candidate)

    def refutes_as_exact_rational(self, candidate: ConstructedRational) -> bool:
        return self.irrationality_witness(candidate)

    def compare(self, other: Union["ConstructedIrrational", ConstructedReal], tolerance: Tolerance) -> int:
        return self.representative.compare(_as_real(other), tolerance)

    # =========================================================================
    # АРИФМЕТИКА → ConstructedReal
    # =========================================================================

    def __add__(self, other: Union["ConstructedIrrational", ConstructedReal]) -> ConstructedReal:
        return self.representative + _as_real(other)

    def __sub__(self, other: Union["ConstructedIrrational", ConstructedReal]) -> ConstructedReal:
        return self.representative - _as_real(other)

    def __mul__(self, other: Union["ConstructedIrrational", ConstructedReal]) -> ConstructedReal:
        return self.representative * _as_real(other)

    def __truediv__(self, other: Union["ConstructedIrrational", ConstructedReal]) -> ConstructedReal:
        return self.representative / _as_real(other)

    def __neg__(self) -> ConstructedReal:
        return -self.representative

    def __repr__(self) -> str:
        return f"ConstructedIrrational({self.symbol})"

    def __str__(self) -> str:
        return self.symbol


def _as_real(value: Union[ConstructedIrrational, ConstructedReal]) -> ConstructedReal:
    if isinstance(value, ConstructedIrrational):
        return value.representative
    if isinstance(value, ConstructedReal):
        return value
    raise ConstructionPreconditionError(
        f"Expected a constructed real or irrational, got {type(value).__name__}"
    )


# =============================================================================
# КОНСТАНТЫ
# =============================================================================


def _algebraic_square_root(symbol: str, radicand: int) -> ConstructedIrrational:
    target = ConstructedRational.of(radicand)
    return ConstructedIrrational(
        symbol=symbol,
        foundation=IrrationalFoundation.ALGEBRAIC_CONSTRUCTION,
        representative=ConstructedReal.square_root_of(radicand, DEFAULT_SETTINGS.sqrt_iterations),
        lower_cut=lambda q: q < RATIONAL_ZERO or q * q < target,
        irrationality_witness=lambda q: q * q != target,
    )


def _algebraic_golden_ratio() -> ConstructedIrrational:
    # φ: положительный корень q² = q + 1
    sqrt5 = ConstructedReal.square_root_of(5, DEFAULT_SETTINGS.sqrt_iterations)
    return ConstructedIrrational(
        symbol="phi",
        foundation=IrrationalFoundation.ALGEBRAIC_CONSTRUCTION,
        representative=(REAL_ONE + sqrt5) / REAL_TWO,
        lower_cut=lambda q: q < RATIONAL_ONE or q * q < q + RATIONAL_ONE,
        irrationality_witness=lambda q: q * q != q + RATIONAL_ONE,
    )


SQRT2: ConstructedIrrational = _algebraic_square_root("sqrt(2)", 2)
SQRT3: ConstructedIrrational = _algebraic_square_root("sqrt(3)", 3)
GOLDEN_RATIO: ConstructedIrrational = _algebraic_golden_ratio()
PI: ConstructedIrrational = ConstructedIrrational.from_decimal_expansion("pi", PI_EXPANSION)
E: ConstructedIrrational = ConstructedIrrational.from_decimal_expansion("e", E_EXPANSION)

KNOWN_CONSTANTS = (SQRT2, SQRT3, GOLDEN_RATIO, PI, E)
