"""
ComplexPair — комплексные числа как упорядоченные пары реальных

ConstructedComplex(real, imaginary) обозначает real + imaginary·i.
ConstructedImaginary(coefficient) обозначает coefficient·i.

Комплексные числа не упорядочены: есть только алгебраические операции
(без compare), равенство — покомпонентное с явным допуском.

Произведение двух чисто мнимых — РЕАЛЬНОЕ число:
    (b·i)(d·i) = −(b·d)
Это единственная операция башни, тип результата которой отличается от типа
операндов; times_imaginary возвращает ConstructedReal, а не комплексное.

Корни из единицы: zeta(n, k) = exp(2πik/n), приближённые через math.cos/sin.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional, Union, overload

from numtower.construction.real import ONE as REAL_ONE
from numtower.construction.real import ZERO as REAL_ZERO
from numtower.construction.real import ConstructedReal, Tolerance
from numtower.core.config import DEFAULT_SETTINGS, TowerSettings
from numtower.core.errors import ConstructionPreconditionError, DomainArithmeticError
from numtower.kernel.arithmetic import real_of, validate_natural
from numtower.kernel.complex_numbers import ComplexNumber, ImaginaryNumber

# Допуск verify_equation по умолчанию (float-приближения cos/sin)
ROOTS_OF_UNITY_TOLERANCE: Decimal = Decimal("1e-6")


# =============================================================================
# COMPLEX
# =============================================================================


@dataclass(frozen=True, eq=False)
class ConstructedComplex:
    """
    Комплексное число как пара ConstructedReal.

    == остаётся тождеством: равенство компонент проверяется только
    приближённо, через equals(other, tolerance).
    """

    real: ConstructedReal
    imaginary: ConstructedReal

    @classmethod
    def of(cls, real: ConstructedReal, imaginary: ConstructedReal = REAL_ZERO) -> "ConstructedComplex":
        return cls(real, imaginary)

    @classmethod
    def from_real(cls, value: ConstructedReal) -> "ConstructedComplex":
        """Вложение ℝ ↪ ℂ: r ↦ (r, 0)."""
        return cls(value, REAL_ZERO)

    @classmethod
    def from_efficient(cls, value: ComplexNumber) -> "ConstructedComplex":
        return cls(
            ConstructedReal.from_efficient(value.real),
            ConstructedReal.from_efficient(value.imaginary),
        )

    def to_efficient(self, digits: Optional[int] = None, settings: TowerSettings = DEFAULT_SETTINGS) -> ComplexNumber:
        return ComplexNumber(
            real=self.real.to_efficient(digits, settings),
            imaginary=self.imaginary.to_efficient(digits, settings),
        )

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: "ConstructedComplex") -> "ConstructedComplex":
        return ConstructedComplex(self.real + other.real, self.imaginary + other.imaginary)

    def subtract(self, other: "ConstructedComplex") -> "ConstructedComplex":
        return ConstructedComplex(self.real - other.real, self.imaginary - other.imaginary)

    def negate(self) -> "ConstructedComplex":
        return ConstructedComplex(-self.real, -self.imaginary)

    def multiply(self, other: "ConstructedComplex") -> "ConstructedComplex":
        # (a + bi)(c + di) = (ac − bd) + (ad + bc)i
        a, b, c, d = self.real, self.imaginary, other.real, other.imaginary
        return ConstructedComplex(a * c - b * d, a * d + b * c)

    def conjugate(self) -> "ConstructedComplex":
        return ConstructedComplex(self.real, -self.imaginary)

    def modulus_squared(self) -> ConstructedReal:
        return self.real * self.real + self.imaginary * self.imaginary

    def divide(self, other: "ConstructedComplex", settings: TowerSettings = DEFAULT_SETTINGS) -> "ConstructedComplex":
        """
        z / w = z · conj(w) / |w|².

        Raises:
            DomainArithmeticError: Если |w|² неотличим от нуля
        """
        try:
            scale = other.modulus_squared().reciprocal(settings)
        except DomainArithmeticError as e:
            raise DomainArithmeticError(f"Division by zero complex: {self!r} / 0") from e
        numerator = self.multiply(other.conjugate())
        return ConstructedComplex(numerator.real * scale, numerator.imaginary * scale)

    def power(self, exponent: int) -> "ConstructedComplex":
        """Натуральная степень возведением в квадрат."""
        validate_natural(exponent, "exponent")
        result = ONE
        base = self
        while exponent > 0:
            if exponent % 2 == 1:
                result = result.multiply(base)
            base = base.multiply(base)
            exponent //= 2
        return result

    # =========================================================================
    # СРАВНЕНИЕ (только равенство с допуском)
    # =========================================================================

    def equals(self, other: "ConstructedComplex", tolerance: Tolerance) -> bool:
        return self.real.equals(other.real, tolerance) and self.imaginary.equals(other.imaginary, tolerance)

    def is_zero(self, tolerance: Tolerance) -> bool:
        return self.equals(ZERO, tolerance)

    def is_purely_real(self, tolerance: Tolerance) -> bool:
        """Мнимая часть неотличима от нуля (включая сам ноль)."""
        return self.imaginary.sign(tolerance) == 0

    def is_purely_imaginary(self, tolerance: Tolerance) -> bool:
        """Действительная часть неотличима от нуля, мнимая отлична от нуля."""
        return self.real.sign(tolerance) == 0 and self.imaginary.sign(tolerance) != 0

    def __add__(self, other: "ConstructedComplex") -> "ConstructedComplex":
        if not isinstance(other, ConstructedComplex):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "ConstructedComplex") -> "ConstructedComplex":
        if not isinstance(other, ConstructedComplex):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: "ConstructedComplex") -> "ConstructedComplex":
        if not isinstance(other, ConstructedComplex):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: "ConstructedComplex") -> "ConstructedComplex":
        if not isinstance(other, ConstructedComplex):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> "ConstructedComplex":
        return self.negate()

    def __repr__(self) -> str:
        return f"ConstructedComplex({self.real!r}, {self.imaginary!r})"


ZERO: ConstructedComplex = ConstructedComplex(REAL_ZERO, REAL_ZERO)
ONE: ConstructedComplex = ConstructedComplex(REAL_ONE, REAL_ZERO)
I: ConstructedComplex = ConstructedComplex(REAL_ZERO, REAL_ONE)


# =============================================================================
# PURE IMAGINARY
# =============================================================================


@dataclass(frozen=True, eq=False)
class ConstructedImaginary:
    """Чисто мнимое число coefficient·i."""

    coefficient: ConstructedReal

    @classmethod
    def from_efficient(cls, value: ImaginaryNumber) -> "ConstructedImaginary":
        return cls(ConstructedReal.from_efficient(value.coefficient))

    def to_efficient(self, digits: Optional[int] = None, settings: TowerSettings = DEFAULT_SETTINGS) -> ImaginaryNumber:
        return ImaginaryNumber(coefficient=self.coefficient.to_efficient(digits, settings))

    def to_complex(self) -> ConstructedComplex:
        """Вложение b·i ↦ (0, b)."""
        return ConstructedComplex(REAL_ZERO, self.coefficient)

    def add(self, other: "ConstructedImaginary") -> "ConstructedImaginary":
        return ConstructedImaginary(self.coefficient + other.coefficient)

    def subtract(self, other: "ConstructedImaginary") -> "ConstructedImaginary":
        return ConstructedImaginary(self.coefficient - other.coefficient)

    def negate(self) -> "ConstructedImaginary":
        return ConstructedImaginary(-self.coefficient)

    def scale(self, factor: ConstructedReal) -> "ConstructedImaginary":
        """(b·i) · r = (b·r)·i."""
        return ConstructedImaginary(self.coefficient * factor)

    def divide_by(self, divisor: ConstructedReal, settings: TowerSettings = DEFAULT_SETTINGS) -> "ConstructedImaginary":
        """
        Raises:
            DomainArithmeticError: Если divisor неотличим от нуля
        """
        return ConstructedImaginary(self.coefficient.divide(divisor, settings))

    def times_imaginary(self, other: "ConstructedImaginary") -> ConstructedReal:
        """(b·i)(d·i) = −(b·d): результат реальный."""
        return (self.coefficient * other.coefficient).negate()

    def equals(self, other: "ConstructedImaginary", tolerance: Tolerance) -> bool:
        return self.coefficient.equals(other.coefficient, tolerance)

    def __add__(self, other: "ConstructedImaginary") -> "ConstructedImaginary":
        if not isinstance(other, ConstructedImaginary):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "ConstructedImaginary") -> "ConstructedImaginary":
        if not isinstance(other, ConstructedImaginary):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "ConstructedImaginary":
        return self.negate()

    @overload
    def __mul__(self, other: "ConstructedImaginary") -> ConstructedReal:
        ...

    @overload
    def __mul__(self, other: ConstructedReal) -> "ConstructedImaginary":
        ...

    def __mul__(self, other: Union["ConstructedImaginary", ConstructedReal]):
        if isinstance(other, ConstructedImaginary):
            return self.times_imaginary(other)
        if isinstance(other, ConstructedReal):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: ConstructedReal) -> "ConstructedImaginary":
        if isinstance(other, ConstructedReal):
            return self.scale(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ConstructedImaginary({self.coefficient!r})"


# =============================================================================
# ROOTS OF UNITY
# =============================================================================


def _validate_order(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise ConstructionPreconditionError(f"Root order n must be a positive integer, got {n}")


def zeta(n: int, k: int = 1) -> ConstructedComplex:
    """
    k-й корень n-й степени из единицы exp(2πik/n).

    Компоненты — точные вложения float-приближений cos/sin.

    Raises:
        ConstructionPreconditionError: Если n < 1
    """
    _validate_order(n)
    angle = 2.0 * math.pi * k / n
    return ConstructedComplex(
        ConstructedReal.from_efficient(real_of(repr(math.cos(angle)))),
        ConstructedReal.from_efficient(real_of(repr(math.sin(angle)))),
    )


def all_roots(n: int) -> List[ConstructedComplex]:
    """[zeta(n, 0), ..., zeta(n, n-1)]."""
    _validate_order(n)
    return [zeta(n, k) for k in range(n)]


def verify_equation(n: int, tolerance: Tolerance = ROOTS_OF_UNITY_TOLERANCE) -> bool:
    """Каждый корень из all_roots(n) удовлетворяет z^n = 1 в пределах допуска."""
    return all(root.power(n).equals(ONE, tolerance) for root in all_roots(n))
