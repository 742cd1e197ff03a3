"""
ComplexNumber / ImaginaryNumber — эффективные комплексные значения

Immutable Pydantic модели над Decimal. Встроенный complex использует float
и теряет точность, поэтому efficient-уровень для ℂ строится здесь.

Комплексные числа не упорядочены: COMPLEX_ARITHMETIC предоставляет только
алгебраический capability-набор (без compare).
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from numtower.core.config import DEFAULT_SETTINGS, TowerSettings, decimal_context
from numtower.core.errors import DomainArithmeticError
from numtower.kernel.arithmetic import (
    AlgebraicArithmetic,
    RealSource,
    real_add,
    real_multiply,
    real_of,
    real_subtract,
    real_to_text,
)


# =============================================================================
# COMPLEX
# =============================================================================


class ComplexNumber(BaseModel):
    """
    Комплексное число a + bi с Decimal компонентами.

    Равенство покомпонентное и численное (Decimal("1.0") == Decimal("1")).
    """

    real: Decimal = Field(Decimal(0), description="Действительная часть")
    imaginary: Decimal = Field(Decimal(0), description="Мнимая часть")

    model_config = {"frozen": True}

    @classmethod
    def of(cls, real: RealSource = 0, imaginary: RealSource = 0) -> "ComplexNumber":
        """Построение из int / str / Decimal / Fraction компонент."""
        return cls(real=real_of(real), imaginary=real_of(imaginary))

    def add(self, other: "ComplexNumber", settings: TowerSettings = DEFAULT_SETTINGS) -> "ComplexNumber":
        return ComplexNumber(
            real=real_add(self.real, other.real, settings),
            imaginary=real_add(self.imaginary, other.imaginary, settings),
        )

    def subtract(self, other: "ComplexNumber", settings: TowerSettings = DEFAULT_SETTINGS) -> "ComplexNumber":
        return ComplexNumber(
            real=real_subtract(self.real, other.real, settings),
            imaginary=real_subtract(self.imaginary, other.imaginary, settings),
        )

    def multiply(self, other: "ComplexNumber", settings: TowerSettings = DEFAULT_SETTINGS) -> "ComplexNumber":
        # (a + bi)(c + di) = (ac - bd) + (ad + bc)i
        a, b, c, d = self.real, self.imaginary, other.real, other.imaginary
        return ComplexNumber(
            real=real_subtract(real_multiply(a, c, settings), real_multiply(b, d, settings), settings),
            imaginary=real_add(real_multiply(a, d, settings), real_multiply(b, c, settings), settings),
        )

    def divide(self, other: "ComplexNumber", settings: TowerSettings = DEFAULT_SETTINGS) -> "ComplexNumber":
        """
        Деление через сопряжённое: z / w = z·conj(w) / |w|².

        Все промежуточные операции выполняются с точностью
        settings.decimal_precision.

        Raises:
            DomainArithmeticError: Если w == 0
        """
        denominator = other.modulus_squared(settings)
        if denominator == 0:
            raise DomainArithmeticError(f"Division by zero complex: {self} / 0")
        numerator = self.multiply(other.conjugate(), settings)
        context = decimal_context(settings)
        return ComplexNumber(
            real=context.divide(numerator.real, denominator),
            imaginary=context.divide(numerator.imaginary, denominator),
        )

    def __add__(self, other: "ComplexNumber") -> "ComplexNumber":
        return self.add(other)

    def __sub__(self, other: "ComplexNumber") -> "ComplexNumber":
        return self.subtract(other)

    def __neg__(self) -> "ComplexNumber":
        return ComplexNumber(real=self.real.copy_negate(), imaginary=self.imaginary.copy_negate())

    def __mul__(self, other: "ComplexNumber") -> "ComplexNumber":
        return self.multiply(other)

    def __truediv__(self, other: "ComplexNumber") -> "ComplexNumber":
        return self.divide(other)

    def conjugate(self) -> "ComplexNumber":
        return ComplexNumber(real=self.real, imaginary=self.imaginary.copy_negate())

    def modulus_squared(self, settings: TowerSettings = DEFAULT_SETTINGS) -> Decimal:
        return real_add(
            real_multiply(self.real, self.real, settings),
            real_multiply(self.imaginary, self.imaginary, settings),
            settings,
        )

    def is_zero(self) -> bool:
        return self.real == 0 and self.imaginary == 0

    def is_purely_real(self) -> bool:
        return self.imaginary == 0

    def is_purely_imaginary(self) -> bool:
        return self.real == 0 and self.imaginary != 0

    def __str__(self) -> str:
        sign = "-" if self.imaginary < 0 else "+"
        return f"{real_to_text(self.real)} {sign} {real_to_text(self.imaginary.copy_abs())}i"


# =============================================================================
# PURE IMAGINARY
# =============================================================================


class ImaginaryNumber(BaseModel):
    """
    Чисто мнимое число b·i.

    Произведение двух мнимых — реальное число: (bi)(di) = -bd.
    """

    coefficient: Decimal = Field(Decimal(0), description="Коэффициент b в b·i")

    model_config = {"frozen": True}

    @classmethod
    def of(cls, coefficient: RealSource) -> "ImaginaryNumber":
        return cls(coefficient=real_of(coefficient))

    def __add__(self, other: "ImaginaryNumber") -> "ImaginaryNumber":
        return ImaginaryNumber(coefficient=real_add(self.coefficient, other.coefficient))

    def __sub__(self, other: "ImaginaryNumber") -> "ImaginaryNumber":
        return ImaginaryNumber(coefficient=real_subtract(self.coefficient, other.coefficient))

    def __neg__(self) -> "ImaginaryNumber":
        return ImaginaryNumber(coefficient=self.coefficient.copy_negate())

    def scale(self, factor: Decimal, settings: TowerSettings = DEFAULT_SETTINGS) -> "ImaginaryNumber":
        return ImaginaryNumber(coefficient=real_multiply(self.coefficient, factor, settings))

    def times_imaginary(self, other: "ImaginaryNumber", settings: TowerSettings = DEFAULT_SETTINGS) -> Decimal:
        """(bi)(di) = -(b·d): результат — реальное число, не ImaginaryNumber."""
        return real_multiply(self.coefficient, other.coefficient, settings).copy_negate()

    def to_complex(self) -> ComplexNumber:
        return ComplexNumber(real=Decimal(0), imaginary=self.coefficient)

    def is_zero(self) -> bool:
        return self.coefficient == 0

    def __str__(self) -> str:
        return f"{real_to_text(self.coefficient)}i"


def complex_arithmetic(settings: TowerSettings = DEFAULT_SETTINGS) -> AlgebraicArithmetic[ComplexNumber]:
    """Алгебраический capability-набор ℂ с точностью settings.decimal_precision."""
    return AlgebraicArithmetic(
        name="complex",
        zero=ComplexNumber(real=Decimal(0), imaginary=Decimal(0)),
        one=ComplexNumber(real=Decimal(1), imaginary=Decimal(0)),
        add=lambda a, b: a.add(b, settings),
        subtract=lambda a, b: a.subtract(b, settings),
        multiply=lambda a, b: a.multiply(b, settings),
        divide=lambda a, b: a.divide(b, settings),
    )


COMPLEX_ARITHMETIC: AlgebraicArithmetic[ComplexNumber] = complex_arithmetic(DEFAULT_SETTINGS)
