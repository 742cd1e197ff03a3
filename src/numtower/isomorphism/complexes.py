"""
Complex Isomorphism — ConstructedComplex ↔ ComplexNumber,
ConstructedImaginary ↔ ImaginaryNumber

Выборка: a + bi с a, b = k/2 для k в −bound..bound. Компоненты сравниваются
с допуском 10^-real_digits (деление даёт бесконечные дроби).

Порядок не проверяется: у комплексных чисел его нет, complex_arithmetic
предоставляет только алгебраический capability-набор.
"""

from decimal import Decimal
from fractions import Fraction
from typing import List, Optional

from numtower.construction.complex import (
    ROOTS_OF_UNITY_TOLERANCE,
    ConstructedComplex,
    ConstructedImaginary,
    verify_equation,
)
from numtower.construction.real import ConstructedReal, Tolerance
from numtower.core.config import DEFAULT_SETTINGS, TowerSettings
from numtower.isomorphism.oracle import (
    VerificationReport,
    check_preservation,
    run_oracle,
    sample_pairs,
    verdict,
)
from numtower.isomorphism.reals import within
from numtower.kernel.arithmetic import real_of, validate_natural
from numtower.kernel.complex_numbers import ComplexNumber, ImaginaryNumber, complex_arithmetic


def to_efficient(
    value: ConstructedComplex,
    digits: Optional[int] = None,
    settings: TowerSettings = DEFAULT_SETTINGS,
) -> ComplexNumber:
    return value.to_efficient(digits, settings)


def from_efficient(value: ComplexNumber) -> ConstructedComplex:
    return ConstructedComplex.from_efficient(value)


def imaginary_to_efficient(
    value: ConstructedImaginary,
    digits: Optional[int] = None,
    settings: TowerSettings = DEFAULT_SETTINGS,
) -> ImaginaryNumber:
    return value.to_efficient(digits, settings)


def imaginary_from_efficient(value: ImaginaryNumber) -> ConstructedImaginary:
    return ConstructedImaginary.from_efficient(value)


def complex_within(
    a: ComplexNumber, b: ComplexNumber, digits: int, settings: TowerSettings = DEFAULT_SETTINGS
) -> bool:
    return within(a.real, b.real, digits, settings) and within(a.imaginary, b.imaginary, digits, settings)


def _coefficients(bound: int) -> List[Decimal]:
    validate_natural(bound, "bound")
    return [real_of(Fraction(k, 2)) for k in range(-bound, bound + 1)]


def efficient_samples(bound: int) -> List[ComplexNumber]:
    coefficients = _coefficients(bound)
    return [ComplexNumber(real=a, imaginary=b) for a in coefficients for b in coefficients]


def samples(bound: int) -> List[ConstructedComplex]:
    return [from_efficient(value) for value in efficient_samples(bound)]


def imaginary_samples(bound: int) -> List[ConstructedImaginary]:
    return [imaginary_from_efficient(ImaginaryNumber(coefficient=b)) for b in _coefficients(bound)]


# =============================================================================
# COMPLEX CHECKS
# =============================================================================


def check_round_trip(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> VerificationReport:
    return run_oracle(
        "complex round trip",
        efficient_samples(bound),
        lambda value: to_efficient(from_efficient(value), settings=settings) == value,
    )


def _preservation(name, bound, constructed_operation, efficient_operation, settings, pairs=None):
    return check_preservation(
        name,
        sample_pairs(samples(bound)) if pairs is None else pairs,
        constructed_operation,
        efficient_operation,
        lambda value: to_efficient(value, settings=settings),
        agree=lambda x, y: complex_within(x, y, settings.real_digits, settings),
    )


def check_addition_preservation(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> VerificationReport:
    return _preservation(
        "complex addition", bound, ConstructedComplex.add, complex_arithmetic(settings).add, settings
    )


def check_subtraction_preservation(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> VerificationReport:
    return _preservation(
        "complex subtraction", bound, ConstructedComplex.subtract, complex_arithmetic(settings).subtract, settings
    )


def check_multiplication_preservation(
    bound: int, settings: TowerSettings = DEFAULT_SETTINGS
) -> VerificationReport:
    return _preservation(
        "complex multiplication", bound, ConstructedComplex.multiply, complex_arithmetic(settings).multiply, settings
    )


def check_division_preservation(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> VerificationReport:
    """Деление через сопряжённое; нулевые делители пропускаются."""
    pairs = [
        (a, b)
        for a, b in sample_pairs(samples(bound))
        if not to_efficient(b, settings=settings).is_zero()
    ]
    return _preservation(
        "complex division",
        bound,
        lambda a, b: a.divide(b, settings),
        complex_arithmetic(settings).divide,
        settings,
        pairs=pairs,
    )


def check_conjugate_preservation(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> VerificationReport:
    """conj и |z|² согласованы с эффективными."""

    def holds(value: ConstructedComplex) -> bool:
        efficient = to_efficient(value, settings=settings)
        return to_efficient(value.conjugate(), settings=settings) == efficient.conjugate() and within(
            value.modulus_squared().to_efficient(settings.real_digits, settings),
            efficient.modulus_squared(settings),
            settings.real_digits,
            settings,
        )

    return run_oracle("complex conjugate", samples(bound), holds)


def check_roots_of_unity(max_order: int, tolerance: Tolerance = ROOTS_OF_UNITY_TOLERANCE) -> VerificationReport:
    """z^n = 1 для всех корней порядков 1..max_order."""
    validate_natural(max_order, "max_order")
    return run_oracle(
        "roots of unity",
        range(1, max_order + 1),
        lambda n: verify_equation(n, tolerance),
    )


# =============================================================================
# IMAGINARY CHECKS
# =============================================================================


def check_imaginary_round_trip(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> VerificationReport:
    def holds(coefficient: Decimal) -> bool:
        efficient = ImaginaryNumber(coefficient=coefficient)
        return imaginary_to_efficient(imaginary_from_efficient(efficient), settings=settings) == efficient

    return run_oracle("imaginary round trip", _coefficients(bound), holds)


def check_imaginary_collapse(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> VerificationReport:
    """
    (b·i)(d·i) — реальное −(b·d), а не комплексное и не мнимое.

    Результат обязан быть ConstructedReal и совпадать с эффективным
    ImaginaryNumber.times_imaginary.
    """

    def holds(pair) -> bool:
        left, right = pair
        product = left * right
        if not isinstance(product, ConstructedReal):
            return False
        expected = imaginary_to_efficient(left, settings=settings).times_imaginary(
            imaginary_to_efficient(right, settings=settings), settings
        )
        return product.to_efficient(settings.real_digits, settings) == expected

    return run_oracle("imaginary product collapse", sample_pairs(imaginary_samples(bound)), holds)


def check_imaginary_scaling(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> VerificationReport:
    """(b·i)·r — мнимое (b·r)·i."""

    def holds(pair) -> bool:
        imaginary, factor = pair
        scaled = imaginary * ConstructedReal.from_efficient(factor)
        if not isinstance(scaled, ConstructedImaginary):
            return False
        expected = imaginary_to_efficient(imaginary, settings=settings).scale(factor, settings)
        return imaginary_to_efficient(scaled, settings=settings) == expected

    cases = [(imaginary, factor) for imaginary in imaginary_samples(bound) for factor in _coefficients(bound)]
    return run_oracle("imaginary scaling", cases, holds)


# =============================================================================
# BOOLEAN ORACLES
# =============================================================================


def verify_round_trip(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> bool:
    return verdict(check_round_trip, bound, settings)


def verify_addition_preservation(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> bool:
    return verdict(check_addition_preservation, bound, settings)


def verify_subtraction_preservation(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> bool:
    return verdict(check_subtraction_preservation, bound, settings)


def verify_multiplication_preservation(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> bool:
    return verdict(check_multiplication_preservation, bound, settings)


def verify_division_preservation(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> bool:
    return verdict(check_division_preservation, bound, settings)


def verify_conjugate_preservation(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> bool:
    return verdict(check_conjugate_preservation, bound, settings)


def verify_roots_of_unity(max_order: int, tolerance: Tolerance = ROOTS_OF_UNITY_TOLERANCE) -> bool:
    return verdict(check_roots_of_unity, max_order, tolerance)


def verify_imaginary_round_trip(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> bool:
    return verdict(check_imaginary_round_trip, bound, settings)


def verify_imaginary_collapse(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> bool:
    return verdict(check_imaginary_collapse, bound, settings)


def verify_imaginary_scaling(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> bool:
    return verdict(check_imaginary_scaling, bound, settings)
