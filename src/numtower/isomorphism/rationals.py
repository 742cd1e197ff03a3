"""
Rational Isomorphism — ConstructedRational ↔ Fraction

Выборка: p/q для p в −bound..bound, q в 1..bound, по одному представителю
на значение (в порядке первого появления).
"""

from fractions import Fraction
from typing import List

from numtower.construction.rational import ONE, ConstructedRational
from numtower.isomorphism.oracle import (
    VerificationReport,
    check_preservation,
    run_oracle,
    sample_pairs,
    verdict,
)
from numtower.kernel.arithmetic import RATIONAL_ARITHMETIC, validate_natural


def to_efficient(value: ConstructedRational) -> Fraction:
    return value.to_efficient()


def from_efficient(value: Fraction) -> ConstructedRational:
    return ConstructedRational.from_efficient(value)


def efficient_samples(bound: int) -> List[Fraction]:
    validate_natural(bound, "bound")
    seen = {}
    for p in range(-bound, bound + 1):
        for q in range(1, bound + 1):
            seen.setdefault(Fraction(p, q), None)
    return list(seen)


def samples(bound: int) -> List[ConstructedRational]:
    return [from_efficient(value) for value in efficient_samples(bound)]


# =============================================================================
# CHECKS
# =============================================================================


def check_round_trip(bound: int) -> VerificationReport:
    def holds(value: Fraction) -> bool:
        constructed = from_efficient(value)
        return to_efficient(constructed) == value and from_efficient(to_efficient(constructed)) == constructed

    return run_oracle("rational round trip", efficient_samples(bound), holds)


def check_representative_independence(bound: int) -> VerificationReport:
    """(p·t)/(q·t) == p/q при t в ±1..±bound, с тем же hash."""

    def holds(case) -> bool:
        value, factor = case
        canonical = from_efficient(value)
        scaled = ConstructedRational.of(value.numerator * factor, value.denominator * factor)
        return scaled == canonical and hash(scaled) == hash(canonical)

    factors = [t for t in range(-bound, bound + 1) if t != 0]
    cases = [(value, factor) for value in efficient_samples(bound) for factor in factors]
    return run_oracle("rational representative independence", cases, holds)


def check_addition_preservation(bound: int) -> VerificationReport:
    return check_preservation(
        "rational addition",
        sample_pairs(samples(bound)),
        ConstructedRational.add,
        RATIONAL_ARITHMETIC.add,
        to_efficient,
    )


def check_subtraction_preservation(bound: int) -> VerificationReport:
    return check_preservation(
        "rational subtraction",
        sample_pairs(samples(bound)),
        ConstructedRational.subtract,
        RATIONAL_ARITHMETIC.subtract,
        to_efficient,
    )


def check_multiplication_preservation(bound: int) -> VerificationReport:
    return check_preservation(
        "rational multiplication",
        sample_pairs(samples(bound)),
        ConstructedRational.multiply,
        RATIONAL_ARITHMETIC.multiply,
        to_efficient,
    )


def check_division_preservation(bound: int) -> VerificationReport:
    pairs = [(a, b) for a, b in sample_pairs(samples(bound)) if not b.is_zero()]
    return check_preservation(
        "rational division",
        pairs,
        ConstructedRational.divide,
        RATIONAL_ARITHMETIC.divide,
        to_efficient,
    )


def check_order_preservation(bound: int) -> VerificationReport:
    def holds(pair) -> bool:
        a, b = pair
        return a.compare(b) == RATIONAL_ARITHMETIC.compare(to_efficient(a), to_efficient(b))

    return run_oracle("rational order", sample_pairs(samples(bound)), holds)


def check_reciprocal_law(bound: int) -> VerificationReport:
    """a · reciprocal(a) == 1 для всех ненулевых a выборки."""
    nonzero = [a for a in samples(bound) if not a.is_zero()]
    return run_oracle("rational reciprocal law", nonzero, lambda a: a * a.reciprocal() == ONE)


def check_density(bound: int) -> VerificationReport:
    """a < between(a, b) < b для всех пар a < b."""
    ordered = [(a, b) for a, b in sample_pairs(samples(bound)) if a < b]

    def holds(pair) -> bool:
        a, b = pair
        middle = ConstructedRational.between(a, b)
        return a < middle < b

    return run_oracle("rational density", ordered, holds)


# =============================================================================
# BOOLEAN ORACLES
# =============================================================================


def verify_round_trip(bound: int) -> bool:
    return verdict(check_round_trip, bound)


def verify_representative_independence(bound: int) -> bool:
    return verdict(check_representative_independence, bound)


def verify_addition_preservation(bound: int) -> bool:
    return verdict(check_addition_preservation, bound)


def verify_subtraction_preservation(bound: int) -> bool:
    return verdict(check_subtraction_preservation, bound)


def verify_multiplication_preservation(bound: int) -> bool:
    return verdict(check_multiplication_preservation, bound)


def verify_division_preservation(bound: int) -> bool:
    return verdict(check_division_preservation, bound)


def verify_order_preservation(bound: int) -> bool:
    return verdict(check_order_preservation, bound)


def verify_reciprocal_law(bound: int) -> bool:
    return verdict(check_reciprocal_law, bound)


def verify_density(bound: int) -> bool:
    return verdict(check_density, bound)
