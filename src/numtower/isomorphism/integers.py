"""
Integer Isomorphism — ConstructedInteger ↔ int

Выборка: −bound..bound (минимальные представители). Независимость от
представителя проверяется отдельно сдвигом пар (a + t, b + t).
"""

from typing import List

from numtower.construction.integer import ConstructedInteger
from numtower.isomorphism.oracle import (
    VerificationReport,
    check_preservation,
    run_oracle,
    sample_pairs,
    verdict,
)
from numtower.kernel.arithmetic import INTEGER_ARITHMETIC, validate_natural


def to_efficient(value: ConstructedInteger) -> int:
    return value.to_efficient()


def from_efficient(value: int) -> ConstructedInteger:
    return ConstructedInteger.from_efficient(value)


def samples(bound: int) -> List[ConstructedInteger]:
    validate_natural(bound, "bound")
    return [from_efficient(k) for k in range(-bound, bound + 1)]


# =============================================================================
# CHECKS
# =============================================================================


def check_round_trip(bound: int) -> VerificationReport:
    """to(from(k)) == k и from(to(z)) == z для k в −bound..bound."""
    validate_natural(bound, "bound")

    def holds(k: int) -> bool:
        constructed = from_efficient(k)
        return to_efficient(constructed) == k and from_efficient(to_efficient(constructed)) == constructed

    return run_oracle("integer round trip", range(-bound, bound + 1), holds)


def check_representative_independence(bound: int) -> VerificationReport:
    """
    Пары (a + t, b + t) при t в 0..bound дают то же целое, тот же hash и
    те же результаты арифметики с фиксированным операндом.
    """
    validate_natural(bound, "bound")
    operand = ConstructedInteger.of(2, 5)

    def holds(case) -> bool:
        k, shift = case
        canonical = from_efficient(k)
        a, b = canonical.representative()
        shifted = ConstructedInteger.of(a + shift, b + shift)
        return (
            shifted == canonical
            and hash(shifted) == hash(canonical)
            and shifted + operand == canonical + operand
            and shifted * operand == canonical * operand
            and (-shifted) == (-canonical)
        )

    cases = [(k, shift) for k in range(-bound, bound + 1) for shift in range(bound + 1)]
    return run_oracle("integer representative independence", cases, holds)


def check_addition_preservation(bound: int) -> VerificationReport:
    return check_preservation(
        "integer addition",
        sample_pairs(samples(bound)),
        ConstructedInteger.add,
        INTEGER_ARITHMETIC.add,
        to_efficient,
    )


def check_subtraction_preservation(bound: int) -> VerificationReport:
    return check_preservation(
        "integer subtraction",
        sample_pairs(samples(bound)),
        ConstructedInteger.subtract,
        INTEGER_ARITHMETIC.subtract,
        to_efficient,
    )


def check_multiplication_preservation(bound: int) -> VerificationReport:
    return check_preservation(
        "integer multiplication",
        sample_pairs(samples(bound)),
        ConstructedInteger.multiply,
        INTEGER_ARITHMETIC.multiply,
        to_efficient,
    )


def check_division_preservation(bound: int) -> VerificationReport:
    """Точное деление на парах, где делитель ненулевой и делит делимое."""
    pairs = [
        (a, b)
        for a, b in sample_pairs(samples(bound))
        if not b.is_zero() and to_efficient(a) % to_efficient(b) == 0
    ]
    return check_preservation(
        "integer division",
        pairs,
        ConstructedInteger.divide,
        INTEGER_ARITHMETIC.divide,
        to_efficient,
    )


def check_negation_preservation(bound: int) -> VerificationReport:
    return run_oracle(
        "integer negation",
        samples(bound),
        lambda z: to_efficient(-z) == -to_efficient(z),
    )


def check_order_preservation(bound: int) -> VerificationReport:
    def holds(pair) -> bool:
        a, b = pair
        return a.compare(b) == INTEGER_ARITHMETIC.compare(to_efficient(a), to_efficient(b))

    return run_oracle("integer order", sample_pairs(samples(bound)), holds)


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


def verify_negation_preservation(bound: int) -> bool:
    return verdict(check_negation_preservation, bound)


def verify_order_preservation(bound: int) -> bool:
    return verdict(check_order_preservation, bound)
