"""
Natural Isomorphism — VonNeumannNatural ↔ int

Проверки линейны (конвертации) и квадратичны (бинарные операции) по bound;
умножение фон Неймана стоит O(a·b) узлов, поэтому bound держат малым.
"""

from typing import List

from numtower.construction.natural import (
    VON_NEUMANN_PEANO_SYSTEM,
    VonNeumannNatural,
    add,
    compare,
    multiply,
    power,
)
from numtower.isomorphism.oracle import (
    VerificationReport,
    check_preservation,
    run_oracle,
    sample_pairs,
    verdict,
)
from numtower.kernel.arithmetic import NATURAL_ARITHMETIC, validate_natural


def to_efficient(value: VonNeumannNatural) -> int:
    return value.to_efficient()


def from_efficient(value: int) -> VonNeumannNatural:
    return VonNeumannNatural.of(value)


def samples(bound: int) -> List[VonNeumannNatural]:
    """0..bound, каждый следующий построен из предыдущего через succ."""
    validate_natural(bound, "bound")
    return list(VON_NEUMANN_PEANO_SYSTEM.iterate(bound + 1))


# =============================================================================
# CHECKS
# =============================================================================


def check_round_trip(bound: int) -> VerificationReport:
    """to(from(k)) == k для k в 0..bound и from(to(n)) == n для выборки."""
    values = samples(bound)

    def holds(k: int) -> bool:
        return to_efficient(from_efficient(k)) == k and from_efficient(to_efficient(values[k])) == values[k]

    return run_oracle("natural round trip", range(bound + 1), holds)


def check_successor_preservation(bound: int) -> VerificationReport:
    return run_oracle(
        "natural successor",
        samples(bound),
        lambda n: to_efficient(n.succ()) == to_efficient(n) + 1,
    )


def check_addition_preservation(bound: int) -> VerificationReport:
    return check_preservation(
        "natural addition", sample_pairs(samples(bound)), add, NATURAL_ARITHMETIC.add, to_efficient
    )


def check_multiplication_preservation(bound: int) -> VerificationReport:
    return check_preservation(
        "natural multiplication",
        sample_pairs(samples(bound)),
        multiply,
        NATURAL_ARITHMETIC.multiply,
        to_efficient,
    )


def check_power_preservation(bound: int) -> VerificationReport:
    return check_preservation(
        "natural power", sample_pairs(samples(bound)), power, lambda a, b: a**b, to_efficient
    )


def check_order_preservation(bound: int) -> VerificationReport:
    def holds(pair) -> bool:
        a, b = pair
        return compare(a, b) == NATURAL_ARITHMETIC.compare(to_efficient(a), to_efficient(b))

    return run_oracle("natural order", sample_pairs(samples(bound)), holds)


def check_peano_axioms(sample_size: int) -> VerificationReport:
    return run_oracle(
        "peano axioms",
        [VON_NEUMANN_PEANO_SYSTEM],
        lambda system: system.satisfies_axioms(sample_size),
    )


# =============================================================================
# BOOLEAN ORACLES
# =============================================================================


def verify_round_trip(bound: int) -> bool:
    return verdict(check_round_trip, bound)


def verify_successor_preservation(bound: int) -> bool:
    return verdict(check_successor_preservation, bound)


def verify_addition_preservation(bound: int) -> bool:
    return verdict(check_addition_preservation, bound)


def verify_multiplication_preservation(bound: int) -> bool:
    return verdict(check_multiplication_preservation, bound)


def verify_power_preservation(bound: int) -> bool:
    return verdict(check_power_preservation, bound)


def verify_order_preservation(bound: int) -> bool:
    return verdict(check_order_preservation, bound)


def verify_peano_axioms(sample_size: int) -> bool:
    return verdict(check_peano_axioms, sample_size)
