"""
Real Isomorphism — ConstructedReal ↔ Decimal

to_efficient проецирует с digits знаками после запятой (погрешность не
больше 10^-digits), from_efficient вкладывает конечную десятичную дробь
точно (постоянная последовательность).

Выборка: k/4 для k в −bound..bound; все суммы, разности и произведения
выборки конечны и короче digits знаков, поэтому сравниваются точно.
Частные, корни и константы сравниваются с допуском 10^-digits.

Dedekind-представление проверяется как третья сторона: Cauchy → Dedekind →
Cauchy сохраняет проекцию, а членство в сечении согласовано с порядком Decimal.
"""

from decimal import Decimal
from fractions import Fraction
from typing import List, Optional

from numtower.construction.dedekind import DedekindReal
from numtower.construction.irrational import E, GOLDEN_RATIO, PI, SQRT2, SQRT3
from numtower.construction.rational import ConstructedRational
from numtower.construction.real import ConstructedReal
from numtower.core.config import DEFAULT_SETTINGS, TowerSettings, decimal_context
from numtower.isomorphism.oracle import (
    VerificationReport,
    check_preservation,
    run_oracle,
    sample_pairs,
    verdict,
)
from numtower.kernel.arithmetic import real_arithmetic, real_of, real_pi, validate_natural

# Знаки после запятой для проверок корней и иррациональных констант
# (бисекция с бюджетом sqrt_iterations даёт погрешность порядка 1e-19)
ROOT_CHECK_DIGITS: int = 15


def to_efficient(
    value: ConstructedReal,
    digits: Optional[int] = None,
    settings: TowerSettings = DEFAULT_SETTINGS,
) -> Decimal:
    return value.to_efficient(digits, settings)


def from_efficient(value: Decimal) -> ConstructedReal:
    return ConstructedReal.from_efficient(value)


def within(a: Decimal, b: Decimal, digits: int, settings: TowerSettings = DEFAULT_SETTINGS) -> bool:
    """|a − b| ≤ 10^-digits (разность в контексте settings)."""
    context = decimal_context(settings)
    return context.subtract(a, b).copy_abs() <= Decimal(f"1e-{digits}")


def efficient_samples(bound: int) -> List[Decimal]:
    validate_natural(bound, "bound")
    return [real_of(Fraction(k, 4)) for k in range(-bound, bound + 1)]


def samples(bound: int) -> List[ConstructedReal]:
    return [from_efficient(value) for value in efficient_samples(bound)]


# =============================================================================
# CHECKS
# =============================================================================


def check_round_trip(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> VerificationReport:
    """to(from(d)) == d для каждой десятичной выборки."""
    return run_oracle(
        "real round trip",
        efficient_samples(bound),
        lambda value: to_efficient(from_efficient(value), settings=settings) == value,
    )


def _exact_preservation(name, bound, constructed_operation, efficient_operation, settings) -> VerificationReport:
    return check_preservation(
        name,
        sample_pairs(samples(bound)),
        constructed_operation,
        efficient_operation,
        lambda value: to_efficient(value, settings=settings),
    )


def check_addition_preservation(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> VerificationReport:
    return _exact_preservation(
        "real addition", bound, ConstructedReal.add, real_arithmetic(settings).add, settings
    )


def check_subtraction_preservation(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> VerificationReport:
    return _exact_preservation(
        "real subtraction", bound, ConstructedReal.subtract, real_arithmetic(settings).subtract, settings
    )


def check_multiplication_preservation(
    bound: int, settings: TowerSettings = DEFAULT_SETTINGS
) -> VerificationReport:
    return _exact_preservation(
        "real multiplication", bound, ConstructedReal.multiply, real_arithmetic(settings).multiply, settings
    )


def check_division_preservation(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> VerificationReport:
    """Частные сравниваются с допуском 10^-real_digits; нулевые делители пропускаются."""
    pairs = [(a, b) for a, b in sample_pairs(samples(bound)) if to_efficient(b, settings=settings) != 0]
    return check_preservation(
        "real division",
        pairs,
        lambda a, b: a.divide(b, settings),
        real_arithmetic(settings).divide,
        lambda value: to_efficient(value, settings=settings),
        agree=lambda x, y: within(x, y, settings.real_digits, settings),
    )


def check_order_preservation(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> VerificationReport:
    """compare с допуском comparison_tolerance согласован с порядком Decimal."""

    def holds(pair) -> bool:
        a, b = pair
        expected = real_arithmetic(settings).compare(
            to_efficient(a, settings=settings), to_efficient(b, settings=settings)
        )
        return a.compare(b, settings.comparison_tolerance) == expected

    return run_oracle("real order", sample_pairs(samples(bound)), holds)


def check_rational_embedding(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> VerificationReport:
    """Вложение n/d ↦ постоянная последовательность проецируется в Decimal(n/d)."""
    validate_natural(bound, "bound")

    def holds(case) -> bool:
        n, d = case
        embedded = ConstructedReal.from_rational(ConstructedRational.of(n, d))
        expected = real_of(Fraction(n, d), settings)
        return within(to_efficient(embedded, settings=settings), expected, settings.real_digits, settings)

    cases = [(n, d) for n in range(-bound, bound + 1) for d in range(1, bound + 1)]
    return run_oracle("rational → real embedding", cases, holds)


def check_square_roots(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> VerificationReport:
    """√k бисекцией согласован с Context.sqrt для k в 0..bound."""
    validate_natural(bound, "bound")
    context = decimal_context(settings)

    def holds(k: int) -> bool:
        root = ConstructedReal.square_root_of(k, settings.sqrt_iterations)
        projected = to_efficient(root, ROOT_CHECK_DIGITS, settings)
        return within(projected, context.sqrt(k), ROOT_CHECK_DIGITS, settings)

    return run_oracle("real square roots", range(bound + 1), holds)


def check_irrational_constants(settings: TowerSettings = DEFAULT_SETTINGS) -> VerificationReport:
    """√2, √3, φ, π, e согласованы с эффективными Decimal-вычислениями."""
    context = decimal_context(settings)
    references = [
        (SQRT2, context.sqrt(2)),
        (SQRT3, context.sqrt(3)),
        (GOLDEN_RATIO, context.divide(context.add(1, context.sqrt(5)), 2)),
        (PI, real_pi(settings)),
        (E, context.exp(1)),
    ]

    def holds(case) -> bool:
        constant, reference = case
        return within(constant.to_efficient(ROOT_CHECK_DIGITS), reference, ROOT_CHECK_DIGITS, settings)

    return run_oracle("irrational constants", references, holds)


def check_cauchy_property(bound: int, prefix: int, settings: TowerSettings = DEFAULT_SETTINGS) -> VerificationReport:
    """
    is_cauchy_on_finite_prefix для корней √k и сумм/произведений с выборкой.
    """
    validate_natural(bound, "bound")
    roots = [ConstructedReal.square_root_of(k, settings.sqrt_iterations) for k in range(bound + 1)]
    composites = [root + sample for root, sample in zip(roots, samples(bound))]
    composites += [root * sample for root, sample in zip(roots, samples(bound))]
    return run_oracle(
        "real cauchy property",
        roots + composites,
        lambda value: value.is_cauchy_on_finite_prefix(prefix),
    )



def check_dedekind_round_trip(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> VerificationReport:
    """Decimal → Cauchy → Dedekind → Cauchy → Decimal возвращает исходную выборку."""

    def holds(value: Decimal) -> bool:
        cauchy = from_efficient(value)
        restored = DedekindReal.from_cauchy(cauchy).to_real()
        return restored is cauchy and to_efficient(restored, settings=settings) == value

    return run_oracle("cauchy → dedekind round trip", efficient_samples(bound), holds)


def check_dedekind_cut_order(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> VerificationReport:
    """q ∈ L(a) ⟺ q < a для всех пар выборки."""

    def holds(pair) -> bool:
        a, q = pair
        expected = real_arithmetic(settings).compare(q, a) < 0
        return DedekindReal.from_efficient(a).contains(Fraction(q)) == expected

    return run_oracle("dedekind cut order", sample_pairs(efficient_samples(bound)), holds)

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


def verify_order_preservation(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> bool:
    return verdict(check_order_preservation, bound, settings)


def verify_rational_embedding(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> bool:
    return verdict(check_rational_embedding, bound, settings)


def verify_square_roots(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> bool:
    return verdict(check_square_roots, bound, settings)


def verify_irrational_constants(settings: TowerSettings = DEFAULT_SETTINGS) -> bool:
    return verdict(check_irrational_constants, settings)


def verify_cauchy_property(bound: int, prefix: int, settings: TowerSettings = DEFAULT_SETTINGS) -> bool:
    return verdict(check_cauchy_property, bound, prefix, settings)


def verify_dedekind_round_trip(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> bool:
    return verdict(check_dedekind_round_trip, bound, settings)


def verify_dedekind_cut_order(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> bool:
    return verdict(check_dedekind_cut_order, bound, settings)
