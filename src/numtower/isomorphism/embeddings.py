"""
Embedding Chain — ℕ ↪ ℤ ↪ ℚ ↪ ℝ ↪ ℂ

Явные вложения каждого уровня в следующий:

    ℕ → ℤ:  n ↦ (n, 0)
    ℤ → ℚ:  z ↦ z / 1
    ℚ → ℝ:  q ↦ постоянная последовательность (q, q, ...), модуль 0
    ℝ → ℂ:  r ↦ (r, 0)
    iℝ → ℂ: b·i ↦ (0, b)

Каждый шаг описан EmbeddingStep и проверяется на ограниченной выборке:
инъективность (a = b ⟺ f(a) = f(b)), сохранение сложения и умножения.
Для мнимых чисел произведение уходит в ℝ, поэтому f(a·b) строится через
embed_product (ℝ ↪ ℂ), а не через embed.

Прямые составные вложения (natural_to_rational, integer_to_real, ...)
строятся в обход цепочки, через эффективное значение; verify_chain_commutes
сверяет их с композицией шагов.

Равенство на ℝ и ℂ приближённое: используется settings.comparison_tolerance.
"""

from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, Tuple, TypeVar

from numtower.construction.complex import ConstructedComplex, ConstructedImaginary
from numtower.construction.integer import ConstructedInteger
from numtower.construction.natural import VonNeumannNatural
from numtower.construction.rational import ConstructedRational
from numtower.construction.real import ConstructedReal
from numtower.core.config import DEFAULT_SETTINGS, TowerSettings
from numtower.isomorphism import complexes, integers, naturals, rationals, reals
from numtower.isomorphism.oracle import VerificationReport, run_oracle, sample_pairs, verdict
from numtower.kernel.arithmetic import validate_natural

S = TypeVar("S")
T = TypeVar("T")

# =============================================================================
# ШАГИ ЦЕПОЧКИ
# =============================================================================


def natural_to_integer(n: VonNeumannNatural) -> ConstructedInteger:
    return ConstructedInteger.from_natural(n)


def integer_to_rational(z: ConstructedInteger) -> ConstructedRational:
    return ConstructedRational.from_integer(z)


def rational_to_real(q: ConstructedRational) -> ConstructedReal:
    return ConstructedReal.from_rational(q)


def real_to_complex(r: ConstructedReal) -> ConstructedComplex:
    return ConstructedComplex.from_real(r)


def imaginary_to_complex(b: ConstructedImaginary) -> ConstructedComplex:
    return b.to_complex()


# =============================================================================
# ПРЯМЫЕ СОСТАВНЫЕ ВЛОЖЕНИЯ
# =============================================================================


def natural_to_rational(n: VonNeumannNatural) -> ConstructedRational:
    return ConstructedRational.of(n.to_efficient(), 1)


def natural_to_real(n: VonNeumannNatural) -> ConstructedReal:
    return ConstructedReal.from_integer(n.to_efficient())


def natural_to_complex(n: VonNeumannNatural) -> ConstructedComplex:
    return ConstructedComplex.of(natural_to_real(n))


def integer_to_real(z: ConstructedInteger) -> ConstructedReal:
    return ConstructedReal.from_integer(z)


def integer_to_complex(z: ConstructedInteger) -> ConstructedComplex:
    return ConstructedComplex.of(integer_to_real(z))


def rational_to_complex(q: ConstructedRational) -> ConstructedComplex:
    return ConstructedComplex.of(ConstructedReal.from_rational(q))


# =============================================================================
# EMBEDDING STEP
# =============================================================================


def _exactly_equal(a, b, settings: TowerSettings) -> bool:
    return a == b


def _approximately_equal(a, b, settings: TowerSettings) -> bool:
    return a.equals(b, settings.comparison_tolerance)


@dataclass(frozen=True)
class EmbeddingStep(Generic[S, T]):
    """
    Один шаг цепочки вложений с операциями источника и цели.

    Attributes:
        name: Имя шага (для отчётов)
        samples: Выборка источника по bound
        embed: Вложение S → T
        source_equal / target_equal: Равенство (settings нужны для допуска)
        source_add / target_add: Сложение
        source_multiply / target_multiply: Умножение
        embed_product: Вложение результата source_multiply (по умолчанию embed)
    """

    name: str
    samples: Callable[[int], List[S]]
    embed: Callable[[S], T]
    source_equal: Callable[[S, S, TowerSettings], bool]
    target_equal: Callable[[T, T, TowerSettings], bool]
    source_add: Callable[[S, S], S]
    target_add: Callable[[T, T], T]
    source_multiply: Callable
    target_multiply: Callable[[T, T], T]
    embed_product: Optional[Callable] = None

    def embed_multiplied(self, a: S, b: S) -> T:
        embed = self.embed_product or self.embed
        return embed(self.source_multiply(a, b))

    def pairs(self, bound: int) -> List[Tuple[S, S]]:
        validate_natural(bound, "bound")
        return sample_pairs(self.samples(bound))


NATURAL_TO_INTEGER: EmbeddingStep = EmbeddingStep(
    name="ℕ ↪ ℤ",
    samples=naturals.samples,
    embed=natural_to_integer,
    source_equal=_exactly_equal,
    target_equal=_exactly_equal,
    source_add=VonNeumannNatural.__add__,
    target_add=ConstructedInteger.add,
    source_multiply=VonNeumannNatural.__mul__,
    target_multiply=ConstructedInteger.multiply,
)

INTEGER_TO_RATIONAL: EmbeddingStep = EmbeddingStep(
    name="ℤ ↪ ℚ",
    samples=integers.samples,
    embed=integer_to_rational,
    source_equal=_exactly_equal,
    target_equal=_exactly_equal,
    source_add=ConstructedInteger.add,
    target_add=ConstructedRational.add,
    source_multiply=ConstructedInteger.multiply,
    target_multiply=ConstructedRational.multiply,
)

RATIONAL_TO_REAL: EmbeddingStep = EmbeddingStep(
    name="ℚ ↪ ℝ",
    samples=rationals.samples,
    embed=rational_to_real,
    source_equal=_exactly_equal,
    target_equal=_approximately_equal,
    source_add=ConstructedRational.add,
    target_add=ConstructedReal.add,
    source_multiply=ConstructedRational.multiply,
    target_multiply=ConstructedReal.multiply,
)

REAL_TO_COMPLEX: EmbeddingStep = EmbeddingStep(
    name="ℝ ↪ ℂ",
    samples=reals.samples,
    embed=real_to_complex,
    source_equal=_approximately_equal,
    target_equal=_approximately_equal,
    source_add=ConstructedReal.add,
    target_add=ConstructedComplex.add,
    source_multiply=ConstructedReal.multiply,
    target_multiply=ConstructedComplex.multiply,
)

# (b·i)(d·i) лежит в ℝ: образ произведения вкладывается через ℝ ↪ ℂ
IMAGINARY_TO_COMPLEX: EmbeddingStep = EmbeddingStep(
    name="iℝ ↪ ℂ",
    samples=complexes.imaginary_samples,
    embed=imaginary_to_complex,
    source_equal=_approximately_equal,
    target_equal=_approximately_equal,
    source_add=ConstructedImaginary.add,
    target_add=ConstructedComplex.add,
    source_multiply=ConstructedImaginary.times_imaginary,
    target_multiply=ConstructedComplex.multiply,
    embed_product=real_to_complex,
)

CHAIN: Tuple[EmbeddingStep, ...] = (
    NATURAL_TO_INTEGER,
    INTEGER_TO_RATIONAL,
    RATIONAL_TO_REAL,
    REAL_TO_COMPLEX,
)

ALL_STEPS: Tuple[EmbeddingStep, ...] = CHAIN + (IMAGINARY_TO_COMPLEX,)


# =============================================================================
# CHECKS
# =============================================================================


def check_injective(
    step: EmbeddingStep, bound: int, settings: TowerSettings = DEFAULT_SETTINGS
) -> VerificationReport:
    """a = b ⟺ f(a) = f(b) на всех парах выборки."""

    def holds(pair) -> bool:
        a, b = pair
        same_source = step.source_equal(a, b, settings)
        same_target = step.target_equal(step.embed(a), step.embed(b), settings)
        return same_source == same_target

    return run_oracle(f"{step.name} injective", step.pairs(bound), holds)


def check_preserves_addition(
    step: EmbeddingStep, bound: int, settings: TowerSettings = DEFAULT_SETTINGS
) -> VerificationReport:
    """f(a + b) = f(a) + f(b)."""

    def holds(pair) -> bool:
        a, b = pair
        return step.target_equal(
            step.embed(step.source_add(a, b)),
            step.target_add(step.embed(a), step.embed(b)),
            settings,
        )

    return run_oracle(f"{step.name} addition", step.pairs(bound), holds)


def check_preserves_multiplication(
    step: EmbeddingStep, bound: int, settings: TowerSettings = DEFAULT_SETTINGS
) -> VerificationReport:
    """f(a · b) = f(a) · f(b)."""

    def holds(pair) -> bool:
        a, b = pair
        return step.target_equal(
            step.embed_multiplied(a, b),
            step.target_multiply(step.embed(a), step.embed(b)),
            settings,
        )

    return run_oracle(f"{step.name} multiplication", step.pairs(bound), holds)


def check_chain_commutes(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> VerificationReport:
    """
    Композиция шагов совпадает с прямыми вложениями.

    Для n в 0..bound: ℕ→ℤ→ℚ, ℕ→ℤ→ℚ→ℝ и ℕ→ℤ→ℚ→ℝ→ℂ против natural_to_*;
    для z в −bound..bound: ℤ→ℚ→ℝ(→ℂ) против integer_to_*;
    для q из выборки ℚ: ℚ→ℝ→ℂ против rational_to_complex.
    """
    tolerance = settings.comparison_tolerance

    def natural_commutes(n: VonNeumannNatural) -> bool:
        rational = integer_to_rational(natural_to_integer(n))
        real = rational_to_real(rational)
        return (
            rational == natural_to_rational(n)
            and real.equals(natural_to_real(n), tolerance)
            and real_to_complex(real).equals(natural_to_complex(n), tolerance)
        )

    def integer_commutes(z: ConstructedInteger) -> bool:
        real = rational_to_real(integer_to_rational(z))
        return real.equals(integer_to_real(z), tolerance) and real_to_complex(real).equals(
            integer_to_complex(z), tolerance
        )

    def rational_commutes(q: ConstructedRational) -> bool:
        return real_to_complex(rational_to_real(q)).equals(rational_to_complex(q), tolerance)

    cases: List[Tuple[Callable[[object], bool], object]] = []
    cases += [(natural_commutes, n) for n in naturals.samples(bound)]
    cases += [(integer_commutes, z) for z in integers.samples(bound)]
    cases += [(rational_commutes, q) for q in rationals.samples(bound)]
    return run_oracle("embedding chain commutes", cases, lambda case: case[0](case[1]))


# =============================================================================
# BOOLEAN ORACLES
# =============================================================================


def verify_injective(step: EmbeddingStep, bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> bool:
    return verdict(check_injective, step, bound, settings)


def verify_preserves_addition(step: EmbeddingStep, bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> bool:
    return verdict(check_preserves_addition, step, bound, settings)


def verify_preserves_multiplication(
    step: EmbeddingStep, bound: int, settings: TowerSettings = DEFAULT_SETTINGS
) -> bool:
    return verdict(check_preserves_multiplication, step, bound, settings)


def verify_chain_commutes(bound: int, settings: TowerSettings = DEFAULT_SETTINGS) -> bool:
    return verdict(check_chain_commutes, bound, settings)
