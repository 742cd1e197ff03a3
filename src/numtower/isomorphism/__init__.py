"""
Isomorphism: мосты между построенными и эффективными числами.

Один модуль свободных функций на уровень (состояния нет):
- naturals:   VonNeumannNatural ↔ int
- integers:   ConstructedInteger ↔ int
- rationals:  ConstructedRational ↔ Fraction
- reals:      ConstructedReal ↔ Decimal
- complexes:  ConstructedComplex ↔ ComplexNumber, ConstructedImaginary ↔ ImaginaryNumber
- embeddings: цепочка вложений ℕ ↪ ℤ ↪ ℚ ↪ ℝ ↪ ℂ

verify_* возвращают bool и не бросают исключений (ни при провале, ни при
некорректной границе);
check_* возвращают VerificationReport с первым контрпримером.
"""

from numtower.isomorphism import complexes, embeddings, integers, naturals, rationals, reals
from numtower.isomorphism.oracle import VerificationReport, run_oracle, verdict

__all__ = [
    "VerificationReport",
    "run_oracle",
    "verdict",
    "naturals",
    "integers",
    "rationals",
    "reals",
    "complexes",
    "embeddings",
]
