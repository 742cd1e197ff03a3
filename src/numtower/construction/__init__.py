"""
Construction: аксиоматическая числовая башня ℕ → ℤ → ℚ → ℝ → ℂ.

Каждый уровень определён через уровень ниже:
- natural:    натуральные фон Неймана + схема Пеано
- integer:    классы пар натуральных
- rational:   классы пар целых
- real:       ленивые Cauchy-последовательности рациональных
- dedekind:   вычислимые сечения Дедекинда поверх Cauchy-свидетеля
- complex:    пары реальных, чисто мнимые, корни из единицы
- irrational: именованные иррациональные константы
"""

from numtower.construction.complex import (
    ConstructedComplex,
    ConstructedImaginary,
    all_roots,
    verify_equation,
    zeta,
)
from numtower.construction.dedekind import DedekindCut, DedekindReal
from numtower.construction.integer import ConstructedInteger
from numtower.construction.irrational import (
    E,
    GOLDEN_RATIO,
    KNOWN_CONSTANTS,
    PI,
    SQRT2,
    SQRT3,
    ConstructedIrrational,
    IrrationalFoundation,
)
from numtower.construction.natural import (
    VON_NEUMANN_PEANO_SYSTEM,
    Successor,
    VonNeumannNatural,
    VonNeumannPeanoSystem,
    Zero,
)
from numtower.construction.rational import ConstructedRational
from numtower.construction.real import ConstructedReal

__all__ = [
    # Natural
    "VonNeumannNatural",
    "Zero",
    "Successor",
    "VonNeumannPeanoSystem",
    "VON_NEUMANN_PEANO_SYSTEM",
    # Quotients
    "ConstructedInteger",
    "ConstructedRational",
    # Real
    "ConstructedReal",
    "DedekindCut",
    "DedekindReal",
    # Complex
    "ConstructedComplex",
    "ConstructedImaginary",
    "zeta",
    "all_roots",
    "verify_equation",
    # Irrational
    "ConstructedIrrational",
    "IrrationalFoundation",
    "SQRT2",
    "SQRT3",
    "GOLDEN_RATIO",
    "PI",
    "E",
    "KNOWN_CONSTANTS",
]
