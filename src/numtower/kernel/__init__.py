"""
Kernel: эффективные числовые примитивы и схема аксиом Пеано.

Внешние коллабораторы конструктивного уровня:
- capability-наборы эффективной арифметики (int, Fraction, Decimal, ComplexNumber)
- PeanoSystem (zero / succ / pred / is_zero / recursion)
"""

from numtower.kernel.arithmetic import (
    INTEGER_ARITHMETIC,
    NATURAL_ARITHMETIC,
    RATIONAL_ARITHMETIC,
    REAL_ARITHMETIC,
    AlgebraicArithmetic,
    OrderedArithmetic,
    RealSource,
    compare_values,
    exact_divide,
    natural_subtract,
    rational_divide,
    real_add,
    real_arithmetic,
    real_divide,
    real_multiply,
    real_of,
    real_pi,
    real_subtract,
    real_to_text,
    validate_natural,
)
from numtower.kernel.complex_numbers import (
    COMPLEX_ARITHMETIC,
    ComplexNumber,
    ImaginaryNumber,
    complex_arithmetic,
)
from numtower.kernel.peano import INT_PEANO_SYSTEM, IntPeanoSystem, PeanoSystem

__all__ = [
    # Capability sets
    "AlgebraicArithmetic",
    "OrderedArithmetic",
    "NATURAL_ARITHMETIC",
    "INTEGER_ARITHMETIC",
    "RATIONAL_ARITHMETIC",
    "REAL_ARITHMETIC",
    "COMPLEX_ARITHMETIC",
    "real_arithmetic",
    "complex_arithmetic",
    # Efficient helpers
    "RealSource",
    "compare_values",
    "exact_divide",
    "natural_subtract",
    "rational_divide",
    "real_add",
    "real_divide",
    "real_multiply",
    "real_of",
    "real_pi",
    "real_subtract",
    "real_to_text",
    "validate_natural",
    # Complex values
    "ComplexNumber",
    "ImaginaryNumber",
    # Peano
    "PeanoSystem",
    "IntPeanoSystem",
    "INT_PEANO_SYSTEM",
]
