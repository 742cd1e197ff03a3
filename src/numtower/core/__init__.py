"""
Core: конфигурация точности и таксономия ошибок.

Не зависит ни от одного уровня числовой башни.
"""

from numtower.core.config import (
    CAUCHY_PREFIX_DEFAULT,
    COMPARISON_TOLERANCE_DEFAULT,
    DECIMAL_PRECISION_DEFAULT,
    DEFAULT_SETTINGS,
    NONZERO_TOLERANCE_DEFAULT,
    REAL_DIGITS_DEFAULT,
    SQRT_ITERATIONS_DEFAULT,
    TowerSettings,
    decimal_context,
)
from numtower.core.errors import (
    ConstructionPreconditionError,
    DomainArithmeticError,
    NumberTowerError,
)

__all__ = [
    # Config: Constants
    "CAUCHY_PREFIX_DEFAULT",
    "COMPARISON_TOLERANCE_DEFAULT",
    "DECIMAL_PRECISION_DEFAULT",
    "NONZERO_TOLERANCE_DEFAULT",
    "REAL_DIGITS_DEFAULT",
    "SQRT_ITERATIONS_DEFAULT",
    # Config: Types
    "DEFAULT_SETTINGS",
    "TowerSettings",
    "decimal_context",
    # Errors
    "ConstructionPreconditionError",
    "DomainArithmeticError",
    "NumberTowerError",
]
