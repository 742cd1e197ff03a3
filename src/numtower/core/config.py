"""
Config — параметры точности и бюджетов числовой башни

Все проверки (verify_*) принимают свои границы явными аргументами; здесь
собраны только значения по умолчанию и контекст Decimal для efficient-уровня.

Параметры:
- decimal_precision: значащие цифры decimal.Context для эффективных Decimal
- real_digits: десятичные знаки при проекции ConstructedReal → Decimal
- comparison_tolerance: допуск сравнения реальных чисел по умолчанию
- nonzero_tolerance: нижняя граница поиска при проверке делителя на ноль
- sqrt_iterations: бюджет бисекции для корней по умолчанию
- cauchy_prefix: окно диагностики is_cauchy_on_finite_prefix по умолчанию
"""

from decimal import ROUND_HALF_EVEN, Context, Decimal
from typing import Final

from pydantic import BaseModel, Field

# =============================================================================
# ЗНАЧЕНИЯ ПО УМОЛЧАНИЮ
# =============================================================================

# Значащие цифры для efficient Decimal арифметики (деление, комплексное деление)
DECIMAL_PRECISION_DEFAULT: Final[int] = 60

# Десятичные знаки при to_efficient() для ConstructedReal
REAL_DIGITS_DEFAULT: Final[int] = 30

# Допуск сравнения ConstructedReal (compare/equals), если вызывающий
# код использует значения из настроек
COMPARISON_TOLERANCE_DEFAULT: Final[Decimal] = Decimal("1e-20")

# Делитель, неотличимый от нуля на этом уровне, считается нулём
NONZERO_TOLERANCE_DEFAULT: Final[Decimal] = Decimal("1e-30")

# Количество шагов бисекции для square_root_of / nth_root_of
SQRT_ITERATIONS_DEFAULT: Final[int] = 64

# Окно для is_cauchy_on_finite_prefix
CAUCHY_PREFIX_DEFAULT: Final[int] = 8


# =============================================================================
# SETTINGS MODEL
# =============================================================================


class TowerSettings(BaseModel):
    """
    Настройки точности (immutable).

    Один экземпляр DEFAULT_SETTINGS разделяется всем процессом; для других
    значений создаётся новый экземпляр и передаётся явно.
    """

    decimal_precision: int = Field(
        DECIMAL_PRECISION_DEFAULT, ge=10, le=100_000, description="Значащие цифры Decimal"
    )
    real_digits: int = Field(
        REAL_DIGITS_DEFAULT, ge=1, le=10_000, description="Знаки после запятой при проекции real → Decimal"
    )
    comparison_tolerance: Decimal = Field(
        COMPARISON_TOLERANCE_DEFAULT, gt=0, description="Допуск сравнения реальных чисел"
    )
    nonzero_tolerance: Decimal = Field(
        NONZERO_TOLERANCE_DEFAULT, gt=0, description="Граница поиска ненулевого делителя"
    )
    sqrt_iterations: int = Field(
        SQRT_ITERATIONS_DEFAULT, ge=1, le=100_000, description="Шаги бисекции для корней"
    )
    cauchy_prefix: int = Field(
        CAUCHY_PREFIX_DEFAULT, ge=1, le=1_000, description="Окно проверки Cauchy-свойства"
    )

    model_config = {"frozen": True}


DEFAULT_SETTINGS: Final[TowerSettings] = TowerSettings()


def decimal_context(settings: TowerSettings = DEFAULT_SETTINGS) -> Context:
    """
    Контекст Decimal для efficient real/complex арифметики.

    Args:
        settings: Настройки точности

    Returns:
        Новый decimal.Context с prec = settings.decimal_precision
    """
    return Context(prec=settings.decimal_precision, rounding=ROUND_HALF_EVEN)
