"""
Тесты для Config и Errors

Проверяет:
1. Значения TowerSettings по умолчанию и валидацию Field-ограничений
2. Неизменяемость настроек
3. decimal_context
4. Иерархию ошибок (совместимость с ValueError / ZeroDivisionError)
"""

from decimal import ROUND_HALF_EVEN, Decimal

import pytest
from pydantic import ValidationError

from numtower.core.config import (
    COMPARISON_TOLERANCE_DEFAULT,
    DECIMAL_PRECISION_DEFAULT,
    DEFAULT_SETTINGS,
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

# =============================================================================
# ТЕСТЫ: TowerSettings
# =============================================================================


class TestTowerSettings:
    """Значения по умолчанию и валидация."""

    def test_defaults(self) -> None:
        """DEFAULT_SETTINGS собран из констант модуля."""
        assert DEFAULT_SETTINGS.decimal_precision == DECIMAL_PRECISION_DEFAULT
        assert DEFAULT_SETTINGS.real_digits == REAL_DIGITS_DEFAULT
        assert DEFAULT_SETTINGS.comparison_tolerance == COMPARISON_TOLERANCE_DEFAULT
        assert DEFAULT_SETTINGS.sqrt_iterations == SQRT_ITERATIONS_DEFAULT

    def test_custom_values(self) -> None:
        settings = TowerSettings(real_digits=12, sqrt_iterations=40, comparison_tolerance=Decimal("1e-10"))
        assert settings.real_digits == 12
        assert settings.sqrt_iterations == 40
        assert settings.comparison_tolerance == Decimal("1e-10")

    def test_frozen(self) -> None:
        """Настройки неизменяемы."""
        with pytest.raises(ValidationError):
            DEFAULT_SETTINGS.real_digits = 5

    def test_precision_lower_bound(self) -> None:
        with pytest.raises(ValidationError):
            TowerSettings(decimal_precision=5)

    def test_tolerance_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            TowerSettings(comparison_tolerance=Decimal(0))
        with pytest.raises(ValidationError):
            TowerSettings(nonzero_tolerance=Decimal("-1e-5"))

    def test_iterations_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            TowerSettings(sqrt_iterations=0)


class TestDecimalContext:
    """decimal_context строит новый контекст из настроек."""

    def test_default_precision(self) -> None:
        context = decimal_context()
        assert context.prec == DECIMAL_PRECISION_DEFAULT
        assert context.rounding == ROUND_HALF_EVEN

    def test_custom_precision(self) -> None:
        context = decimal_context(TowerSettings(decimal_precision=20))
        assert context.prec == 20
        assert context.divide(Decimal(1), Decimal(3)) == Decimal("0.33333333333333333333")

    def test_new_context_each_call(self) -> None:
        """Изменение одного контекста не влияет на следующий."""
        first = decimal_context()
        first.prec = 12
        assert decimal_context().prec == DECIMAL_PRECISION_DEFAULT


# =============================================================================
# ТЕСТЫ: Errors
# =============================================================================


class TestErrorTaxonomy:
    """Иерархия ошибок."""

    def test_construction_error_is_value_error(self) -> None:
        assert issubclass(ConstructionPreconditionError, NumberTowerError)
        assert issubclass(ConstructionPreconditionError, ValueError)

    def test_domain_error_is_zero_division(self) -> None:
        assert issubclass(DomainArithmeticError, NumberTowerError)
        assert issubclass(DomainArithmeticError, ZeroDivisionError)

    def test_catchable_as_builtin(self) -> None:
        with pytest.raises(ZeroDivisionError):
            raise DomainArithmeticError("Division by zero")
        with pytest.raises(ValueError):
            raise ConstructionPreconditionError("bad pair")
