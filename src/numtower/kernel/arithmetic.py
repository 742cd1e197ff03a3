"""
Efficient Arithmetic — эффективные числовые примитивы и их capability-наборы

Эффективные представления (внешний коллаборатор конструктивного уровня):
- натуральные: int >= 0
- целые: int
- рациональные: fractions.Fraction
- реальные: decimal.Decimal (конечные десятичные дроби произвольной точности)
- комплексные: ComplexNumber (см. complex_numbers.py)

Каждая система описывается capability-набором: zero, one, add, subtract,
multiply, divide и (только для упорядоченных систем) compare.
Конструктивный уровень никогда не переизобретает эту арифметику, а
изоморфизмы сравнивают с ней результаты конструкций.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Натуральное вычитание/деление не выходит за пределы ℕ (иначе ошибка)
2. Деление на ноль → DomainArithmeticError во всех системах
3. Decimal операции выполняются в явном контексте (decimal_context)
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Callable, Generic, TypeVar, Union

from numtower.core.config import DEFAULT_SETTINGS, TowerSettings, decimal_context
from numtower.core.errors import ConstructionPreconditionError, DomainArithmeticError

N = TypeVar("N")

RealSource = Union[int, str, Decimal, Fraction]


# =============================================================================
# CAPABILITY SETS
# =============================================================================


@dataclass(frozen=True)
class AlgebraicArithmetic(Generic[N]):
    """
    Алгебраические операции числовой системы (без порядка).

    Используется комплексными числами, у которых нет канонического
    полного порядка.
    """

    name: str
    zero: N
    one: N
    add: Callable[[N, N], N]
    subtract: Callable[[N, N], N]
    multiply: Callable[[N, N], N]
    divide: Callable[[N, N], N]


@dataclass(frozen=True)
class OrderedArithmetic(AlgebraicArithmetic[N]):
    """Алгебраические операции + compare (-1/0/+1) для упорядоченных систем."""

    compare: Callable[[N, N], int]


def compare_values(a, b) -> int:
    """
    Трёхзначное сравнение для встроенных упорядоченных типов.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    return (a > b) - (a < b)


# =============================================================================
# НАТУРАЛЬНЫЕ (int >= 0)
# =============================================================================


def validate_natural(value: int, name: str = "value") -> int:
    """
    Проверка, что значение является эффективным натуральным числом.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        ConstructionPreconditionError: Если value не int или отрицательное
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConstructionPreconditionError(
            f"{name} must be a natural number (int >= 0), got {type(value).__name__}"
        )
    if value < 0:
        raise ConstructionPreconditionError(f"{name} must be non-negative, got {value}")
    return value


def natural_subtract(a: int, b: int) -> int:
    """
    Вычитание в ℕ: определено только при a >= b.

    Raises:
        ConstructionPreconditionError: Если b > a (результат вне ℕ)
    """
    if b > a:
        raise ConstructionPreconditionError(
            f"Natural subtraction underflow: {a} - {b} is not a natural number"
        )
    return a - b


def exact_divide(a: int, b: int) -> int:
    """
    Точное целочисленное деление (для ℕ и ℤ).

    Raises:
        DomainArithmeticError: Если b == 0
        ConstructionPreconditionError: Если a не делится на b нацело
    """
    if b == 0:
        raise DomainArithmeticError(f"Division by zero: {a} / 0")
    quotient, remainder = divmod(a, b)
    if remainder != 0:
        raise ConstructionPreconditionError(f"{a} is not divisible by {b}")
    return quotient


def _natural_divide(a: int, b: int) -> int:
    return exact_divide(validate_natural(a, "dividend"), validate_natural(b, "divisor"))


NATURAL_ARITHMETIC: OrderedArithmetic[int] = OrderedArithmetic(
    name="natural",
    zero=0,
    one=1,
    add=lambda a, b: a + b,
    subtract=natural_subtract,
    multiply=lambda a, b: a * b,
    divide=_natural_divide,
    compare=compare_values,
)

INTEGER_ARITHMETIC: OrderedArithmetic[int] = OrderedArithmetic(
    name="integer",
    zero=0,
    one=1,
    add=lambda a, b: a + b,
    subtract=lambda a, b: a - b,
    multiply=lambda a, b: a * b,
    divide=exact_divide,
    compare=compare_values,
)


# =============================================================================
# РАЦИОНАЛЬНЫЕ (Fraction)
# =============================================================================


def rational_divide(a: Fraction, b: Fraction) -> Fraction:
    """
    Деление рациональных чисел.

    Raises:
        DomainArithmeticError: Если b == 0
    """
    if b == 0:
        raise DomainArithmeticError(f"Division by zero rational: {a} / 0")
    return Fraction(a) / Fraction(b)


RATIONAL_ARITHMETIC: OrderedArithmetic[Fraction] = OrderedArithmetic(
    name="rational",
    zero=Fraction(0),
    one=Fraction(1),
    add=lambda a, b: a + b,
    subtract=lambda a, b: a - b,
    multiply=lambda a, b: a * b,
    divide=rational_divide,
    compare=compare_values,
)


# =============================================================================
# РЕАЛЬНЫЕ (Decimal)
# =============================================================================


def real_of(value: RealSource, settings: TowerSettings = DEFAULT_SETTINGS) -> Decimal:
    """
    Построение эффективного реального числа.

    int / str / Decimal конвертируются точно; Fraction делится в контексте
    settings.decimal_precision (точно для конечных десятичных дробей).

    Args:
        value: Исходное значение (машинное целое, десятичная строка, Fraction)
        settings: Настройки точности

    Returns:
        Decimal

    Raises:
        ConstructionPreconditionError: Если строка не является десятичным числом
            или значение не конечно

    Examples:
        >>> real_of("3.25")
        Decimal('3.25')
        >>> real_of(Fraction(7, 2))
        Decimal('3.5')
    """
    if isinstance(value, Fraction):
        context = decimal_context(settings)
        result = context.divide(Decimal(value.numerator), Decimal(value.denominator))
    elif isinstance(value, (int, Decimal)) and not isinstance(value, bool):
        result = Decimal(value)
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as e:
            raise ConstructionPreconditionError(f"Not a decimal literal: {value!r}") from e
    else:
        raise ConstructionPreconditionError(
            f"Cannot build a real number from {type(value).__name__}"
        )

    if not result.is_finite():
        raise ConstructionPreconditionError(f"Real number must be finite, got {result}")
    return result


def real_add(a: Decimal, b: Decimal, settings: TowerSettings = DEFAULT_SETTINGS) -> Decimal:
    return decimal_context(settings).add(a, b)


def real_subtract(a: Decimal, b: Decimal, settings: TowerSettings = DEFAULT_SETTINGS) -> Decimal:
    return decimal_context(settings).subtract(a, b)


def real_multiply(a: Decimal, b: Decimal, settings: TowerSettings = DEFAULT_SETTINGS) -> Decimal:
    return decimal_context(settings).multiply(a, b)


def real_divide(a: Decimal, b: Decimal, settings: TowerSettings = DEFAULT_SETTINGS) -> Decimal:
    """
    Деление Decimal с точностью settings.decimal_precision.

    Raises:
        DomainArithmeticError: Если b == 0
    """
    if b == 0:
        raise DomainArithmeticError(f"Division by zero real: {a} / 0")
    return decimal_context(settings).divide(a, b)


def real_to_text(value: Decimal) -> str:
    """Текстовое представление в позиционной записи (без экспоненты и хвостовых нулей)."""
    return format(decimal_context().normalize(value), "f")


def real_pi(settings: TowerSettings = DEFAULT_SETTINGS) -> Decimal:
    """
    π с точностью settings.decimal_precision значащих цифр.

    Ряд Эйлера для арктангенса через последовательные члены (рецепт из
    документации модуля decimal), вычисленный с двумя запасными цифрами.
    """
    context = decimal_context(settings)
    context.prec += 2
    three = Decimal(3)
    last_sum, total = Decimal(0), three
    n, na, d, da, term = 1, 0, 0, 24, three
    while total != last_sum:
        last_sum = total
        n, na = n + na, na + 8
        d, da = d + da, da + 32
        term = context.divide(context.multiply(term, n), d)
        total = context.add(total, term)
    context.prec -= 2
    return context.plus(total)


def real_arithmetic(settings: TowerSettings = DEFAULT_SETTINGS) -> OrderedArithmetic[Decimal]:
    """
    Capability-набор Decimal с точностью settings.decimal_precision.

    Изоморфизмы строят набор под свои настройки, чтобы эффективная сторона
    округлялась так же, как проецируется конструктивная.
    """
    return OrderedArithmetic(
        name="real",
        zero=Decimal(0),
        one=Decimal(1),
        add=lambda a, b: real_add(a, b, settings),
        subtract=lambda a, b: real_subtract(a, b, settings),
        multiply=lambda a, b: real_multiply(a, b, settings),
        divide=lambda a, b: real_divide(a, b, settings),
        compare=compare_values,
    )


REAL_ARITHMETIC: OrderedArithmetic[Decimal] = real_arithmetic(DEFAULT_SETTINGS)
