"""
CauchyReal — реальные числа как Cauchy-последовательности рациональных

Представитель задаётся двумя функциями:
- term(n)    → ConstructedRational, n >= 0
- modulus(k) → N такое, что |term(n) − term(m)| ≤ 1/k для всех n, m >= N

ЛЕНИВАЯ КОМПОЗИЦИЯ ("build now, pay later"):
Арифметика не вычисляет ни одного члена: результат хранит тег операции,
операнды и замыкания term/modulus, комбинирующие члены операндов по запросу.
Построить длинную цепочку операций дёшево; первый запрос term(n) платит за
всю цепочку. Члены и модули мемоизируются в каждом представителе.

Модули сходимости:
- сумма:        max(a.mod(2k), b.mod(2k))
- произведение: A ≥ |a_n|, B ≥ |b_n| при n ≥ mod(1);
                max(a.mod(1), b.mod(1), a.mod(2kB), b.mod(2kA))
- обратное:     j с |a_{mod(j)}| > 2/j, N0 = a.mod(j);
                члены 1/a_{max(n, N0)}, модуль max(N0, a.mod(k·j²))

Равенство приближённое: compare/equals требуют явный допуск. Оператор ==
остаётся тождеством объектов, структурного равенства у реальных нет.

Корни строятся ограниченной бисекцией с явным числом итераций; автоматического
неограниченного уточнения нет.

is_cauchy_on_finite_prefix / approximate_rational — диагностика для проверок,
арифметика входные данные не перепроверяет.
"""

import logging
import math
import re
from decimal import Decimal
from fractions import Fraction
from functools import lru_cache
from typing import Callable, Optional, Tuple, Union

from numtower.construction.integer import ConstructedInteger
from numtower.construction.rational import ONE as RATIONAL_ONE
from numtower.construction.rational import ZERO as RATIONAL_ZERO
from numtower.construction.rational import ConstructedRational
from numtower.core.config import DEFAULT_SETTINGS, TowerSettings
from numtower.core.errors import ConstructionPreconditionError, DomainArithmeticError
from numtower.kernel.arithmetic import validate_natural

logger = logging.getLogger(__name__)

Term = Callable[[int], ConstructedRational]
Modulus = Callable[[int], int]
Tolerance = Union[Decimal, Fraction, int, str]
RationalLike = Union[ConstructedRational, Fraction, int]

_DECIMAL_EXPANSION = re.compile(r"^([+-]?)(?=\.?\d)(\d*)(?:\.(\d*))?$")


def _as_rational(value: RationalLike) -> ConstructedRational:
    if isinstance(value, ConstructedRational):
        return value
    return ConstructedRational.from_efficient(value)


def _tolerance(value: Tolerance) -> Fraction:
    """
    Допуск сравнения как точная дробь.

    Raises:
        ConstructionPreconditionError: Если допуск не положителен
    """
    tolerance = Fraction(value)
    if tolerance <= 0:
        raise ConstructionPreconditionError(f"tolerance must be positive, got {value}")
    return tolerance


def _ceiling_abs(value: ConstructedRational) -> int:
    return math.ceil(abs(value.to_efficient()))


class ConstructedReal:
    """
    Представитель Cauchy-последовательности рациональных.

    Immutable: term/modulus фиксируются при построении, кэши мемоизации
    невидимы снаружи.
    """

    __slots__ = ("_term", "_modulus", "operation", "operands")

    def __init__(
        self,
        term: Term,
        modulus: Modulus,
        operation: str = "sequence",
        operands: Tuple["ConstructedReal", ...] = (),
    ) -> None:
        self._term = lru_cache(maxsize=None)(term)
        self._modulus = lru_cache(maxsize=None)(modulus)
        self.operation = operation
        self.operands = operands

    # =========================================================================
    # ПОСЛЕДОВАТЕЛЬНОСТЬ
    # =========================================================================

    def term(self, n: int) -> ConstructedRational:
        """n-й рациональный член последовательности."""
        return self._term(validate_natural(n, "n"))

    def modulus(self, k: int) -> int:
        """
        Индекс N, после которого все члены попарно ближе 1/k.

        Raises:
            ConstructionPreconditionError: Если k < 1
        """
        validate_natural(k, "k")
        if k < 1:
            raise ConstructionPreconditionError(f"precision k must be >= 1, got {k}")
        return self._modulus(k)

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_rational(cls, value: RationalLike) -> "ConstructedReal":
        """Вложение ℚ ↪ ℝ: постоянная последовательность с модулем 0."""
        rational = _as_rational(value).normalized()
        return cls(lambda n: rational, lambda k: 0, operation=f"rational {rational}")

    @classmethod
    def from_integer(cls, value: Union[ConstructedInteger, int]) -> "ConstructedReal":
        if isinstance(value, ConstructedInteger):
            return cls.from_rational(ConstructedRational.from_integer(value))
        return cls.from_rational(value)

    @classmethod
    def from_efficient(cls, value: Decimal) -> "ConstructedReal":
        """
        Точное вложение конечной десятичной дроби.

        Raises:
            ConstructionPreconditionError: Если value не конечное Decimal
        """
        if not isinstance(value, Decimal) or not value.is_finite():
            raise ConstructionPreconditionError(f"Expected a finite Decimal, got {value!r}")
        return cls.from_rational(Fraction(value))

    @classmethod
    def from_decimal_expansion(cls, expansion: str) -> "ConstructedReal":
        """
        Реальное по десятичной записи: n-й член — усечение до n знаков.

        Args:
            expansion: Десятичная запись [+-]цифры[.цифры]; допускаются
                "3." и ".5", но хотя бы одна цифра обязательна

        Raises:
            ConstructionPreconditionError: Если запись некорректна
        """
        match = _DECIMAL_EXPANSION.match(expansion.strip())
        if match is None:
            raise ConstructionPreconditionError(f"Not a decimal expansion: {expansion!r}")
        sign_text, integer_digits, fraction_digits = match.groups()
        fraction_digits = fraction_digits or ""
        sign = -1 if sign_text == "-" else 1
        available = len(fraction_digits)

        def term(n: int) -> ConstructedRational:
            places = min(n, available)
            digits = int((integer_digits + fraction_digits[:places]) or "0")
            return ConstructedRational.of(sign * digits, 10**places)

        def modulus(k: int) -> int:
            # 10^-N ≤ 1/k
            places = 0 if k <= 1 else len(str(k - 1))
            return min(places, available)

        return cls(term, modulus, operation=f"decimal {expansion.strip()}")

    @classmethod
    def square_root_of(cls, radicand: RationalLike, iterations: int) -> "ConstructedReal":
        """
        √radicand ограниченной бисекцией.

        Args:
            radicand: Неотрицательное рациональное
            iterations: Бюджет бисекции (явный, обязателен)

        Raises:
            ConstructionPreconditionError: Если radicand < 0 или iterations < 1
        """
        return cls.nth_root_of(radicand, 2, iterations)

    @classmethod
    def nth_root_of(cls, radicand: RationalLike, degree: int, iterations: int) -> "ConstructedReal":
        """
        radicand^(1/degree) ограниченной бисекцией на [0, max(1, radicand)].

        n-й член — нижняя граница интервала после min(n, iterations) шагов;
        после iterations шагов последовательность постоянна.

        Raises:
            ConstructionPreconditionError: Если radicand < 0, degree < 1
                или iterations < 1
        """
        target = _as_rational(radicand).normalized()
        validate_natural(degree, "degree")
        validate_natural(iterations, "iterations")
        if degree < 1:
            raise ConstructionPreconditionError(f"degree must be >= 1, got {degree}")
        if iterations < 1:
            raise ConstructionPreconditionError(f"iterations must be >= 1, got {iterations}")
        if target.sign() < 0:
            raise ConstructionPreconditionError(f"Root of negative radicand: {target}")

        width = RATIONAL_ONE if target < RATIONAL_ONE else target
        lows = [RATIONAL_ZERO]
        highs = [width]

        def term(n: int) -> ConstructedRational:
            step = min(n, iterations)
            while len(lows) <= step:
                low, high = lows[-1], highs[-1]
                middle = ConstructedRational.between(low, high)
                if middle.power(degree) <= target:
                    lows.append(middle)
                    highs.append(high)
                else:
                    lows.append(low)
                    highs.append(middle)
            return lows[step]

        def modulus(k: int) -> int:
            # width / 2^N ≤ 1/k
            bound = math.ceil(width.to_efficient() * k)
            return min(iterations, (bound - 1).bit_length())

        return cls(term, modulus, operation=f"root {degree} of {target}")

    # =========================================================================
    # АРИФМЕТИКА (ленивая)
    # =========================================================================

    def add(self, other: "ConstructedReal") -> "ConstructedReal":
        a, b = self, other
        return ConstructedReal(
            lambda n: a.term(n).add(b.term(n)),
            lambda k: max(a.modulus(2 * k), b.modulus(2 * k)),
            operation="add",
            operands=(a, b),
        )

    def negate(self) -> "ConstructedReal":
        a = self
        return ConstructedReal(
            lambda n: a.term(n).negate(),
            a.modulus,
            operation="negate",
            operands=(a,),
        )

    def subtract(self, other: "ConstructedReal") -> "ConstructedReal":
        return self.add(other.negate())

    def multiply(self, other: "ConstructedReal") -> "ConstructedReal":
        a, b = self, other

        def bounds() -> Tuple[int, int]:
            bound_a = _ceiling_abs(a.term(a.modulus(1))) + 1
            bound_b = _ceiling_abs(b.term(b.modulus(1))) + 1
            return bound_a, bound_b

        def modulus(k: int) -> int:
            bound_a, bound_b = bounds()
            return max(
                a.modulus(1),
                b.modulus(1),
                a.modulus(2 * k * bound_b),
                b.modulus(2 * k * bound_a),
            )

        return ConstructedReal(
            lambda n: a.term(n).multiply(b.term(n)),
            modulus,
            operation="multiply",
            operands=(a, b),
        )

    def reciprocal(self, settings: TowerSettings = DEFAULT_SETTINGS) -> "ConstructedReal":
        """
        1 / self.

        Отделимость от нуля решается сразу (при вызове), поиском точности j
        с |a_{mod(j)}| > 2/j вплоть до settings.nonzero_tolerance. Члены
        результата остаются ленивыми.

        Raises:
            DomainArithmeticError: Если self неотличимо от нуля
        """
        a = self
        separation = a._separation_from_zero(settings)
        if separation is None:
            raise DomainArithmeticError(
                f"Division by a real indistinguishable from zero "
                f"(tolerance {settings.nonzero_tolerance})"
            )
        start = a.modulus(separation)

        return ConstructedReal(
            lambda n: a.term(max(n, start)).reciprocal(),
            lambda k: max(start, a.modulus(k * separation * separation)),
            operation="reciprocal",
            operands=(a,),
        )

    def divide(self, other: "ConstructedReal", settings: TowerSettings = DEFAULT_SETTINGS) -> "ConstructedReal":
        """
        Raises:
            DomainArithmeticError: Если other неотличимо от нуля
        """
        return self.multiply(other.reciprocal(settings))

    def _separation_from_zero(self, settings: TowerSettings) -> Optional[int]:
        limit = Fraction(4) / Fraction(settings.nonzero_tolerance)
        precision = 2
        while precision <= limit:
            candidate = self.term(self.modulus(precision))
            if abs(candidate.to_efficient()) > Fraction(2, precision):
                logger.debug("Real %r separated from zero at precision 1/%d", self, precision)
                return precision
            precision *= 2
        return None

    # =========================================================================
    # СРАВНЕНИЕ (только с допуском)
    # =========================================================================

    def compare(self, other: "ConstructedReal", tolerance: Tolerance) -> int:
        """
        Сравнение пределов с явным допуском ε.

        Разность D = self − other вычисляется на модуле точности k с
        1/k ≤ ε/4: найденный член d отстоит от D не более чем на ε/4.
        Ответ 0 при |d| ≤ 5ε/4, поэтому:
        - |D| ≤ ε         → всегда 0
        - |D| > 3ε/2      → всегда знак D
        - ε < |D| ≤ 3ε/2 → 0 или знак D (полоса неразличимости)
        Ненулевой ответ всегда означает |D| > ε.

        Args:
            other: Второй операнд
            tolerance: Допуск ε (> 0)

        Returns:
            -1, 0 или +1
        """
        epsilon = _tolerance(tolerance)
        precision = math.ceil(4 / epsilon)
        difference = self.subtract(other)
        approximation = difference.term(difference.modulus(precision)).to_efficient()
        if abs(approximation) <= epsilon * 5 / 4:
            return 0
        return 1 if approximation > 0 else -1

    def equals(self, other: "ConstructedReal", tolerance: Tolerance) -> bool:
        return self.compare(other, tolerance) == 0

    def sign(self, tolerance: Tolerance) -> int:
        return self.compare(ZERO, tolerance)

    # =========================================================================
    # ДИАГНОСТИКА И ПРОЕКЦИЯ
    # =========================================================================

    def is_cauchy_on_finite_prefix(self, prefix: int) -> bool:
        """
        Проверка заявленного модуля на конечном окне.

        Для каждой точности k = 1..prefix все пары членов с индексами
        mod(k)..mod(k)+prefix отстоят не более чем на 1/k (включая соседние).
        """
        validate_natural(prefix, "prefix")
        for k in range(1, prefix + 1):
            start = self.modulus(k)
            window = [self.term(n).to_efficient() for n in range(start, start + prefix + 1)]
            bound = Fraction(1, k)
            for i, left in enumerate(window):
                for right in window[i + 1:]:
                    if abs(left - right) > bound:
                        return False
        return True

    def approximate_rational(self, precision: int) -> ConstructedRational:
        """Рациональное в пределах 2^-precision от предела."""
        validate_natural(precision, "precision")
        return self.term(self.modulus(2**precision))

    def to_efficient(self, digits: Optional[int] = None, settings: TowerSettings = DEFAULT_SETTINGS) -> Decimal:
        """
        Decimal с digits знаками после запятой (в пределах 10^-digits от предела).

        Args:
            digits: Знаки после запятой (по умолчанию settings.real_digits)
            settings: Настройки точности
        """
        places = settings.real_digits if digits is None else validate_natural(digits, "digits")
        approximation = self.term(self.modulus(10 ** (places + 1))).to_efficient()
        scaled = round(approximation * 10**places)
        return Decimal(f"{scaled}e-{places}")

    # =========================================================================
    # ОПЕРАТОРЫ
    # =========================================================================

    def __add__(self, other: "ConstructedReal") -> "ConstructedReal":
        if not isinstance(other, ConstructedReal):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "ConstructedReal") -> "ConstructedReal":
        if not isinstance(other, ConstructedReal):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: "ConstructedReal") -> "ConstructedReal":
        if not isinstance(other, ConstructedReal):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: "ConstructedReal") -> "ConstructedReal":
        if not isinstance(other, ConstructedReal):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> "ConstructedReal":
        return self.negate()

    def __repr__(self) -> str:
        return f"ConstructedReal({self.operation})"


ZERO: ConstructedReal = ConstructedReal.from_rational(0)
ONE: ConstructedReal = ConstructedReal.from_rational(1)
TWO: ConstructedReal = ConstructedReal.from_rational(2)
