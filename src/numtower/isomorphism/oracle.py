"""
Oracle Runner — ограниченные выборочные проверки изоморфизмов

Проверка (oracle) прогоняет предикат по конечному набору случаев и
возвращает VerificationReport. Это тестовый оракул, а не production-путь:

- провал проверки НЕ ошибка: report.passed == False
- NumberTowerError, возникшая внутри случая, записывается как провал этого
  случая (с описанием), наружу не пробрасывается
- прочие исключения (ошибки программирования) пробрасываются

verify_* функции мостов сводят отчёт к bool через verdict: некорректные
входы проверки (отрицательная граница) дают False, а не исключение;
check_* в той же ситуации бросают ConstructionPreconditionError.

Прогон останавливается на первом контрпримере.
"""

import logging
from dataclasses import dataclass
from itertools import product
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, TypeVar

from numtower.core.errors import ConstructionPreconditionError, NumberTowerError

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")
C = TypeVar("C")


@dataclass(frozen=True)
class VerificationReport:
    """
    Результат проверки.

    Attributes:
        name: Имя проверки
        cases: Количество проверенных случаев (включая провальный)
        passed: True если контрпримеров не найдено
        counterexample: Описание первого контрпримера (или None)
    """

    name: str
    cases: int
    passed: bool
    counterexample: Optional[str] = None

    def __bool__(self) -> bool:
        return self.passed


def run_oracle(name: str, cases: Iterable[T], check: Callable[[T], bool]) -> VerificationReport:
    """
    Прогон проверки по всем случаям до первого контрпримера.

    Args:
        name: Имя проверки (для отчёта и логов)
        cases: Конечный набор случаев
        check: Предикат случая

    Returns:
        VerificationReport
    """
    checked = 0
    for case in cases:
        checked += 1
        try:
            if check(case):
                continue
            detail = f"{case!r}"
        except NumberTowerError as e:
            detail = f"{case!r}: {type(e).__name__}: {e}"
        logger.warning("Oracle %s failed after %d cases: %s", name, checked, detail)
        return VerificationReport(name=name, cases=checked, passed=False, counterexample=detail)

    logger.debug("Oracle %s passed on %d cases", name, checked)
    return VerificationReport(name=name, cases=checked, passed=True)


def sample_pairs(samples: Sequence[T]) -> List[Tuple[T, T]]:
    """Все упорядоченные пары выборки (bound² случаев)."""
    return list(product(samples, repeat=2))


def check_preservation(
    name: str,
    pairs: Iterable[Tuple[C, C]],
    constructed_operation: Callable[[C, C], C],
    efficient_operation: Callable[[E, E], E],
    to_efficient: Callable[[C], E],
    agree: Callable[[E, E], bool] = lambda x, y: x == y,
) -> VerificationReport:
    """
    to_efficient(a ⊕ b) согласовано с to_efficient(a) ⊕ to_efficient(b).

    Args:
        name: Имя проверки
        pairs: Пары построенных значений
        constructed_operation: Операция на построенных значениях
        efficient_operation: Та же операция на эффективных значениях
        to_efficient: Проекция построенного значения
        agree: Критерий согласия эффективных значений (по умолчанию ==)
    """

    def holds(pair: Tuple[C, C]) -> bool:
        left, right = pair
        constructed = to_efficient(constructed_operation(left, right))
        expected = efficient_operation(to_efficient(left), to_efficient(right))
        return agree(constructed, expected)

    return run_oracle(name, pairs, holds)


def verdict(check: Callable[..., VerificationReport], *args) -> bool:
    """
    Булев итог проверки; никогда не бросает на некорректных входах.

    Args:
        check: check_* функция моста
        *args: Её аргументы (bound, settings, ...)

    Returns:
        report.passed, или False если check отверг входы
    """
    try:
        return check(*args).passed
    except ConstructionPreconditionError as e:
        logger.warning("Oracle %s rejected its inputs: %s", check.__name__, e)
        return False
