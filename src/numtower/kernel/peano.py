"""
Peano Axiom Schema — интерфейс successor/predecessor структуры натуральных

Схема аксиом, которую потребляет NaturalTower:
- zero
- succ(n)
- pred(n) → Optional (None для нуля, никогда не ошибка)
- is_zero(n)
- recursion(base, step): f(0) = base, f(succ(n)) = step(n, f(n))

Проверки аксиом (инъективность succ, "ноль не является последователем")
выполняются конечной выборкой 0..sample_size-1, а не универсальным
доказательством. Стоимость квадратичная по sample_size: бюджет задаёт
вызывающий код.
"""

from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterator, List, Optional, TypeVar

from numtower.core.errors import ConstructionPreconditionError

T = TypeVar("T")
R = TypeVar("R")


class PeanoSystem(ABC, Generic[T]):
    """
    Абстрактная система Пеано над типом T.

    Подкласс задаёт zero/succ/pred/is_zero; выборочные проверки аксиом и
    комбинатор примитивной рекурсии выводятся из них.
    """

    @property
    @abstractmethod
    def zero(self) -> T:
        ...

    @abstractmethod
    def succ(self, n: T) -> T:
        ...

    @abstractmethod
    def pred(self, n: T) -> Optional[T]:
        ...

    @abstractmethod
    def is_zero(self, n: T) -> bool:
        ...

    def iterate(self, count: int) -> Iterator[T]:
        """
        Первые count натуральных системы: zero, succ(zero), ...

        Каждый следующий элемент строится из предыдущего, поэтому выборка
        разделяет структуру.
        """
        if count < 0:
            raise ConstructionPreconditionError(f"count must be non-negative, got {count}")
        current = self.zero
        for _ in range(count):
            yield current
            current = self.succ(current)

    def verify_injectivity(self, sample_size: int) -> bool:
        """
        Инъективность succ на выборке: succ(a) == succ(b) ⇒ a == b.

        Args:
            sample_size: Количество натуральных в выборке (пары: sample_size²)

        Returns:
            True если нарушений не найдено
        """
        samples = list(self.iterate(sample_size))
        successors = [self.succ(n) for n in samples]
        for i, a in enumerate(samples):
            for j, b in enumerate(samples):
                if i != j and successors[i] == successors[j] and a != b:
                    return False
        return True

    def verify_zero_not_successor(self, sample_size: int) -> bool:
        """Для всех n из выборки: succ(n) != zero."""
        return all(self.succ(n) != self.zero for n in self.iterate(sample_size))

    def verify_pred_inverts_succ(self, sample_size: int) -> bool:
        """Для всех n из выборки: pred(succ(n)) == n, pred(zero) is None."""
        if self.pred(self.zero) is not None:
            return False
        return all(self.pred(self.succ(n)) == n for n in self.iterate(sample_size))

    def satisfies_axioms(self, sample_size: int) -> bool:
        """Все выборочные проверки аксиом одновременно."""
        return (
            self.is_zero(self.zero)
            and self.verify_zero_not_successor(sample_size)
            and self.verify_injectivity(sample_size)
            and self.verify_pred_inverts_succ(sample_size)
        )

    def recursion(self, base: R, step: Callable[[T, R], R]) -> Callable[[T], R]:
        """
        Функция, определённая примитивной рекурсией.

        f(zero) = base
        f(succ(n)) = step(n, f(n))

        Цепочка предшественников разворачивается итеративно (глубина цепочки
        не ограничена recursion limit интерпретатора).

        Args:
            base: Значение в нуле
            step: Шаг (n, f(n)) → f(succ(n))

        Returns:
            Функция T → R
        """

        def apply(n: T) -> R:
            chain: List[T] = []
            cursor = n
            while not self.is_zero(cursor):
                previous = self.pred(cursor)
                chain.append(previous)
                cursor = previous
            accumulator = base
            for current in reversed(chain):
                accumulator = step(current, accumulator)
            return accumulator

        return apply


class IntPeanoSystem(PeanoSystem[int]):
    """Система Пеано над эффективными натуральными (int >= 0)."""

    @property
    def zero(self) -> int:
        return 0

    def succ(self, n: int) -> int:
        return n + 1

    def pred(self, n: int) -> Optional[int]:
        return None if n == 0 else n - 1

    def is_zero(self, n: int) -> bool:
        return n == 0


INT_PEANO_SYSTEM: IntPeanoSystem = IntPeanoSystem()
