"""
Errors — таксономия ошибок числовой башни

Три класса ситуаций:
- Construction-precondition violation: попытка построить невалидное значение
  (нулевой знаменатель, отрицательная компонента натуральной пары,
  отрицательный радикал, неположительный бюджет итераций).
- Domain-arithmetic violation: деление любой числовой системы на её ноль.
- Verification failure: НЕ ошибка. Оракулы verify_* возвращают False,
  решение о провале принимает вызывающий код (обычно тест).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибки поднимаются сразу в точке вызова, никогда не откладываются
2. Ядро не перехватывает и не восстанавливает собственные ошибки
   (единственное исключение: оракулы фиксируют их как провал проверки)
"""


class NumberTowerError(Exception):
    """Базовая ошибка пакета numtower."""

    pass


class ConstructionPreconditionError(NumberTowerError, ValueError):
    """
    Нарушение предусловия конструирования значения.

    Примеры: ConstructedRational с нулевым знаменателем, натуральная компонента
    пары меньше нуля, корень из отрицательного радикала.
    """

    pass


class DomainArithmeticError(NumberTowerError, ZeroDivisionError):
    """
    Деление на нулевой элемент числовой системы.

    Для ConstructedReal "ноль" определяется конечной проверкой с толерантностью:
    делитель, неотличимый от нуля в пределах допуска, отклоняется.
    """

    pass
