"""
Ordering — трёхзначное сравнение и компараторы

Компаратор — любая функция (a, b) -> Ordering, задающая полный порядок
(антисимметричный, транзитивный, рефлексивный для EQUAL).

Ordering наследует int, поэтому классические cmp-функции, возвращающие
отрицательное / ноль / положительное int, тоже являются валидными
компараторами: библиотека проверяет только compare(a, b) > 0.

ВАЖНО: корректность порядка — обязанность вызывающего кода. Для float NaN
natural_order не задаёт полного порядка, поведение не определено.
"""

from enum import Enum
from typing import Any, Callable, TypeVar

T = TypeVar("T")
K = TypeVar("K")


# =============================================================================
# ENUMS
# =============================================================================


class Ordering(int, Enum):
    """Результат трёхзначного сравнения"""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def from_sign(cls, value: int) -> "Ordering":
        """
        Приведение cmp-результата (любое int) к Ordering.

        Examples:
            >>> Ordering.from_sign(-42)
            <Ordering.LESS: -1>
            >>> Ordering.from_sign(0)
            <Ordering.EQUAL: 0>
        """
        if value < 0:
            return cls.LESS
        if value > 0:
            return cls.GREATER
        return cls.EQUAL


Comparator = Callable[[Any, Any], Ordering]


# =============================================================================
# КОМПАРАТОРЫ
# =============================================================================


def natural_order(a: Any, b: Any) -> Ordering:
    """
    Естественный порядок типа (операторы < и >).

    Examples:
        >>> natural_order(1, 2)
        <Ordering.LESS: -1>
        >>> natural_order(2.5, 2.5)
        <Ordering.EQUAL: 0>
        >>> natural_order("b", "a")
        <Ordering.GREATER: 1>
    """
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def reverse_order(compare: Comparator) -> Comparator:
    """
    Обратный порядок для заданного компаратора.

    Args:
        compare: Исходный компаратор

    Returns:
        Компаратор, для которого LESS и GREATER поменялись местами
    """

    def reversed_compare(a: Any, b: Any) -> Ordering:
        return Ordering.from_sign(compare(b, a))

    return reversed_compare


def order_by(key: Callable[[T], K]) -> Comparator:
    """
    Компаратор по ключу: сравнивает key(a) и key(b) естественным порядком.

    Args:
        key: Функция извлечения ключа (аналог key= в sorted)

    Examples:
        >>> by_len = order_by(len)
        >>> by_len("abc", "zz")
        <Ordering.GREATER: 1>
    """

    def keyed_compare(a: T, b: T) -> Ordering:
        return natural_order(key(a), key(b))

    return keyed_compare
