"""
BoundedValue — Значение, ограниченное включительным диапазоном [min, max]

Generic контейнер: текущее значение + границы + компаратор. Работает для int,
float и любого типа, для которого задан полный порядок.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. comparator(min, max) != GREATER после конструирования (границы
   переставляются, если переданы в обратном порядке)
2. min <= value <= max (по comparator) после любой операции
3. Все операции возвращают новый экземпляр; min, max и comparator
   не меняются ни одной трансформацией
4. set вызывает comparator не более двух раз, нижняя граница проверяется первой

Выход за границы — не ошибка: значение молча прижимается (clamp) к ближайшей
границе. Компаратор, не задающий полный порядок (например, float с NaN),
является нарушением предусловия: результат не определён и не проверяется.

Экземпляры immutable (frozen=True) и могут свободно разделяться между потоками.
"""

import logging
from functools import lru_cache
from typing import Any, Callable, Generic, TypeVar

from pydantic import BaseModel, Field, TypeAdapter, model_validator

from .ordering import Comparator, Ordering

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# CLAMP
# =============================================================================


def clamp(value: T, lower: T, upper: T, compare: Comparator) -> T:
    """
    Трёхзначный clamp по компаратору.

    Предполагает compare(lower, upper) != GREATER.

    Алгоритм:
        compare(lower, value) > 0  → lower (проверка прекращается)
        compare(value, upper) > 0  → upper
        иначе                      → value

    Args:
        value: Новое значение (может быть вне диапазона)
        lower: Нижняя граница (включительно)
        upper: Верхняя граница (включительно)
        compare: Компаратор (a, b) -> Ordering

    Returns:
        value, прижатое к [lower, upper]

    Examples:
        >>> clamp(-5, 0, 10, natural_order)
        0
        >>> clamp(15, 0, 10, natural_order)
        10
        >>> clamp(10, 0, 10, natural_order)
        10
    """
    if compare(lower, value) > 0:
        return lower
    if compare(value, upper) > 0:
        return upper
    return value


# =============================================================================
# BOUNDED VALUE MODEL
# =============================================================================


class BoundedValue(BaseModel, Generic[T]):
    """
    Значение, ограниченное диапазоном [min, max].

    Immutable модель (frozen=True). Прямое конструирование
    BoundedValue(min=..., max=..., comparator=..., value=...) проходит ту же
    нормализацию, что и create_between: границы упорядочиваются, value
    прижимается к диапазону (если value не передан — равен min).
    """

    # Без value начальное значение — нормализованный min (см. normalize_bounds)
    value: T = Field(None, description="Текущее значение, всегда в [min, max]")
    min: T = Field(..., description="Нижняя граница (включительно)")
    max: T = Field(..., description="Верхняя граница (включительно)")
    comparator: Comparator = Field(..., description="Компаратор полного порядка над T")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def normalize_bounds(self) -> "BoundedValue[T]":
        """
        Нормализация границ и clamp начального значения.

        Выполняется после приведения полей к типу T (например, "10" → 10 для
        BoundedValue[int]): порядок определяется на приведённых значениях.
        Некорректные входы отклоняются валидацией полей до этого шага.
        """
        lower, upper = self.min, self.max
        if self.comparator(lower, upper) > 0:
            logger.debug("Reversed bounds (%r, %r), swapping", lower, upper)
            lower, upper = upper, lower

        if "value" in self.model_fields_set:
            value = clamp(self.value, lower, upper, self.comparator)
        else:
            value = lower

        # Экземпляр ещё конструируется: frozen обходится только здесь
        object.__setattr__(self, "min", lower)
        object.__setattr__(self, "max", upper)
        object.__setattr__(self, "value", value)
        return self

    # -------------------------------------------------------------------------
    # Трансформации
    # -------------------------------------------------------------------------

    def set(self, new_value: T) -> "BoundedValue[T]":
        """
        Новый экземпляр со значением new_value, прижатым к [min, max].

        Не более двух вызовов comparator; при new_value < min — ровно один.

        Для параметризованной модели (BoundedValue[int], BoundedValue[float])
        new_value сначала приводится к типу поля: set(1) у BoundedValue[float]
        хранит 1.0, непредставимое значение вызывает ValidationError.

        Examples:
            >>> b = create_by(0, 100, natural_order)
            >>> b.set(20).value
            20
            >>> b.set(999).value
            100
        """
        new_value = self._coerce(new_value)
        return self._with_value(clamp(new_value, self.min, self.max, self.comparator))

    def set_to_min(self) -> "BoundedValue[T]":
        """Новый экземпляр со значением min (без сравнений)"""
        return self._with_value(self.min)

    def set_to_max(self) -> "BoundedValue[T]":
        """Новый экземпляр со значением max (без сравнений)"""
        return self._with_value(self.max)

    def update(self, transform: Callable[[T], T]) -> "BoundedValue[T]":
        """
        Применение transform к текущему значению с последующим clamp.

        transform может вернуть значение вне диапазона — оно будет прижато.
        Исключения transform пробрасываются без изменений.

        Args:
            transform: Функция T -> T

        Returns:
            Новый экземпляр со значением set(transform(value))
        """
        return self.set(transform(self.value))

    # -------------------------------------------------------------------------
    # Проверки
    # -------------------------------------------------------------------------

    def is_at_min(self) -> bool:
        """True если value равно min по comparator"""
        return self.comparator(self.value, self.min) == Ordering.EQUAL

    def is_at_max(self) -> bool:
        """True если value равно max по comparator"""
        return self.comparator(self.value, self.max) == Ordering.EQUAL

    def contains(self, candidate: T) -> bool:
        """
        Проверка, что candidate лежит в [min, max] (без clamp).

        Границы включительные: EQUAL считается попаданием в диапазон.
        """
        if self.comparator(self.min, candidate) > 0:
            return False
        return not self.comparator(candidate, self.max) > 0

    def _coerce(self, value: Any) -> T:
        annotation = type(self).model_fields["value"].annotation
        if isinstance(annotation, TypeVar):
            # Непараметризованная модель: T == Any
            return value
        return _adapter(annotation).validate_python(value)

    def _with_value(self, value: T) -> "BoundedValue[T]":
        # value уже приведён и в диапазоне: повторная валидация не нужна
        return self.model_copy(update={"value": value})


@lru_cache(maxsize=None)
def _adapter(annotation: Any) -> TypeAdapter:
    return TypeAdapter(annotation)


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def create_by(minimum: T, maximum: T, compare: Comparator) -> BoundedValue[T]:
    """
    Создание экземпляра с границами [minimum, maximum].

    Если compare(minimum, maximum) == GREATER, границы переставляются.
    Начальное значение — нормализованный min.

    Examples:
        >>> create_by(0, 100, natural_order).value
        0
        >>> b = create_by(100, 0, natural_order)
        >>> (b.min, b.max, b.value)
        (0, 100, 0)
    """
    return BoundedValue(min=minimum, max=maximum, comparator=compare)


def create_between(
    value: T,
    minimum: T,
    maximum: T,
    compare: Comparator,
) -> BoundedValue[T]:
    """
    Создание экземпляра с начальным значением value.

    Эквивалентно create_by(minimum, maximum, compare).set(value).

    Examples:
        >>> create_between(50, 0, 100, natural_order).value
        50
        >>> create_between(999, 0, 100, natural_order).value
        100
    """
    return BoundedValue(value=value, min=minimum, max=maximum, comparator=compare)
