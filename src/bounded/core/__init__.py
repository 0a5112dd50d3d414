"""
Core: модель BoundedValue и компараторы.

Не зависит от пресетов; пресеты (integers, floats) строятся поверх core.
"""

from bounded.core.bounded_value import (
    BoundedValue,
    clamp,
    create_between,
    create_by,
)
from bounded.core.ordering import (
    Comparator,
    Ordering,
    natural_order,
    order_by,
    reverse_order,
)

__all__ = [
    # Ordering
    "Comparator",
    "Ordering",
    "natural_order",
    "order_by",
    "reverse_order",
    # BoundedValue
    "BoundedValue",
    "clamp",
    "create_between",
    "create_by",
]
