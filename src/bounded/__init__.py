"""
bounded — значения, ограниченные включительным диапазоном [min, max].

Generic BoundedValue с компаратором полного порядка плюс пресеты для int
(фиксированная разрядность, safe integer) и float.
"""

from bounded.core import (
    BoundedValue,
    Comparator,
    Ordering,
    clamp,
    create_between,
    create_by,
    natural_order,
    order_by,
    reverse_order,
)
from bounded.presets import floats, integers

__version__ = "1.0.0"

__all__ = [
    # Core
    "BoundedValue",
    "Comparator",
    "Ordering",
    "clamp",
    "create_between",
    "create_by",
    "natural_order",
    "order_by",
    "reverse_order",
    # Presets
    "floats",
    "integers",
]
