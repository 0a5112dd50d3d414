"""
Float presets — BoundedValue[float] с естественным порядком float

ВАЖНО: NaN не образует полного порядка с natural_order. Поведение для NaN
в границах или значении не определено и не проверяется.
"""

from typing import Final

from bounded.core.bounded_value import BoundedValue
from bounded.core.ordering import natural_order

# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================

FRACTION_MIN: Final[float] = 0.0
FRACTION_MAX: Final[float] = 1.0

PERCENTAGE_MIN: Final[float] = 0.0
PERCENTAGE_MAX: Final[float] = 100.0


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def create_by(minimum: float, maximum: float) -> BoundedValue[float]:
    """BoundedValue[float] с границами [minimum, maximum] в минимуме"""
    return BoundedValue[float](min=minimum, max=maximum, comparator=natural_order)


def create_between(value: float, minimum: float, maximum: float) -> BoundedValue[float]:
    """
    BoundedValue[float] с начальным значением value, прижатым к [minimum, maximum].

    Examples:
        >>> create_between(1.5, 0.0, 1.0).value
        1.0
    """
    return BoundedValue[float](
        value=value, min=minimum, max=maximum, comparator=natural_order
    )


def fraction(value: float = FRACTION_MIN) -> BoundedValue[float]:
    """Доля в [0.0, 1.0] (размеры, confidence и т.п.)"""
    return create_between(value, FRACTION_MIN, FRACTION_MAX)


def percentage(value: float = PERCENTAGE_MIN) -> BoundedValue[float]:
    """Проценты в [0.0, 100.0]"""
    return create_between(value, PERCENTAGE_MIN, PERCENTAGE_MAX)
