"""
Integer presets — BoundedValue[int] с естественным порядком целых

Пресеты фиксированной разрядности (8/16/32 бит, signed/unsigned) и
safe integer диапазон ±(2^53 - 1) для совместимости с платформами, где
числовой тип не представляет точно целые большей величины.

Каждый пресет создаётся в своём минимуме.

ВАЖНО: Python int не переполняется, поэтому промежуточное значение
(например, max + 1 в increment) никогда не "заворачивается" до clamp.
Обнаружение переполнения сверх самого clamp не выполняется.
"""

import logging
from typing import Final

from bounded.core.bounded_value import BoundedValue
from bounded.core.ordering import natural_order

logger = logging.getLogger(__name__)


# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================

INT8_MIN: Final[int] = -(2**7)
INT8_MAX: Final[int] = 2**7 - 1
INT16_MIN: Final[int] = -(2**15)
INT16_MAX: Final[int] = 2**15 - 1
INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1

UINT8_MAX: Final[int] = 2**8 - 1
UINT16_MAX: Final[int] = 2**16 - 1
UINT32_MAX: Final[int] = 2**32 - 1

# Number.MAX_SAFE_INTEGER / MIN_SAFE_INTEGER (IEEE 754 double, 53 бита мантиссы)
SAFE_INTEGER_MAX: Final[int] = 2**53 - 1
SAFE_INTEGER_MIN: Final[int] = -SAFE_INTEGER_MAX

PRESET_RANGES: Final[dict[str, tuple[int, int]]] = {
    "int8": (INT8_MIN, INT8_MAX),
    "int16": (INT16_MIN, INT16_MAX),
    "int32": (INT32_MIN, INT32_MAX),
    "uint8": (0, UINT8_MAX),
    "uint16": (0, UINT16_MAX),
    "uint32": (0, UINT32_MAX),
    "safe_integer": (SAFE_INTEGER_MIN, SAFE_INTEGER_MAX),
}


class UnknownPresetError(ValueError):
    """Запрошен пресет, отсутствующий в PRESET_RANGES"""


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def create_by(minimum: int, maximum: int) -> BoundedValue[int]:
    """
    BoundedValue[int] с границами [minimum, maximum] в минимуме.

    Границы в обратном порядке переставляются.

    Raises:
        pydantic.ValidationError: Если границы не представимы как int
    """
    return BoundedValue[int](min=minimum, max=maximum, comparator=natural_order)


def create_between(value: int, minimum: int, maximum: int) -> BoundedValue[int]:
    """
    BoundedValue[int] с начальным значением value, прижатым к [minimum, maximum].

    Raises:
        pydantic.ValidationError: Если значение или границы не представимы как int
    """
    return BoundedValue[int](
        value=value, min=minimum, max=maximum, comparator=natural_order
    )


# =============================================================================
# ПРЕСЕТЫ
# =============================================================================


def preset(name: str) -> BoundedValue[int]:
    """
    Пресет по имени ("int8", "uint16", "safe_integer", ...).

    Args:
        name: Ключ PRESET_RANGES

    Returns:
        BoundedValue[int] в минимуме диапазона

    Raises:
        UnknownPresetError: Если имя не найдено
    """
    try:
        minimum, maximum = PRESET_RANGES[name]
    except KeyError:
        known = ", ".join(sorted(PRESET_RANGES))
        raise UnknownPresetError(
            f"Unknown integer preset {name!r} (known: {known})"
        ) from None

    logger.debug("Integer preset %s resolved to [%d, %d]", name, minimum, maximum)
    return create_by(minimum, maximum)


def int8() -> BoundedValue[int]:
    """[-128, 127]"""
    return preset("int8")


def int16() -> BoundedValue[int]:
    """[-32768, 32767]"""
    return preset("int16")


def int32() -> BoundedValue[int]:
    """[-2147483648, 2147483647]"""
    return preset("int32")


def uint8() -> BoundedValue[int]:
    """[0, 255]"""
    return preset("uint8")


def uint16() -> BoundedValue[int]:
    """[0, 65535]"""
    return preset("uint16")


def uint32() -> BoundedValue[int]:
    """[0, 4294967295]"""
    return preset("uint32")


def safe_integer() -> BoundedValue[int]:
    """[-(2^53 - 1), 2^53 - 1]"""
    return preset("safe_integer")


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def step(bounded: BoundedValue[int], delta: int) -> BoundedValue[int]:
    """
    Сдвиг значения на delta с clamp к границам.

    Examples:
        >>> step(create_between(250, 0, 255), 10).value
        255
        >>> step(create_between(5, 0, 255), -10).value
        0
    """
    return bounded.update(lambda n: n + delta)


def increment(bounded: BoundedValue[int]) -> BoundedValue[int]:
    """value + 1, в max остаётся в max"""
    return step(bounded, 1)


def decrement(bounded: BoundedValue[int]) -> BoundedValue[int]:
    """value - 1, в min остаётся в min"""
    return step(bounded, -1)
