"""
Тесты для Float presets

Проверяет:
1. create_by / create_between с естественным порядком float
2. Пресеты fraction / percentage
3. Ошибки валидации для непредставимых границ
"""

import pytest
from pydantic import ValidationError

from bounded.presets import floats


class TestConstructors:
    """create_by / create_between"""

    def test_create_by(self) -> None:
        b = floats.create_by(-1.5, 2.5)
        assert b.min == pytest.approx(-1.5)
        assert b.max == pytest.approx(2.5)
        assert b.value == pytest.approx(-1.5)

    def test_create_by_reversed(self) -> None:
        b = floats.create_by(2.5, -1.5)
        assert b.min == pytest.approx(-1.5)
        assert b.max == pytest.approx(2.5)

    def test_create_between_clamps(self) -> None:
        assert floats.create_between(0.25, 0.0, 1.0).value == pytest.approx(0.25)
        assert floats.create_between(1.5, 0.0, 1.0).value == 1.0
        assert floats.create_between(-0.1, 0.0, 1.0).value == 0.0

    def test_update_clamped(self) -> None:
        b = floats.create_between(0.5, 0.0, 1.0)
        assert b.update(lambda x: x * 3).value == 1.0
        assert b.update(lambda x: x / 2).value == pytest.approx(0.25)

    def test_infinite_bounds(self) -> None:
        """Бесконечности упорядочены естественно"""
        b = floats.create_between(1e300, float("-inf"), float("inf"))
        assert b.value == 1e300

    def test_non_numeric_bounds_rejected(self) -> None:
        """Строковые границы не представимы как float"""
        with pytest.raises(ValidationError):
            floats.create_by("low", "high")

    def test_non_numeric_value_rejected(self) -> None:
        """Значение приводится к float до сравнения"""
        with pytest.raises(ValidationError):
            floats.create_between("abc", 0.0, 1.0)

    def test_string_bounds_ordered_as_floats(self) -> None:
        """Границы упорядочиваются после приведения "10" → 10.0"""
        b = floats.create_between("5", "10", "9")
        assert (b.min, b.max, b.value) == (9.0, 10.0, 9.0)


class TestSetCoercion:
    """set приводит значение к float"""

    def test_set_int_stored_as_float(self) -> None:
        b = floats.create_by(0.0, 1.0).set(1)
        assert b.value == 1.0
        assert isinstance(b.value, float)

    def test_update_int_result_stored_as_float(self) -> None:
        b = floats.create_by(0.0, 10.0).update(lambda x: 3)
        assert isinstance(b.value, float)

    def test_set_non_numeric_rejected(self) -> None:
        with pytest.raises(ValidationError):
            floats.fraction().set("abc")


class TestPresets:
    """fraction / percentage"""

    def test_fraction_default(self) -> None:
        b = floats.fraction()
        assert (b.min, b.max, b.value) == (0.0, 1.0, 0.0)

    def test_fraction_clamps(self) -> None:
        assert floats.fraction(1.5).value == 1.0
        assert floats.fraction(-0.5).value == 0.0
        assert floats.fraction(0.3).value == pytest.approx(0.3)

    def test_percentage(self) -> None:
        b = floats.percentage(150.0)
        assert (b.min, b.max, b.value) == (0.0, 100.0, 100.0)
        assert b.set(42.5).value == pytest.approx(42.5)
