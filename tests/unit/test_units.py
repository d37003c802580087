from __future__ import annotations

import math
import pickle

import pytest

from geopoint.domain.exceptions import InvalidInput
from geopoint.domain.units import (
    degrees_to_radians,
    is_number,
    kilometers_to_miles,
    miles_to_kilometers,
    radians_to_degrees,
)

pytestmark = pytest.mark.unit

_NOT_NUMBERS = ["foo", math.nan, None, math.inf, -math.inf, True, [1.0]]


@pytest.mark.parametrize(
    ("func", "kind"),
    [
        (degrees_to_radians, "degree"),
        (radians_to_degrees, "radian"),
        (miles_to_kilometers, "mile"),
        (kilometers_to_miles, "kilometer"),
    ],
)
@pytest.mark.parametrize("value", _NOT_NUMBERS)
def test_conversions_reject_non_numbers(func, kind: str, value: object) -> None:
    with pytest.raises(InvalidInput, match=f"^Invalid {kind} value$") as exc_info:
        func(value)
    assert exc_info.value.kind == kind


def test_invalid_input_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        degrees_to_radians("foo")


def test_invalid_input_survives_pickling() -> None:
    err = InvalidInput("degree", "Invalid degree value")

    restored = pickle.loads(pickle.dumps(err))

    assert type(restored) is InvalidInput
    assert restored.kind == "degree"
    assert str(restored) == "Invalid degree value"


def test_is_number() -> None:
    assert is_number(0)
    assert is_number(-12.5)
    assert not is_number(False)
    assert not is_number("1")
    assert not is_number(math.nan)


def test_degrees_to_radians() -> None:
    assert degrees_to_radians(0) == 0
    assert degrees_to_radians(45) == math.pi / 4
    assert degrees_to_radians(90) == math.pi / 2
    assert degrees_to_radians(135) == (3 * math.pi) / 4
    assert degrees_to_radians(180) == math.pi
    assert degrees_to_radians(270) == (3 * math.pi) / 2
    assert degrees_to_radians(360) == 2 * math.pi
    assert degrees_to_radians(450) == (math.pi / 2) + (math.pi * 2)
    assert degrees_to_radians(810) == (math.pi / 2) + (math.pi * 2 * 2)


def test_radians_to_degrees() -> None:
    assert radians_to_degrees(0) == 0
    assert radians_to_degrees(math.pi / 4) == 45
    assert radians_to_degrees(math.pi / 2) == 90
    assert radians_to_degrees(math.pi) == 180
    assert radians_to_degrees((3 * math.pi) / 2) == 270
    assert radians_to_degrees(math.pi * 2) == 360
    assert radians_to_degrees(math.pi + (math.pi * 2)) == 540


def test_miles_kilometers() -> None:
    assert miles_to_kilometers(1) == 1.6093439999999999
    assert miles_to_kilometers(5) == 8.046719999999999
    assert kilometers_to_miles(1) == 0.621371192237334
    assert kilometers_to_miles(5) == 3.1068559611866697


@pytest.mark.parametrize("value", [-720.0, -33.3, 0.0, 1e-9, 40.689604, 359.99])
def test_degree_round_trip(value: float) -> None:
    assert radians_to_degrees(degrees_to_radians(value)) == pytest.approx(value)


@pytest.mark.parametrize("value", [0.0, 0.5, 201.63714020616294, 24901.0])
def test_mile_round_trip(value: float) -> None:
    assert kilometers_to_miles(miles_to_kilometers(value)) == pytest.approx(value)
