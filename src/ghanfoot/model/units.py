"""Linear units offered by the form and conversions to meters / centimeters."""
from enum import StrEnum
from typing import Any

from ghanfoot.utils import parse_float


class Unit(StrEnum):
    """Unit tags as shown in the unit selectors."""
    METER = "m"
    CENTIMETER = "cm"
    FOOT = "ft"
    INCH = "in"


METERS_PER_FOOT = 0.3048
METERS_PER_INCH = 0.0254
CENTIMETERS_PER_FOOT = 30.48
CENTIMETERS_PER_INCH = 2.54


def to_meters(value: Any, unit: str) -> float:
    """
    Convert a length given in `unit` to meters.

    Unknown units are treated as meters (value is returned unchanged).
    """
    number = parse_float(value)
    match unit:
        case Unit.CENTIMETER:
            return number / 100
        case Unit.FOOT:
            return number * METERS_PER_FOOT
        case Unit.INCH:
            return number * METERS_PER_INCH
        case _:
            return number


def to_centimeters(value: Any, unit: str) -> float:
    """
    Convert a length given in `unit` to centimeters.

    `value` may be raw text from an input field; unparsable text counts as 0.
    Unknown units return the parsed value unchanged.
    """
    number = parse_float(value)
    match unit:
        case Unit.METER:
            return number * 100
        case Unit.CENTIMETER:
            return number
        case Unit.FOOT:
            return number * CENTIMETERS_PER_FOOT
        case Unit.INCH:
            return number * CENTIMETERS_PER_INCH
        case _:
            return number
