"""
Log Volume (Ghan-foot)
======================
Volume of a single log from its length and circumference, and the total over
all logs of the form.

The formula is the regional timber convention used by the form, not the
volume of a cylinder:

    volume [m³] = length [m] * circumference [cm]² / 160 / 1000

The displayed ghan-foot figure is the cubic-meter volume scaled by 35.315.
"""
import math
from dataclasses import dataclass
from typing import Any, Iterable, Protocol

from ghanfoot.model.units import to_meters, to_centimeters
from ghanfoot.utils import parse_float, is_blank, to_fixed

GHAN_FOOT_DIVISOR = 160.0
RAW_VOLUME_SCALE = 1000.0
GHAN_FOOT_FACTOR = 35.315


class LogLike(Protocol):
    length: Any
    circumference: Any
    length_unit: str
    circumference_unit: str


@dataclass(frozen=True)
class VolumeResult:
    """Volume of one log: `individual` in m³, `final` scaled to ghan-foot."""
    individual: float = 0.0
    final: float = 0.0


def _cubic_meters(length: Any, circumference: Any, length_unit: str, circumference_unit: str) -> float:
    length_m = to_meters(parse_float(length), length_unit)
    circumference_cm = to_centimeters(parse_float(circumference), circumference_unit)

    ghan_foot = (length_m * circumference_cm * circumference_cm) / GHAN_FOOT_DIVISOR
    return ghan_foot / RAW_VOLUME_SCALE


def compute_formatted(length: Any, circumference: Any, length_unit: str, circumference_unit: str) -> str:
    """
    Volume of one log in m³ as text with 4 decimals.

    Returns "0.00" when length or circumference is missing.
    """
    if is_blank(length) or is_blank(circumference):
        return "0.00"
    return to_fixed(_cubic_meters(length, circumference, length_unit, circumference_unit), 4)


def compute_detailed(length: Any, circumference: Any, length_unit: str, circumference_unit: str) -> VolumeResult:
    """Volume of one log, both in m³ and in ghan-foot."""
    if is_blank(length) or is_blank(circumference):
        return VolumeResult(individual=0.0, final=0.0)

    individual = _cubic_meters(length, circumference, length_unit, circumference_unit)
    return VolumeResult(individual=individual, final=individual * GHAN_FOOT_FACTOR)


def aggregate_total(logs: Iterable[LogLike]) -> str:
    """
    Total ghan-foot volume of all logs as text with 2 decimals.

    Logs with a missing length or circumference are skipped. The sum is taken
    over the cubic-meter volumes and scaled once at the end.
    """
    logs = list(logs)
    if not logs:
        return "0.00"

    total_cubic_meters = 0.0
    for log in logs:
        if is_blank(log.length) or is_blank(log.circumference):
            continue
        individual = compute_detailed(
            log.length,
            log.circumference,
            log.length_unit,
            log.circumference_unit,
        ).individual
        total_cubic_meters += 0.0 if math.isnan(individual) else individual

    return to_fixed(total_cubic_meters * GHAN_FOOT_FACTOR, 2)
