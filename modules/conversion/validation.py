"""
Validation Rules

Absolute-zero floors per scale and the range check applied to
every input before it is converted.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from modules.conversion.base import ConversionDirection, TemperatureScale

ABSOLUTE_ZERO: Mapping[TemperatureScale, float] = MappingProxyType({
    TemperatureScale.CELSIUS: -273.15,
    TemperatureScale.FAHRENHEIT: -459.67,
    TemperatureScale.KELVIN: 0.0,
})

OUT_OF_RANGE_MESSAGE = "Temperature is below absolute zero for this conversion."


def absolute_zero(scale: TemperatureScale) -> float:
    """Lowest valid reading on a scale"""
    return ABSOLUTE_ZERO[scale]


def is_valid(value: float, direction: ConversionDirection) -> bool:
    """
    Check a temperature against its source scale's absolute zero.

    NaN compares false against everything, so it is rejected.

    Args:
        value: Candidate temperature in the direction's source scale
        direction: Conversion the value is meant for

    Returns:
        True if value is at or above absolute zero
    """
    return value >= ABSOLUTE_ZERO[direction.source]


def check(value: float, direction: ConversionDirection) -> Optional[str]:
    """Return None if valid, otherwise the rejection message"""
    if is_valid(value, direction):
        return None
    return OUT_OF_RANGE_MESSAGE
