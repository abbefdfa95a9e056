"""
Conversion Module - Base Types

Scales, conversion directions and result types shared by the
conversion formulas, validation rules and the conversion service.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TemperatureScale(Enum):
    """Supported temperature scales"""
    CELSIUS = "°C"
    FAHRENHEIT = "°F"
    KELVIN = "K"

    @property
    def symbol(self) -> str:
        return self.value


class ConversionDirection(Enum):
    """
    The four supported conversions.

    Each member is (menu number, source scale, target scale).
    """
    CELSIUS_TO_FAHRENHEIT = (1, TemperatureScale.CELSIUS, TemperatureScale.FAHRENHEIT)
    FAHRENHEIT_TO_CELSIUS = (2, TemperatureScale.FAHRENHEIT, TemperatureScale.CELSIUS)
    CELSIUS_TO_KELVIN = (3, TemperatureScale.CELSIUS, TemperatureScale.KELVIN)
    KELVIN_TO_CELSIUS = (4, TemperatureScale.KELVIN, TemperatureScale.CELSIUS)

    def __init__(self, choice: int, source: TemperatureScale, target: TemperatureScale):
        self.choice = choice
        self.source = source
        self.target = target

    @property
    def label(self) -> str:
        """Menu label, e.g. 'Celsius (°C) to Fahrenheit (°F)'"""
        return (
            f"{self.source.name.title()} ({self.source.symbol}) to "
            f"{self.target.name.title()} ({self.target.symbol})"
        )

    @classmethod
    def from_choice(cls, choice: int) -> "ConversionDirection":
        """
        Look up a direction by its menu number.

        Raises:
            ValueError: If no direction has that number
        """
        for direction in cls:
            if direction.choice == choice:
                return direction
        raise ValueError(f"Unknown conversion choice: {choice}")


class ErrorKind(Enum):
    """Why a conversion was rejected"""
    OUT_OF_RANGE = "out_of_range"        # Below absolute zero
    INVALID_NUMBER = "invalid_number"    # Text did not parse


@dataclass
class ConversionResult:
    """Result of a single conversion request"""
    success: bool
    direction: ConversionDirection
    value: Optional[float]
    result: Optional[float] = None
    message: str = ""
    error: Optional[ErrorKind] = None
    duration_ms: float = 0.0

    def is_rejected(self) -> bool:
        return not self.success
