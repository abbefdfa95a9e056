"""Temperature conversion core"""
from modules.conversion.base import (
    TemperatureScale,
    ConversionDirection,
    ConversionResult,
    ErrorKind,
)
from modules.conversion.validation import ABSOLUTE_ZERO, absolute_zero, is_valid, check
from modules.conversion.formulas import (
    celsius_to_fahrenheit,
    fahrenheit_to_celsius,
    celsius_to_kelvin,
    kelvin_to_celsius,
    convert,
)

__all__ = [
    'TemperatureScale',
    'ConversionDirection',
    'ConversionResult',
    'ErrorKind',
    'ABSOLUTE_ZERO',
    'absolute_zero',
    'is_valid',
    'check',
    'celsius_to_fahrenheit',
    'fahrenheit_to_celsius',
    'celsius_to_kelvin',
    'kelvin_to_celsius',
    'convert',
]
