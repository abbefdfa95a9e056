"""
Conversion Formulas

Pure linear formulas between Celsius, Fahrenheit and Kelvin.
No validation and no rounding happens here.
"""

from types import MappingProxyType
from typing import Callable, Mapping

from modules.conversion.base import ConversionDirection, TemperatureScale
from modules.conversion.validation import ABSOLUTE_ZERO

CELSIUS_ABSOLUTE_ZERO = ABSOLUTE_ZERO[TemperatureScale.CELSIUS]


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert Celsius to Fahrenheit: F = C × 9/5 + 32"""
    return (celsius * 9.0 / 5.0) + 32


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert Fahrenheit to Celsius: C = (F - 32) × 5/9"""
    return (fahrenheit - 32) * 5.0 / 9.0


def celsius_to_kelvin(celsius: float) -> float:
    """Convert Celsius to Kelvin"""
    return celsius - CELSIUS_ABSOLUTE_ZERO


def kelvin_to_celsius(kelvin: float) -> float:
    """Convert Kelvin to Celsius"""
    return kelvin + CELSIUS_ABSOLUTE_ZERO


FORMULAS: Mapping[ConversionDirection, Callable[[float], float]] = MappingProxyType({
    ConversionDirection.CELSIUS_TO_FAHRENHEIT: celsius_to_fahrenheit,
    ConversionDirection.FAHRENHEIT_TO_CELSIUS: fahrenheit_to_celsius,
    ConversionDirection.CELSIUS_TO_KELVIN: celsius_to_kelvin,
    ConversionDirection.KELVIN_TO_CELSIUS: kelvin_to_celsius,
})


def convert(value: float, direction: ConversionDirection) -> float:
    """
    Convert a temperature in the given direction.

    Args:
        value: Temperature in the direction's source scale
        direction: Which conversion to apply

    Returns:
        Temperature in the direction's target scale, full precision
    """
    return FORMULAS[direction](value)
