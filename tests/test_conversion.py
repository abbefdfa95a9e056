"""
Test Conversion Formulas

Known reference points, round trips and direction dispatch.
"""

import pytest
from modules.conversion import (
    ConversionDirection,
    TemperatureScale,
    celsius_to_fahrenheit,
    fahrenheit_to_celsius,
    celsius_to_kelvin,
    kelvin_to_celsius,
    convert,
)
from modules.conversion.formulas import FORMULAS


class TestFormulas:
    """Reference points on each scale"""
    
    def test_celsius_to_fahrenheit(self):
        assert celsius_to_fahrenheit(0) == 32.0
        assert celsius_to_fahrenheit(100) == 212.0
        assert celsius_to_fahrenheit(-40) == -40.0
    
    def test_fahrenheit_to_celsius(self):
        assert fahrenheit_to_celsius(32) == 0.0
        assert fahrenheit_to_celsius(212) == 100.0
        assert fahrenheit_to_celsius(-40) == -40.0
    
    def test_celsius_to_kelvin(self):
        assert celsius_to_kelvin(0) == 273.15
        assert celsius_to_kelvin(100) == pytest.approx(373.15)
    
    def test_kelvin_to_celsius(self):
        assert kelvin_to_celsius(273.15) == 0.0
        assert kelvin_to_celsius(0) == -273.15
    
    def test_absolute_zero_maps_exactly(self):
        """-273.15 °C is exactly 0 K"""
        assert celsius_to_kelvin(-273.15) == 0.0
    
    def test_absolute_zero_fahrenheit(self):
        assert celsius_to_fahrenheit(-273.15) == pytest.approx(-459.67)
        assert fahrenheit_to_celsius(-459.67) == pytest.approx(-273.15)
    
    def test_body_temperature(self):
        assert celsius_to_fahrenheit(37) == pytest.approx(98.6)
    
    def test_no_rounding(self):
        """Full precision is returned"""
        assert fahrenheit_to_celsius(100) == pytest.approx(37.77777777777778, abs=1e-12)


class TestRoundTrip:
    """Converting there and back returns the input"""
    
    @pytest.mark.parametrize("fahrenheit", [-459.67, -40.0, 0.0, 32.0, 98.6, 212.0, 451.0, 5000.0])
    def test_fahrenheit_round_trip(self, fahrenheit):
        assert celsius_to_fahrenheit(fahrenheit_to_celsius(fahrenheit)) == pytest.approx(fahrenheit, abs=1e-9)
    
    @pytest.mark.parametrize("celsius", [-273.15, -40.0, 0.0, 36.6, 100.0, 1500.0])
    def test_kelvin_round_trip(self, celsius):
        assert kelvin_to_celsius(celsius_to_kelvin(celsius)) == pytest.approx(celsius, abs=1e-9)
    
    @pytest.mark.parametrize("celsius", [-273.15, -40.0, 0.0, 36.6, 100.0, 1500.0])
    def test_celsius_round_trip_via_fahrenheit(self, celsius):
        assert fahrenheit_to_celsius(celsius_to_fahrenheit(celsius)) == pytest.approx(celsius, abs=1e-9)
    
    @pytest.mark.parametrize("kelvin", [0.0, 0.0001, 77.0, 273.15, 373.15, 5000.0])
    def test_kelvin_round_trip_via_celsius(self, kelvin):
        assert celsius_to_kelvin(kelvin_to_celsius(kelvin)) == pytest.approx(kelvin, abs=1e-9)
    
    @pytest.mark.parametrize("value", [-200.0, 0.0, 25.0, 1000.0])
    def test_convert_round_trip(self, value):
        there = convert(value, ConversionDirection.FAHRENHEIT_TO_CELSIUS)
        back = convert(there, ConversionDirection.CELSIUS_TO_FAHRENHEIT)
        assert back == pytest.approx(value, abs=1e-9)


class TestConvert:
    """Direction dispatch"""
    
    def test_every_direction_has_a_formula(self):
        assert set(FORMULAS) == set(ConversionDirection)
    
    def test_dispatch(self):
        assert convert(100, ConversionDirection.CELSIUS_TO_FAHRENHEIT) == 212.0
        assert convert(212, ConversionDirection.FAHRENHEIT_TO_CELSIUS) == 100.0
        assert convert(0, ConversionDirection.CELSIUS_TO_KELVIN) == 273.15
        assert convert(273.15, ConversionDirection.KELVIN_TO_CELSIUS) == 0.0
    
    def test_formula_table_is_read_only(self):
        with pytest.raises(TypeError):
            FORMULAS[ConversionDirection.CELSIUS_TO_KELVIN] = celsius_to_fahrenheit


class TestConversionDirection:
    """Menu numbers, scales and labels"""
    
    def test_four_directions(self):
        assert len(ConversionDirection) == 4
    
    def test_menu_order(self):
        choices = [direction.choice for direction in ConversionDirection]
        assert choices == [1, 2, 3, 4]
    
    def test_from_choice(self):
        assert ConversionDirection.from_choice(1) is ConversionDirection.CELSIUS_TO_FAHRENHEIT
        assert ConversionDirection.from_choice(2) is ConversionDirection.FAHRENHEIT_TO_CELSIUS
        assert ConversionDirection.from_choice(3) is ConversionDirection.CELSIUS_TO_KELVIN
        assert ConversionDirection.from_choice(4) is ConversionDirection.KELVIN_TO_CELSIUS
    
    @pytest.mark.parametrize("choice", [0, 5, -1])
    def test_from_choice_unknown(self, choice):
        with pytest.raises(ValueError, match="Unknown conversion choice"):
            ConversionDirection.from_choice(choice)
    
    def test_source_and_target(self):
        direction = ConversionDirection.KELVIN_TO_CELSIUS
        assert direction.source is TemperatureScale.KELVIN
        assert direction.target is TemperatureScale.CELSIUS
    
    def test_label(self):
        assert ConversionDirection.CELSIUS_TO_FAHRENHEIT.label == "Celsius (°C) to Fahrenheit (°F)"
        assert ConversionDirection.KELVIN_TO_CELSIUS.label == "Kelvin (K) to Celsius (°C)"


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
