"""
Conversion Service

Business logic between the interactive session and the conversion core:
parse, validate, convert, format and record one conversion.
No terminal I/O happens here.
"""

import math
import time
from typing import Optional, Dict, Any

from modules.conversion import (
    ConversionDirection,
    ConversionResult,
    ErrorKind,
    check,
    convert,
)
from utils.logger import get_logger, log_conversion

logger = get_logger('conversion_service')

INVALID_NUMBER_MESSAGE = "Invalid input. Please enter a valid number."


class ConversionService:
    """Validates and converts temperatures, keeping simple counters"""
    
    def __init__(self, precision: int = 2):
        if precision < 0:
            raise ValueError(f"precision must be >= 0, got {precision}")
        self.precision = precision
        self.converted = 0
        self.rejected = 0
        
        logger.info(f"ConversionService initialized (precision={precision})")
    
    def parse_temperature(self, text: str) -> Optional[float]:
        """
        Parse a typed temperature.
        
        Args:
            text: Raw user text
            
        Returns:
            The value, or None for empty, non-numeric, underscored or non-finite text
        """
        # float() also accepts digit separators like "1_000"
        if text is None or "_" in text:
            return None
        
        try:
            value = float(text.strip())
        except ValueError:
            return None
        
        if not math.isfinite(value):
            return None
        return value
    
    def format_reading(self, value: float, direction: ConversionDirection, target: bool = False) -> str:
        """Format a value with the scale symbol, e.g. '100.00 °C'"""
        scale = direction.target if target else direction.source
        return f"{value:.{self.precision}f} {scale.symbol}"
    
    def convert(self, value: float, direction: ConversionDirection) -> ConversionResult:
        """
        Validate and convert a temperature.
        
        Args:
            value: Temperature in the direction's source scale
            direction: Conversion to apply
            
        Returns:
            ConversionResult; success=False with OUT_OF_RANGE when the
            value is below absolute zero
        """
        start_time = time.time()
        
        rejection = check(value, direction)
        if rejection:
            self.rejected += 1
            logger.info(f"Rejected {value} for {direction.name}: below absolute zero")
            return ConversionResult(
                success=False,
                direction=direction,
                value=value,
                message=rejection,
                error=ErrorKind.OUT_OF_RANGE,
                duration_ms=(time.time() - start_time) * 1000
            )
        
        result = convert(value, direction)
        summary = (
            f"{self.format_reading(value, direction)} = "
            f"{self.format_reading(result, direction, target=True)}"
        )
        
        self.converted += 1
        logger.debug(f"{direction.name}: {value!r} -> {result!r}")
        log_conversion(summary, direction.name)
        
        return ConversionResult(
            success=True,
            direction=direction,
            value=value,
            result=result,
            message=summary,
            duration_ms=(time.time() - start_time) * 1000
        )
    
    def convert_text(self, text: str, direction: ConversionDirection) -> ConversionResult:
        """Parse then convert; unparsable text yields INVALID_NUMBER"""
        value = self.parse_temperature(text)
        
        if value is None:
            self.rejected += 1
            logger.debug(f"Could not parse temperature: {text!r}")
            return ConversionResult(
                success=False,
                direction=direction,
                value=None,
                message=INVALID_NUMBER_MESSAGE,
                error=ErrorKind.INVALID_NUMBER
            )
        
        return self.convert(value, direction)
    
    def get_stats(self) -> Dict[str, Any]:
        """Get service statistics"""
        return {
            'converted': self.converted,
            'rejected': self.rejected,
            'precision': self.precision
        }
