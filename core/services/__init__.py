"""
Core Services Module

Business logic layer - pure logic, no I/O dependencies.
"""

from core.services.conversion_service import ConversionService

__all__ = ['ConversionService']
