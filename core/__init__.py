"""Core session and services"""
from core.session import ConverterSession
from core.services.conversion_service import ConversionService

__all__ = ['ConverterSession', 'ConversionService']
