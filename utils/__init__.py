"""Utility functions"""
from utils.logger import get_logger, log_conversion, configure_logging
from utils.config import get_config_manager, load_global_config

__all__ = [
    'get_logger',
    'log_conversion',
    'configure_logging',
    'get_config_manager',
    'load_global_config',
]
