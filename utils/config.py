"""
Configuration Management

Centralized config loading for the converter.
Values come from config/settings.yaml, then environment (.env) overrides.
"""

import os
import yaml
from dotenv import load_dotenv
from pathlib import Path
from typing import Any, Dict, Optional

from utils.logger import get_logger

logger = get_logger('config')

# Environment variable -> (config path, type)
ENV_OVERRIDES = {
    'TEMPCONV_LOG_LEVEL': ('logging.level', str),
    'TEMPCONV_PRECISION': ('display.precision', int),
}


class ConfigManager:
    """Manages the settings file and environment overrides"""
    
    def __init__(self, config_root: str = "config"):
        self.config_root = Path(config_root)
        self.global_config: Dict[str, Any] = {}
    
    def load_global_config(self) -> dict:
        """Load global settings"""
        settings_path = self.config_root / "settings.yaml"
        
        if settings_path.exists():
            with open(settings_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
            self.global_config = self._merge(self._default_global_config(), loaded)
        else:
            logger.warning(f"{settings_path} not found, using defaults")
            self.global_config = self._default_global_config()
        
        self._apply_env_overrides()
        return self.global_config
    
    def get(self, path: str, default: Any = None) -> Any:
        """
        Get config value using dot notation.
        
        Examples:
            config.get('display.precision')
            config.get('logging.level')
        """
        keys = path.split('.')
        value = self.global_config
        
        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default
    
    def set(self, path: str, value: Any):
        """Set config value using dot notation"""
        keys = path.split('.')
        node = self.global_config
        for key in keys[:-1]:
            node = node.setdefault(key, {})
        node[keys[-1]] = value
    
    def _apply_env_overrides(self):
        """Apply TEMPCONV_* variables from the environment or a .env file"""
        load_dotenv(override=False)
        
        for env_key, (path, cast) in ENV_OVERRIDES.items():
            raw = os.getenv(env_key)
            if raw is None or raw == "":
                continue
            try:
                self.set(path, cast(raw))
                logger.debug(f"Config override from {env_key}: {path}={raw}")
            except ValueError:
                logger.warning(f"Ignoring {env_key}={raw!r}: expected {cast.__name__}")
    
    def _merge(self, base: dict, override: dict) -> dict:
        """Recursively merge override into base"""
        merged = dict(base)
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = self._merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    
    def _default_global_config(self) -> dict:
        """Default global configuration"""
        return {
            'app': {
                'name': 'Temperature Converter',
                'version': '1.1.0'
            },
            'display': {
                'precision': 2
            },
            'io': {
                'input': 'keyboard',
                'output': 'console'
            },
            'logging': {
                'level': 'INFO',
                'file': 'logs/converter.log',
                'history_file': 'logs/conversions.log'
            }
        }

# Global instance
_config_manager = None

def get_config_manager(config_root: Optional[str] = None) -> ConfigManager:
    """Get global config manager"""
    global _config_manager
    if _config_manager is None or config_root is not None:
        _config_manager = ConfigManager(config_root or "config")
    return _config_manager

def load_global_config(config_root: Optional[str] = None) -> dict:
    """Convenience function to load global config"""
    return get_config_manager(config_root).load_global_config()
