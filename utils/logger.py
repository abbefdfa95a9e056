"""
Logging System

Key points:
1. UTF-8 encoding for file handlers (degree signs in every message)
2. Console only shows warnings and above, the session owns stdout
3. Conversion history goes to its own file
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler

class SafeFormatter(logging.Formatter):
    """Formatter that handles unicode errors gracefully"""

    def format(self, record):
        try:
            return super().format(record)
        except UnicodeEncodeError:
            # Fallback: ASCII-safe version
            record.msg = str(record.msg).encode('ascii', 'replace').decode('ascii')
            return super().format(record)

class LazyRotatingFileHandler(RotatingFileHandler):
    """Rotating file handler that creates its file (and folder) on first record"""

    def _open(self):
        Path(self.baseFilename).parent.mkdir(parents=True, exist_ok=True)
        return super()._open()

class LoggerManager:
    """Manages all loggers"""

    _instance = None
    _loggers = {}
    _initialized = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super(LoggerManager, cls).__new__(cls)
        return cls._instance

    def __init__(
        self,
        log_file: str = 'logs/converter.log',
        history_file: str = 'logs/conversions.log',
        level: str = 'INFO'
    ):
        if not self._initialized:
            self.log_file = log_file
            self.history_file = history_file
            self.level = level
            self._setup_logging()
            LoggerManager._initialized = True

    def _setup_logging(self):
        """Setup logging system"""
        self._setup_logger(
            'converter',
            self.log_file,
            self.level,
            5 * 1024 * 1024,  # 5MB
            3  # 3 backups
        )
        self._setup_history_logger(self.history_file)

    def _setup_logger(
        self,
        name: str,
        log_file: str,
        level: str,
        max_size: int,
        backup_count: int
    ):
        """Setup individual logger with UTF-8 support"""
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        self._clear_handlers(logger)
        logger.propagate = False

        formatter = SafeFormatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(logging.WARNING)
        logger.addHandler(console_handler)

        try:
            file_handler = LazyRotatingFileHandler(
                log_file,
                maxBytes=max_size,
                backupCount=backup_count,
                encoding='utf-8',
                delay=True
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"File logging disabled ({e})")

        self._loggers[name] = logger

    def _setup_history_logger(self, log_file: str):
        """Setup dedicated conversion history logger"""
        logger = logging.getLogger('conversions')
        logger.setLevel(logging.INFO)
        self._clear_handlers(logger)
        logger.propagate = False

        formatter = SafeFormatter(
            '%(asctime)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # File handler only (no console spam)
        try:
            file_handler = LazyRotatingFileHandler(
                log_file,
                maxBytes=5 * 1024 * 1024,
                backupCount=10,
                encoding='utf-8',
                delay=True
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            self._loggers['converter'].warning(f"Conversion history disabled ({e})")

        self._loggers['conversions'] = logger

    def _clear_handlers(self, logger: logging.Logger):
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    def reconfigure(self, log_file: str, history_file: str, level: str):
        """Point the handlers at new files and level"""
        self.log_file = log_file
        self.history_file = history_file
        self.level = level
        self._setup_logging()

    def get_logger(self, name: str = 'converter') -> logging.Logger:
        """Get logger instance"""
        full_name = f'converter.{name}' if name != 'converter' else name

        if full_name not in self._loggers:
            # Children inherit level and handlers from 'converter'
            self._loggers[full_name] = logging.getLogger(full_name)

        return self._loggers[full_name]

    def log_conversion(self, summary: str, direction: str):
        """
        Record a completed conversion in the history log.

        Args:
            summary: Display line, e.g. '100.00 °C = 212.00 °F'
            direction: Direction name
        """
        history = self._loggers['conversions']
        history.info(f"{direction}: {summary}")

# Global instance
_logger_manager = None

def configure_logging(
    log_file: str = 'logs/converter.log',
    history_file: str = 'logs/conversions.log',
    level: str = 'INFO'
) -> LoggerManager:
    """
    Configure logging destinations and level.

    Loggers handed out before this call pick up the new handlers too.
    """
    global _logger_manager
    if _logger_manager is None:
        _logger_manager = LoggerManager(log_file, history_file, level)
    else:
        _logger_manager.reconfigure(log_file, history_file, level)
    return _logger_manager

def get_logger(name: str = 'converter') -> logging.Logger:
    """
    Get logger for a module.

    Args:
        name: Module name (e.g., 'conversion.service', 'io.keyboard_input')

    Returns:
        Logger instance
    """
    global _logger_manager
    if _logger_manager is None:
        _logger_manager = LoggerManager()
    return _logger_manager.get_logger(name)

def log_conversion(summary: str, direction: str):
    """Log a conversion - convenience function."""
    global _logger_manager
    if _logger_manager is None:
        _logger_manager = LoggerManager()
    _logger_manager.log_conversion(summary, direction)
