"""
Test Logging System

Log files are only created once something is written to them.
"""

import pytest
from utils.logger import configure_logging, get_logger, log_conversion


class TestLogFiles:
    
    def test_no_files_until_first_record(self, tmp_path, restore_logging):
        log_dir = tmp_path / "custom"
        configure_logging(
            log_file=str(log_dir / "converter.log"),
            history_file=str(log_dir / "conversions.log"),
            level="INFO"
        )
        
        get_logger('test').debug("below level, not written")
        assert not log_dir.exists()
        
        get_logger('test').info("first record")
        assert (log_dir / "converter.log").exists()
        assert not (log_dir / "conversions.log").exists()
    
    def test_history_written_on_conversion(self, tmp_path, restore_logging):
        configure_logging(
            log_file=str(tmp_path / "converter.log"),
            history_file=str(tmp_path / "history" / "conversions.log"),
            level="INFO"
        )
        
        log_conversion("0.00 °C = 32.00 °F", "CELSIUS_TO_FAHRENHEIT")
        
        history = (tmp_path / "history" / "conversions.log").read_text(encoding="utf-8")
        assert "CELSIUS_TO_FAHRENHEIT: 0.00 °C = 32.00 °F" in history


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
