"""Shared test setup"""

import tempfile
from pathlib import Path

import pytest

from utils.logger import configure_logging

# Keep test runs from writing into ./logs
_LOG_DIR = Path(tempfile.mkdtemp(prefix="tempconv-tests-"))


def use_test_logs():
    configure_logging(
        log_file=str(_LOG_DIR / "converter.log"),
        history_file=str(_LOG_DIR / "conversions.log"),
        level="DEBUG"
    )


use_test_logs()


@pytest.fixture
def restore_logging():
    """Point logging back at the shared test directory afterwards"""
    yield
    use_test_logs()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Strip converter overrides from the environment"""
    monkeypatch.delenv("TEMPCONV_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TEMPCONV_PRECISION", raising=False)
