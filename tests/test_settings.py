import pytest
from pydantic import ValidationError

from app.platform.config import Settings


def test_log_level_defaults_to_info():
    assert Settings().LOG_LEVEL == "INFO"


def test_log_level_accepts_known_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    assert Settings().LOG_LEVEL == "DEBUG"


def test_unknown_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "VERBOSE")
    with pytest.raises(ValidationError):
        Settings()
