import logging

from wordcodes.core.config import Settings
from wordcodes.core.logging_config import configure_logging


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("WORDCODES_WORDLIST_PATH", raising=False)
    monkeypatch.delenv("WORDCODES_LOG_LEVEL", raising=False)
    settings = Settings(_env_file=None)
    assert settings.WORDLIST_PATH is None
    assert settings.LOG_LEVEL == "INFO"


def test_settings_from_environment(monkeypatch, tmp_path):
    path = tmp_path / "words.txt"
    monkeypatch.setenv("WORDCODES_WORDLIST_PATH", str(path))
    monkeypatch.setenv("WORDCODES_LOG_LEVEL", "DEBUG")
    settings = Settings(_env_file=None)
    assert settings.WORDLIST_PATH == str(path)
    assert settings.LOG_LEVEL == "DEBUG"


def test_configure_logging():
    logger = configure_logging("DEBUG")
    assert logger.name == "wordcodes"
    assert logger.level == logging.DEBUG
    assert logger.isEnabledFor(logging.DEBUG)
