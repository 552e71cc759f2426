import pytest

from malt import config


def test_defaults(monkeypatch):
    for var in ("MALT_PROMPT", "MALT_LOG_LEVEL", "MALT_RECURSION_LIMIT"):
        monkeypatch.delenv(var, raising=False)
    assert config.get_prompt() == "user> "
    assert config.get_log_level() == "WARNING"
    assert config.get_recursion_limit() is None


def test_overrides(monkeypatch):
    monkeypatch.setenv("MALT_PROMPT", "> ")
    monkeypatch.setenv("MALT_LOG_LEVEL", "debug")
    monkeypatch.setenv("MALT_RECURSION_LIMIT", "5000")
    assert config.get_prompt() == "> "
    assert config.get_log_level() == "DEBUG"
    assert config.get_recursion_limit() == 5000


def test_bad_recursion_limit(monkeypatch):
    monkeypatch.setenv("MALT_RECURSION_LIMIT", "lots")
    with pytest.raises(ValueError, match="MALT_RECURSION_LIMIT"):
        config.get_recursion_limit()
