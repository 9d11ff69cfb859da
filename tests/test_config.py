from pathlib import Path

import pytest

from hangman.config import Settings

_VARS = [
    "OFFLINE_MODE",
    "OPENAI_API_KEY",
    "MODEL_NAME",
    "HANGMAN_WORDLIST_DIR",
    "HANGMAN_RESIGN_OVERRIDES_WON",
    "HANGMAN_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings.from_env(load_dotenv_file=False)
    assert settings.offline is True
    assert settings.openai_api_key == ""
    assert settings.model_name == "gpt-4o-mini"
    assert settings.wordlist_dir == Path("data/wordlists")
    assert settings.resign_overrides_won is True
    assert settings.log_level == "WARNING"
    assert not settings.llm_enabled


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("OFFLINE_MODE", "False")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("MODEL_NAME", "gpt-4o")
    monkeypatch.setenv("HANGMAN_WORDLIST_DIR", "/tmp/words")
    monkeypatch.setenv("HANGMAN_RESIGN_OVERRIDES_WON", "no")
    monkeypatch.setenv("HANGMAN_LOG_LEVEL", "debug")
    settings = Settings.from_env(load_dotenv_file=False)
    assert settings.offline is False
    assert settings.model_name == "gpt-4o"
    assert settings.wordlist_dir == Path("/tmp/words")
    assert settings.resign_overrides_won is False
    assert settings.log_level == "DEBUG"
    assert settings.llm_enabled


def test_online_without_key_is_not_llm_enabled(monkeypatch):
    monkeypatch.setenv("OFFLINE_MODE", "0")
    assert not Settings.from_env(load_dotenv_file=False).llm_enabled


def test_malformed_boolean_names_variable(monkeypatch):
    monkeypatch.setenv("OFFLINE_MODE", "maybe")
    with pytest.raises(ValueError, match="OFFLINE_MODE"):
        Settings.from_env(load_dotenv_file=False)
