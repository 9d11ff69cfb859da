from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got {raw!r}")


@dataclass(frozen=True)
class Settings:
    """
    Runtime configuration, read from the environment (and `.env` if present).

    Variables
    ---------
    OFFLINE_MODE                  : skip all LLM calls (default: true)
    OPENAI_API_KEY                : key for the LLM word picker
    MODEL_NAME                    : chat model used by the picker (default: gpt-4o-mini)
    HANGMAN_WORDLIST_DIR          : directory of <difficulty>.txt lists (default: data/wordlists)
    HANGMAN_RESIGN_OVERRIDES_WON  : whether resigning turns a won game into a loss (default: true)
    HANGMAN_LOG_LEVEL             : logging level name (default: WARNING)
    """

    offline: bool = True
    openai_api_key: str = ""
    model_name: str = "gpt-4o-mini"
    wordlist_dir: Path = Path("data/wordlists")
    resign_overrides_won: bool = True
    log_level: str = "WARNING"

    @property
    def llm_enabled(self) -> bool:
        return not self.offline and bool(self.openai_api_key)

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True) -> "Settings":
        if load_dotenv_file:
            load_dotenv(override=False)
        return cls(
            offline=_env_bool("OFFLINE_MODE", True),
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            model_name=os.getenv("MODEL_NAME") or "gpt-4o-mini",
            wordlist_dir=Path(os.getenv("HANGMAN_WORDLIST_DIR") or "data/wordlists"),
            resign_overrides_won=_env_bool("HANGMAN_RESIGN_OVERRIDES_WON", True),
            log_level=(os.getenv("HANGMAN_LOG_LEVEL") or "WARNING").upper(),
        )


def configure_logging(settings: Settings) -> None:
    """Set up root logging once, at the configured level."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
