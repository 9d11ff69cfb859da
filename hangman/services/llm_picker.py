from __future__ import annotations

import logging
import re
from typing import Optional, Tuple

from openai import OpenAI, OpenAIError

from hangman.config import Settings
from hangman.core.wordlist import pick_local_word

logger = logging.getLogger(__name__)

# Strict validator: the engine only accepts lowercase a–z
_LOWER_AZ = re.compile(r"^[a-z]+$")


def _clean(reply: str) -> str:
    """Strip quotes, whitespace and a trailing period; force lowercase."""
    word = reply.replace('"', "").replace("'", "").strip().rstrip(".").lower()
    return word


def pick_with_llm(
    difficulty: str = "medium",
    retries: int = 2,
    settings: Optional[Settings] = None,
) -> Optional[str]:
    """
    Try to pick ONE valid word via an LLM. Returns None on failure (caller should fallback).

    Safety
    ------
    - OFFLINE_MODE=true or missing OPENAI_API_KEY -> returns None immediately.
    - Prompts the model to output exactly ONE word (lowercase, a–z only).
    - Validates with a regex; retries on API errors or invalid replies; then gives up.
    """
    settings = settings or Settings.from_env()
    if not settings.llm_enabled:
        return None

    prompt = (
        f"Generate a random English word around {difficulty} difficulty for a game of Hangman. "
        "It should be different each time. Output only the word in lowercase letters a-z."
    )

    client = OpenAI(api_key=settings.openai_api_key)

    attempts = retries + 1
    for attempt in range(1, attempts + 1):
        try:
            resp = client.chat.completions.create(
                model=settings.model_name,
                messages=[{"role": "user", "content": prompt}],
                temperature=0.7,
                max_tokens=20,
            )
        except OpenAIError as exc:
            logger.warning("LLM word pick failed (attempt %d/%d): %s", attempt, attempts, exc)
            continue

        if not resp.choices:
            logger.warning("LLM returned no choices (attempt %d/%d)", attempt, attempts)
            continue

        word = _clean(resp.choices[0].message.content or "")
        if _LOWER_AZ.match(word):
            return word
        logger.warning("LLM returned an unusable word (attempt %d/%d)", attempt, attempts)

    return None  # let caller fallback to local picker


def pick_word(difficulty: str = "medium", settings: Optional[Settings] = None) -> Tuple[str, str]:
    """
    Pick a secret word, preferring the LLM and falling back to the local lists.

    Returns
    -------
    tuple[str, str]
        The word and its source tag, "llm" or "local".
    """
    settings = settings or Settings.from_env()
    word = pick_with_llm(difficulty=difficulty, settings=settings)
    if word:
        return word, "llm"
    return pick_local_word(difficulty, settings.wordlist_dir), "local"
