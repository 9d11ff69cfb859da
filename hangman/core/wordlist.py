from __future__ import annotations

import logging
import re
import secrets
from pathlib import Path
from typing import Iterable, List

logger = logging.getLogger(__name__)

# Project-local wordlists live here, one <difficulty>.txt per level:
_DATA_DIR = Path("data/wordlists")

_DEFAULT_FILES = {
    "easy": "easy.txt",
    "medium": "medium.txt",
    "hard": "hard.txt",
}

_FALLBACK_WORDS = ["wibble", "anaconda", "python"]

_LOWER_AZ = re.compile(r"^[a-z]+$")


def _read_lines(path: Path) -> List[str]:
    """
    Read a text file (UTF-8) and return the lines that are a single a–z word.

    Notes
    -----
    - Returns an empty list if the file is missing.
    - Lines are stripped and lowercased; anything else (accents, digits,
      spaces, hyphens, bytes that are not UTF-8) is dropped, since the
      engine only accepts a–z.
    """
    if not path.is_file():
        logger.warning("Word list %s not found", path)
        return []
    # Undecodable bytes become U+FFFD, which the a–z filter below drops.
    raw = path.read_text(encoding="utf-8", errors="replace").splitlines()
    words = [ln.strip().lower() for ln in raw]
    return [w for w in words if _LOWER_AZ.match(w)]


def _load_words_for_files(data_dir: Path, files: Iterable[str]) -> List[str]:
    words: List[str] = []
    for fname in files:
        words.extend(_read_lines(data_dir / fname))
    return words


def load_wordlist(difficulty: str = "medium", data_dir: Path | None = None) -> List[str]:
    """
    Load a list of candidate words for the given difficulty.

    Fallback strategy
    -----------------
    1) Use the file mapped by `difficulty` in `_DEFAULT_FILES`.
    2) If empty/missing, use "medium.txt".
    3) If still empty, return a tiny built-in list as a last resort.
    """
    data_dir = _DATA_DIR if data_dir is None else Path(data_dir)
    primary = _DEFAULT_FILES.get(difficulty, _DEFAULT_FILES["medium"])
    words = _load_words_for_files(data_dir, [primary])
    if not words and primary != _DEFAULT_FILES["medium"]:
        words = _load_words_for_files(data_dir, [_DEFAULT_FILES["medium"]])
    if not words:
        logger.warning("No words found in %s; using the built-in list", data_dir)
        words = list(_FALLBACK_WORDS)
    return words


def pick_local_word(difficulty: str = "medium", data_dir: Path | None = None) -> str:
    """
    Pick one word from the local lists using cryptographic randomness.

    Returns
    -------
    str
        A lowercase a–z word (never empty, due to fallbacks).
    """
    return secrets.choice(load_wordlist(difficulty, data_dir))
