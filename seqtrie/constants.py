"""Defaults for loading word lists into a trie."""

from __future__ import annotations

import os

# Candidate word files, tried in order when no explicit path is given.
DEFAULT_SEARCH_PATHS: tuple[str, ...] = (
    "dictionary.txt",
    "words.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "dictionary.txt"),
    "/usr/share/dict/words",
)

DEFAULT_MIN_LENGTH: int = 1
DEFAULT_MAX_LENGTH: int | None = None  # unbounded
