"""Word list with trie-backed prefix search."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from seqtrie.constants import DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH, DEFAULT_SEARCH_PATHS
from seqtrie.trie import Trie

log = logging.getLogger("seqtrie")


class WordList:
    """Word list with both set-lookup and trie-based prefix search.

    Words are stored upper-cased; lookups are case-insensitive.
    """

    def __init__(
        self,
        path: str | None = None,
        *,
        min_length: int = DEFAULT_MIN_LENGTH,
        max_length: int | None = DEFAULT_MAX_LENGTH,
        search_paths: Iterable[str] | None = None,
    ):
        self.min_length = min_length
        self.max_length = max_length
        self.words: set[str] = set()
        self.trie: Trie[str] = Trie()
        self._load(path, DEFAULT_SEARCH_PATHS if search_paths is None else search_paths)

    def _load(self, path: str | None, search_paths: Iterable[str]) -> None:
        candidates: list[str] = []
        if path:
            candidates.append(path)
        candidates.extend(search_paths)

        for candidate in candidates:
            if not os.path.exists(candidate):
                log.debug("No word file at %s", candidate)
                continue
            with open(candidate, "r", encoding="utf-8") as f:
                for line in f:
                    self.add(line)
            if self.words:
                log.info("Loaded %s words from %s", f"{len(self.words):,}", candidate)
                return
            log.debug("Word file %s had no usable words", candidate)

        log.warning("No word file found -- word list is empty.")

    def _accepts(self, word: str) -> bool:
        if len(word) < self.min_length:
            return False
        if self.max_length is not None and len(word) > self.max_length:
            return False
        return word.isalpha()

    def add(self, word: str) -> bool:
        """Normalise and store ``word``; False if it was filtered out."""
        word = word.strip().upper()
        if not word or not self._accepts(word):
            return False
        self.words.add(word)
        self.trie.insert(word)
        return True

    def is_valid(self, word: str) -> bool:
        return word.upper() in self.words

    def has_prefix(self, prefix: str) -> bool:
        return self.trie.has_prefix(prefix.upper())

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def __len__(self) -> int:
        return len(self.words)
