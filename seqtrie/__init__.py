"""Generic prefix trie over arbitrary sequences."""

from seqtrie.constants import DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH, DEFAULT_SEARCH_PATHS
from seqtrie.trie import Trie, TrieNode
from seqtrie.wordlist import WordList

__all__ = [
    "DEFAULT_MAX_LENGTH",
    "DEFAULT_MIN_LENGTH",
    "DEFAULT_SEARCH_PATHS",
    "Trie",
    "TrieNode",
    "WordList",
]
