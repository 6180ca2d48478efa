"""Generic prefix trie over sequences of hashable elements."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class TrieNode(Generic[T]):
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_end")

    def __init__(self):
        self.children: dict[T, TrieNode[T]] = {}
        self.is_end: bool = False


class Trie(Generic[T]):
    """Prefix trie for exact and prefix lookups over any element type.

    The root stands for the empty sequence.  Each edge is labelled with one
    element, so the path from the root to a node spells out a sequence, and
    ``is_end`` on that node records whether the sequence itself was inserted.
    """

    def __init__(self):
        self.root: TrieNode[T] = TrieNode()

    @classmethod
    def from_sequence(cls, sequence: Iterable[T]) -> Trie[T]:
        """New trie holding just ``sequence``."""
        trie = cls()
        trie.insert(sequence)
        return trie

    def insert(self, sequence: Iterable[T]) -> None:
        node = self.root
        for elem in sequence:
            if elem not in node.children:
                node.children[elem] = TrieNode()
            node = node.children[elem]
        node.is_end = True

    def search(self, sequence: Iterable[T], is_prefix: bool = False) -> bool:
        """
        Look up ``sequence``.  With ``is_prefix`` the end marker is ignored,
        so any prefix of an inserted sequence matches.
        """
        node = self._walk(sequence)
        return node is not None and (node.is_end or is_prefix)

    def has_prefix(self, sequence: Iterable[T]) -> bool:
        return self.search(sequence, is_prefix=True)

    def __contains__(self, sequence: Iterable[T]) -> bool:
        return self.search(sequence)

    def _walk(self, sequence: Iterable[T]) -> TrieNode[T] | None:
        node = self.root
        for elem in sequence:
            node = node.children.get(elem)
            if node is None:
                return None
        return node
