"""Prefix tree over lower-case ASCII words."""

from __future__ import annotations

import string
from dataclasses import dataclass, field

_ALPHABET = frozenset(string.ascii_lowercase)


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    is_end: bool = False


def _check(word: str) -> str:
    bad = set(word) - _ALPHABET
    if bad:
        raise ValueError(f"only letters a-z are allowed, got {sorted(bad)!r}")
    return word


class Trie:
    """A set of words over the letters ``a`` to ``z`` that answers prefix queries."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def _walk(self, text: str) -> _TrieNode | None:
        node = self._root
        for ch in _check(text):
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for ch in _check(word):
            node = node.children.setdefault(ch, _TrieNode())
        node.is_end = True

    def search(self, word: str) -> bool:
        """Tell whether ``word`` itself was inserted."""
        node = self._walk(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Tell whether some inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None