"""Anagram and palindrome checks on strings."""

from __future__ import annotations

import string
from collections import Counter

_ASCII_ALNUM = frozenset(string.ascii_letters + string.digits)


def is_anagram(a: str, b: str) -> bool:
    """Tell whether ``a`` and ``b`` use exactly the same characters."""
    return len(a) == len(b) and Counter(a) == Counter(b)


def is_palindrome(s: str) -> bool:
    """Tell whether the ASCII letters and digits of ``s`` read the same both ways.

    Case is ignored; every other character is skipped.
    """
    cleaned = [c.lower() for c in s if c in _ASCII_ALNUM]
    return cleaned == cleaned[::-1]