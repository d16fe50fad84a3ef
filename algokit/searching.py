"""Searching in sequences and text."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

_ALPHABET = 256


def linear_search(items: Iterable[Any], target: Any) -> int:
    """Return the index of the first element equal to ``target``, or -1."""
    for index, item in enumerate(items):
        if item == target:
            return index
    return -1


def prefix_function(pattern: str) -> list[int]:
    """Return the longest proper prefix that is also a suffix for each prefix."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            lps[i] = 0
            i += 1
    return lps


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return the start of every, possibly overlapping, match of ``pattern``.

    Uses the Knuth-Morris-Pratt algorithm. Raises ValueError for an empty
    pattern.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = prefix_function(pattern)
    matches: list[int] = []
    j = 0
    for i, char in enumerate(text):
        while j and char != pattern[j]:
            j = lps[j - 1]
        if char == pattern[j]:
            j += 1
            if j == len(pattern):
                matches.append(i - j + 1)
                j = lps[j - 1]
    return matches


def rabin_karp_search(text: str, pattern: str, modulus: int = 101) -> list[int]:
    """Return the start of every match of ``pattern`` using a rolling hash.

    Hash collisions are confirmed by direct comparison. Raises ValueError
    for an empty pattern or a modulus below one.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    if modulus < 1:
        raise ValueError("modulus must be positive")
    m, n = len(pattern), len(text)
    if m > n:
        return []
    high = pow(_ALPHABET, m - 1, modulus)
    pattern_hash = window_hash = 0
    for p_char, t_char in zip(pattern, text):
        pattern_hash = (_ALPHABET * pattern_hash + ord(p_char)) % modulus
        window_hash = (_ALPHABET * window_hash + ord(t_char)) % modulus
    matches: list[int] = []
    for i in range(n - m + 1):
        if pattern_hash == window_hash and text[i : i + m] == pattern:
            matches.append(i)
        if i < n - m:
            window_hash = (
                _ALPHABET * (window_hash - ord(text[i]) * high) + ord(text[i + m])
            ) % modulus
    return matches