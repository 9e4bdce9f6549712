"""String puzzles: distinct permutations, palindrome reordering, longest run."""

from __future__ import annotations

import itertools
import string
from collections import Counter


def distinct_permutations(text: str) -> list[str]:
    """Return every distinct rearrangement of text in sorted order."""
    if not text:
        return []
    return sorted({"".join(p) for p in itertools.permutations(text)})


def palindrome_reorder(text: str) -> str | None:
    """Rearrange upper-case letters into a palindrome, or return None if impossible."""
    invalid = set(text) - set(string.ascii_uppercase)
    if invalid:
        raise ValueError(f"only letters A-Z are allowed, got {sorted(invalid)}")
    freq = Counter(text)
    letters = sorted(freq)
    odd = [ch for ch in letters if freq[ch] % 2]
    if len(odd) > 1:
        return None
    half = "".join(ch * (freq[ch] // 2) for ch in letters if freq[ch] % 2 == 0)
    middle = "".join(ch * freq[ch] for ch in odd)
    return half + middle + half[::-1]


def longest_repetition(text: str) -> int:
    """Return the length of the longest run of one repeated character."""
    return max((len(list(run)) for _, run in itertools.groupby(text)), default=0)