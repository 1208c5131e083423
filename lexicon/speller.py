# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Levenshtein edit distance primitives"""
from __future__ import annotations

from typing import Collection, Sequence

# Corrections farther away than this are not worth offering as a hint
MAX_SUGGEST_DISTANCE = 2


def first_row(query: str) -> list[int]:
    """Distances from the empty string to every prefix of `query`."""
    return list(range(len(query) + 1))


def next_row(previous_row: Sequence[int], query: str, char: str) -> list[int]:
    """Extend the distance row of some prefix `p` to the row of `p + char`.

    `previous_row[j]` is the edit distance between `p` and `query[:j]`.
    """
    row = [previous_row[0] + 1]
    for j, query_char in enumerate(query, 1):
        row.append(
            min(
                row[j - 1] + 1,  # insertion
                previous_row[j] + 1,  # deletion
                previous_row[j - 1] + (query_char != char),  # substitution
            )
        )
    return row


def edit_distance(a: str, b: str) -> int:
    """Minimum number of single character insertions, deletions or substitutions turning `a` into `b`."""
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    row = first_row(a)
    for char in b:
        row = next_row(row, a, char)
    return row[-1]


def suggest(word_to_check: str, known_words: Collection[str]) -> str | None:
    """Most likely correction for `word_to_check`, or None if nothing is close enough."""
    if word_to_check in known_words:
        return word_to_check

    best: tuple[int, str] | None = None
    for word in known_words:
        distance = edit_distance(word_to_check, word)
        if distance > MAX_SUGGEST_DISTANCE:
            continue
        if best is None or (distance, word) < best:
            best = (distance, word)

    return best[1] if best else None
