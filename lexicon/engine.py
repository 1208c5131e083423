# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Ranking known words by edit distance to a query"""
from __future__ import annotations

from .errors import InvalidInputError
from .speller import edit_distance, first_row, next_row
from .wordset import TrieNode, TrieWordSet, WordSet
from typing import Any, Iterable, NamedTuple

import heapq
import logging

DEFAULT_LIMIT = 5


class Candidate(NamedTuple):
    word: str
    distance: int

    @property
    def sort_key(self) -> tuple[int, str]:
        return self.distance, self.word


def _check_bound(name: str, value: Any, allow_none: bool = False) -> None:
    if value is None and allow_none:
        return
    # bool is an int subclass but never a meaningful bound
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise InvalidInputError(f"{name} must be a non-negative integer, got {value!r}")


def merge_candidates(*ranked: Iterable[Candidate], limit: int = DEFAULT_LIMIT) -> list[Candidate]:
    """Merge ranked candidate lists, e.g. from engines over shards of one word list.

    A word present in several lists keeps its smallest distance.
    """
    _check_bound("limit", limit)
    best: dict[str, int] = {}
    for candidates in ranked:
        for word, distance in candidates:
            if word not in best or distance < best[word]:
                best[word] = distance
    merged = (Candidate(word, distance) for word, distance in best.items())
    return heapq.nsmallest(limit, merged, key=lambda candidate: candidate.sort_key)


class SuggestionEngine:
    """Suggests the known words closest to a possibly misspelled query.

    Candidates are ordered by Levenshtein distance, ties broken
    lexicographically, and at most `limit` are returned. With
    `max_distance` set, words farther from the query are never suggested.
    A `TrieWordSet` is searched by walking its trie; any other WordSet is
    scanned word by word. Both produce the same ranking.
    """

    def __init__(self, word_set: WordSet, limit: int = DEFAULT_LIMIT, max_distance: int | None = None) -> None:
        if word_set is None:
            raise InvalidInputError("word set is missing")
        _check_bound("limit", limit)
        _check_bound("max_distance", max_distance, allow_none=True)
        self.log = logging.getLogger(__name__)
        self.word_set = word_set
        self.limit = limit
        self.max_distance = max_distance

    def get_suggestions(self, typo: str | None) -> list[str]:
        return [candidate.word for candidate in self.rank(typo)]

    def rank(self, typo: str | None) -> list[Candidate]:
        if self.limit == 0 or not len(self.word_set):
            return []

        query = self.word_set.normalize(typo) if isinstance(typo, str) else ""
        if isinstance(self.word_set, TrieWordSet):
            ranked = self._rank_trie(query, self.word_set.root)
        else:
            ranked = self._rank_scan(query)
        self.log.debug("query %r: %d suggestion(s)", query, len(ranked))
        return ranked

    def _rank_scan(self, query: str) -> list[Candidate]:
        candidates = (Candidate(word, edit_distance(query, word)) for word in self.word_set.words)
        if self.max_distance is not None:
            candidates = (candidate for candidate in candidates if candidate.distance <= self.max_distance)
        return heapq.nsmallest(self.limit, candidates, key=lambda candidate: candidate.sort_key)

    def _rank_trie(self, query: str, root: TrieNode) -> list[Candidate]:
        # max-heap of the best candidates so far, via negated keys
        best: list[tuple[int, _Reversed, str]] = []

        def worst_allowed() -> int | None:
            if len(best) == self.limit:
                return -best[0][0]
            return self.max_distance

        def visit(node: TrieNode, row: list[int]) -> None:
            bound = worst_allowed()
            if node.word is not None:
                distance = row[-1]
                if bound is None or distance <= bound:
                    entry = (-distance, _Reversed(node.word), node.word)
                    if len(best) < self.limit:
                        heapq.heappush(best, entry)
                    elif (distance, node.word) < (-best[0][0], best[0][2]):
                        heapq.heapreplace(best, entry)
                    bound = worst_allowed()

            for char in sorted(node.children):
                child_row = next_row(row, query, char)
                # distances below this node can only grow from the row minimum
                if bound is not None and min(child_row) > bound:
                    continue
                visit(node.children[char], child_row)
                bound = worst_allowed()

        visit(root, first_row(query))
        return sorted((Candidate(word, -neg) for neg, _, word in best), key=lambda candidate: candidate.sort_key)


class _Reversed:
    """Inverts string ordering so the heap root is the lexicographically largest of equal distances"""

    __slots__ = ("value",)

    def __init__(self, value: str) -> None:
        self.value = value

    def __lt__(self, other: _Reversed) -> bool:
        return self.value > other.value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Reversed) and self.value == other.value
