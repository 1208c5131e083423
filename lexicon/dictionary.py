# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .base import Lexicon
from .engine import Candidate, DEFAULT_LIMIT, SuggestionEngine
from .wordset import TrieWordSet, WordSet
from typing import Iterable


class Dictionary(Lexicon):
    def __init__(self, word_set: WordSet, limit: int = DEFAULT_LIMIT, max_distance: int | None = None) -> None:
        self.engine = SuggestionEngine(word_set, limit=limit, max_distance=max_distance)
        self.word_set = word_set

    @classmethod
    def from_words(
        cls,
        words: Iterable[str],
        *,
        case_sensitive: bool = False,
        trie: bool = False,
        limit: int = DEFAULT_LIMIT,
        max_distance: int | None = None,
    ) -> Dictionary:
        word_set_class = TrieWordSet if trie else WordSet
        return cls(word_set_class(words, case_sensitive=case_sensitive), limit=limit, max_distance=max_distance)

    def is_valid(self, word: str) -> bool:
        return self.word_set.is_valid(word)

    def get_suggestions(self, typo: str) -> list[str]:
        return self.engine.get_suggestions(typo)

    def rank(self, typo: str) -> list[Candidate]:
        return self.engine.rank(typo)

    def __contains__(self, word: object) -> bool:
        return self.word_set.is_valid(word)

    def __len__(self) -> int:
        return len(self.word_set)
