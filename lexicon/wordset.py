# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Immutable collections of known words"""
from __future__ import annotations

from .errors import InvalidInputError
from typing import Any, Iterable, Iterator


class WordSet:
    """Normalized, deduplicated set of known words backed by a frozenset.

    Words are case-folded on insertion unless `case_sensitive` is set, and
    lookups apply the same normalization. Empty strings are never stored.
    """

    __slots__ = ("case_sensitive", "_words")

    def __init__(self, words: Iterable[str], *, case_sensitive: bool = False) -> None:
        if words is None:
            raise InvalidInputError("word source is missing")
        if isinstance(words, (str, bytes)):
            raise InvalidInputError("word source must be a sequence of words, not a single string")
        try:
            items = iter(words)
        except TypeError as ex:
            raise InvalidInputError(f"word source is not iterable: {type(words).__name__}") from ex

        object.__setattr__(self, "case_sensitive", case_sensitive)
        normalized = set()
        for word in items:
            if not isinstance(word, str):
                raise InvalidInputError(f"words must be strings, got {type(word).__name__}: {word!r}")
            if word:
                normalized.add(self.normalize(word))
        object.__setattr__(self, "_words", frozenset(normalized))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def words(self) -> frozenset[str]:
        return self._words

    def normalize(self, word: str) -> str:
        return word if self.case_sensitive else word.casefold()

    def is_valid(self, word: Any) -> bool:
        if not isinstance(word, str) or not word:
            return False
        return self.normalize(word) in self._words

    def __contains__(self, word: object) -> bool:
        return self.is_valid(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} words, case_sensitive={self.case_sensitive})"


class TrieNode:
    __slots__ = ("children", "word")

    def __init__(self) -> None:
        self.children: dict[str, TrieNode] = {}
        # set when the path from the root to this node spells a known word
        self.word: str | None = None

    def iter_words(self) -> Iterator[str]:
        if self.word is not None:
            yield self.word
        for char in sorted(self.children):
            yield from self.children[char].iter_words()


class TrieWordSet(WordSet):
    """WordSet that also keeps its words in a character trie.

    Words sharing a prefix share the trie path, which lets the suggestion
    engine reuse edit distance rows computed for the common prefix.
    """

    __slots__ = ("_root",)

    def __init__(self, words: Iterable[str], *, case_sensitive: bool = False) -> None:
        super().__init__(words, case_sensitive=case_sensitive)
        root = TrieNode()
        for word in self._words:
            node = root
            for char in word:
                child = node.children.get(char)
                if child is None:
                    child = node.children[char] = TrieNode()
                node = child
            node.word = word
        object.__setattr__(self, "_root", root)

    @property
    def root(self) -> TrieNode:
        return self._root

    def words_with_prefix(self, prefix: str) -> list[str]:
        """Known words starting with `prefix`, in sorted order"""
        node = self._root
        for char in self.normalize(prefix):
            child = node.children.get(char)
            if child is None:
                return []
            node = child
        return list(node.iter_words())
