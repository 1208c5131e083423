# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from . import argx, envdefault, speller
from .argx import arg
from .dictionary import Dictionary
from .engine import DEFAULT_LIMIT
from .loaders import read_words
from argparse import ArgumentParser
from functools import cached_property
from typing import Any

CHECK_COLUMNS = ["word", "valid", "suggestion"]
SUGGEST_COLUMNS = ["rank", "word", "distance"]
INFO_COLUMNS = ["source", "words", "case_sensitive", "backend", "limit", "max_distance"]


def parse_int(name: str, value: Any) -> int:
    # strings come from the environment, config files hold JSON numbers
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            pass
    raise argx.UserError(f"{name} must be an integer, got {value!r}")


def parse_bool(name: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise argx.UserError(f"{name} must be true or false, got {value!r}")
    return value


class LexiconCLI(argx.CommandLineTool):
    def __init__(self) -> None:
        super().__init__("lexicon")

    def add_args(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "--words",
            help="Word list file or http(s) URL, one word per line (default: $LEXICON_WORDS)",
        )
        parser.add_argument(
            "--case-sensitive",
            action="store_true",
            default=None,
            help="Match words exactly instead of case-insensitively",
        )
        parser.add_argument("--trie", action="store_true", default=None, help="Search suggestions over a trie")
        parser.add_argument("--limit", type=int, help=f"Maximum number of suggestions (default: {DEFAULT_LIMIT})")
        parser.add_argument("--max-distance", type=int, help="Never suggest words farther than this edit distance")
        parser.add_argument("--request-timeout", type=float, help="Timeout for fetching a word list URL in seconds")
        parser.add_argument("--json", action="store_true", default=False, help="Raw json output")

    def _setting(self, name: str, default: Any = None) -> Any:
        """Command line argument, then config file, then `default`"""
        value = getattr(self.args, name, None)
        if value is not None:
            return value
        return self.config.get(name, default)

    @property
    def words_source(self) -> str:
        source = self._setting("words", envdefault.LEXICON_WORDS)
        if not source:
            raise argx.UserError("no word list given: use --words or set LEXICON_WORDS")
        return source

    @property
    def limit(self) -> int:
        return parse_int("limit", self._setting("limit", envdefault.LEXICON_SUGGESTION_LIMIT or DEFAULT_LIMIT))

    @property
    def max_distance(self) -> int | None:
        value = self._setting("max_distance")
        return None if value is None else parse_int("max_distance", value)

    @property
    def case_sensitive(self) -> bool:
        return parse_bool("case_sensitive", self._setting("case_sensitive", False))

    @property
    def trie(self) -> bool:
        return parse_bool("trie", self._setting("trie", False))

    @cached_property
    def dictionary(self) -> Dictionary:
        source = self.words_source
        words = read_words(source, timeout=self.args.request_timeout)
        dictionary = Dictionary.from_words(
            words,
            case_sensitive=self.case_sensitive,
            trie=self.trie,
            limit=self.limit,
            max_distance=self.max_distance,
        )
        self.log.debug("loaded %d distinct words from %r", len(dictionary), source)
        return dictionary

    @arg("word", nargs="+", help="Words to check")
    def check(self) -> int:
        """Check whether words are known"""
        word_set = self.dictionary.word_set
        rows = []
        for word in self.args.word:
            valid = self.dictionary.is_valid(word)
            hint = None if valid else speller.suggest(word_set.normalize(word), word_set.words)
            rows.append({"word": word, "valid": valid, "suggestion": hint})

        self.print_response(rows, json=self.args.json, table_layout=CHECK_COLUMNS)
        return 0 if all(row["valid"] for row in rows) else 1

    @arg("word", help="Possibly misspelled word")
    def suggest(self) -> None:
        """Suggest the known words closest to a word"""
        ranked = self.dictionary.rank(self.args.word)
        if not ranked and not self.args.json:
            self.log.info("No suggestions for %r", self.args.word)
            return

        rows = [
            {"rank": rank, "word": candidate.word, "distance": candidate.distance}
            for rank, candidate in enumerate(ranked, 1)
        ]
        self.print_response(rows, json=self.args.json, table_layout=SUGGEST_COLUMNS)

    @arg()
    def info(self) -> None:
        """Show details of the loaded word list"""
        word_set = self.dictionary.word_set
        engine = self.dictionary.engine
        self.print_response(
            {
                "source": self.words_source,
                "words": len(word_set),
                "case_sensitive": word_set.case_sensitive,
                "backend": "trie" if self.trie else "hash",
                "limit": engine.limit,
                "max_distance": engine.max_distance,
            },
            json=self.args.json,
            table_layout=INFO_COLUMNS,
        )


if __name__ == "__main__":
    LexiconCLI().main()
