# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from .base import Lexicon
from .dictionary import Dictionary
from .engine import Candidate, DEFAULT_LIMIT, merge_candidates, SuggestionEngine
from .errors import Error, InvalidInputError, WordSourceError
from .wordset import TrieWordSet, WordSet

__all__ = [
    "Candidate",
    "DEFAULT_LIMIT",
    "Dictionary",
    "Error",
    "InvalidInputError",
    "Lexicon",
    "merge_candidates",
    "SuggestionEngine",
    "TrieWordSet",
    "WordSet",
    "WordSourceError",
]
