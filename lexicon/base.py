# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from abc import ABC, abstractmethod


class Lexicon(ABC):
    """Word validity checks and typo suggestions over a set of known words"""

    @abstractmethod
    def is_valid(self, word: str) -> bool:
        """True if `word` is a known word"""

    @abstractmethod
    def get_suggestions(self, typo: str) -> list[str]:
        """Known words closest to `typo`, best match first"""
