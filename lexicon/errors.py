# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations


class Error(Exception):
    """Base class for lexicon errors"""


class InvalidInputError(Error):
    """A word set or engine was constructed from unusable input"""


class WordSourceError(Error):
    """A word list could not be read from its source"""

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source
