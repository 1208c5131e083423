# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""
Configurable parameters via environment variables
"""

import os

USER_HOME = os.path.expanduser("~")

LEXICON_CONFIG_DIR = os.environ.get("LEXICON_CONFIG_DIR", os.path.join(USER_HOME, ".config", "lexicon"))

LEXICON_CONFIG = os.environ.get("LEXICON_CONFIG", os.path.join(LEXICON_CONFIG_DIR, "lexicon.json"))
LEXICON_SUGGESTION_LIMIT = os.environ.get("LEXICON_SUGGESTION_LIMIT")
LEXICON_WORDS = os.environ.get("LEXICON_WORDS")
