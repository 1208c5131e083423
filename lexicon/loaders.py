# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Word lists from text files and HTTP(S) URLs, one word per line"""
from __future__ import annotations

from .errors import WordSourceError
from .session import get_requests_session
from requests import Session
from typing import Iterable, Iterator

import logging

COMMENT_PREFIX = "#"

log = logging.getLogger(__name__)


def parse_lines(lines: Iterable[str]) -> Iterator[str]:
    """Strip each line, skipping blank lines and comments"""
    for line in lines:
        word = line.strip()
        if word and not word.startswith(COMMENT_PREFIX):
            yield word


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def load_words(path: str) -> list[str]:
    try:
        with open(path, encoding="utf-8") as fp:
            words = list(parse_lines(fp))
    except OSError as ex:
        raise WordSourceError(f"Failed to read word list {path!r}: {ex.__class__.__name__}: {ex}", source=path) from ex
    except UnicodeDecodeError as ex:
        raise WordSourceError(f"Word list {path!r} is not valid UTF-8", source=path) from ex

    log.debug("read %d words from %r", len(words), path)
    return words


def fetch_words(url: str, timeout: float | None = None, session: Session | None = None) -> list[str]:
    session = session or get_requests_session(timeout=timeout)
    log.debug("fetching word list from %r", url)
    response = session.get(url)
    if not str(response.status_code).startswith("2"):
        raise WordSourceError(
            f"Failed to fetch word list {url!r}: HTTP {response.status_code} {response.reason}", source=url
        )

    response.encoding = response.encoding or "utf-8"
    words = list(parse_lines(response.text.splitlines()))
    log.debug("fetched %d words from %r", len(words), url)
    return words


def read_words(source: str, timeout: float | None = None) -> list[str]:
    if is_url(source):
        return fetch_words(source, timeout=timeout)
    return load_words(source)
