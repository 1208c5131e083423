# Copyright 2026, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from lexicon import WordSourceError
from lexicon.loaders import fetch_words, is_url, load_words, parse_lines, read_words
from pathlib import Path
from unittest import mock
from unittest.mock import MagicMock

import pytest

WORD_LIST = "# animals\ncat\n  car  \n\n\ncart\n#dog\nDog\n"


def _session(status_code: int = 200, text: str = WORD_LIST, reason: str = "OK") -> MagicMock:
    session = MagicMock()
    session.get.return_value = MagicMock(status_code=status_code, text=text, reason=reason, encoding="utf-8")
    return session


def test_parse_lines() -> None:
    assert list(parse_lines(WORD_LIST.splitlines())) == ["cat", "car", "cart", "Dog"]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("http://example.com/words.txt", True),
        ("https://example.com/words.txt", True),
        ("/usr/share/dict/words", False),
        ("words.txt", False),
        ("ftp://example.com/words.txt", False),
    ],
)
def test_is_url(source: str, expected: bool) -> None:
    assert is_url(source) is expected


def test_load_words(tmp_path: Path) -> None:
    path = tmp_path / "words.txt"
    path.write_text(WORD_LIST + "straße\n", encoding="utf-8")
    assert load_words(str(path)) == ["cat", "car", "cart", "Dog", "straße"]


def test_load_missing_file(tmp_path: Path) -> None:
    path = str(tmp_path / "missing.txt")
    with pytest.raises(WordSourceError) as excinfo:
        load_words(path)
    assert excinfo.value.source == path
    assert "missing.txt" in str(excinfo.value)


def test_load_invalid_encoding(tmp_path: Path) -> None:
    path = tmp_path / "words.txt"
    path.write_bytes(b"cat\n\xff\xfe\n")
    with pytest.raises(WordSourceError):
        load_words(str(path))


def test_fetch_words() -> None:
    session = _session()
    assert fetch_words("https://example.com/words.txt", session=session) == ["cat", "car", "cart", "Dog"]
    session.get.assert_called_once_with("https://example.com/words.txt")


def test_fetch_words_http_error() -> None:
    session = _session(status_code=404, text="not found", reason="Not Found")
    with pytest.raises(WordSourceError) as excinfo:
        fetch_words("https://example.com/words.txt", session=session)
    assert "HTTP 404 Not Found" in str(excinfo.value)


def test_fetch_words_uses_timeout() -> None:
    session = _session()
    with mock.patch("lexicon.loaders.get_requests_session", return_value=session) as get_session:
        assert fetch_words("https://example.com/words.txt", timeout=3.5) == ["cat", "car", "cart", "Dog"]
    get_session.assert_called_once_with(timeout=3.5)


def test_read_words_dispatch(tmp_path: Path) -> None:
    path = tmp_path / "words.txt"
    path.write_text("cat\n", encoding="utf-8")
    with mock.patch("lexicon.loaders.fetch_words", return_value=["dog"]) as fetch:
        assert read_words("https://example.com/words.txt", timeout=1) == ["dog"]
        assert read_words(str(path)) == ["cat"]
    fetch.assert_called_once_with("https://example.com/words.txt", timeout=1)
