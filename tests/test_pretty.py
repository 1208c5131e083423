# Copyright 2019, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from lexicon.pretty import format_item, print_table, yield_table
from typing import Any

import io
import pytest


@pytest.mark.parametrize(
    "value,expected",
    [
        (1, "1"),
        ("a_string", "a_string"),
        ("straße", "straße"),
        ("tab\there", '"tab\\there"'),
        (True, "yes"),
        (False, "no"),
        (None, ""),
        (["x", "y"], "x, y"),
        ([1, None, True], "1, , yes"),
        ({"b": 1, "a": 2}, '{"a": 2, "b": 1}'),
    ],
)
def test_format_item(value: Any, expected: str) -> None:
    assert format_item(None, value) == expected


def test_yield_table() -> None:
    rows = [
        {"word": "cat", "distance": 1, "rank": 1},
        {"word": "cart", "distance": 2, "rank": 2},
    ]
    assert list(yield_table(rows, table_layout=["word", "distance"])) == [
        "WORD  DISTANCE",
        "====  ========",
        "cat   1",
        "cart  2",
    ]


def test_yield_table_default_layout_is_sorted() -> None:
    rows = [{"word": "cat", "distance": 1}]
    assert list(yield_table(rows, header=False)) == ["1         cat"]


def test_yield_table_missing_column() -> None:
    rows = [{"word": "ct", "valid": False}]
    assert list(yield_table(rows, table_layout=["word", "valid", "suggestion"])) == [
        "WORD  VALID  SUGGESTION",
        "====  =====  ==========",
        "ct    no",
    ]


def test_print_table() -> None:
    output = io.StringIO()
    print_table([{"word": "dog", "valid": True}], table_layout=["word", "valid"], file=output)
    assert output.getvalue() == "WORD  VALID\n====  =====\ndog   yes\n"


def test_print_table_plain_values() -> None:
    output = io.StringIO()
    print_table(["cat", "dog"], file=output)
    assert output.getvalue() == "cat\ndog\n"


def test_print_table_empty() -> None:
    output = io.StringIO()
    print_table([], file=output)
    print_table(None, file=output)
    assert output.getvalue() == ""
