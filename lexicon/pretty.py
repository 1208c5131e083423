# Copyright 2015, Aiven, https://aiven.io/
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Pretty-print command results as tables"""
from __future__ import annotations

from typing import Any, cast, Collection, Iterator, Mapping, Sequence, TextIO

import json
import sys

ResultType = Collection[Mapping[str, Any]]
TableLayout = Sequence[str]


def format_item(key: str | None, value: Any) -> str:
    if value is None:
        formatted = ""
    elif isinstance(value, bool):
        formatted = "yes" if value else "no"
    elif isinstance(value, (list, tuple)):
        formatted = ", ".join(format_item(None, entry) for entry in value)
    elif isinstance(value, dict):
        formatted = json.dumps(value, sort_keys=True)
    elif isinstance(value, str):
        # json encode strings only when that changes more than the quotes,
        # e.g. to make control characters visible
        json_v = json.dumps(value, ensure_ascii=False)
        formatted = value if json_v == '"{}"'.format(value) else json_v
    else:
        formatted = "{}".format(value)

    return formatted


def yield_table(
    result: ResultType,
    table_layout: TableLayout | None = None,
    header: bool = True,
) -> Iterator[str]:
    """
    format a list of dicts in a nicer table format yielding string rows

    :param list result: List of dicts to be printed.
    :param list table_layout: Fields to be printed, in column order. Defaults to all fields, sorted.
    :param bool header: True to print the field name
    """
    columns = list(table_layout or [])

    widths: dict[str, int] = {}
    formatted_values: list[dict[str, str]] = []
    for item in result:
        formatted_row: dict[str, str] = {}
        formatted_values.append(formatted_row)
        for key, value in item.items():
            if table_layout is not None and key not in columns:
                continue
            formatted_row[key] = format_item(key, value)
            widths[key] = max(len(key), len(formatted_row[key]), widths.get(key, 1))

    if table_layout is None:
        columns = sorted(widths)
    else:
        for column in columns:
            widths.setdefault(column, len(column))

    if header:
        yield "  ".join(f.upper().ljust(widths[f]) for f in columns)
        yield "  ".join("=" * widths[f] for f in columns)
    for formatted_row in formatted_values:
        yield "  ".join(formatted_row.get(f, "").ljust(widths[f]) for f in columns).strip()


def print_table(
    result: Collection[Any] | ResultType | None,
    table_layout: TableLayout | None = None,
    header: bool = True,
    file: TextIO | None = None,
) -> None:
    """print a list of dicts in a nicer table format"""

    def yield_rows() -> Iterator[str]:
        if not result:
            return
        elif not isinstance(next(iter(result), None), Mapping):
            yield from (format_item(None, item) for item in result)
        else:
            table_result = cast(ResultType, result)
            yield from yield_table(table_result, table_layout=table_layout, header=header)

    for row in yield_rows():
        print(row, file=file or sys.stdout)
