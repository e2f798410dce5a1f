from __future__ import annotations

import csv
import io
import re
import sys
from typing import Sequence

from src.utils.breed_names import strip_bom

_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")

# Upstream description columns can exceed the csv module default of 128 KiB
csv.field_size_limit(min(sys.maxsize, 2**31 - 1))


def parse_csv(text: str) -> list[list[str]]:
    """Parse comma-delimited text into rows of raw fields.

    Quoted fields may hold commas, doubled quotes and line breaks; rows whose
    fields are all blank are dropped.
    """
    # A leading BOM would otherwise defeat quote detection on the first field
    reader = csv.reader(io.StringIO(strip_bom(text), newline=""), delimiter=",", quotechar='"')
    rows = [row for row in reader if any(field.strip() for field in row)]
    return rows


def normalize_header(row: Sequence[str]) -> list[str]:
    return [strip_bom(cell).strip() for cell in row]


def resolve_column(
    header_lower: Sequence[str], candidates: Sequence[str], *, allow_substring: bool = True
) -> int | None:
    """Index of the first column matching a candidate, in candidate priority order.

    Exact matches win over substring matches.
    """
    for candidate in candidates:
        for idx, cell in enumerate(header_lower):
            if cell == candidate:
                return idx
    if not allow_substring:
        return None
    for candidate in candidates:
        for idx, cell in enumerate(header_lower):
            if cell and candidate in cell:
                return idx
    return None


def field_at(row: Sequence[str], idx: int | None) -> str:
    if idx is None or idx >= len(row):
        return ""
    return row[idx] or ""


def parse_int(value: str | None) -> int | None:
    """Leading integer of a cell, so "8 (provisional)" and "1.0" both yield a number."""
    m = _INTEGER.match(value or "")
    if m is None:
        return None
    return int(m.group(1), 10)


def clean_text(value: str | None) -> str | None:
    text = (value or "").strip()
    return text or None
