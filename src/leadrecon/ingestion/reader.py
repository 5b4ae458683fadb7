"""
Reader: decode exported CSV bytes and parse them into header-keyed records.

Ad-platform exports are often UTF-16 and tab-delimited; CRM exports are
UTF-8 with commas. Both are sniffed here.
"""
from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Dict, List

Record = Dict[str, str]

_UTF16_BOMS = (b"\xff\xfe", b"\xfe\xff")


def is_utf16(raw: bytes) -> bool:
    return raw[:2] in _UTF16_BOMS


def decode_bytes(raw: bytes) -> str:
    if is_utf16(raw):
        return raw.decode("utf-16", errors="replace")
    return raw.decode("utf-8-sig", errors="replace")


def is_tab_delimited(text: str) -> bool:
    first_line = text.split("\n", 1)[0]
    return "\t" in first_line and "," not in first_line


def parse_records(text: str, delimiter: str | None = None) -> List[Record]:
    """
    Parse delimited text with a header row.

    Blank lines are skipped; delimiter-only rows such as ",," are kept as
    records. Short rows are padded with "" and cells beyond the header are
    dropped.
    """
    if delimiter is None:
        delimiter = "\t" if is_tab_delimited(text) else ","
    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)

    header: List[str] | None = None
    records: List[Record] = []
    for row in reader:
        if not row:
            continue
        if header is None:
            header = row
            continue
        padded = row + [""] * (len(header) - len(row))
        records.append(dict(zip(header, padded)))
    return records


def read_dataset(path: Path) -> List[Record]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"CSV file not found: {p}")
    return parse_records(decode_bytes(p.read_bytes()))
