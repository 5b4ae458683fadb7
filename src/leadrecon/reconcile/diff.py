"""
Diff: positional row-by-row comparison of two datasets.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

Record = Dict[str, Any]


def _row_signature(record: Optional[Record]) -> Optional[List[tuple]]:
    # Field order counts, as well as values.
    if record is None:
        return None
    return list(record.items())


def diff_rows(first: List[Record], second: List[Record]) -> List[int]:
    """Indices where the two datasets hold different rows."""
    diffs: List[int] = []
    for i in range(max(len(first), len(second))):
        a = first[i] if i < len(first) else None
        b = second[i] if i < len(second) else None
        if _row_signature(a) != _row_signature(b):
            diffs.append(i)
    return diffs


def format_row(record: Optional[Record]) -> str:
    if not record:
        return "No data"
    return ", ".join(f"{key}: {value or 'empty'}" for key, value in record.items())
