from __future__ import annotations

from typing import Any, Dict, List

Record = Dict[str, Any]

_NEEDS_QUOTES = (",", '"', "\n", "\r")


def _render_value(value: Any) -> str:
    if value is None:
        return ""
    text = str(value)
    if any(ch in text for ch in _NEEDS_QUOTES):
        return '"' + text.replace('"', '""') + '"'
    return text


def serialize_to_delimited_text(dataset: List[Record]) -> str:
    """
    Render records as comma-delimited text.

    Header comes from the first record's field names. Missing and None values
    render as empty fields. Rows are joined with "\\n" (no trailing newline).
    """
    if not dataset:
        return ""
    headers = list(dataset[0].keys())
    rows = [",".join(_render_value(h) for h in headers)]
    for record in dataset:
        rows.append(",".join(_render_value(record.get(h)) for h in headers))
    return "\n".join(rows)
