from __future__ import annotations

from typing import Any, Dict, List, Optional

Record = Dict[str, Any]


def filter_records(records: List[Record], term: Optional[str]) -> List[Record]:
    """Records with any value containing term (case-insensitive)."""
    if not term or not term.strip():
        return list(records)
    needle = term.lower()
    return [
        record
        for record in records
        if any(needle in str(value).lower() for value in record.values())
    ]
