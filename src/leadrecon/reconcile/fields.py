"""
Fields: detect which header carries each identity concept in a dataset.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from ..catalog.models import FieldAliases

Record = Dict[str, Any]


@dataclass(frozen=True)
class FieldMap:
    email: str
    phone: str
    name: str


def determine_field(sample_record: Optional[Record], candidates: Sequence[str]) -> str:
    """
    Return the first candidate present as a key of sample_record.

    Falls back to candidates[0] when there is no sample (empty dataset) or no
    candidate is present; callers must tolerate a name missing from the data.
    """
    if not sample_record:
        return candidates[0]
    for name in candidates:
        if name in sample_record:
            return name
    return candidates[0]


def detect_fields(dataset: List[Record], aliases: FieldAliases) -> FieldMap:
    sample = dataset[0] if dataset else None
    return FieldMap(
        email=determine_field(sample, aliases.email),
        phone=determine_field(sample, aliases.phone),
        name=determine_field(sample, aliases.name),
    )
