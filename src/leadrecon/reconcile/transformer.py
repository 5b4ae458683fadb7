"""
Transformer: Convert unmatched source records to the reference (CRM) shape.
"""
from __future__ import annotations

from typing import Any, Dict, List, Tuple

from .fields import FieldMap

Record = Dict[str, Any]

FIRST_NAME_FIELD = "First Name"
LAST_NAME_FIELD = "Last Name"
TAGS_FIELD = "Tags"


def reference_template(reference: List[Record], fields: FieldMap) -> List[str]:
    """
    Field names every combined record carries.

    Taken from the first reference record; an empty reference dataset falls
    back to its detected email and phone field names.
    """
    if reference:
        return list(reference[0].keys())
    return [fields.email, fields.phone]


def split_full_name(value: str) -> Tuple[str, str]:
    """Split on single spaces: first token, then the rest re-joined."""
    parts = value.split(" ")
    return parts[0], " ".join(parts[1:])


def project_to_reference(
    record: Record,
    template: List[str],
    source_fields: FieldMap,
    reference_fields: FieldMap,
    origin_tag: str,
) -> Record:
    """
    Build a reference-shaped record from an unmatched source record.

    Email and phone are copied raw (not normalized). Name split and origin
    tag are only applied when the template declares the literal
    "First Name" / "Last Name" / "Tags" fields.
    """
    projected: Record = {key: "" for key in template}

    if reference_fields.email in projected:
        projected[reference_fields.email] = record.get(source_fields.email) or ""
    if reference_fields.phone in projected:
        projected[reference_fields.phone] = record.get(source_fields.phone) or ""

    _apply_name_split(projected, record, source_fields, reference_fields)
    _apply_origin_tag(projected, origin_tag)
    return projected


def _apply_name_split(
    projected: Record,
    record: Record,
    source_fields: FieldMap,
    reference_fields: FieldMap,
) -> None:
    if reference_fields.name not in projected:
        return
    full_name = record.get(source_fields.name)
    if not full_name:
        return
    first, last = split_full_name(str(full_name))
    if FIRST_NAME_FIELD in projected:
        projected[FIRST_NAME_FIELD] = first
    if LAST_NAME_FIELD in projected:
        projected[LAST_NAME_FIELD] = last


def _apply_origin_tag(projected: Record, origin_tag: str) -> None:
    if TAGS_FIELD in projected:
        projected[TAGS_FIELD] = origin_tag
