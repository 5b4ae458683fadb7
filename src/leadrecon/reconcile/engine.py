"""
Engine: find source leads missing from the reference dataset and build the
combined re-import dataset.

Identity is multi-key: a source record matches when its normalized email OR
its normalized phone is a key of the reference index.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..catalog.models import FieldCatalog, default_field_catalog
from .fields import FieldMap, detect_fields
from .normalize import normalize_email, normalize_phone
from .transformer import project_to_reference, reference_template

Record = Dict[str, Any]


@dataclass
class ReconciliationResult:
    unmatched: List[Record] = field(default_factory=list)
    combined: List[Record] = field(default_factory=list)
    source_fields: Optional[FieldMap] = None
    reference_fields: Optional[FieldMap] = None

    @property
    def has_unmatched(self) -> bool:
        return len(self.unmatched) > 0

    def counts(self) -> Dict[str, int]:
        return {
            "reference": len(self.combined) - len(self.unmatched),
            "missing": len(self.unmatched),
            "combined": len(self.combined),
        }


def build_identity_index(reference: List[Record], fields: FieldMap) -> Dict[str, Record]:
    """
    Map every non-empty normalized email and phone to its reference record.

    When two records share a key the later one wins; only key presence is
    used for classification.
    """
    index: Dict[str, Record] = {}
    for record in reference:
        email = normalize_email(record.get(fields.email))
        phone = normalize_phone(record.get(fields.phone))
        if email:
            index[email] = record
        if phone:
            index[phone] = record
    return index


def is_matched(record: Record, fields: FieldMap, index: Dict[str, Record]) -> bool:
    email = normalize_email(record.get(fields.email))
    phone = normalize_phone(record.get(fields.phone))
    matched_by_email = bool(email) and email in index
    matched_by_phone = bool(phone) and phone in index
    return matched_by_email or matched_by_phone


def find_unmatched(
    source: List[Record],
    fields: FieldMap,
    index: Dict[str, Record],
) -> List[Record]:
    """Source records (unchanged, in order) with no key in the index."""
    return [record for record in source if not is_matched(record, fields, index)]


def reconcile(
    source: List[Record],
    reference: List[Record],
    catalog: Optional[FieldCatalog] = None,
) -> ReconciliationResult:
    """
    Compare source leads against reference leads.

    Args:
        source: Parsed source rows (e.g. ad-platform export)
        reference: Parsed reference rows (e.g. CRM export)
        catalog: Header aliases and origin tag; defaults when omitted

    Returns:
        ReconciliationResult with unmatched source records and the combined
        dataset (reference rows followed by projected unmatched rows)
    """
    catalog = catalog or default_field_catalog()

    source_fields = detect_fields(source, catalog.source)
    reference_fields = detect_fields(reference, catalog.reference)

    index = build_identity_index(reference, reference_fields)
    unmatched = find_unmatched(source, source_fields, index)

    template = reference_template(reference, reference_fields)
    combined: List[Record] = list(reference)
    for record in unmatched:
        combined.append(
            project_to_reference(
                record,
                template,
                source_fields,
                reference_fields,
                catalog.origin_tag,
            )
        )

    return ReconciliationResult(
        unmatched=unmatched,
        combined=combined,
        source_fields=source_fields,
        reference_fields=reference_fields,
    )
