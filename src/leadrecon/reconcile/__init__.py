"""
Reconcile package: Match source leads against reference leads and build the
combined dataset.
"""
from .diff import diff_rows, format_row
from .engine import ReconciliationResult, build_identity_index, find_unmatched, reconcile
from .fields import FieldMap, detect_fields, determine_field
from .normalize import normalize_email, normalize_phone
from .search import filter_records
from .transformer import project_to_reference, split_full_name

__all__ = [
    "FieldMap",
    "ReconciliationResult",
    "build_identity_index",
    "detect_fields",
    "determine_field",
    "diff_rows",
    "filter_records",
    "find_unmatched",
    "format_row",
    "normalize_email",
    "normalize_phone",
    "project_to_reference",
    "reconcile",
    "split_full_name",
]
