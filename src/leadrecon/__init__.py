"""
leadrecon: find leads from an ad-platform export that are missing from a CRM
export, matching on normalized email or phone, and build a combined CSV for
re-import.
"""
from .reconcile import ReconciliationResult, reconcile
from .session import ComparisonFailed, ComparisonSession

__version__ = "0.1.0"

__all__ = [
    "ComparisonFailed",
    "ComparisonSession",
    "ReconciliationResult",
    "reconcile",
]
