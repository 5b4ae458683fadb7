"""
Session: one comparison at a time, with its export handles.

Each compare() discards the previous result and releases its exports before
computing the next one. close() releases everything.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from .catalog.models import FieldCatalog
from .export.handle import ExportHandle, create_export
from .reconcile.engine import ReconciliationResult, reconcile
from .reconcile.search import filter_records

Record = Dict[str, Any]

COMPARISON_FAILED_MESSAGE = (
    "An error occurred while comparing the leads. Please check your CSV files."
)
MISSING_FILENAME = "missing_facebook_leads.csv"
COMBINED_FILENAME = "combined_leads.csv"


class ComparisonFailed(Exception):
    """Raised when a comparison cannot be completed."""

    def __init__(self, message: str = COMPARISON_FAILED_MESSAGE):
        super().__init__(message)


class ComparisonSession:
    def __init__(
        self,
        catalog: Optional[FieldCatalog] = None,
        export_dir: Optional[Path] = None,
        missing_filename: str = MISSING_FILENAME,
        combined_filename: str = COMBINED_FILENAME,
    ):
        self.catalog = catalog
        self.export_dir = export_dir
        self.missing_filename = missing_filename
        self.combined_filename = combined_filename
        self.result: Optional[ReconciliationResult] = None
        self.missing_export: Optional[ExportHandle] = None
        self.combined_export: Optional[ExportHandle] = None

    def compare(self, source: List[Record], reference: List[Record]) -> ReconciliationResult:
        self._reset()
        try:
            result = reconcile(source, reference, self.catalog)
            if result.has_unmatched:
                self.missing_export = create_export(
                    result.unmatched, self.missing_filename, self.export_dir
                )
                self.combined_export = create_export(
                    result.combined, self.combined_filename, self.export_dir
                )
        except Exception as e:
            self._release_exports()
            raise ComparisonFailed() from e

        self.result = result
        return result

    def search(self, term: Optional[str]) -> List[Record]:
        if self.result is None:
            return []
        return filter_records(self.result.unmatched, term)

    def exports(self) -> List[ExportHandle]:
        return [h for h in (self.missing_export, self.combined_export) if h is not None]

    def _release_exports(self) -> None:
        for handle in self.exports():
            handle.release()
        self.missing_export = None
        self.combined_export = None

    def _reset(self) -> None:
        self._release_exports()
        self.result = None

    def close(self) -> None:
        self._reset()

    def __enter__(self) -> "ComparisonSession":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
