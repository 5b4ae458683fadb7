"""
Export package: CSV text rendering and downloadable export handles.
"""
from .csv_text import serialize_to_delimited_text
from .handle import ExportHandle, ExportReleasedError, create_export

__all__ = [
    "ExportHandle",
    "ExportReleasedError",
    "create_export",
    "serialize_to_delimited_text",
]
