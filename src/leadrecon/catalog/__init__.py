"""
Catalog package: header alias lists used to detect identity fields.
"""
from .loaders import load_field_catalog
from .models import DEFAULT_ORIGIN_TAG, FieldAliases, FieldCatalog, default_field_catalog

__all__ = [
    "DEFAULT_ORIGIN_TAG",
    "FieldAliases",
    "FieldCatalog",
    "default_field_catalog",
    "load_field_catalog",
]
