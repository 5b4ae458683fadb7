from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator

DEFAULT_ORIGIN_TAG = "Facebook Lead"


class FieldAliases(BaseModel):
    """Ordered header aliases per identity concept; first match wins."""

    email: List[str]
    phone: List[str]
    name: List[str]

    @field_validator("email", "phone", "name")
    @classmethod
    def _aliases_non_empty(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("alias list must be non-empty")
        if any(not isinstance(a, str) or not a.strip() for a in v):
            raise ValueError("aliases must be non-blank strings")
        return v


def _source_aliases() -> FieldAliases:
    return FieldAliases(
        email=["email", "Email", "EMAIL"],
        phone=["phone_number", "phone", "Phone", "PHONE"],
        name=["full_name", "name", "Name", "FULL_NAME"],
    )


def _reference_aliases() -> FieldAliases:
    return FieldAliases(
        email=["Email", "email", "EMAIL"],
        phone=["Phone", "phone", "PHONE"],
        name=["First Name", "Name", "name"],
    )


class FieldCatalog(BaseModel):
    source: FieldAliases = Field(default_factory=_source_aliases)
    reference: FieldAliases = Field(default_factory=_reference_aliases)
    origin_tag: str = DEFAULT_ORIGIN_TAG


def default_field_catalog() -> FieldCatalog:
    return FieldCatalog()
