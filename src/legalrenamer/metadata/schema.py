"""
Pydantic schemas for extracted legal-document metadata.

This module defines the record the AI extractor produces and the naming engine
consumes, plus the enumeration that selects a filename template. Pydantic gives us
runtime validation of the JSON returned by Gemini and a single place to coerce the
loose shapes the model sometimes emits (``null`` instead of ``""``, camelCase keys).

The schemas are designed to support:
    - Direct validation of Gemini's camelCase JSON (``docNumber``, ``isDraft``)
    - Pythonic snake_case attribute access everywhere else
    - Tolerance of missing or null fields, since the naming engine is total

Python Learning Notes:
    - Field(alias=...) maps an external key name to a Python attribute name
    - populate_by_name=True accepts both the alias and the attribute name
    - field_validator(..., mode="before") runs before type validation, which is
      the right hook for turning None into an empty string
    - frozen=True makes instances immutable (and hashable)
    - Inheriting from (str, Enum) makes enum members compare equal to their values
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RenamingMode(str, Enum):
    """
    Filename template family selected by the caller.

    STANDARD is the general-purpose layout (date first, or "year number.suffix" for
    formally numbered documents). LEGISLATIVE puts year and number first and adds an
    underscore-prefixed document-type abbreviation, the layout used for laws,
    decrees and circulars.
    """

    STANDARD = "standard"
    LEGISLATIVE = "legislative"


class DocumentMetadata(BaseModel):
    """
    Metadata extracted from a single legal document.

    Every field is optional and defaults to an empty value. Gemini is asked for all
    of them, but partial extractions still have to produce a usable filename, so
    validation never rejects a record for missing content.

    Python Learning Notes:
        - model_validate() builds an instance from a dict (e.g. parsed JSON)
        - model_dump(by_alias=True) produces the camelCase form again
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    date: str = Field(
        default="",
        description="Issue date in YYYYMMDD form; may be empty or malformed",
    )
    doc_number: str = Field(
        default="",
        alias="docNumber",
        description="Document number, canonically '<number>/<year>/<suffix>' (e.g. '12/2024/TT-BXD')",
    )
    agency: str = Field(
        default="",
        description="Full issuing-body name in Vietnamese (e.g. 'Ủy ban nhân dân tỉnh Quảng Ninh')",
    )
    summary: str = Field(
        default="",
        description="Short synopsis (trích yếu), typically 10-15 words",
    )
    doc_type: str = Field(
        default="",
        alias="docType",
        description="Document type label (e.g. 'Nghị định', 'Thông tư')",
    )
    is_draft: bool = Field(
        default=False,
        alias="isDraft",
        description="True when the document is a draft (dự thảo)",
    )

    @field_validator("date", "doc_number", "agency", "summary", "doc_type", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        """Turn None into "" and numbers into their string form."""
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("is_draft", mode="before")
    @classmethod
    def _coerce_draft(cls, value: Any) -> Any:
        if value is None:
            return False
        return value
