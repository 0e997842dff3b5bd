"""Metadata model and AI extraction for legal documents.

This package defines the metadata record that flows from the AI extractor into the
filename engine, and the extractor itself.

Components:
- DocumentMetadata / RenamingMode: pydantic record and naming-mode enum (schema.py)
- ExtractionError and subclasses: classified extraction failures (exceptions.py)
- GeminiMetadataExtractor: Gemini-backed extractor (gemini_extractor.py)

Only the schema and exceptions are re-exported here. The extractor pulls in the
Google client library, so import it from its module when you need it; the naming
engine can then be used without loading the network stack.

Example Usage:
    from legalrenamer.metadata import DocumentMetadata, RenamingMode
    from legalrenamer.metadata.gemini_extractor import GeminiMetadataExtractor

    extractor = GeminiMetadataExtractor()
    metadata = extractor.extract(pdf_bytes, "application/pdf")
"""

from .exceptions import (
    AuthenticationError,
    ExtractionError,
    MalformedResponseError,
    QuotaExhaustedError,
    RateLimitedError,
)
from .schema import DocumentMetadata, RenamingMode

__all__ = [
    "DocumentMetadata",
    "RenamingMode",
    "ExtractionError",
    "AuthenticationError",
    "RateLimitedError",
    "QuotaExhaustedError",
    "MalformedResponseError",
]
