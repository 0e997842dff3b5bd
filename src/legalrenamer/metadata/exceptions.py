"""Failure types raised by the metadata extraction collaborator.

The naming engine never raises, but getting metadata out of Gemini can fail in
ways the caller has to tell apart: a bad API key stops the whole batch, a
transient rate limit affects one file, and a garbled response is worth reporting
per file. Every failure derives from ExtractionError so callers that don't care
about the distinction can catch just that.
"""


class ExtractionError(Exception):
    """Base class for metadata extraction failures."""


class AuthenticationError(ExtractionError):
    """The API key was missing, invalid, or lacks permission for the model."""


class RateLimitedError(ExtractionError):
    """A transient rate limit (HTTP 429) was hit; retrying later may succeed."""


class QuotaExhaustedError(ExtractionError):
    """The account's quota is used up; further requests will fail until it resets."""


class MalformedResponseError(ExtractionError):
    """The model answered, but not with usable JSON metadata."""
