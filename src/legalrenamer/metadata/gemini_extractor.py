"""Gemini AI-powered metadata extraction for Vietnamese legal documents.

This module sends a document (PDF or image bytes) to Google's Gemini model and
turns the structured JSON answer into a DocumentMetadata record. The record then
feeds the filename engine in ``legalrenamer.naming``.

The extraction follows these steps:
1. Attach the document inline with its MIME type, followed by the instruction prompt
2. Constrain the answer to JSON with a response schema
3. Strip stray markdown fences, parse the JSON, validate it with pydantic
4. Map any failure onto the ExtractionError hierarchy

Unlike the naming engine, extraction can fail, and callers need to know how:
    - AuthenticationError: bad or missing key; every later call will fail too
    - QuotaExhaustedError: hard quota reached; stop the batch
    - RateLimitedError: transient 429; this file can be retried later
    - MalformedResponseError: the model answered with something unusable
There is no retry loop here. Scheduling retries is the caller's business.

Python Learning Notes:
- genai.configure() sets the API key globally for the google.generativeai client
- Inline file parts are plain dicts: {"mime_type": ..., "data": bytes}
- google.api_core.exceptions maps HTTP status codes onto exception classes
  (401 Unauthenticated, 403 PermissionDenied, 429 ResourceExhausted, ...)
- "raise ... from e" keeps the original exception as __cause__ for debugging
"""

import json
from typing import Any, Dict, Optional

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions
from pydantic import ValidationError

from ..utils import get_logger
from ..utils.config import RenamerConfig, get_gemini_api_key
from .exceptions import (
    AuthenticationError,
    ExtractionError,
    MalformedResponseError,
    QuotaExhaustedError,
    RateLimitedError,
)
from .schema import DocumentMetadata

logger = get_logger(__name__)

HARD_QUOTA_MARKER = "exceeded your current quota"
QUOTA_HELP_URL = "https://aistudio.google.com/app/plan_information"

RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "isDraft": {"type": "BOOLEAN"},
        "date": {"type": "STRING"},
        "docNumber": {"type": "STRING"},
        "agency": {"type": "STRING"},
        "docType": {"type": "STRING"},
        "summary": {"type": "STRING"},
    },
    "required": ["isDraft", "date", "docNumber", "agency", "docType", "summary"],
}

EXTRACTION_PROMPT = """Bạn là chuyên gia phân tích văn bản pháp luật Việt Nam. Hãy trích xuất thông tin để đổi tên file theo quy tắc:
1. **isDraft**: True nếu là văn bản DỰ THẢO, False nếu là văn bản chính thức.
2. **date**: YYYYMMDD (Ngày ban hành hoặc ngày dự thảo).
3. **docNumber**: Số hiệu (VD: 12/2024/TT-BXD, 254/2025/QH15). Để trống nếu là dự thảo không số.
4. **agency**: Tên đầy đủ cơ quan ban hành (VD: Quốc hội, Ủy ban nhân dân tỉnh Quảng Ninh).
5. **docType**: Loại văn bản (VD: Luật, Nghị định, Nghị quyết, Thông tư, Quyết định).
6. **summary**: Trích yếu nội dung ngắn gọn (10-15 từ), giữ nguyên các động từ chính như "phê duyệt", "ban hành", "quy định" ở đầu.

Chỉ trả về một đối tượng JSON với đúng các trường trên."""


class GeminiMetadataExtractor:
    """Extract filename metadata from legal documents using Google Gemini.

    One instance wraps one configured model and can be reused for any number of
    documents. Calls are synchronous and independent of each other.

    Python Learning Notes:
    - Uses dependency injection for the API key (can be provided or auto-detected)
    - The response schema makes Gemini return JSON with fixed field names, so
      parsing reduces to json.loads plus pydantic validation

    Attributes:
        api_key (str): Google Gemini API key for authentication
        model_name (str): Gemini model identifier
        model (genai.GenerativeModel): Configured Gemini model instance

    Example Usage:
        extractor = GeminiMetadataExtractor()
        metadata = extractor.extract(pdf_bytes, "application/pdf")
        print(metadata.doc_number)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        config: Optional[RenamerConfig] = None,
    ):
        """Initialize the Gemini metadata extractor.

        Args:
            api_key (Optional[str]): Gemini API key. If None, it is read from the
                environment with get_gemini_api_key().
            config (Optional[RenamerConfig]): Settings supplying the model name.
                Defaults to a RenamerConfig built from the environment.

        Raises:
            ValueError: If no API key is given or found in the environment.
        """
        self.api_key = api_key or get_gemini_api_key()
        self.model_name = (config or RenamerConfig()).model_name
        genai.configure(api_key=self.api_key)

        self.model = genai.GenerativeModel(
            self.model_name,
            generation_config=genai.GenerationConfig(
                response_mime_type="application/json",
                response_schema=RESPONSE_SCHEMA,
                temperature=0,
            ),
        )

    def extract(self, data: bytes, mime_type: str) -> DocumentMetadata:
        """Extract metadata from one document.

        Args:
            data (bytes): Raw file content (PDF or image).
            mime_type (str): MIME type of ``data``, e.g. "application/pdf" or
                "image/jpeg".

        Returns:
            DocumentMetadata: Validated metadata. Fields the model left out are empty.

        Raises:
            ValueError: If ``data`` is empty.
            AuthenticationError: If Gemini rejects the API key.
            QuotaExhaustedError: If the account quota is used up.
            RateLimitedError: If a transient rate limit was hit.
            MalformedResponseError: If the answer is empty, blocked, not JSON, or
                does not fit the schema.
            ExtractionError: For any other API failure.
        """
        if not data:
            raise ValueError("Document content is empty")

        logger.debug(
            "Requesting metadata from %s (%s, %d bytes)",
            self.model_name,
            mime_type,
            len(data),
        )

        try:
            response = self.model.generate_content(
                [{"mime_type": mime_type, "data": data}, EXTRACTION_PROMPT]
            )
        except google_exceptions.GoogleAPIError as e:
            error = self._classify_api_error(e)
            logger.error("Gemini request failed (%s): %s", type(error).__name__, e)
            raise error from e

        metadata = self._parse_metadata(self._response_text(response))
        logger.debug("Extracted metadata: %s", metadata.model_dump(by_alias=True))
        return metadata

    @staticmethod
    def _classify_api_error(error: google_exceptions.GoogleAPIError) -> ExtractionError:
        message = str(error)
        lowered = message.lower()

        if isinstance(
            error, (google_exceptions.Unauthenticated, google_exceptions.PermissionDenied)
        ):
            return AuthenticationError(f"Gemini rejected the API key: {message}")
        if isinstance(error, google_exceptions.InvalidArgument) and "api key" in lowered:
            return AuthenticationError(f"Gemini rejected the API key: {message}")

        if isinstance(error, google_exceptions.ResourceExhausted):
            if HARD_QUOTA_MARKER in lowered:
                return QuotaExhaustedError(
                    f"Gemini API quota exhausted; check {QUOTA_HELP_URL}"
                )
            return RateLimitedError(f"Gemini rate limit hit: {message}")

        return ExtractionError(f"Gemini request failed: {message}")

    @staticmethod
    def _response_text(response: Any) -> str:
        # response.text raises ValueError when the candidate was blocked or empty
        try:
            text = response.text
        except ValueError as e:
            raise MalformedResponseError(f"Gemini returned no usable content: {e}") from e

        if not text or not text.strip():
            raise MalformedResponseError("Gemini returned an empty response")
        return text

    @staticmethod
    def _parse_metadata(response_text: str) -> DocumentMetadata:
        # Strip markdown code fences if present
        text = response_text.strip()
        if text.startswith("```json") and text.endswith("```"):
            text = text[7:-3].strip()
        elif text.startswith("```") and text.endswith("```"):
            text = text[3:-3].strip()

        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            logger.debug("Unparseable response: %s", text[:500])
            raise MalformedResponseError(f"Gemini response is not valid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise MalformedResponseError(
                f"Expected a JSON object, got {type(payload).__name__}"
            )

        try:
            return DocumentMetadata.model_validate(payload)
        except ValidationError as e:
            raise MalformedResponseError(f"Gemini response does not match schema: {e}") from e
