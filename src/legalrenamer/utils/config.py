"""Configuration management for LegalRenamer.

This module provides access to the Gemini API key and the handful of tunable
settings through environment variables. A ``.env`` file in the working directory
is loaded at import time, so local development only needs that file.

Environment Variable Setup:
    Create a .env file in the project root with these variables:
    ```
    GEMINI_API_KEY=your_gemini_api_key_here
    GEMINI_MODEL=gemini-flash-lite-latest          # optional
    LEGALRENAMER_MAX_FILE_SIZE_MB=20               # optional
    LEGALRENAMER_MODE=standard                     # optional: standard|legislative
    ```

    ``API_KEY`` is accepted as a fallback for ``GEMINI_API_KEY``.

Python Learning Notes:
    - os.getenv() safely reads environment variables without raising errors
    - load_dotenv() copies values from .env into os.environ without overriding
      variables that are already set
    - ValueError is raised for a missing required credential to fail fast
    - dataclass field(default_factory=...) evaluates the environment when an
      instance is created, not when the module is imported
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from ..metadata.schema import RenamingMode

load_dotenv()

DEFAULT_MODEL_NAME = "gemini-flash-lite-latest"
DEFAULT_MAX_FILE_SIZE_MB = 20


def get_gemini_api_key() -> str:
    """Get the Google Gemini API key from environment variables.

    Gemini reads each document (PDF or image) and returns the date, number,
    agency, type and summary used to build the new filename. Keys are issued at
    https://aistudio.google.com/app/apikey.

    Security Notes:
        - Store the key in a .env file, never commit it to version control
        - Free-tier keys have per-minute and per-day quotas; see
          https://aistudio.google.com/app/plan_information

    Returns:
        str: The API key from GEMINI_API_KEY, or from API_KEY when the former
            is not set.

    Raises:
        ValueError: If neither GEMINI_API_KEY nor API_KEY is set to a
            non-empty value.

    Example Usage:
        ```python
        from legalrenamer.utils.config import get_gemini_api_key

        try:
            api_key = get_gemini_api_key()
        except ValueError as e:
            logger.error(f"Configuration error: {e}")
        ```
    """
    key = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")

    if not key:
        raise ValueError(
            "GEMINI_API_KEY not found in environment variables. "
            "Please set it in your .env file or pass --api-key."
        )

    return key


def _env_mode() -> RenamingMode:
    value = os.getenv("LEGALRENAMER_MODE", RenamingMode.STANDARD.value).strip().lower()
    try:
        return RenamingMode(value)
    except ValueError:
        raise ValueError(
            f"LEGALRENAMER_MODE must be 'standard' or 'legislative', got {value!r}"
        ) from None


@dataclass
class RenamerConfig:
    """
    Runtime settings for extraction and renaming.

    Values default to environment variables and can be overridden per instance.

    Attributes:
        model_name: Gemini model used for extraction.
        max_file_size_mb: Files larger than this are skipped before upload.
        default_mode: Naming mode used when the caller does not choose one.

    Example:
        >>> config = RenamerConfig(max_file_size_mb=5)
        >>> config.max_file_size_bytes
        5242880
    """

    model_name: str = field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", DEFAULT_MODEL_NAME)
    )
    max_file_size_mb: int = field(
        default_factory=lambda: int(
            os.getenv("LEGALRENAMER_MAX_FILE_SIZE_MB", str(DEFAULT_MAX_FILE_SIZE_MB))
        )
    )
    default_mode: RenamingMode = field(default_factory=_env_mode)

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024
