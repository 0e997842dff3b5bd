"""Deterministic filename generation for Vietnamese legal documents.

This module turns a DocumentMetadata record into a compact, canonical filename stem
(no extension, no path separators). It is the heart of LegalRenamer: everything
else in the package exists to feed it metadata or to act on the name it returns.

Filename templates, chosen by (mode, is_draft, document-number shape):

    draft (any mode)        "[Draft] <date> <summary>"
    legislative             "<year> <number> <agency> _<doctype> <summary>"
    standard, numbered      "<year> <number>.<suffix> <summary>"
    standard, otherwise     "<date> <number> <agency> _<summary>"

Here "numbered" means the document number looks like ``12/2024/TT-BXD`` (number,
four-digit year, suffix). Examples:

    >>> generate_filename(DocumentMetadata(
    ...     date="20240115", doc_number="254 / 2025 / QH15", agency="Quốc hội",
    ...     summary="phê duyệt chủ trương đầu tư dự án", doc_type="Nghị quyết",
    ... ), RenamingMode.LEGISLATIVE)
    '2025 254 QH _NQ CTDT du an'

Contract:
    - Pure: the output depends only on (metadata, mode, dictionaries). No I/O, no
      logging, no mutable state, so the generator is safe to share across threads.
    - Total: malformed or missing fields degrade to placeholders ("00", empty
      tokens) instead of raising. Callers rename files right after calling this,
      and a half-complete extraction must still yield a usable name.

Python Learning Notes:
    - Regular expressions are compiled once in __init__ or at module level
    - re.escape() makes dictionary phrases safe to embed in a pattern
    - Passing a function as the replacement to Pattern.sub() avoids having
      backslashes in the replacement text interpreted as group references
    - typing.NamedTuple gives a lightweight immutable record with named fields
"""

import re
import unicodedata
from typing import List, NamedTuple, Optional, Pattern, Tuple

from ..metadata.schema import DocumentMetadata, RenamingMode
from .dictionaries import DEFAULT_DICTIONARIES, AbbreviationDictionaries
from .normalization import clean_text, collapse_whitespace, strip_diacritics

NUMBER_PLACEHOLDER = "00"
DRAFT_PREFIX = "[Draft]"

SLASH_WITH_SPACES = re.compile(r"\s*/\s*")
LEGISLATIVE_NUMBER = re.compile(r"(\d+)/(\d{4})/([A-Za-z0-9.\-À-ỹ]+)")
FIRST_DIGITS = re.compile(r"\d+")
NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")
TRAILING_DOTS = re.compile(r"[.\s]+$")

# Administrative-level words removed from the location part of an agency name,
# in accented and unaccented spellings. Multi-word forms come first.
ADMIN_LEVEL_WORDS = re.compile(
    r"\b(?:thành phố|thanh pho|thị xã|thi xa|thị trấn|thi tran|"
    r"tỉnh|tinh|quận|quan|huyện|huyen|phường|phuong|xã|xa|tp)\b\.?",
    re.IGNORECASE,
)
ADMIN_LEVEL_PREFIX = re.compile(r"^(?:tỉnh|thành phố|thanh pho|tp)\b", re.IGNORECASE)
LOCATION_SEPARATORS = re.compile(r"[\s.,\-]+")


class LegislativeNumber(NamedTuple):
    """Parts of a document number shaped like ``<number>/<year>/<suffix>``."""

    number: str
    year: str
    suffix: str


def _nfc(text: str) -> str:
    return unicodedata.normalize("NFC", text or "")


class FilenameGenerator:
    """
    Build canonical filename stems from extracted document metadata.

    The generator is bound to one AbbreviationDictionaries bundle. At construction it
    pre-sorts and pre-compiles everything the per-call path needs, so instances are
    cheap to call and immutable afterwards.

    Attributes:
        dictionaries (AbbreviationDictionaries): The lookup tables in use.

    Example Usage:
        generator = FilenameGenerator()
        stem = generator.generate(metadata, RenamingMode.STANDARD)
        new_path = path.with_name(stem + path.suffix)
    """

    def __init__(self, dictionaries: AbbreviationDictionaries = DEFAULT_DICTIONARIES):
        self.dictionaries = dictionaries

        # Longest key first, so "thủ tướng chính phủ" wins over "chính phủ".
        self._agency_keys: List[Tuple[str, str]] = sorted(
            ((_nfc(key).lower(), token) for key, token in dictionaries.agencies.items()),
            key=lambda item: len(item[0]),
            reverse=True,
        )

        self._summary_patterns: List[Tuple[Pattern[str], str]] = [
            (re.compile(re.escape(key), re.IGNORECASE), token)
            for key, token in sorted(
                ((_nfc(key), token) for key, token in dictionaries.summary_phrases.items()),
                key=lambda item: len(item[0]),
                reverse=True,
            )
        ]

        # Document types keep dictionary order: first match wins.
        self._doc_type_items: List[Tuple[str, str]] = [
            (_nfc(key).lower(), token) for key, token in dictionaries.doc_types.items()
        ]

        fillers = sorted(
            (_nfc(phrase) for phrase in dictionaries.filler_phrases if phrase),
            key=len,
            reverse=True,
        )
        self._filler_pattern: Optional[Pattern[str]] = (
            re.compile(
                r"^(?:" + "|".join(re.escape(phrase) for phrase in fillers) + r")\s+",
                re.IGNORECASE,
            )
            if fillers
            else None
        )

    def format_agency(self, full_agency: str) -> str:
        """Abbreviate an issuing-agency name, including its location.

        The agency dictionary is scanned longest key first and the first key found
        anywhere in the lowercased name wins. Whatever follows the matched span is
        the location. Administrative words (tỉnh, huyện, phường, ...) are dropped
        from it, and the initials of the remaining words form an acronym.

        Args:
            full_agency (str): Issuing body as extracted, e.g.
                "Ủy ban nhân dân thành phố Hà Nội".

        Returns:
            str: "<abbr> <acronym>" (e.g. "UBND HN"), just one of the two when the
                other is missing, or the NFC-normalized input when nothing matches.

        Example:
            >>> FilenameGenerator().format_agency("Bộ Xây dựng")
            'BXD'
            >>> FilenameGenerator().format_agency("Ủy ban nhân dân tỉnh Quảng Ninh")
            'UBND QN'
            >>> FilenameGenerator().format_agency("Tỉnh Bắc Ninh")
            'BN'
        """
        normalized = _nfc(full_agency).strip()
        lowered = normalized.lower()

        agency_abbr = ""
        location = ""
        for key, token in self._agency_keys:
            index = lowered.find(key)
            if index != -1:
                agency_abbr = token
                location = normalized[index + len(key):]
                break

        if not agency_abbr and ADMIN_LEVEL_PREFIX.match(normalized):
            location = normalized

        acronym = self._location_acronym(location)

        if agency_abbr and acronym:
            return f"{agency_abbr} {acronym}"
        return agency_abbr or acronym or normalized

    def _location_acronym(self, location: str) -> str:
        remainder = ADMIN_LEVEL_WORDS.sub("", location)
        remainder = LOCATION_SEPARATORS.sub(" ", remainder).strip()
        if not remainder:
            return ""
        words = clean_text(remainder).split()
        return "".join(word[0].upper() for word in words)

    def format_summary(self, summary: str) -> str:
        """Abbreviate a document summary (trích yếu).

        One leading filler phrase ("về việc", "phê duyệt", ...) is removed, then every
        summary key phrase is replaced by its token wherever it occurs. Replacement is
        case-insensitive, longest phrase first, and exhaustive: a phrase may fire
        several times and many phrases may fire on one summary. The result keeps its
        diacritics; generate() sanitizes it.

        Example:
            >>> FilenameGenerator().format_summary("Về việc điều chỉnh chủ trương đầu tư khu đô thị")
            'DC CTDT KDT'
        """
        text = _nfc(summary).strip()
        if self._filler_pattern is not None:
            text = self._filler_pattern.sub("", text, count=1)

        for pattern, token in self._summary_patterns:
            text = pattern.sub(lambda _match, token=token: token, text)

        return text

    def format_doc_type(self, doc_type: str) -> str:
        """Return the abbreviation of the first doc-type key contained in ``doc_type``.

        Unlike agencies and summaries this is a first-match scan in dictionary order,
        not a longest match. Returns "" when nothing matches.
        """
        lowered = _nfc(doc_type).lower()
        if not lowered.strip():
            return ""
        for key, token in self._doc_type_items:
            if key in lowered:
                return token
        return ""

    @staticmethod
    def parse_legislative_number(doc_number: str) -> Optional[LegislativeNumber]:
        """Split a formal document number such as ``12/2024/TT-BXD``.

        Whitespace around slashes is ignored ("254 / 2025 / QH15" parses). The suffix
        may contain letters (accented ones included), digits, dots and dashes.

        Returns:
            Optional[LegislativeNumber]: (number, year, suffix), or None when the
                number does not have the legislative shape.
        """
        cleaned = SLASH_WITH_SPACES.sub("/", _nfc(doc_number).strip())
        match = LEGISLATIVE_NUMBER.fullmatch(cleaned)
        if match is None:
            return None
        return LegislativeNumber(*match.groups())

    @staticmethod
    def _first_number(doc_number: str) -> str:
        match = FIRST_DIGITS.search(doc_number or "")
        return match.group(0) if match else NUMBER_PLACEHOLDER

    def generate(
        self, metadata: DocumentMetadata, mode: RenamingMode = RenamingMode.STANDARD
    ) -> str:
        """Generate the filename stem for ``metadata`` under ``mode``.

        Args:
            metadata (DocumentMetadata): Extracted fields; any of them may be empty.
            mode (RenamingMode): Template family. Plain strings "standard" and
                "legislative" are accepted too; anything else is treated as standard.

        Returns:
            str: The stem, with no extension, no unsafe characters, no leading or
                trailing whitespace and no trailing dot.
        """
        summary = clean_text(self.format_summary(metadata.summary))
        date = metadata.date or ""

        if metadata.is_draft:
            draft_date = clean_text(date) if len(date) == 8 else ""
            return self._finalize(f"{DRAFT_PREFIX} {draft_date} {summary}")

        agency = clean_text(self.format_agency(metadata.agency))
        legislative = self.parse_legislative_number(metadata.doc_number)

        if mode == RenamingMode.LEGISLATIVE:
            if legislative is not None:
                number, year = legislative.number, legislative.year
            else:
                number = self._first_number(metadata.doc_number)
                year = clean_text(date[:4])
            doc_type = clean_text(self.format_doc_type(metadata.doc_type))
            return self._finalize(f"{year} {number} {agency} _{doc_type} {summary}")

        if legislative is not None:
            suffix = NON_ALPHANUMERIC.sub("", strip_diacritics(legislative.suffix))
            number = f"{legislative.number}.{suffix}" if suffix else legislative.number
            return self._finalize(f"{legislative.year} {number} {summary}")

        number = self._first_number(metadata.doc_number)
        return self._finalize(f"{clean_text(date)} {number} {agency} _{summary}")

    @staticmethod
    def _finalize(name: str) -> str:
        # Filenames must not end in a dot (Windows drops it silently).
        return TRAILING_DOTS.sub("", collapse_whitespace(name))


_default_generator = FilenameGenerator()


def generate_filename(
    metadata: DocumentMetadata, mode: RenamingMode = RenamingMode.STANDARD
) -> str:
    """Generate a filename stem using the built-in abbreviation dictionaries."""
    return _default_generator.generate(metadata, mode)
