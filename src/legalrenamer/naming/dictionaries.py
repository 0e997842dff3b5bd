"""Abbreviation dictionaries used by the filename engine.

Vietnamese administrative practice abbreviates agency names and recurring legal
phrases to their initials ("Bộ Xây dựng" -> "BXD", "chủ trương đầu tư" -> "CTDT").
This module holds those tables as read-only mappings, plus the short list of filler
phrases that are dropped from the start of a summary.

Keys are lowercase, NFC-normalized Vietnamese with diacritics. Values are the
abbreviation tokens exactly as they should appear in a filename. Key order carries
no meaning for AGENCY_ABBREVIATIONS and SUMMARY_ABBREVIATIONS because the engine scans
them longest-key-first. DOC_TYPE_ABBREVIATIONS is different: the first matching key
wins, so compound types are listed before the plain type they contain.

Python Learning Notes:
    - types.MappingProxyType wraps a dict in a read-only view; item assignment
      raises TypeError, so the tables cannot drift at runtime
    - A frozen dataclass bundles the tables so tests can inject their own
      dictionaries without touching module globals
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

AGENCY_ABBREVIATIONS: Mapping[str, str] = MappingProxyType(
    {
        # Central bodies
        "quốc hội": "QH",
        "chính phủ": "CP",
        "thủ tướng chính phủ": "TTg",
        "văn phòng chính phủ": "VPCP",
        "thanh tra chính phủ": "TTCP",
        "kiểm toán nhà nước": "KTNN",
        "ngân hàng nhà nước việt nam": "NHNN",
        "tòa án nhân dân tối cao": "TANDTC",
        "viện kiểm sát nhân dân tối cao": "VKSNDTC",
        # Ministries
        "bộ xây dựng": "BXD",
        "bộ tài chính": "BTC",
        "bộ tài nguyên và môi trường": "BTNMT",
        "bộ nông nghiệp và môi trường": "BNNMT",
        "bộ nông nghiệp và phát triển nông thôn": "BNNPTNT",
        "bộ kế hoạch và đầu tư": "BKHDT",
        "bộ giáo dục và đào tạo": "BGDDT",
        "bộ y tế": "BYT",
        "bộ nội vụ": "BNV",
        "bộ tư pháp": "BTP",
        "bộ lao động thương binh và xã hội": "BLDTBXH",
        "bộ văn hóa thể thao và du lịch": "BVHTTDL",
        "bộ thông tin và truyền thông": "BTTTT",
        "bộ khoa học và công nghệ": "BKHCN",
        "bộ giao thông vận tải": "BGTVT",
        "bộ công thương": "BCT",
        "bộ ngoại giao": "BNG",
        "bộ công an": "BCA",
        "bộ quốc phòng": "BQP",
        # Provincial departments
        "sở xây dựng": "SXD",
        "sở tài chính": "STC",
        "sở nông nghiệp và phát triển nông thôn": "SNNPTNT",
        "sở nông nghiệp và môi trường": "SNNMT",
        "sở tài nguyên và môi trường": "STNMT",
        "sở quy hoạch kiến trúc": "SQHKT",
        "sở giao thông vận tải": "SGTVT",
        "sở công thương": "SCT",
        "sở kế hoạch và đầu tư": "SKHDT",
        "sở giáo dục và đào tạo": "SGDDT",
        "sở y tế": "SYT",
        "sở nội vụ": "SNV",
        "sở tư pháp": "STP",
        "sở lao động thương binh và xã hội": "SLDTBXH",
        "sở văn hóa thể thao và du lịch": "SVHTTDL",
        "sở thông tin và truyền thông": "STTTT",
        "sở khoa học và công nghệ": "SKHCN",
        # Local bodies and boards
        "trung tâm phát triển quỹ đất": "TTPTQD",
        "hội đồng thẩm định giá đất": "HDTDGD",
        "ban quản lý dự án": "BQLDA",
        "văn phòng đăng ký đất đai": "VPDKDD",
        "ủy ban nhân dân": "UBND",
        "uỷ ban nhân dân": "UBND",
        "hội đồng nhân dân": "HDND",
    }
)

SUMMARY_ABBREVIATIONS: Mapping[str, str] = MappingProxyType(
    {
        "điều chỉnh chủ trương đầu tư": "DC CTDT",
        "chủ trương đầu tư": "CTDT",
        "điều chỉnh cục bộ": "DCCB",
        "quy hoạch chi tiết": "QHCT",
        "quy hoạch chung": "QHC",
        "quy hoạch phân khu": "QHPK",
        "khu đô thị": "KDT",
        "khu dân cư": "KDC",
        "sửa đổi bổ sung": "SDBS",
        "sửa đổi, bổ sung": "SDBS",
        "quyền sử dụng đất": "QSDD",
        "sử dụng đất": "SDD",
        "hình thành trong tương lai": "HTTTL",
        "chủ đầu tư": "CDT",
        "kết luận thanh tra": "KLTT",
        "phương án kiến trúc": "PAKT",
        "giải phóng mặt bằng": "GPMB",
        "tái định cư": "TDC",
        "cấp phép xây dựng": "CPXD",
        "nghiệm thu": "NT",
        "tờ trình": "TTr",
        "báo cáo": "BC",
        "kết luận": "KL",
        "thông báo": "TB",
        "nghị quyết": "NQ",
        "nghị định": "ND",
        "thông tư": "TT",
        "quyết định": "QD",
    }
)

# First match wins: compound types must precede the plain type they contain.
DOC_TYPE_ABBREVIATIONS: Mapping[str, str] = MappingProxyType(
    {
        "nghị quyết liên tịch": "NQLT",
        "thông tư liên tịch": "TTLT",
        "hiến pháp": "HP",
        "bộ luật": "BL",
        "pháp lệnh": "PL",
        "luật": "L",
        "nghị quyết": "NQ",
        "nghị định": "ND",
        "thông tư": "TT",
        "quyết định": "QD",
        "chỉ thị": "CT",
        "công văn": "CV",
        "thông báo": "TB",
        "kế hoạch": "KH",
        "tờ trình": "TTr",
        "báo cáo": "BC",
        "kết luận": "KL",
    }
)

FILLER_PHRASES: Tuple[str, ...] = (
    "về việc",
    "về",
    "phê duyệt",
    "ban hành",
    "chấp thuận",
)


@dataclass(frozen=True)
class AbbreviationDictionaries:
    """
    Bundle of the lookup tables consumed by FilenameGenerator.

    The defaults are the module-level tables above. Tests and callers with
    organization-specific vocabulary can build their own instance and pass it to
    the generator instead of mutating shared state.

    Attributes:
        agencies: Agency-name fragment -> abbreviation (longest match wins).
        summary_phrases: Summary key phrase -> abbreviation (all matches replaced).
        doc_types: Document-type label -> abbreviation (first match wins).
        filler_phrases: Leading phrases stripped from summaries.

    Example:
        >>> from legalrenamer.naming import FilenameGenerator
        >>> custom = AbbreviationDictionaries(agencies={"công ty abc": "ABC"})
        >>> FilenameGenerator(custom).format_agency("Công ty ABC")
        'ABC'
    """

    agencies: Mapping[str, str] = field(
        default_factory=lambda: AGENCY_ABBREVIATIONS
    )
    summary_phrases: Mapping[str, str] = field(
        default_factory=lambda: SUMMARY_ABBREVIATIONS
    )
    doc_types: Mapping[str, str] = field(
        default_factory=lambda: DOC_TYPE_ABBREVIATIONS
    )
    filler_phrases: Tuple[str, ...] = field(default=FILLER_PHRASES)


DEFAULT_DICTIONARIES = AbbreviationDictionaries()
