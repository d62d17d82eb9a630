"""
Codes - Language, script and transliteration scheme enumerations

Every member's value is the exact string the name translation service
expects on the wire.
"""

from enum import Enum
from typing import Optional


class CodeEnum(str, Enum):
    """Base for wire-coded enumerations"""

    @classmethod
    def from_code(cls, code: str) -> "CodeEnum":
        """
        Look up a member by wire code or member name (case-insensitive).

        Args:
            code: Wire code (e.g., "eng", "Latn", "bgn") or member name

        Returns:
            Matching enum member

        Raises:
            ValueError: If code is None or matches no member
        """
        member = cls._lookup(code)
        if member is None:
            raise ValueError(f"Unknown {cls.__name__} code: {code!r}")
        return member

    @classmethod
    def _lookup(cls, code) -> Optional["CodeEnum"]:
        if not isinstance(code, str):
            return None
        wanted = code.strip().lower()
        if not wanted:
            return None
        for member in cls:
            if member.value.lower() == wanted or member.name.lower() == wanted:
                return member
        return None

    @classmethod
    def _missing_(cls, value):
        return cls._lookup(value)

    def __str__(self) -> str:
        return self.value


class LanguageCode(CodeEnum):
    """Natural languages (ISO 639-3)"""

    ARABIC = "ara"
    BENGALI = "ben"
    CHINESE = "zho"
    CZECH = "ces"
    DANISH = "dan"
    DUTCH = "nld"
    ENGLISH = "eng"
    FARSI = "fas"
    FINNISH = "fin"
    FRENCH = "fra"
    GERMAN = "deu"
    GREEK = "ell"
    HEBREW = "heb"
    HINDI = "hin"
    HUNGARIAN = "hun"
    INDONESIAN = "ind"
    ITALIAN = "ita"
    JAPANESE = "jpn"
    KOREAN = "kor"
    MALAY = "msa"
    NORWEGIAN = "nor"
    PASHTO = "pus"
    POLISH = "pol"
    PORTUGUESE = "por"
    ROMANIAN = "ron"
    RUSSIAN = "rus"
    SPANISH = "spa"
    SWEDISH = "swe"
    TAGALOG = "tgl"
    THAI = "tha"
    TURKISH = "tur"
    UKRAINIAN = "ukr"
    URDU = "urd"
    VIETNAMESE = "vie"
    UNKNOWN = "xxx"   # Not determined


class ISO15924(CodeEnum):
    """Writing scripts (ISO 15924)"""

    Arab = "Arab"
    Beng = "Beng"
    Cyrl = "Cyrl"
    Deva = "Deva"
    Grek = "Grek"
    Hang = "Hang"
    Hani = "Hani"
    Hans = "Hans"     # Simplified Han
    Hant = "Hant"     # Traditional Han
    Hebr = "Hebr"
    Hira = "Hira"
    Jpan = "Jpan"     # Han + Hiragana + Katakana
    Kana = "Kana"
    Kore = "Kore"     # Hangul + Han
    Latn = "Latn"
    Thai = "Thai"
    Zyyy = "Zyyy"     # Common (script-neutral characters)
    Zxxx = "Zxxx"     # Unwritten / unknown


class TransliterationScheme(CodeEnum):
    """Romanization and transliteration conventions"""

    IC = "ic"                       # Intelligent conversion (service default)
    ALA_LC = "ala_lc"               # Library of Congress
    BGN = "bgn"                     # BGN/PCGN
    BUCKWALTER = "buckwalter"       # Arabic
    HANYU_PINYIN = "hanyu_pinyin"   # Chinese
    HEPBURN = "hepburn"             # Japanese
    ISO = "iso"                     # ISO 9 / ISO 233 family
    KOREAN_MOCT = "korean_moct"     # Revised Romanization of Korean
    MEXT = "mext"                   # Japanese (Kunrei-shiki)
    NATIVE = "native"               # Native spelling, no romanization
    UNGEGN = "ungegn"               # UN Group of Experts on Geographical Names
    WADE_GILES = "wade_giles"       # Chinese
    UNKNOWN = "unknown"
