from __future__ import annotations

import pytest

from apimodel.models import ISO15924, LanguageCode, TransliterationScheme


@pytest.mark.parametrize(
    ("enum_cls", "code", "expected"),
    [
        (LanguageCode, "eng", LanguageCode.ENGLISH),
        (LanguageCode, "DEU", LanguageCode.GERMAN),
        (LanguageCode, " rus ", LanguageCode.RUSSIAN),
        (LanguageCode, "japanese", LanguageCode.JAPANESE),
        (ISO15924, "Latn", ISO15924.Latn),
        (ISO15924, "cyrl", ISO15924.Cyrl),
        (TransliterationScheme, "bgn", TransliterationScheme.BGN),
        (TransliterationScheme, "HANYU_PINYIN", TransliterationScheme.HANYU_PINYIN),
    ],
)
def test_from_code_matches_value_or_name(enum_cls, code: str, expected) -> None:
    assert enum_cls.from_code(code) is expected


@pytest.mark.parametrize("code", ["", "   ", "english!", "Qaaa", None])
def test_from_code_rejects_unknown_codes(code) -> None:
    with pytest.raises(ValueError, match="Unknown LanguageCode code"):
        LanguageCode.from_code(code)


def test_members_serialize_to_wire_code() -> None:
    assert LanguageCode.GERMAN.value == "deu"
    assert str(LanguageCode.GERMAN) == "deu"
    assert LanguageCode.GERMAN == "deu"
    assert str(ISO15924.Hani) == "Hani"
    assert str(TransliterationScheme.ALA_LC) == "ala_lc"


def test_enum_call_accepts_case_insensitive_code() -> None:
    assert LanguageCode("ENG") is LanguageCode.ENGLISH
    with pytest.raises(ValueError):
        ISO15924("Nope")


def test_wire_codes_are_unique() -> None:
    for enum_cls in (LanguageCode, ISO15924, TransliterationScheme):
        values = [member.value.lower() for member in enum_cls]
        assert len(values) == len(set(values)), enum_cls.__name__
