"""
Name Translation Response - Result returned by the name translation service
"""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Any, Mapping, Optional

from .codes import ISO15924, LanguageCode, TransliterationScheme


class NameTranslationResponse(BaseModel):
    """이름 번역 결과 - Name translation result"""

    translation: str = Field(..., description="Translated name")
    target_language: LanguageCode = Field(..., description="Language of the translation")
    target_script: Optional[ISO15924] = Field(
        default=None,
        description="Script of the translation"
    )
    target_scheme: Optional[TransliterationScheme] = Field(
        default=None,
        description="Transliteration scheme used"
    )
    confidence: Optional[float] = Field(
        default=None,
        ge=0.0,
        le=1.0,
        description="Service confidence in the translation (0-1)"
    )

    class Config:
        frozen = True
        populate_by_name = True
        alias_generator = to_camel
        extra = "ignore"
        json_schema_extra = {
            "example": {
                "translation": "Mueller",
                "targetLanguage": "eng",
                "targetScript": "Latn",
                "targetScheme": "ic",
                "confidence": 0.87
            }
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "NameTranslationResponse":
        """Parse a response body keyed by wire names"""
        return cls.model_validate(dict(payload))
