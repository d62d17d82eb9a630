"""
Name Translation Request - Request for translating a name into a target language
"""

import logging
from pydantic import Field
from typing import Any, Dict, Mapping, Optional, Union

from .codes import ISO15924, LanguageCode, TransliterationScheme
from .request import Request

logger = logging.getLogger(__name__)


class NameTranslationRequest(Request):
    """이름 번역 요청 - Request for name translation"""

    # Required fields
    name: str = Field(..., description="Name to be translated")
    target_language: LanguageCode = Field(
        ...,
        description="Code for the translation language"
    )

    # Source description (auto-detected by the service when absent)
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of name (e.g., PERSON, ORGANIZATION, LOCATION)"
    )
    source_script: Optional[ISO15924] = Field(
        default=None,
        description="Script of the name"
    )
    source_language_of_origin: Optional[LanguageCode] = Field(
        default=None,
        description="Language of origin; defaults to the language of use"
    )
    source_language_of_use: Optional[LanguageCode] = Field(
        default=None,
        description="Language of use of the name"
    )

    # Target rendering (service picks a default when absent)
    target_script: Optional[ISO15924] = Field(
        default=None,
        description="Script of the translation"
    )
    target_scheme: Optional[TransliterationScheme] = Field(
        default=None,
        description="Transliteration scheme; default depends on the language pair"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Müller",
                "sourceLanguageOfUse": "deu",
                "targetLanguage": "eng"
            }
        }

    @classmethod
    def builder(
        cls,
        name: str,
        target_language: Union[LanguageCode, str]
    ) -> "NameTranslationRequestBuilder":
        """Start a fluent builder with the two required fields"""
        return NameTranslationRequestBuilder(name, target_language)


# Optional fields a builder may stage
OPTIONAL_FIELDS = (
    "entity_type",
    "source_script",
    "source_language_of_origin",
    "source_language_of_use",
    "target_script",
    "target_scheme",
)


class NameTranslationRequestBuilder:
    """
    Fluent builder for NameTranslationRequest.

    Usage:
        request = (
            NameTranslationRequestBuilder("Müller", LanguageCode.ENGLISH)
            .source_language_of_use(LanguageCode.GERMAN)
            .build()
        )

    Not thread-safe; meant for single-threaded construction.
    """

    def __init__(self, name: str, target_language: Union[LanguageCode, str]):
        self._name = name
        self._target_language = target_language
        self._values: Dict[str, Any] = {}

    @classmethod
    def from_config(
        cls,
        name: str,
        target_language: Union[LanguageCode, str],
        loader=None
    ) -> "NameTranslationRequestBuilder":
        """
        Create a builder seeded with configured defaults for the target language.

        Args:
            name: Name to be translated
            target_language: Target language code
            loader: ConfigLoader to read defaults from (default: shared loader)

        Returns:
            Builder with defaults staged; later setter calls override them
        """
        # Imported here: utils.config depends on this module
        from ..utils.config import get_config_loader

        loader = loader or get_config_loader()
        defaults = loader.load_request_defaults(target_language)
        return cls(name, target_language).with_defaults(defaults)

    def entity_type(self, entity_type: Optional[str]) -> "NameTranslationRequestBuilder":
        """Type of name (e.g. PERSON, ORGANIZATION). Ignored by default."""
        self._values["entity_type"] = entity_type
        return self

    def source_script(self, source_script: Optional[ISO15924]) -> "NameTranslationRequestBuilder":
        """Script of the source name. Auto-detected by default."""
        self._values["source_script"] = source_script
        return self

    def source_language_of_origin(
        self,
        source_language_of_origin: Optional[LanguageCode]
    ) -> "NameTranslationRequestBuilder":
        """Source language of origin. Same as the language of use by default."""
        self._values["source_language_of_origin"] = source_language_of_origin
        return self

    def source_language_of_use(
        self,
        source_language_of_use: Optional[LanguageCode]
    ) -> "NameTranslationRequestBuilder":
        """Source language of use. Auto-detected by default."""
        self._values["source_language_of_use"] = source_language_of_use
        return self

    def target_script(self, target_script: Optional[ISO15924]) -> "NameTranslationRequestBuilder":
        self._values["target_script"] = target_script
        return self

    def target_scheme(
        self,
        target_scheme: Optional[TransliterationScheme]
    ) -> "NameTranslationRequestBuilder":
        """Transliteration scheme. Default depends on source and target languages."""
        self._values["target_scheme"] = target_scheme
        return self

    def with_defaults(self, defaults: Mapping[str, Any]) -> "NameTranslationRequestBuilder":
        """
        Stage defaults for optional fields not set explicitly.

        Args:
            defaults: Mapping of optional field name -> value

        Raises:
            ValueError: If a key is not an optional request field
        """
        for key, value in defaults.items():
            if key not in OPTIONAL_FIELDS:
                raise ValueError(f"Not an optional request field: {key}")
            self._values.setdefault(key, value)
        return self

    def values(self) -> Dict[str, Any]:
        """Currently staged field values (unset optional fields are None)"""
        staged = {field: self._values.get(field) for field in OPTIONAL_FIELDS}
        staged["name"] = self._name
        staged["target_language"] = self._target_language
        return staged

    def build(self) -> NameTranslationRequest:
        """
        Build the immutable request.

        Raises:
            pydantic.ValidationError: If name or target_language is missing,
                or a code is not recognised
        """
        request = NameTranslationRequest(**self.values())
        logger.debug(
            f"Built name translation request ({request.target_language.value}), "
            f"optional fields set: {sorted(k for k in OPTIONAL_FIELDS if getattr(request, k) is not None)}"
        )
        return request
