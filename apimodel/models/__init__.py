"""
Data models for the name translation API
"""

from .codes import LanguageCode, ISO15924, TransliterationScheme
from .request import Request
from .name_translation_request import NameTranslationRequest, NameTranslationRequestBuilder
from .name_translation_response import NameTranslationResponse

__all__ = [
    # Codes
    "LanguageCode",
    "ISO15924",
    "TransliterationScheme",

    # Requests
    "Request",
    "NameTranslationRequest",
    "NameTranslationRequestBuilder",

    # Responses
    "NameTranslationResponse",
]
