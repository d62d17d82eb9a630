"""
Name Translation API Model

Client-side request/response models for a name translation and
transliteration service:
- NameTranslationRequest with a fluent builder
- Language, script (ISO 15924) and transliteration scheme codes
- YAML-configured builder defaults per target language
"""

__version__ = "0.1.0"

# Re-export key components for convenience
from .models import (
    LanguageCode,
    ISO15924,
    TransliterationScheme,
    Request,
    NameTranslationRequest,
    NameTranslationRequestBuilder,
    NameTranslationResponse,
)
from .utils import (
    get_config,
    get_request_defaults,
)

__all__ = [
    # Version
    "__version__",
    # Models
    "LanguageCode",
    "ISO15924",
    "TransliterationScheme",
    "Request",
    "NameTranslationRequest",
    "NameTranslationRequestBuilder",
    "NameTranslationResponse",
    # Utils
    "get_config",
    "get_request_defaults",
]
