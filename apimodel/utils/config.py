"""
Configuration Loader - Load YAML configuration files
"""

import logging
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, Union
from functools import lru_cache

from ..models.codes import LanguageCode
from ..models.name_translation_request import OPTIONAL_FIELDS

logger = logging.getLogger(__name__)


class ConfigLoader:
    """
    Loader for YAML configuration files.

    Usage:
        config = ConfigLoader()
        defaults = config.load_request_defaults(LanguageCode.RUSSIAN)
    """

    def __init__(self, config_dir: Optional[str] = None):
        """
        Initialize the config loader.

        Args:
            config_dir: Path to config directory.
                        Defaults to config/ inside the package.
        """
        if config_dir is None:
            # Default: apimodel/config/
            base_dir = Path(__file__).parent.parent
            self.config_dir = base_dir / "config"
        else:
            self.config_dir = Path(config_dir)

    @lru_cache(maxsize=32)
    def load(self, name: str) -> Dict[str, Any]:
        """
        Load a configuration file by name.

        Args:
            name: Config file name (without .yaml extension)

        Returns:
            Parsed configuration dict (empty if the file is empty)

        Raises:
            FileNotFoundError: If config file not found
        """
        candidates = [
            self.config_dir / f"{name}.yaml",
            self.config_dir / f"{name}.yml",
            self.config_dir / name,
        ]

        for path in candidates:
            if path.is_file():
                logger.debug(f"Loading config '{name}' from {path}")
                with open(path, "r", encoding="utf-8") as f:
                    return yaml.safe_load(f) or {}

        raise FileNotFoundError(
            f"Config file '{name}' not found in {self.config_dir}"
        )

    def load_request_defaults(
        self,
        target_language: Union[LanguageCode, str]
    ) -> Dict[str, Any]:
        """
        Load builder defaults for a target language.

        The `default` section is overlaid with the section for the
        target language code (e.g. `rus`), if any.

        Args:
            target_language: LanguageCode or its code (e.g., "rus")

        Returns:
            Dict of optional request field name -> configured value

        Raises:
            ValueError: If the language code or a configured field is unknown
        """
        language = LanguageCode.from_code(target_language) \
            if not isinstance(target_language, LanguageCode) else target_language

        config = self.load("request_defaults")
        defaults = dict(config.get("default") or {})
        languages = config.get("languages") or {}
        defaults.update(languages.get(language.value) or {})

        unknown = sorted(set(defaults) - set(OPTIONAL_FIELDS))
        if unknown:
            raise ValueError(f"Unknown request default fields: {', '.join(unknown)}")

        return {k: v for k, v in defaults.items() if v is not None}

    def clear_cache(self):
        """Clear the config cache"""
        self.load.cache_clear()


# Singleton instance
_default_loader: Optional[ConfigLoader] = None


def get_config_loader(config_dir: Optional[str] = None) -> ConfigLoader:
    """Get or create the default config loader singleton"""
    global _default_loader
    if _default_loader is None:
        _default_loader = ConfigLoader(config_dir)
    return _default_loader


def get_config(name: str) -> Dict[str, Any]:
    """Convenience function to load a config file"""
    loader = get_config_loader()
    return loader.load(name)


def get_request_defaults(target_language: Union[LanguageCode, str]) -> Dict[str, Any]:
    """
    Convenience function to get builder defaults for a target language.

    Example:
        defaults = get_request_defaults("rus")
        # Returns: {"target_script": "Cyrl"}
    """
    loader = get_config_loader()
    return loader.load_request_defaults(target_language)
