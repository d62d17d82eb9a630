"""
Utility modules for the name translation API models
"""

# Config loader
from .config import (
    ConfigLoader,
    get_config_loader,
    get_config,
    get_request_defaults,
)

__all__ = [
    # Config loader
    "ConfigLoader",
    "get_config_loader",
    "get_config",
    "get_request_defaults",
]
