"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    LanguageServiceDep,
    SettingsDep,
)
from infrastructure.services.providers import (
    get_language_service,
    get_settings,
)

__all__ = [
    "SettingsDep",
    "LanguageServiceDep",
    "get_settings",
    "get_language_service",
]
