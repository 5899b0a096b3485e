"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.i18n.service import LanguageService
from infrastructure.services.providers import get_language_service, get_settings

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Language service dependency - negotiation over the installed languages
LanguageServiceDep = Annotated[LanguageService, Depends(get_language_service)]

__all__ = [
    "SettingsDep",
    "LanguageServiceDep",
]
