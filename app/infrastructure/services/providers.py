"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n.factory import create_language_service
from infrastructure.i18n.service import LanguageService


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process,
    even if called from multiple packages.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_language_service() -> LanguageService:
    """
    Get application-scoped language service singleton.

    The set of installed languages is computed once here and kept for the
    lifetime of the process; restart the process to pick up new bundles.

    Returns:
        LanguageService: Cached service built from the i18n settings.

    Usage:
        @router.get("/language")
        def get_language(service: LanguageServiceDep):
            return service.available.has_choice
    """
    settings = get_settings()
    return create_language_service(settings.i18n)
