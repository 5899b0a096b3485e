"""Factory functions for creating i18n components.

Provides convenience functions for initializing the language service with
configurations suitable for the application.
"""

from pathlib import Path

from infrastructure.configuration.features.i18n import I18nSettings
from infrastructure.i18n.loader import (
    LocaleCatalogProvider,
    YAMLLocaleDirectoryProvider,
    YAMLTranslationLoader,
)
from infrastructure.i18n.resolvers import LanguageResolver, build_resolver
from infrastructure.i18n.service import LanguageService
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def default_locale_dir() -> Path:
    # This file is at .../app/infrastructure/i18n/factory.py
    return Path(__file__).resolve().parents[2] / "locales"


def resolve_locale_dir(settings: I18nSettings) -> Path:
    if settings.LOCALE_PATH:
        return Path(settings.LOCALE_PATH)
    return default_locale_dir()


def create_translator(settings: I18nSettings) -> Translator:
    """Create a Translator reading bundles from the configured directory.

    Args:
        settings: i18n settings section.

    Returns:
        Translator with lazy per-language loading.

    Raises:
        ValueError: If the locale directory does not exist.
    """
    loader = YAMLTranslationLoader(
        translations_dir=resolve_locale_dir(settings),
        domain=settings.TRANSLATION_DOMAIN,
    )
    return Translator(loader=loader)


def create_locale_provider(settings: I18nSettings) -> LocaleCatalogProvider:
    return YAMLLocaleDirectoryProvider(
        locale_dir=resolve_locale_dir(settings),
        domain=settings.TRANSLATION_DOMAIN,
    )


def create_language_resolver(
    settings: I18nSettings,
    provider: LocaleCatalogProvider | None = None,
) -> LanguageResolver:
    """Create a LanguageResolver over the installed languages.

    Args:
        settings: i18n settings section.
        provider: Source of installed codes (default: bundle directory).

    Returns:
        LanguageResolver honoring forced, default and filter settings.
    """
    provider = provider or create_locale_provider(settings)
    resolver = build_resolver(
        provider.list_locale_codes(),
        forced_code=settings.FORCED_LANG,
        default_code=settings.DEFAULT_LANG,
        filter_pattern=settings.FILTER_LANGUAGES,
    )
    logger.info(
        "language_resolver_created",
        available_count=len(resolver.available),
        has_choice=resolver.available.has_choice,
    )
    return resolver


def create_language_service(
    settings: I18nSettings,
    provider: LocaleCatalogProvider | None = None,
) -> LanguageService:
    """Create the LanguageService used by request handlers.

    Usage:
        service = create_language_service(settings.i18n)
        active = service.negotiate(context)
    """
    return LanguageService(
        resolver=create_language_resolver(settings, provider),
        translator=create_translator(settings),
    )
