"""i18n system - interface language negotiation.

Picks the interface language of each request from configuration, request
parameters, cookie and browser headers, and activates it for the request.

Main components:
- catalog: static table of supported languages
- models: LocaleDescriptor, AvailableLocaleSet, ActiveLocaleSelection, ActiveLocale
- loader: LocaleCatalogProvider implementations and YAMLTranslationLoader
- resolvers: LanguageResolver with the negotiation priority chain
- translator: Translator for the few messages negotiation needs
- service: LanguageService (negotiate, activate, show_warnings)
- context: request-scoped active language
"""

from infrastructure.i18n.catalog import LANGUAGE_CATALOG, RTL_CODES
from infrastructure.i18n.context import (
    get_active_locale,
    get_text_direction,
    reset_active_locale,
    set_active_locale,
)
from infrastructure.i18n.errors import (
    I18nError,
    LanguageNotActivatedError,
    UnsupportedLanguageCodeError,
)
from infrastructure.i18n.loader import (
    LocaleCatalogProvider,
    StaticLocaleProvider,
    YAMLLocaleDirectoryProvider,
    YAMLTranslationLoader,
)
from infrastructure.i18n.models import (
    ActiveLocale,
    ActiveLocaleSelection,
    AvailableLocaleSet,
    LanguageRequestContext,
    LocaleDescriptor,
    SelectionSource,
    TextDirection,
    TranslationCatalog,
    TranslationKey,
)
from infrastructure.i18n.resolvers import LanguageResolver, build_resolver
from infrastructure.i18n.service import LanguageService
from infrastructure.i18n.translator import Translator

__all__ = [
    "LANGUAGE_CATALOG",
    "RTL_CODES",
    "ActiveLocale",
    "ActiveLocaleSelection",
    "AvailableLocaleSet",
    "LanguageRequestContext",
    "LocaleDescriptor",
    "SelectionSource",
    "TextDirection",
    "TranslationCatalog",
    "TranslationKey",
    "LocaleCatalogProvider",
    "StaticLocaleProvider",
    "YAMLLocaleDirectoryProvider",
    "YAMLTranslationLoader",
    "LanguageResolver",
    "build_resolver",
    "LanguageService",
    "Translator",
    "I18nError",
    "LanguageNotActivatedError",
    "UnsupportedLanguageCodeError",
    "get_active_locale",
    "get_text_direction",
    "reset_active_locale",
    "set_active_locale",
]
