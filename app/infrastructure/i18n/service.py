"""Language service for dependency injection.

Ties negotiation, activation and the deferred warning together behind a
class-based interface, so request handlers depend on a single object.

Usage:
    from infrastructure.services import LanguageServiceDep

    @router.get("/language")
    def get_language(service: LanguageServiceDep):
        active = service.negotiate(LanguageRequestContext(get_lang="de"))
        return {"code": active.code}
"""

from typing import Optional

import structlog

from infrastructure.i18n.context import get_active_locale, set_active_locale
from infrastructure.i18n.errors import UnsupportedLanguageCodeError
from infrastructure.i18n.models import (
    ActiveLocale,
    ActiveLocaleSelection,
    LanguageRequestContext,
    LocaleDescriptor,
    TranslationKey,
)
from infrastructure.i18n.resolvers import LanguageResolver
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger

logger = get_module_logger()

UNSUPPORTED_CODE_KEY = TranslationKey("language", "unsupported_code")
UNSUPPORTED_CODE_MESSAGE = "Ignoring unsupported language code."


class LanguageService:
    """Negotiates and activates the language of each request.

    Attributes:
        resolver: LanguageResolver over the installed languages.
        translator: Translator used for the warning message.
    """

    def __init__(self, resolver: LanguageResolver, translator: Translator):
        self.resolver = resolver
        self.translator = translator

    def negotiate(self, context: LanguageRequestContext) -> ActiveLocale:
        """Select and activate the language for a request.

        A rejected candidate never blocks the request: the translated
        warning is returned on the ActiveLocale instead of being raised.

        Args:
            context: Candidate signals of the request.

        Returns:
            The activated language.
        """
        selection = self.resolver.select_active(context)
        return self.activate(selection.language, selection)

    def activate(
        self,
        language: LocaleDescriptor,
        selection: Optional[ActiveLocaleSelection] = None,
    ) -> ActiveLocale:
        """Make a language the active one for the current request.

        Loads its message bundle, publishes the language and its text
        direction to the request context and binds them to the log context.
        When a selection with rejected candidates is given, the warning is
        translated in the newly active language.

        Args:
            language: Language to activate.
            selection: Negotiation outcome that produced the language.

        Returns:
            ActiveLocale for the request.
        """
        self.translator.ensure_loaded(language.code)

        active = ActiveLocale(
            language=language,
            text_direction=language.text_direction,
            source=selection.source if selection else None,
        )
        set_active_locale(active)
        structlog.contextvars.bind_contextvars(
            locale=language.code,
            text_direction=active.text_direction.value,
        )

        if selection is not None:
            try:
                self.show_warnings(selection)
            except UnsupportedLanguageCodeError as e:
                logger.warning(
                    "unsupported_language_code_ignored",
                    code=language.code,
                    rejected_forced_config=selection.rejected_forced_config,
                    rejected_cookie=selection.rejected_cookie,
                    rejected_request_param=selection.rejected_request_param,
                )
                active = ActiveLocale(
                    language=language,
                    text_direction=active.text_direction,
                    warning=str(e),
                    source=active.source,
                )
                set_active_locale(active)

        logger.info(
            "language_activated",
            code=language.code,
            text_direction=active.text_direction.value,
        )
        return active

    def show_warnings(self, selection: ActiveLocaleSelection) -> None:
        """Report ignored language codes.

        Must run after activation, since the message is translated into the
        active language.

        Raises:
            UnsupportedLanguageCodeError: If any candidate was rejected.
        """
        if not selection.has_rejections:
            return

        raise UnsupportedLanguageCodeError(self._unsupported_code_message())

    def _unsupported_code_message(self) -> str:
        code = get_active_locale().code
        try:
            return self.translator.translate_message(UNSUPPORTED_CODE_KEY, code)
        except KeyError:
            return UNSUPPORTED_CODE_MESSAGE

    @property
    def available(self):
        return self.resolver.available
