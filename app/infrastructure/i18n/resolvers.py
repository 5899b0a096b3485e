"""Language negotiation for incoming requests.

Picks exactly one installed language from the candidate signals of a request.
Candidates are tried in a fixed priority order and the first valid one wins:

1. Language forced by configuration
2. "lang" request body field, then "lang" query parameter
3. Language cookie
4. Accept-Language header
5. User-Agent header
6. Configured default language, then English
"""

import re
from typing import Iterable, Mapping, Optional

from infrastructure.i18n.catalog import (
    FALLBACK_CODE,
    LANGUAGE_CATALOG,
    fallback_language,
)
from infrastructure.i18n.errors import I18nError
from infrastructure.i18n.models import (
    ActiveLocaleSelection,
    AvailableLocaleSet,
    LanguageRequestContext,
    LocaleDescriptor,
    SelectionSource,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class LanguageResolver:
    """Resolves the active language from request context.

    Attributes:
        available: Installed languages, in negotiation order.
        forced_code: Language forced by configuration, empty when not forced.
        default_code: Language used when no candidate matches.
    """

    def __init__(
        self,
        available: AvailableLocaleSet,
        forced_code: str = "",
        default_code: str = FALLBACK_CODE,
    ):
        self.available = available
        self.forced_code = forced_code or ""
        self.default_code = default_code or FALLBACK_CODE
        self.log = logger.bind(
            forced_code=self.forced_code, default_code=self.default_code
        )

    @staticmethod
    def build_available_set(
        catalog: Mapping[str, LocaleDescriptor],
        present_codes: Iterable[str],
        filter_pattern: str = "",
    ) -> AvailableLocaleSet:
        """Intersect the catalog with the installed language codes.

        Installed codes missing from the catalog get a synthesized descriptor.
        Cataloged languages come first in catalog order, followed by the
        synthesized ones in the order they were reported.

        Args:
            catalog: Static catalog keyed by lowercase code.
            present_codes: Codes reported by a LocaleCatalogProvider.
            filter_pattern: Optional regex; only codes it matches are kept.

        Returns:
            AvailableLocaleSet, possibly empty.

        Raises:
            I18nError: If filter_pattern is not a valid regular expression.
        """
        codes = list(present_codes)
        if filter_pattern:
            try:
                pattern = re.compile(filter_pattern)
            except re.error as e:
                raise I18nError(
                    f"Invalid language filter {filter_pattern!r}: {e}"
                ) from e
            codes = [code for code in codes if pattern.search(code)]

        present = [code.lower() for code in codes]
        cataloged = [key for key in catalog if key in present]
        synthesized = [
            LocaleDescriptor.synthesize(code)
            for code in dict.fromkeys(present)
            if code not in catalog
        ]

        available = AvailableLocaleSet(
            [catalog[key] for key in cataloged] + synthesized
        )
        logger.info(
            "built_available_locale_set",
            present_count=len(codes),
            available_count=len(available),
            synthesized=[language.code for language in synthesized],
        )
        return available

    def lookup(self, code: Optional[str]) -> Optional[LocaleDescriptor]:
        """Case-insensitive exact lookup of an installed language.

        Args:
            code: Language code, any case.

        Returns:
            The descriptor, or None if the language is not installed.
        """
        if not code:
            return None
        return self.available.get(code.lower())

    def select_active(self, context: LanguageRequestContext) -> ActiveLocaleSelection:
        """Pick the language for a request.

        Args:
            context: Candidate signals of the request.

        Returns:
            ActiveLocaleSelection with the chosen language, its source and
            the flags of rejected candidates.
        """
        rejected_forced_config = False
        rejected_request_param = False
        rejected_cookie = False

        def selected(language, source):
            selection = ActiveLocaleSelection(
                language=language,
                source=source,
                rejected_forced_config=rejected_forced_config,
                rejected_cookie=rejected_cookie,
                rejected_request_param=rejected_request_param,
            )
            self.log.info(
                "language_selected",
                code=language.code,
                source=source.value,
                rejected_forced_config=rejected_forced_config,
                rejected_cookie=rejected_cookie,
                rejected_request_param=rejected_request_param,
            )
            return selection

        if self.forced_code:
            language = self.lookup(self.forced_code)
            if language:
                return selected(language, SelectionSource.FORCED)
            rejected_forced_config = True

        for value, source in (
            (context.post_lang, SelectionSource.POST),
            (context.get_lang, SelectionSource.GET),
        ):
            if value:
                language = self.lookup(value)
                if language:
                    return selected(language, source)
                rejected_request_param = True

        if context.cookie_lang:
            language = self.lookup(context.cookie_lang)
            if language:
                return selected(language, SelectionSource.COOKIE)
            rejected_cookie = True

        if context.accept_language:
            language = self.match_accept_language(context.accept_language)
            if language:
                return selected(language, SelectionSource.ACCEPT_LANGUAGE)

        if context.user_agent:
            language = self.match_user_agent(context.user_agent)
            if language:
                return selected(language, SelectionSource.USER_AGENT)

        return selected(self.default_language(), SelectionSource.DEFAULT)

    def match_accept_language(self, header: str) -> Optional[LocaleDescriptor]:
        """First installed language named by an Accept-Language header.

        Entries are tried in header order; quality values are ignored.
        """
        languages = self.available.languages()
        for entry in header.split(","):
            for language in languages:
                if language.matches_accept_language(entry):
                    return language
        return None

    def match_user_agent(self, user_agent: str) -> Optional[LocaleDescriptor]:
        """First installed language advertised in a User-Agent string."""
        for language in self.available.languages():
            if language.matches_user_agent(user_agent):
                return language
        return None

    def default_language(self) -> LocaleDescriptor:
        language = self.lookup(self.default_code) or self.lookup(FALLBACK_CODE)
        if language:
            return language
        self.log.warning("fallback_language_not_installed")
        return fallback_language()


def build_resolver(
    present_codes: Iterable[str],
    forced_code: str = "",
    default_code: str = FALLBACK_CODE,
    filter_pattern: str = "",
) -> LanguageResolver:
    """Build a resolver over the static catalog.

    Args:
        present_codes: Codes reported by a LocaleCatalogProvider.
        forced_code: Language forced by configuration.
        default_code: Language used when nothing matches.
        filter_pattern: Optional regex restricting installed languages.

    Returns:
        Configured LanguageResolver.
    """
    available = LanguageResolver.build_available_set(
        LANGUAGE_CATALOG, present_codes, filter_pattern
    )
    return LanguageResolver(
        available, forced_code=forced_code, default_code=default_code
    )
