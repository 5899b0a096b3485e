"""Language models for the i18n system.

Defines locale descriptors, negotiation results and translation containers.
"""

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, Optional

RTL_CODES = frozenset({"ar", "fa", "he", "ur"})


class TextDirection(str, Enum):
    """Writing direction of an interface language."""

    LEFT_TO_RIGHT = "ltr"
    RIGHT_TO_LEFT = "rtl"


class SelectionSource(str, Enum):
    """Where the negotiated language came from."""

    FORCED = "forced"
    POST = "post"
    GET = "get"
    COOKIE = "cookie"
    ACCEPT_LANGUAGE = "accept_language"
    USER_AGENT = "user_agent"
    DEFAULT = "default"


_REGION_SUFFIX = r"([-_][a-z]{2,3})?"


def widen_pattern(pattern: str) -> str:
    """Let a base language pattern also accept a regional variant.

    Patterns that already spell out a region separator (e.g. "pt[-_]br") are
    left untouched, so "de|german" becomes "de([-_][a-z]{2,3})?|german".
    """
    if "[-_]" in pattern:
        return pattern
    return pattern.replace("|", _REGION_SUFFIX + "|")


@lru_cache(maxsize=512)
def _accept_language_regex(pattern: str) -> re.Pattern:
    pattern = widen_pattern(pattern)
    return re.compile(rf"^({pattern})(;q=[0-9]\.[0-9])?$", re.IGNORECASE)


@lru_cache(maxsize=512)
def _user_agent_regex(pattern: str) -> re.Pattern:
    pattern = widen_pattern(pattern)
    return re.compile(rf"(\(|\[|;\s)({pattern})(;|\]|\))", re.IGNORECASE)


@dataclass(frozen=True)
class LocaleDescriptor:
    """Static description of one interface language.

    Attributes:
        code: Canonical language code (e.g. "pt_BR", "sr@latin").
        english_name: Name of the language in English.
        native_name: Name of the language in itself, empty when unknown.
        match_pattern: Case-insensitive regex recognizing the language in
            Accept-Language entries and User-Agent strings.
        external_locale_tag: MySQL locale for the language, empty when none.
    """

    code: str
    english_name: str
    native_name: str = ""
    match_pattern: str = ""
    external_locale_tag: str = ""

    @classmethod
    def synthesize(cls, code: str) -> "LocaleDescriptor":
        """Build a descriptor for an installed language missing from the catalog.

        Args:
            code: Language code as reported by the bundle provider.

        Returns:
            Descriptor using the capitalized code as display names and the
            code itself as match pattern.
        """
        return cls(
            code=code,
            english_name=code.capitalize(),
            native_name=code.capitalize(),
            match_pattern=code,
        )

    @property
    def key(self) -> str:
        """Lowercase lookup key."""
        return self.code.lower()

    @property
    def is_rtl(self) -> bool:
        return self.code in RTL_CODES

    @property
    def text_direction(self) -> TextDirection:
        if self.is_rtl:
            return TextDirection.RIGHT_TO_LEFT
        return TextDirection.LEFT_TO_RIGHT

    @property
    def display_name(self) -> str:
        """Name shown in language pickers (e.g. "Deutsch - German")."""
        if self.native_name:
            return f"{self.native_name} - {self.english_name}"
        return self.english_name

    def sort_key(self) -> str:
        return self.english_name

    def matches_accept_language(self, entry: str) -> bool:
        """Check one comma-separated Accept-Language entry.

        The entry must consist of the language pattern, optionally followed
        by a single-digit quality value such as ";q=0.8".

        Args:
            entry: One Accept-Language entry (e.g. "pt-BR;q=0.9").

        Returns:
            True if the entry designates this language.
        """
        if not self.match_pattern:
            return False
        return bool(_accept_language_regex(self.match_pattern).match(entry.strip()))

    def matches_user_agent(self, user_agent: str) -> bool:
        """Check a User-Agent string for a bracketed language token.

        Browsers used to advertise their language inside the platform
        comment, e.g. "(Windows; U; Windows NT 5.1; de; rv:1.8)".

        Args:
            user_agent: Raw User-Agent header value.

        Returns:
            True if the language appears as a delimited token.
        """
        if not self.match_pattern:
            return False
        return bool(_user_agent_regex(self.match_pattern).search(user_agent))


class AvailableLocaleSet(Mapping):
    """Read-only ordered mapping of lowercase code to installed language.

    Iteration follows catalog insertion order for cataloged languages, then
    uncataloged languages in the order the provider reported them.
    """

    def __init__(self, languages=()):
        self._languages: Dict[str, LocaleDescriptor] = {}
        for language in languages:
            self._languages.setdefault(language.key, language)

    def __getitem__(self, code: str) -> LocaleDescriptor:
        return self._languages[code.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._languages)

    def __len__(self) -> int:
        return len(self._languages)

    def __repr__(self) -> str:
        return f"AvailableLocaleSet({list(self._languages)!r})"

    def languages(self) -> list[LocaleDescriptor]:
        """Descriptors in negotiation order."""
        return list(self._languages.values())

    def sorted(self) -> list[LocaleDescriptor]:
        """Descriptors sorted by English name, for display."""
        return sorted(self._languages.values(), key=LocaleDescriptor.sort_key)

    @property
    def has_choice(self) -> bool:
        """Whether the user can pick between more than one language."""
        return len(self._languages) > 1


@dataclass
class LanguageRequestContext:
    """Candidate language signals carried by one request.

    Attributes:
        post_lang: "lang" field of the request body.
        get_lang: "lang" query parameter.
        cookie_lang: Language remembered in the language cookie.
        accept_language: Raw Accept-Language header.
        user_agent: Raw User-Agent header.
    """

    post_lang: Optional[str] = ""
    get_lang: Optional[str] = ""
    cookie_lang: Optional[str] = ""
    accept_language: Optional[str] = ""
    user_agent: Optional[str] = ""


@dataclass(frozen=True)
class ActiveLocaleSelection:
    """Outcome of one negotiation.

    The rejection flags record that a higher priority candidate was present
    but named a language that is not installed. They are independent and are
    only used to decide whether a warning should be shown.
    """

    language: LocaleDescriptor
    source: SelectionSource
    rejected_forced_config: bool = False
    rejected_cookie: bool = False
    rejected_request_param: bool = False

    @property
    def has_rejections(self) -> bool:
        return (
            self.rejected_forced_config
            or self.rejected_cookie
            or self.rejected_request_param
        )


@dataclass(frozen=True)
class ActiveLocale:
    """Language activated for the current request."""

    language: LocaleDescriptor
    text_direction: TextDirection
    warning: Optional[str] = None
    source: Optional[SelectionSource] = None

    @property
    def code(self) -> str:
        return self.language.code


@dataclass(frozen=True)
class TranslationKey:
    """Represents a translation key for accessing translated messages.

    Keys are hierarchical (e.g., "language.unsupported_code").
    Frozen to ensure immutability and hashability for caching.

    Attributes:
        namespace: Top-level namespace (e.g., "language").
        message_key: Specific message identifier (e.g., "unsupported_code").
    """

    namespace: str
    message_key: str

    def __str__(self) -> str:
        return f"{self.namespace}.{self.message_key}"


@dataclass
class TranslationCatalog:
    """Container for the messages of one language.

    Attributes:
        code: Language code this catalog is for.
        messages: Nested dict structure {namespace: {key: message_string}}.
    """

    code: str
    messages: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def get_message(self, key: TranslationKey) -> Optional[str]:
        return self.messages.get(key.namespace, {}).get(key.message_key)

    def merge(self, messages: Dict[str, Dict[str, Any]]) -> None:
        """Merge namespaced messages into this catalog, later entries win."""
        for namespace, entries in messages.items():
            self.messages.setdefault(namespace, {}).update(entries)
