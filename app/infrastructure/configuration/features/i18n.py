"""Interface language feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Interface language negotiation configuration.

    Environment Variables:
        LANG_FORCED: Language forced for every request, bypassing negotiation
        DEFAULT_LANG: Language used when no request signal matches (default: en)
        FILTER_LANGUAGES: Regex restricting which installed languages are offered
        LOCALE_PATH: Directory holding the YAML message bundles
        TRANSLATION_DOMAIN: Bundle file prefix (default: messages)
        LANG_COOKIE_NAME: Cookie remembering the chosen language (default: pma_lang)
        LANG_COOKIE_MAX_AGE: Lifetime of the language cookie in seconds (default: 30 days)

    Example:
        ```python
        from infrastructure.configuration import settings

        default_lang = settings.i18n.DEFAULT_LANG
        forced = settings.i18n.FORCED_LANG
        ```
    """

    # Neither the field name nor the alias may be LANG, the POSIX locale of the host.
    FORCED_LANG: str = Field(default="", alias="LANG_FORCED")
    DEFAULT_LANG: str = Field(default="en", alias="DEFAULT_LANG")
    FILTER_LANGUAGES: str = Field(default="", alias="FILTER_LANGUAGES")
    LOCALE_PATH: str = Field(default="", alias="LOCALE_PATH")
    TRANSLATION_DOMAIN: str = Field(default="messages", alias="TRANSLATION_DOMAIN")
    LANG_COOKIE_NAME: str = Field(default="pma_lang", alias="LANG_COOKIE_NAME")
    LANG_COOKIE_MAX_AGE: int = Field(
        default=60 * 60 * 24 * 30, alias="LANG_COOKIE_MAX_AGE"
    )
