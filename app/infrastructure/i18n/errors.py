"""Custom exceptions for the i18n system.

Negotiation itself never fails; these exceptions cover configuration
problems and the deferred warning about ignored language codes.
"""


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            service.show_warnings(selection)
        except I18nError as e:
            logger.warning("i18n_error", error=str(e))
    """

    pass


class UnsupportedLanguageCodeError(I18nError):
    """Raised after activation when a requested language code was ignored.

    The message is already translated into the newly active language.

    Example:
        >>> service.show_warnings(selection)
        Traceback (most recent call last):
        ...
        UnsupportedLanguageCodeError: Ignoring unsupported language code.
    """

    pass


class LanguageNotActivatedError(I18nError):
    """Raised when the active language is read before any activation."""

    pass
