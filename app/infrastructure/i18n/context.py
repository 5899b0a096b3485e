"""Request-scoped storage of the active language.

The active language lives in a context variable so concurrent requests
served by the same process never see each other's language.

Usage:
    from infrastructure.i18n.context import get_active_locale, get_text_direction

    direction = get_text_direction()
    code = get_active_locale().code
"""

from contextvars import ContextVar, Token
from typing import Optional

from infrastructure.i18n.errors import LanguageNotActivatedError
from infrastructure.i18n.models import ActiveLocale, TextDirection

_active_locale: ContextVar[Optional[ActiveLocale]] = ContextVar(
    "active_locale", default=None
)


def set_active_locale(active: ActiveLocale) -> Token:
    """Publish the active language for the current request.

    Returns:
        Token that can be passed to reset_active_locale().
    """
    return _active_locale.set(active)


def reset_active_locale(token: Optional[Token] = None) -> None:
    """Clear the active language, or restore it to a previous token."""
    if token is not None:
        _active_locale.reset(token)
    else:
        _active_locale.set(None)


def get_active_locale() -> ActiveLocale:
    """Return the language activated for the current request.

    Raises:
        LanguageNotActivatedError: If no language was activated yet.
    """
    active = _active_locale.get()
    if active is None:
        raise LanguageNotActivatedError("No language has been activated")
    return active


def get_text_direction() -> TextDirection:
    """Text direction of the active language, left-to-right until activation."""
    active = _active_locale.get()
    if active is None:
        return TextDirection.LEFT_TO_RIGHT
    return active.text_direction
