"""Request-scoped language dependencies.

Collects the language candidates of a request and negotiates the active
language once per request.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request

from infrastructure.i18n import (
    ActiveLocale,
    LanguageRequestContext,
    reset_active_locale,
)
from infrastructure.services import LanguageServiceDep, SettingsDep

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def get_language_request_context(
    request: Request, settings: SettingsDep
) -> LanguageRequestContext:
    """Read the language candidates from the request.

    Query parameters and the body are read separately so a "lang" cookie or
    query value is never mistaken for a posted one.
    """
    post_lang = ""
    content_type = request.headers.get("content-type", "")
    if request.method == "POST" and content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        value = form.get("lang")
        if isinstance(value, str):
            post_lang = value

    return LanguageRequestContext(
        post_lang=post_lang,
        get_lang=request.query_params.get("lang", ""),
        cookie_lang=request.cookies.get(settings.i18n.LANG_COOKIE_NAME, ""),
        accept_language=request.headers.get("accept-language", ""),
        user_agent=request.headers.get("user-agent", ""),
    )


LanguageRequestContextDep = Annotated[
    LanguageRequestContext, Depends(get_language_request_context)
]


async def negotiate_language(
    context: LanguageRequestContextDep, service: LanguageServiceDep
) -> AsyncGenerator[ActiveLocale, None]:
    """Negotiate and activate the language for the duration of the request."""
    try:
        yield service.negotiate(context)
    finally:
        reset_active_locale()


ActiveLocaleDep = Annotated[ActiveLocale, Depends(negotiate_language)]
