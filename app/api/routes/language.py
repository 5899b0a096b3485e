from fastapi import APIRouter, Response

from api.dependencies.language import ActiveLocaleDep
from infrastructure.i18n import LocaleDescriptor
from infrastructure.services import LanguageServiceDep, SettingsDep

router = APIRouter(tags=["Language"])


def serialize_language(language: LocaleDescriptor) -> dict:
    return {
        "code": language.code,
        "english_name": language.english_name,
        "native_name": language.native_name,
        "display_name": language.display_name,
        "direction": language.text_direction.value,
    }


@router.api_route("/language", methods=["GET", "POST"])
def get_language(response: Response, active: ActiveLocaleDep, settings: SettingsDep):
    """Negotiate the interface language and remember it in the language cookie."""
    response.set_cookie(
        key=settings.i18n.LANG_COOKIE_NAME,
        value=active.code,
        max_age=settings.i18n.LANG_COOKIE_MAX_AGE,
        httponly=True,
        samesite="strict",
    )
    return {
        **serialize_language(active.language),
        "source": active.source.value if active.source else None,
        "warning": active.warning,
    }


@router.get("/languages")
def list_languages(active: ActiveLocaleDep, service: LanguageServiceDep):
    """List installed languages sorted by English name."""
    available = service.available
    return {
        "current": active.code,
        "has_choice": available.has_choice,
        "languages": [serialize_language(language) for language in available.sorted()],
    }
