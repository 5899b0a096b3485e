import pytest
from fastapi.testclient import TestClient

from api.dependencies.rate_limits import get_limiter
from api.routes.language import router as language_router
from api.routes.system import router as system_router
from infrastructure.i18n import LanguageService, StaticLocaleProvider, Translator
from infrastructure.i18n.factory import default_locale_dir
from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.services.providers import get_language_service
from tests.factories.i18n import make_resolver
from utils.tests import create_test_app


@pytest.fixture(autouse=True)
def reset_rate_limits():
    get_limiter().reset()
    yield
    get_limiter().reset()


@pytest.fixture
def installed_codes():
    return ["en", "de", "fr", "ar", "pt_BR"]


@pytest.fixture
def language_service(installed_codes):
    """LanguageService over the bundles shipped with the application."""
    provider = StaticLocaleProvider(installed_codes)
    return LanguageService(
        resolver=make_resolver(provider.list_locale_codes()),
        translator=Translator(YAMLTranslationLoader(default_locale_dir())),
    )


@pytest.fixture
def app(language_service):
    return create_test_app(
        [system_router, language_router],
        dependency_overrides={get_language_service: lambda: language_service},
    )


@pytest.fixture
def client(app):
    return TestClient(app)
