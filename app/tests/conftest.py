import sys
from pathlib import Path

import pytest

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.i18n`) works during pytest collection even when
# pytest is invoked from outside the project root.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from infrastructure.i18n import reset_active_locale  # noqa: E402
from infrastructure.services import providers  # noqa: E402


@pytest.fixture(autouse=True)
def clear_active_locale():
    """Make sure no active language leaks from one test into the next."""
    reset_active_locale()
    yield
    reset_active_locale()


@pytest.fixture
def fresh_providers():
    """Drop cached settings and language service around a test."""
    providers.get_settings.cache_clear()
    providers.get_language_service.cache_clear()
    yield providers
    providers.get_settings.cache_clear()
    providers.get_language_service.cache_clear()
