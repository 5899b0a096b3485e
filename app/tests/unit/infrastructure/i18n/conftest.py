"""Feature-level fixtures for i18n system tests.

Provides message bundles, translators and language services built over a
temporary locale directory.
"""

import pytest
import yaml

from infrastructure.i18n import (
    LanguageService,
    StaticLocaleProvider,
    Translator,
    YAMLTranslationLoader,
)
from tests.factories.i18n import make_resolver


def _write_bundle(directory, code, messages, domain="messages"):
    with open(directory / f"{domain}.{code}.yml", "w", encoding="utf-8") as f:
        yaml.dump(messages, f, allow_unicode=True)


@pytest.fixture
def temp_locale_dir(tmp_path):
    """Create temporary directory with sample YAML message bundles.

    Returns a directory like:
    - messages.en.yml
    - messages.de.yml
    - messages.fr.yml
    - messages.ar.yml
    """
    _write_bundle(
        tmp_path,
        "en",
        {
            "language": {
                "unsupported_code": "Ignoring unsupported language code.",
                "greeting": "Hello",
                "only_english": "Only in English",
            }
        },
    )
    _write_bundle(
        tmp_path,
        "de",
        {
            "language": {
                "unsupported_code": "Nicht unterstützter Sprachcode wird ignoriert.",
                "greeting": "Hallo",
            }
        },
    )
    _write_bundle(
        tmp_path,
        "fr",
        {"language": {"unsupported_code": "Code de langue non supporté ignoré."}},
    )
    _write_bundle(
        tmp_path,
        "ar",
        {"language": {"unsupported_code": "تجاهل رمز لغة غير مدعوم."}},
    )
    return tmp_path


@pytest.fixture
def yaml_loader(temp_locale_dir):
    """Create YAMLTranslationLoader for temporary locale directory."""
    return YAMLTranslationLoader(temp_locale_dir, use_cache=False)


@pytest.fixture
def translator(temp_locale_dir):
    return Translator(loader=YAMLTranslationLoader(temp_locale_dir))


@pytest.fixture
def installed_codes():
    return ["en", "de", "fr", "ar"]


@pytest.fixture
def language_service(translator, installed_codes):
    """LanguageService over the temporary bundles."""
    provider = StaticLocaleProvider(installed_codes)
    resolver = make_resolver(provider.list_locale_codes())
    return LanguageService(resolver=resolver, translator=translator)


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_fr": "fr",
        "regional_de": "de-DE",
        "regional_then_base": "de-DE,de;q=0.9,en;q=0.8",
        "first_entry_wins": "fr;q=0.8,de;q=0.6",
        "spaced": "es, fr;q=0.5",
        "unknown_only": "xx-YY,zz",
    }
