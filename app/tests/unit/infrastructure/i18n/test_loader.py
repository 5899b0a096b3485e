"""Tests for infrastructure.i18n.loader module."""

import pytest

from infrastructure.i18n import (
    StaticLocaleProvider,
    TranslationKey,
    YAMLLocaleDirectoryProvider,
    YAMLTranslationLoader,
)


@pytest.mark.unit
class TestStaticLocaleProvider:
    def test_returns_codes_in_given_order(self):
        provider = StaticLocaleProvider(["en", "de", "xx"])
        assert provider.list_locale_codes() == ["en", "de", "xx"]

    def test_returns_a_copy(self):
        provider = StaticLocaleProvider(["en"])
        provider.list_locale_codes().append("de")
        assert provider.list_locale_codes() == ["en"]


@pytest.mark.unit
class TestYAMLLocaleDirectoryProvider:
    """Tests for YAMLLocaleDirectoryProvider."""

    def test_lists_bundles_english_first(self, temp_locale_dir):
        provider = YAMLLocaleDirectoryProvider(temp_locale_dir)
        assert provider.list_locale_codes() == ["en", "ar", "de", "fr"]

    def test_missing_directory_reports_english_only(self, tmp_path):
        provider = YAMLLocaleDirectoryProvider(tmp_path / "missing")
        assert provider.list_locale_codes() == ["en"]

    def test_english_reported_without_english_bundle(self, tmp_path):
        (tmp_path / "messages.de.yml").write_text("{}", encoding="utf-8")
        provider = YAMLLocaleDirectoryProvider(tmp_path)
        assert provider.list_locale_codes() == ["en", "de"]

    def test_other_domains_and_files_ignored(self, tmp_path):
        (tmp_path / "messages.pt_BR.yml").write_text("{}", encoding="utf-8")
        (tmp_path / "errors.fr.yml").write_text("{}", encoding="utf-8")
        (tmp_path / "README.md").write_text("", encoding="utf-8")
        provider = YAMLLocaleDirectoryProvider(tmp_path)
        assert provider.list_locale_codes() == ["en", "pt_BR"]

    def test_custom_domain(self, tmp_path):
        (tmp_path / "phpmyadmin.sr@latin.yml").write_text("{}", encoding="utf-8")
        provider = YAMLLocaleDirectoryProvider(tmp_path, domain="phpmyadmin")
        assert provider.list_locale_codes() == ["en", "sr@latin"]


@pytest.mark.unit
class TestYAMLTranslationLoader:
    """Tests for YAMLTranslationLoader."""

    def test_missing_directory_raises(self, tmp_path):
        with pytest.raises(ValueError):
            YAMLTranslationLoader(tmp_path / "missing")

    def test_bundle_path(self, yaml_loader, temp_locale_dir):
        assert yaml_loader.bundle_path("de") == temp_locale_dir / "messages.de.yml"

    def test_load_bundle(self, yaml_loader):
        catalog = yaml_loader.load("de")
        assert catalog.code == "de"
        assert catalog.get_message(TranslationKey("language", "greeting")) == (
            "Hallo"
        )

    def test_load_preserves_unicode(self, yaml_loader):
        catalog = yaml_loader.load("ar")
        assert catalog.get_message(
            TranslationKey("language", "unsupported_code")
        ).startswith("تجاهل")

    def test_missing_bundle_raises(self, yaml_loader):
        with pytest.raises(FileNotFoundError):
            yaml_loader.load("ja")

    def test_invalid_yaml_raises(self, tmp_path):
        (tmp_path / "messages.de.yml").write_text("language: [unclosed", encoding="utf-8")
        loader = YAMLTranslationLoader(tmp_path)
        with pytest.raises(ValueError):
            loader.load("de")

    def test_empty_bundle_gives_empty_catalog(self, tmp_path):
        (tmp_path / "messages.de.yml").write_text("", encoding="utf-8")
        catalog = YAMLTranslationLoader(tmp_path).load("de")
        assert catalog.messages == {}

    def test_non_mapping_namespaces_skipped(self, tmp_path):
        (tmp_path / "messages.de.yml").write_text(
            "language:\n  greeting: Hallo\nbroken: just a string\n", encoding="utf-8"
        )
        catalog = YAMLTranslationLoader(tmp_path).load("de")
        assert list(catalog.messages) == ["language"]

    def test_cache_returns_same_catalog(self, temp_locale_dir):
        loader = YAMLTranslationLoader(temp_locale_dir, use_cache=True)
        assert loader.load("de") is loader.load("de")

    def test_without_cache_reads_again(self, yaml_loader):
        assert yaml_loader.load("de") is not yaml_loader.load("de")

