"""Tests for infrastructure.i18n.models module."""

import dataclasses

import pytest

from infrastructure.i18n import (
    LANGUAGE_CATALOG,
    ActiveLocale,
    ActiveLocaleSelection,
    AvailableLocaleSet,
    LocaleDescriptor,
    SelectionSource,
    TextDirection,
    TranslationKey,
)
from infrastructure.i18n.models import widen_pattern
from tests.factories.i18n import (
    make_locale_descriptor,
    make_translation_catalog,
    make_translation_key,
)


@pytest.mark.unit
class TestLocaleDescriptor:
    """Tests for LocaleDescriptor."""

    def test_descriptor_is_immutable(self):
        language = make_locale_descriptor()
        with pytest.raises(dataclasses.FrozenInstanceError):
            language.code = "fr"

    def test_display_name_with_native_name(self):
        assert make_locale_descriptor().display_name == "Deutsch - German"

    def test_display_name_without_native_name(self):
        assert LANGUAGE_CATALOG["en"].display_name == "English"

    @pytest.mark.parametrize("code", ["ar", "fa", "he", "ur"])
    def test_rtl_languages(self, code):
        language = LANGUAGE_CATALOG[code]
        assert language.is_rtl is True
        assert language.text_direction == TextDirection.RIGHT_TO_LEFT

    def test_ltr_language(self):
        assert LANGUAGE_CATALOG["de"].text_direction == TextDirection.LEFT_TO_RIGHT

    def test_regional_arabic_is_ltr(self):
        """Direction is decided by exact code."""
        assert LANGUAGE_CATALOG["ar_ly"].is_rtl is False

    def test_synthesize(self):
        language = LocaleDescriptor.synthesize("xx")
        assert language.english_name == "Xx"
        assert language.native_name == "Xx"
        assert language.match_pattern == "xx"
        assert language.key == "xx"

    def test_empty_pattern_never_matches(self):
        language = make_locale_descriptor(match_pattern="")
        assert language.matches_accept_language("de") is False
        assert language.matches_user_agent("(Windows; de;)") is False

    def test_accept_language_is_case_insensitive(self):
        assert make_locale_descriptor().matches_accept_language("DE-at;q=0.7")

    def test_accept_language_is_anchored(self):
        assert not make_locale_descriptor().matches_accept_language("xde")
        assert not make_locale_descriptor().matches_accept_language("de-DE-1996")


@pytest.mark.unit
class TestWidenPattern:
    def test_base_pattern_gets_region_suffix(self):
        assert widen_pattern("de|german") == "de([-_][a-z]{2,3})?|german"

    def test_pattern_with_region_is_unchanged(self):
        assert widen_pattern("pt[-_]br|portuguese (brazil)") == (
            "pt[-_]br|portuguese (brazil)"
        )

    def test_single_alternative_is_unchanged(self):
        assert widen_pattern("xx") == "xx"


@pytest.mark.unit
class TestAvailableLocaleSet:
    """Tests for AvailableLocaleSet."""

    def test_lookup_lowercases_key(self):
        available = AvailableLocaleSet([LANGUAGE_CATALOG["pt_br"]])
        assert available["PT_BR"].code == "pt_BR"
        assert "pt_br" in available

    def test_first_descriptor_per_key_wins(self):
        first = make_locale_descriptor(english_name="First")
        second = make_locale_descriptor(english_name="Second")
        available = AvailableLocaleSet([first, second])
        assert len(available) == 1
        assert available["de"].english_name == "First"

    def test_sorted_by_english_name(self):
        available = AvailableLocaleSet(
            [LANGUAGE_CATALOG["de"], LANGUAGE_CATALOG["en"], LANGUAGE_CATALOG["fr"]]
        )
        # French sorts before German by English name
        assert [language.code for language in available.sorted()] == [
            "en",
            "fr",
            "de",
        ]

    def test_has_choice(self):
        assert AvailableLocaleSet([LANGUAGE_CATALOG["en"]]).has_choice is False
        assert (
            AvailableLocaleSet(
                [LANGUAGE_CATALOG["en"], LANGUAGE_CATALOG["de"]]
            ).has_choice
            is True
        )


@pytest.mark.unit
class TestActiveLocaleSelection:
    def test_no_rejections_by_default(self):
        selection = ActiveLocaleSelection(
            language=LANGUAGE_CATALOG["en"], source=SelectionSource.DEFAULT
        )
        assert selection.has_rejections is False

    @pytest.mark.parametrize(
        "flag",
        ["rejected_forced_config", "rejected_cookie", "rejected_request_param"],
    )
    def test_any_flag_is_a_rejection(self, flag):
        selection = ActiveLocaleSelection(
            language=LANGUAGE_CATALOG["en"],
            source=SelectionSource.DEFAULT,
            **{flag: True},
        )
        assert selection.has_rejections is True

    def test_active_locale_code(self):
        active = ActiveLocale(
            language=LANGUAGE_CATALOG["ar"],
            text_direction=TextDirection.RIGHT_TO_LEFT,
        )
        assert active.code == "ar"
        assert active.warning is None


@pytest.mark.unit
class TestTranslationKey:
    def test_str(self):
        assert str(make_translation_key()) == "language.unsupported_code"

    def test_key_is_hashable(self):
        assert len({make_translation_key(), make_translation_key()}) == 1


@pytest.mark.unit
class TestTranslationCatalog:
    def test_get_message(self):
        catalog = make_translation_catalog()
        assert catalog.get_message(make_translation_key()) == (
            "Ignoring unsupported language code."
        )

    def test_missing_message(self):
        catalog = make_translation_catalog()
        key = make_translation_key(message_key="missing")
        assert catalog.get_message(key) is None

    def test_merge_later_entries_win(self):
        catalog = make_translation_catalog()
        catalog.merge({"language": {"greeting": "Hi"}, "other": {"a": "b"}})
        assert catalog.get_message(make_translation_key(message_key="greeting")) == (
            "Hi"
        )
        assert catalog.get_message(make_translation_key()) == (
            "Ignoring unsupported language code."
        )
        assert catalog.get_message(TranslationKey("other", "a")) == "b"
