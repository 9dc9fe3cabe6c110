"""Tests for langline.i18n.translator module."""

from unittest.mock import Mock

import pytest

from langline.i18n import (
    MemorySourceProvider,
    MessageFormatter,
    Node,
    SourceCache,
    SourceLoadError,
    Translator,
)
from tests.factories.i18n import make_translator


class TestTranslatorLocale:
    """Tests for set_locale() / get_locale()."""

    def test_initial_locale(self, translator):
        assert translator.get_locale() == "en"

    def test_set_locale(self, translator):
        translator.set_locale("fr-FR")
        assert translator.get_locale() == "fr-FR"

    def test_set_locale_none_keeps_current(self, translator):
        translator.set_locale("fr")
        translator.set_locale(None)
        assert translator.get_locale() == "fr"

    def test_set_locale_returns_self(self, translator):
        assert translator.set_locale("de") is translator

    def test_set_locale_does_not_validate(self, translator):
        translator.set_locale("not a locale")
        assert translator.get_locale() == "not a locale"

    def test_default_formatter(self, source_cache):
        translator = Translator("en", source_cache)
        assert isinstance(translator.formatter, MessageFormatter)


class TestTranslatorLookup:
    """Tests for lookup()."""

    def test_lookup_existing_key(self, translator):
        assert translator.lookup("validation.required") == "This field is required."

    def test_lookup_missing_key_returns_key(self, translator):
        assert translator.lookup("validation.missing") == "validation.missing"

    def test_lookup_missing_source_returns_key(self, translator):
        assert translator.lookup("a.b.c") == "a.b.c"

    def test_lookup_without_dot_is_literal(self, translator, memory_provider):
        assert translator.lookup("Hello") == "Hello"
        assert memory_provider.calls == []

    def test_lookup_without_dot_is_formatted(self, translator):
        assert translator.lookup("Hello {name}", {"name": "Ada"}) == "[en] Hello Ada"

    def test_lookup_nested_key(self, translator):
        assert translator.lookup("validation.rules.email") == "Enter a valid email address."

    def test_lookup_sequence(self, translator):
        assert translator.lookup("validation.hints") == ["Use letters", "Use digits"]

    def test_lookup_sequence_formats_each_element(self, translator):
        result = translator.lookup("validation.hints", {"unused": "x"})
        assert result == ["[en] Use letters", "[en] Use digits"]

    def test_lookup_group_returns_mapping(self, translator):
        assert translator.lookup("validation.rules") == {
            "email": "Enter a valid email address.",
            "url": "Enter a valid URL.",
        }

    def test_lookup_with_args(self, translator):
        result = translator.lookup("validation.min_length", {"min": 8})
        assert result == "[en] Must be at least 8 characters."

    def test_lookup_dotted_leaf_key(self):
        translator = make_translator({"en": {"s": {"a.b": "leaf"}}})
        assert translator.lookup("s.a.b") == "leaf"

    def test_lookup_embedded_dot_after_first_segment(self):
        translator = make_translator({"en": {"s": {"a": {"b.c": "embedded"}}}})
        assert translator.lookup("s.a.b.c") == "embedded"

    def test_lookup_empty_string_value(self):
        translator = make_translator({"en": {"s": {"empty": ""}}})
        assert translator.lookup("s.empty") == ""

    def test_lookup_loads_each_source_once(self, translator, memory_provider):
        translator.lookup("validation.required")
        translator.lookup("validation.rules.url")
        translator.lookup("validation.missing")

        assert memory_provider.calls == [("validation", "en")]


class TestTranslatorFallback:
    """Tests for the locale fallback chain."""

    def test_region_falls_back_to_default(self, translator, memory_provider):
        """fr-FR -> fr -> en."""
        translator.set_locale("fr-FR")

        assert translator.lookup("validation.required") == "This field is required."
        assert memory_provider.calls == [
            ("validation", "fr-FR"),
            ("validation", "fr"),
            ("validation", "en"),
        ]

    def test_region_locale_has_priority(self, translator):
        translator.set_locale("fr-FR")
        assert translator.lookup("common.no") == "Non (FR)"

    def test_language_locale_before_default(self, translator):
        translator.set_locale("fr-FR")
        assert translator.lookup("common.yes") == "Oui"

    def test_language_falls_back_to_default(self, translator):
        translator.set_locale("fr")
        assert translator.lookup("common.no") == "No"

    def test_missing_everywhere_returns_key(self, translator):
        translator.set_locale("fr-FR")
        assert translator.lookup("common.maybe") == "common.maybe"

    def test_fallback_not_cached_under_requested_locale(self, translator):
        translator.set_locale("fr-FR")
        translator.lookup("validation.required")

        assert translator.cache.get("validation", "fr-FR") == Node()
        assert translator.cache.get("validation", "fr") == Node()
        assert "required" in translator.cache.get("validation", "en")

    def test_formatting_uses_requested_locale(self, translator):
        translator.set_locale("fr-FR")

        result = translator.lookup("validation.min_length", {"min": 3})

        assert result == "[fr-FR] Must be at least 3 characters."

    def test_custom_fallback_locale(self):
        translator = make_translator(
            {
                "en": {"s": {"k": "english"}},
                "de": {"s": {"k": "deutsch"}},
            },
            locale="fr",
            fallback_locale="de",
        )
        assert translator.lookup("s.k") == "deutsch"

    def test_each_fallback_locale_loaded_once(self, translator, memory_provider):
        translator.set_locale("fr-FR")
        translator.lookup("validation.required")
        translator.lookup("validation.rules.email")

        assert len(memory_provider.calls) == 3


class TestTranslatorErrors:
    """Structural failures surface to callers."""

    def test_malformed_source_propagates(self):
        translator = make_translator({"en": {"bad": {"count": 5}}})

        with pytest.raises(SourceLoadError):
            translator.lookup("bad.count")

    def test_formatting_errors_propagate(self, source_cache):
        formatter = MessageFormatter(backend=Mock(side_effect=ValueError("bad pattern")))
        translator = Translator("en", source_cache, formatter=formatter)

        with pytest.raises(ValueError, match="bad pattern"):
            translator.lookup("validation.required", {"x": 1})


class TestTranslatorExplicitLocale:
    """Tests for lookup_in() and has_line()."""

    def test_lookup_in_does_not_change_locale(self, translator):
        assert translator.lookup_in("fr", "common.yes") == "Oui"
        assert translator.get_locale() == "en"

    def test_lookup_in_formats_with_given_locale(self, translator):
        assert translator.lookup_in("fr", "Hi {x}", {"x": "1"}) == "[fr] Hi 1"

    def test_has_line(self, translator):
        assert translator.has_line("common.yes", "fr")
        assert not translator.has_line("common.no", "fr")

    def test_has_line_uses_current_locale(self, translator):
        assert translator.has_line("validation.required")
        translator.set_locale("fr")
        assert not translator.has_line("validation.required")

    def test_has_line_without_dot(self, translator):
        assert not translator.has_line("Hello")


class TestValidationScenario:
    """End-to-end lookup over a single "validation" source."""

    @pytest.fixture
    def scenario_translator(self):
        provider = MemorySourceProvider(
            {"en": {"validation": {"required": "This field is required."}}}
        )
        return Translator("en", SourceCache(provider), MessageFormatter(enabled=False))

    def test_scenario(self, scenario_translator):
        assert scenario_translator.lookup("validation.required") == "This field is required."
        assert scenario_translator.lookup("validation.missing") == "validation.missing"

        scenario_translator.set_locale("fr")
        assert scenario_translator.lookup("validation.required") == "This field is required."
