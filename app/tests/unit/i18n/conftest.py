"""Feature-level fixtures for i18n system tests."""

import pytest

from langline.i18n import (
    MemorySourceProvider,
    MessageFormatter,
    SourceCache,
    Translator,
)
from tests.factories.i18n import make_validation_messages, write_source


def _echo_backend(locale, pattern, args):
    """Formatting backend recording its inputs in the output."""
    rendered = pattern
    for name, value in args.items():
        rendered = rendered.replace("{" + name + "}", str(value))
    return f"[{locale}] {rendered}"


@pytest.fixture
def echo_backend():
    return _echo_backend


@pytest.fixture
def echo_formatter():
    """MessageFormatter with a deterministic, ICU-free backend."""
    return MessageFormatter(backend=_echo_backend)


@pytest.fixture
def memory_provider():
    """MemorySourceProvider with en, fr and fr-FR data."""
    return MemorySourceProvider(
        {
            "en": {
                "validation": make_validation_messages(),
                "common": {"yes": "Yes", "no": "No"},
            },
            "fr": {
                "common": {"yes": "Oui"},
            },
            "fr-FR": {
                "common": {"no": "Non (FR)"},
            },
        }
    )


@pytest.fixture
def source_cache(memory_provider):
    return SourceCache(memory_provider)


@pytest.fixture
def translator(source_cache, echo_formatter):
    """Translator in "en" over the memory provider."""
    return Translator(locale="en", cache=source_cache, formatter=echo_formatter)


@pytest.fixture
def translations_dir(tmp_path):
    """Create a directory tree of YAML and JSON translation files.

    Layout:
    - base/translations/en/validation.yml
    - base/translations/fr/validation.yml
    - override/translations/en/validation.yml
    - override/translations/en/validation.json
    """
    base = tmp_path / "base"
    override = tmp_path / "override"

    write_source(base, "en", "validation", make_validation_messages())
    write_source(base, "fr", "validation", {"required": "Ce champ est obligatoire."})
    write_source(
        override,
        "en",
        "validation",
        {"required": "Required!", "rules": {"url": "Bad URL."}},
    )
    json_path = override / "translations" / "en" / "validation.json"
    json_path.write_text('{"extra": "From JSON"}', encoding="utf-8")

    return tmp_path
