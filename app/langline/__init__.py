"""langline - locale-aware message lookup over cached translation sources."""

from langline.i18n import TranslationService, Translator, create_translator

__all__ = ["Translator", "TranslationService", "create_translator"]
