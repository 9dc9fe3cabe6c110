"""Translation service for dependency injection.

Provides a class-based interface to the i18n system for easier DI and testing.
"""

from typing import Any, Mapping, Optional

from langline.i18n.factory import create_translator
from langline.i18n.models import MessageValue
from langline.i18n.translator import Translator


class TranslationService:
    """Class-based translation service.

    Thin facade over a Translator: all work is delegated. Pass one instance
    to the code that needs messages instead of reaching for a global.

    Usage:
        service = TranslationService()
        service.translate("validation.required")
        service.translate("greeting.hello", {"name": "Ada"}, locale="fr-FR")
    """

    def __init__(self, translator: Optional[Translator] = None):
        """Initialize translation service.

        Args:
            translator: Optional pre-configured Translator instance.
                       If not provided, creates default via factory.
        """
        self._translator = translator or create_translator()

    def translate(
        self,
        key: str,
        args: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
    ) -> MessageValue:
        """Resolve and format a message.

        Args:
            key: Dotted lookup key
            args: Optional placeholder values
            locale: Locale for this call only (default: current locale)

        Returns:
            Formatted message, or the key when no translation exists
        """
        if locale is None:
            return self._translator.lookup(key, args)
        return self._translator.lookup_in(locale, key, args)

    def has_message(self, key: str, locale: Optional[str] = None) -> bool:
        """Check if translation exists for key in locale (no fallback)."""
        return self._translator.has_line(key, locale)

    def set_locale(self, locale: Optional[str]) -> "TranslationService":
        self._translator.set_locale(locale)
        return self

    def get_locale(self) -> str:
        return self._translator.get_locale()

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance.

        Returns:
            The underlying Translator instance
        """
        return self._translator
