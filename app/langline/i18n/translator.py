"""Translation lookup with locale fallback.

Core component for i18n: resolves dotted keys such as ``validation.required``
against lazily loaded sources and formats the result.
"""

from typing import Any, Mapping, Optional

from langline.i18n.cache import SourceCache
from langline.i18n.formatter import MessageFormatter
from langline.i18n.models import MessageValue, TreeNode, fallback_chain, to_python
from langline.i18n.tree import extract
from langline.logging import get_module_logger

logger = get_module_logger()


class Translator:
    """Resolves lookup keys to messages for a current locale.

    A key's first dot-segment names the source, the rest is a path inside
    that source. Locales are tried in order: the current locale, its
    language-only form (``fr`` for ``fr-FR``), then the fallback locale.
    When every tier misses, the key itself is returned.

    Attributes:
        fallback_locale: Last locale tried before giving up.
        formatter: MessageFormatter applied to every result.
    """

    def __init__(
        self,
        locale: str,
        cache: SourceCache,
        formatter: Optional[MessageFormatter] = None,
        fallback_locale: str = "en",
    ):
        """Initialize Translator.

        Args:
            locale: Current locale.
            cache: SourceCache owned by this translator.
            formatter: Formatter for placeholder substitution. Defaults to a
                MessageFormatter using ICU when available.
            fallback_locale: Locale to use when key not found (default: en).
        """
        self._locale = locale
        self._cache = cache
        self.formatter = formatter or MessageFormatter()
        self.fallback_locale = fallback_locale
        logger.info(
            "initialized_translator",
            locale=locale,
            fallback_locale=fallback_locale,
            formatting_supported=self.formatter.supported,
        )

    @property
    def cache(self) -> SourceCache:
        return self._cache

    def set_locale(self, locale: Optional[str] = None) -> "Translator":
        """Set the current locale; None leaves it unchanged.

        Returns:
            self, for chaining.
        """
        if locale is not None:
            self._locale = locale
        return self

    def get_locale(self) -> str:
        return self._locale

    def lookup(
        self,
        key: str,
        args: Optional[Mapping[str, Any]] = None,
    ) -> MessageValue:
        """Resolve a key in the current locale.

        Args:
            key: Dotted key ("validation.required"). A key without a dot is
                treated as the message itself.
            args: Optional placeholder values.

        Returns:
            The formatted message: a string, a list of strings, or a dict
            when the key names a group of messages. The key itself when no
            locale of the fallback chain has it.
        """
        return self.lookup_in(self._locale, key, args)

    def lookup_in(
        self,
        locale: str,
        key: str,
        args: Optional[Mapping[str, Any]] = None,
    ) -> MessageValue:
        """Resolve a key in an explicit locale without changing the current one."""
        if "." not in key:
            return self.formatter.format(key, locale, args)

        source, path = key.split(".", 1)
        value: MessageValue = key

        for candidate in fallback_chain(locale, self.fallback_locale):
            found = self._resolve(candidate, source, path)
            if found is not None:
                if candidate != locale:
                    logger.debug(
                        "used_fallback_translation",
                        key=key,
                        requested_locale=locale,
                        fallback_locale=candidate,
                    )
                value = to_python(found)
                break
        else:
            logger.debug("translation_not_found", key=key, locale=locale)

        return self.formatter.format(value, locale, args)

    def has_line(self, key: str, locale: Optional[str] = None) -> bool:
        """Check if a key resolves in a locale's own data, without fallback.

        Args:
            key: Dotted key.
            locale: Locale to check (default: current locale).

        Returns:
            True if the locale's source contains the path.
        """
        if "." not in key:
            return False
        source, path = key.split(".", 1)
        return self._resolve(locale or self._locale, source, path) is not None

    def _resolve(self, locale: str, source: str, path: str) -> Optional[TreeNode]:
        tree = self._cache.ensure_loaded(source, locale)
        return extract(tree, path)
