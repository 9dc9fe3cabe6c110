"""Factory functions for creating i18n components.

Provides a convenience function for building a translator from settings.
"""

from pathlib import Path
from typing import Iterable, Optional

from langline.configuration import Settings, get_settings
from langline.i18n.cache import SourceCache
from langline.i18n.formatter import MessageFormatter
from langline.i18n.loader import FileSourceProvider, SourceProvider
from langline.i18n.locator import SourceLocator
from langline.i18n.translator import Translator
from langline.logging import get_module_logger

logger = get_module_logger()


def create_translator(
    search_paths: Optional[Iterable[Path | str]] = None,
    locale: Optional[str] = None,
    fallback_locale: Optional[str] = None,
    provider: Optional[SourceProvider] = None,
    formatter: Optional[MessageFormatter] = None,
    settings: Optional[Settings] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Anything not passed explicitly comes from ``settings.i18n``.

    Args:
        search_paths: Base directories holding translation folders.
        locale: Initial locale.
        fallback_locale: Last locale of the fallback chain.
        provider: Source provider; overrides file discovery entirely.
        formatter: Message formatter.
        settings: Settings instance (default: get_settings()).

    Returns:
        Translator: Configured translator with an empty cache.

    Usage:
        # Use defaults (./translations/<locale>/<source>.yml)
        translator = create_translator()

        # Custom search paths, later paths override earlier ones
        translator = create_translator(search_paths=["/app", "/overrides"])
        translator.set_locale("fr-FR").lookup("validation.required")
    """
    i18n_settings = (settings or get_settings()).i18n

    if provider is None:
        locator = SourceLocator(
            search_paths=search_paths if search_paths is not None else i18n_settings.search_paths,
            resource_dir=i18n_settings.resource_dir,
            extensions=i18n_settings.file_extensions,
        )
        provider = FileSourceProvider(locator)

    if formatter is None:
        formatter = MessageFormatter(enabled=i18n_settings.formatting_enabled)

    translator = Translator(
        locale=locale or i18n_settings.default_locale,
        cache=SourceCache(provider),
        formatter=formatter,
        fallback_locale=fallback_locale or i18n_settings.fallback_locale,
    )

    logger.info(
        "translator_created",
        provider=type(provider).__name__,
        locale=translator.get_locale(),
    )
    return translator
