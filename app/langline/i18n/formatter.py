"""Placeholder substitution for resolved messages.

Formatting uses ICU message patterns (numbered and named placeholders,
plural and select) through PyICU. When PyICU is not installed, messages
are returned unchanged.
"""

from typing import Any, Callable, Mapping, Optional

from langline.i18n.models import MessageValue
from langline.logging import get_module_logger

logger = get_module_logger()

FormatBackend = Callable[[str, str, Mapping[str, Any]], str]


def icu_available() -> bool:
    """Check whether the PyICU ``icu`` module imports.

    An installed package whose native ICU libraries fail to load counts as
    unavailable.
    """
    try:
        import icu  # noqa: F401
    except ImportError as e:
        logger.debug("icu_unavailable", error=str(e))
        return False
    return True


def format_icu_message(locale: str, pattern: str, args: Mapping[str, Any]) -> str:
    """Format an ICU message pattern with named arguments.

    Numbered placeholders (``{0}``) are addressed with keys ``"0"``, ``"1"``...

    Args:
        locale: BCP 47 locale tag (e.g., "fr-FR").
        pattern: ICU message pattern.
        args: Argument name -> value.

    Returns:
        Formatted message.

    Raises:
        icu.ICUError: If the pattern or arguments are invalid.
    """
    import icu

    message_format = icu.MessageFormat(pattern, icu.Locale.forLanguageTag(locale))
    names = [str(name) for name in args]
    values = [icu.Formattable(value) for value in args.values()]
    return str(message_format.format(names, values))


class MessageFormatter:
    """Applies locale-aware formatting to resolved values.

    Whether formatting is possible is decided once, at construction.

    Attributes:
        backend: Callable(locale, pattern, args) -> str, or None.
        supported: True when a backend is available.
    """

    def __init__(self, backend: Optional[FormatBackend] = None, enabled: bool = True):
        """Initialize MessageFormatter.

        Args:
            backend: Explicit formatting callable. Defaults to ICU when PyICU
                is installed.
            enabled: Set False to never format.
        """
        if backend is None and enabled and icu_available():
            backend = format_icu_message

        self.backend = backend if enabled else None
        self.supported = self.backend is not None
        logger.debug("initialized_message_formatter", supported=self.supported)

    def format(
        self,
        message: MessageValue,
        locale: str,
        args: Optional[Mapping[str, Any]] = None,
    ) -> MessageValue:
        """Format a resolved value.

        Args:
            message: A string, a list of strings, or a nested dict of them.
            locale: Locale whose formatting rules apply.
            args: Placeholder values.

        Returns:
            Value of the same shape, formatted. Unchanged when formatting is
            unsupported or no args are given.
        """
        if not self.supported or not args:
            return message

        if isinstance(message, (list, tuple)):
            return [self.format(item, locale, args) for item in message]

        if isinstance(message, dict):
            return {key: self.format(value, locale, args) for key, value in message.items()}

        return self.backend(locale, message, args)
