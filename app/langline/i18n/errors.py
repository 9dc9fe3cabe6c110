"""Exceptions raised by the i18n package.

Missing keys, sources and locales are never errors: lookups degrade to the
key itself. Only structural failures surface to callers.
"""


class I18nError(Exception):
    """Base class for i18n errors."""


class SourceLoadError(I18nError, ValueError):
    """A discovered translation source could not be turned into a tree.

    Raised for unparsable files, unsupported file types, a non-mapping top
    level, or node values that are neither strings, string sequences nor
    mappings. Distinct from a source that simply does not exist.

    Attributes:
        source: Logical source name or file path that failed.
    """

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source
