"""i18n system - locale-aware message lookup.

Resolves dotted keys (``validation.required``) against translation sources
loaded lazily per locale and cached for the translator's lifetime.

Main components:
- models: Leaf / Node translation trees and locale helpers
- tree: deep merge and dotted-path extraction
- locator / loader: discovery and parsing of translation files
- cache: SourceCache, at-most-once loading per (locale, source)
- formatter: MessageFormatter (ICU patterns via PyICU when installed)
- translator: Translator with locale fallback
- factory / service: construction helpers and DI facade
"""

from langline.i18n.cache import SourceCache
from langline.i18n.errors import I18nError, SourceLoadError
from langline.i18n.factory import create_translator
from langline.i18n.formatter import MessageFormatter, format_icu_message, icu_available
from langline.i18n.loader import (
    FileSourceProvider,
    MemorySourceProvider,
    SourceProvider,
    TranslationFileLoader,
)
from langline.i18n.locator import SourceLocator
from langline.i18n.models import Leaf, Node, TreeNode, build_tree, fallback_chain, to_python
from langline.i18n.service import TranslationService
from langline.i18n.translator import Translator
from langline.i18n.tree import extract, merge_all, merge_trees

__all__ = [
    "Leaf",
    "Node",
    "TreeNode",
    "build_tree",
    "to_python",
    "fallback_chain",
    "merge_trees",
    "merge_all",
    "extract",
    "SourceLocator",
    "SourceProvider",
    "TranslationFileLoader",
    "FileSourceProvider",
    "MemorySourceProvider",
    "SourceCache",
    "MessageFormatter",
    "format_icu_message",
    "icu_available",
    "Translator",
    "create_translator",
    "TranslationService",
    "I18nError",
    "SourceLoadError",
]
