"""Translation source providers.

Defines the contract for fetching the raw data behind a logical source name
and provides file-based and in-memory implementations.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

import yaml

from langline.i18n.errors import SourceLoadError
from langline.i18n.locator import SourceLocator
from langline.logging import get_module_logger

logger = get_module_logger()


class SourceProvider(ABC):
    """Abstract base for translation source providers.

    Implementations return every raw tree found for a source in a locale,
    in precedence order (lowest first).
    """

    @abstractmethod
    def fetch(self, source: str, locale: str) -> List[Dict[str, Any]]:
        """Fetch the raw trees backing a source.

        Args:
            source: Logical source name (first segment of a lookup key).
            locale: Locale identifier.

        Returns:
            Possibly empty list of mappings, in merge order.

        Raises:
            SourceLoadError: If a discovered source cannot be parsed.
        """


class TranslationFileLoader:
    """Parses a single translation file into a mapping.

    Supports YAML (``.yml``, ``.yaml``) and JSON (``.json``) files.
    """

    YAML_SUFFIXES = (".yml", ".yaml")
    JSON_SUFFIXES = (".json",)

    def load(self, path: Path) -> Dict[str, Any]:
        """Load a translation file.

        Args:
            path: File to parse.

        Returns:
            Parsed mapping. An empty YAML file yields an empty mapping.

        Raises:
            SourceLoadError: If the file cannot be read or parsed, has an
                unsupported suffix, or its top level is not a mapping.
        """
        path = Path(path)
        suffix = path.suffix.lower()

        if suffix not in self.YAML_SUFFIXES + self.JSON_SUFFIXES:
            raise SourceLoadError(
                f"Unsupported translation file type: {path}", source=str(path)
            )

        try:
            with open(path, "r", encoding="utf-8") as f:
                if suffix in self.YAML_SUFFIXES:
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise SourceLoadError(f"Failed to parse {path}: {e}", source=str(path)) from e
        except json.JSONDecodeError as e:
            logger.error("json_parse_error", file=str(path), error=str(e))
            raise SourceLoadError(f"Failed to parse {path}: {e}", source=str(path)) from e
        except OSError as e:
            logger.error("translation_file_read_error", file=str(path), error=str(e))
            raise SourceLoadError(f"Failed to read {path}: {e}", source=str(path)) from e

        if data is None:
            return {}

        if not isinstance(data, dict):
            logger.error(
                "invalid_translation_format", file=str(path), expected="mapping"
            )
            raise SourceLoadError(
                f"Top level of {path} must be a mapping, got {type(data).__name__}",
                source=str(path),
            )

        return data


class FileSourceProvider(SourceProvider):
    """Provider reading translation files discovered by a SourceLocator.

    Attributes:
        locator: Finds the files backing a source.
        loader: Parses each file.
    """

    def __init__(
        self,
        locator: SourceLocator,
        loader: TranslationFileLoader | None = None,
    ):
        self.locator = locator
        self.loader = loader or TranslationFileLoader()

    def fetch(self, source: str, locale: str) -> List[Dict[str, Any]]:
        files = self.locator.locate(source, locale)
        trees = [self.loader.load(path) for path in files]
        logger.info(
            "fetched_translation_source",
            source=source,
            locale=locale,
            file_count=len(files),
        )
        return trees


class MemorySourceProvider(SourceProvider):
    """In-memory provider.

    Data is keyed by locale then source name. A source maps either to one
    tree or to a list of trees (merged in list order).

    Attributes:
        data: {locale: {source: tree | [tree, ...]}}
        calls: Every (source, locale) pair fetched, in call order.
    """

    def __init__(self, data: Mapping[str, Mapping[str, Any]] | None = None):
        self.data = {locale: dict(sources) for locale, sources in (data or {}).items()}
        self.calls: List[Tuple[str, str]] = []

    def add(self, locale: str, source: str, tree: Mapping[str, Any]) -> None:
        """Register one more tree for a source (appended after existing ones)."""
        existing = self.data.setdefault(locale, {}).get(source)
        if existing is None:
            self.data[locale][source] = [dict(tree)]
        elif isinstance(existing, list):
            existing.append(dict(tree))
        else:
            self.data[locale][source] = [existing, dict(tree)]

    def fetch(self, source: str, locale: str) -> List[Dict[str, Any]]:
        self.calls.append((source, locale))
        entry = self.data.get(locale, {}).get(source)
        if entry is None:
            return []
        if isinstance(entry, list):
            return list(entry)
        return [entry]
