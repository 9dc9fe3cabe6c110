"""Per-locale, per-source cache of loaded translation trees."""

from typing import Dict, FrozenSet, Optional, Set

from langline.i18n.errors import SourceLoadError
from langline.i18n.loader import SourceProvider
from langline.i18n.models import Node, build_tree
from langline.i18n.tree import merge_all
from langline.logging import get_module_logger

logger = get_module_logger()


class SourceCache:
    """Loads each (locale, source) pair at most once and keeps the result.

    Entries are never evicted: the cache lives exactly as long as its owner.
    Not thread-safe; callers serialize access or keep one cache per context.

    Attributes:
        provider: Supplies the raw trees behind a source.
    """

    def __init__(self, provider: SourceProvider):
        self.provider = provider
        self._loaded: Dict[str, Set[str]] = {}
        self._store: Dict[str, Dict[str, Node]] = {}

    def ensure_loaded(self, source: str, locale: str) -> Node:
        """Return the merged tree for a source, loading it on first use.

        Args:
            source: Logical source name.
            locale: Locale identifier.

        Returns:
            The cached Node (empty when no data exists for the pair).

        Raises:
            SourceLoadError: If a discovered source is malformed. Nothing is
                recorded in that case, so the next call tries again.
        """
        if source in self._loaded.get(locale, ()):
            return self._store[locale][source]

        tree = self.read(source, locale)

        self._loaded.setdefault(locale, set()).add(source)
        self._store.setdefault(locale, {})[source] = tree
        logger.info(
            "loaded_translation_source",
            source=source,
            locale=locale,
            key_count=len(tree.children),
        )
        return tree

    def read(self, source: str, locale: str) -> Node:
        """Fetch and merge a source without touching the cache."""
        raw_trees = self.provider.fetch(source, locale)
        trees = []
        for raw in raw_trees:
            tree = build_tree(raw, source)
            if not isinstance(tree, Node):
                raise SourceLoadError(
                    f"Source '{source}' for locale '{locale}' must be a mapping",
                    source=source,
                )
            trees.append(tree)
        return merge_all(trees)

    def get(self, source: str, locale: str) -> Optional[Node]:
        """Cached tree for the pair, or None if it was never loaded."""
        return self._store.get(locale, {}).get(source)

    def is_loaded(self, source: str, locale: str) -> bool:
        return source in self._loaded.get(locale, ())

    def loaded_sources(self, locale: str) -> FrozenSet[str]:
        return frozenset(self._loaded.get(locale, ()))

    def loaded_locales(self) -> FrozenSet[str]:
        return frozenset(self._loaded)
