"""Translation models for the i18n system.

Defines the tagged translation tree and locale helpers.

A loaded source is a tree: ``Leaf`` holds a message string or an ordered
sequence of strings, ``Node`` maps segment names to sub-trees.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from langline.i18n.errors import SourceLoadError


@dataclass(frozen=True)
class Leaf:
    """Terminal tree value.

    Attributes:
        value: A message string, or a tuple of message strings.
    """

    value: Union[str, Tuple[str, ...]]


@dataclass(frozen=True, eq=True)
class Node:
    """Mapping from segment name to sub-tree.

    Compared by value but not hashable: children is a plain dict. An empty
    Node is still truthy; use ``len(node.children)`` to count entries.

    Attributes:
        children: Segment name -> Leaf or Node.
    """

    children: Dict[str, "TreeNode"] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def get(self, segment: str) -> Optional["TreeNode"]:
        """Return the child for a segment, or None if absent."""
        return self.children.get(segment)

    def __contains__(self, segment: object) -> bool:
        return segment in self.children


TreeNode = Union[Leaf, Node]

# Plain Python shape returned to callers: str, list of str, or nested dict.
MessageValue = Union[str, list, dict]


def build_tree(raw: Any, path: str = "") -> TreeNode:
    """Convert loaded data into a tagged tree.

    Mapping keys are coerced to ``str`` so integer keys from YAML or JSON
    arrays-of-objects remain addressable by dotted keys.

    Args:
        raw: Parsed data (str, list/tuple of str, or mapping).
        path: Dotted location of ``raw`` inside its source, for error messages.

    Returns:
        Leaf or Node.

    Raises:
        SourceLoadError: If a value is neither a string, a sequence of strings
            nor a mapping.
    """
    if isinstance(raw, str):
        return Leaf(raw)

    if isinstance(raw, (list, tuple)):
        if not all(isinstance(item, str) for item in raw):
            raise SourceLoadError(
                f"Sequence at '{path or '<root>'}' must contain only strings"
            )
        return Leaf(tuple(raw))

    if isinstance(raw, Mapping):
        children = {}
        for key, value in raw.items():
            segment = str(key)
            child_path = f"{path}.{segment}" if path else segment
            children[segment] = build_tree(value, child_path)
        return Node(children)

    raise SourceLoadError(
        f"Unsupported value of type {type(raw).__name__} at '{path or '<root>'}'"
    )


def to_python(tree: TreeNode) -> MessageValue:
    """Convert a tree back to plain Python values.

    Returns:
        ``str`` for a string leaf, ``list`` for a sequence leaf, ``dict``
        for a node.
    """
    match tree:
        case Leaf(value=str() as text):
            return text
        case Leaf(value=items):
            return list(items)
        case Node(children=children):
            return {segment: to_python(child) for segment, child in children.items()}
    raise TypeError(f"Not a translation tree: {tree!r}")


def language_of(locale: str) -> Optional[str]:
    """Get language part of a locale (e.g., "fr" from "fr-FR").

    Returns:
        Text before the first "-", or None when the locale has no region
        part (a leading "-" does not count as a separator).
    """
    index = locale.find("-")
    if index > 0:
        return locale[:index]
    return None


def fallback_chain(locale: str, fallback_locale: str = "en") -> list[str]:
    """Ordered locales tried for a lookup.

    requested -> language-only (when the locale has a region) -> fallback.
    Repeated locales are dropped.

    Example:
        fallback_chain("fr-FR") == ["fr-FR", "fr", "en"]
        fallback_chain("en-US") == ["en-US", "en"]
    """
    chain = [locale]
    language = language_of(locale)
    if language is not None:
        chain.append(language)
    chain.append(fallback_locale)

    ordered: list[str] = []
    for candidate in chain:
        if candidate not in ordered:
            ordered.append(candidate)
    return ordered
