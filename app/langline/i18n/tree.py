"""Tree operations: merging discovered sources and resolving dotted paths."""

from typing import Iterable, Optional

from langline.i18n.models import Node, TreeNode


def merge_trees(base: TreeNode, override: TreeNode) -> TreeNode:
    """Deep-merge two trees, ``override`` taking precedence.

    Mappings are merged key by key, recursively. Anywhere else the
    overriding value replaces the base value whole, including sequence
    leaves. Neither input is mutated.

    Example:
        merge_trees({"x": "1", "y": "2"}, {"x": "override"})
        -> {"x": "override", "y": "2"}
    """
    if not (isinstance(base, Node) and isinstance(override, Node)):
        return override

    children = dict(base.children)
    for segment, child in override.children.items():
        if segment in children:
            children[segment] = merge_trees(children[segment], child)
        else:
            children[segment] = child
    return Node(children)


def merge_all(trees: Iterable[TreeNode]) -> Node:
    """Merge trees in discovery order; later trees win.

    Returns:
        An empty Node for no trees, the tree itself for one, the merge
        result otherwise.
    """
    merged: Optional[TreeNode] = None
    for tree in trees:
        merged = tree if merged is None else merge_trees(merged, tree)

    if merged is None:
        return Node()
    if not isinstance(merged, Node):
        # A source's top level is always a mapping once loaded.
        raise TypeError("Merged source tree must be a Node")
    return merged


def _walk_segments(tree: Node, path: str) -> Optional[TreeNode]:
    current = tree
    output: Optional[TreeNode] = None
    for segment in path.split("."):
        output = current.get(segment)
        if isinstance(output, Node):
            current = output
    return output


def _two_level(tree: Node, path: str) -> Optional[TreeNode]:
    first, _, remainder = path.partition(".")
    parent = tree.get(first)
    if isinstance(parent, Node):
        return parent.get(remainder)
    return None


def extract(tree: Node, path: str) -> Optional[TreeNode]:
    """Resolve a dotted path inside a loaded source tree.

    Tried in order, first hit wins:

    1. ``path`` as a single literal key (keys may contain dots).
    2. Segment walk: each segment is looked up in the current node and a
       Node result becomes the new current node. The value found for the
       last segment is returned. A missing segment leaves the current node
       unchanged.
    3. ``tree[first][rest]`` where ``first`` is the text before the first
       dot and ``rest`` is everything after it, as one literal key.

    Returns:
        The matching Leaf or Node, or None when all three attempts miss.
    """
    output = tree.get(path)
    if output is not None:
        return output

    output = _walk_segments(tree, path)
    if output is not None:
        return output

    return _two_level(tree, path)
