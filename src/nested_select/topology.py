"""Read-only traversal helpers over the caller's topology maps.

The topology is two plain mappings owned by the caller:

- ``children``: id -> ordered sequence of child ids (empty or absent = leaf)
- ``parents``:  id -> parent id (absent = root)

Nothing here validates the shape.  Cycles or multi-parented nodes are the
caller's responsibility; feeding them in is undefined behaviour.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Mapping, Sequence

from nested_select.state import Id

__all__ = [
    "Children",
    "Parents",
    "is_leaf",
    "iter_ancestors",
    "iter_subtree",
    "parents_from_children",
]

Children = Mapping[Id, Sequence[Id]]
Parents = Mapping[Id, Id]

# Sentinel for "no parent" so that falsy ids (0, "") still walk correctly.
_NO_PARENT = object()


def is_leaf(node_id: Id, children: Children) -> bool:
    """Return True when ``node_id`` has no recorded children."""
    return not children.get(node_id)


def iter_subtree(node_id: Id, children: Children) -> Iterator[Id]:
    """Yield ``node_id`` followed by every descendant, breadth-first."""
    queue: deque[Id] = deque([node_id])
    while queue:
        item = queue.popleft()
        yield item
        queue.extend(children.get(item, ()))


def iter_ancestors(node_id: Id, parents: Parents) -> Iterator[Id]:
    """Yield the parent of ``node_id``, then its parent, up to the root."""
    parent = parents.get(node_id, _NO_PARENT)
    while parent is not _NO_PARENT:
        yield parent
        parent = parents.get(parent, _NO_PARENT)


def parents_from_children(children: Children) -> dict[Id, Id]:
    """Derive the ``parents`` relation from a ``children`` relation.

    Args:
        children: Mapping of id to its ordered child ids.

    Returns:
        A new dict mapping every child id to its parent id.  When a child is
        listed under several parents the last one wins (multi-parent
        topologies are unsupported).
    """
    parents: dict[Id, Id] = {}
    for parent, child_ids in children.items():
        for child in child_ids:
            parents[child] = parent
    return parents
