"""Leaf-restricted policies: only childless nodes may be toggled directly.

``leaf`` wraps ``independent`` and ``leaf-single`` wraps
``independent-single``.  Toggles aimed at a node with children are ignored;
hydration and projection go straight through to the wrapped policy.
"""

from __future__ import annotations

import logging

from nested_select.state import Id, Selection
from nested_select.strategies.base import SelectEvent, SelectStrategy
from nested_select.strategies.independent import (
    independent_select_strategy,
    independent_single_select_strategy,
)
from nested_select.topology import Children, Parents, is_leaf

__all__ = ["leaf_select_strategy", "leaf_single_select_strategy"]

logger = logging.getLogger(__name__)


def _restrict_to_leaves(name: str, parent_strategy: SelectStrategy) -> SelectStrategy:
    """Wrap ``parent_strategy`` with the leaf-only guard."""

    def selectable(node_id: Id, children: Children, parents: Parents) -> bool:
        return is_leaf(node_id, children)

    def select(event: SelectEvent) -> Selection:
        if not is_leaf(event.id, event.children):
            logger.debug("leaf: ignoring toggle of non-leaf node %r", event.id)
            return dict(event.selected)
        return parent_strategy.select(event)

    return SelectStrategy(
        name=name,
        selectable=selectable,
        select=select,
        transform_in=parent_strategy.transform_in,
        transform_out=parent_strategy.transform_out,
        mandatory=parent_strategy.mandatory,
    )


def leaf_select_strategy(mandatory: bool = False) -> SelectStrategy:
    """Return ``independent`` restricted to leaf nodes."""
    return _restrict_to_leaves("leaf", independent_select_strategy(mandatory))


def leaf_single_select_strategy(mandatory: bool = False) -> SelectStrategy:
    """Return ``independent-single`` restricted to leaf nodes."""
    return _restrict_to_leaves(
        "leaf-single", independent_single_select_strategy(mandatory)
    )
