"""Public API functions for nested-select.

Three stateless helpers for hosts that keep the selection map themselves:
``toggle``, ``hydrate`` and ``project``.  Each call looks the strategy up
through the registry, so there is no state shared between calls beyond the
registry's cache of stateless strategy instances.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from nested_select.protocols import SelectStrategyFactory
from nested_select.registry import resolve_strategy
from nested_select.state import Id, Selection, SelectState
from nested_select.strategies.base import SelectEvent, SelectStrategy
from nested_select.topology import Children, Parents, parents_from_children

__all__ = ["hydrate", "project", "toggle"]

StrategyLike = str | SelectStrategy | SelectStrategyFactory


def toggle(
    selected: Mapping[Id, SelectState],
    node_id: Id,
    value: bool,
    children: Children,
    parents: Parents | None = None,
    strategy: StrategyLike = "independent",
    mandatory: bool = False,
    event: Any = None,
) -> Selection:
    """Apply one toggle to ``selected`` and return the new map.

    The input mapping is never mutated.

    Args:
        selected:  Current selection map.
        node_id:   Target node.
        value:     True to select, False to deselect.
        children:  Topology, id -> ordered child ids.
        parents:   Topology, id -> parent id.  Derived from ``children``
                   when None.
        strategy:  Policy name, factory or ``SelectStrategy``.
        mandatory: Refuse toggles that would empty the selection.
        event:     Originating UI event, forwarded untouched.

    Returns:
        The updated selection map (a fresh dict).
    """
    resolved = resolve_strategy(strategy, mandatory)
    return resolved.select(
        SelectEvent(
            id=node_id,
            value=value,
            selected=selected,
            children=children,
            parents=parents if parents is not None else parents_from_children(children),
            event=event,
        )
    )


def hydrate(
    values: Iterable[Id] | None,
    children: Children,
    parents: Parents | None = None,
    strategy: StrategyLike = "independent",
    mandatory: bool = False,
) -> Selection:
    """Build a selection map from a flat list of selected ids.

    Returns an empty map for ``None`` or an empty list.
    """
    resolved = resolve_strategy(strategy, mandatory)
    if parents is None:
        parents = parents_from_children(children)
    return resolved.transform_in(values, children, parents)


def project(
    selected: Mapping[Id, SelectState],
    children: Children,
    parents: Parents | None = None,
    strategy: StrategyLike = "independent",
) -> list[Id]:
    """Project a selection map back to a flat list of selected ids.

    Ids are reported in the map's insertion order.
    """
    resolved = resolve_strategy(strategy)
    if parents is None:
        parents = parents_from_children(children)
    return resolved.transform_out(selected, children, parents)
