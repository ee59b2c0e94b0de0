"""Independent policies: no propagation between nodes.

``independent`` toggles exactly the target node.  ``independent-single``
wraps it and first collapses the selection to the target's own entry, so at
most one node is ever on.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import replace

from nested_select.state import Id, Selection, SelectState, count_on, on_ids
from nested_select.strategies.base import SelectEvent, SelectStrategy, fold_in
from nested_select.topology import Children, Parents

__all__ = ["independent_select_strategy", "independent_single_select_strategy"]

logger = logging.getLogger(__name__)

_MISSING = object()


def independent_select_strategy(mandatory: bool = False) -> SelectStrategy:
    """Return the base policy: each node is toggled on its own.

    Args:
        mandatory: When True, deselecting the only ``ON`` node is ignored.
    """

    def selectable(node_id: Id, children: Children, parents: Parents) -> bool:
        return True

    def select(event: SelectEvent) -> Selection:
        if mandatory and not event.value:
            if on_ids(event.selected) == [event.id]:
                logger.debug("mandatory: refusing to deselect last node %r", event.id)
                return dict(event.selected)

        selected = dict(event.selected)
        selected[event.id] = SelectState.ON if event.value else SelectState.OFF
        return selected

    def transform_in(
        values: Iterable[Id] | None, children: Children, parents: Parents
    ) -> Selection:
        return fold_in(select, values, children, parents)

    def transform_out(
        selected: Mapping[Id, SelectState], children: Children, parents: Parents
    ) -> list[Id]:
        return on_ids(selected)

    return SelectStrategy(
        name="independent",
        selectable=selectable,
        select=select,
        transform_in=transform_in,
        transform_out=transform_out,
        mandatory=mandatory,
    )


def independent_single_select_strategy(mandatory: bool = False) -> SelectStrategy:
    """Return the single-pick policy layered over ``independent``.

    Selecting any node implicitly clears every other node.  Hydration honours
    only the first external id.
    """
    parent_strategy = independent_select_strategy(mandatory)

    def select(event: SelectEvent) -> Selection:
        # Any deselect collapses the map to {id: OFF}, leaving nothing on
        if mandatory and not event.value and count_on(event.selected) > 0:
            logger.debug("mandatory: refusing to deselect %r in single mode", event.id)
            return dict(event.selected)

        single: Selection = {}
        if event.id in event.selected:
            single[event.id] = event.selected[event.id]
        return parent_strategy.select(replace(event, selected=single))

    def transform_in(
        values: Iterable[Id] | None, children: Children, parents: Parents
    ) -> Selection:
        first = next(iter(values or ()), _MISSING)
        if first is _MISSING:
            return {}
        return parent_strategy.transform_in([first], children, parents)

    return SelectStrategy(
        name="independent-single",
        selectable=parent_strategy.selectable,
        select=select,
        transform_in=transform_in,
        transform_out=parent_strategy.transform_out,
        mandatory=mandatory,
    )

