"""Classic cascading-aggregate policies.

Toggling a node forces its whole subtree to the same state, then every
ancestor is recomputed from its direct children:

- all children ``ON``            -> ``ON``
- all children ``OFF`` / unset   -> ``OFF``
- anything else                  -> ``INDETERMINATE``

Because each ancestor is recomputed bottom-up after the subtree write, the
aggregation invariant holds transitively up to the root after every call.

``classic-leaf`` shares the same bookkeeping and only hides non-leaf ids
from the external projection.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from nested_select.state import Id, Selection, SelectState, count_on, on_ids
from nested_select.strategies.base import SelectEvent, SelectStrategy, fold_in
from nested_select.topology import (
    Children,
    Parents,
    is_leaf,
    iter_ancestors,
    iter_subtree,
)

__all__ = ["aggregate_state", "classic_leaf_select_strategy", "classic_select_strategy"]

logger = logging.getLogger(__name__)


def aggregate_state(
    child_ids: Iterable[Id], selected: Mapping[Id, SelectState]
) -> SelectState:
    """Return the tri-state a parent derives from its direct children.

    Args:
        child_ids: Direct children of the parent.
        selected:  Current selection state.

    Returns:
        ``ON`` when every child is on, ``OFF`` when every child is off or
        unrecorded, ``INDETERMINATE`` otherwise.  A parent with no children
        counts as ``ON`` (vacuously all on).
    """
    every_on = True
    none_on = True
    for cid in child_ids:
        state = selected.get(cid, SelectState.OFF)
        if state != SelectState.ON:
            every_on = False
        if state != SelectState.OFF:
            none_on = False
        if not every_on and not none_on:
            return SelectState.INDETERMINATE
    if every_on:
        return SelectState.ON
    return SelectState.OFF


def classic_select_strategy(mandatory: bool = False) -> SelectStrategy:
    """Return the cascading-aggregate policy.

    Args:
        mandatory: When True, a deselect that would leave no ``ON`` node at
            all is discarded and the pre-call state is returned.
    """

    def selectable(node_id: Id, children: Children, parents: Parents) -> bool:
        return True

    def select(event: SelectEvent) -> Selection:
        selected = dict(event.selected)
        target = SelectState.ON if event.value else SelectState.OFF

        # Push the new state down through the whole subtree
        for item in iter_subtree(event.id, event.children):
            selected[item] = target

        # Recompute every ancestor from its direct children, bottom-up
        for parent in iter_ancestors(event.id, event.parents):
            selected[parent] = aggregate_state(
                event.children.get(parent, ()), selected
            )

        if mandatory and not event.value and count_on(selected) == 0:
            logger.debug(
                "mandatory: deselecting %r would empty the selection", event.id
            )
            return dict(event.selected)

        return selected

    def transform_in(
        values: Iterable[Id] | None, children: Children, parents: Parents
    ) -> Selection:
        # O(depth * len(values)); acceptable at UI scale
        return fold_in(select, values, children, parents)

    def transform_out(
        selected: Mapping[Id, SelectState], children: Children, parents: Parents
    ) -> list[Id]:
        return on_ids(selected)

    return SelectStrategy(
        name="classic",
        selectable=selectable,
        select=select,
        transform_in=transform_in,
        transform_out=transform_out,
        mandatory=mandatory,
    )


def classic_leaf_select_strategy(mandatory: bool = False) -> SelectStrategy:
    """Return ``classic`` with only leaf ids visible in the projection.

    Ancestors still carry ``ON`` / ``INDETERMINATE`` internally; they are
    just filtered out of ``transform_out``.
    """
    parent_strategy = classic_select_strategy(mandatory)

    def transform_out(
        selected: Mapping[Id, SelectState], children: Children, parents: Parents
    ) -> list[Id]:
        return [
            key
            for key, state in selected.items()
            if state == SelectState.ON and is_leaf(key, children)
        ]

    return SelectStrategy(
        name="classic-leaf",
        selectable=parent_strategy.selectable,
        select=parent_strategy.select,
        transform_in=parent_strategy.transform_in,
        transform_out=transform_out,
        mandatory=mandatory,
    )
