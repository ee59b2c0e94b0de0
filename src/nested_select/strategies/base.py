"""SelectEvent and SelectStrategy: the shared contract of every policy.

A strategy is a frozen bundle of four plain functions rather than a class
hierarchy.  Composed variants (``leaf`` over ``independent``, ``classic-leaf``
over ``classic``, ...) hold a reference to another ``SelectStrategy`` and
call through it around their own guard logic.

Every operation is a pure function of its arguments.  ``select`` never
mutates the mapping it is given; it always returns a fresh ``dict``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from nested_select.state import Id, Selection, SelectState
from nested_select.topology import Children, Parents

__all__ = [
    "SelectEvent",
    "SelectFn",
    "SelectStrategy",
    "SelectableFn",
    "TransformInFn",
    "TransformOutFn",
    "fold_in",
]


@dataclass(frozen=True, slots=True)
class SelectEvent:
    """One toggle intent handed to ``SelectStrategy.select``.

    Attributes:
        id:       Target node id.
        value:    True to select, False to deselect.
        selected: Current selection state (read only, never mutated).
        children: Topology, id -> ordered child ids.
        parents:  Topology, id -> parent id.
        event:    Originating UI event.  Opaque, ignored by every policy.
    """

    id: Id
    value: bool
    selected: Mapping[Id, SelectState]
    children: Children
    parents: Parents
    event: Any = None


SelectableFn = Callable[[Id, Children, Parents], bool]
SelectFn = Callable[[SelectEvent], Selection]
TransformInFn = Callable[[Iterable[Id] | None, Children, Parents], Selection]
TransformOutFn = Callable[[Mapping[Id, SelectState], Children, Parents], list[Id]]


@dataclass(frozen=True, slots=True)
class SelectStrategy:
    """A named selection policy.

    Attributes:
        name:          Registry name of the policy (informational).
        selectable:    ``(id, children, parents) -> bool``; whether a user may
                       toggle ``id`` directly.
        select:        ``(SelectEvent) -> Selection``; applies one toggle.
        transform_in:  ``(ids | None, children, parents) -> Selection``;
                       hydrates from a flat external list of "on" ids.
        transform_out: ``(selected, children, parents) -> list``; projects
                       back to the flat external list.
        mandatory:     Whether the policy refuses to empty the selection.
    """

    name: str
    selectable: SelectableFn
    select: SelectFn
    transform_in: TransformInFn
    transform_out: TransformOutFn
    mandatory: bool = False


def fold_in(
    select: SelectFn,
    values: Iterable[Id] | None,
    children: Children,
    parents: Parents,
) -> Selection:
    """Build a selection by folding ``select(value=True)`` over ``values``.

    Starts from an empty map and applies the ids in order, so any
    propagation a policy performs is already reflected in the result.
    ``None`` or an empty iterable yields an empty selection.
    """
    selected: Selection = {}
    for node_id in values or ():
        selected = select(
            SelectEvent(
                id=node_id,
                value=True,
                selected=selected,
                children=children,
                parents=parents,
            )
        )
    return selected
