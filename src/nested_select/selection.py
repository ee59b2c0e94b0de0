"""NestedSelection: host-side owner of a selection map over a tree.

This is the wiring layer a host (a checkbox tree, a nested list widget)
sits on.  It keeps the current selection map, reads the host's topology
maps by reference on every call, and routes toggles, hydration and
projection through one resolved ``SelectStrategy``.

Change callbacks fire only when a toggle actually changed the map, so
guard rejections (mandatory floor, leaf restriction) are silent.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from nested_select.config import NestedConfig
from nested_select.protocols import SelectStrategyFactory
from nested_select.registry import resolve_strategy
from nested_select.state import Id, Selection, SelectState
from nested_select.strategies.base import SelectEvent, SelectStrategy
from nested_select.topology import Children, Parents, parents_from_children

__all__ = ["ChangeCallback", "NestedSelection"]

ChangeCallback = Callable[[Selection], Any]


class NestedSelection:
    """Selection state plus the policy that mutates it.

    Example::

        children = {"root": ["a", "b"], "a": ["a1", "a2"]}
        sel = NestedSelection(children, config=NestedConfig("classic"))
        sel.select("a1", True)
        sel.select("a2", True)
        sel.state_of("a")        # SelectState.ON
        sel.state_of("root")     # SelectState.INDETERMINATE
        sel.value                # ["a1", "a", "a2"]
    """

    def __init__(
        self,
        children: Children,
        parents: Parents | None = None,
        config: NestedConfig | None = None,
        strategy: str | SelectStrategy | SelectStrategyFactory | None = None,
        value: Iterable[Id] | None = None,
    ) -> None:
        """Initialise the selection.

        Args:
            children: Host topology, id -> ordered child ids.  Read by
                reference, so later host updates are picked up.
            parents:  Host topology, id -> parent id.  Derived from
                ``children`` on each call when None.
            config:   Policy name and mandatory flag.  Defaults to
                ``NestedConfig()`` (independent, not mandatory).
            strategy: Overrides ``config.select_strategy`` with a custom
                name, factory or ``SelectStrategy``.  ``config.mandatory``
                still applies to names and factories.
            value:    Initial flat list of selected ids, hydrated through
                the strategy.
        """
        self._config: NestedConfig = config if config is not None else NestedConfig()
        self._strategy: SelectStrategy = resolve_strategy(
            strategy if strategy is not None else self._config.select_strategy,
            self._config.mandatory,
        )
        self._children = children
        self._parents = parents
        self._selected: Selection = {}
        self._callbacks: list[ChangeCallback] = []
        if value is not None:
            self._selected = self._strategy.transform_in(
                value, self._children, self.parents
            )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def strategy(self) -> SelectStrategy:
        return self._strategy

    @property
    def parents(self) -> Parents:
        """The parent relation, derived from ``children`` if not supplied."""
        if self._parents is not None:
            return self._parents
        return parents_from_children(self._children)

    @property
    def selected(self) -> Selection:
        """A copy of the internal tri-state map."""
        return dict(self._selected)

    @property
    def value(self) -> list[Id]:
        """The external flat list of selected ids."""
        return self._strategy.transform_out(
            self._selected, self._children, self.parents
        )

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def select(self, node_id: Id, value: bool, event: Any = None) -> Selection:
        """Apply one toggle and return the resulting map.

        Args:
            node_id: Target node.
            value:   True to select, False to deselect.
            event:   Originating UI event, forwarded untouched.
        """
        updated = self._strategy.select(
            SelectEvent(
                id=node_id,
                value=value,
                selected=self._selected,
                children=self._children,
                parents=self.parents,
                event=event,
            )
        )
        self._commit(updated)
        return dict(self._selected)

    def set_value(self, values: Iterable[Id] | None) -> None:
        """Replace the selection by hydrating from a flat list of ids."""
        self._commit(
            self._strategy.transform_in(values, self._children, self.parents)
        )

    def clear(self) -> None:
        """Drop every entry, ignoring the mandatory floor."""
        self._commit({})

    def on_change(self, callback: ChangeCallback) -> None:
        """Register a callback: fn(selected), called after each change."""
        self._callbacks.append(callback)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def selectable(self, node_id: Id) -> bool:
        return self._strategy.selectable(node_id, self._children, self.parents)

    def state_of(self, node_id: Id) -> SelectState:
        """Return the node's state; untouched nodes read as ``OFF``."""
        return self._selected.get(node_id, SelectState.OFF)

    def is_selected(self, node_id: Id) -> bool:
        return self.state_of(node_id) == SelectState.ON

    def is_indeterminate(self, node_id: Id) -> bool:
        return self.state_of(node_id) == SelectState.INDETERMINATE

    def _commit(self, updated: Selection) -> None:
        if updated == self._selected:
            return
        self._selected = dict(updated)
        for cb in self._callbacks:
            cb(dict(self._selected))

    def __repr__(self) -> str:
        return (
            f"NestedSelection(strategy={self._strategy.name!r}, "
            f"selected={len(self.value)})"
        )
