"""SelectStrategyFactory Protocol for the strategy extension point.

Any callable taking a ``mandatory`` flag and returning a ``SelectStrategy``
can be handed to ``resolve_strategy`` or ``NestedSelection``; no base class
or registration needed.

Example::

    from nested_select.protocols import SelectStrategyFactory
    from nested_select.strategies import SelectStrategy, independent_select_strategy

    def readonly_strategy(mandatory: bool = False) -> SelectStrategy:
        base = independent_select_strategy(mandatory)
        return SelectStrategy(
            name="readonly",
            selectable=lambda node_id, children, parents: False,
            select=lambda event: dict(event.selected),
            transform_in=base.transform_in,
            transform_out=base.transform_out,
        )

    assert isinstance(readonly_strategy, SelectStrategyFactory)  # True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from nested_select.strategies.base import SelectStrategy


@runtime_checkable
class SelectStrategyFactory(Protocol):
    """Structural protocol for strategy factories.

    The factory must:
    - Accept an optional ``mandatory`` flag (default False).
    - Return a fresh or cached ``SelectStrategy``; strategies hold no state
      between calls, so sharing one instance is safe.
    """

    def __call__(self, mandatory: bool = False) -> SelectStrategy: ...
