"""SelectState StrEnum and the Selection mapping type.

A selection is a plain ``dict`` from node id to ``SelectState``.  A missing
key reads as ``OFF``; explicit ``OFF`` entries are kept for nodes a strategy
has touched.  Iteration order is insertion order, which is also the order
``transform_out`` reports selected ids in.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from enum import StrEnum, auto

__all__ = ["Id", "SelectState", "Selection", "count_on", "on_ids"]

Id = Hashable


class SelectState(StrEnum):
    """Tri-state selection value of a single node.

    StrEnum values are the lowercased member names:
    - ON            -> "on"            : node (and its whole subtree) selected
    - OFF           -> "off"           : node explicitly deselected
    - INDETERMINATE -> "indeterminate" : some, but not all, descendants on
    """

    ON = auto()
    OFF = auto()
    INDETERMINATE = auto()


Selection = dict[Id, SelectState]


def on_ids(selected: Mapping[Id, SelectState]) -> list[Id]:
    """Return the ids whose state is ``ON``, in insertion order."""
    return [key for key, state in selected.items() if state == SelectState.ON]


def count_on(selected: Mapping[Id, SelectState]) -> int:
    """Return the number of ids whose state is ``ON``."""
    return sum(1 for state in selected.values() if state == SelectState.ON)
