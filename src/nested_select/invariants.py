"""Aggregation invariant checker for cascading selections.

After any ``classic`` / ``classic-leaf`` toggle, every non-leaf node must
carry exactly the tri-state its direct children imply.  This module reports
each node where that does not hold, which is what the pytest plugin asserts
on and what hosts can use to audit maps they built by hand.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from nested_select.state import Id, SelectState
from nested_select.strategies.classic import aggregate_state
from nested_select.topology import Children, is_leaf

__all__ = ["Violation", "aggregation_violations"]


@dataclass(frozen=True, slots=True)
class Violation:
    """One non-leaf node whose state disagrees with its children.

    Attributes:
        id:       The offending node.
        expected: State derived from its direct children.
        actual:   State recorded in the map (``OFF`` when unrecorded).
    """

    id: Id
    expected: SelectState
    actual: SelectState


def aggregation_violations(
    selected: Mapping[Id, SelectState], children: Children
) -> list[Violation]:
    """Return every non-leaf node violating the aggregation invariant.

    Args:
        selected: Selection map to audit.
        children: Topology, id -> ordered child ids.

    Returns:
        Violations in ``children`` iteration order.  Empty when the map is
        consistent.
    """
    violations: list[Violation] = []
    for node_id, child_ids in children.items():
        if is_leaf(node_id, children):
            continue
        expected = aggregate_state(child_ids, selected)
        actual = selected.get(node_id, SelectState.OFF)
        if expected != actual:
            violations.append(Violation(id=node_id, expected=expected, actual=actual))
    return violations
