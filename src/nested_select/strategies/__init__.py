"""Strategies subpackage: the six shipped selection policies.

Each factory takes a ``mandatory`` flag and returns a ``SelectStrategy``:

- ``independent_select_strategy``         : no propagation
- ``independent_single_select_strategy``  : at most one node on
- ``leaf_select_strategy``                : independent, leaves only
- ``leaf_single_select_strategy``         : single-pick, leaves only
- ``classic_select_strategy``             : cascade down, aggregate up
- ``classic_leaf_select_strategy``        : classic, leaves-only projection

Custom strategies need no base class: build a ``SelectStrategy`` from four
functions, or wrap an existing one the way the leaf variants do.
"""

from nested_select.strategies.base import SelectEvent, SelectStrategy
from nested_select.strategies.classic import (
    classic_leaf_select_strategy,
    classic_select_strategy,
)
from nested_select.strategies.independent import (
    independent_select_strategy,
    independent_single_select_strategy,
)
from nested_select.strategies.leaf import (
    leaf_select_strategy,
    leaf_single_select_strategy,
)

__all__ = [
    "SelectEvent",
    "SelectStrategy",
    "classic_leaf_select_strategy",
    "classic_select_strategy",
    "independent_select_strategy",
    "independent_single_select_strategy",
    "leaf_select_strategy",
    "leaf_single_select_strategy",
]
