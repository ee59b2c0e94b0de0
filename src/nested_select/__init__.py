"""nested-select - tri-state selection strategies for tree-shaped collections."""

from __future__ import annotations

import logging

from nested_select.api import hydrate, project, toggle
from nested_select.config import NestedConfig
from nested_select.invariants import Violation, aggregation_violations
from nested_select.protocols import SelectStrategyFactory
from nested_select.registry import (
    SelectStrategyName,
    available_strategies,
    get_strategy,
    resolve_strategy,
)
from nested_select.selection import NestedSelection
from nested_select.state import Selection, SelectState
from nested_select.strategies import (
    SelectEvent,
    SelectStrategy,
    classic_leaf_select_strategy,
    classic_select_strategy,
    independent_select_strategy,
    independent_single_select_strategy,
    leaf_select_strategy,
    leaf_single_select_strategy,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "NestedConfig",
    "NestedSelection",
    "SelectEvent",
    "SelectState",
    "SelectStrategy",
    "SelectStrategyFactory",
    "SelectStrategyName",
    "Selection",
    "Violation",
    "aggregation_violations",
    "available_strategies",
    "classic_leaf_select_strategy",
    "classic_select_strategy",
    "get_strategy",
    "hydrate",
    "independent_select_strategy",
    "independent_single_select_strategy",
    "leaf_select_strategy",
    "leaf_single_select_strategy",
    "project",
    "resolve_strategy",
    "toggle",
]
