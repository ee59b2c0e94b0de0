"""Strategy registry: resolve a policy from a name, factory or instance.

Hosts usually configure their policy by name (``"classic"``), but may also
pass a factory function or a ready-made ``SelectStrategy``.
``resolve_strategy`` accepts all three.

Strategies are stateless, so named instances are memoised per
``(name, mandatory)`` pair in a small ``cachetools.LRUCache``; repeated
lookups return the same object.

Example::

    from nested_select.registry import get_strategy

    strategy = get_strategy("classic-leaf", mandatory=True)
    strategy is get_strategy("classicLeaf", mandatory=True)   # True
"""

from __future__ import annotations

import logging
from enum import StrEnum

from cachetools import LRUCache, cached

from nested_select.protocols import SelectStrategyFactory
from nested_select.strategies import (
    SelectStrategy,
    classic_leaf_select_strategy,
    classic_select_strategy,
    independent_select_strategy,
    independent_single_select_strategy,
    leaf_select_strategy,
    leaf_single_select_strategy,
)

__all__ = [
    "SelectStrategyName",
    "available_strategies",
    "get_strategy",
    "normalize_name",
    "resolve_strategy",
]

logger = logging.getLogger(__name__)


class SelectStrategyName(StrEnum):
    """Names of the six shipped selection policies."""

    INDEPENDENT = "independent"
    INDEPENDENT_SINGLE = "independent-single"
    LEAF = "leaf"
    LEAF_SINGLE = "leaf-single"
    CLASSIC = "classic"
    CLASSIC_LEAF = "classic-leaf"


_FACTORIES: dict[SelectStrategyName, SelectStrategyFactory] = {
    SelectStrategyName.INDEPENDENT: independent_select_strategy,
    SelectStrategyName.INDEPENDENT_SINGLE: independent_single_select_strategy,
    SelectStrategyName.LEAF: leaf_select_strategy,
    SelectStrategyName.LEAF_SINGLE: leaf_single_select_strategy,
    SelectStrategyName.CLASSIC: classic_select_strategy,
    SelectStrategyName.CLASSIC_LEAF: classic_leaf_select_strategy,
}

# camelCase spellings used by JavaScript hosts
_ALIASES: dict[str, SelectStrategyName] = {
    "independentSingle": SelectStrategyName.INDEPENDENT_SINGLE,
    "leafSingle": SelectStrategyName.LEAF_SINGLE,
    "classicLeaf": SelectStrategyName.CLASSIC_LEAF,
}

# 6 names x 2 mandatory flags
_STRATEGY_CACHE: LRUCache[tuple[SelectStrategyName, bool], SelectStrategy] = (
    LRUCache(maxsize=12)
)


def available_strategies() -> list[str]:
    """Return the canonical names of every shipped strategy."""
    return [str(name) for name in SelectStrategyName]


def normalize_name(name: str) -> SelectStrategyName:
    """Map a strategy name or camelCase alias to its ``SelectStrategyName``.

    Raises:
        ValueError: If ``name`` is not a known strategy.
    """
    if name in _ALIASES:
        return _ALIASES[name]
    try:
        return SelectStrategyName(name)
    except ValueError:
        msg = (
            f"Unknown select strategy {name!r}; "
            f"expected one of {available_strategies()}"
        )
        raise ValueError(msg) from None


@cached(cache=_STRATEGY_CACHE)
def _build(name: SelectStrategyName, mandatory: bool) -> SelectStrategy:
    logger.debug("building %s strategy (mandatory=%s)", name, mandatory)
    return _FACTORIES[name](mandatory)


def get_strategy(name: str, mandatory: bool = False) -> SelectStrategy:
    """Return the shipped strategy called ``name``.

    Args:
        name:      Canonical name (``"leaf-single"``) or camelCase alias
                   (``"leafSingle"``).
        mandatory: Whether the policy refuses to empty the selection.

    Returns:
        A shared, stateless ``SelectStrategy`` instance.

    Raises:
        ValueError: If ``name`` is not a known strategy.
    """
    return _build(normalize_name(name), bool(mandatory))


def resolve_strategy(
    strategy: str | SelectStrategy | SelectStrategyFactory,
    mandatory: bool = False,
) -> SelectStrategy:
    """Resolve ``strategy`` into a concrete ``SelectStrategy``.

    Args:
        strategy:  A strategy name, a ``SelectStrategy`` (returned unchanged,
                   its own ``mandatory`` flag wins), or a factory called
                   with ``mandatory``.
        mandatory: Passed to named strategies and factories.

    Raises:
        ValueError: If ``strategy`` is an unknown name.
        TypeError:  If ``strategy`` is none of the accepted kinds, or a factory
                    returns something other than a ``SelectStrategy``.
    """
    if isinstance(strategy, SelectStrategy):
        return strategy
    if isinstance(strategy, str):
        return get_strategy(strategy, mandatory)
    if callable(strategy):
        built = strategy(mandatory)
        if not isinstance(built, SelectStrategy):
            msg = f"Strategy factory returned {type(built)!r}, expected SelectStrategy"
            raise TypeError(msg)
        return built
    msg = f"Unsupported select strategy type: {type(strategy)!r}"
    raise TypeError(msg)
