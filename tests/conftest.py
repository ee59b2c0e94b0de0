"""Shared test fixtures for nested-select.

The small tree used throughout::

    root
    ├── a
    │   ├── a1
    │   └── a2
    └── b

Generated trees are deterministic: every generator takes an explicit seed.
"""

from __future__ import annotations

import random
from collections.abc import Callable

import pytest

from nested_select.topology import parents_from_children

Tree = tuple[dict[str, list[str]], dict[str, str]]


def _make_tree(seed: int, size: int = 20, root_chance: float = 0.1) -> Tree:
    """Build a seeded random forest of ``size`` nodes named n0..n{size-1}.

    Each node after the first either starts a new root (with probability
    ``root_chance``) or hangs under a uniformly chosen earlier node, so the
    result is always acyclic and single-parented.
    """
    rng = random.Random(seed)
    children: dict[str, list[str]] = {}
    for i in range(1, size):
        if rng.random() < root_chance:
            continue
        parent = f"n{rng.randrange(i)}"
        children.setdefault(parent, []).append(f"n{i}")
    return children, parents_from_children(children)


@pytest.fixture
def children() -> dict[str, list[str]]:
    """Topology of the small root/a/b tree."""
    return {"root": ["a", "b"], "a": ["a1", "a2"]}


@pytest.fixture
def parents() -> dict[str, str]:
    """Parent relation of the small root/a/b tree."""
    return {"a": "root", "b": "root", "a1": "a", "a2": "a"}


@pytest.fixture
def deep_children() -> dict[str, list[str]]:
    """A four-level chain with a sibling at each level."""
    return {
        "l0": ["l1", "s0"],
        "l1": ["l2", "s1"],
        "l2": ["l3", "s2"],
    }


@pytest.fixture
def tree_factory() -> Callable[..., Tree]:
    """Return the seeded random-forest generator."""
    return _make_tree
