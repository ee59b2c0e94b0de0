"""Property checks over seeded random forests and toggle sequences.

Every shipped strategy, with and without ``mandatory``, is driven through a
deterministic sequence of toggles on generated trees.  After each step:

- repeating the same toggle changes nothing (idempotence)
- the input map is never mutated
- under mandatory, the ON count never drops to zero once positive
- classic policies satisfy the aggregation invariant
- single policies expose exactly the toggled id after a select
- leaf policies ignore toggles aimed at non-leaf nodes
"""

from __future__ import annotations

import random

import pytest

from nested_select.invariants import aggregation_violations
from nested_select.registry import available_strategies, get_strategy
from nested_select.state import count_on
from nested_select.strategies import SelectEvent
from nested_select.topology import is_leaf

SEEDS = [0, 1, 2, 3, 4]
STEPS = 60
TREE_SIZE = 25


def _walk(name: str, mandatory: bool, seed: int, tree_factory):
    """Yield (event, before, after) for a seeded toggle sequence."""
    children, parents = tree_factory(seed, size=TREE_SIZE)
    strategy = get_strategy(name, mandatory)
    nodes = [f"n{i}" for i in range(TREE_SIZE)]
    rng = random.Random(seed * 1000 + len(name))
    selected = {}
    for _ in range(STEPS):
        event = SelectEvent(
            id=rng.choice(nodes),
            value=rng.random() < 0.6,
            selected=selected,
            children=children,
            parents=parents,
        )
        before = dict(selected)
        selected = strategy.select(event)
        yield strategy, event, before, selected


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("mandatory", [False, True])
@pytest.mark.parametrize("name", available_strategies())
class TestStrategyProperties:
    def test_idempotent(self, name, mandatory, seed, tree_factory) -> None:
        for strategy, event, _, after in _walk(name, mandatory, seed, tree_factory):
            again = strategy.select(
                SelectEvent(
                    id=event.id,
                    value=event.value,
                    selected=after,
                    children=event.children,
                    parents=event.parents,
                )
            )
            assert again == after

    def test_input_never_mutated(self, name, mandatory, seed, tree_factory) -> None:
        for _, event, before, _ in _walk(name, mandatory, seed, tree_factory):
            assert event.selected == before

    def test_mandatory_floor(self, name, mandatory, seed, tree_factory) -> None:
        if not mandatory:
            pytest.skip("floor only applies to mandatory strategies")
        for _, _, before, after in _walk(name, mandatory, seed, tree_factory):
            if count_on(before) > 0:
                assert count_on(after) > 0

    def test_aggregation_invariant(self, name, mandatory, seed, tree_factory) -> None:
        if not name.startswith("classic"):
            pytest.skip("aggregation only applies to classic strategies")
        for _, event, _, after in _walk(name, mandatory, seed, tree_factory):
            assert aggregation_violations(after, event.children) == []

    def test_single_exclusivity(self, name, mandatory, seed, tree_factory) -> None:
        if not name.endswith("single"):
            pytest.skip("exclusivity only applies to single strategies")
        for strategy, event, before, after in _walk(
            name, mandatory, seed, tree_factory
        ):
            if not event.value:
                continue
            out = strategy.transform_out(after, event.children, event.parents)
            if strategy.selectable(event.id, event.children, event.parents):
                assert out == [event.id]
            else:
                assert out == strategy.transform_out(
                    before, event.children, event.parents
                )

    def test_leaf_restriction(self, name, mandatory, seed, tree_factory) -> None:
        if not name.startswith("leaf"):
            pytest.skip("restriction only applies to leaf strategies")
        for strategy, event, before, after in _walk(
            name, mandatory, seed, tree_factory
        ):
            if not is_leaf(event.id, event.children):
                assert strategy.selectable(event.id, event.children, event.parents) is False
                assert after == before
