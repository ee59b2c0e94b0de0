"""pytest plugin for nested-select.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from nested_select.invariants import aggregation_violations
from nested_select.state import Id, SelectState
from nested_select.topology import Children


@pytest.fixture(scope="session")
def assert_selection_consistent() -> Any:
    """Fixture that returns a callable aggregation-invariant asserter.

    Session-scoped because the returned callable holds no state.

    Usage in tests::

        def test_cascade(assert_selection_consistent):
            selected = hydrate(["a1"], children, strategy="classic")
            assert_selection_consistent(selected, children)

    Returns:
        A callable ``_assert(selected, children) -> None`` that raises
        ``AssertionError`` when any non-leaf node disagrees with its children.
    """

    def _assert(
        selected: Mapping[Id, SelectState],
        children: Children,
    ) -> None:
        """Assert that every non-leaf node aggregates its children correctly.

        Raises:
            AssertionError: With one line per offending node, giving the
                expected and actual state.
        """
        violations = aggregation_violations(selected, children)
        if violations:
            lines = "\n".join(
                f"  {v.id!r}: expected={v.expected} actual={v.actual}"
                for v in violations
            )
            raise AssertionError(
                f"selection violates aggregation for {len(violations)} node(s):\n"
                f"{lines}"
            )

    return _assert
