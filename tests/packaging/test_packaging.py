"""Packaging correctness verification for nested-select.

Tests validate that:
- The top-level package imports with only its base dependencies
- py.typed marker is shipped inside the package
- Pytest plugin entry point is registered
- Package metadata is correct
"""

from __future__ import annotations

from importlib.metadata import entry_points
from pathlib import Path


class TestBaseInstall:
    def test_import_nested_select(self) -> None:
        import nested_select

        assert hasattr(nested_select, "NestedSelection")
        assert hasattr(nested_select, "get_strategy")
        assert hasattr(nested_select, "hydrate")

    def test_py_typed_marker_present(self) -> None:
        import nested_select

        package_dir = Path(nested_select.__file__).parent
        assert (package_dir / "py.typed").exists()


class TestPytestPluginDiscovery:
    def test_entry_point_registered(self) -> None:
        pytest11_eps = entry_points(group="pytest11")
        ns_eps = [ep for ep in pytest11_eps if "nested_select" in str(ep.value)]
        assert ns_eps, (
            f"No pytest11 entry point found for nested-select. "
            f"Available: {[ep.name for ep in pytest11_eps]}"
        )

    def test_fixture_available(self) -> None:
        import importlib

        mod = importlib.import_module("nested_select.integrations._pytest_plugin")
        assert hasattr(mod, "assert_selection_consistent")
        assert callable(mod.assert_selection_consistent)


class TestPackageMetadata:
    def test_version(self) -> None:
        import nested_select

        assert nested_select.__version__ == "0.1.0"

    def test_all_exports(self) -> None:
        import nested_select

        expected = {
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
        }
        actual = set(nested_select.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )
        for name in expected:
            assert hasattr(nested_select, name), name
