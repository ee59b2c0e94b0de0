"""Tests for the NestedConfig frozen dataclass.

Covers defaults, name normalisation, immutability and validation errors.
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from nested_select.config import NestedConfig
from nested_select.registry import SelectStrategyName


class TestNestedConfigDefaults:
    def test_default_strategy(self) -> None:
        assert NestedConfig().select_strategy == SelectStrategyName.INDEPENDENT

    def test_default_mandatory(self) -> None:
        assert NestedConfig().mandatory is False


class TestNestedConfigCustom:
    def test_canonical_name(self) -> None:
        config = NestedConfig("classic", mandatory=True)
        assert config.select_strategy is SelectStrategyName.CLASSIC
        assert config.mandatory is True

    def test_alias_is_normalised(self) -> None:
        config = NestedConfig(select_strategy="leafSingle")
        assert config.select_strategy is SelectStrategyName.LEAF_SINGLE
        assert config.select_strategy == "leaf-single"

    def test_equality_after_normalisation(self) -> None:
        assert NestedConfig("classicLeaf") == NestedConfig("classic-leaf")


class TestNestedConfigImmutability:
    def test_frozen_strategy_raises(self) -> None:
        config = NestedConfig()
        with pytest.raises(FrozenInstanceError):
            config.select_strategy = SelectStrategyName.LEAF  # type: ignore[misc]

    def test_frozen_mandatory_raises(self) -> None:
        config = NestedConfig()
        with pytest.raises(FrozenInstanceError):
            config.mandatory = True  # type: ignore[misc]

    def test_is_hashable(self) -> None:
        assert isinstance(hash(NestedConfig()), int)


class TestNestedConfigValidation:
    def test_unknown_strategy_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown select strategy"):
            NestedConfig(select_strategy="tree")

    def test_non_string_strategy_raises(self) -> None:
        with pytest.raises(TypeError):
            NestedConfig(select_strategy=3)  # type: ignore[arg-type]

    def test_non_bool_mandatory_raises(self) -> None:
        with pytest.raises(TypeError):
            NestedConfig(mandatory="yes")  # type: ignore[arg-type]
