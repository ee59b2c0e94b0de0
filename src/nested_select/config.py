"""NestedConfig: immutable configuration for a NestedSelection.

NestedConfig is a frozen (immutable) dataclass holding the policy name and
the mandatory flag.  The name is normalised on construction, so camelCase
aliases such as ``"classicLeaf"`` are stored as ``"classic-leaf"``.
"""

from __future__ import annotations

from dataclasses import dataclass

from nested_select.registry import SelectStrategyName, normalize_name

__all__ = ["NestedConfig"]


@dataclass(frozen=True, slots=True)
class NestedConfig:
    """Immutable selection configuration.

    Attributes:
        select_strategy: Name of the shipped policy to use.  Accepts any
            ``SelectStrategyName`` value or camelCase alias.
        mandatory: When True, no toggle may leave the selection empty once
            something is selected.
    """

    select_strategy: SelectStrategyName = SelectStrategyName.INDEPENDENT
    mandatory: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.select_strategy, str):
            msg = (
                f"select_strategy must be a strategy name, "
                f"got {type(self.select_strategy)!r}"
            )
            raise TypeError(msg)
        # frozen: bypass __setattr__ to store the normalised name
        object.__setattr__(
            self, "select_strategy", normalize_name(self.select_strategy)
        )
        if not isinstance(self.mandatory, bool):
            msg = f"mandatory must be a bool, got {self.mandatory!r}"
            raise TypeError(msg)
