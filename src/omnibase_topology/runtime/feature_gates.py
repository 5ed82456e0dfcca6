# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Static feature gate set for topology policy option authorization.

FeatureGateSet is the in-process implementation of ProtocolFeatureGate.
It is immutable: overriding a gate returns a new set, so a parse call
holding a reference always observes one consistent gate state.

Defaults follow the node agent: the beta-options gate is enabled and the
alpha-options gate is disabled unless overridden. Gate names the topology
manager does not know about are stored as given (they belong to other
node-agent subsystems) and report False when never set.

Example:
    >>> gates = FeatureGateSet.from_flag_string(
    ...     "TopologyManagerPolicyAlphaOptions=true"
    ... )
    >>> gates.is_enabled("TopologyManagerPolicyAlphaOptions")
    True
    >>> gates.is_enabled("TopologyManagerPolicyBetaOptions")
    True
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from omnibase_topology.enums import EnumTopologyFeatureGate
from omnibase_topology.errors import FeatureGateError, ModelTopologyErrorContext
from omnibase_topology.utils import parse_bool_text, parse_key_value_list

logger = logging.getLogger(__name__)


class FeatureGateSet:
    """Immutable mapping of feature gate names to enabled state."""

    def __init__(
        self,
        overrides: Mapping[str | EnumTopologyFeatureGate, bool] | None = None,
    ) -> None:
        """Initialize the gate set.

        Args:
            overrides: Explicit gate states. Keys may be gate names or
                EnumTopologyFeatureGate members.

        Raises:
            FeatureGateError: If a gate name is empty or a state is not a bool.
        """
        self._overrides: dict[str, bool] = {}
        for name, enabled in (overrides or {}).items():
            gate_name = str(name).strip()
            if not gate_name:
                raise FeatureGateError(
                    "Feature gate name must not be empty",
                    context=ModelTopologyErrorContext(operation="build_feature_gates"),
                )
            if not isinstance(enabled, bool):
                raise FeatureGateError(
                    f"Feature gate {gate_name} must be a boolean, "
                    f"got {type(enabled).__name__}",
                    gate_name=gate_name,
                    context=ModelTopologyErrorContext(operation="build_feature_gates"),
                )
            self._overrides[gate_name] = enabled

    @classmethod
    def from_flag_string(cls, spec: str) -> FeatureGateSet:
        """Build a gate set from ``--feature-gates`` syntax.

        Args:
            spec: Comma-separated ``Name=bool`` entries; may be empty.

        Raises:
            FeatureGateError: On malformed entries or non-boolean values.
        """
        context = ModelTopologyErrorContext(operation="parse_feature_gates")
        try:
            entries = parse_key_value_list(spec)
        except ValueError as e:
            raise FeatureGateError(
                f"Invalid feature gate specification: {e}",
                context=context,
            ) from e

        overrides: dict[str, bool] = {}
        for name, value in entries.items():
            try:
                overrides[name] = parse_bool_text(value)
            except ValueError as e:
                raise FeatureGateError(
                    f"Invalid value {value!r} for feature gate {name}",
                    gate_name=name,
                    context=context,
                ) from e

        logger.debug(
            "Parsed feature gate flags",
            extra={"feature_gates": sorted(overrides)},
        )
        return cls(overrides)

    def is_enabled(self, gate_name: str) -> bool:
        """Return the current state of ``gate_name``."""
        name = str(gate_name)
        if name in self._overrides:
            return self._overrides[name]
        try:
            return EnumTopologyFeatureGate(name).default_enabled
        except ValueError:
            return False

    def with_overrides(
        self,
        overrides: Mapping[str | EnumTopologyFeatureGate, bool],
    ) -> FeatureGateSet:
        """Return a new gate set with ``overrides`` applied on top of this one."""
        merged: dict[str | EnumTopologyFeatureGate, bool] = dict(self._overrides)
        for name, enabled in overrides.items():
            merged[str(name)] = enabled
        return FeatureGateSet(merged)

    @property
    def overrides(self) -> dict[str, bool]:
        """Gates set explicitly on this set, without topology defaults."""
        return dict(self._overrides)

    def as_dict(self) -> dict[str, bool]:
        """Return the effective state of the topology gates plus any overrides."""
        effective = {
            gate.value: self.is_enabled(gate.value) for gate in EnumTopologyFeatureGate
        }
        effective.update(self._overrides)
        return effective

    def to_flag_string(self) -> str:
        """Render the effective gates in ``--feature-gates`` syntax, sorted by name."""
        return ",".join(
            f"{name}={str(enabled).lower()}"
            for name, enabled in sorted(self.as_dict().items())
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FeatureGateSet):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.as_dict().items())))

    def __repr__(self) -> str:
        return f"FeatureGateSet({self.to_flag_string()!r})"


def default_feature_gates() -> FeatureGateSet:
    """Return a gate set with every topology gate at its default state."""
    return FeatureGateSet()


__all__ = ["FeatureGateSet", "default_feature_gates"]
