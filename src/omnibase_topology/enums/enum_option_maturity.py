# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Policy option maturity tiers.

Every topology manager policy option belongs to exactly one maturity tier.
The tier decides which feature gate, if any, must be enabled before the
option is honored.
"""

from __future__ import annotations

from enum import Enum

from omnibase_topology.enums.enum_topology_feature_gate import (
    EnumTopologyFeatureGate,
)


class EnumOptionMaturity(str, Enum):
    """Stability classification for a policy option.

    Values:
        STABLE: Always available.
        BETA: Requires the TopologyManagerPolicyBetaOptions gate.
        ALPHA: Requires the TopologyManagerPolicyAlphaOptions gate.
    """

    STABLE = "stable"
    BETA = "beta"
    ALPHA = "alpha"

    @property
    def required_feature_gate(self) -> EnumTopologyFeatureGate | None:
        """Return the gate guarding this tier, or None for STABLE."""
        gates: dict[EnumOptionMaturity, EnumTopologyFeatureGate] = {
            EnumOptionMaturity.BETA: EnumTopologyFeatureGate.POLICY_BETA_OPTIONS,
            EnumOptionMaturity.ALPHA: EnumTopologyFeatureGate.POLICY_ALPHA_OPTIONS,
        }
        return gates.get(self)

    @property
    def level_name(self) -> str:
        """Return the tier as used in error messages (e.g. ``beta-level``)."""
        return f"{self.value}-level"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__: list[str] = ["EnumOptionMaturity"]
