# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Topology Manager Feature Gate Enumeration.

Defines the feature gates that control which maturity tiers of topology
manager policy options are honored by the node agent.
"""

from enum import Enum


class EnumTopologyFeatureGate(str, Enum):
    """Feature gates consulted when authorizing topology policy options.

    The values match the gate names accepted by the node agent's
    ``--feature-gates`` flag.

    Attributes:
        POLICY_BETA_OPTIONS: Enables beta-level topology manager policy options.
        POLICY_ALPHA_OPTIONS: Enables alpha-level topology manager policy options.
    """

    POLICY_BETA_OPTIONS = "TopologyManagerPolicyBetaOptions"
    POLICY_ALPHA_OPTIONS = "TopologyManagerPolicyAlphaOptions"

    @property
    def default_enabled(self) -> bool:
        """Return the gate state used when nothing overrides it.

        Beta gates default to enabled and alpha gates to disabled.
        """
        return self is EnumTopologyFeatureGate.POLICY_BETA_OPTIONS

    def __str__(self) -> str:
        """Return the gate name for flag rendering."""
        return self.value


__all__ = ["EnumTopologyFeatureGate"]
