# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Topology Manager Enumerations Module.

Exports:
    EnumOptionMaturity: Maturity tier of a policy option (STABLE, BETA, ALPHA)
    EnumTopologyFeatureGate: Feature gates guarding the BETA and ALPHA tiers
    EnumTopologyPolicyOption: Built-in policy option names with dedicated parsers
"""

from omnibase_topology.enums.enum_option_maturity import EnumOptionMaturity
from omnibase_topology.enums.enum_topology_feature_gate import (
    EnumTopologyFeatureGate,
)
from omnibase_topology.enums.enum_topology_policy_option import (
    EnumTopologyPolicyOption,
)

__all__: list[str] = [
    "EnumOptionMaturity",
    "EnumTopologyFeatureGate",
    "EnumTopologyPolicyOption",
]
