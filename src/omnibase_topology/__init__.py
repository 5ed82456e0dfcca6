# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ONEX Topology Manager - policy option parsing and validation.

Turns the node agent's ``topologyManagerPolicyOptions`` block into an
immutable, validated ModelTopologyPolicyOptions that CPU, memory and device
alignment logic consults.

Key Components:
    - RegistryTopologyPolicyOption: recognized options and their maturity tier
    - FeatureGateSet: gate oracle deciding whether beta/alpha options apply
    - TopologyPolicyOptionsParser: fail-fast authorization and value parsing
    - ModelTopologyPolicyOptions: the validated result
"""

__all__: list[str] = []
