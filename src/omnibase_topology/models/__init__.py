# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Topology manager Pydantic models.

Exports:
    ModelTopologyPolicyOptions: Validated, immutable policy options
    ModelTopologyManagerConfig: Topology manager section of the node-agent config
    DEFAULT_MAX_ALLOWABLE_NUMA_NODES: Default NUMA node ceiling
"""

from omnibase_topology.models.model_topology_manager_config import (
    ModelTopologyManagerConfig,
)
from omnibase_topology.models.model_topology_policy_options import (
    DEFAULT_MAX_ALLOWABLE_NUMA_NODES,
    ModelTopologyPolicyOptions,
)

__all__: list[str] = [
    "DEFAULT_MAX_ALLOWABLE_NUMA_NODES",
    "ModelTopologyManagerConfig",
    "ModelTopologyPolicyOptions",
]
