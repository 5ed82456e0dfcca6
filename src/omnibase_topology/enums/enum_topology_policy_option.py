# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Built-in Topology Manager Policy Option Names.

Closed set of option names that have a dedicated value parser. Names added
to the option registry at runtime without a member here are extension
options and are accepted verbatim once authorized.
"""

from enum import Enum


class EnumTopologyPolicyOption(str, Enum):
    """Recognized topology manager policy option keys.

    Attributes:
        PREFER_CLOSEST_NUMA_NODES: Prefer the set of NUMA nodes with the
            shortest distance when several alignments are possible (bool).
        MAX_ALLOWABLE_NUMA_NODES: Upper bound on the number of NUMA nodes the
            topology manager will consider on this machine (int).
        ALLOWED_NUMA_NODES: Explicit allow-list of NUMA node IDs
            (comma-separated ints).
    """

    PREFER_CLOSEST_NUMA_NODES = "prefer-closest-numa-nodes"
    MAX_ALLOWABLE_NUMA_NODES = "max-allowable-numa-nodes"
    ALLOWED_NUMA_NODES = "allowed-numa-nodes"

    def __str__(self) -> str:
        return self.value


__all__ = ["EnumTopologyPolicyOption"]
