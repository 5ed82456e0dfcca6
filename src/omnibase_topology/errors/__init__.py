# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Topology Manager Errors Module.

All errors extend ModelOnexError from omnibase_core.

Exports:
    ModelTopologyErrorContext: Configuration model for bundled error context
    TopologyRuntimeError: Base topology manager error class
    TopologyConfigurationError: Configuration file / environment errors
    FeatureGateError: Malformed feature gate specification
    PolicyOptionError: Base class for rejected policy options
    PolicyOptionUnavailableError: Unknown option or maturity gate disabled
    InvalidBooleanValueError: Value is not a boolean
    InvalidIntegerValueError: Value is not a base-10 integer
    EmptyOptionValueError: Empty value for an option that requires one
    InvalidNUMANodeIDError: NUMA node ID token is not an integer
    NegativeNUMANodeIDError: NUMA node ID below zero
    DuplicateNUMANodeIDError: NUMA node ID listed twice
"""

from omnibase_topology.errors.error_policy_option import (
    DuplicateNUMANodeIDError,
    EmptyOptionValueError,
    InvalidBooleanValueError,
    InvalidIntegerValueError,
    InvalidNUMANodeIDError,
    NegativeNUMANodeIDError,
    PolicyOptionError,
    PolicyOptionUnavailableError,
)
from omnibase_topology.errors.model_topology_error_context import (
    ModelTopologyErrorContext,
)
from omnibase_topology.errors.topology_errors import (
    FeatureGateError,
    TopologyConfigurationError,
    TopologyRuntimeError,
)

__all__: list[str] = [
    "DuplicateNUMANodeIDError",
    "EmptyOptionValueError",
    "FeatureGateError",
    "InvalidBooleanValueError",
    "InvalidIntegerValueError",
    "InvalidNUMANodeIDError",
    "ModelTopologyErrorContext",
    "NegativeNUMANodeIDError",
    "PolicyOptionError",
    "PolicyOptionUnavailableError",
    "TopologyConfigurationError",
    "TopologyRuntimeError",
]
