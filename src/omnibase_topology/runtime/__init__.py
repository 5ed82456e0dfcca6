# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Topology manager runtime: option registry, feature gates and parser.

Exports:
    RegistryTopologyPolicyOption: Option name -> maturity tier catalog
    create_default_registry: Registry pre-loaded with the built-in options
    FeatureGateSet: Immutable feature gate oracle
    default_feature_gates: Gate set at default states
    PolicyOptionDefinition: Built-in option tier, field and value parser
    BUILTIN_OPTION_DEFINITIONS: Definitions of the built-in options
    TopologyPolicyOptionsParser: Raw option mapping -> validated options
    new_policy_options: One-call parse with default registry and gates
    load_policy_options: Load, override and validate from a config file
"""

from omnibase_topology.runtime.config_loader import (
    ENV_FEATURE_GATES,
    ENV_POLICY_OPTIONS,
    apply_env_overrides,
    build_feature_gates,
    load_policy_options,
    load_topology_manager_config,
    resolve_policy_options,
)
from omnibase_topology.runtime.feature_gates import (
    FeatureGateSet,
    default_feature_gates,
)
from omnibase_topology.runtime.policy_option_definitions import (
    BUILTIN_OPTION_DEFINITIONS,
    PolicyOptionDefinition,
    get_option_definition,
    parse_bool_option,
    parse_int_option,
    parse_numa_node_list,
)
from omnibase_topology.runtime.policy_options_parser import (
    TopologyPolicyOptionsParser,
    new_policy_options,
)
from omnibase_topology.runtime.registry_topology_policy_option import (
    RegistryTopologyPolicyOption,
    create_default_registry,
)

__all__: list[str] = [
    "BUILTIN_OPTION_DEFINITIONS",
    "ENV_FEATURE_GATES",
    "ENV_POLICY_OPTIONS",
    "FeatureGateSet",
    "PolicyOptionDefinition",
    "RegistryTopologyPolicyOption",
    "TopologyPolicyOptionsParser",
    "apply_env_overrides",
    "build_feature_gates",
    "create_default_registry",
    "default_feature_gates",
    "get_option_definition",
    "load_policy_options",
    "load_topology_manager_config",
    "new_policy_options",
    "parse_bool_option",
    "parse_int_option",
    "parse_numa_node_list",
    "resolve_policy_options",
]
