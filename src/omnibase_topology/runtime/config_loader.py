# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Topology manager configuration loading.

Reads the topology manager section of a node-agent YAML configuration,
applies environment overrides and resolves the validated policy options
the node agent starts with.

Environment Variables:
    ONEX_TOPOLOGY_FEATURE_GATES: Gate overrides in ``--feature-gates``
        syntax, layered over the file's ``featureGates`` block.
        Example: "TopologyManagerPolicyAlphaOptions=true"

    ONEX_TOPOLOGY_POLICY_OPTIONS: Policy option overrides as
        ``key=value`` pairs, layered over ``topologyManagerPolicyOptions``.
        Example: "prefer-closest-numa-nodes=true"

    Values containing commas (such as ``allowed-numa-nodes``) cannot be
    expressed in ONEX_TOPOLOGY_POLICY_OPTIONS; set them in the file.

Any error here is fatal to node-agent startup.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from omnibase_topology.errors import (
    ModelTopologyErrorContext,
    TopologyConfigurationError,
)
from omnibase_topology.models import (
    ModelTopologyManagerConfig,
    ModelTopologyPolicyOptions,
)
from omnibase_topology.runtime.feature_gates import FeatureGateSet
from omnibase_topology.runtime.policy_options_parser import (
    TopologyPolicyOptionsParser,
)
from omnibase_topology.runtime.registry_topology_policy_option import (
    RegistryTopologyPolicyOption,
)
from omnibase_topology.utils import parse_key_value_list

logger = logging.getLogger(__name__)

ENV_FEATURE_GATES = "ONEX_TOPOLOGY_FEATURE_GATES"
ENV_POLICY_OPTIONS = "ONEX_TOPOLOGY_POLICY_OPTIONS"

# Node-agent configs are small; anything larger is not a config file.
MAX_CONFIG_SIZE_BYTES = 1024 * 1024


def load_topology_manager_config(path: str | Path) -> ModelTopologyManagerConfig:
    """Load the topology manager section from a YAML configuration file.

    Args:
        path: Path to the node-agent configuration file.

    Returns:
        The raw topology manager configuration. Unrelated top-level keys
        are ignored.

    Raises:
        TopologyConfigurationError: If the file is missing, too large, not
            valid YAML, not a mapping, or its topology blocks are malformed.
    """
    config_path = Path(path)
    context = ModelTopologyErrorContext.with_correlation(
        operation="load_topology_config",
        target_name=str(config_path),
    )

    if not config_path.is_file():
        raise TopologyConfigurationError(
            f"Config file not found: {config_path}",
            context=context,
        )

    file_size = config_path.stat().st_size
    if file_size > MAX_CONFIG_SIZE_BYTES:
        raise TopologyConfigurationError(
            f"Config file too large: {file_size} bytes (max {MAX_CONFIG_SIZE_BYTES})",
            context=context,
        )

    try:
        with config_path.open() as f:
            document = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise TopologyConfigurationError(
            f"Invalid YAML in config: {e}",
            context=context,
        ) from e

    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise TopologyConfigurationError(
            f"Config must be a mapping, got {type(document).__name__}",
            context=context,
        )

    try:
        config = ModelTopologyManagerConfig.model_validate(document)
    except ValidationError as e:
        raise TopologyConfigurationError(
            f"Invalid topology manager configuration: {e}",
            context=context,
        ) from e

    logger.debug(
        "Loaded topology manager config",
        extra={
            "config_path": str(config_path),
            "policy_options": sorted(config.policy_options),
            "feature_gates": sorted(config.feature_gates),
        },
    )
    return config


def apply_env_overrides(
    config: ModelTopologyManagerConfig,
    environ: Optional[Mapping[str, str]] = None,
) -> ModelTopologyManagerConfig:
    """Return ``config`` with environment overrides applied.

    Args:
        config: Configuration loaded from file (or defaults).
        environ: Environment to read; defaults to ``os.environ``.

    Raises:
        FeatureGateError: If ONEX_TOPOLOGY_FEATURE_GATES is malformed.
        TopologyConfigurationError: If ONEX_TOPOLOGY_POLICY_OPTIONS is malformed.
    """
    env = os.environ if environ is None else environ
    policy_options = dict(config.policy_options)
    feature_gates = dict(config.feature_gates)

    gates_spec = env.get(ENV_FEATURE_GATES)
    if gates_spec:
        feature_gates.update(FeatureGateSet.from_flag_string(gates_spec).overrides)

    options_spec = env.get(ENV_POLICY_OPTIONS)
    if options_spec:
        try:
            policy_options.update(parse_key_value_list(options_spec))
        except ValueError as e:
            raise TopologyConfigurationError(
                f"Invalid {ENV_POLICY_OPTIONS}: {e}",
                context=ModelTopologyErrorContext.with_correlation(
                    operation="apply_env_overrides",
                    target_name=ENV_POLICY_OPTIONS,
                ),
            ) from e

    if gates_spec or options_spec:
        logger.info(
            "Applied topology manager environment overrides",
            extra={
                "feature_gates_override": bool(gates_spec),
                "policy_options_override": bool(options_spec),
            },
        )

    return config.model_copy(
        update={"policy_options": policy_options, "feature_gates": feature_gates}
    )


def build_feature_gates(config: ModelTopologyManagerConfig) -> FeatureGateSet:
    """Return the configured gates layered over the default gate states."""
    return FeatureGateSet(config.feature_gates)


def resolve_policy_options(
    config: ModelTopologyManagerConfig,
    registry: Optional[RegistryTopologyPolicyOption] = None,
) -> ModelTopologyPolicyOptions:
    """Validate the configured policy options against the configured gates.

    Raises:
        PolicyOptionError: If any option is unavailable or invalid.
    """
    parser = TopologyPolicyOptionsParser(registry)
    return parser.parse(config.policy_options, build_feature_gates(config))


def load_policy_options(
    path: str | Path | None = None,
    registry: Optional[RegistryTopologyPolicyOption] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ModelTopologyPolicyOptions:
    """Full startup path: load file, apply environment, validate.

    Args:
        path: Node-agent configuration file. None starts from an empty config.
        registry: Option registry; defaults to the built-in options.
        environ: Environment to read; defaults to ``os.environ``.

    Raises:
        TopologyConfigurationError: If configuration cannot be loaded.
        PolicyOptionError: If any option is unavailable or invalid.
    """
    config = (
        load_topology_manager_config(path)
        if path is not None
        else ModelTopologyManagerConfig()
    )
    config = apply_env_overrides(config, environ)
    return resolve_policy_options(config, registry)


__all__ = [
    "ENV_FEATURE_GATES",
    "ENV_POLICY_OPTIONS",
    "MAX_CONFIG_SIZE_BYTES",
    "apply_env_overrides",
    "build_feature_gates",
    "load_policy_options",
    "load_topology_manager_config",
    "resolve_policy_options",
]
