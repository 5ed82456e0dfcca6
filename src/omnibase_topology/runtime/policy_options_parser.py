# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Topology Policy Options Parser - raw option mapping to validated options.

TopologyPolicyOptionsParser is the single entry point that turns the
node agent's ``topologyManagerPolicyOptions`` block into an immutable
ModelTopologyPolicyOptions.

Algorithm (fail-fast, no partial result):
    1. An empty or missing mapping yields the defaults without consulting
       the feature gates.
    2. Every key is authorized against the option registry and the gate
       oracle (PolicyOptionUnavailableError on failure).
    3. Every authorized key is handed to its value parser. Keys without a
       built-in definition are extension options, kept verbatim.
    4. Parsed values are assembled into ModelTopologyPolicyOptions; absent
       keys keep their defaults.

Keys are processed in sorted order so the reported error is deterministic
when several keys are invalid. Validation is per key, so the order never
changes a successful result.

Example:
    >>> parser = TopologyPolicyOptionsParser(create_default_registry())
    >>> options = parser.parse({"allowed-numa-nodes": "0,1"}, FeatureGateSet())
    >>> options.allowed_numa_nodes
    (0, 1)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from omnibase_topology.errors import ModelTopologyErrorContext, PolicyOptionError
from omnibase_topology.models import ModelTopologyPolicyOptions
from omnibase_topology.runtime.feature_gates import default_feature_gates
from omnibase_topology.runtime.policy_option_definitions import (
    OptionValue,
    get_option_definition,
)
from omnibase_topology.runtime.registry_topology_policy_option import (
    RegistryTopologyPolicyOption,
    create_default_registry,
)

if TYPE_CHECKING:
    from omnibase_topology.protocols import ProtocolFeatureGate

logger = logging.getLogger(__name__)

_OPERATION = "parse_policy_options"


class TopologyPolicyOptionsParser:
    """Authorizes and parses topology manager policy options.

    The registry is injected and may be shared between parsers; the parser
    itself holds no other state, so one instance serves concurrent callers.
    """

    def __init__(
        self, registry: Optional[RegistryTopologyPolicyOption] = None
    ) -> None:
        """Initialize the parser.

        Args:
            registry: Option registry to authorize keys against. Defaults to
                a fresh registry holding the built-in options.
        """
        self._registry = (
            registry if registry is not None else create_default_registry()
        )

    @property
    def registry(self) -> RegistryTopologyPolicyOption:
        return self._registry

    def parse(
        self,
        raw_options: Optional[Mapping[str, str]],
        feature_gates: ProtocolFeatureGate,
        correlation_id: Optional[UUID] = None,
    ) -> ModelTopologyPolicyOptions:
        """Parse and validate ``raw_options``.

        Args:
            raw_options: Option name -> raw string value. None or empty
                yields the defaults.
            feature_gates: Gate oracle consulted for BETA and ALPHA options.
            correlation_id: Optional correlation ID attached to errors.

        Returns:
            The validated, immutable policy options.

        Raises:
            PolicyOptionUnavailableError: If a key is unknown or gated off.
            PolicyOptionError: If a value fails its option's validation.
        """
        if not raw_options:
            return ModelTopologyPolicyOptions()

        fields: dict[str, OptionValue] = {}
        extension_options: list[tuple[str, str]] = []

        for name in sorted(raw_options):
            value = raw_options[name]
            context = ModelTopologyErrorContext.with_correlation(
                operation=_OPERATION,
                target_name=name,
                correlation_id=correlation_id,
            )
            try:
                maturity = self._registry.check_available(name, feature_gates, context)
                definition = get_option_definition(name)
                if definition is None:
                    extension_options.append((name, value))
                    continue
                fields[definition.field_name] = definition.parser(name, value, context)
            except PolicyOptionError as e:
                logger.warning(
                    "Rejected topology manager policy option",
                    extra={
                        "option_name": name,
                        "error_type": type(e).__name__,
                        "correlation_id": str(context.correlation_id),
                    },
                )
                raise

            logger.debug(
                "Accepted topology manager policy option",
                extra={"option_name": name, "maturity": maturity.value},
            )

        options = ModelTopologyPolicyOptions(
            **fields,
            extension_options=tuple(extension_options),
        )
        logger.debug(
            "Parsed topology manager policy options",
            extra={
                "option_count": len(raw_options),
                "extension_options": [name for name, _ in extension_options],
            },
        )
        return options


def new_policy_options(
    raw_options: Optional[Mapping[str, str]],
    feature_gates: Optional[ProtocolFeatureGate] = None,
    registry: Optional[RegistryTopologyPolicyOption] = None,
) -> ModelTopologyPolicyOptions:
    """Parse ``raw_options`` in one call.

    Args:
        raw_options: Option name -> raw string value.
        feature_gates: Gate oracle; defaults to the default gate states.
        registry: Option registry; defaults to the built-in options.

    Returns:
        The validated policy options.
    """
    parser = TopologyPolicyOptionsParser(registry)
    gates = feature_gates if feature_gates is not None else default_feature_gates()
    return parser.parse(raw_options, gates)


__all__ = ["TopologyPolicyOptionsParser", "new_policy_options"]
