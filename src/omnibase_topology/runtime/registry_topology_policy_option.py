# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Topology Policy Option Registry - catalog of recognized option names.

RegistryTopologyPolicyOption maps each recognized option name to exactly
one maturity tier. The parser consults it to authorize every key before any
value parser runs.

Availability rules:
    - STABLE options are always available.
    - BETA options require the TopologyManagerPolicyBetaOptions gate.
    - ALPHA options require the TopologyManagerPolicyAlphaOptions gate.
    - Unregistered options are never available.

A name lives in at most one tier: the registry is a single dict keyed by
name, and re-registering a name moves it (last write wins). Registration is
expected at startup or in single-threaded test setup, but all access is
guarded by a lock so late registration stays safe.

Example:
    >>> registry = create_default_registry()
    >>> registry.register("fancy-new-option", EnumOptionMaturity.BETA)
    >>> registry.is_available("fancy-new-option", FeatureGateSet())
    True
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Optional

from omnibase_topology.enums import EnumOptionMaturity, EnumTopologyPolicyOption
from omnibase_topology.errors import (
    ModelTopologyErrorContext,
    PolicyOptionUnavailableError,
)
from omnibase_topology.runtime.policy_option_definitions import (
    BUILTIN_OPTION_DEFINITIONS,
)

if TYPE_CHECKING:
    from omnibase_topology.protocols import ProtocolFeatureGate

logger = logging.getLogger(__name__)


class RegistryTopologyPolicyOption:
    """Thread-safe registry of policy option names and their maturity tiers.

    Attributes:
        _options: Option name -> maturity tier
        _lock: Lock guarding every read and write of ``_options``
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._options: dict[str, EnumOptionMaturity] = {}
        self._lock: threading.Lock = threading.Lock()

    def register(
        self,
        name: str | EnumTopologyPolicyOption,
        maturity: EnumOptionMaturity,
    ) -> None:
        """Register ``name`` under ``maturity``.

        Idempotent. Registering an existing name replaces its tier.

        Args:
            name: Option name as it appears in the raw option mapping.
            maturity: Tier gating the option.
        """
        option_name = str(name)
        with self._lock:
            previous = self._options.get(option_name)
            self._options[option_name] = maturity

        logger.debug(
            "Registered topology policy option",
            extra={
                "option_name": option_name,
                "maturity": maturity.value,
                "previous_maturity": previous.value if previous else None,
            },
        )

    def unregister(self, name: str | EnumTopologyPolicyOption) -> bool:
        """Remove ``name`` from the registry.

        Only meant for test cleanup; production registries never shrink.

        Returns:
            True if the name was registered.
        """
        with self._lock:
            return self._options.pop(str(name), None) is not None

    def get_maturity(
        self, name: str | EnumTopologyPolicyOption
    ) -> Optional[EnumOptionMaturity]:
        """Return the maturity tier of ``name``, or None if unregistered."""
        with self._lock:
            return self._options.get(str(name))

    def is_registered(self, name: str | EnumTopologyPolicyOption) -> bool:
        with self._lock:
            return str(name) in self._options

    def is_available(
        self,
        name: str | EnumTopologyPolicyOption,
        feature_gates: ProtocolFeatureGate,
    ) -> bool:
        """Return True if ``name`` may be used under the current gate state.

        The gate oracle is consulted only for BETA and ALPHA options, and
        at the moment of the call.
        """
        maturity = self.get_maturity(name)
        if maturity is None:
            return False
        gate = maturity.required_feature_gate
        if gate is None:
            return True
        return feature_gates.is_enabled(gate.value)

    def check_available(
        self,
        name: str | EnumTopologyPolicyOption,
        feature_gates: ProtocolFeatureGate,
        context: Optional[ModelTopologyErrorContext] = None,
    ) -> EnumOptionMaturity:
        """Authorize ``name`` or raise.

        Returns:
            The option's maturity tier.

        Raises:
            PolicyOptionUnavailableError: If the option is unregistered or
                its tier's gate is disabled.
        """
        option_name = str(name)
        maturity = self.get_maturity(option_name)
        if maturity is None:
            raise PolicyOptionUnavailableError(option_name, context=context)

        gate = maturity.required_feature_gate
        if gate is not None and not feature_gates.is_enabled(gate.value):
            raise PolicyOptionUnavailableError(
                option_name,
                maturity=maturity,
                feature_gate=gate,
                context=context,
            )
        return maturity

    def list_options(
        self, maturity: Optional[EnumOptionMaturity] = None
    ) -> list[str]:
        """Return registered option names, sorted, optionally for one tier."""
        with self._lock:
            return sorted(
                name
                for name, tier in self._options.items()
                if maturity is None or tier is maturity
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._options)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return self.is_registered(name)

    def __repr__(self) -> str:
        return f"RegistryTopologyPolicyOption(options={len(self)})"


def create_default_registry() -> RegistryTopologyPolicyOption:
    """Build a registry holding the built-in options at their release tiers."""
    registry = RegistryTopologyPolicyOption()
    for option, definition in BUILTIN_OPTION_DEFINITIONS.items():
        registry.register(option, definition.maturity)
    return registry


__all__ = [
    "RegistryTopologyPolicyOption",
    "create_default_registry",
]
