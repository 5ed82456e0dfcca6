# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Policy Option Error Classes.

Errors raised while authorizing and parsing topology manager policy
options. Every error carries the offending option name in its message and
in ``error.model.context["option_name"]``.

Error Hierarchy:
    TopologyRuntimeError
    └── PolicyOptionError
        ├── PolicyOptionUnavailableError
        ├── InvalidBooleanValueError
        ├── InvalidIntegerValueError
        ├── EmptyOptionValueError
        ├── InvalidNUMANodeIDError
        ├── NegativeNUMANodeIDError
        └── DuplicateNUMANodeIDError

All of these are fatal to node-agent startup: there is nothing transient
to retry against.
"""

from typing import Optional

from omnibase_core.enums.enum_core_error_code import EnumCoreErrorCode

from omnibase_topology.enums import EnumOptionMaturity, EnumTopologyFeatureGate
from omnibase_topology.errors.model_topology_error_context import (
    ModelTopologyErrorContext,
)
from omnibase_topology.errors.topology_errors import TopologyRuntimeError


class PolicyOptionError(TopologyRuntimeError):
    """Base error for a rejected policy option.

    Example:
        >>> try:
        ...     new_policy_options({"allowed-numa-nodes": "0,0"})
        ... except PolicyOptionError as e:
        ...     print(e.option_name)
        allowed-numa-nodes
    """

    def __init__(
        self,
        message: str,
        option_name: str,
        error_code: Optional[EnumCoreErrorCode] = None,
        context: Optional[ModelTopologyErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize PolicyOptionError.

        Args:
            message: Human-readable error message naming the option
            option_name: The option that was rejected
            error_code: Error code (defaults to INVALID_PARAMETER)
            context: Bundled topology error context
            **extra_context: Additional context information
        """
        self.option_name = option_name
        extra_context["option_name"] = option_name
        super().__init__(
            message=message,
            error_code=error_code or EnumCoreErrorCode.INVALID_PARAMETER,
            context=context,
            **extra_context,
        )


class PolicyOptionUnavailableError(PolicyOptionError):
    """Raised when an option is unknown or its maturity gate is disabled.

    When ``maturity`` is None the option is not registered in any tier.
    Otherwise the message names the tier and the disabled feature gate.
    """

    def __init__(
        self,
        option_name: str,
        maturity: Optional[EnumOptionMaturity] = None,
        feature_gate: Optional[EnumTopologyFeatureGate] = None,
        context: Optional[ModelTopologyErrorContext] = None,
    ) -> None:
        extra_context: dict[str, object] = {}
        if maturity is None:
            message = f'unknown Topology Manager Policy option: "{option_name}"'
        else:
            extra_context["maturity"] = maturity.value
            message = (
                f"topology manager policy {maturity.level_name} options not "
                f'enabled, but option "{option_name}" requires it'
            )
            if feature_gate is not None:
                extra_context["feature_gate"] = feature_gate.value
                message += f" (feature gate {feature_gate.value} is disabled)"

        self.maturity = maturity
        self.feature_gate = feature_gate
        super().__init__(
            message=message,
            option_name=option_name,
            error_code=EnumCoreErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


class InvalidBooleanValueError(PolicyOptionError):
    """Raised when a boolean option value is not a recognized boolean form."""

    def __init__(
        self,
        option_name: str,
        value: str,
        context: Optional[ModelTopologyErrorContext] = None,
    ) -> None:
        super().__init__(
            message=f'bad value for option "{option_name}": invalid boolean "{value}"',
            option_name=option_name,
            context=context,
            value=value,
        )


class InvalidIntegerValueError(PolicyOptionError):
    """Raised when an integer option value is not a base-10 integer."""

    def __init__(
        self,
        option_name: str,
        value: str,
        context: Optional[ModelTopologyErrorContext] = None,
    ) -> None:
        super().__init__(
            message=(
                f'unable to convert policy option to integer "{option_name}": '
                f'invalid syntax "{value}"'
            ),
            option_name=option_name,
            context=context,
            value=value,
        )


class EmptyOptionValueError(PolicyOptionError):
    """Raised when an option that requires a value was given an empty one."""

    def __init__(
        self,
        option_name: str,
        context: Optional[ModelTopologyErrorContext] = None,
    ) -> None:
        super().__init__(
            message=f'empty value for option "{option_name}"',
            option_name=option_name,
            context=context,
        )


class InvalidNUMANodeIDError(PolicyOptionError):
    """Raised when a NUMA node ID token is not a base-10 integer."""

    def __init__(
        self,
        option_name: str,
        token: str,
        context: Optional[ModelTopologyErrorContext] = None,
    ) -> None:
        self.token = token
        super().__init__(
            message=f'invalid NUMA node ID "{token}" in option "{option_name}"',
            option_name=option_name,
            context=context,
            token=token,
        )


class NegativeNUMANodeIDError(PolicyOptionError):
    """Raised when a NUMA node ID is below zero."""

    def __init__(
        self,
        option_name: str,
        node_id: int,
        context: Optional[ModelTopologyErrorContext] = None,
    ) -> None:
        self.node_id = node_id
        super().__init__(
            message=(
                f"NUMA node ID must be non-negative, got {node_id} "
                f'in option "{option_name}"'
            ),
            option_name=option_name,
            context=context,
            node_id=node_id,
        )


class DuplicateNUMANodeIDError(PolicyOptionError):
    """Raised when the same NUMA node ID appears more than once."""

    def __init__(
        self,
        option_name: str,
        node_id: int,
        context: Optional[ModelTopologyErrorContext] = None,
    ) -> None:
        self.node_id = node_id
        super().__init__(
            message=f'duplicate NUMA node ID {node_id} in option "{option_name}"',
            option_name=option_name,
            context=context,
            node_id=node_id,
        )


__all__ = [
    "DuplicateNUMANodeIDError",
    "EmptyOptionValueError",
    "InvalidBooleanValueError",
    "InvalidIntegerValueError",
    "InvalidNUMANodeIDError",
    "NegativeNUMANodeIDError",
    "PolicyOptionError",
    "PolicyOptionUnavailableError",
]
