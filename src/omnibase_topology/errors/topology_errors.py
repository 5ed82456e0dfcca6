# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Base errors raised while the topology manager reads its configuration.

    ModelOnexError
    └── TopologyRuntimeError
        ├── TopologyConfigurationError
        │   └── FeatureGateError
        └── PolicyOptionError (error_policy_option.py)

Nothing here is retried; every error stops node-agent startup.
"""

from typing import Optional

from omnibase_core.enums.enum_core_error_code import EnumCoreErrorCode
from omnibase_core.models.errors.model_onex_error import ModelOnexError

from omnibase_topology.errors.model_topology_error_context import (
    ModelTopologyErrorContext,
)


def _context_fields(context: Optional[ModelTopologyErrorContext]) -> dict[str, object]:
    if context is None:
        return {}
    fields: dict[str, object] = {}
    if context.operation is not None:
        fields["operation"] = context.operation
    if context.target_name is not None:
        fields["target_name"] = context.target_name
    return fields


class TopologyRuntimeError(ModelOnexError):
    """Root of the topology manager errors.

    The option, gate or file involved travels as ``target_name`` in the
    error's structured context.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[EnumCoreErrorCode] = None,
        context: Optional[ModelTopologyErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code or EnumCoreErrorCode.OPERATION_FAILED,
            correlation_id=context.correlation_id if context is not None else None,
            **{**extra_context, **_context_fields(context)},
        )


class TopologyConfigurationError(TopologyRuntimeError):
    """A config file, environment override or option list could not be read."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelTopologyErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message,
            error_code=EnumCoreErrorCode.INVALID_CONFIGURATION,
            context=context,
            **extra_context,
        )


class FeatureGateError(TopologyConfigurationError):
    """A ``--feature-gates`` entry or ``featureGates`` value is malformed."""

    def __init__(
        self,
        message: str,
        gate_name: Optional[str] = None,
        context: Optional[ModelTopologyErrorContext] = None,
        **extra_context: object,
    ) -> None:
        if gate_name is not None:
            extra_context["gate_name"] = gate_name
        super().__init__(message, context=context, **extra_context)


__all__ = [
    "FeatureGateError",
    "TopologyConfigurationError",
    "TopologyRuntimeError",
]
