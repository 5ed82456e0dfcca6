# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Topology Error Context Configuration Model.

Bundles the structured fields shared by every topology manager error so
error constructors keep a small parameter list.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ModelTopologyErrorContext(BaseModel):
    """Structured context attached to topology manager errors.

    Attributes:
        operation: Operation being performed (parse_policy_options, load_config, ...)
        target_name: Option name, gate name or file the operation targeted
        correlation_id: Correlation ID for tracing a node-agent startup

    Example:
        >>> context = ModelTopologyErrorContext.with_correlation(
        ...     operation="parse_policy_options",
        ...     target_name="allowed-numa-nodes",
        ... )
        >>> raise EmptyOptionValueError("allowed-numa-nodes", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed when the error occurred",
    )
    target_name: Optional[str] = Field(
        default=None,
        description="Option, gate or file the operation targeted",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Correlation ID for tracing",
    )

    @classmethod
    def with_correlation(
        cls,
        operation: Optional[str] = None,
        target_name: Optional[str] = None,
        correlation_id: Optional[UUID] = None,
    ) -> ModelTopologyErrorContext:
        """Build a context, generating a correlation ID when none is given."""
        return cls(
            operation=operation,
            target_name=target_name,
            correlation_id=correlation_id or uuid4(),
        )


__all__ = ["ModelTopologyErrorContext"]
