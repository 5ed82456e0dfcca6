# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Topology manager section of the node-agent configuration file.

Mirrors the two blocks of the node-agent YAML the topology manager reads:

    featureGates:
      TopologyManagerPolicyAlphaOptions: true
    topologyManagerPolicyOptions:
      allowed-numa-nodes: "0,1"
      max-allowable-numa-nodes: 16

YAML scalars under ``topologyManagerPolicyOptions`` are normalized to
strings (``16`` -> ``"16"``, ``true`` -> ``"true"``) because policy option
values are textual by contract; their validation happens in the parser.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ModelTopologyManagerConfig(BaseModel):
    """Raw topology manager configuration.

    Attributes:
        policy_options: Raw ``topologyManagerPolicyOptions`` block.
        feature_gates: Raw ``featureGates`` block.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    policy_options: dict[str, str] = Field(
        default_factory=dict,
        alias="topologyManagerPolicyOptions",
        description="Raw topology manager policy options",
    )
    feature_gates: dict[str, bool] = Field(
        default_factory=dict,
        alias="featureGates",
        description="Feature gate overrides",
    )

    @field_validator("policy_options", mode="before")
    @classmethod
    def normalize_policy_option_values(cls, v: object) -> object:
        """Render YAML scalars as option strings; leave other shapes to pydantic."""
        if v is None:
            return {}
        if not isinstance(v, dict):
            return v
        normalized: dict[object, object] = {}
        for key, value in v.items():
            if isinstance(value, bool):
                normalized[key] = "true" if value else "false"
            elif isinstance(value, int | float):
                normalized[key] = str(value)
            elif value is None:
                normalized[key] = ""
            else:
                normalized[key] = value
        return normalized

    @field_validator("feature_gates", mode="before")
    @classmethod
    def normalize_feature_gates(cls, v: object) -> object:
        return {} if v is None else v


__all__ = ["ModelTopologyManagerConfig"]
