# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Validated topology manager policy options.

ModelTopologyPolicyOptions is the immutable result of parsing the raw
``topologyManagerPolicyOptions`` block. Resource-assignment logic reads it
as an opaque configuration value; nothing mutates it after construction.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from omnibase_topology.enums import EnumTopologyPolicyOption

# Largest NUMA node count the topology manager considers by default.
DEFAULT_MAX_ALLOWABLE_NUMA_NODES: int = 8


class ModelTopologyPolicyOptions(BaseModel):
    """Typed, validated topology manager policy options.

    Attributes:
        prefer_closest_numa: Prefer the NUMA node set with the shortest
            distance between nodes when alignment has several candidates.
        max_allowable_numa_nodes: Largest number of NUMA nodes the topology
            manager will operate on.
        allowed_numa_nodes: Explicit NUMA node allow-list in the order it was
            configured. Empty means no restriction.
        extension_options: Authorized options without a dedicated parser,
            kept verbatim as ``(name, value)`` pairs sorted by name.

    Example:
        >>> options = ModelTopologyPolicyOptions(allowed_numa_nodes=(0, 2))
        >>> options.is_numa_node_allowed(1)
        False
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    prefer_closest_numa: bool = Field(
        default=False,
        description="Prefer closest NUMA nodes when aligning resources",
    )
    max_allowable_numa_nodes: int = Field(
        default=DEFAULT_MAX_ALLOWABLE_NUMA_NODES,
        description="Maximum number of NUMA nodes the topology manager considers",
    )
    allowed_numa_nodes: tuple[int, ...] = Field(
        default=(),
        description="NUMA node allow-list in configured order; empty means unrestricted",
    )
    extension_options: tuple[tuple[str, str], ...] = Field(
        default=(),
        description="Authorized options accepted verbatim, sorted by name",
    )

    @field_validator("allowed_numa_nodes")
    @classmethod
    def validate_allowed_numa_nodes(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Reject negative or repeated NUMA node IDs."""
        seen: set[int] = set()
        for node_id in v:
            if node_id < 0:
                raise ValueError(f"NUMA node ID must be non-negative, got {node_id}")
            if node_id in seen:
                raise ValueError(f"duplicate NUMA node ID {node_id}")
            seen.add(node_id)
        return v

    @field_validator("extension_options")
    @classmethod
    def sort_extension_options(
        cls, v: tuple[tuple[str, str], ...]
    ) -> tuple[tuple[str, str], ...]:
        return tuple(sorted(v))

    @property
    def has_numa_allow_list(self) -> bool:
        """True when an explicit NUMA node allow-list is configured."""
        return bool(self.allowed_numa_nodes)

    def is_numa_node_allowed(self, node_id: int) -> bool:
        """Return True if ``node_id`` may be used for alignment.

        Every node is allowed when no allow-list is configured.
        """
        if not self.allowed_numa_nodes:
            return True
        return node_id in self.allowed_numa_nodes

    def filter_allowed_numa_nodes(self, node_ids: Iterable[int]) -> list[int]:
        """Return the subset of ``node_ids`` permitted, in the caller's order."""
        return [node_id for node_id in node_ids if self.is_numa_node_allowed(node_id)]

    def get_extension_option(self, name: str) -> Optional[str]:
        """Return the verbatim value of an extension option, or None."""
        for option_name, value in self.extension_options:
            if option_name == name:
                return value
        return None

    def to_raw_options(self) -> dict[str, str]:
        """Render non-default fields back to their textual option form.

        Parsing the result with the same registry and gates yields an
        equal object.
        """
        raw: dict[str, str] = {}
        if self.prefer_closest_numa:
            raw[EnumTopologyPolicyOption.PREFER_CLOSEST_NUMA_NODES.value] = "true"
        if self.max_allowable_numa_nodes != DEFAULT_MAX_ALLOWABLE_NUMA_NODES:
            raw[EnumTopologyPolicyOption.MAX_ALLOWABLE_NUMA_NODES.value] = str(
                self.max_allowable_numa_nodes
            )
        if self.allowed_numa_nodes:
            raw[EnumTopologyPolicyOption.ALLOWED_NUMA_NODES.value] = ",".join(
                str(node_id) for node_id in self.allowed_numa_nodes
            )
        raw.update(self.extension_options)
        return raw


__all__ = ["DEFAULT_MAX_ALLOWABLE_NUMA_NODES", "ModelTopologyPolicyOptions"]
