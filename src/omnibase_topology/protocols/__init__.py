# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Topology manager protocol definitions."""

from omnibase_topology.protocols.protocol_feature_gate import ProtocolFeatureGate

__all__: list[str] = ["ProtocolFeatureGate"]
