# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Pytest configuration and shared fixtures for omnibase_topology tests."""

from __future__ import annotations

import pytest

from omnibase_topology.enums import EnumOptionMaturity, EnumTopologyFeatureGate
from omnibase_topology.runtime import (
    FeatureGateSet,
    RegistryTopologyPolicyOption,
    TopologyPolicyOptionsParser,
    create_default_registry,
)

# Names registered ad hoc into the beta and alpha tiers to exercise
# extension options without a dedicated value parser.
FANCY_BETA_OPTION = "fancy-new-option"
FANCY_ALPHA_OPTION = "fancy-alpha-option"

BETA_GATE = EnumTopologyFeatureGate.POLICY_BETA_OPTIONS
ALPHA_GATE = EnumTopologyFeatureGate.POLICY_ALPHA_OPTIONS


@pytest.fixture
def registry() -> RegistryTopologyPolicyOption:
    """Provide the built-in registry extended with one beta and one alpha option."""
    registry = create_default_registry()
    registry.register(FANCY_BETA_OPTION, EnumOptionMaturity.BETA)
    registry.register(FANCY_ALPHA_OPTION, EnumOptionMaturity.ALPHA)
    return registry


@pytest.fixture
def parser(registry: RegistryTopologyPolicyOption) -> TopologyPolicyOptionsParser:
    """Provide a parser bound to the extended registry."""
    return TopologyPolicyOptionsParser(registry)


@pytest.fixture
def default_gates() -> FeatureGateSet:
    """Gates at default state: beta on, alpha off."""
    return FeatureGateSet()


@pytest.fixture
def all_gates_disabled() -> FeatureGateSet:
    return FeatureGateSet({BETA_GATE: False, ALPHA_GATE: False})


@pytest.fixture
def all_gates_enabled() -> FeatureGateSet:
    return FeatureGateSet({BETA_GATE: True, ALPHA_GATE: True})
