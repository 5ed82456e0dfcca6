# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for ModelTopologyPolicyOptions and ModelTopologyManagerConfig."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from omnibase_topology.models import (
    DEFAULT_MAX_ALLOWABLE_NUMA_NODES,
    ModelTopologyManagerConfig,
    ModelTopologyPolicyOptions,
)


class TestModelTopologyPolicyOptions:
    def test_defaults(self) -> None:
        options = ModelTopologyPolicyOptions()

        assert options.prefer_closest_numa is False
        assert options.max_allowable_numa_nodes == DEFAULT_MAX_ALLOWABLE_NUMA_NODES
        assert options.allowed_numa_nodes == ()
        assert options.extension_options == ()
        assert options.has_numa_allow_list is False

    def test_is_frozen(self) -> None:
        options = ModelTopologyPolicyOptions()

        with pytest.raises(ValidationError):
            options.prefer_closest_numa = True  # type: ignore[misc]

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            ModelTopologyPolicyOptions(unknown_field=1)  # type: ignore[call-arg]

    @pytest.mark.parametrize("nodes", [(0, -1), (1, 1)])
    def test_rejects_invalid_allow_list(self, nodes: tuple[int, ...]) -> None:
        with pytest.raises(ValidationError):
            ModelTopologyPolicyOptions(allowed_numa_nodes=nodes)

    def test_extension_options_sorted(self) -> None:
        options = ModelTopologyPolicyOptions(
            extension_options=(("zeta", "1"), ("alpha", "2"))
        )

        assert options.extension_options == (("alpha", "2"), ("zeta", "1"))
        assert options.get_extension_option("zeta") == "1"
        assert options.get_extension_option("missing") is None

    def test_hashable_and_comparable(self) -> None:
        a = ModelTopologyPolicyOptions(allowed_numa_nodes=(0, 1))
        b = ModelTopologyPolicyOptions(allowed_numa_nodes=(0, 1))

        assert a == b
        assert hash(a) == hash(b)


class TestNumaAllowList:
    def test_everything_allowed_without_list(self) -> None:
        options = ModelTopologyPolicyOptions()

        assert options.is_numa_node_allowed(0)
        assert options.is_numa_node_allowed(63)
        assert options.filter_allowed_numa_nodes([3, 1, 2]) == [3, 1, 2]

    def test_membership(self) -> None:
        options = ModelTopologyPolicyOptions(allowed_numa_nodes=(2, 0))

        assert options.has_numa_allow_list
        assert options.is_numa_node_allowed(0)
        assert not options.is_numa_node_allowed(1)

    def test_filter_preserves_caller_order(self) -> None:
        options = ModelTopologyPolicyOptions(allowed_numa_nodes=(0, 2, 4))

        assert options.filter_allowed_numa_nodes([4, 3, 2, 1, 0]) == [4, 2, 0]


class TestToRawOptions:
    def test_defaults_render_empty(self) -> None:
        assert ModelTopologyPolicyOptions().to_raw_options() == {}

    def test_non_defaults_rendered(self) -> None:
        options = ModelTopologyPolicyOptions(
            prefer_closest_numa=True,
            max_allowable_numa_nodes=16,
            allowed_numa_nodes=(6, 0),
            extension_options=(("fancy-new-option", "on"),),
        )

        assert options.to_raw_options() == {
            "prefer-closest-numa-nodes": "true",
            "max-allowable-numa-nodes": "16",
            "allowed-numa-nodes": "6,0",
            "fancy-new-option": "on",
        }


class TestModelTopologyManagerConfig:
    def test_aliases(self) -> None:
        config = ModelTopologyManagerConfig.model_validate(
            {
                "topologyManagerPolicyOptions": {"allowed-numa-nodes": "0"},
                "featureGates": {"TopologyManagerPolicyBetaOptions": False},
            }
        )

        assert config.policy_options == {"allowed-numa-nodes": "0"}
        assert config.feature_gates == {"TopologyManagerPolicyBetaOptions": False}

    def test_scalar_values_normalized_to_strings(self) -> None:
        config = ModelTopologyManagerConfig.model_validate(
            {
                "topologyManagerPolicyOptions": {
                    "prefer-closest-numa-nodes": True,
                    "max-allowable-numa-nodes": 12,
                    "allowed-numa-nodes": None,
                }
            }
        )

        assert config.policy_options == {
            "prefer-closest-numa-nodes": "true",
            "max-allowable-numa-nodes": "12",
            "allowed-numa-nodes": "",
        }

    def test_unrelated_keys_ignored(self) -> None:
        config = ModelTopologyManagerConfig.model_validate(
            {"cpuManagerPolicy": "static", "kind": "KubeletConfiguration"}
        )

        assert config == ModelTopologyManagerConfig()
