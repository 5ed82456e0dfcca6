# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for topology manager configuration loading and env overrides."""

from __future__ import annotations

from pathlib import Path

import pytest

from omnibase_topology.enums import EnumTopologyFeatureGate
from omnibase_topology.errors import (
    FeatureGateError,
    PolicyOptionUnavailableError,
    TopologyConfigurationError,
)
from omnibase_topology.models import ModelTopologyManagerConfig
from omnibase_topology.runtime import (
    ENV_FEATURE_GATES,
    ENV_POLICY_OPTIONS,
    MAX_CONFIG_SIZE_BYTES,
    apply_env_overrides,
    build_feature_gates,
    load_policy_options,
    load_topology_manager_config,
    resolve_policy_options,
)

NODE_AGENT_CONFIG = """\
apiVersion: kubelet.config.k8s.io/v1beta1
kind: KubeletConfiguration
cpuManagerPolicy: static
featureGates:
  TopologyManagerPolicyAlphaOptions: true
topologyManagerPolicyOptions:
  prefer-closest-numa-nodes: true
  max-allowable-numa-nodes: 16
  allowed-numa-nodes: "0,2"
"""


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(NODE_AGENT_CONFIG)
    return path


class TestLoadTopologyManagerConfig:
    def test_loads_topology_blocks(self, config_file: Path) -> None:
        config = load_topology_manager_config(config_file)

        assert config.policy_options == {
            "prefer-closest-numa-nodes": "true",
            "max-allowable-numa-nodes": "16",
            "allowed-numa-nodes": "0,2",
        }
        assert config.feature_gates == {"TopologyManagerPolicyAlphaOptions": True}

    def test_accepts_string_path(self, config_file: Path) -> None:
        config = load_topology_manager_config(str(config_file))

        assert "allowed-numa-nodes" in config.policy_options

    def test_empty_document_gives_empty_config(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_topology_manager_config(path) == ModelTopologyManagerConfig()

    def test_null_blocks_become_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "nulls.yaml"
        path.write_text("featureGates:\ntopologyManagerPolicyOptions:\n")

        config = load_topology_manager_config(path)

        assert config.policy_options == {}
        assert config.feature_gates == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(TopologyConfigurationError, match="Config file not found"):
            load_topology_manager_config(tmp_path / "missing.yaml")

    def test_directory_is_not_a_file(self, tmp_path: Path) -> None:
        with pytest.raises(TopologyConfigurationError, match="Config file not found"):
            load_topology_manager_config(tmp_path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.yaml"
        path.write_text("featureGates: [unclosed\n")

        with pytest.raises(TopologyConfigurationError, match="Invalid YAML") as e:
            load_topology_manager_config(path)

        assert e.value.__cause__ is not None

    def test_non_mapping_document(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(TopologyConfigurationError, match="must be a mapping"):
            load_topology_manager_config(path)

    def test_malformed_block(self, tmp_path: Path) -> None:
        path = tmp_path / "bad-block.yaml"
        path.write_text("topologyManagerPolicyOptions:\n  - not-a-mapping\n")

        with pytest.raises(
            TopologyConfigurationError,
            match="Invalid topology manager configuration",
        ):
            load_topology_manager_config(path)

    def test_too_large(self, tmp_path: Path) -> None:
        path = tmp_path / "huge.yaml"
        path.write_text("#" * (MAX_CONFIG_SIZE_BYTES + 1))

        with pytest.raises(TopologyConfigurationError, match="too large"):
            load_topology_manager_config(path)


class TestApplyEnvOverrides:
    def test_no_overrides_is_identity(self) -> None:
        config = ModelTopologyManagerConfig(policy_options={"a": "1"})

        assert apply_env_overrides(config, {}) == config

    def test_policy_options_layered_over_file(self, config_file: Path) -> None:
        config = load_topology_manager_config(config_file)

        updated = apply_env_overrides(
            config,
            {ENV_POLICY_OPTIONS: "prefer-closest-numa-nodes=false"},
        )

        assert updated.policy_options["prefer-closest-numa-nodes"] == "false"
        assert updated.policy_options["allowed-numa-nodes"] == "0,2"
        assert config.policy_options["prefer-closest-numa-nodes"] == "true"

    def test_feature_gates_layered_over_file(self, config_file: Path) -> None:
        config = load_topology_manager_config(config_file)

        updated = apply_env_overrides(
            config,
            {ENV_FEATURE_GATES: "TopologyManagerPolicyAlphaOptions=false"},
        )

        assert updated.feature_gates["TopologyManagerPolicyAlphaOptions"] is False

    def test_gate_override_keeps_unnamed_file_gates(self) -> None:
        config = ModelTopologyManagerConfig(
            policy_options={"max-allowable-numa-nodes": "16"},
            feature_gates={"TopologyManagerPolicyBetaOptions": False},
        )

        updated = apply_env_overrides(
            config,
            {ENV_FEATURE_GATES: "TopologyManagerPolicyAlphaOptions=true"},
        )

        assert updated.feature_gates == {
            "TopologyManagerPolicyBetaOptions": False,
            "TopologyManagerPolicyAlphaOptions": True,
        }
        with pytest.raises(PolicyOptionUnavailableError, match="beta-level"):
            resolve_policy_options(updated)

    def test_malformed_policy_options(self) -> None:
        with pytest.raises(TopologyConfigurationError, match=ENV_POLICY_OPTIONS):
            apply_env_overrides(
                ModelTopologyManagerConfig(), {ENV_POLICY_OPTIONS: "no-equals-sign"}
            )

    def test_malformed_feature_gates(self) -> None:
        with pytest.raises(FeatureGateError):
            apply_env_overrides(
                ModelTopologyManagerConfig(),
                {ENV_FEATURE_GATES: "TopologyManagerPolicyAlphaOptions=maybe"},
            )


class TestResolvePolicyOptions:
    def test_build_feature_gates_uses_defaults(self) -> None:
        gates = build_feature_gates(ModelTopologyManagerConfig())

        assert gates.is_enabled(EnumTopologyFeatureGate.POLICY_BETA_OPTIONS.value)
        assert not gates.is_enabled(EnumTopologyFeatureGate.POLICY_ALPHA_OPTIONS.value)

    def test_resolves_file_options(self, config_file: Path) -> None:
        options = resolve_policy_options(load_topology_manager_config(config_file))

        assert options.prefer_closest_numa is True
        assert options.max_allowable_numa_nodes == 16
        assert options.allowed_numa_nodes == (0, 2)

    def test_configured_gate_disables_beta_option(self) -> None:
        config = ModelTopologyManagerConfig(
            policy_options={"max-allowable-numa-nodes": "16"},
            feature_gates={"TopologyManagerPolicyBetaOptions": False},
        )

        with pytest.raises(PolicyOptionUnavailableError, match="beta-level"):
            resolve_policy_options(config)


class TestLoadPolicyOptions:
    def test_without_file_uses_environment(self) -> None:
        options = load_policy_options(
            environ={ENV_POLICY_OPTIONS: "max-allowable-numa-nodes=12"}
        )

        assert options.max_allowable_numa_nodes == 12

    def test_without_file_or_environment_gives_defaults(self) -> None:
        options = load_policy_options(environ={})

        assert options.allowed_numa_nodes == ()
        assert options.prefer_closest_numa is False

    def test_environment_gate_blocks_file_option(self, config_file: Path) -> None:
        with pytest.raises(PolicyOptionUnavailableError):
            load_policy_options(
                config_file,
                environ={ENV_FEATURE_GATES: "TopologyManagerPolicyBetaOptions=false"},
            )
