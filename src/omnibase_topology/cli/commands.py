# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
ONEX Topology Manager CLI Commands.

Validates topology manager policy options before a node agent is
restarted with them, and lists the options this build recognizes.

Usage:
    ```bash
    # Validate the options in a node-agent config file
    onex-topology validate --config /var/lib/kubelet/config.yaml

    # Validate ad-hoc options with an alpha gate enabled
    onex-topology validate --option allowed-numa-nodes=0,1 \
        --feature-gates TopologyManagerPolicyAlphaOptions=true

    # List recognized options and whether they are available
    onex-topology options
    ```
"""

from __future__ import annotations

import logging
import os

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from omnibase_topology.errors import TopologyRuntimeError
from omnibase_topology.models import (
    ModelTopologyManagerConfig,
    ModelTopologyPolicyOptions,
)
from omnibase_topology.runtime import (
    FeatureGateSet,
    TopologyPolicyOptionsParser,
    apply_env_overrides,
    build_feature_gates,
    create_default_registry,
    load_topology_manager_config,
)

console = Console()


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """ONEX Topology Manager CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _parse_option_argument(
    ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> dict[str, str]:
    """Split ``KEY=VALUE`` arguments on the first ``=`` only."""
    options: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}")
        options[key.strip()] = value
    return options


@cli.command("validate")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Node-agent configuration file (YAML)",
)
@click.option(
    "--option",
    "options",
    multiple=True,
    callback=_parse_option_argument,
    help="Policy option KEY=VALUE; overrides the config file (repeatable)",
)
@click.option(
    "--feature-gates",
    default=None,
    help="Feature gates in Name=bool,Name=bool form; overrides the config file",
)
def validate_cmd(
    config_path: str | None,
    options: dict[str, str],
    feature_gates: str | None,
) -> None:
    """Validate topology manager policy options."""
    try:
        config = (
            load_topology_manager_config(config_path)
            if config_path is not None
            else ModelTopologyManagerConfig()
        )
        config = apply_env_overrides(config, os.environ)
        gates = build_feature_gates(config)
        if feature_gates:
            gates = gates.with_overrides(
                FeatureGateSet.from_flag_string(feature_gates).overrides
            )
        raw_options = {**config.policy_options, **options}

        parser = TopologyPolicyOptionsParser(create_default_registry())
        result = parser.parse(raw_options, gates)
    except TopologyRuntimeError as e:
        console.print(
            f"[bold red]Invalid topology manager configuration:[/bold red] "
            f"{escape(e.message)}",
            soft_wrap=True,
        )
        raise SystemExit(1) from e

    _print_options(result)
    console.print("[bold green]Topology manager policy options are valid[/bold green]")
    raise SystemExit(0)


@cli.command("options")
@click.option(
    "--feature-gates",
    default="",
    help="Feature gates in Name=bool,Name=bool form",
)
def options_cmd(feature_gates: str) -> None:
    """List recognized policy options and their availability."""
    try:
        gates = FeatureGateSet.from_flag_string(feature_gates)
    except TopologyRuntimeError as e:
        console.print(f"[bold red]{escape(e.message)}[/bold red]", soft_wrap=True)
        raise SystemExit(1) from e

    registry = create_default_registry()
    table = Table(title="Topology Manager Policy Options")
    table.add_column("Option", style="cyan")
    table.add_column("Maturity")
    table.add_column("Feature Gate")
    table.add_column("Available")

    for name in registry.list_options():
        maturity = registry.get_maturity(name)
        if maturity is None:
            continue
        gate = maturity.required_feature_gate
        available = registry.is_available(name, gates)
        table.add_row(
            name,
            maturity.value,
            gate.value if gate is not None else "-",
            "[green]yes[/green]" if available else "[red]no[/red]",
        )

    console.print(table)


def _print_options(options: ModelTopologyPolicyOptions) -> None:
    """Print resolved policy options as a table."""
    table = Table(title="Resolved Policy Options")
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("prefer_closest_numa", str(options.prefer_closest_numa).lower())
    table.add_row("max_allowable_numa_nodes", str(options.max_allowable_numa_nodes))
    table.add_row(
        "allowed_numa_nodes",
        ",".join(str(node_id) for node_id in options.allowed_numa_nodes)
        or "(unrestricted)",
    )
    for name, value in options.extension_options:
        table.add_row(name, escape(value))

    console.print(table)


if __name__ == "__main__":
    cli()
