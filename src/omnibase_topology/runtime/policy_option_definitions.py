# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Built-in policy option definitions and their value parsers.

Each built-in option is described by one PolicyOptionDefinition: its
name, release maturity tier, the ModelTopologyPolicyOptions field it
populates and the function that turns the raw string into that field's
value. Value parsers raise a PolicyOptionError subclass naming the option.

Options registered at runtime without a definition here are extension
options: the parser accepts their value verbatim once authorized.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from omnibase_topology.enums import EnumOptionMaturity, EnumTopologyPolicyOption
from omnibase_topology.errors import (
    DuplicateNUMANodeIDError,
    EmptyOptionValueError,
    InvalidBooleanValueError,
    InvalidIntegerValueError,
    InvalidNUMANodeIDError,
    ModelTopologyErrorContext,
    NegativeNUMANodeIDError,
)
from omnibase_topology.utils import parse_bool_text, parse_int_text

OptionValue = bool | int | tuple[int, ...]
OptionValueParser = Callable[
    [str, str, Optional[ModelTopologyErrorContext]], OptionValue
]


def parse_bool_option(
    option_name: str,
    value: str,
    context: Optional[ModelTopologyErrorContext] = None,
) -> bool:
    """Parse a boolean option value.

    Raises:
        InvalidBooleanValueError: If ``value`` is not a canonical boolean.
    """
    try:
        return parse_bool_text(value)
    except ValueError as e:
        raise InvalidBooleanValueError(option_name, value, context=context) from e


def parse_int_option(
    option_name: str,
    value: str,
    context: Optional[ModelTopologyErrorContext] = None,
) -> int:
    """Parse a base-10 integer option value. No range check is applied.

    Raises:
        InvalidIntegerValueError: If ``value`` is not a base-10 integer.
    """
    try:
        return parse_int_text(value)
    except ValueError as e:
        raise InvalidIntegerValueError(option_name, value, context=context) from e


def parse_numa_node_list(
    option_name: str,
    value: str,
    context: Optional[ModelTopologyErrorContext] = None,
) -> tuple[int, ...]:
    """Parse a comma-separated NUMA node allow-list.

    Tokens are whitespace-trimmed and checked left to right: each must be
    a base-10 integer, non-negative, and not seen before. The result keeps
    the configured order.

    Args:
        option_name: Option being parsed, used in error messages.
        value: Raw text such as ``"0,2,4,6"``.
        context: Optional error context.

    Returns:
        Node IDs in input order.

    Raises:
        EmptyOptionValueError: If ``value`` is empty after trimming.
        InvalidNUMANodeIDError: If a token is not an integer.
        NegativeNUMANodeIDError: If a node ID is below zero.
        DuplicateNUMANodeIDError: If a node ID repeats.

    Example:
        >>> parse_numa_node_list("allowed-numa-nodes", "2, 0")
        (2, 0)
    """
    if not value.strip():
        raise EmptyOptionValueError(option_name, context=context)

    node_ids: list[int] = []
    seen: set[int] = set()
    for raw_token in value.split(","):
        token = raw_token.strip()
        try:
            node_id = parse_int_text(token)
        except ValueError as e:
            raise InvalidNUMANodeIDError(option_name, token, context=context) from e
        if node_id < 0:
            raise NegativeNUMANodeIDError(option_name, node_id, context=context)
        if node_id in seen:
            raise DuplicateNUMANodeIDError(option_name, node_id, context=context)
        seen.add(node_id)
        node_ids.append(node_id)
    return tuple(node_ids)


@dataclass(frozen=True)
class PolicyOptionDefinition:
    """A built-in option: tier, target field and value parser.

    Attributes:
        option: Option name.
        maturity: Tier the option ships at.
        field_name: ModelTopologyPolicyOptions field populated by the parser.
        parser: Converts the raw string to the field value.
    """

    option: EnumTopologyPolicyOption
    maturity: EnumOptionMaturity
    field_name: str
    parser: OptionValueParser


BUILTIN_OPTION_DEFINITIONS: dict[EnumTopologyPolicyOption, PolicyOptionDefinition] = {
    definition.option: definition
    for definition in (
        PolicyOptionDefinition(
            option=EnumTopologyPolicyOption.PREFER_CLOSEST_NUMA_NODES,
            maturity=EnumOptionMaturity.STABLE,
            field_name="prefer_closest_numa",
            parser=parse_bool_option,
        ),
        PolicyOptionDefinition(
            option=EnumTopologyPolicyOption.MAX_ALLOWABLE_NUMA_NODES,
            maturity=EnumOptionMaturity.BETA,
            field_name="max_allowable_numa_nodes",
            parser=parse_int_option,
        ),
        PolicyOptionDefinition(
            option=EnumTopologyPolicyOption.ALLOWED_NUMA_NODES,
            maturity=EnumOptionMaturity.STABLE,
            field_name="allowed_numa_nodes",
            parser=parse_numa_node_list,
        ),
    )
}


def get_option_definition(option_name: str) -> Optional[PolicyOptionDefinition]:
    """Return the built-in definition for ``option_name``, if any."""
    try:
        option = EnumTopologyPolicyOption(option_name)
    except ValueError:
        return None
    return BUILTIN_OPTION_DEFINITIONS.get(option)


__all__ = [
    "BUILTIN_OPTION_DEFINITIONS",
    "OptionValue",
    "OptionValueParser",
    "PolicyOptionDefinition",
    "get_option_definition",
    "parse_bool_option",
    "parse_int_option",
    "parse_numa_node_list",
]
