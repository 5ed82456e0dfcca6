# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility modules for the topology manager.

    - util_text_parsing: Strict boolean, integer and key=value list parsing
"""

from omnibase_topology.utils.util_text_parsing import (
    FALSE_VALUES,
    TRUE_VALUES,
    parse_bool_text,
    parse_int_text,
    parse_key_value_list,
)

__all__: list[str] = [
    "FALSE_VALUES",
    "TRUE_VALUES",
    "parse_bool_text",
    "parse_int_text",
    "parse_key_value_list",
]
