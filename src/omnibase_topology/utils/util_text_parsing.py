# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Strict textual parsing helpers for node-agent style configuration values.

The node agent's configuration grammar is narrower than Python's built-in
conversions: ``int()`` accepts underscores and surrounding whitespace,
``bool()`` accepts anything. These helpers accept exactly the forms the
node agent accepts and raise ValueError for everything else, so callers
can wrap the failure in a domain error.
"""

from __future__ import annotations

import re

# Accepted boolean spellings, matching the node agent's flag parser.
TRUE_VALUES: frozenset[str] = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_VALUES: frozenset[str] = frozenset({"0", "f", "F", "FALSE", "false", "False"})

# Optional sign followed by ASCII digits only.
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_bool_text(value: str) -> bool:
    """Parse a canonical textual boolean.

    Args:
        value: Text such as ``"true"``, ``"False"``, ``"1"`` or ``"f"``.

    Returns:
        The parsed boolean.

    Raises:
        ValueError: If ``value`` is not one of the accepted spellings.

    Example:
        >>> parse_bool_text("True")
        True
        >>> parse_bool_text("yes")  # Raises ValueError
    """
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean {value!r}")


def parse_int_text(value: str) -> int:
    """Parse a base-10 integer with an optional sign.

    Raises:
        ValueError: If ``value`` contains anything besides a sign and ASCII digits.
    """
    if not _INTEGER_PATTERN.fullmatch(value):
        raise ValueError(f"invalid integer {value!r}")
    return int(value, 10)


def parse_key_value_list(spec: str) -> dict[str, str]:
    """Parse ``key=value,key=value`` into a dict.

    Whitespace around keys and values is trimmed and empty entries are
    skipped. A repeated key keeps its last value.

    Raises:
        ValueError: If an entry has no ``=`` or an empty key.

    Example:
        >>> parse_key_value_list("a=1, b=2")
        {'a': '1', 'b': '2'}
    """
    result: dict[str, str] = {}
    for entry in spec.split(","):
        entry = entry.strip()
        if not entry:
            continue
        key, sep, value = entry.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"malformed entry {entry!r}, expected key=value")
        result[key] = value.strip()
    return result


__all__: list[str] = [
    "FALSE_VALUES",
    "TRUE_VALUES",
    "parse_bool_text",
    "parse_int_text",
    "parse_key_value_list",
]
