# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for the feature gate oracle.

The topology policy options parser never owns gate state. Callers pass any
object exposing ``is_enabled(gate_name)``; the node agent passes its
process-wide gate set, tests pass a static one.

Example:
    >>> class AllGatesOn:
    ...     def is_enabled(self, gate_name: str) -> bool:
    ...         return True
    ...
    >>> parser.parse({"max-allowable-numa-nodes": "16"}, AllGatesOn())
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolFeatureGate(Protocol):
    """Read-only boolean oracle keyed by feature gate name."""

    def is_enabled(self, gate_name: str) -> bool:
        """Return True if the named gate is currently enabled.

        Args:
            gate_name: Gate name, e.g. ``TopologyManagerPolicyBetaOptions``.

        Returns:
            Current state of the gate. Unknown gates report False.
        """
        ...


__all__ = ["ProtocolFeatureGate"]
