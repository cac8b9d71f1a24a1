"""Exception hierarchy for dependency sorting."""

from __future__ import annotations

from typing import Any


class SorterError(Exception):
    """Base exception for dependency-sorter errors."""
    pass


class CycleError(SorterError):
    """A circular dependency chain made topological ordering impossible.

    ``node_id`` is the id of the node at which the cycle was detected. It is
    not necessarily the only node taking part in the cycle. For records
    without an id it is the record itself.
    """

    def __init__(self, node_id: Any):
        self.node_id = node_id
        super().__init__(f"Circular dependency encountered: {node_id}")


class ConfigError(SorterError):
    """Raised when a sorter options file cannot be read or parsed."""


class RecordsError(SorterError):
    """Raised when a records document does not hold a list of records."""
