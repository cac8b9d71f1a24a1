"""Working node representation used while ordering records.

Defines the traversal ``Mark`` enum, the two identity variants (``NamedId``
for records carrying an id value and ``AnonymousId`` for records without one)
and the mutable ``Node`` wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Union


class Mark(StrEnum):
    """Depth-first traversal state of a node."""

    UNVISITED = "unvisited"
    IN_PROGRESS = "in_progress"
    DONE = "done"


@dataclass(frozen=True)
class NamedId:
    """Identity taken from the record's id field, matched by value."""

    value: Any

    def matches(self, ref: Any) -> bool:
        # True and 1 are different ids.
        if isinstance(self.value, bool) != isinstance(ref, bool):
            return False
        return self.value == ref


@dataclass(frozen=True, eq=False)
class AnonymousId:
    """Identity of a record without an id, matched by reference only."""

    record: Any

    @property
    def value(self) -> Any:
        return self.record

    def matches(self, ref: Any) -> bool:
        return ref is self.record

    def __eq__(self, other: object) -> bool:
        return isinstance(other, AnonymousId) and other.record is self.record

    def __hash__(self) -> int:
        return id(self.record)


NodeId = Union[NamedId, AnonymousId]


@dataclass(eq=False)
class Node:
    """A normalized record.

    Nodes compare by identity; two records with equal fields are still two
    distinct nodes.
    """

    id: NodeId
    weight: float
    depends: tuple[Any, ...] = ()
    source: Any = None
    mark: Mark = field(default=Mark.UNVISITED)

    def depends_on(self, other: Node) -> bool:
        """True when one of this node's depends entries names ``other``."""
        return any(other.id.matches(ref) for ref in self.depends)

    def __repr__(self) -> str:
        return (
            f"Node(id={self.id.value!r}, weight={self.weight!r}, "
            f"depends={self.depends!r}, mark={self.mark.value})"
        )
