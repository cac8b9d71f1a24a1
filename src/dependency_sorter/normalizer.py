"""Conversion between caller records and working nodes."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .config import SorterOptions, is_weight
from .models import AnonymousId, NamedId, Node, NodeId

_SEQUENCE_TYPES = (list, tuple, set, frozenset)


def read_field(record: Any, name: str) -> Any:
    """Read a field by key from mappings and by attribute from anything else."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


class Normalizer:
    """Wraps records into :class:`Node` objects and unwraps them again.

    Normalization never fails: a missing id falls back to the record's own
    identity, a missing or non-numeric weight to the configured default, and
    a missing depends field to no dependencies.
    """

    def __init__(self, options: SorterOptions | None = None):
        self.options = options or SorterOptions()

    def normalize(self, record: Any) -> Node:
        opts = self.options
        return Node(
            id=self._node_id(record, read_field(record, opts.id_field)),
            weight=self._weight(read_field(record, opts.weight_field)),
            depends=self._depends(read_field(record, opts.depends_field)),
            source=record,
        )

    def restore(self, node: Node) -> Any:
        return node.source

    @staticmethod
    def _node_id(record: Any, raw: Any) -> NodeId:
        if raw is None:
            return AnonymousId(record)
        return NamedId(raw)

    def _weight(self, raw: Any) -> float:
        if is_weight(raw):
            return raw
        return self.options.default_weight

    @staticmethod
    def _depends(raw: Any) -> tuple[Any, ...]:
        if not raw:
            return ()
        if isinstance(raw, _SEQUENCE_TYPES):
            return tuple(raw)
        return (raw,)
