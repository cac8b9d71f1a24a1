"""Public ordering entry points.

``Sorter`` composes normalization, dependency ordering and weight ordering.
It holds nothing but its options, so a single instance can be reused.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from .config import SorterOptions
from .depends import order_by_dependency
from .models import Node
from .normalizer import Normalizer
from .weight import order_by_weight

logger = logging.getLogger(__name__)


class Sorter:
    """Topological sort with weight-biased placement.

    Example:
        >>> sorter = configure(weight_field="priority")
        >>> sorter.sort([{"id": "b", "depends": "a"}, {"id": "a"}])
        [{'id': 'a'}, {'id': 'b', 'depends': 'a'}]
    """

    def __init__(self, options: SorterOptions | None = None):
        self.options = options or SorterOptions()
        self._normalizer = Normalizer(self.options)

    def normalize(self, record: Any) -> Node:
        return self._normalizer.normalize(record)

    def restore(self, node: Node) -> Any:
        return self._normalizer.restore(node)

    def sort(self, records: Iterable[Any]) -> list[Any]:
        """Return a new list of ``records`` in dependency and weight order.

        The input is not modified. Raises :class:`CycleError` when the
        records' dependencies form a cycle.
        """
        nodes = [self.normalize(record) for record in records]
        logger.debug("Sorting %d records with %s", len(nodes), self.options)
        ordered = order_by_dependency(nodes)
        order_by_weight(ordered)
        return [self.restore(node) for node in ordered]

    def __repr__(self) -> str:
        return f"Sorter({self.options!r})"


def configure(
    options: SorterOptions | Mapping[str, Any] | None = None, **overrides: Any
) -> Sorter:
    """Create a :class:`Sorter`.

    ``options`` may be a :class:`SorterOptions` or a mapping using any
    spelling accepted by :meth:`SorterOptions.from_dict`. Keyword overrides
    are applied on top.
    """
    if isinstance(options, SorterOptions):
        resolved = options
    else:
        resolved = SorterOptions.from_dict(options)
    if overrides:
        resolved = resolved.merged(overrides)
    return Sorter(resolved)


def sort(
    records: Iterable[Any],
    options: SorterOptions | Mapping[str, Any] | None = None,
) -> list[Any]:
    """Sort ``records`` with a freshly configured :class:`Sorter`."""
    return configure(options).sort(records)
