"""Weighted dependency sorter.

Orders records so that every record follows the records it depends on, then
floats negative weights toward the front and positive weights toward the
back without crossing a dependency.

Public API surface -- all consumers import from this package.
"""

from .config import (
    DEFAULT_DEPENDS_FIELD,
    DEFAULT_ID_FIELD,
    DEFAULT_WEIGHT,
    DEFAULT_WEIGHT_FIELD,
    SorterOptions,
    load_options,
)
from .depends import order_by_dependency
from .errors import ConfigError, CycleError, RecordsError, SorterError
from .models import AnonymousId, Mark, NamedId, Node, NodeId
from .normalizer import Normalizer
from .ranges import run_in_range, swap_in_range
from .records import load_records
from .sorter import Sorter, configure, sort
from .weight import order_by_weight

__version__ = "0.1.0"

__all__ = [
    "AnonymousId",
    "ConfigError",
    "CycleError",
    "DEFAULT_DEPENDS_FIELD",
    "DEFAULT_ID_FIELD",
    "DEFAULT_WEIGHT",
    "DEFAULT_WEIGHT_FIELD",
    "Mark",
    "NamedId",
    "Node",
    "NodeId",
    "Normalizer",
    "RecordsError",
    "Sorter",
    "SorterError",
    "SorterOptions",
    "configure",
    "load_options",
    "load_records",
    "order_by_dependency",
    "order_by_weight",
    "run_in_range",
    "sort",
    "swap_in_range",
]
