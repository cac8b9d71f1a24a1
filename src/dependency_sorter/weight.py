"""Weight-biased reordering bounded by dependencies.

Negative weights float toward the front and positive weights toward the back
using two bidirectional insertion passes. A dependency edge is a hard stop:
a node never moves in front of something it depends on, nor behind something
that depends on it.
"""

from __future__ import annotations

from typing import MutableSequence

from .models import Node
from .ranges import run_in_range, swap_in_range


def order_by_weight(nodes: MutableSequence[Node]) -> MutableSequence[Node]:
    """Reorder topologically sorted ``nodes`` in place by weight.

    Returns the same sequence. The first element never starts a move and the
    last element never starts a positive move.
    """
    if len(nodes) < 2:
        return nodes

    def _float_front(node: Node, index: int, seq: MutableSequence[Node]) -> None:
        if node.weight < 0:
            # Toward the front until a dependency.
            pos = swap_in_range(
                seq, index, 0, lambda moving, ahead: not moving.depends_on(ahead)
            )
            # Back past anything more negative.
            swap_in_range(
                seq, pos, index, lambda moving, behind: moving.weight > behind.weight
            )

    def _float_back(node: Node, index: int, seq: MutableSequence[Node]) -> None:
        if node.weight > 0:
            # Toward the back until a dependent.
            pos = swap_in_range(
                seq,
                index,
                len(seq) - 1,
                lambda moving, behind: not behind.depends_on(moving),
            )
            # Forward past anything more positive.
            swap_in_range(
                seq, pos, index, lambda moving, ahead: moving.weight < ahead.weight
            )

    run_in_range(nodes, 1, len(nodes), _float_front)
    run_in_range(nodes, len(nodes) - 2, 0, _float_back)
    return nodes
