"""Depth-first topological ordering of nodes.

Every node is placed before all nodes that depend on it. The result is built
by prepending finished nodes, so nodes visited later as traversal roots land
in front of nodes visited earlier.
"""

from __future__ import annotations

from collections import deque
from typing import Iterator, Sequence

from .errors import CycleError
from .models import Mark, Node


def order_by_dependency(nodes: Sequence[Node]) -> list[Node]:
    """Return a new list of ``nodes`` in dependency order.

    The input sequence is left untouched but each node's ``mark`` is updated.
    Raises :class:`CycleError` when a node is reached again while it is still
    being visited.
    """
    nodes = list(nodes)
    result: deque[Node] = deque()
    for node in nodes:
        if node.mark is Mark.UNVISITED:
            _visit(node, nodes, result)
    return list(result)


def _enter(node: Node) -> None:
    if node.mark is Mark.IN_PROGRESS:
        raise CycleError(node.id.value)
    node.mark = Mark.IN_PROGRESS


def _visit(root: Node, nodes: list[Node], result: deque[Node]) -> None:
    """Visit ``root`` and all its dependents, depth first.

    Uses an explicit stack of (node, remaining candidates) frames so deep
    chains are not limited by the interpreter recursion limit.
    """
    _enter(root)
    stack: list[tuple[Node, Iterator[Node]]] = [(root, iter(nodes))]
    while stack:
        node, candidates = stack[-1]
        for candidate in candidates:
            if not candidate.depends_on(node):
                continue
            if candidate.mark is Mark.DONE:
                continue
            _enter(candidate)
            stack.append((candidate, iter(nodes)))
            break
        else:
            node.mark = Mark.DONE
            result.appendleft(node)
            stack.pop()
