"""Index-range traversal and adjacent-swap primitives.

Both helpers work forward or backward depending on whether ``start`` is
smaller or larger than ``stop``. They are shared by the negative and positive
passes of :func:`dependency_sorter.weight.order_by_weight`.
"""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Sequence, TypeVar

T = TypeVar("T")


def run_in_range(
    seq: Sequence[T],
    start: int,
    stop: int,
    fn: Callable[[T, int, Sequence[T]], Any],
    default: Any = None,
) -> Any:
    """Call ``fn(item, index, seq)`` for each index from ``start`` to ``stop``.

    ``start`` is inclusive and ``stop`` exclusive. The first non-``None``
    value returned by ``fn`` stops the loop and is returned; ``default`` is
    returned when the range is exhausted. An empty range (``start == stop``)
    returns ``None`` without calling ``fn``.

    The item is read from ``seq`` at call time, so ``fn`` observes any
    mutation made by earlier calls.
    """
    if start == stop:
        return None
    step = 1 if start < stop else -1
    for index in range(start, stop, step):
        result = fn(seq[index], index, seq)
        if result is not None:
            return result
    return default


def swap_in_range(
    seq: MutableSequence[T],
    start: int,
    stop: int,
    predicate: Callable[[T, T], bool],
) -> int:
    """Move ``seq[start]`` toward ``stop`` one adjacent swap at a time.

    Each step calls ``predicate(item, neighbour)`` where ``neighbour`` is the
    element one position further toward ``stop``; the swap happens only while
    it returns true. ``stop`` is inclusive. Returns the index the element
    ended up at.
    """
    if start == stop:
        return start
    step = 1 if start < stop else -1

    def _swap(item: T, index: int, _seq: Sequence[T]) -> int | None:
        target = index + step
        neighbour = seq[target]
        if not predicate(item, neighbour):
            return index
        seq[target] = item
        seq[index] = neighbour
        if target == stop:
            return target
        return None

    return run_in_range(seq, start, stop, _swap, start)
