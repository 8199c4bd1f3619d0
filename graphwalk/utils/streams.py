"""Lazy sequence primitives used by the shortest-path engines.

Both helpers are generators: they do no work until iterated and compute
exactly one element per ``next()`` call.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Iterable, Iterator, Optional, Sized, TypeVar

T = TypeVar("T")
C = TypeVar("C", bound=Sized)


def generate(seed: T, expand: Callable[[T], Optional[Iterable[T]]]) -> Iterator[T]:
    """Yield ``seed`` and everything reachable through ``expand``, in FIFO order.

    Each yielded element is expanded only when the consumer asks for the next
    element, and each expansion is drawn from one element at a time. An
    expansion of ``None`` contributes nothing.

    Args:
        seed: First element of the sequence.
        expand: Function returning the elements derived from a given element.

    Yields:
        ``seed``, then the expansions of every yielded element, breadth first.
    """
    pending: Deque[Iterator[T]] = deque([iter((seed,))])
    while pending:
        try:
            item = next(pending[0])
        except StopIteration:
            pending.popleft()
            continue
        yield item
        expansion = expand(item)
        if expansion is not None:
            pending.append(iter(expansion))


def while_not_empty(container: C, step: Callable[[C], T]) -> Iterator[T]:
    """Yield ``step(container)`` for as long as ``container`` is non-empty.

    Emptiness is re-checked before every pull, so ``step`` may both shrink and
    grow the container.
    """
    while len(container):
        yield step(container)
