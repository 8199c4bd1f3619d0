"""Type aliases and enums shared by the traversal and shortest-path engines."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Hashable, Iterable, Mapping, Optional, Tuple, Union

from graphwalk.exceptions import UsageError

#: Caller-defined graph vertex. Must support stable equality and hashing.
Node = Hashable

#: Non-negative edge length or cumulative path distance.
Distance = Union[int, float]

#: Maps a node to its successors. ``None`` or an empty iterable means a leaf.
#: The iterable may be infinite; it is consumed lazily.
SuccessorFunction = Callable[[Node], Optional[Iterable[Node]]]

#: Maps a node to ``(neighbor, distance)`` pairs, or to a ``{neighbor: distance}``
#: mapping. ``None`` means no successors.
WeightedSuccessorFunction = Callable[
    [Node], Optional[Union[Iterable[Tuple[Node, Distance]], Mapping[Node, Distance]]]
]

#: Test-and-mark predicate. Returns True the first time a node should be
#: visited, recording the visit as a side effect, and False afterwards.
Tracker = Callable[[Node], bool]


class TraversalOrder(IntEnum):
    """Node emission orders supported by :class:`graphwalk.Walker`."""

    #: Depth first, a node before its descendants.
    PRE_ORDER = 1
    #: Depth first, a node after all of its descendants.
    POST_ORDER = 2
    #: Level by level, siblings before grandchildren.
    BREADTH_FIRST = 3

    @classmethod
    def from_string(cls, value: str) -> "TraversalOrder":
        """Parse a string into a TraversalOrder enum value.

        Args:
            value: Case-insensitive name (e.g., "pre_order", "BREADTH_FIRST").
                Dashes are accepted in place of underscores.

        Returns:
            The corresponding TraversalOrder member.

        Raises:
            UsageError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.strip().upper().replace("-", "_")]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise UsageError(
                f"Invalid traversal order '{value}'. Valid values are: {valid}"
            ) from None

    @classmethod
    def coerce(cls, value: Union["TraversalOrder", int, str]) -> "TraversalOrder":
        """Return ``value`` as a TraversalOrder.

        Accepts a member, its integer value, or a name understood by
        :meth:`from_string`.

        Raises:
            UsageError: If ``value`` does not name a member.
        """
        if isinstance(value, str):
            return cls.from_string(value)
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(e.name for e in cls)
            raise UsageError(
                f"Invalid traversal order {value!r}. Valid values are: {valid}"
            ) from None
