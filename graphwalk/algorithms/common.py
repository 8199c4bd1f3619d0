"""Argument checks shared by the traversal and shortest-path engines.

All checks run eagerly, when an engine function is called, so that usage
errors never surface from a later ``next()`` call.
"""

from __future__ import annotations

from typing import Iterable

from graphwalk.exceptions import UsageError
from graphwalk.types.base import Node


def check_callable(value: object, name: str) -> None:
    """Raise UsageError unless ``value`` is callable."""
    if not callable(value):
        raise UsageError(f"{name} must be callable, got {type(value).__name__}")


def check_start_nodes(start_nodes: Iterable[Node]) -> None:
    """Raise UsageError if any start node is None."""
    for i, node in enumerate(start_nodes):
        if node is None:
            raise UsageError(f"start node at position {i} is None")


def check_search_arguments(start_node: Node, find_successors: object) -> None:
    """Validate the ``(start_node, find_successors)`` pair of a path search."""
    if start_node is None:
        raise UsageError("start node is None")
    check_callable(find_successors, "find_successors")
