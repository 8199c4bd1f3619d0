"""Library utilities for graphwalk.

This package contains integration modules for external libraries.
"""

from graphwalk.lib.nx import successors_from_networkx, weighted_successors_from_networkx

__all__ = [
    "successors_from_networkx",
    "weighted_successors_from_networkx",
]
