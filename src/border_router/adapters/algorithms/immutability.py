"""
Immutability utilities for adjacency protection.

Provides functions to freeze the shared adjacency structure so that no
request can mutate the graph other requests are reading.
"""

from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Set


def freeze_adjacency(
    adjacency: Mapping[str, Iterable[str]],
) -> Mapping[str, FrozenSet[str]]:
    """
    Return a read-only view of an adjacency mapping.

    Every neighbor collection is converted to a frozenset and the outer
    dict is wrapped in a MappingProxyType. The input is copied, so later
    changes to it do not leak into the frozen result.

    Args:
        adjacency: Mapping from node to its neighbors.

    Returns:
        Read-only mapping from node to frozenset of neighbors.

    Example:
        >>> frozen = freeze_adjacency({"PRT": {"ESP"}})
        >>> frozen["PRT"]
        frozenset({'ESP'})
        >>> frozen["FRA"] = frozenset()  # Raises TypeError
    """
    return MappingProxyType(
        {node: frozenset(neighbors) for node, neighbors in adjacency.items()}
    )


def thaw_adjacency(adjacency: Mapping[str, Iterable[str]]) -> Dict[str, Set[str]]:
    """
    Create a mutable copy of an adjacency mapping.

    Use this ONLY to derive a new graph (e.g., in tests or tooling).
    The shared graph itself is never modified.

    Args:
        adjacency: Mapping to copy.

    Returns:
        New dict of mutable sets.
    """
    return {node: set(neighbors) for node, neighbors in adjacency.items()}


def is_immutable(adjacency: Mapping[str, Iterable[str]]) -> bool:
    """
    Check if an adjacency mapping is fully read-only.

    Args:
        adjacency: Mapping to check.

    Returns:
        True if the outer mapping is a proxy and all values are frozensets.
    """
    if not isinstance(adjacency, MappingProxyType):
        return False
    return all(isinstance(neighbors, frozenset) for neighbors in adjacency.values())
