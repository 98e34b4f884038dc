"""
Tree utilities for converted node lists.

Helpers for walking and inspecting output node trees.
"""
from typing import Iterator, List, Optional

from core.nodes import OutputNode, RootContainer


def iter_nodes(roots: List[OutputNode]) -> Iterator[OutputNode]:
    """
    Walk nodes in pre-order (parent first, siblings left to right).

    Args:
        roots: Top-level nodes

    Yields:
        Every node of the forest
    """
    stack = list(reversed(roots))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def flatten_nodes(container: RootContainer) -> List[OutputNode]:
    """Return all nodes of a container as a pre-order list."""
    return list(iter_nodes(container.roots))


def collect_orders(container: RootContainer) -> List[int]:
    """Return the order values of all nodes in pre-order."""
    return [node.order for node in iter_nodes(container.roots)]


def calculate_tree_depth(roots: List[OutputNode]) -> int:
    """
    Calculate the maximum depth of a forest.

    Args:
        roots: Top-level nodes

    Returns:
        Largest node depth, 0 for an empty forest
    """
    return max((node.depth for node in iter_nodes(roots)), default=0)


def find_node_by_order(container: RootContainer, order: int) -> Optional[OutputNode]:
    """
    Find a node by its order value.

    Orders increase in pre-order, so subtrees whose next sibling starts at
    or before the wanted order are skipped without descending.

    Args:
        container: Converted container
        order: Order value to look up

    Returns:
        Matching node or None
    """
    nodes = container.roots
    while nodes:
        candidate = None
        for node in nodes:
            if node.order > order:
                break
            candidate = node
        if candidate is None:
            return None
        if candidate.order == order:
            return candidate
        nodes = candidate.children
    return None
