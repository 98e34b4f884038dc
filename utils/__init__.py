"""Utilities package - Helper functions for walking node trees."""

from .tree_utils import (
    iter_nodes,
    flatten_nodes,
    collect_orders,
    calculate_tree_depth,
    find_node_by_order
)

__all__ = [
    'iter_nodes',
    'flatten_nodes',
    'collect_orders',
    'calculate_tree_depth',
    'find_node_by_order'
]
