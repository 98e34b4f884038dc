"""
FindingAid - Archival Description Node Trees.

Converts nested EAD components into order- and depth-stamped node trees
for search indexing and tree navigation.
"""

from .entry_points import build_node_list, build_sparse_node_list, build

__all__ = [
    'build_node_list',
    'build_sparse_node_list',
    'build',
]
