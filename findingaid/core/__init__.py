"""
Core conversion components for finding-aid node trees.

Each component handles one step of the conversion; RootAssembler wires
them together for a full run.
"""

from .order_counter import OrderCounter
from .header_resolver import HeaderResolver
from .markup_serializer import MarkupSerializer
from .hierarchy_builder import HierarchyBuilder
from .root_assembler import RootAssembler

__all__ = [
    'OrderCounter',
    'HeaderResolver',
    'MarkupSerializer',
    'HierarchyBuilder',
    'RootAssembler',
]
