"""
Hierarchy Building Component.

Responsible for the depth-first walk over nested components that stamps
order, depth and parent chain on every output node.
"""

from typing import List, Optional

from core.errors import MarkupSerializationError
from core.models import Component
from core.nodes import OutputNode
from .header_resolver import HeaderResolver
from .markup_serializer import MarkupSerializer
from .order_counter import OrderCounter


class HierarchyBuilder:
    """
    Builds output node trees from nested components.

    One builder serves one conversion run: it shares the run's order
    counter across the whole walk. Every nesting depth is handled by
    the same method, so there is no depth limit.
    """

    def __init__(
        self,
        counter: OrderCounter,
        sparse: bool = False,
        header_resolver: Optional[HeaderResolver] = None
    ):
        """
        Initialize hierarchy builder.

        Args:
            counter: Order counter of the current run
            sparse: Produce sparse nodes (navigation fields only)
            header_resolver: Resolver to use; created for the mode if omitted
        """
        self.counter = counter
        self.sparse = sparse
        self.header_resolver = header_resolver or HeaderResolver(sparse=sparse)

    def build(self, component: Component, parent_chain: Optional[List[str]] = None) -> OutputNode:
        """
        Convert a component and its whole subtree.

        The tree is walked with an explicit stack, so nesting depth is not
        bounded by the interpreter's recursion limit. A node's order is
        drawn when it is popped, before any descendant is pushed, which
        yields pre-order numbering.

        Args:
            component: Component to convert
            parent_chain: Inventory numbers of the ancestors, root first

        Returns:
            OutputNode with all descendants attached

        Raises:
            MarkupSerializationError: If descriptive markup anywhere in the
                subtree cannot be serialized
        """
        roots = []
        stack = [(component, list(parent_chain or []), roots)]

        while stack:
            source, chain, siblings = stack.pop()
            node = self._build_node(source, chain)
            siblings.append(node)

            child_chain = chain + [node.header.inventory_number]
            for child in reversed(source.children):
                stack.append((child, list(child_chain), node.children))

        return roots[0]

    def _build_node(self, component: Component, parent_chain: List[str]) -> OutputNode:
        """Create one node without its children."""
        node = OutputNode(
            order=self.counter.next(),
            depth=len(parent_chain) + 1,
            tag="" if self.sparse else component.tag,
            level_type=component.level,
            level_subtype=component.other_level,
            parent_chain=parent_chain,
        )

        node.header = self.header_resolver.resolve(component.identification)

        if component.scope_content is not None and not self.sparse:
            node.descriptive_markup = self._serialize_markup(component, node)

        return node

    def _serialize_markup(self, component: Component, node: OutputNode) -> str:
        try:
            return MarkupSerializer.serialize(component.scope_content)
        except (TypeError, ValueError) as e:
            raise MarkupSerializationError(
                f"Unable to serialize scope content: {e}",
                tag=component.tag,
                order=node.order,
                parent_chain=node.parent_chain,
                sparse=self.sparse
            ) from e
