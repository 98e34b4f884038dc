"""
Root Assembly Component.

Responsible for building the top-level container of a converted
description and reporting the number of nodes produced.
"""

import logging
from typing import Iterable, Tuple

from core.constants import FIDELITY_FULL, FIDELITY_SPARSE, INVENTORY_ID_TYPES
from core.errors import MarkupSerializationError
from core.models import Description
from core.nodes import RootContainer
from .header_resolver import HeaderResolver
from .hierarchy_builder import HierarchyBuilder
from .order_counter import OrderCounter

logger = logging.getLogger(__name__)


class RootAssembler:
    """
    Assembles the root container for one description.

    Each call to assemble() allocates its own order counter, so a single
    assembler may be reused and conversions never share state.
    """

    def __init__(self, sparse: bool = False, inventory_id_types: Iterable[str] = INVENTORY_ID_TYPES):
        """
        Initialize root assembler.

        Args:
            sparse: Produce sparse output
            inventory_id_types: Unit identifier types that set the inventory number
        """
        self.sparse = sparse
        self.inventory_id_types = tuple(inventory_id_types)

    @property
    def mode(self) -> str:
        """Name of the fidelity mode."""
        return FIDELITY_SPARSE if self.sparse else FIDELITY_FULL

    def assemble(self, description: Description) -> Tuple[RootContainer, int]:
        """
        Convert a description into a root container.

        Args:
            description: Parsed top-level description

        Returns:
            Tuple of (container, total_node_count)

        Raises:
            MarkupSerializationError: If any component fails to serialize;
                no partial container is returned
        """
        counter = OrderCounter()
        builder = HierarchyBuilder(
            counter,
            sparse=self.sparse,
            header_resolver=HeaderResolver(self.sparse, self.inventory_id_types)
        )

        container = RootContainer(
            level_type=description.level_type,
            root_labels=list(description.labels)
        )

        try:
            for component in description.components:
                logger.debug(f"Building root component {component.tag!r} ({self.mode})")
                container.roots.append(builder.build(component))
        except MarkupSerializationError as e:
            logger.error(f"Conversion aborted in {self.mode} mode: {e}")
            raise

        container.total_node_count = counter.value
        logger.info(
            f"Converted {len(container.roots)} root components into "
            f"{container.total_node_count} nodes ({self.mode})"
        )

        return container, container.total_node_count
