"""
Entry points for finding-aid conversion.

Two fidelities are offered: the full lossless node list and the sparse
node list used by lightweight tree navigation views.
"""

from typing import Iterable, Tuple

from core.constants import INVENTORY_ID_TYPES
from core.models import Description
from core.nodes import RootContainer
from .core import RootAssembler


def build_node_list(
    description: Description,
    inventory_id_types: Iterable[str] = INVENTORY_ID_TYPES
) -> Tuple[RootContainer, int]:
    """
    Convert a description into the full node list.

    Args:
        description: Parsed top-level description
        inventory_id_types: Unit identifier types that set the inventory number

    Returns:
        Tuple of (container, total_node_count)
    """
    return RootAssembler(sparse=False, inventory_id_types=inventory_id_types).assemble(description)


def build_sparse_node_list(
    description: Description,
    inventory_id_types: Iterable[str] = INVENTORY_ID_TYPES
) -> Tuple[RootContainer, int]:
    """
    Convert a description into the sparse node list.

    Sparse nodes carry no tag, identifiers, physical description or
    descriptive markup; dates nested in titles become labels.

    Args:
        description: Parsed top-level description
        inventory_id_types: Unit identifier types that set the inventory number

    Returns:
        Tuple of (container, total_node_count)
    """
    return RootAssembler(sparse=True, inventory_id_types=inventory_id_types).assemble(description)


def build(description: Description, sparse: bool = False, **kwargs) -> Tuple[RootContainer, int]:
    """Dispatch to the full or sparse conversion."""
    if sparse:
        return build_sparse_node_list(description, **kwargs)
    return build_node_list(description, **kwargs)
