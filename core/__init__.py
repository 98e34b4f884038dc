"""Core package - Domain models, output nodes and constants."""

from .models import (
    UnitId,
    UnitDate,
    UnitTitle,
    Identification,
    MarkupElement,
    Component,
    Description
)
from .nodes import (
    StructuredIdentifier,
    StructuredDate,
    Header,
    OutputNode,
    RootContainer
)
from .errors import MarkupSerializationError
from .constants import (
    INVENTORY_ID_TYPES,
    DEFAULT_COMPONENT_TAG,
    FIDELITY_FULL,
    FIDELITY_SPARSE,
    DEFAULT_OUTPUT_PARAMS
)

__all__ = [
    'UnitId',
    'UnitDate',
    'UnitTitle',
    'Identification',
    'MarkupElement',
    'Component',
    'Description',
    'StructuredIdentifier',
    'StructuredDate',
    'Header',
    'OutputNode',
    'RootContainer',
    'MarkupSerializationError',
    'INVENTORY_ID_TYPES',
    'DEFAULT_COMPONENT_TAG',
    'FIDELITY_FULL',
    'FIDELITY_SPARSE',
    'DEFAULT_OUTPUT_PARAMS'
]
