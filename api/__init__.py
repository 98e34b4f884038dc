"""API package - JSON schemas for archival descriptions."""

from .schemas import (
    UnitIdSchema,
    UnitDateSchema,
    UnitTitleSchema,
    DidSchema,
    MarkupSchema,
    ComponentSchema,
    DescriptionSchema
)

__all__ = [
    'UnitIdSchema',
    'UnitDateSchema',
    'UnitTitleSchema',
    'DidSchema',
    'MarkupSchema',
    'ComponentSchema',
    'DescriptionSchema'
]
