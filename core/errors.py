"""
Errors raised during finding-aid conversion.
"""
from typing import List, Optional


class MarkupSerializationError(ValueError):
    """
    Descriptive rich text of a component could not be serialized.

    Aborts the whole conversion. Carries enough context to locate the
    failing component in the source tree.
    """

    def __init__(
        self,
        message: str,
        tag: str = "",
        order: int = 0,
        parent_chain: Optional[List[str]] = None,
        sparse: bool = False
    ):
        self.tag = tag
        self.order = order
        self.parent_chain = list(parent_chain or [])
        self.sparse = sparse
        super().__init__(message)

    def __str__(self) -> str:
        location = '/'.join(self.parent_chain + [self.tag])
        return f"{self.args[0]} (component {location!r}, order {self.order})"
