"""
Output node models for the normalized archival tree.

Nodes are built once per conversion and handed to the indexing layer.
"""
from dataclasses import dataclass, field
from typing import List


@dataclass
class StructuredIdentifier:
    """Projection of one unit identifier."""
    id: str = ""
    type_id: str = ""
    type: str = ""
    audience: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'id': self.id,
            'type_id': self.type_id,
            'type': self.type,
            'audience': self.audience
        }


@dataclass
class StructuredDate:
    """Projection of one unit date."""
    calendar: str = ""
    era: str = ""
    normalized_value: str = ""
    label: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'calendar': self.calendar,
            'era': self.era,
            'normalized_value': self.normalized_value,
            'label': self.label
        }


@dataclass
class Header:
    """Resolved identification summary of a node."""
    labels: List[str] = field(default_factory=list)
    dates: List[StructuredDate] = field(default_factory=list)
    date_as_label: bool = False
    identifiers: List[StructuredIdentifier] = field(default_factory=list)
    inventory_number: str = ""
    physical_description: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'labels': list(self.labels),
            'dates': [date.to_dict() for date in self.dates],
            'date_as_label': self.date_as_label,
            'identifiers': [ident.to_dict() for ident in self.identifiers],
            'inventory_number': self.inventory_number,
            'physical_description': self.physical_description
        }


@dataclass
class OutputNode:
    """One node of the normalized tree."""
    order: int
    depth: int
    tag: str = ""
    level_type: str = ""
    level_subtype: str = ""
    parent_chain: List[str] = field(default_factory=list)
    header: Header = field(default_factory=Header)
    descriptive_markup: str = ""
    children: List['OutputNode'] = field(default_factory=list)

    def _fields_dict(self) -> dict:
        return {
            'order': self.order,
            'depth': self.depth,
            'tag': self.tag,
            'level_type': self.level_type,
            'level_subtype': self.level_subtype,
            'parent_chain': list(self.parent_chain),
            'header': self.header.to_dict(),
            'descriptive_markup': self.descriptive_markup,
            'children': []
        }

    def to_dict(self) -> dict:
        """
        Convert to dictionary, including the whole subtree.

        Walks the subtree with an explicit stack, so deep trees do not hit
        the recursion limit.
        """
        result = self._fields_dict()
        stack = [(self, result)]

        while stack:
            node, data = stack.pop()
            for child in node.children:
                child_data = child._fields_dict()
                data['children'].append(child_data)
                stack.append((child, child_data))

        return result


@dataclass
class RootContainer:
    """Top-level container of a converted description."""
    level_type: str = ""
    root_labels: List[str] = field(default_factory=list)
    roots: List[OutputNode] = field(default_factory=list)
    total_node_count: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'level_type': self.level_type,
            'root_labels': list(self.root_labels),
            'roots': [node.to_dict() for node in self.roots],
            'total_node_count': self.total_node_count
        }
