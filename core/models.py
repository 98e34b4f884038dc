"""
Core input models for finding-aid conversion.

These are pure data structures mirroring the EAD archival description
as handed over by the markup parser. The engine only reads them.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .constants import DEFAULT_COMPONENT_TAG


@dataclass
class UnitId:
    """A <unitid> entry of the identification block."""
    id: str = ""
    identifier: str = ""
    type: str = ""
    audience: str = ""


@dataclass
class UnitDate:
    """A <unitdate> entry, either direct or nested in a title."""
    label: str = ""
    calendar: str = ""
    era: str = ""
    normal: str = ""


@dataclass
class UnitTitle:
    """A <unittitle> entry with its nested dates."""
    title: str = ""
    dates: List[UnitDate] = field(default_factory=list)


@dataclass
class Identification:
    """The <did> block: titles, dates, identifiers and physical description."""
    unit_titles: List[UnitTitle] = field(default_factory=list)
    unit_dates: List[UnitDate] = field(default_factory=list)
    unit_ids: List[UnitId] = field(default_factory=list)
    physical_description: Optional[str] = None


@dataclass
class MarkupElement:
    """
    One element of descriptive rich text.

    Mirrors the XML infoset: text before the first child, child elements,
    and the tail text that follows the element inside its parent.
    """
    tag: str
    text: str = ""
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List['MarkupElement'] = field(default_factory=list)
    tail: str = ""


@dataclass
class Component:
    """
    One level of the archival hierarchy (<c>, <c01> ... <c12>).

    All nesting depths share this type; children are kept in source order.
    """
    level: str = ""
    other_level: str = ""
    identification: Identification = field(default_factory=Identification)
    scope_content: Optional[List[MarkupElement]] = None
    children: List['Component'] = field(default_factory=list)
    tag: str = DEFAULT_COMPONENT_TAG


@dataclass
class Description:
    """The <dsc> container holding the root-level components."""
    level_type: str = ""
    labels: List[str] = field(default_factory=list)
    components: List[Component] = field(default_factory=list)
