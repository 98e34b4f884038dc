"""
Pydantic schemas for the JSON representation of archival descriptions.

Field names follow the EAD elements they stand for. Each schema converts
into the matching core model with to_model().
"""
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from core.constants import DEFAULT_COMPONENT_TAG
from core.models import (
    Component, Description, Identification, MarkupElement,
    UnitDate, UnitId, UnitTitle
)


class UnitIdSchema(BaseModel):
    """Unit identifier (<unitid>)."""
    id: str = ""
    identifier: str = ""
    type: str = ""
    audience: str = ""

    def to_model(self) -> UnitId:
        return UnitId(
            id=self.id,
            identifier=self.identifier,
            type=self.type,
            audience=self.audience
        )


class UnitDateSchema(BaseModel):
    """Unit date (<unitdate>)."""
    label: str = ""
    calendar: str = ""
    era: str = ""
    normal: str = ""

    def to_model(self) -> UnitDate:
        return UnitDate(
            label=self.label,
            calendar=self.calendar,
            era=self.era,
            normal=self.normal
        )


class UnitTitleSchema(BaseModel):
    """Unit title (<unittitle>) with nested dates."""
    title: str = ""
    unitdate: List[UnitDateSchema] = Field(default_factory=list)

    def to_model(self) -> UnitTitle:
        return UnitTitle(
            title=self.title,
            dates=[date.to_model() for date in self.unitdate]
        )


class DidSchema(BaseModel):
    """Identification block (<did>)."""
    unittitle: List[UnitTitleSchema] = Field(default_factory=list)
    unitdate: List[UnitDateSchema] = Field(default_factory=list)
    unitid: List[UnitIdSchema] = Field(default_factory=list)
    physdesc: Optional[str] = None

    def to_model(self) -> Identification:
        return Identification(
            unit_titles=[title.to_model() for title in self.unittitle],
            unit_dates=[date.to_model() for date in self.unitdate],
            unit_ids=[unit_id.to_model() for unit_id in self.unitid],
            physical_description=self.physdesc
        )


class MarkupSchema(BaseModel):
    """Rich-text element inside <scopecontent>."""
    tag: str
    text: str = ""
    attributes: Dict[str, str] = Field(default_factory=dict)
    children: List['MarkupSchema'] = Field(default_factory=list)
    tail: str = ""

    def to_model(self) -> MarkupElement:
        return MarkupElement(
            tag=self.tag,
            text=self.text,
            attributes=dict(self.attributes),
            children=[child.to_model() for child in self.children],
            tail=self.tail
        )


class ComponentSchema(BaseModel):
    """Component at any nesting depth (<c>, <c01> ... <c12>)."""
    tag: str = DEFAULT_COMPONENT_TAG
    level: str = ""
    otherlevel: str = ""
    did: DidSchema = Field(default_factory=DidSchema)
    scopecontent: Optional[List[MarkupSchema]] = None
    c: List['ComponentSchema'] = Field(default_factory=list)

    def to_model(self) -> Component:
        scope_content = None
        if self.scopecontent is not None:
            scope_content = [paragraph.to_model() for paragraph in self.scopecontent]

        return Component(
            tag=self.tag,
            level=self.level,
            other_level=self.otherlevel,
            identification=self.did.to_model(),
            scope_content=scope_content,
            children=[child.to_model() for child in self.c]
        )


class DescriptionSchema(BaseModel):
    """Description of subordinate components (<dsc>)."""
    type: str = ""
    head: List[str] = Field(default_factory=list)
    c: List[ComponentSchema] = Field(default_factory=list)

    def to_model(self) -> Description:
        return Description(
            level_type=self.type,
            labels=list(self.head),
            components=[component.to_model() for component in self.c]
        )


MarkupSchema.model_rebuild()
ComponentSchema.model_rebuild()
