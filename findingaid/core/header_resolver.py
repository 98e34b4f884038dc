"""
Header Resolution Component.

Responsible for turning the identification block of a component into
the header shown in search results and tree views.
"""

from typing import Iterable, List, Tuple

from core.constants import INVENTORY_ID_TYPES
from core.models import Identification, UnitDate, UnitId
from core.nodes import Header, StructuredDate, StructuredIdentifier


class HeaderResolver:
    """
    Builds headers from identification blocks.

    In sparse mode only the navigation fields are filled: labels and the
    inventory number. Dates nested in titles are then rendered as labels.
    """

    def __init__(self, sparse: bool = False, inventory_id_types: Iterable[str] = INVENTORY_ID_TYPES):
        """
        Initialize header resolver.

        Args:
            sparse: Produce the reduced header used for navigation views
            inventory_id_types: Unit identifier types that set the inventory number
        """
        self.sparse = sparse
        self.inventory_id_types = frozenset(inventory_id_types)

    @staticmethod
    def to_structured_date(date: UnitDate) -> StructuredDate:
        """Project a unit date onto a structured date."""
        return StructuredDate(
            calendar=date.calendar,
            era=date.era,
            normalized_value=date.normal,
            label=date.label
        )

    @staticmethod
    def to_structured_identifier(unit_id: UnitId) -> StructuredIdentifier:
        """Project a unit identifier onto a structured identifier."""
        return StructuredIdentifier(
            id=unit_id.id,
            type_id=unit_id.identifier,
            type=unit_id.type,
            audience=unit_id.audience
        )

    def resolve_identifiers(self, unit_ids: List[UnitId]) -> Tuple[List[StructuredIdentifier], str]:
        """
        Extract identifiers and the inventory number.

        Every identifier of a recognized type overwrites the inventory
        number, so the last one in document order wins.

        Args:
            unit_ids: Unit identifiers in source order

        Returns:
            Tuple of (identifiers, inventory_number); identifiers is empty in sparse mode
        """
        identifiers = []
        inventory_number = ""

        for unit_id in unit_ids:
            if unit_id.type in self.inventory_id_types:
                inventory_number = unit_id.id
            if not self.sparse:
                identifiers.append(self.to_structured_identifier(unit_id))

        return identifiers, inventory_number

    def resolve(self, identification: Identification) -> Header:
        """
        Build the header for one component.

        Args:
            identification: The component's identification block

        Returns:
            Populated Header
        """
        header = Header()

        if identification.physical_description and not self.sparse:
            header.physical_description = identification.physical_description

        for title in identification.unit_titles:
            if not title.dates:
                header.labels.append(title.title)
                continue

            # A dated title is represented by its dates only
            for date in title.dates:
                if self.sparse:
                    header.labels.append(date.label)
                else:
                    header.dates.append(self.to_structured_date(date))
                    header.date_as_label = True

        if not self.sparse:
            for date in identification.unit_dates:
                header.dates.append(self.to_structured_date(date))

        header.identifiers, header.inventory_number = self.resolve_identifiers(
            identification.unit_ids
        )

        return header
