"""
Pytest configuration and global fixtures.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.models import (
    Component, Description, Identification, MarkupElement,
    UnitDate, UnitId, UnitTitle
)


@pytest.fixture
def letters_description():
    """A series 'Letters' (ABS S1) holding one file 'Letter 1'."""
    child = Component(
        tag='c02',
        level='file',
        identification=Identification(unit_titles=[UnitTitle(title='Letter 1')])
    )
    root = Component(
        tag='c01',
        level='series',
        identification=Identification(
            unit_titles=[UnitTitle(title='Letters')],
            unit_ids=[UnitId(id='S1', type='ABS')]
        ),
        children=[child]
    )
    return Description(level_type='combined', labels=['Inventory'], components=[root])


@pytest.fixture
def rich_description():
    """
    Two series with nested files and items, carrying dates, identifiers,
    physical descriptions and scope content.

    Pre-order layout (inventory numbers in brackets):
        1 series [1]
          2 file [1.1]
            3 item [1.1.1]
          4 file [1.2]
        5 series [2]
          6 file []
    """
    item = Component(
        tag='c03',
        level='item',
        identification=Identification(
            unit_titles=[UnitTitle(title='Photograph')],
            unit_ids=[UnitId(id='1.1.1')],
            physical_description='1 photo'
        )
    )
    file_one = Component(
        tag='c02',
        level='file',
        other_level='dossier',
        identification=Identification(
            unit_titles=[UnitTitle(title='Minutes', dates=[UnitDate(label='1901', normal='1901')])],
            unit_ids=[UnitId(id='1.1', identifier='inv', audience='external')]
        ),
        scope_content=[MarkupElement(tag='p', text='Minutes of the board')],
        children=[item]
    )
    file_two = Component(
        tag='c02',
        level='file',
        identification=Identification(
            unit_titles=[UnitTitle(title='Accounts')],
            unit_dates=[UnitDate(label='1902-1905', normal='1902/1905', calendar='gregorian', era='ce')],
            unit_ids=[UnitId(id='1.2')]
        )
    )
    series_one = Component(
        tag='c01',
        level='series',
        identification=Identification(
            unit_titles=[UnitTitle(title='Board')],
            unit_ids=[UnitId(id='1', type='series_code'), UnitId(id='old-1', type='other')],
            physical_description='2 boxes'
        ),
        scope_content=[
            MarkupElement(tag='p', text='Records of the ', children=[
                MarkupElement(tag='emph', text='board', attributes={'render': 'italic'}, tail='.')
            ]),
        ],
        children=[file_one, file_two]
    )
    orphan_file = Component(
        tag='c02',
        level='file',
        identification=Identification(unit_titles=[UnitTitle(title='Loose papers')])
    )
    series_two = Component(
        tag='c01',
        level='series',
        identification=Identification(
            unit_titles=[UnitTitle(title='Correspondence')],
            unit_ids=[UnitId(id='2', type='ABS')]
        ),
        children=[orphan_file]
    )
    return Description(
        level_type='combined',
        labels=['Inventory', 'Description of the series'],
        components=[series_one, series_two]
    )


@pytest.fixture
def broken_markup_description():
    """A description whose nested item carries unserializable scope content."""
    item = Component(
        tag='c03',
        level='item',
        identification=Identification(unit_ids=[UnitId(id='1.1.1')]),
        scope_content=[MarkupElement(tag='p', text=12345)]
    )
    file_ = Component(
        tag='c02',
        level='file',
        identification=Identification(unit_ids=[UnitId(id='1.1')]),
        children=[item]
    )
    series = Component(
        tag='c01',
        level='series',
        identification=Identification(unit_ids=[UnitId(id='1')]),
        children=[file_]
    )
    return Description(level_type='combined', components=[series])


@pytest.fixture
def letters_json():
    """JSON document equivalent to letters_description."""
    return {
        'type': 'combined',
        'head': ['Inventory'],
        'c': [
            {
                'tag': 'c01',
                'level': 'series',
                'did': {
                    'unittitle': [{'title': 'Letters'}],
                    'unitid': [{'id': 'S1', 'type': 'ABS'}]
                },
                'c': [
                    {
                        'tag': 'c02',
                        'level': 'file',
                        'did': {'unittitle': [{'title': 'Letter 1'}]}
                    }
                ]
            }
        ]
    }
