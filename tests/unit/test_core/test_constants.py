"""
Unit tests for core.constants module.
"""
import pytest
from core.constants import (
    INVENTORY_ID_TYPES,
    DEFAULT_COMPONENT_TAG,
    FIDELITY_FULL,
    FIDELITY_SPARSE,
    DEFAULT_OUTPUT_PARAMS
)


class TestInventoryIdTypes:
    """Tests for INVENTORY_ID_TYPES constant."""

    @pytest.mark.parametrize('id_type', ['', 'ABS', 'series_code'])
    def test_recognized_types(self, id_type):
        """Test the primary identifier kinds are recognized."""
        assert id_type in INVENTORY_ID_TYPES

    def test_other_types_not_recognized(self):
        """Test arbitrary types are not inventory identifiers."""
        assert 'other' not in INVENTORY_ID_TYPES
        assert 'abs' not in INVENTORY_ID_TYPES


class TestModeConstants:
    """Tests for fidelity and output constants."""

    def test_fidelity_names_distinct(self):
        """Test fidelity names differ."""
        assert FIDELITY_FULL != FIDELITY_SPARSE

    def test_default_component_tag(self):
        """Test unnamed components use the generic tag."""
        assert DEFAULT_COMPONENT_TAG == 'c'

    def test_output_params(self):
        """Test default output parameters."""
        assert DEFAULT_OUTPUT_PARAMS['indent'] == 2
        assert DEFAULT_OUTPUT_PARAMS['ensure_ascii'] is False
