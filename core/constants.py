"""
Constants and configuration values for finding-aid conversion.
"""

# Unit identifier types that mark the inventory number of a component.
# The empty type is the common case for plain <unitid> elements.
INVENTORY_ID_TYPES = ('', 'ABS', 'series_code')

# Default tag for components that do not name one
DEFAULT_COMPONENT_TAG = 'c'

# Fidelity modes
FIDELITY_FULL = 'full'
FIDELITY_SPARSE = 'sparse'

# Default JSON output settings for the CLI
DEFAULT_OUTPUT_PARAMS = {
    'indent': 2,
    'ensure_ascii': False,
}
