"""
Utils Package - Centralized utility modules initialization
"""

from .data import LocaleDataError, load_locale_bundle, load_section, validate_section
from .mime import CONTENT_TYPES, DEFAULT_CONTENT_TYPE, content_type_for
from .schema_org import (
    SCHEMA_ORG_ELEMENT_ID,
    generate_schema_org_data,
    render_schema_org_json
)
from .preferences import (
    Document,
    MemoryStorage,
    PreferenceState,
    PreferenceStore,
    StorageAdapter,
    detect_dark_mode,
    detect_language
)

__all__ = [
    # Data
    'LocaleDataError',
    'load_locale_bundle',
    'load_section',
    'validate_section',

    # Content types
    'CONTENT_TYPES',
    'DEFAULT_CONTENT_TYPE',
    'content_type_for',

    # Structured metadata
    'SCHEMA_ORG_ELEMENT_ID',
    'generate_schema_org_data',
    'render_schema_org_json',

    # Preferences
    'Document',
    'MemoryStorage',
    'PreferenceState',
    'PreferenceStore',
    'StorageAdapter',
    'detect_dark_mode',
    'detect_language'
]
