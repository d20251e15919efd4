"""
Utils Package - Centralized utility modules initialization
"""

from .display_mode import (
    read_ambient_signal,
    initialize,
    toggle,
    StyleClassList,
    apply_effect,
    DisplayModePreference
)
from .content import (
    ContentError,
    MalformedDocumentError,
    ContentSource,
    GlobContentSource,
    ManifestContentSource,
    create_content_source,
    ContentCatalogLoader
)
from .helpers import (
    get_display_preference,
    get_body_classes,
    toggle_display_mode,
    get_content_catalog
)
from .ui_helpers import (
    get_blueprint_styles,
    get_blueprint_scripts,
    inject_blueprint_assets,
    get_page_specific_class,
    build_body_classes,
    toggle_button_label
)

__all__ = [
    # Display mode
    'read_ambient_signal',
    'initialize',
    'toggle',
    'StyleClassList',
    'apply_effect',
    'DisplayModePreference',

    # Content
    'ContentError',
    'MalformedDocumentError',
    'ContentSource',
    'GlobContentSource',
    'ManifestContentSource',
    'create_content_source',
    'ContentCatalogLoader',

    # Helpers
    'get_display_preference',
    'get_body_classes',
    'toggle_display_mode',
    'get_content_catalog',

    # UI Helpers
    'get_blueprint_styles',
    'get_blueprint_scripts',
    'inject_blueprint_assets',
    'get_page_specific_class',
    'build_body_classes',
    'toggle_button_label'
]
