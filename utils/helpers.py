"""
Helpers Module - Request-scoped access to the display mode and blog catalog
"""

from flask import current_app, g, request, session

from models import DisplayMode
from .display_mode import (
    DisplayModePreference,
    StyleClassList,
    apply_effect,
    initialize,
    read_ambient_signal
)

# Session key holding the mode chosen with the toggle button
DARK_MODE_SESSION_KEY = 'dark_mode'

# Extension key of the application's ContentCatalogLoader
CATALOG_EXTENSION_KEY = 'content_catalog'


def get_initial_display_mode():
    """Mode toggled earlier in this browser session, else the browser's preference"""
    stored = session.get(DARK_MODE_SESSION_KEY)
    if stored is not None:
        return DisplayMode.from_bool(bool(stored))
    return initialize(read_ambient_signal(request.headers))


def get_display_preference(body_classes=None):
    """
    DisplayModePreference of the current request

    The first call in a request builds the preference and subscribes the
    body class effect to it, which applies the dark token once right away.

    Args:
        body_classes (StyleClassList, optional): Class list kept in sync with the mode

    Returns:
        DisplayModePreference: Shared by every caller within the request
    """
    if 'display_preference' in g:
        return g.display_preference

    preference = DisplayModePreference(get_initial_display_mode())
    g.body_classes = body_classes if body_classes is not None else StyleClassList()
    preference.subscribe(apply_effect(g.body_classes))
    g.display_preference = preference
    return preference


def get_body_classes():
    get_display_preference()
    return g.body_classes


def toggle_display_mode():
    """Flip the mode of the current browser session and remember the choice"""
    preference = get_display_preference()
    mode = preference.toggle()
    session[DARK_MODE_SESSION_KEY] = mode.is_dark
    current_app.logger.info(f"Display mode toggled to {mode.name}")
    return mode


def get_content_catalog(app=None):
    """The ContentCatalogLoader registered on the application"""
    app = app or current_app
    return app.extensions[CATALOG_EXTENSION_KEY]


__all__ = [
    'DARK_MODE_SESSION_KEY',
    'CATALOG_EXTENSION_KEY',
    'get_initial_display_mode',
    'get_display_preference',
    'get_body_classes',
    'toggle_display_mode',
    'get_content_catalog'
]
