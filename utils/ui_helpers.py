"""
UI Helper Functions for Blueprint-Specific Styling
===================================================

Each blueprint can ship its own CSS/JS files. The assets of the active
blueprint are injected into every template by the context processor.

To add assets for a blueprint:
1. Put the files under static/css or static/js
2. Register them in the maps below
"""

from flask import request
from typing import List, Dict, Optional

from models import DisplayMode
from .display_mode import StyleClassList


# Stylesheet loaded on every page
BASE_STYLES = ['css/portfolio.css']

BLUEPRINT_CSS_MAP = {
    'pages': [],
    'blog': [],
}

BLUEPRINT_JS_MAP = {
    'pages': [
        'js/blog.js',
    ],
    'blog': [],
}


def get_blueprint_styles(blueprint_name: Optional[str]) -> List[str]:
    """
    Get the CSS files of a blueprint

    Args:
        blueprint_name: Blueprint name (e.g. 'pages', 'blog')

    Returns:
        list: Static paths of CSS files, base stylesheet first

    Example:
        >>> get_blueprint_styles('pages')
        ['css/portfolio.css']
    """
    if not blueprint_name:
        return list(BASE_STYLES)
    return BASE_STYLES + BLUEPRINT_CSS_MAP.get(blueprint_name, [])


def get_blueprint_scripts(blueprint_name: Optional[str]) -> List[str]:
    """Get the JavaScript files of a blueprint"""
    if not blueprint_name:
        return []
    return list(BLUEPRINT_JS_MAP.get(blueprint_name, []))


def inject_blueprint_assets() -> Dict[str, List[str]]:
    """
    Collect the assets of the blueprint handling the current request

    Returns:
        dict: blueprint_styles, blueprint_scripts and current_blueprint
    """
    blueprint_name = request.blueprint if request.blueprint else None

    return {
        'blueprint_styles': get_blueprint_styles(blueprint_name),
        'blueprint_scripts': get_blueprint_scripts(blueprint_name),
        'current_blueprint': blueprint_name,
    }


def get_page_specific_class(blueprint_name: Optional[str], route_name: Optional[str] = None) -> str:
    """
    CSS class of a specific page, added to the <body> class list

    Example:
        >>> get_page_specific_class('pages', 'index')
        'page-pages page-pages-index'
    """
    if not blueprint_name:
        return 'page-default'

    classes = [f'page-{blueprint_name}']

    if route_name:
        classes.append(f'page-{blueprint_name}-{route_name}')

    return ' '.join(classes)


def build_body_classes(page_class: str) -> StyleClassList:
    return StyleClassList(page_class.split())


def toggle_button_label(mode: DisplayMode) -> str:
    """Label of the toggle button, naming the mode a click switches to"""
    target = 'Light' if mode.is_dark else 'Dark'
    return f'Toggle to {target} Mode'


__all__ = [
    'get_blueprint_styles',
    'get_blueprint_scripts',
    'inject_blueprint_assets',
    'get_page_specific_class',
    'build_body_classes',
    'toggle_button_label'
]
