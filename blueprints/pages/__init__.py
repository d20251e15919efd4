"""
Pages Blueprint - The portfolio page
Handles: Portfolio shell rendering, display mode toggle
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
