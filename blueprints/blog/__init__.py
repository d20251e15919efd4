"""
Blog Blueprint - Blog post catalog
Handles: JSON listing of the discovered blog posts
"""

from flask import Blueprint

blog_bp = Blueprint('blog', __name__, url_prefix='/api')

from . import routes
