"""
Blog Routes - Blog post catalog as JSON
Polled by the portfolio page until the catalog has resolved.
"""

from flask import jsonify
from utils.helpers import get_content_catalog
from . import blog_bp


@blog_bp.route('/posts')
def list_posts():
    """Blog post summaries with the catalog's resolution state"""
    ready, posts = get_content_catalog().snapshot()
    return jsonify({
        'ready': ready,
        'count': len(posts),
        'posts': [post.to_dict() for post in posts]
    })
