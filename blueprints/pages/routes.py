"""
Pages Routes - Portfolio shell and display mode toggle
"""

from flask import render_template, redirect, url_for
from utils.helpers import get_display_preference, get_content_catalog, toggle_display_mode
from utils.ui_helpers import toggle_button_label
from . import pages_bp


# Static section content
SKILLS = ['JavaScript', 'React', 'Node.js', 'Three.js', 'CSS']
CONTACT_EMAIL = 'myemail@example.com'


@pages_bp.route('/')
def index():
    """Portfolio page - static sections plus the display mode and blog catalog"""
    preference = get_display_preference()
    posts_ready, posts = get_content_catalog().snapshot()

    return render_template('index.html',
                           toggle_label=toggle_button_label(preference.value),
                           posts=posts,
                           posts_ready=posts_ready,
                           skills=SKILLS,
                           contact_email=CONTACT_EMAIL)


@pages_bp.route('/toggle-mode', methods=['POST'])
def toggle_mode():
    """Switch between light and dark mode"""
    toggle_display_mode()
    return redirect(url_for('pages.index'))
