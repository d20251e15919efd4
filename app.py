"""
Portfolio - Main Application Entry Point
Built with the Application Factory Pattern

This module initializes the Flask application with its configuration,
logging, blog catalog and hooks. All route handling is delegated to blueprints.
"""

import logging
import os
from datetime import datetime
from flask import Flask, g, render_template, request
from config import get_config
from utils.content import ContentCatalogLoader, create_content_source
from utils.display_mode import PREFERS_COLOR_SCHEME_HEADER
from utils.helpers import CATALOG_EXTENSION_KEY

# Import all blueprints
from blueprints.pages import pages_bp
from blueprints.blog import blog_bp


def create_app(config_name=None, overrides=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        overrides (dict): Config values applied on top of the environment config (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)
    if overrides:
        app.config.update(overrides)

    configure_logging(app)

    # Initialize extensions with app
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio application is running'}, 200

    return app


def configure_logging(app):
    """Apply LOG_LEVEL to the app logger and the utils loggers"""
    level = logging.getLevelName(str(app.config.get('LOG_LEVEL', 'INFO')).upper())
    if not isinstance(level, int):
        level = logging.INFO
    app.logger.setLevel(level)

    utils_logger = logging.getLogger('utils')
    utils_logger.setLevel(level)
    if not utils_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('[%(asctime)s] %(levelname)s in %(module)s: %(message)s'))
        utils_logger.addHandler(handler)


def initialize_extensions(app):
    """Register the blog catalog loader and start its discovery pass"""
    catalog = ContentCatalogLoader(create_content_source(app.config))
    app.extensions[CATALOG_EXTENSION_KEY] = catalog

    if app.config.get('POSTS_LOAD_ASYNC', True):
        catalog.start()
        app.logger.info("✓ Blog catalog loading in background")
    else:
        posts = catalog.load_now()
        app.logger.info(f"✓ Blog catalog loaded with {len(posts)} posts")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(pages_bp)
    app.register_blueprint(blog_bp)


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(404)
    def page_not_found(e):
        return render_template('404.html'), 404

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return render_template('500.html'), 500


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.before_request
    def before_request():
        """Resolve the display mode once per request and apply it to the body classes"""
        from utils.helpers import get_display_preference
        from utils.ui_helpers import build_body_classes, get_page_specific_class

        if request.endpoint == 'static':
            return
        page_class = get_page_specific_class(
            request.blueprint,
            request.endpoint.split('.')[-1] if request.endpoint else None
        )
        g.page_class = page_class
        get_display_preference(build_body_classes(page_class))

    @app.context_processor
    def inject_global_vars():
        """Values shared by all templates"""
        from utils.helpers import get_display_preference, get_body_classes
        from utils.ui_helpers import inject_blueprint_assets

        preference = get_display_preference()

        default_meta = {
            'title': app.config.get('SITE_TITLE', 'My Portfolio'),
            'description': app.config.get('SITE_DESCRIPTION', ''),
        }

        blueprint_assets = inject_blueprint_assets()

        return {
            'current_year': datetime.now().year,
            'default_meta': default_meta,
            'display_mode': preference.value,
            'page_class': g.get('page_class', 'page-default'),
            'body_classes': str(get_body_classes()),
            'blueprint_styles': blueprint_assets.get('blueprint_styles', []),
            'blueprint_scripts': blueprint_assets.get('blueprint_scripts', []),
            'current_blueprint': blueprint_assets.get('current_blueprint'),
        }

    @app.after_request
    def add_security_headers(response):
        """Add security and client hint headers to all responses"""
        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "img-src 'self' data:; "
            "frame-ancestors 'none';"
        )
        response.headers['X-Content-Type-Options'] = 'nosniff'
        # Ask browsers to send the color scheme preference on the next request
        response.headers['Accept-CH'] = PREFERS_COLOR_SCHEME_HEADER
        response.headers['Critical-CH'] = PREFERS_COLOR_SCHEME_HEADER
        response.vary.add(PREFERS_COLOR_SCHEME_HEADER)
        return response


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=5000,
        debug=(env == 'development')
    )
