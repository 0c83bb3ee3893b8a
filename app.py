"""
Portfolio Site - Main Application Entry Point
Built with the Application Factory Pattern

This module initializes the Flask application with its configuration, the
locale registry and response hooks. All route handling is delegated to blueprints.
"""

import logging

from flask import Flask, jsonify, request
from config import get_config
from extensions import locale_registry

# Import all blueprints
from blueprints.api import api_bp
from blueprints.assets import assets_bp
from blueprints.pages import pages_bp


def create_app(config_name=None, overrides=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional, defaults to NODE_ENV)
        overrides (dict): Config values applied after the config class (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    # Files are served explicitly by the assets blueprint
    app = Flask(__name__, static_folder=None)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)
    if overrides:
        app.config.update(overrides)

    app.json.ensure_ascii = app.config['JSON_AS_ASCII']

    if not app.debug:
        app.logger.setLevel(logging.INFO)

    # Initialize extensions with app
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    log_startup(app)

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    locale_registry.init_app(app)


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(pages_bp)
    app.register_blueprint(api_bp)
    app.register_blueprint(assets_bp)


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(404)
    def page_not_found(e):
        if request.path.startswith('/api/'):
            return jsonify({
                'error': 'Not Found',
                'message': f"No API endpoint at '{request.path}'"
            }), 404
        return 'Not Found', 404, {'Content-Type': 'text/plain; charset=utf-8'}

    @app.errorhandler(405)
    def method_not_allowed(e):
        return 'Method Not Allowed', 405, {'Content-Type': 'text/plain; charset=utf-8'}

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        if request.path.startswith('/api/'):
            return jsonify({'error': 'Internal Server Error'}), 500
        return 'Internal Server Error', 500, {'Content-Type': 'text/plain; charset=utf-8'}


def register_hooks(app):
    """Register request/response hooks"""

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        return response


def log_startup(app):
    """Startup banner plus one warning per locale that failed to load"""
    mode = app.config['MODE']
    app.logger.info(f"🚀 Starting server in {mode} mode...")

    errors = app.extensions['locale_registry']['errors']
    if errors:
        app.logger.warning(f"⚠ {len(errors)} locale data error(s) at startup:")
        for error in errors:
            app.logger.warning(f"  - {error}")


if __name__ == '__main__':
    app = create_app()
    port = app.config['PORT']

    app.logger.info(f"✅ Server running at http://localhost:{port}/")
    app.logger.info(f"📄 PT-BR: http://localhost:{port}/")
    app.logger.info(f"📄 EN: http://localhost:{port}/en/")
    if app.config['DEBUG']:
        app.logger.info("🔥 Auto-reload enabled - edit files and see changes instantly!")

    # Run development server
    app.run(
        host='0.0.0.0',
        port=port,
        debug=app.config['DEBUG']
    )
else:
    # Create app instance for gunicorn
    app = create_app()
