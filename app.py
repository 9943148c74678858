"""
Portfolio Site - Main Application Entry Point
Application Factory Pattern with one blueprint per area of the site

This module initializes the Flask application with its configuration,
extensions and middleware. All actual route handling is delegated to blueprints.
"""

import logging
import os
from datetime import datetime
from flask import Flask, render_template
from config import get_config, environment_overrides
from extensions import mailer
from utils.security import init_https_enforcement, add_security_headers
from utils.ui_helpers import inject_ui_context

# Import all blueprints
from blueprints.pages import pages_bp
from blueprints.contact import contact_bp


def create_app(config_name=None, test_config=None, transport_factory=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        test_config (dict): Values applied last, mainly for tests (optional)
        transport_factory (callable): Mail transport override (optional)

    Returns:
        Flask: Configured Flask application instance

    Raises:
        ConfigurationError: mailbox account or password is missing
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)
    app.config.update(environment_overrides())
    if test_config:
        app.config.update(test_config)

    # Initialize extensions with app; fails fast on missing mail credentials
    initialize_extensions(app, transport_factory)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio site is running'}, 200

    return app


def initialize_extensions(app, transport_factory=None):
    """Initialize Flask extensions with the app instance"""
    mailer.init_app(app, transport_factory=transport_factory)


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(pages_bp)
    app.register_blueprint(contact_bp)


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(404)
    def page_not_found(e):
        return render_template('404.html', title='Page Not Found'), 404

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return render_template('500.html', title='Server Error'), 500


def register_hooks(app):
    """Register request/response hooks and context processors"""

    force_https = init_https_enforcement(app)

    @app.context_processor
    def inject_global_vars():
        context = inject_ui_context()
        context.update({
            'site_name': app.config.get('SITE_NAME'),
            'current_year': datetime.now().year,
        })
        return context

    @app.after_request
    def security_headers(response):
        """Add security headers to all responses"""
        return add_security_headers(response, force_https=force_https)


if __name__ == '__main__':
    from dotenv import load_dotenv

    load_dotenv()
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app; raises before listening if mail credentials are missing
    app = create_app(env)
    port = app.config['PORT']
    app.logger.info(f"Listening on {port}")

    # Run development server
    app.run(
        host='0.0.0.0',
        port=port,
        debug=(env == 'development')
    )
