"""
whereami: reports the server's public IP location and the client's IP
Main Flask Application
"""

import logging
import os

from flask import Flask, g, request

from config import config, get_port
from errors import WhereAmIError
from geolocation import GeoLookupClient
from models.cache import ServerIPCache


def configure_logging(app):
    """Send module loggers to stderr at the configured level, unless a host already did."""
    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format=app.config['LOG_FORMAT'],
    )


def create_app(config_name=None):
    """Application factory pattern."""

    # Determine configuration
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    # No automatic /static route; the page is served only by the index route
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config.get(config_name, config['default']))

    configure_logging(app)

    # Per-app state, shared by all request threads
    app.extensions['server_ip_cache'] = ServerIPCache()
    app.extensions['geo_lookup_client'] = GeoLookupClient(
        url=app.config['GEO_API_URL'],
        timeout=app.config['GEO_API_TIMEOUT'],
    )

    # Add request ID for tracking
    @app.before_request
    def before_request():
        from security import generate_request_id
        g.request_id = generate_request_id()

    # Add security headers to all responses
    @app.after_request
    def add_security_headers(response):
        from security import add_security_headers as add_headers
        return add_headers(response)

    @app.after_request
    def log_request(response):
        if app.config.get('DEBUG'):
            app.logger.debug(
                f"[{g.get('request_id', 'N/A')}] "
                f"{request.method} {request.path} -> {response.status_code}"
            )
        return response

    # Error handlers
    @app.errorhandler(WhereAmIError)
    def service_error(e):
        app.logger.error(f"[{g.get('request_id', 'N/A')}] {request.path} failed: {e}")
        return str(e), 500, {'Content-Type': 'text/plain; charset=utf-8'}

    # Register blueprints
    from routes.pages import pages_bp
    from routes.api import api_bp

    app.register_blueprint(pages_bp)
    app.register_blueprint(api_bp)

    return app


# Create application instance
app = create_app()


def main():
    """Run the threaded server on the port from the environment."""
    port = get_port()
    app.logger.info('Server starting on port %s', port)
    # Never expose the debugger or reloader on a public bind.
    # Bind errors propagate and terminate the process.
    app.run(host='0.0.0.0', port=port, debug=False, use_reloader=False, threaded=True)


if __name__ == '__main__':
    main()
