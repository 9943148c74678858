"""
Security Module - HTTPS enforcement, proxy handling and response headers
"""

from flask import request, redirect
from werkzeug.middleware.proxy_fix import ProxyFix


def get_client_ip():
    """
    Get the client IP address.

    Forwarded headers are only honoured once ProxyFix is installed by
    init_https_enforcement, which rewrites REMOTE_ADDR.
    """
    return request.remote_addr or 'unknown'


def init_https_enforcement(app):
    """
    Redirect plain HTTP requests to HTTPS when FORCE_HTTPS is enabled.

    Behind a reverse proxy the original scheme and host are taken from the
    X-Forwarded-Proto / X-Forwarded-Host headers.
    """
    if not app.config.get('FORCE_HTTPS'):
        return False

    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    @app.before_request
    def redirect_to_https():
        if request.is_secure:
            return None
        secure_url = request.url.replace('http://', 'https://', 1)
        return redirect(secure_url, code=301)

    app.logger.info('HTTPS redirect enforcement enabled')
    return True


def add_security_headers(response, force_https=False):
    """Add security headers to a response"""
    response.headers['X-Content-Type-Options'] = 'nosniff'
    response.headers['X-Frame-Options'] = 'SAMEORIGIN'
    response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
    if force_https:
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
    return response
