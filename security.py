"""
Request utilities shared by all routes.
Implements client IP resolution, security headers, and request IDs.
"""

import uuid

from flask import request, current_app, g


def add_security_headers(response):
    """
    Add security headers to response.
    Called as an after_request handler.
    """
    headers = current_app.config.get('SECURITY_HEADERS', {})
    for header, value in headers.items():
        response.headers[header] = value

    response.headers['X-Request-Id'] = getattr(g, 'request_id', 'unknown')

    return response


def resolve_client_ip(headers, remote_addr):
    """
    Resolve the apparent client IP from proxy headers or the socket address.

    The first non-empty value of X-Forwarded-For, X-Real-IP and the remote
    address wins, and is cut at its first ':' to drop a port. Proxy headers
    are trusted as sent, and the cut mangles IPv6 literals.

    Args:
        headers: Mapping of request headers
        remote_addr: Remote address of the connection, possibly with a port

    Returns:
        Client IP string, empty if every source is empty
    """
    client_ip = headers.get('X-Forwarded-For') or ''
    if not client_ip:
        client_ip = headers.get('X-Real-IP') or ''
    if not client_ip:
        client_ip = remote_addr or ''

    host, _, _ = client_ip.partition(':')
    return host


def get_client_ip():
    """Get the client IP address of the current request."""
    return resolve_client_ip(request.headers, request.remote_addr)


def generate_request_id():
    """Generate a unique request ID for tracking."""
    return str(uuid.uuid4())[:8]
