"""JSON endpoints reporting the server and client IP addresses."""

from flask import Blueprint, jsonify, current_app

from security import get_client_ip


api_bp = Blueprint('api', __name__, url_prefix='/api')


@api_bp.route('/server-ip')
def server_ip():
    """Look up the server's public IP, cache it, and return it."""
    lookup = current_app.extensions['geo_lookup_client']
    cache = current_app.extensions['server_ip_cache']

    # Lookup errors propagate to the app's error handler; the cache is untouched.
    record = lookup.fetch_server_geo()
    cache.replace(record)

    return jsonify(record.to_dict())


@api_bp.route('/client-ip')
def client_ip():
    """Return the requesting client's IP."""
    return jsonify({'ip': get_client_ip()})
