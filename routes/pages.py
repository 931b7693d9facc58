"""Front-end page route."""

from flask import Blueprint, Response, current_app

from errors import AssetNotFoundError


pages_bp = Blueprint('pages', __name__)


def load_index_page():
    """Read the bundled index page as raw bytes."""
    path = current_app.config['INDEX_PAGE_PATH']
    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError as e:
        current_app.logger.error('Static page not readable at %s: %s', path, e)
        raise AssetNotFoundError('File not found') from e


@pages_bp.route('/')
def index():
    """Serve the static front-end page verbatim."""
    return Response(load_index_page(), mimetype='text/html')
