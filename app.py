"""
Flask web application for the ARTCC Transceiver Map.
"""

import os
import math
import logging
from flask import Flask, jsonify, request, send_from_directory
from artcc_client import ArtccClient, UpstreamFetchError
from models import parse_artccs
from selection import resolve_selection
from coverage_model import CoverageSettings, build_map_view
from config import (
    PORT,
    DEBUG,
    DIST_DIR,
    CORS_HEADERS,
    DEFAULT_UNIFORM_VALUE
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

app = Flask(__name__, static_folder=None)
client = ArtccClient()


def error_response(message, status):
    return jsonify({'type': 'error', 'message': message}), status


class InvalidRequestBody(ValueError):
    """Raised when a model route receives a body it can't use."""


@app.after_request
def add_cors_headers(response):
    """Allow the page to be served from another origin during development."""
    for header, value in CORS_HEADERS.items():
        response.headers[header] = value
    return response


@app.errorhandler(UpstreamFetchError)
def handle_upstream_error(e):
    logger.error(f"Upstream fetch failed: {e}")
    return error_response(str(e), 500)


@app.errorhandler(InvalidRequestBody)
def handle_invalid_body(e):
    logger.warning(f"Rejected request body: {e}")
    return error_response(str(e), 400)


@app.route('/api/artccs/', methods=['GET'], strict_slashes=False)
def get_artccs():
    """Proxy the vNAS ARTCC list unmodified."""
    return jsonify(client.fetch_artccs())


def selection_from_body(data):
    """
    Resolve the selection described by a model route body.

    The page sends the ARTCC object it already holds from /api/artccs/,
    so no upstream request is made here.

    Args:
        data: Decoded JSON body with optional 'artcc', 'facility', 'position'

    Returns:
        SelectionState for the body
    """
    raw_artcc = data.get('artcc')
    if not raw_artcc:
        return resolve_selection([])
    if not isinstance(raw_artcc, dict):
        raise InvalidRequestBody('artcc must be an object')
    try:
        artccs = parse_artccs([raw_artcc])
    except (ValueError, TypeError, AttributeError) as e:
        raise InvalidRequestBody(f"Invalid artcc: {e}") from e
    return resolve_selection(artccs, artccs[0].id, data.get('facility'), data.get('position'))


def settings_from_body(data):
    """Build coverage settings, applying a pending actual-range toggle."""
    value = data.get('uniformValue', DEFAULT_UNIFORM_VALUE)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise InvalidRequestBody(f"Invalid uniformValue: {value}")

    settings = CoverageSettings(uniform_value=value, actual_range=bool(data.get('actualRange')))
    if data.get('toggleActualRange'):
        settings.toggle_actual_range()
    return settings


def request_body():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidRequestBody('Request body must be a JSON object')
    return data


@app.route('/api/selection', methods=['POST'])
def post_selection():
    """
    Get dropdown contents for a selection.

    Expected JSON body:
    {
        "artcc": {...},          // ARTCC object from /api/artccs/
        "facility": "NCT",       // optional
        "position": "NCT_APP"    // optional, or ALL_TRANSCEIVERS
    }
    """
    state = selection_from_body(request_body())
    return jsonify({
        'facilities': state.facility_options(),
        'positions': state.position_options(),
        'selected': state.to_dict(),
    })


@app.route('/api/coverage', methods=['POST'])
def post_coverage():
    """
    Get coverage circles for a selection.

    Expected JSON body: the /api/selection fields plus
    {
        "uniformValue": 5000,          // slider altitude, feet MSL
        "actualRange": false,          // current checkbox state
        "toggleActualRange": false     // flip actualRange before computing
    }
    """
    data = request_body()
    state = selection_from_body(data)
    settings = settings_from_body(data)

    return jsonify({
        'map': build_map_view(state, settings),
        'settings': settings.to_dict(),
    })


@app.route('/', defaults={'path': ''})
@app.route('/<path:path>')
def serve_bundle(path):
    """Serve the prebuilt page bundle, falling back to index.html."""
    if path and os.path.isfile(os.path.join(DIST_DIR, path)):
        return send_from_directory(DIST_DIR, path)
    if not os.path.isfile(os.path.join(DIST_DIR, 'index.html')):
        return error_response('Frontend bundle not found', 404)
    return send_from_directory(DIST_DIR, 'index.html')


if __name__ == '__main__':
    logger.info(f"Server is running on port {PORT}")
    app.run(debug=DEBUG, host='0.0.0.0', port=PORT)
