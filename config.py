"""
Configuration module for the ARTCC Transceiver Map.
Defines the upstream data source, map defaults, and coverage slider settings.
"""

import os

# vNAS data API endpoint (proxied to get around browser CORS restrictions)
ARTCC_API_URL = 'https://data-api.vnas.vatsim.net/api/artccs/'

# Server settings
PORT = int(os.getenv('PORT', '3000'))
DEBUG = os.getenv('FLASK_DEBUG', '0') == '1'

# Prebuilt frontend bundle served for every non-API path
DIST_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'dist')

# Headers added to every response
CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Methods': 'GET, POST, OPTIONS',
    'Access-Control-Allow-Headers': 'Content-Type',
}

# Position dropdown value meaning "every transceiver in the facility"
ALL_TRANSCEIVERS = 'ALL_TRANSCEIVERS'

# Uniform range slider (altitude in feet MSL)
DEFAULT_UNIFORM_VALUE = 5000
UNIFORM_VALUE_MIN = 0
UNIFORM_VALUE_MAX = 30000
UNIFORM_VALUE_STEP = 100

# Map defaults
FALLBACK_MAP_CENTER = (37.7749, -122.4194)  # San Francisco
MAP_ZOOM = 6
TILE_URL = 'https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png'
