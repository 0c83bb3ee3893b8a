"""
API Blueprint - JSON data endpoints
Handles: Locale profile data, other content sections, structured metadata, health check
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__, url_prefix='/api')

from . import routes
