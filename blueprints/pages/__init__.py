"""
Pages Blueprint - Pre-built profile pages per locale
Handles: Portuguese root page, English page, index.html redirect
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
