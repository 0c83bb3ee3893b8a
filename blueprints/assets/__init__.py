"""
Assets Blueprint - Static file delivery
Handles: Files under the public directory, the CNAME file
"""

from flask import Blueprint

assets_bp = Blueprint('assets', __name__, url_prefix='')

from . import routes
