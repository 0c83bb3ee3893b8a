"""
Assets Routes - Public files and the CNAME file
"""

import os
from flask import send_from_directory, send_file, abort, current_app
from utils.mime import content_type_for
from . import assets_bp


@assets_bp.route('/public/<path:filename>')
def public_file(filename):
    """Serve a file from the public directory; paths escaping it are not found"""
    return send_from_directory(current_app.config['PUBLIC_DIR'],
                               filename,
                               mimetype=content_type_for(filename))


@assets_bp.route('/CNAME')
def cname():
    """Custom domain file for GitHub Pages"""
    path = current_app.config['CNAME_PATH']
    if not os.path.isfile(path):
        abort(404)
    return send_file(path, mimetype='text/plain')
