"""
API Routes - JSON data endpoints
"""

from datetime import datetime, timezone
from flask import jsonify, current_app
from utils.decorators import locale_data_required
from utils.schema_org import generate_schema_org_data
from . import api_bp


@api_bp.route('/data/<locale>/profile')
@locale_data_required
def profile(bundle):
    """Profile section for a locale"""
    return jsonify(bundle.section('profile'))


@api_bp.route('/data/<locale>/<any(skills, experience, education, ui):section>')
@locale_data_required
def section(bundle, section):
    """Any other content section for a locale"""
    return jsonify(bundle.section(section))


@api_bp.route('/data/<locale>/schema')
@locale_data_required
def schema(bundle):
    """Schema.org ProfilePage document for a locale"""
    return jsonify(generate_schema_org_data(bundle, current_app.config['SITE_URL']))


@api_bp.route('/health')
def health():
    """Health check"""
    return jsonify({
        'status': 'ok',
        'timestamp': datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z'),
        'mode': current_app.config['MODE']
    })
