"""
Decorators Module - Request guards for locale data endpoints
"""

from functools import wraps
from flask import jsonify, current_app

from extensions import locale_registry


def locale_data_required(f):
    """Resolve the <locale> URL argument to a loaded bundle

    Unsupported tags get a 404. Supported tags whose content failed to load
    at startup get a 503 JSON error instead of crashing the handler.
    """
    @wraps(f)
    def decorated_function(locale, *args, **kwargs):
        if not locale_registry.is_supported(locale):
            return jsonify({
                'error': 'Not Found',
                'message': f"Unsupported locale '{locale}'"
            }), 404

        bundle = locale_registry.get(locale)
        if bundle is None:
            current_app.logger.warning(f"Locale data unavailable for {locale}")
            return jsonify({
                'error': 'Service Unavailable',
                'message': f"Profile data for '{locale}' failed to load at startup"
            }), 503

        return f(bundle, *args, **kwargs)
    return decorated_function
