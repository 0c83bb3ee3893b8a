"""
Extensions Module - Centralized initialization of Flask extensions
Decouples extensions from the main app.py to avoid circular imports
and enable better testing.
"""

from flask import current_app

from utils.data import LocaleDataError, load_locale_bundle


class LocaleRegistry:
    """Locale bundles loaded once at startup, read-only afterwards"""

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        state = {'bundles': {}, 'errors': []}
        app.extensions['locale_registry'] = state

        data_dir = app.config['DATA_DIR']
        for locale in app.config['SUPPORTED_LOCALES']:
            try:
                state['bundles'][locale] = load_locale_bundle(
                    data_dir, locale, app.config['LOCALE_SECTIONS'])
                app.logger.info(f"✓ Loaded locale data: {locale}")
            except LocaleDataError as e:
                state['errors'].append(str(e))
                app.logger.error(f"✗ Failed to load locale data: {e}")

    @property
    def _state(self):
        return current_app.extensions['locale_registry']

    @property
    def bundles(self):
        return dict(self._state['bundles'])

    @property
    def errors(self):
        return list(self._state['errors'])

    def is_supported(self, locale):
        return locale in current_app.config['SUPPORTED_LOCALES']

    def get(self, locale):
        """Bundle for a locale, or None if it failed to load"""
        return self._state['bundles'].get(locale)


# Initialize extensions without binding to app
locale_registry = LocaleRegistry()

__all__ = ['locale_registry', 'LocaleRegistry']
