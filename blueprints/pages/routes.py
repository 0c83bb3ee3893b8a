"""
Pages Routes - Profile pages per locale
"""

from flask import render_template, redirect, url_for, current_app
from extensions import locale_registry
from utils.schema_org import SCHEMA_ORG_ELEMENT_ID, render_schema_org_json
from . import pages_bp


def render_profile_page(locale):
    """Render the profile page for a locale, or 503 if its content is unavailable"""
    bundle = locale_registry.get(locale)
    if bundle is None:
        current_app.logger.warning(f"Serving page for {locale} without locale data")
        return 'Service Unavailable', 503, {'Content-Type': 'text/plain; charset=utf-8'}

    return render_template('pages/index.html',
                           lang=locale,
                           t=bundle,
                           locales=current_app.config['SUPPORTED_LOCALES'],
                           schema_org_id=SCHEMA_ORG_ELEMENT_ID,
                           schema_org_json=render_schema_org_json(
                               bundle, current_app.config['SITE_URL']))


@pages_bp.route('/')
def index():
    """Portuguese profile page"""
    return render_profile_page('pt-BR')


@pages_bp.route('/en')
@pages_bp.route('/en/')
def index_en():
    """English profile page, with or without the trailing slash"""
    return render_profile_page('en')


@pages_bp.route('/index.html')
def index_html():
    """Permanent redirect to the canonical root"""
    return redirect(url_for('pages.index'), code=301)
