"""
Data Management Module - Loads locale content from YAML files
Each locale lives in data/<locale>/ with one file per section
"""

import os

import yaml
from pydantic import ValidationError

from models import LocaleBundle, SECTION_NAMES


class LocaleDataError(Exception):
    """Raised when a locale's content cannot be loaded or has the wrong shape"""

    def __init__(self, locale, message):
        super().__init__(f"{locale}: {message}")
        self.locale = locale
        self.message = message


def validate_section(locale, section, data):
    """Reject section documents that are not mappings"""
    if not isinstance(data, dict):
        kind = 'empty document' if data is None else type(data).__name__
        raise LocaleDataError(locale, f"section '{section}' must be an object, got {kind}")
    return data


def load_section(data_dir, locale, section):
    """Read and validate one YAML section file"""
    path = os.path.join(data_dir, locale, f'{section}.yaml')
    if not os.path.exists(path):
        raise LocaleDataError(locale, f"missing file {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LocaleDataError(locale, f"invalid YAML in {path}: {e}") from e

    return validate_section(locale, section, data)


def load_locale_bundle(data_dir, locale, sections=SECTION_NAMES):
    """
    Load every section for a locale into a typed bundle

    Args:
        data_dir (str): Root content directory
        locale (str): Locale tag, e.g. 'pt-BR'
        sections (tuple): Section names to load

    Returns:
        LocaleBundle: Immutable bundle

    Raises:
        LocaleDataError: On any missing, malformed or invalid section
    """
    raw = {section: load_section(data_dir, locale, section) for section in sections}
    try:
        return LocaleBundle(locale=locale, **raw)
    except ValidationError as e:
        raise LocaleDataError(locale, f"invalid content: {e.error_count()} validation error(s)\n{e}") from e
