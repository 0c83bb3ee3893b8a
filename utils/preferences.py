"""
Preferences Module - Language and theme state for the profile page

Models the page's client-side state as an explicit object:
- PreferenceStore holds the active language and dark-mode flag
- persistence goes through an injected StorageAdapter (browser local storage
  in production, MemoryStorage in tests)
- effects keep a Document in sync: the lang attribute, the 'dark' class on
  the root element, and the Schema.org script contents
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, Protocol, Set

from .schema_org import SCHEMA_ORG_ELEMENT_ID, render_schema_org_json

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES = ('pt-BR', 'en')
DEFAULT_LANGUAGE = 'en'
LANG_STORAGE_KEY = 'lang'
DARK_MODE_STORAGE_KEY = 'darkMode'
DARK_CLASS = 'dark'


class StorageAdapter(Protocol):
    """Key/value persistence with local-storage semantics"""

    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...


class MemoryStorage:
    """Dict-backed storage adapter"""

    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)


class Element:
    def __init__(self, element_id: str):
        self.id = element_id
        self.text_content = ''


class Document:
    """The parts of the page the store writes to"""

    def __init__(self, lang: str = '', element_ids=(SCHEMA_ORG_ELEMENT_ID,)):
        self.lang = lang
        self.class_list: Set[str] = set()
        self._elements = {element_id: Element(element_id) for element_id in element_ids}

    def get_element_by_id(self, element_id: str) -> Optional[Element]:
        return self._elements.get(element_id)


@dataclass(frozen=True)
class PreferenceState:
    language: str
    dark_mode: bool


def _read(storage: StorageAdapter, key: str) -> Optional[str]:
    try:
        return storage.get_item(key)
    except Exception as e:
        logger.debug(f"Storage read failed for '{key}': {e}")
        return None


def _write(storage: StorageAdapter, key: str, value: str) -> None:
    try:
        storage.set_item(key, value)
    except Exception as e:
        logger.debug(f"Storage write failed for '{key}': {e}")


def detect_language(storage: StorageAdapter, path: str = '/', browser_language: str = '') -> str:
    """
    Resolve the initial language

    Order: persisted tag, then a /en path prefix, then a Portuguese browser
    language, then the default.

    Example:
        >>> detect_language(MemoryStorage(), '/', 'pt-BR')
        'pt-BR'
        >>> detect_language(MemoryStorage(), '/', 'fr')
        'en'
    """
    saved = _read(storage, LANG_STORAGE_KEY)
    if saved in SUPPORTED_LANGUAGES:
        return saved

    if (path or '').startswith('/en'):
        return 'en'

    if (browser_language or '').startswith('pt'):
        return 'pt-BR'

    return DEFAULT_LANGUAGE


def detect_dark_mode(storage: StorageAdapter, prefers_dark: bool = False) -> bool:
    """Persisted theme wins; otherwise follow the system preference"""
    saved = _read(storage, DARK_MODE_STORAGE_KEY)
    if saved:
        return saved == 'true'
    return bool(prefers_dark)


class PreferenceStore:
    """Active language and theme, with persistence and document effects"""

    def __init__(self, bundles, storage: StorageAdapter, document: Document,
                 site_url: str, path: str = '/', browser_language: str = '',
                 prefers_dark: bool = False):
        self.bundles = bundles
        self.storage = storage
        self.document = document
        self.site_url = site_url
        self._language = detect_language(storage, path, browser_language)
        self._dark_mode = detect_dark_mode(storage, prefers_dark)
        self._effects: List[Callable[[], None]] = []

        self.document.lang = self._language
        self.effect(self._sync_theme)
        self.effect(self._sync_language)

    @property
    def language(self) -> str:
        return self._language

    @property
    def dark_mode(self) -> bool:
        return self._dark_mode

    @property
    def state(self) -> PreferenceState:
        return PreferenceState(language=self._language, dark_mode=self._dark_mode)

    def t(self):
        """Active locale bundle"""
        return self.bundles[self._language]

    def effect(self, callback: Callable[[], None]) -> None:
        """Run callback now and after every state change"""
        self._effects.append(callback)
        callback()

    def set_language(self, language: str) -> None:
        if language not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language: {language}")
        self._language = language
        _write(self.storage, LANG_STORAGE_KEY, language)
        self.document.lang = language
        self._notify()

    def toggle_theme(self) -> bool:
        self._dark_mode = not self._dark_mode
        _write(self.storage, DARK_MODE_STORAGE_KEY, 'true' if self._dark_mode else 'false')
        self._notify()
        return self._dark_mode

    def _notify(self) -> None:
        for callback in self._effects:
            callback()

    def _sync_theme(self) -> None:
        if self._dark_mode:
            self.document.class_list.add(DARK_CLASS)
        else:
            self.document.class_list.discard(DARK_CLASS)

    def _sync_language(self) -> None:
        self.document.lang = self._language
        element = self.document.get_element_by_id(SCHEMA_ORG_ELEMENT_ID)
        bundle = self.bundles.get(self._language)
        if element is not None and bundle is not None:
            element.text_content = render_schema_org_json(bundle, self.site_url)
