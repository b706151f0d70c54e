# -*- coding: utf-8 -*-
"""
Centralized Translation Manager for i18n support.

Strings are looked up by dotted key ("wizard.button.next"). A key with no
translation comes back unchanged so a missing entry is visible in the UI
instead of raising.
"""

from typing import Dict, List, Set

from PyQt5.QtCore import Qt
from utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_LANGUAGE = "en"
RTL_LANGUAGES = ("ar", "he", "fa")


class TranslationManager:
    """Singleton Translation Manager."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._current_language = DEFAULT_LANGUAGE
            cls._instance._translations: Dict[str, Dict[str, str]] = {}
            cls._instance._missing: Set[str] = set()
            cls._instance._load_translations()
        return cls._instance

    def _load_translations(self):
        from services.translations.en import EN_TRANSLATIONS
        self._translations = {
            "en": EN_TRANSLATIONS,
        }

    def available_languages(self) -> List[str]:
        return sorted(self._translations)

    def set_language(self, lang_code: str):
        if lang_code not in self._translations:
            logger.warning(f"No translations for '{lang_code}', using {DEFAULT_LANGUAGE}")
            lang_code = DEFAULT_LANGUAGE
        if self._current_language != lang_code:
            self._current_language = lang_code
            logger.info(f"Language changed to: {lang_code}")

    def get_language(self) -> str:
        return self._current_language

    def tr(self, key: str, **kwargs) -> str:
        translation = self._translations.get(self._current_language, {}).get(key)
        if translation is None:
            # Log each missing key once per session
            if key not in self._missing:
                self._missing.add(key)
                logger.debug(f"Missing translation for '{key}' ({self._current_language})")
            return key
        if kwargs:
            try:
                translation = translation.format(**kwargs)
            except (KeyError, IndexError, ValueError) as e:
                logger.warning(f"Could not format '{key}': {e}")
        return translation

    def is_rtl(self) -> bool:
        return self._current_language in RTL_LANGUAGES

    def get_layout_direction(self):
        return Qt.RightToLeft if self.is_rtl() else Qt.LeftToRight


_translator = TranslationManager()


def tr(key: str, **kwargs) -> str:
    return _translator.tr(key, **kwargs)


def set_language(lang_code: str):
    _translator.set_language(lang_code)


def get_language() -> str:
    return _translator.get_language()


def get_layout_direction():
    return _translator.get_layout_direction()
