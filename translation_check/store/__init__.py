"""Locale file discovery and loading."""

from .loader import discover_locale_names, load_translation, translation_path

__all__ = ["discover_locale_names", "load_translation", "translation_path"]
