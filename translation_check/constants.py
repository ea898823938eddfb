"""Shared constants for translation checks."""

KIND_TEXT = "string"
KIND_TEXT_LIST = "string[]"
VALUE_KINDS = {KIND_TEXT, KIND_TEXT_LIST}

DEFAULT_TRANSLATIONS_DIR = "translations"
DEFAULT_BASE_LOCALE = "english"
DEFAULT_EXTENSION = ".json"
