"""Fatal input errors that abort a whole validation run."""

from __future__ import annotations

from pathlib import Path


class TranslationInputError(ValueError):
    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class TranslationReadError(TranslationInputError):
    """Translation file or directory could not be read."""


class TranslationParseError(TranslationInputError):
    """Translation file is not a JSON object."""


class UnsupportedValueError(TranslationInputError):
    """A value is neither a string nor a list of strings."""

    def __init__(self, message: str, *, key: str, locale: str) -> None:
        super().__init__(message)
        self.key = key
        self.locale = locale
