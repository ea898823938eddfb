"""Value kind classification shared by schema inference and validation."""

from __future__ import annotations

from typing import Any

from translation_check.constants import KIND_TEXT, KIND_TEXT_LIST
from translation_check.errors import UnsupportedValueError


def classify_value(value: Any, *, key: str, locale: str) -> str:
    if isinstance(value, str):
        return KIND_TEXT
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return KIND_TEXT_LIST
    raise UnsupportedValueError(
        f"Unknown translation type: {key} in {locale} is not a string or an array of strings: {value!r}",
        key=key,
        locale=locale,
    )
