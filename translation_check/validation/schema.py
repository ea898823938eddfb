"""Schema inference from the base translation."""

from __future__ import annotations

from typing import Any, Dict

from translation_check.validation.kinds import classify_value


def infer_schema(document: Dict[str, Any], *, locale: str) -> Dict[str, str]:
    """Map every key of ``document`` to its value kind.

    Raises ``UnsupportedValueError`` on the first value that is neither a
    string nor a list of strings; a schema built from a malformed base cannot
    be trusted.
    """
    return {key: classify_value(value, key=key, locale=locale) for key, value in document.items()}
