"""Read translation files from a locale directory."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from translation_check.constants import DEFAULT_EXTENSION
from translation_check.errors import TranslationParseError, TranslationReadError


def translation_path(translations_dir: Path, name: str, extension: str = DEFAULT_EXTENSION) -> Path:
    return Path(translations_dir) / f"{name}{extension}"


def discover_locale_names(translations_dir: Path, extension: str = DEFAULT_EXTENSION) -> List[str]:
    """Return sorted locale names (file names without ``extension``)."""
    directory = Path(translations_dir)
    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        raise TranslationReadError(f"Unable to read {directory}: {exc}", path=directory) from exc
    names = [
        entry.name[: -len(extension)]
        for entry in entries
        if entry.is_file() and entry.name.endswith(extension) and len(entry.name) > len(extension)
    ]
    return sorted(names)


def load_translation(translations_dir: Path, name: str, extension: str = DEFAULT_EXTENSION) -> Dict[str, Any]:
    path = translation_path(translations_dir, name, extension)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TranslationReadError(f"Unable to read {path}: {exc}", path=path) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise TranslationParseError(f"Unable to parse {path} as JSON: {exc}", path=path) from exc

    if not isinstance(data, dict):
        raise TranslationParseError(
            f"Unable to parse {path} as JSON: top-level value must be an object, got {type(data).__name__}",
            path=path,
        )
    return data
