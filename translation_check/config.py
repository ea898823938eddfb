"""Run settings resolved from CLI values, environment and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from translation_check.constants import (
    DEFAULT_BASE_LOCALE,
    DEFAULT_EXTENSION,
    DEFAULT_TRANSLATIONS_DIR,
)


@dataclass(frozen=True)
class Settings:
    translations_dir: Path
    base_locale: str
    extension: str = DEFAULT_EXTENSION


def _pick(cli_value: str | None, env_name: str, default: str) -> str:
    value = (cli_value or "").strip()
    if value:
        return value
    env_value = os.getenv(env_name, "").strip()
    return env_value or default


def normalize_extension(extension: str) -> str:
    ext = (extension or "").strip()
    if not ext:
        return DEFAULT_EXTENSION
    return ext if ext.startswith(".") else f".{ext}"


def resolve_settings(
    translations_dir: str | None = None,
    base_locale: str | None = None,
    extension: str | None = None,
) -> Settings:
    resolved_dir = _pick(translations_dir, "TRANSLATION_CHECK_DIR", DEFAULT_TRANSLATIONS_DIR)
    resolved_base = _pick(base_locale, "TRANSLATION_CHECK_BASE_LOCALE", DEFAULT_BASE_LOCALE)
    resolved_ext = normalize_extension(_pick(extension, "TRANSLATION_CHECK_EXTENSION", DEFAULT_EXTENSION))
    return Settings(
        translations_dir=Path(resolved_dir),
        base_locale=resolved_base,
        extension=resolved_ext,
    )
