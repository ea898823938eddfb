"""Validate every locale in a translations directory against the base locale."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from translation_check.config import Settings, resolve_settings
from translation_check.errors import TranslationInputError
from translation_check.report import format_report, format_run_summary
from translation_check.store import discover_locale_names, load_translation
from translation_check.validation import ValidationReport, infer_schema, validate_translation


@dataclass(frozen=True)
class RunResult:
    ok: bool
    base_locale: str
    translations_dir: Path
    reports: List[ValidationReport] = field(default_factory=list)

    @property
    def failed_reports(self) -> List[ValidationReport]:
        return [report for report in self.reports if not report.ok]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "base_locale": self.base_locale,
            "translations_dir": str(self.translations_dir),
            "checked": len(self.reports),
            "failed": len(self.failed_reports),
            "reports": [report.to_dict() for report in self.reports],
        }


def run_validation(settings: Settings) -> RunResult:
    """Check all candidates; raises ``TranslationInputError`` on broken input."""
    base = load_translation(settings.translations_dir, settings.base_locale, settings.extension)
    schema = infer_schema(base, locale=settings.base_locale)

    reports: List[ValidationReport] = []
    for name in discover_locale_names(settings.translations_dir, settings.extension):
        if name == settings.base_locale:
            continue
        candidate = load_translation(settings.translations_dir, name, settings.extension)
        reports.append(validate_translation(schema, base, candidate, name))

    return RunResult(
        ok=all(report.ok for report in reports),
        base_locale=settings.base_locale,
        translations_dir=settings.translations_dir,
        reports=reports,
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Check that all translations share the structure of the base locale.")
    parser.add_argument("--translations-dir", default=None, help="Directory with one <locale>.json per locale")
    parser.add_argument("--base-locale", default=None, help="Locale used as ground truth (default: english)")
    parser.add_argument("--extension", default=None, help="Translation file extension (default: .json)")
    parser.add_argument("--format", default="text", choices=["text", "json"])
    parser.add_argument("--output", default="", help="Optional path for a JSON run report")
    args = parser.parse_args()

    settings = resolve_settings(
        translations_dir=args.translations_dir,
        base_locale=args.base_locale,
        extension=args.extension,
    )
    try:
        result = run_validation(settings)
    except TranslationInputError as exc:
        raise SystemExit(str(exc)) from exc

    payload = result.to_dict()
    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")

    if args.format == "json":
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        for report in result.failed_reports:
            print(format_report(report, base_locale=result.base_locale), file=sys.stderr)
        print(
            format_run_summary(
                ok=result.ok,
                checked=len(result.reports),
                failed=len(result.failed_reports),
                base_locale=result.base_locale,
            ),
            file=sys.stderr,
        )

    if not result.ok:
        raise SystemExit(2)


if __name__ == "__main__":
    main()
