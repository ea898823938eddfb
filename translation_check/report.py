"""Human-readable rendering of validation reports."""

from __future__ import annotations

from typing import List

from translation_check.validation.validator import ValidationReport


def _section(header: str, lines: List[str]) -> List[str]:
    return [header, "", *lines, ""]


def format_report(report: ValidationReport, *, base_locale: str) -> str:
    if report.ok:
        return ""
    locale = report.locale
    out: List[str] = []
    if report.missing_keys:
        out += _section(
            f"The following keys are missing in {locale}:",
            [f"  {key}" for key in report.missing_keys],
        )
    if report.extra_keys:
        out += _section(
            f"The following keys are defined in {locale}, but are not known in {base_locale}:",
            [f"  {key}" for key in report.extra_keys],
        )
    if report.wrong_kinds:
        out += _section(
            f"The following keys in {locale} are not the correct type:",
            [
                f"  {key} should be {item.expected} but instead was {item.observed}"
                for key, item in report.wrong_kinds.items()
            ],
        )
    if report.wrong_lengths:
        out += _section(
            f"The following keys in {locale} have the wrong number of entries:",
            [
                f"  {key} should have {item.expected} entries, but instead has {item.observed}"
                for key, item in report.wrong_lengths.items()
            ],
        )
    return "\n".join(out)


def format_run_summary(*, ok: bool, checked: int, failed: int, base_locale: str) -> str:
    if not ok:
        return f"Failed validation checks ({failed} of {checked} locales differ from {base_locale})"
    return f"All {checked} locales match {base_locale}"
