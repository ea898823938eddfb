"""Structural comparison of a candidate translation against the base schema."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from translation_check.constants import KIND_TEXT_LIST
from translation_check.validation.kinds import classify_value


@dataclass(frozen=True)
class KindMismatch:
    observed: str
    expected: str


@dataclass(frozen=True)
class LengthMismatch:
    observed: int
    expected: int


@dataclass(frozen=True)
class ValidationReport:
    locale: str
    ok: bool
    missing_keys: List[str] = field(default_factory=list)
    extra_keys: List[str] = field(default_factory=list)
    wrong_kinds: Dict[str, KindMismatch] = field(default_factory=dict)
    wrong_lengths: Dict[str, LengthMismatch] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "locale": self.locale,
            "ok": self.ok,
            "missing_keys": list(self.missing_keys),
            "extra_keys": list(self.extra_keys),
            "wrong_kinds": {
                key: {"observed": item.observed, "expected": item.expected}
                for key, item in self.wrong_kinds.items()
            },
            "wrong_lengths": {
                key: {"observed": item.observed, "expected": item.expected}
                for key, item in self.wrong_lengths.items()
            },
        }


def _compare_shared_keys(
    schema: Dict[str, str],
    base: Dict[str, Any],
    candidate: Dict[str, Any],
    locale: str,
    wrong_kinds: Dict[str, KindMismatch],
    wrong_lengths: Dict[str, LengthMismatch],
) -> None:
    for key, expected_kind in schema.items():
        if key not in candidate:
            # Reported as missing only.
            continue
        value = candidate[key]
        observed_kind = classify_value(value, key=key, locale=locale)
        if observed_kind != expected_kind:
            wrong_kinds[key] = KindMismatch(observed=observed_kind, expected=expected_kind)
        elif expected_kind == KIND_TEXT_LIST and len(value) != len(base[key]):
            wrong_lengths[key] = LengthMismatch(observed=len(value), expected=len(base[key]))


def validate_translation(
    schema: Dict[str, str],
    base: Dict[str, Any],
    candidate: Dict[str, Any],
    locale: str,
) -> ValidationReport:
    """Compare ``candidate`` to ``schema``; list lengths are taken from ``base``."""
    missing_keys = [key for key in schema if key not in candidate]
    extra_keys = [key for key in candidate if key not in schema]
    wrong_kinds: Dict[str, KindMismatch] = {}
    wrong_lengths: Dict[str, LengthMismatch] = {}
    _compare_shared_keys(schema, base, candidate, locale, wrong_kinds, wrong_lengths)

    ok = not (missing_keys or extra_keys or wrong_kinds or wrong_lengths)
    return ValidationReport(
        locale=locale,
        ok=ok,
        missing_keys=missing_keys,
        extra_keys=extra_keys,
        wrong_kinds=wrong_kinds,
        wrong_lengths=wrong_lengths,
    )


def raise_if_invalid(report: ValidationReport) -> None:
    if report.ok:
        return
    details: List[str] = []
    details.extend(f"- {key}: missing" for key in report.missing_keys)
    details.extend(f"- {key}: not defined in base" for key in report.extra_keys)
    details.extend(
        f"- {key}: expected {item.expected}, got {item.observed}" for key, item in report.wrong_kinds.items()
    )
    details.extend(
        f"- {key}: expected {item.expected} entries, got {item.observed}"
        for key, item in report.wrong_lengths.items()
    )
    detail_text = "\n".join(details)
    raise ValueError(f"Validation failed for {report.locale}:\n{detail_text}")
