"""Schema inference and structural validation."""

from .kinds import classify_value
from .schema import infer_schema
from .validator import (
    KindMismatch,
    LengthMismatch,
    ValidationReport,
    raise_if_invalid,
    validate_translation,
)

__all__ = [
    "classify_value",
    "infer_schema",
    "KindMismatch",
    "LengthMismatch",
    "ValidationReport",
    "raise_if_invalid",
    "validate_translation",
]
