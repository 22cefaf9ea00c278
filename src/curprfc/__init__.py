"""Structural validation of Mexican CURP and RFC codes."""

from .domain import (
    PersonType,
    ResultKind,
    Severity,
    ValidationResult,
    Validator,
    validate_curp,
    validate_match,
    validate_rfc,
)
from .domain.rules import is_valid_date, normalize

__all__ = [
    "PersonType",
    "ResultKind",
    "Severity",
    "ValidationResult",
    "Validator",
    "is_valid_date",
    "normalize",
    "validate_curp",
    "validate_match",
    "validate_rfc",
]
