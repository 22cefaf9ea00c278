"""Domain layer - core business logic."""

from .models import DateComponents, PersonType, ResultKind, Severity, ValidationResult
from .services import Validator, validate_curp, validate_match, validate_rfc

__all__ = [
    "DateComponents",
    "PersonType",
    "ResultKind",
    "Severity",
    "ValidationResult",
    "Validator",
    "validate_curp",
    "validate_match",
    "validate_rfc",
]
