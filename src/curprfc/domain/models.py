"""Domain models."""

from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    """How a result should be presented."""

    WARNING = "warning"
    DANGER = "danger"
    SUCCESS = "success"


class ResultKind(str, Enum):
    """Outcome of a single validation."""

    SUCCESS = "success"
    EMPTY_INPUT = "empty_input"
    WRONG_LENGTH = "wrong_length"
    INVALID_STATE = "invalid_state"
    PATTERN_MISMATCH = "pattern_mismatch"
    INVALID_DATE = "invalid_date"
    INCOMPLETE_INPUT = "incomplete_input"
    INSUFFICIENT_LENGTH = "insufficient_length"
    MATCH_CONFIRMED = "match_confirmed"
    MATCH_DISCREPANCY = "match_discrepancy"


class PersonType(str, Enum):
    """RFC taxpayer type, decided by length."""

    MORAL = "moral"  # 12 characters, legal entity
    FISICA = "fisica"  # 13 characters, individual

    @property
    def label(self) -> str:
        return "Persona Moral" if self is PersonType.MORAL else "Persona Física"


@dataclass(frozen=True)
class ValidationResult:
    """Result of validating a CURP, an RFC or a CURP/RFC pair.

    ``message`` uses the markup subset from :mod:`curprfc.markup`.
    """

    kind: ResultKind
    title: str
    message: str
    severity: Severity
    document: str = ""
    person_type: PersonType | None = None

    @property
    def success(self) -> bool:
        return self.severity is Severity.SUCCESS

    def to_dict(self) -> dict:
        data = {
            "kind": self.kind.value,
            "severity": self.severity.value,
            "title": self.title,
            "message": self.message,
            "document": self.document,
        }
        if self.person_type is not None:
            data["person_type"] = self.person_type.label
        return data


@dataclass(frozen=True)
class DateComponents:
    """Birth date read from an AAMMDD segment."""

    year: int
    month: int
    day: int

    @classmethod
    def from_digits(cls, digits: str, pivot: int) -> "DateComponents":
        """Parse AAMMDD, mapping years up to ``pivot`` into the 2000s."""
        yy = int(digits[0:2])
        century = 2000 if yy <= pivot else 1900
        return cls(year=century + yy, month=int(digits[2:4]), day=int(digits[4:6]))

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"
