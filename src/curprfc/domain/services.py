"""Domain services - CURP and RFC validation."""

import logging
from datetime import date

from ..markup import code, strong
from .models import DateComponents, PersonType, ResultKind, Severity, ValidationResult
from .rules import (
    CURP_DATE_SLICE,
    CURP_LENGTH,
    CURP_PATTERN,
    CURP_STATE_SLICE,
    DEFAULT_MIN_YEAR,
    MATCH_PREFIX_LENGTH,
    RFC_MAX_LENGTH,
    RFC_MIN_LENGTH,
    RFC_PATTERN,
    STATE_CODES,
    is_valid_date,
    normalize,
)

logger = logging.getLogger(__name__)

CURP_STRUCTURE = "\n".join(
    [
        "**Estructura esperada:**",
        "• Posiciones 1-4: Apellidos y nombre (4 letras)",
        "• Posiciones 5-10: Fecha de nacimiento (AAMMDD)",
        "• Posición 11: Sexo (H/M)",
        "• Posiciones 12-13: Entidad federativa (2 letras)",
        "• Posiciones 14-16: Consonantes internas (3 letras)",
        "• Posiciones 17-18: Dígito verificador (2 caracteres alfanuméricos)",
    ]
)

RFC_STRUCTURE = "\n".join(
    [
        "**Estructura esperada:**",
        "• Personas Físicas (13 caracteres): 4 letras + 6 números + 3 caracteres",
        "• Personas Morales (12 caracteres): 3 letras + 6 números + 3 caracteres",
        "• Los 6 números centrales corresponden a la fecha (AAMMDD)",
        "• Los últimos caracteres son la homoclave y dígito verificador",
    ]
)


class Validator:
    """Validates CURP and RFC structure and cross-checks a CURP/RFC pair.

    Birth dates must fall between ``min_year`` and ``max_year``. Two-digit
    years up to ``max_year - 2000`` are read as 2000s, the rest as 1900s.
    ``max_year`` defaults to the current year.
    """

    def __init__(self, min_year: int = DEFAULT_MIN_YEAR, max_year: int | None = None) -> None:
        if max_year is None:
            max_year = date.today().year
        if min_year > max_year:
            raise ValueError(f"min_year {min_year} is after max_year {max_year}")
        self.min_year = min_year
        self.max_year = max_year

    @property
    def pivot(self) -> int:
        """Largest two-digit year read as 20xx; -1 reads every year as 19xx."""
        return min(max(self.max_year - 2000, -1), 99)

    def validate_curp(self, curp: str | None) -> ValidationResult:
        """Validate an 18-character CURP.

        Checks, in order: presence, length, state code, structure, birth date.
        """
        value = normalize(curp)
        logger.debug(f"Validating CURP: {value}")

        if not value:
            return self._log(
                ValidationResult(
                    kind=ResultKind.EMPTY_INPUT,
                    title="ERROR DE VALIDACIÓN",
                    message=(
                        "No se ha proporcionado una CURP para validar. "
                        "Por favor ingrese el dato requerido."
                    ),
                    severity=Severity.WARNING,
                )
            )

        if len(value) != CURP_LENGTH:
            return self._log(
                ValidationResult(
                    kind=ResultKind.WRONG_LENGTH,
                    title="FORMATO INCORRECTO",
                    message=(
                        f"La CURP proporcionada contiene {len(value)} caracteres. "
                        f"El formato requerido es de exactamente {CURP_LENGTH} "
                        "caracteres alfanuméricos."
                    ),
                    severity=Severity.DANGER,
                    document=value,
                )
            )

        state = value[CURP_STATE_SLICE]
        if state not in STATE_CODES:
            return self._log(
                ValidationResult(
                    kind=ResultKind.INVALID_STATE,
                    title="FORMATO INVÁLIDO",
                    message=(
                        f"La CURP {strong(value)} tiene un código de entidad "
                        f"federativa inválido ({code(state)}). Verifique el estado."
                    ),
                    severity=Severity.DANGER,
                    document=value,
                )
            )

        if not CURP_PATTERN.match(value):
            return self._log(
                ValidationResult(
                    kind=ResultKind.PATTERN_MISMATCH,
                    title="FORMATO INVÁLIDO",
                    message=(
                        f"La CURP {strong(value)} no cumple con la estructura "
                        f"requerida.\n\n{CURP_STRUCTURE}"
                    ),
                    severity=Severity.DANGER,
                    document=value,
                )
            )

        birth = DateComponents.from_digits(value[CURP_DATE_SLICE], self.pivot)
        if not self.is_valid_date(birth):
            return self._log(self._invalid_date("la CURP", value, birth))

        return self._log(
            ValidationResult(
                kind=ResultKind.SUCCESS,
                title="VALIDACIÓN EXITOSA",
                message=(
                    f"La CURP {strong(value)} cumple con todos los criterios de "
                    "validación establecidos por el RENAPO y es estructuralmente "
                    "correcta."
                ),
                severity=Severity.SUCCESS,
                document=value,
            )
        )

    def validate_rfc(self, rfc: str | None) -> ValidationResult:
        """Validate a 12 (Persona Moral) or 13 (Persona Física) character RFC."""
        value = normalize(rfc)
        logger.debug(f"Validating RFC: {value}")

        if not value:
            return self._log(
                ValidationResult(
                    kind=ResultKind.EMPTY_INPUT,
                    title="ERROR DE VALIDACIÓN",
                    message=(
                        "No se ha proporcionado un RFC para validar. "
                        "Por favor ingrese el dato requerido."
                    ),
                    severity=Severity.WARNING,
                )
            )

        if not RFC_MIN_LENGTH <= len(value) <= RFC_MAX_LENGTH:
            return self._log(
                ValidationResult(
                    kind=ResultKind.WRONG_LENGTH,
                    title="LONGITUD INCORRECTA",
                    message=(
                        f"El RFC proporcionado contiene {len(value)} caracteres. "
                        f"Los RFC válidos deben contener entre {RFC_MIN_LENGTH} y "
                        f"{RFC_MAX_LENGTH} caracteres ({RFC_MIN_LENGTH} para "
                        f"personas morales, {RFC_MAX_LENGTH} para personas físicas)."
                    ),
                    severity=Severity.DANGER,
                    document=value,
                )
            )

        match = RFC_PATTERN.match(value)
        if not match:
            return self._log(
                ValidationResult(
                    kind=ResultKind.PATTERN_MISMATCH,
                    title="FORMATO INVÁLIDO",
                    message=(
                        f"El RFC {strong(value)} no cumple con la estructura "
                        f"requerida por el SAT.\n\n{RFC_STRUCTURE}"
                    ),
                    severity=Severity.DANGER,
                    document=value,
                )
            )

        birth = DateComponents.from_digits(match.group("date"), self.pivot)
        if not self.is_valid_date(birth):
            return self._log(self._invalid_date("el RFC", value, birth))

        person_type = PersonType.MORAL if len(value) == RFC_MIN_LENGTH else PersonType.FISICA
        return self._log(
            ValidationResult(
                kind=ResultKind.SUCCESS,
                title="VALIDACIÓN EXITOSA",
                message=(
                    f"El RFC {strong(value)} cumple con todos los criterios de "
                    f"validación del SAT y corresponde a una {strong(person_type.label)}."
                ),
                severity=Severity.SUCCESS,
                document=value,
                person_type=person_type,
            )
        )

    def validate_match(self, curp: str | None, rfc: str | None) -> ValidationResult:
        """Check whether a CURP and an RFC belong to the same person.

        Both codes start with the surname/name initials followed by the
        birth date (AAMMDD), so their first ten characters must agree.
        """
        curp_value = normalize(curp)
        rfc_value = normalize(rfc)
        document = f"{curp_value} / {rfc_value}"

        if not curp_value or not rfc_value:
            return self._log(
                ValidationResult(
                    kind=ResultKind.INCOMPLETE_INPUT,
                    title="DATOS INCOMPLETOS",
                    message=(
                        "Para realizar la validación de coincidencia se requieren "
                        "tanto la CURP como el RFC. Por favor complete ambos campos."
                    ),
                    severity=Severity.WARNING,
                    document=document,
                )
            )

        if len(curp_value) < CURP_LENGTH or len(rfc_value) < RFC_MIN_LENGTH:
            return self._log(
                ValidationResult(
                    kind=ResultKind.INSUFFICIENT_LENGTH,
                    title="VALIDACIÓN PENDIENTE",
                    message=(
                        "No es posible realizar la validación de coincidencia debido "
                        "a que los documentos no tienen la longitud correcta. "
                        f"Verifique que la CURP tenga {CURP_LENGTH} caracteres y el "
                        f"RFC al menos {RFC_MIN_LENGTH}."
                    ),
                    severity=Severity.WARNING,
                    document=document,
                )
            )

        curp_prefix = curp_value[:MATCH_PREFIX_LENGTH]
        rfc_prefix = rfc_value[:MATCH_PREFIX_LENGTH]

        if curp_prefix == rfc_prefix:
            message = "\n".join(
                [
                    "**RESULTADO:** Los documentos corresponden a la misma persona física.",
                    "",
                    "**ANÁLISIS COMPARATIVO:**",
                    f"• CURP: {code(curp_value)}",
                    f"• RFC: {code(rfc_value)}",
                    "",
                    f"**SEGMENTO ANALIZADO:** {code(curp_prefix)}",
                    "",
                    "✓ La coincidencia en los primeros 10 caracteres confirma que "
                    "ambos documentos fueron expedidos para la misma persona, "
                    "basándose en los datos de identificación personal (apellidos, "
                    "nombre y fecha de nacimiento).",
                ]
            )
            return self._log(
                ValidationResult(
                    kind=ResultKind.MATCH_CONFIRMED,
                    title="COINCIDENCIA VERIFICADA",
                    message=message,
                    severity=Severity.SUCCESS,
                    document=document,
                )
            )

        message = "\n".join(
            [
                "**RESULTADO:** Los documentos NO corresponden a la misma persona física.",
                "",
                "**ANÁLISIS COMPARATIVO:**",
                f"• CURP: {code(curp_value)} → {code(curp_prefix)}",
                f"• RFC: {code(rfc_value)} → {code(rfc_prefix)}",
                "",
                "**DISCREPANCIAS ENCONTRADAS:**",
                "La diferencia en los primeros 10 caracteres indica que los "
                "documentos fueron expedidos para personas diferentes, con "
                "variaciones en apellidos, nombre o fecha de nacimiento.",
                "",
                "⚠️ **RECOMENDACIÓN:** Verifique la correcta captura de los datos o "
                "solicite al titular la presentación de documentos oficiales "
                "actualizados.",
            ]
        )
        return self._log(
            ValidationResult(
                kind=ResultKind.MATCH_DISCREPANCY,
                title="DISCREPANCIA DETECTADA",
                message=message,
                severity=Severity.DANGER,
                document=document,
            )
        )

    def is_valid_date(self, birth: DateComponents) -> bool:
        return is_valid_date(
            birth.year, birth.month, birth.day, min_year=self.min_year, max_year=self.max_year
        )

    def _invalid_date(self, label: str, value: str, birth: DateComponents) -> ValidationResult:
        message = "\n".join(
            [
                f"La fecha {birth} en {label} {strong(value)} no es válida.",
                "",
                "**Restricciones:**",
                f"• Año: Debe estar entre {self.min_year} y {self.max_year}.",
                "• Mes: Debe ser entre 1 y 12.",
                "• Día: Debe corresponder al número de días del mes (máximo 31, "
                "30 o 28/29 para febrero en años bisiestos).",
            ]
        )
        return ValidationResult(
            kind=ResultKind.INVALID_DATE,
            title="FECHA INVÁLIDA",
            message=message,
            severity=Severity.DANGER,
            document=value,
        )

    @staticmethod
    def _log(result: ValidationResult) -> ValidationResult:
        logger.debug(f"{result.kind.value}: {result.document or '<empty>'}")
        return result


def validate_curp(curp: str | None) -> ValidationResult:
    return Validator().validate_curp(curp)


def validate_rfc(rfc: str | None) -> ValidationResult:
    return Validator().validate_rfc(rfc)


def validate_match(curp: str | None, rfc: str | None) -> ValidationResult:
    return Validator().validate_match(curp, rfc)
