"""Swedish personnummer validation, normalization and message catalogues."""

from pnrkoll.swedish.personnummer import (
    validate_personnummer,
    ValidationResult,
    ParsedPersonnummer,
    Separator,
    ErrorKind,
    Gender,
    parse_personnummer,
    century_candidates,
    resolve_century,
    resolve_birth_date,
    luhn_checksum,
    is_valid_checksum,
    gender_hint,
    format_normalized,
    format_personnummer,
    generate_personnummer,
    CENTENARIAN_DAYS,
)
from pnrkoll.swedish.messages import (
    error_message,
    gender_label,
    console_text,
    SUPPORTED_LANGUAGES,
)

__all__ = [
    # Personnummer
    "validate_personnummer",
    "ValidationResult",
    "ParsedPersonnummer",
    "Separator",
    "ErrorKind",
    "Gender",
    "parse_personnummer",
    "century_candidates",
    "resolve_century",
    "resolve_birth_date",
    "luhn_checksum",
    "is_valid_checksum",
    "gender_hint",
    "format_normalized",
    "format_personnummer",
    "generate_personnummer",
    "CENTENARIAN_DAYS",
    # Messages
    "error_message",
    "gender_label",
    "console_text",
    "SUPPORTED_LANGUAGES",
]
