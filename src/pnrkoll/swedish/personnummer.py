"""
Swedish personnummer (personal identity number) validation and normalization.

Format: YYMMDD-XXXX or YYYYMMDD-XXXX
- First 6/8 digits: birth date
- 7th-9th digits: birth number (odd for male, even for female)
- 10th digit: Luhn checksum over the 10-digit form

The separator doubles as a century marker: '+' means the bearer is 100 years
or older, '-' (or no separator) means younger than 100.
"""

import logging
import unicodedata
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Union

from pnrkoll.swedish.messages import error_message

logger = logging.getLogger(__name__)

# 100 years at 365.25 days per year
CENTENARIAN_DAYS = 36525

CENTURY_BASES = (1800, 1900, 2000)


class Separator(str, Enum):
    """Separator between date and serial, also the century marker."""

    NONE = ""
    PLUS = "+"
    HYPHEN = "-"


class ErrorKind(str, Enum):
    """Stage at which validation failed."""

    FORMAT = "format"
    DATE = "date"
    CHECKSUM = "checksum"


class Gender(str, Enum):
    """Gender heuristic derived from the serial parity."""

    MALE = "M"
    FEMALE = "F"


@dataclass(frozen=True)
class ParsedPersonnummer:
    """Digits and separator extracted from raw input."""

    digits: str
    separator: Separator

    @property
    def date_fragment(self) -> str:
        return self.digits[:8] if len(self.digits) == 12 else self.digits[:6]

    @property
    def last10(self) -> str:
        return self.digits[-10:]


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one personnummer."""

    is_valid: bool
    normalized: str = ""
    birth_date: Optional[date] = None
    gender_hint: Optional[Gender] = None
    error_kind: Optional[ErrorKind] = None
    error_message: str = ""

    @classmethod
    def valid(
        cls, normalized: str, birth_date: date, gender_hint: Gender
    ) -> "ValidationResult":
        return cls(
            is_valid=True,
            normalized=normalized,
            birth_date=birth_date,
            gender_hint=gender_hint,
        )

    @classmethod
    def invalid(cls, kind: ErrorKind, message: str) -> "ValidationResult":
        return cls(is_valid=False, error_kind=kind, error_message=message)


def parse_personnummer(raw: Optional[str]) -> Union[ParsedPersonnummer, ErrorKind]:
    """
    Extract digits and separator from raw input.

    The separator is '+' if the text contains a '+' anywhere, otherwise '-'
    if it contains a '-', otherwise none. Every other non-digit character is
    discarded. Decimal digits from other scripts are folded to ASCII.

    Returns ErrorKind.FORMAT unless exactly 10 or 12 digits remain.
    """
    text = "" if raw is None else str(raw).strip()

    if "+" in text:
        separator = Separator.PLUS
    elif "-" in text:
        separator = Separator.HYPHEN
    else:
        separator = Separator.NONE

    digits = "".join(str(unicodedata.decimal(ch)) for ch in text if ch.isdecimal())

    if len(digits) not in (10, 12):
        return ErrorKind.FORMAT

    return ParsedPersonnummer(digits=digits, separator=separator)


def century_candidates(yy: int, month: int, day: int) -> dict[int, date]:
    """
    Build the full dates for a two-digit year in each candidate century.

    Keys are the century bases (1800, 1900, 2000). Combinations that are not
    real dates (29 February in a non-leap century year) are left out.
    """
    candidates = {}
    for base in CENTURY_BASES:
        try:
            candidates[base] = date(base + yy, month, day)
        except ValueError:
            continue
    return candidates


def resolve_century(
    candidates: dict[int, date], separator: Separator, today: date
) -> Optional[date]:
    """
    Pick the birth date among century candidates.

    With '+', the most recent candidate at least 100 years before today wins.
    Otherwise the most recent candidate not after today wins. When nothing
    qualifies the 1900-based candidate is used; None if that date does not
    exist.
    """
    if separator is Separator.PLUS:
        qualifying = [
            d for d in candidates.values() if (today - d).days >= CENTENARIAN_DAYS
        ]
    else:
        qualifying = [d for d in candidates.values() if d <= today]

    if qualifying:
        return max(qualifying)

    logger.debug(f"No century qualifies for separator {separator.value!r}, using 1900s")
    return candidates.get(1900)


def resolve_birth_date(
    fragment: str, separator: Separator, today: date
) -> Optional[date]:
    """
    Convert a YYYYMMDD or YYMMDD fragment to a birth date.

    Returns None when the fragment is not a valid calendar date.
    """
    if len(fragment) == 8:
        try:
            return date(int(fragment[:4]), int(fragment[4:6]), int(fragment[6:8]))
        except ValueError:
            return None

    if len(fragment) != 6:
        return None

    candidates = century_candidates(
        int(fragment[:2]), int(fragment[2:4]), int(fragment[4:6])
    )
    if not candidates:
        return None

    return resolve_century(candidates, separator, today)


def luhn_checksum(digits: str) -> int:
    """
    Calculate Luhn checksum digit.

    The Luhn algorithm:
    1. Double every second digit from the left, starting with the first
    2. If doubling results in > 9, subtract 9
    3. Sum all digits
    4. Checksum is (10 - (sum % 10)) % 10
    """
    total = 0
    for i, digit in enumerate(digits):
        d = int(digit)
        if i % 2 == 0:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return (10 - (total % 10)) % 10


def is_valid_checksum(last10: str) -> bool:
    """Check the 10th digit against the Luhn checksum of the first nine."""
    if len(last10) != 10 or not last10.isdigit():
        return False
    return luhn_checksum(last10[:9]) == int(last10[9])


def gender_hint(last10: str) -> Gender:
    """9th digit: odd = male, even = female."""
    return Gender.MALE if int(last10[8]) % 2 == 1 else Gender.FEMALE


def format_normalized(birth_date: date, last10: str, separator: Separator) -> str:
    """Format as YYYYMMDD<sep>XXXX, using '-' when no separator was given."""
    sep = separator.value or Separator.HYPHEN.value
    return (
        f"{birth_date.year:04d}{birth_date.month:02d}{birth_date.day:02d}"
        f"{sep}{last10[6:10]}"
    )


def validate_personnummer(
    raw: Optional[str],
    today: Optional[date] = None,
    language: str = "en",
) -> ValidationResult:
    """
    Validate and normalize a Swedish personnummer.

    Accepts formats:
    - YYMMDD-XXXX
    - YYMMDDXXXX
    - YYYYMMDD-XXXX
    - YYYYMMDDXXXX
    - '+' in place of '-' for people aged 100 or more

    Args:
        raw: Free-form input text
        today: Reference date for century resolution (default: date.today())
        language: Language for error messages ('en' or 'sv')

    Returns:
        ValidationResult; malformed input never raises.
    """
    parsed = parse_personnummer(raw)
    if isinstance(parsed, ErrorKind):
        logger.debug("Rejected personnummer: format")
        return ValidationResult.invalid(parsed, error_message(parsed.value, language))

    if today is None:
        today = date.today()

    fragment = parsed.date_fragment
    birth_date = resolve_birth_date(fragment, parsed.separator, today)
    if birth_date is None:
        logger.debug("Rejected personnummer: date")
        pattern = "YYYYMMDD" if len(fragment) == 8 else "YYMMDD"
        return ValidationResult.invalid(
            ErrorKind.DATE, error_message(ErrorKind.DATE.value, language, pattern=pattern)
        )

    last10 = parsed.last10
    if not is_valid_checksum(last10):
        logger.debug("Rejected personnummer: checksum")
        return ValidationResult.invalid(
            ErrorKind.CHECKSUM, error_message(ErrorKind.CHECKSUM.value, language)
        )

    return ValidationResult.valid(
        normalized=format_normalized(birth_date, last10, parsed.separator),
        birth_date=birth_date,
        gender_hint=gender_hint(last10),
    )


def format_personnummer(
    pnr: str,
    separator: Optional[str] = None,
    today: Optional[date] = None,
) -> Optional[str]:
    """
    Format personnummer as YYYYMMDD-XXXX.

    Args:
        pnr: The personnummer to format
        separator: Replacement separator ('' for the compact 12-digit form);
            None keeps the resolved one
        today: Reference date for century resolution

    Returns:
        Formatted personnummer or None if invalid
    """
    result = validate_personnummer(pnr, today=today)
    if not result.is_valid:
        return None
    if separator is None:
        return result.normalized
    return f"{result.normalized[:8]}{separator}{result.normalized[-4:]}"


def generate_personnummer(
    birth_date: date, gender: Gender = Gender.MALE, birth_number: int = 1
) -> str:
    """
    Generate a valid personnummer for testing purposes.

    Args:
        birth_date: Date of birth
        gender: Gender.MALE or Gender.FEMALE
        birth_number: Birth number (0-999)

    Returns:
        A valid personnummer in YYYYMMDDXXXX format
    """
    date_part = f"{birth_date.year:04d}{birth_date.month:02d}{birth_date.day:02d}"

    # Adjust birth number for gender (odd for male, even for female)
    if gender is Gender.MALE and birth_number % 2 == 0:
        birth_number += 1
    elif gender is Gender.FEMALE and birth_number % 2 == 1:
        birth_number += 1

    birth_str = f"{birth_number % 1000:03d}"

    # Calculate checksum on 10-digit format
    check_digits = date_part[2:] + birth_str
    checksum = luhn_checksum(check_digits)

    return f"{date_part}{birth_str}{checksum}"
