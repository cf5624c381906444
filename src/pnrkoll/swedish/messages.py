"""
User-facing text for personnummer validation.

Catalogues are keyed by language and by the error kind / gender value, so
the error taxonomy stays independent of the wording.
"""

SUPPORTED_LANGUAGES = ("en", "sv")

ERROR_MESSAGES = {
    "en": {
        "format": "Invalid format: a personnummer must consist of 10 or 12 digits.",
        "date": "Invalid date: the date part ({pattern}) is not a valid date.",
        "checksum": "Invalid check digit: the Luhn check failed.",
    },
    "sv": {
        "format": "Fel format: Personnumret måste bestå av 10 eller 12 siffror.",
        "date": "Ogiltigt datum: Datumdelen ({pattern}) är inte giltig.",
        "checksum": "Ogiltig kontrollsiffra: Luhn-kontrollen misslyckades.",
    },
}

GENDER_LABELS = {
    "en": {"M": "Male", "F": "Female"},
    "sv": {"M": "Man", "F": "Kvinna"},
}

CONSOLE_TEXT = {
    "en": {
        "banner": "Personnummer check",
        "formats": "Accepted formats:",
        "format_list": "YYMMDD-XXXX, YYMMDDXXXX, YYYYMMDD-XXXX, YYYYMMDDXXXX (+ allowed)",
        "prompt": "Enter personnummer (or '{quit}' to quit): ",
        "empty": "Error: Empty input.",
        "valid": "✔ The personnummer is valid",
        "invalid": "✖ The personnummer is invalid",
        "normalized": "Normalized format: {value}",
        "birth_date": "Date of birth: {value}",
        "gender": "Gender (heuristic): {value}",
    },
    "sv": {
        "banner": "Personnummerkontroll",
        "formats": "Giltiga format:",
        "format_list": "YYMMDD-XXXX, YYMMDDXXXX, YYYYMMDD-XXXX, YYYYMMDDXXXX (+ tillåts)",
        "prompt": "Ange personnummer (eller '{quit}' för att avsluta): ",
        "empty": "Fel: Tom inmatning.",
        "valid": "✔ Personnumret är giltigt",
        "invalid": "✖ Personnumret är ogiltigt",
        "normalized": "Normaliserat format: {value}",
        "birth_date": "Födelsedatum: {value}",
        "gender": "Kön (heuristik): {value}",
    },
}


def _catalogue(catalogues: dict, language: str) -> dict:
    try:
        return catalogues[language]
    except KeyError:
        raise ValueError(
            f"Unsupported language {language!r}, expected one of {SUPPORTED_LANGUAGES}"
        ) from None


def error_message(kind: str, language: str = "en", **params) -> str:
    """Message for an error kind ('format', 'date' or 'checksum')."""
    kind = getattr(kind, "value", kind)
    template = _catalogue(ERROR_MESSAGES, language)[kind]
    if kind == "date":
        params.setdefault("pattern", "YYMMDD")
    return template.format(**params)


def gender_label(gender: str, language: str = "en") -> str:
    return _catalogue(GENDER_LABELS, language)[getattr(gender, "value", gender)]


def console_text(key: str, language: str = "en", **params) -> str:
    return _catalogue(CONSOLE_TEXT, language)[key].format(**params)
