"""
Unit tests for message catalogues.
"""

import pytest

from pnrkoll.swedish.messages import (
    CONSOLE_TEXT,
    ERROR_MESSAGES,
    GENDER_LABELS,
    SUPPORTED_LANGUAGES,
    console_text,
    error_message,
    gender_label,
)
from pnrkoll.swedish.personnummer import ErrorKind, Gender


class TestCatalogues:
    """Every language covers the same keys."""

    @pytest.mark.parametrize("catalogue", [ERROR_MESSAGES, GENDER_LABELS, CONSOLE_TEXT])
    def test_languages_complete(self, catalogue):
        assert set(catalogue) == set(SUPPORTED_LANGUAGES)
        keys = [set(catalogue[language]) for language in SUPPORTED_LANGUAGES]
        assert all(k == keys[0] for k in keys)

    def test_error_kinds_covered(self):
        for language in SUPPORTED_LANGUAGES:
            assert set(ERROR_MESSAGES[language]) == {kind.value for kind in ErrorKind}


class TestErrorMessage:
    def test_accepts_enum_and_string(self):
        assert error_message(ErrorKind.CHECKSUM) == error_message("checksum")

    def test_format_mentions_digit_count(self):
        assert "10 or 12 digits" in error_message(ErrorKind.FORMAT)
        assert "10 eller 12 siffror" in error_message(ErrorKind.FORMAT, "sv")

    def test_date_pattern(self):
        assert "(YYYYMMDD)" in error_message(ErrorKind.DATE, pattern="YYYYMMDD")
        assert "(YYMMDD)" in error_message(ErrorKind.DATE)

    def test_unknown_language(self):
        with pytest.raises(ValueError, match="Unsupported language"):
            error_message(ErrorKind.FORMAT, "de")


class TestLabels:
    def test_gender_labels(self):
        assert gender_label(Gender.MALE, "sv") == "Man"
        assert gender_label(Gender.FEMALE, "sv") == "Kvinna"
        assert gender_label(Gender.FEMALE, "en") == "Female"

    def test_console_text_params(self):
        assert "'q'" in console_text("prompt", "sv", quit="q")
        assert console_text("normalized", "en", value="X") == "Normalized format: X"
