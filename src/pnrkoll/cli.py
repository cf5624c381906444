#!/usr/bin/env python3
"""
pnrkoll - Command Line Entry Point

Interactive personnummer check, or batch check of numbers given as arguments.

Usage:
    pnrkoll
    pnrkoll 811218-9876 19121218+9870
    pnrkoll --lang en --today 2025-03-01 8112189876
"""

import argparse
import logging
import sys
from datetime import date
from typing import Optional, TextIO

from pnrkoll.config import settings
from pnrkoll.swedish.messages import SUPPORTED_LANGUAGES, console_text, gender_label
from pnrkoll.swedish.personnummer import ValidationResult, validate_personnummer

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _write_result(
    stdout: TextIO, result: ValidationResult, language: str
) -> None:
    if result.is_valid:
        stdout.write(console_text("valid", language) + "\n")
        stdout.write(console_text("normalized", language, value=result.normalized) + "\n")
        stdout.write(
            console_text("birth_date", language, value=result.birth_date.isoformat())
            + "\n"
        )
        stdout.write(
            console_text(
                "gender", language, value=gender_label(result.gender_hint, language)
            )
            + "\n"
        )
    else:
        stdout.write(console_text("invalid", language) + "\n")
        stdout.write(result.error_message + "\n")


def run_session(
    stdin: TextIO,
    stdout: TextIO,
    language: str = "sv",
    today: Optional[date] = None,
    quit_command: str = "q",
) -> int:
    """
    Run the interactive prompt loop until the quit command or end of input.

    Returns the number of personnummer that were checked.
    """
    stdout.write(console_text("banner", language) + "\n")
    stdout.write(console_text("formats", language) + "\n")
    stdout.write(console_text("format_list", language) + "\n\n")

    checked = 0
    while True:
        stdout.write(console_text("prompt", language, quit=quit_command))
        stdout.flush()

        line = stdin.readline()
        if not line:
            stdout.write("\n")
            break

        text = line.strip()
        if text.casefold() == quit_command.casefold():
            break

        if not text:
            stdout.write(console_text("empty", language) + "\n\n")
            continue

        result = validate_personnummer(text, today=today, language=language)
        checked += 1
        _write_result(stdout, result, language)
        stdout.write("\n")

    logger.info(f"Session ended after {checked} checks")
    return checked


def check_numbers(
    numbers: list[str],
    stdout: TextIO,
    language: str = "sv",
    today: Optional[date] = None,
) -> bool:
    """Check each number and print one line per result. True if all are valid."""
    all_valid = True
    for number in numbers:
        result = validate_personnummer(number, today=today, language=language)
        if result.is_valid:
            label = gender_label(result.gender_hint, language)
            stdout.write(
                f"{number}\t{result.normalized}\t"
                f"{result.birth_date.isoformat()}\t{label}\n"
            )
        else:
            all_valid = False
            stdout.write(f"{number}\t{result.error_message}\n")
    return all_valid


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not a date (YYYY-MM-DD): {value}") from None


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pnrkoll",
        description="Validate and normalize Swedish personnummer",
    )

    parser.add_argument(
        "numbers",
        nargs="*",
        help="Personnummer to check (interactive session when omitted)",
    )
    parser.add_argument(
        "--lang",
        choices=SUPPORTED_LANGUAGES,
        default=settings.language,
        help=f"Language for messages (default: {settings.language})",
    )
    parser.add_argument(
        "--today",
        type=_parse_date,
        default=settings.reference_date,
        help="Reference date for century resolution (default: today)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )

    args = parser.parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # Make sure Swedish characters come out right on any console
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")

    if args.numbers:
        all_valid = check_numbers(
            args.numbers, sys.stdout, language=args.lang, today=args.today
        )
        return 0 if all_valid else 1

    try:
        run_session(
            sys.stdin,
            sys.stdout,
            language=args.lang,
            today=args.today,
            quit_command=settings.quit_command,
        )
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.stdout.write("\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
