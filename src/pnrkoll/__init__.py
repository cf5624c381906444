"""
pnrkoll - Swedish personnummer check

Validates and normalizes Swedish personal identity numbers:
- Accepts 10- and 12-digit forms with or without '-' / '+' separator
- Resolves the century of two-digit years from the separator and today's date
- Verifies the Luhn check digit
- Derives the birth date and a gender heuristic
"""

__version__ = "0.1.0"
