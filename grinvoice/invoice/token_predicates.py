"""Token classification predicates shared by the mergers and strategies."""

import re

# Numeric-date separators: comma, period, hyphen, slash
DATE_SEPARATORS = frozenset({",", ".", "-", "/"})

MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)
# "may" is both a full name and an abbreviation
MONTH_ABBREVIATIONS = ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec")
MONTH_WORDS = frozenset(MONTH_NAMES + MONTH_ABBREVIATIONS)

# A digit run optionally preceded by a single "O" misread for "0"
_DIGIT_RUN = re.compile(r"O?\d+", re.ASCII)
_AMOUNT = re.compile(r"\d+,?\d*\.\d\d", re.ASCII)
_DIGIT = re.compile(r"\d", re.ASCII)


def contains_digit(text: str) -> bool:
    """Return True if text holds at least one digit (decimal-number merger operand)."""
    return _DIGIT.search(text) is not None


def is_digit_run(text: str) -> bool:
    """Return True for a whole-token digit run such as "15", "2024" or "O5"."""
    return _DIGIT_RUN.fullmatch(text) is not None


def is_decimal_point(text: str) -> bool:
    return text == "."


def is_comma(text: str) -> bool:
    return text == ","


def is_date_separator(text: str) -> bool:
    return text in DATE_SEPARATORS


def is_month_word(text: str) -> bool:
    """Return True for a case-insensitive month name or 3-letter abbreviation."""
    return text.lower() in MONTH_WORDS


def is_amount(text: str) -> bool:
    """Return True for a money amount with exactly two decimals, e.g. "1,200.00"."""
    return _AMOUNT.fullmatch(text) is not None


def letter_o_to_zero(text: str) -> str:
    """Replace every capital letter O with the digit 0."""
    return text.replace("O", "0")
