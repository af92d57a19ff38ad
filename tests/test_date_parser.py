"""Tests for the format-trying date parser."""

from datetime import date

import pytest

from grinvoice.invoice.date_parser import is_date, parse_date


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("3/15/2024", date(2024, 3, 15)),
        ("03-15-2024", date(2024, 3, 15)),
        ("3/15/24", date(2024, 3, 15)),
        ("12-01-99", date(1999, 12, 1)),
        ("May 3, 2024", date(2024, 5, 3)),
        ("MAY 3 2024", date(2024, 5, 3)),
        ("january 15, 2024", date(2024, 1, 15)),
        ("Jan 15 2024", date(2024, 1, 15)),
        ("Sep 1, 2023", date(2023, 9, 1)),
    ],
)
def test_parse_date_accepts_supported_formats(text: str, expected: date) -> None:
    assert parse_date(text) == expected


@pytest.mark.parametrize(
    "text",
    ["hello", "", "99/99/9999", "12.05.2024", "1,200.00", "3/15/2024 paid", "Total", "May"],
)
def test_parse_date_returns_none_for_non_dates(text: str) -> None:
    assert parse_date(text) is None


def test_parse_date_never_raises_on_non_string() -> None:
    assert parse_date(None) is None  # type: ignore[arg-type]


def test_is_date() -> None:
    assert is_date("4/1/2024")
    assert not is_date("4/1")
