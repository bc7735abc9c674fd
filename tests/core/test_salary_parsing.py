from __future__ import annotations

import pytest

from jobbrowser.core import parse_salary


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("$90,000", 90000),
        ("90k-120k", 90120),
        ("$90,000–$120,000", 90000120000),
        ("USD 75000 per year", 75000),
        ("Competitive", 0),
        ("", 0),
        (None, 0),
    ],
)
def test_parse_salary_strips_non_digits(text, expected):
    assert parse_salary(text) == expected


def test_parse_salary_oversized_digit_run_is_zero():
    assert parse_salary("9" * 10_000) == 0
