"""Salary text parsing shared by the salary filter and salary sorts."""

from __future__ import annotations

import re

_NON_DIGITS = re.compile(r"[^0-9]")


def parse_salary(salary: str | None) -> int:
    """Return the integer formed by every digit in ``salary``.

    Digits are concatenated, so ``"90k-120k"`` parses to ``90120`` rather
    than either bound. Absent, empty or digit-free text parses to ``0``.
    """
    if not salary:
        return 0
    digits = _NON_DIGITS.sub("", salary)
    if not digits:
        return 0
    try:
        return int(digits)
    except ValueError:
        # int() refuses digit runs beyond the interpreter's conversion limit.
        return 0
