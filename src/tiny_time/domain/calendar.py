"""Proleptic Gregorian helpers that work beyond the ``datetime`` range."""

from __future__ import annotations

from typing import Tuple

SECONDS_PER_DAY = 86_400

# 1970-01-01 counted from 0000-03-01, the start of a 400-year era.
_EPOCH_SHIFT = 719_468
_DAYS_PER_ERA = 146_097


def civil_from_days(days: int) -> Tuple[int, int, int]:
    """Return ``(year, month, day)`` for a day count relative to 1970-01-01."""
    days += _EPOCH_SHIFT
    era = days // _DAYS_PER_ERA
    day_of_era = days - era * _DAYS_PER_ERA
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36_524 - day_of_era // 146_096
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def format_year(year: int) -> str:
    if year < 0:
        return f"-{-year:04d}"
    return f"{year:04d}"
