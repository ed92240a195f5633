# -*- coding: utf-8 -*-
# src/c4l/core/dates.py
# - strict conversions (history decode / submitted rows / display)
# - lenient short-year conversion, used only when appending to the history file

from __future__ import annotations
from enum import Enum

import pandas as pd

from c4l.core.errors import InvalidDateError


class DateFormat(str, Enum):
    SHORT_YEAR = "%m/%d/%y"   # history file (01/02/23)
    LONG_YEAR = "%m/%d/%Y"    # entry form (01/02/2023)
    ISO = "%Y-%m-%d"          # canonical key
    DISPLAY = "%d/%m/%Y"      # spreadsheet


def _strict(raw: object, fmt: DateFormat) -> pd.Timestamp | None:
    if raw is None:
        return None
    s = str(raw)
    if not s:
        return None
    ts = pd.to_datetime(s, format=fmt.value, exact=True, errors="coerce")
    if pd.isna(ts):
        return None
    # strptime takes "1/2/23" for %m/%d/%y; fixed-width fields only
    if ts.strftime(fmt.value) != s:
        return None
    return ts


def to_canonical(raw: object, fmt: DateFormat) -> str | None:
    """Read raw strictly as fmt and return YYYY-MM-DD, or None if it does not fit.

    Partial matches are rejected: "01/02/2023" is not a SHORT_YEAR date and
    "01/02/23" is not a LONG_YEAR date. Month and day must be two digits, so
    "1/2/23" fits neither. Two-digit years follow the strptime pivot
    (69-99 -> 19xx, 00-68 -> 20xx).
    """
    ts = _strict(raw, fmt)
    return None if ts is None else ts.strftime(DateFormat.ISO.value)


def is_canonical(value: object) -> bool:
    return _strict(value, DateFormat.ISO) is not None


def to_display(canonical: str) -> str:
    """YYYY-MM-DD -> DD/MM/YYYY"""
    ts = _strict(canonical, DateFormat.ISO)
    if ts is None:
        raise InvalidDateError(f"not a canonical date: {canonical!r}")
    return ts.strftime(DateFormat.DISPLAY.value)


def from_display(display: str) -> str | None:
    """DD/MM/YYYY -> YYYY-MM-DD (strict inverse of to_display)"""
    return to_canonical(display, DateFormat.DISPLAY)


def to_short_year_slash(raw: object) -> str:
    """Lenient: any date a generic parser understands -> MM/DD/YY.

    Unlike to_canonical this does not insist on one format, so values that
    the strict paths would drop (ISO dates, "2/3/2024", timestamps) still land
    in the history file. Timezone-aware input is read in UTC.
    """
    s = "" if raw is None else str(raw).strip()
    ts = pd.to_datetime(s, errors="coerce") if s else pd.NaT
    if pd.isna(ts):
        raise InvalidDateError(f"unparseable date: {raw!r}")
    if ts.tzinfo is not None:
        ts = ts.tz_convert("UTC")
    return ts.strftime(DateFormat.SHORT_YEAR.value)
