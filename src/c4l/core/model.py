# -*- coding: utf-8 -*-
# src/c4l/core/model.py

from __future__ import annotations
from dataclasses import dataclass, fields
from enum import Enum
from typing import List, Optional

HISTORY_HEADER = "Date,N1,N2,N3,N4,N5,Cash Ball"
RESULT_COLUMNS = ["Data", "n1", "n2", "n3", "n4", "n5", "cash ball"]
VALUE_COUNT = 6


@dataclass(frozen=True)
class Record:
    """
    One draw, keyed by its canonical date.

    - date: YYYY-MM-DD
    - n1..n5, cash_ball: trimmed text exactly as entered (never parsed as int)
    """
    date: str
    n1: str = ""
    n2: str = ""
    n3: str = ""
    n4: str = ""
    n5: str = ""
    cash_ball: str = ""

    @property
    def values(self) -> List[str]:
        return [self.n1, self.n2, self.n3, self.n4, self.n5, self.cash_ball]


RECORD_FIELDS = [f.name for f in fields(Record)]


@dataclass
class SubmittedRow:
    """A row typed into the entry form: a date and one comma-joined string of six values."""
    data: str
    numeros: str

    def values(self) -> List[str]:
        parts = [p.strip() for p in (self.numeros or "").split(",")]
        parts = (parts + [""] * VALUE_COUNT)[:VALUE_COUNT]
        return parts

    @classmethod
    def from_dict(cls, d: dict) -> "SubmittedRow":
        return cls(data=str(d.get("data") or "").strip(), numeros=str(d.get("numeros") or "").strip())


class Column(Enum):
    """Recognized history headers, each tagged with the Record field it fills."""
    DATE = ("Date", "date")
    N1 = ("N1", "n1")
    N2 = ("N2", "n2")
    N3 = ("N3", "n3")
    N4 = ("N4", "n4")
    N5 = ("N5", "n5")
    CASH_BALL = ("Cash Ball", "cash_ball")

    def __init__(self, header: str, field_name: str):
        self.header = header
        self.field_name = field_name

    @classmethod
    def from_header(cls, token: str) -> Optional["Column"]:
        # unknown headers are ignored by the decoder, not an error
        return _BY_HEADER.get(token.strip())


_BY_HEADER = {c.header: c for c in Column}
