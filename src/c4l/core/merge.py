# src/c4l/core/merge.py
# previous + incoming -> one record per date, ascending

from __future__ import annotations
from dataclasses import asdict
from typing import Iterable, List, Optional

import pandas as pd

from c4l.core.model import RECORD_FIELDS, Record


def to_frame(records: Iterable[Record]) -> pd.DataFrame:
    return pd.DataFrame([asdict(r) for r in records], columns=RECORD_FIELDS, dtype=object)


def merge(previous: Iterable[Record], incoming: Iterable[Record]) -> List[Record]:
    """
    Insert every previous record, then every incoming record, keyed by date.
    A later insertion with the same date replaces the stored record entirely,
    so incoming wins over previous (and the last of several incoming wins).
    Output is sorted by date; ISO strings sort lexicographically.
    """
    df = to_frame([*previous, *incoming])
    if df.empty:
        return []
    df = df.drop_duplicates(subset=["date"], keep="last")
    df = df.sort_values("date", kind="mergesort").reset_index(drop=True)
    return [Record(**row) for row in df.to_dict(orient="records")]


def last_recorded_date(records: Iterable[Record]) -> Optional[str]:
    dates = [r.date for r in records]
    return max(dates) if dates else None
