# src/c4l/core/io.py
from __future__ import annotations
import csv
import io
import shutil
from pathlib import Path
from typing import Iterable, List

import pandas as pd

from c4l.core.dates import DateFormat, to_canonical
from c4l.core.errors import HistoryIOError
from c4l.core.model import RECORD_FIELDS, Column, Record, SubmittedRow


def decode_history(text: str) -> List[Record]:
    """
    History CSV text -> Records, in file order (not sorted).

    - header tokens go through Column; unknown columns are skipped for every row
    - values are trimmed; cells missing from a short line read as ""
    - the date must be strict MM/DD/YY; rows whose date does not parse are dropped silently
    """
    if not text or not text.strip():
        return []

    raw = pd.read_csv(
        io.StringIO(text.strip()),
        sep=",", header=0, dtype=str, keep_default_na=False,
        index_col=False, quoting=csv.QUOTE_NONE, skip_blank_lines=True,
    ).fillna("")

    df = pd.DataFrame(index=raw.index)
    for name in raw.columns:
        col = Column.from_header(str(name))
        if col is not None:
            df[col.field_name] = raw[name].astype(str).str.strip()

    if "date" not in df.columns:
        return []
    df["date"] = df["date"].map(lambda v: to_canonical(v, DateFormat.SHORT_YEAR))
    df = df[df["date"].notna()].reindex(columns=RECORD_FIELDS, fill_value="")
    return [Record(**row) for row in df.to_dict(orient="records")]


def records_from_submitted(rows: Iterable[SubmittedRow]) -> List[Record]:
    """Entry-form rows -> Records. Dates must be strict MM/DD/YYYY, other rows are dropped."""
    out: List[Record] = []
    for row in rows:
        date = to_canonical((row.data or "").strip(), DateFormat.LONG_YEAR)
        if date is None:
            continue
        n1, n2, n3, n4, n5, cash_ball = row.values()
        out.append(Record(date=date, n1=n1, n2=n2, n3=n3, n4=n4, n5=n5, cash_ball=cash_ball))
    return out


def read_history_text(path: str | Path) -> str | None:
    """Return the file's text, or None when it does not exist."""
    p = Path(path)
    if not p.exists():
        return None
    try:
        return p.read_text(encoding="utf-8")
    except OSError as e:
        raise HistoryIOError(p, e) from e


def write_history_text(path: str | Path, text: str) -> Path:
    p = Path(path)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8", newline="")
    except OSError as e:
        raise HistoryIOError(p, e) from e
    return p


def load_history(path: str | Path) -> List[Record]:
    text = read_history_text(path)
    return [] if text is None else decode_history(text)


def copy_history(src: str | Path, dst: str | Path) -> Path:
    """Copy a user-selected CSV over the internal history file."""
    s, d = Path(src), Path(dst)
    try:
        d.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(s, d)
    except OSError as e:
        raise HistoryIOError(s, e) from e
    return d
