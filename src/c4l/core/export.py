# src/c4l/core/export.py — sorted Records -> Excel (one sheet, fixed columns)
from __future__ import annotations
from pathlib import Path
from typing import List, Sequence

import pandas as pd
from openpyxl.utils import get_column_letter

from c4l.core.dates import to_display
from c4l.core.errors import HistoryIOError, MissingInputError
from c4l.core.model import RESULT_COLUMNS, Record

DEFAULT_SHEET = "Resultados"
COLUMN_WIDTHS = [15, 8, 8, 8, 8, 8, 10]


def build_results_frame(records: Sequence[Record]) -> pd.DataFrame:
    rows: List[list[str]] = [[to_display(r.date), *r.values] for r in records]
    return pd.DataFrame(rows, columns=RESULT_COLUMNS, dtype=object)


def write_results_xlsx(records: Sequence[Record], path: str | Path,
                       sheet_name: str = DEFAULT_SHEET) -> Path:
    """Write the records (already merged and sorted) to an .xlsx workbook."""
    if not records:
        raise MissingInputError("no records to export")

    df = build_results_frame(records)
    out = Path(path)
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        with pd.ExcelWriter(out, engine="openpyxl") as xw:
            df.to_excel(xw, index=False, sheet_name=sheet_name)
            ws = xw.book[sheet_name]
            for j, w in enumerate(COLUMN_WIDTHS, 1):
                ws.column_dimensions[get_column_letter(j)].width = w
    except OSError as e:
        raise HistoryIOError(out, e) from e
    return out
