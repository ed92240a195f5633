# src/c4l/backfill/append_history.py — grow the history CSV with newly entered draws
# - new lines go right under the header, newest submission batch first
# - existing lines are kept as they are: no dedup, no re-sort
# - a header already present in the file is not repeated

from __future__ import annotations
from typing import Iterable, List, Optional

from c4l.core.dates import to_short_year_slash
from c4l.core.model import HISTORY_HEADER, SubmittedRow


def format_history_line(row: SubmittedRow) -> str:
    # lenient on purpose: the strict MM/DD/YYYY check only applies to export
    return ",".join([to_short_year_slash(row.data), *row.values()])


def update_history_text(existing: Optional[str], new_rows: Iterable[SubmittedRow]) -> str:
    existing_lines: List[str] = []
    if existing is not None and existing.strip():
        existing_lines = existing.strip().split("\n")

    has_header = bool(existing_lines) and existing_lines[0].startswith("Date")
    data_lines = existing_lines[1:] if has_header else existing_lines

    # format everything first so a bad date leaves nothing half-written
    new_lines = [format_history_line(r) for r in new_rows]

    return "\n".join([HISTORY_HEADER, *new_lines, *data_lines])
