# src/c4l/cli/actions.py — operations the shell (Streamlit page / CLI) calls
# Every action returns an Outcome: ok / cancelled / failed.
# Core modules raise; this layer is the only one that turns exceptions into Outcome.failed.

from __future__ import annotations
from pathlib import Path
from typing import Callable, Optional, Sequence

from c4l.backfill.append_history import update_history_text
from c4l.core.config import CFG, Settings, save_settings
from c4l.core.errors import C4LError, MissingInputError
from c4l.core.export import write_results_xlsx
from c4l.core.io import (
    copy_history,
    load_history,
    read_history_text,
    records_from_submitted,
    write_history_text,
)
from c4l.core.merge import last_recorded_date, merge
from c4l.core.model import SubmittedRow
from c4l.core.outcome import Outcome

PathChooser = Callable[[], Optional[Path]]


def export_results(new_rows: Optional[Sequence[SubmittedRow]],
                   history_path: Path | None,
                   choose_target: PathChooser,
                   sheet_name: str = CFG.sheet_name) -> Outcome:
    """Stored history + new rows -> merged, sorted .xlsx at a path the user picks."""
    if not new_rows:
        return Outcome.failed(MissingInputError("no draws to export"))
    try:
        previous = load_history(history_path) if history_path else []
        incoming = records_from_submitted(new_rows)
        final = merge(previous, incoming)
        if not final:
            raise MissingInputError("nothing valid to export")

        target = choose_target()
        if target is None:
            print("[INFO] export cancelled")
            return Outcome.cancelled()

        out = write_results_xlsx(final, target, sheet_name=sheet_name)
    except (C4LError, OSError) as e:
        print(f"[ERROR] export failed: {e}")
        return Outcome.failed(e)

    print(f"[OK] exported {len(final)} draws: {out}")
    return Outcome.ok(out)


def update_history(new_rows: Optional[Sequence[SubmittedRow]], history_path: Path) -> Outcome:
    """Prepend new rows to the history CSV (no dedup, see append_history)."""
    if not new_rows:
        return Outcome.failed(MissingInputError("no draws to append"))
    try:
        existing = read_history_text(history_path)
        text = update_history_text(existing, new_rows)
        write_history_text(history_path, text)
    except (C4LError, OSError) as e:
        print(f"[ERROR] history update failed: {e}")
        return Outcome.failed(e)

    print(f"[OK] history updated with {len(new_rows)} rows: {history_path}")
    return Outcome.ok(history_path)


def get_last_recorded_date(path: Path | str | None) -> Optional[str]:
    if not path or not Path(path).exists():
        return None
    last = last_recorded_date(load_history(path))
    if last is None:
        print(f"[WARN] no valid rows in {path}")
        return None
    print(f"[INFO] last recorded date in {path}: {last}")
    return last


def import_history(selected: Path | str | None,
                   internal_path: Path,
                   settings: Settings,
                   settings_file: Path | str | None = None) -> tuple[Outcome, Settings]:
    """Copy a user-selected CSV over the internal history file and remember it."""
    if selected is None:
        return Outcome.cancelled(), settings
    try:
        dst = copy_history(selected, internal_path)
        new_settings = Settings(history_path=dst)
        save_settings(new_settings, settings_file)
    except (C4LError, OSError) as e:
        print(f"[ERROR] could not import {selected}: {e}")
        return Outcome.failed(e), settings

    print(f"[OK] history copied to: {dst}")
    return Outcome.ok(dst), new_settings


def ensure_history(internal_path: Path,
                   choose_source: PathChooser,
                   settings: Settings,
                   settings_file: Path | str | None = None) -> tuple[Outcome, Settings]:
    """Use the internal history if present, otherwise ask for one and import it."""
    if internal_path.exists():
        return Outcome.ok(internal_path), settings
    return import_history(choose_source(), internal_path, settings, settings_file)
