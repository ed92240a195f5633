# src/c4l/cli/cli.py — command line front end for the history actions
#
# Usage:
#   c4l export --draw "02/03/2024=7,8,9,10,11,12" --out resultados.xlsx
#   c4l update --draw "02/03/2024=7,8,9,10,11,12"
#   c4l last-date [--history data/anterior.csv]
#   c4l path [--set data/anterior.csv]
#   c4l import ~/Downloads/anterior.csv
#
# Exit codes: 0 ok / 1 cancelled / 2 failed

from __future__ import annotations
import argparse
import sys
from pathlib import Path
from typing import List

from c4l.cli import actions
from c4l.core.config import (
    CFG,
    PATHS,
    get_history_path,
    load_settings,
    resolve_history_path,
    set_history_path,
)
from c4l.core.model import SubmittedRow
from c4l.core.outcome import Outcome, Status

EXIT_CODES = {Status.OK: 0, Status.CANCELLED: 1, Status.FAILED: 2}


def parse_draw(s: str) -> SubmittedRow:
    """'MM/DD/YYYY=n1,n2,n3,n4,n5,cb' -> SubmittedRow"""
    if "=" not in s:
        raise argparse.ArgumentTypeError(f"expected DATE=n1,...,cb but got {s!r}")
    data, numeros = s.split("=", 1)
    return SubmittedRow(data=data.strip(), numeros=numeros)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="c4l", description="Cash4Life draw history")
    ap.add_argument("--settings", default=None, help="settings.json (default: data dir)")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p = sub.add_parser("export", help="merge history + new draws into an Excel file")
    p.add_argument("--draw", action="append", type=parse_draw, default=[])
    p.add_argument("--out", default=None, help=f"target .xlsx (default: {CFG.export_name})")
    p.add_argument("--history", default=None)

    p = sub.add_parser("update", help="prepend new draws to the history CSV")
    p.add_argument("--draw", action="append", type=parse_draw, default=[])

    p = sub.add_parser("last-date", help="latest draw date in a history CSV")
    p.add_argument("--history", default=None)

    p = sub.add_parser("path", help="show or set the history path")
    p.add_argument("--set", dest="new_path", default=None)

    p = sub.add_parser("import", help="copy a CSV into the internal history location")
    p.add_argument("source")
    return ap


def _report(outcome: Outcome) -> int:
    if outcome.is_ok:
        print(str(outcome.path) if outcome.path else "")
    elif outcome.is_failed:
        print(f"[ERROR] {outcome.error}", file=sys.stderr)
    return EXIT_CODES[outcome.status]


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings(args.settings)

    if args.cmd == "export":
        history = Path(args.history) if args.history else resolve_history_path(settings)
        out = Path(args.out or CFG.export_name)
        return _report(actions.export_results(args.draw, history, lambda: out))

    if args.cmd == "update":
        return _report(actions.update_history(args.draw, PATHS.internal_history))

    if args.cmd == "last-date":
        history = Path(args.history) if args.history else resolve_history_path(settings)
        last = actions.get_last_recorded_date(history)
        if last is None:
            return 1
        print(last)
        return 0

    if args.cmd == "path":
        if args.new_path:
            settings = set_history_path(settings, args.new_path, args.settings)
        current = get_history_path(settings)
        print(str(current) if current else "")
        return 0 if current else 1

    if args.cmd == "import":
        outcome, _ = actions.import_history(Path(args.source), PATHS.internal_history, settings, args.settings)
        return _report(outcome)

    return 2


if __name__ == "__main__":
    sys.exit(main())
