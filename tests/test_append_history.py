import pytest

from c4l.backfill.append_history import format_history_line, update_history_text
from c4l.core.errors import InvalidDateError
from c4l.core.model import HISTORY_HEADER, SubmittedRow

EXISTING = HISTORY_HEADER + "\n01/02/23,1,2,3,4,5,6"


def test_new_rows_go_under_header_in_submission_order():
    rows = [
        SubmittedRow("01/02/2023", "7,8,9,10,11,12"),   # same day as the stored line
        SubmittedRow("02/03/2024", " 1, 2,3,4,5,6 "),
    ]
    out = update_history_text(EXISTING, rows).split("\n")
    assert out == [
        HISTORY_HEADER,
        "01/02/23,7,8,9,10,11,12",
        "02/03/24,1,2,3,4,5,6",
        "01/02/23,1,2,3,4,5,6",
    ]


def test_repeated_updates_accumulate_duplicates():
    row = [SubmittedRow("02/03/2024", "1,2,3,4,5,6")]
    once = update_history_text(EXISTING, row)
    twice = update_history_text(once, row)
    lines = twice.split("\n")
    assert lines.count("02/03/24,1,2,3,4,5,6") == 2
    assert lines.count(HISTORY_HEADER) == 1


def test_missing_file_gets_header():
    out = update_history_text(None, [SubmittedRow("02/03/2024", "1,2,3,4,5,6")])
    assert out == HISTORY_HEADER + "\n02/03/24,1,2,3,4,5,6"


def test_headerless_content_is_kept_whole():
    out = update_history_text("01/02/23,1,2,3,4,5,6\n", [SubmittedRow("02/03/2024", "1,2,3,4,5,6")])
    assert out.split("\n") == [HISTORY_HEADER, "02/03/24,1,2,3,4,5,6", "01/02/23,1,2,3,4,5,6"]


def test_existing_lines_keep_their_order():
    existing = HISTORY_HEADER + "\n03/01/23,1,1,1,1,1,1\n01/01/23,2,2,2,2,2,2\n"
    out = update_history_text(existing, [SubmittedRow("02/03/2024", "1,2,3,4,5,6")])
    assert out.split("\n")[2:] == ["03/01/23,1,1,1,1,1,1", "01/01/23,2,2,2,2,2,2"]


def test_update_accepts_dates_the_export_path_rejects():
    # lenient on purpose; see test_dates.test_strict_and_lenient_paths_disagree_on_iso_input
    assert format_history_line(SubmittedRow("2024-02-03", "1,2,3,4,5,6")) == "02/03/24,1,2,3,4,5,6"


def test_short_values_are_padded():
    assert format_history_line(SubmittedRow("02/03/2024", "1,2")) == "02/03/24,1,2,,,,"


def test_unparseable_date_raises():
    with pytest.raises(InvalidDateError):
        update_history_text(EXISTING, [SubmittedRow("someday", "1,2,3,4,5,6")])
