from pathlib import Path

from streamlit.testing.v1 import AppTest

from c4l.core.config import PATHS

APP = Path(__file__).resolve().parents[1] / "app.py"


def test_page_renders_with_unreadable_history(tmp_path, monkeypatch):
    monkeypatch.setattr(PATHS, "data_dir", tmp_path)
    PATHS.internal_history.mkdir()   # a directory where the CSV should be

    at = AppTest.from_file(str(APP)).run(timeout=30)

    assert not at.exception
    assert any("histórico" in w.value for w in at.sidebar.warning)


def test_page_shows_last_recorded_date(tmp_path, monkeypatch):
    monkeypatch.setattr(PATHS, "data_dir", tmp_path)
    PATHS.internal_history.write_text("Date,N1,N2,N3,N4,N5,Cash Ball\n01/02/23,1,2,3,4,5,6", encoding="utf-8")

    at = AppTest.from_file(str(APP)).run(timeout=30)

    assert not at.exception
    assert at.sidebar.metric[0].value == "2023-01-02"
