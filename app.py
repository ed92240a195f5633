# app.py — Cash4Life history: enter new draws, export Excel, update the local CSV
from __future__ import annotations
import sys
from pathlib import Path

import pandas as pd
import streamlit as st


# ============ paths ============
ROOT = Path(__file__).resolve().parent
SRC  = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from c4l.cli import actions  # noqa: E402
from c4l.core.config import CFG, PATHS, load_settings, resolve_history_path  # noqa: E402
from c4l.core.errors import HistoryIOError  # noqa: E402
from c4l.core.model import SubmittedRow  # noqa: E402

st.set_page_config(page_title="Cash4Life — histórico", layout="centered")


# ============ utilities ============
def _settings():
    # loaded once per session; replaced only by an explicit import
    if "settings" not in st.session_state:
        st.session_state["settings"] = load_settings()
    return st.session_state["settings"]


def rows_from_editor(df: pd.DataFrame) -> list[SubmittedRow]:
    if df is None or df.empty:
        return []
    rows = [SubmittedRow.from_dict(rec) for rec in df.fillna("").to_dict(orient="records")]
    return [r for r in rows if r.data or r.numeros]


def show_outcome(outcome, ok_label: str) -> None:
    if outcome.is_ok:
        st.success(f"{ok_label}: {outcome.path}")
    elif outcome.is_cancelled:
        st.info("Operação cancelada.")
    else:
        st.error(f"Erro: {outcome.error}")


# ============ sidebar ============
settings = _settings()
history_path = resolve_history_path(settings)

st.sidebar.header("📄 Histórico")
st.sidebar.write("Arquivo em uso:", str(history_path))
try:
    last = actions.get_last_recorded_date(history_path)
except HistoryIOError as e:
    last = None
    st.sidebar.warning(f"Não foi possível ler o histórico: {e}")
st.sidebar.metric("Último sorteio", last or "—")

uploaded = st.sidebar.file_uploader("Selecionar anterior.csv", type=["csv"])
if uploaded is not None and st.sidebar.button("Importar", use_container_width=True):
    tmp = PATHS.data_dir / f".upload_{uploaded.name}"
    tmp.parent.mkdir(parents=True, exist_ok=True)
    tmp.write_bytes(uploaded.getvalue())
    outcome, st.session_state["settings"] = actions.import_history(tmp, PATHS.internal_history, settings)
    tmp.unlink(missing_ok=True)
    show_outcome(outcome, "Histórico importado")


# ============ entry ============
st.title("Cash4Life — novos sorteios")
st.caption("Data no formato MM/DD/YYYY; números separados por vírgula (n1,n2,n3,n4,n5,cash ball).")

editor = st.data_editor(
    pd.DataFrame([{"data": "", "numeros": ""}]),
    num_rows="dynamic",
    use_container_width=True,
    key="new_rows",
)
new_rows = rows_from_editor(editor)

target = st.text_input("Salvar planilha em", value=str(Path.cwd() / CFG.export_name))

c1, c2 = st.columns(2)
with c1:
    do_export = st.button("Exportar Excel", use_container_width=True)
with c2:
    do_update = st.button("Atualizar histórico", use_container_width=True)

if do_export:
    outcome = actions.export_results(
        new_rows, history_path,
        choose_target=lambda: Path(target) if target.strip() else None,
    )
    show_outcome(outcome, "Planilha salva")
    if outcome.is_ok:
        st.download_button("Baixar planilha", outcome.path.read_bytes(), file_name=outcome.path.name)

if do_update:
    outcome = actions.update_history(new_rows, PATHS.internal_history)
    show_outcome(outcome, "Histórico atualizado")
