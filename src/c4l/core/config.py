from __future__ import annotations
import json
import os
from dataclasses import dataclass, replace
from dotenv import load_dotenv
from pathlib import Path

from c4l.core.errors import HistoryIOError

load_dotenv()

ROOT = Path(__file__).resolve().parents[3]

@dataclass
class Paths:
    root: Path = ROOT
    data_dir: Path = Path(os.getenv("C4L_DATA_DIR", str(ROOT / "data")))

    @property
    def internal_history(self) -> Path:
        return self.data_dir / CFG.history_name

    @property
    def settings_file(self) -> Path:
        return self.data_dir / "settings.json"

@dataclass
class AppCfg:
    history_name: str = os.getenv("C4L_HISTORY_NAME", "anterior.csv")
    sheet_name: str = os.getenv("C4L_SHEET_NAME", "Resultados")
    export_name: str = os.getenv("C4L_EXPORT_NAME", "resultados.xlsx")

CFG = AppCfg()
PATHS = Paths()


@dataclass(frozen=True)
class Settings:
    """User choices that survive restarts. Loaded once at startup, rewritten only on explicit action."""
    history_path: Path | None = None


def load_settings(path: str | Path | None = None) -> Settings:
    p = Path(path) if path is not None else PATHS.settings_file
    if not p.exists():
        return Settings()
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except OSError as e:
        raise HistoryIOError(p, e) from e
    hp = raw.get("history_path") if isinstance(raw, dict) else None
    return Settings(history_path=Path(hp) if hp else None)


def save_settings(settings: Settings, path: str | Path | None = None) -> Path:
    p = Path(path) if path is not None else PATHS.settings_file
    data = {"history_path": str(settings.history_path) if settings.history_path else None}
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    except OSError as e:
        raise HistoryIOError(p, e) from e
    return p


def get_history_path(settings: Settings) -> Path | None:
    return settings.history_path


def set_history_path(settings: Settings, path: str | Path, settings_file: str | Path | None = None) -> Settings:
    new = replace(settings, history_path=Path(path))
    save_settings(new, settings_file)
    return new


def resolve_history_path(settings: Settings) -> Path:
    """The stored choice if any, else the internal history location."""
    return settings.history_path or PATHS.internal_history
