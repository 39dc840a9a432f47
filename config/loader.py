# config/loader.py
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Optional

# Python 3.11 has tomllib; fall back to "tomli" on older versions if needed
try:
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore[no-redef]

REPO = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG = REPO / "config.toml"

TABLES = ("logging", "engine", "categorizer")


def load_config(config_path: Path | None = None) -> Dict[str, Any]:
    """
    Load config.toml (repo root by default). Malformed TOML surfaces as
    tomllib.TOMLDecodeError, which is a ValueError.
    """
    config_path = Path(config_path) if config_path is not None else DEFAULT_CONFIG
    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")

    with config_path.open("rb") as f:
        cfg = tomllib.load(f)

    for name in TABLES:
        if name in cfg and not isinstance(cfg[name], dict):
            raise ValueError(f"[{name}] must be a table in {config_path}")
    cfg["_path"] = str(config_path)
    return cfg


def rules_path(cfg: Dict[str, Any]) -> Optional[Path]:
    """
    [categorizer].rules as a Path, relative entries resolved against the
    config file's directory. Empty or missing -> None (built-in table).
    """
    raw = (cfg.get("categorizer") or {}).get("rules") or ""
    if not str(raw).strip():
        return None
    p = Path(raw)
    if not p.is_absolute() and cfg.get("_path"):
        p = Path(cfg["_path"]).parent / p
    return p
