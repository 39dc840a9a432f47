from __future__ import annotations
from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, Dict, Optional


_INT_FIELDS = (
    "min_line_length",
    "aggressive_min_line_length",
    "recency_window_months",
    "description_max_length",
    "fingerprint_prefix",
)


@dataclass(frozen=True)
class EngineSettings:
    """Tunables for one parse; defaults match the [engine] table in config.toml."""

    dialect: str = "regions"
    min_line_length: int = 8
    aggressive_min_line_length: int = 15
    aggressive_min_amount: Decimal = Decimal("1.00")
    recency_window_months: int = 3
    description_max_length: int = 100
    fingerprint_prefix: int = 30

    @classmethod
    def from_config(cls, cfg: Optional[Dict[str, Any]]) -> "EngineSettings":
        """Build from a loaded config dict; unknown keys are ignored."""
        engine = (cfg or {}).get("engine", {}) or {}
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in engine.items() if k in known}
        for name in _INT_FIELDS:
            if name in kwargs:
                kwargs[name] = int(kwargs[name])
        if "aggressive_min_amount" in kwargs:
            kwargs["aggressive_min_amount"] = Decimal(str(kwargs["aggressive_min_amount"]))
        if "dialect" in kwargs:
            kwargs["dialect"] = str(kwargs["dialect"])
        return cls(**kwargs)
