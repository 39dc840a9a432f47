# cli/bsx.py
# Command-line front end for the statement extraction engine.
#
# Examples:
#   bsx parse statements/September.pdf
#   bsx parse statement.txt --format json --trace
#   bsx parse statement.txt --format csv --out september.csv
#   bsx parse statement.txt --dialect generic --rules config/rules.example.yaml
#   bsx dialects
#
# Exit codes: 0 ok, 2 unsupported input, 3 processing failure.

from __future__ import annotations

import json
import logging
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import click
import pandas as pd

from bsx_core.models import Direction, ParseResult
from bsx_core.settings import EngineSettings
from bsx_utils.logging_setup import resolve_level, setup_logging
from categorizer.service import CategorizerService
from config.loader import DEFAULT_CONFIG, load_config, rules_path as config_rules_path
from parser.patterns import available_dialects, get_table
from pipeline.runner import parse_statement
from textsrc.reader import SUPPORTED_EXTS, read_statement_text

LOGGER = logging.getLogger("bsx")

SCHEMA_VERSION = "1.0"
EXIT_UNSUPPORTED = 2
EXIT_FAILURE = 3


def _jsonable(obj: Any) -> Any:
    """Deep converter for dataclasses/enums/dates/decimals nested in lists/dicts."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return {k: _jsonable(v) for k, v in asdict(obj).items()}
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (date, datetime)):
        return obj.isoformat()
    if isinstance(obj, Decimal):
        return str(obj)
    if isinstance(obj, (list, tuple)):
        return [_jsonable(x) for x in obj]
    if isinstance(obj, dict):
        return {k: _jsonable(v) for k, v in obj.items()}
    return obj


def _load_cfg(config_path: Optional[str]) -> Dict[str, Any]:
    if config_path:
        return load_config(Path(config_path))
    if DEFAULT_CONFIG.exists():
        return load_config(DEFAULT_CONFIG)
    return {}


def _print_text(result: ParseResult) -> None:
    if result.synthetic:
        click.echo("[warn] statement could not be parsed; showing SAMPLE data")
    for t in result.transactions:
        sign = "+" if t.direction is Direction.INCOME else "-"
        click.echo(
            f"{t.date.isoformat()}  {sign}{t.amount:>10}  "
            f"{t.category.display_name:<18} {t.description}"
        )
    click.echo(f"[ok] {len(result.transactions)} transaction(s) via {result.tier.value} pass")


def _print_trace(result: ParseResult) -> None:
    tr = result.trace
    click.echo(f"[trace] dialect={tr.dialect} lines={tr.line_count}", err=True)
    for r in tr.tiers:
        click.echo(
            f"[trace] {r.tier.value}: candidates={r.candidates} rejected={r.rejected} "
            f"accepted={r.accepted} duplicates={r.duplicates_dropped}",
            err=True,
        )
    for ev in tr.events:
        click.echo(f"[trace] {ev}", err=True)


def _emit(result: ParseResult, fmt: str, out: Optional[str], with_trace: bool) -> None:
    rows = [t.as_dict() for t in result.transactions]

    if fmt == "csv":
        df = pd.DataFrame(rows, columns=list(rows[0].keys()) if rows else None)
        if out:
            Path(out).parent.mkdir(parents=True, exist_ok=True)
            df.to_csv(out, index=False)
            click.echo(f"[info] wrote {len(df)} row(s) -> {out}")
        else:
            click.echo(df.to_csv(index=False), nl=False)
        return

    if fmt == "json":
        payload: Dict[str, Any] = {
            "schema_version": SCHEMA_VERSION,
            "tier": result.tier.value,
            "synthetic": result.synthetic,
            "results": rows,
        }
        if with_trace:
            payload["trace"] = _jsonable(result.trace)
        text = json.dumps(payload, ensure_ascii=True)
    elif fmt == "jsonl":
        text = "\n".join(
            json.dumps({"schema_version": SCHEMA_VERSION, "result": r}, ensure_ascii=True)
            for r in rows
        )
    else:
        _print_text(result)
        return

    if out:
        Path(out).parent.mkdir(parents=True, exist_ok=True)
        Path(out).write_text(text + "\n", encoding="utf-8")
        click.echo(f"[info] wrote {len(rows)} record(s) -> {out}")
    else:
        click.echo(text)


# ----------------------------- CLI -----------------------------
@click.group()
def cli() -> None:
    """Bank statement transaction extractor."""


@cli.command("parse")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, readable=True))
@click.option("--dialect", default=None, help="Pattern table to use (see `bsx dialects`).")
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="config.toml path (default: repo config.toml if present).",
)
@click.option(
    "--rules",
    "rules_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="YAML categorization rules replacing the built-in table.",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json", "jsonl", "csv"]),
    default="text",
    show_default=True,
)
@click.option("--out", default=None, help="Write output to this file instead of stdout.")
@click.option("--trace", "with_trace", is_flag=True, help="Show the per-tier parse trace.")
@click.option("--quiet", is_flag=True, help="Only warnings/errors in the log.")
@click.option("--verbose", is_flag=True, help="Debug logging (per-line rejections).")
def parse_cmd(
    path: str,
    dialect: Optional[str],
    config_path: Optional[str],
    rules_path: Optional[str],
    fmt: str,
    out: Optional[str],
    with_trace: bool,
    quiet: bool,
    verbose: bool,
) -> None:
    """Extract transactions from a statement (.txt or .pdf)."""
    ctx = click.get_current_context()
    src = Path(path)
    if src.suffix.lower() not in SUPPORTED_EXTS:
        click.echo(f"[error] unsupported file type: {src.suffix or '(none)'}", err=True)
        ctx.exit(EXIT_UNSUPPORTED)

    try:
        cfg = _load_cfg(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"[error] {e}", err=True)
        ctx.exit(EXIT_FAILURE)

    setup_logging(resolve_level(cfg.get("logging", {}).get("level"), quiet=quiet, verbose=verbose))

    try:
        settings = EngineSettings.from_config(cfg)
        rules = rules_path or config_rules_path(cfg)
        categorizer = CategorizerService(rules_path=rules)
        text = read_statement_text(src)
        result = parse_statement(
            text,
            dialect=dialect,
            settings=settings,
            categorizer=categorizer,
        )
    except Exception as exc:  # guardrail: report, don't crash the CLI
        LOGGER.exception("Processing failed on %s: %s", src, exc)
        click.echo(f"[error] {exc}", err=True)
        ctx.exit(EXIT_FAILURE)

    _emit(result, fmt, out, with_trace)
    if with_trace and fmt not in ("json",):
        _print_trace(result)


@cli.command("dialects")
def dialects_cmd() -> None:
    """List registered statement dialects."""
    for name in available_dialects():
        table = get_table(name)
        click.echo(f"{name:<16} {table.description}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
