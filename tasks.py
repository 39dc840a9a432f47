# tasks.py
"""
Developer task runner using Invoke.
Run `inv --list` to see tasks.

Key tasks:
  inv parse --input <statement.txt|statement.pdf> [--fmt json] [--trace]
  inv dialects
  inv test
  inv clean
"""

from invoke import task
from pathlib import Path
import shutil
import sys


REPO = Path(__file__).parent
OUTDIR = REPO / "data" / "out"


def _python():
    """Return the python executable inside the current venv."""
    return sys.executable or "python"


@task(
    help={
        "input": "Path to a statement .txt or .pdf",
        "dialect": "Pattern table name (default from config.toml)",
        "fmt": "Output format: text, json, jsonl or csv (default: text)",
        "out": "Optional output file",
        "trace": "Print the per-tier parse trace",
    }
)
def parse(c, input, dialect=None, fmt="text", out=None, trace=False):
    """Extract transactions from one statement."""
    args = ["-m", "cli.bsx", "parse", input, "--format", fmt]
    if dialect:
        args += ["--dialect", dialect]
    if out:
        args += ["--out", out]
    if trace:
        args.append("--trace")
    c.run(" ".join([_python(), *args]), pty=False)


@task
def dialects(c):
    """List registered statement dialects."""
    c.run(f"{_python()} -m cli.bsx dialects", pty=False)


@task(help={"k": "Only run tests matching this expression"})
def test(c, k=None):
    """Run the test suite."""
    cmd = f"{_python()} -m pytest -q"
    if k:
        cmd += f" -k {k!r}"
    c.run(cmd, pty=False)


@task
def clean(c):
    """Remove generated output and caches."""
    for p in (OUTDIR, REPO / ".pytest_cache"):
        if p.exists():
            shutil.rmtree(p)
            print(f"removed {p}")
    for p in REPO.rglob("__pycache__"):
        shutil.rmtree(p, ignore_errors=True)
