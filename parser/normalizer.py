# parser/normalizer.py
"""
Turn the raw statement text blob into an ordered list of candidate lines.

Section headers and section totals are kept; the section classifier needs them.
"""

from __future__ import annotations
import re
from typing import Iterable, List

from bsx_core.models import RawLine

MIN_LINE_LENGTH = 8

_PAGE_RX = re.compile(r"^(?:page\s+\d+(?:\s*(?:of|/)\s*\d+)?|\d+\s+of\s+\d+)$", re.I)

NOISE_PREFIXES = ("page ", "account", "summary")

NOISE_PHRASES = (
    "beginning balance",
    "ending balance",
    "daily balance",
    "average balance",
    "balance forward",
)


def is_noise(line: str, extra_prefixes: Iterable[str] = ()) -> bool:
    low = line.lower()
    if _PAGE_RX.match(low):
        return True
    if low.startswith(NOISE_PREFIXES) or low.startswith(
        tuple(p.lower() for p in extra_prefixes)
    ):
        return True
    return any(phrase in low for phrase in NOISE_PHRASES)


def normalize_lines(
    text: str,
    *,
    min_length: int = MIN_LINE_LENGTH,
    noise_prefixes: Iterable[str] = (),
) -> List[RawLine]:
    """Split, trim and filter; RawLine.index keeps the original line number."""
    extra = tuple(noise_prefixes)
    out: List[RawLine] = []
    for i, raw in enumerate((text or "").splitlines()):
        # collapse tabs / runs of spaces left over from column layout
        line = re.sub(r"[ \t\u00a0]+", " ", raw).strip()
        if len(line) < min_length:
            continue
        if is_noise(line, extra):
            continue
        out.append(RawLine(text=line, index=i))
    return out
