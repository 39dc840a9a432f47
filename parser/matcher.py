# parser/matcher.py
"""
Line -> MatchCandidate.

match_line(): section-aware, tries the dialect's ordered patterns, first wins.
scan_line():  section-blind amount-token scan for the aggressive pass.
"""
from __future__ import annotations

import re
from typing import Optional

from bsx_core.models import MatchCandidate, RawLine, SectionState
from parser.patterns import PatternTable

AGGRESSIVE_MIN_LINE_LENGTH = 15

# Any amount-shaped token: optional sign/currency, thousands separators, 2 decimals.
_AMOUNT_TOKEN_RX = re.compile(
    r"(?<![\d.,])[-+]?\$?\s?(?P<num>(?:\d{1,3}(?:,\d{3})+|\d+)\.\d{2})(?![\d])"
)
_DATE_TOKEN_RX = re.compile(
    r"(?<![\d/])(\d{1,2}/\d{1,2}(?:/\d{4}|/\d{2})?|\d{4}-\d{1,2}-\d{1,2})(?![\d/])"
)
# Leading date must look like one before we bother with the full patterns.
_LEADING_DATE_RX = re.compile(r"^\d{1,4}[/-]\d{1,2}")


def match_line(
    line: RawLine, section: SectionState, table: PatternTable
) -> Optional[MatchCandidate]:
    patterns = table.patterns_for(section)
    if not patterns or not _LEADING_DATE_RX.match(line.text):
        return None

    for pattern in patterns:
        m = pattern.regex.match(line.text)
        if not m:
            continue
        groups = m.groupdict()
        label = groups.get("label")
        desc = groups.get("desc") or ""
        return MatchCandidate(
            date_text=groups["date"],
            description=desc.strip(),
            amount_text=groups["amount"],
            pattern_id=pattern.id,
            line_index=line.index,
            type_label=label.strip() if label else None,
            section=section,
        )
    return None


def scan_line(
    line: RawLine, *, min_length: int = AGGRESSIVE_MIN_LINE_LENGTH
) -> Optional[MatchCandidate]:
    """
    Take the first amount-shaped token as the amount, the first date-shaped
    token (if any) as the date, and what is left as the description. The
    line must be longer than min_length.
    """
    text = line.text
    if len(text) <= min_length:
        return None
    m = _AMOUNT_TOKEN_RX.search(text)
    if not m:
        return None

    rest = _AMOUNT_TOKEN_RX.sub(" ", text)
    date_text = None
    dm = _DATE_TOKEN_RX.search(rest)
    if dm:
        date_text = dm.group(1)
        rest = rest[: dm.start()] + " " + rest[dm.end() :]

    description = " ".join(rest.split())
    if len(description) <= 3:
        return None

    return MatchCandidate(
        date_text=date_text,
        description=description,
        amount_text=m.group("num"),
        pattern_id="amount_scan",
        line_index=line.index,
        section=SectionState.NONE,
    )
