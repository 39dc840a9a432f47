# parser/patterns.py
"""
Per-dialect pattern tables.

A table bundles the section markers and the ordered line patterns for each
section. Patterns use named groups: `date`, `desc`, `amount`, and optionally
`label` (a bank transaction-type label such as "Card Credit").
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from bsx_core.models import SectionState

DATE = r"(?P<date>\d{1,2}/\d{1,2}(?:/\d{4}|/\d{2})?|\d{4}-\d{1,2}-\d{1,2})"
AMOUNT = r"(?P<amount>[+$]?\s?(?:\d{1,3}(?:,\d{3})+|\d+)\.\d{2})"
BALANCE = r"(?P<balance>-?\$?(?:\d{1,3}(?:,\d{3})+|\d+)\.\d{2})"

CARD_LABELS = (
    r"Card\s+Credit",
    r"Card\s+Purchase",
    r"Recurring\s+Card(?:\s+Transaction)?",
    r"Debit\s+Card\s+Purchase",
    r"ATM\s+Withdrawal",
)
FEE_LABELS = (
    r"Monthly\s+Fee",
    r"Service\s+Fee",
    r"ATM\s+Fee",
    r"Overdraft\s+Fee",
)


def _alt(labels: Tuple[str, ...]) -> str:
    return "|".join(labels)


@dataclass(frozen=True)
class LinePattern:
    id: str
    regex: re.Pattern


def line_pattern(pid: str, source: str) -> LinePattern:
    return LinePattern(id=pid, regex=re.compile(source, re.IGNORECASE))


@dataclass(frozen=True)
class PatternTable:
    name: str
    deposit_markers: Tuple[str, ...]
    withdrawal_markers: Tuple[str, ...]
    deposit_patterns: Tuple[LinePattern, ...]
    withdrawal_patterns: Tuple[LinePattern, ...]
    terminator_prefix: str = "Total"
    noise_prefixes: Tuple[str, ...] = field(default_factory=tuple)
    description: str = ""

    def patterns_for(self, section: SectionState) -> Tuple[LinePattern, ...]:
        if section is SectionState.DEPOSITS:
            return self.deposit_patterns
        if section is SectionState.WITHDRAWALS:
            return self.withdrawal_patterns
        return ()

    def is_deposit_header(self, line: str) -> bool:
        low = line.lower()
        return any(m in low for m in self.deposit_markers)

    def is_withdrawal_header(self, line: str) -> bool:
        low = line.lower()
        return "&" not in low and any(m in low for m in self.withdrawal_markers)

    def is_terminator(self, line: str) -> bool:
        return line.startswith(self.terminator_prefix)

    def is_marker_line(self, line: str) -> bool:
        """Section header or section total, regardless of the current section."""
        return (
            self.is_terminator(line)
            or self.is_deposit_header(line)
            or self.is_withdrawal_header(line)
        )


LABELED = line_pattern(
    "labeled",
    rf"^{DATE}\s+(?P<label>{_alt(CARD_LABELS + FEE_LABELS)})\s+(?P<desc>.+?)\s+{AMOUNT}\s*$",
)
FEE = line_pattern(
    "fee",
    rf"^{DATE}\s+(?P<label>{_alt(FEE_LABELS)})\s+{AMOUNT}\s*$",
)
GENERIC = line_pattern(
    "generic",
    rf"^{DATE}\s+(?P<desc>.+?)\s+{AMOUNT}\s*$",
)
WITH_BALANCE = line_pattern(
    "with_balance",
    rf"^{DATE}\s+(?P<desc>.+?)\s+{AMOUNT}\s+{BALANCE}\s*$",
)

REGIONS = PatternTable(
    name="regions",
    deposit_markers=("deposits & credits",),
    withdrawal_markers=("withdrawals",),
    deposit_patterns=(LABELED, GENERIC),
    withdrawal_patterns=(LABELED, FEE, GENERIC),
    noise_prefixes=("lifegreen", "automatic"),
    description="Regions-style checking statement (labeled card lines, fee lines)",
)

GENERIC_TABLE = PatternTable(
    name="generic",
    deposit_markers=(
        "deposits & credits",
        "deposits and credits",
        "deposits and other credits",
        "deposits and additions",
    ),
    withdrawal_markers=("withdrawals", "checks and debits", "electronic debits"),
    deposit_patterns=(GENERIC,),
    withdrawal_patterns=(GENERIC,),
    description="Date + description + amount lines under labeled sections",
)

RUNNING_BALANCE = PatternTable(
    name="running_balance",
    deposit_markers=GENERIC_TABLE.deposit_markers,
    withdrawal_markers=GENERIC_TABLE.withdrawal_markers,
    deposit_patterns=(WITH_BALANCE, GENERIC),
    withdrawal_patterns=(WITH_BALANCE, GENERIC),
    description="Lines that end with amount followed by a running balance",
)

_REGISTRY: Dict[str, PatternTable] = {}

DEFAULT_DIALECT = "regions"


def register_table(table: PatternTable, *, replace: bool = False) -> None:
    if table.name in _REGISTRY and not replace:
        raise ValueError(f"Dialect already registered: {table.name}")
    _REGISTRY[table.name] = table


def get_table(name: str | None = None) -> PatternTable:
    key = (name or DEFAULT_DIALECT).strip().lower()
    try:
        return _REGISTRY[key]
    except KeyError:
        raise ValueError(
            f"Unknown dialect: {name!r} (known: {', '.join(available_dialects())})"
        ) from None


def available_dialects() -> List[str]:
    return sorted(_REGISTRY)


for _t in (REGIONS, GENERIC_TABLE, RUNNING_BALANCE):
    register_table(_t)
