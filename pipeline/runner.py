"""
Statement text -> transactions, in escalating tiers:

  strict      section-aware patterns; a bad date rejects the line
  aggressive  any line with an amount token, sections ignored (only if strict found nothing)
  fallback    synthetic sample dataset (only if both found nothing)

Usage:
  from pipeline.runner import parse_statement
  result = parse_statement(text)
  result.transactions, result.tier, result.trace
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Tuple

from bsx_core.models import (
    ParseResult,
    ParseTrace,
    RawLine,
    SectionState,
    Tier,
    TierReport,
    Transaction,
)
from bsx_core.settings import EngineSettings
from categorizer.service import CategorizerService
from parser.dedup import deduplicate
from parser.extractor import build_transaction
from parser.matcher import match_line, scan_line
from parser.normalizer import normalize_lines
from parser.patterns import PatternTable, get_table
from parser.sections import SectionClassifier
from pipeline.fallback import fallback_transactions

log = logging.getLogger("pipeline")


def run_strict(
    lines: List[RawLine],
    table: PatternTable,
    *,
    today: date,
    settings: EngineSettings,
    categorizer: CategorizerService,
) -> Tuple[List[Transaction], TierReport]:
    report = TierReport(tier=Tier.STRICT, lines_scanned=len(lines))
    classifier = SectionClassifier(table)
    found: List[Transaction] = []

    for line in lines:
        section, is_marker = classifier.advance(line.text)
        if is_marker or section is SectionState.NONE:
            continue
        cand = match_line(line, section, table)
        if cand is None:
            continue
        report.candidates += 1
        txn = build_transaction(
            cand,
            Tier.STRICT,
            today=today,
            settings=settings,
            categorizer=categorizer,
            dialect=table.name,
        )
        if txn is None:
            report.rejected += 1
            continue
        found.append(txn)

    kept, dropped = deduplicate(found, settings.fingerprint_prefix)
    report.accepted = len(kept)
    report.duplicates_dropped = dropped
    return kept, report


def run_aggressive(
    lines: List[RawLine],
    *,
    today: date,
    settings: EngineSettings,
    categorizer: CategorizerService,
    table: Optional[PatternTable] = None,
) -> Tuple[List[Transaction], TierReport]:
    table = table or get_table(settings.dialect)
    report = TierReport(tier=Tier.AGGRESSIVE, lines_scanned=len(lines))
    found: List[Transaction] = []

    for line in lines:
        # headers and section totals are never transactions
        if table.is_marker_line(line.text):
            continue
        cand = scan_line(line, min_length=settings.aggressive_min_line_length)
        if cand is None:
            continue
        report.candidates += 1
        txn = build_transaction(
            cand,
            Tier.AGGRESSIVE,
            today=today,
            settings=settings,
            categorizer=categorizer,
            dialect=table.name,
        )
        if txn is None:
            report.rejected += 1
            continue
        found.append(txn)

    kept, dropped = deduplicate(found, settings.fingerprint_prefix)
    report.accepted = len(kept)
    report.duplicates_dropped = dropped
    return kept, report


def _log_report(r: TierReport) -> None:
    log.info(
        "%s: lines=%d candidates=%d rejected=%d accepted=%d duplicates=%d",
        r.tier.value,
        r.lines_scanned,
        r.candidates,
        r.rejected,
        r.accepted,
        r.duplicates_dropped,
    )


def parse_statement(
    text: str,
    *,
    dialect: Optional[str] = None,
    settings: Optional[EngineSettings] = None,
    today: Optional[date] = None,
    categorizer: Optional[CategorizerService] = None,
) -> ParseResult:
    """
    Parse one statement's text. Never fails for a str input; the worst case
    is the synthetic fallback dataset (result.tier is Tier.FALLBACK).
    """
    if not isinstance(text, str):
        raise TypeError(f"statement text must be str, got {type(text).__name__}")

    settings = settings or EngineSettings()
    table = get_table(dialect or settings.dialect)
    today = today or date.today()
    categorizer = categorizer or CategorizerService()

    lines = normalize_lines(
        text,
        min_length=settings.min_line_length,
        noise_prefixes=table.noise_prefixes,
    )
    trace = ParseTrace(dialect=table.name, line_count=len(lines))

    txns, report = run_strict(
        lines, table, today=today, settings=settings, categorizer=categorizer
    )
    trace.tiers.append(report)
    _log_report(report)
    if txns:
        return ParseResult(transactions=txns, tier=Tier.STRICT, trace=trace)

    trace.note("strict pass found no transactions; escalating to aggressive")
    log.info("Strict pass empty, escalating to aggressive scan")
    txns, report = run_aggressive(
        lines,
        today=today,
        settings=settings,
        categorizer=categorizer,
        table=table,
    )
    trace.tiers.append(report)
    _log_report(report)
    if txns:
        return ParseResult(transactions=txns, tier=Tier.AGGRESSIVE, trace=trace)

    trace.note("aggressive pass found no transactions; returning sample dataset")
    log.warning("No transactions recovered; returning synthetic sample dataset")
    txns = fallback_transactions(today, dialect=table.name)
    trace.tiers.append(TierReport(tier=Tier.FALLBACK, accepted=len(txns)))
    return ParseResult(transactions=txns, tier=Tier.FALLBACK, trace=trace)


def extract_transactions(text: str, **kw) -> List[Transaction]:
    """parse_statement() without the trace."""
    return parse_statement(text, **kw).transactions
