# parser/extractor.py
"""
MatchCandidate -> Transaction.

Applies the field normalizers and the categorizer to one candidate. Returns
None for any candidate that cannot become a valid transaction; callers count
those as rejected lines, they are never raised.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from bsx_core.models import (
    DESCRIPTION_MAX_LENGTH,
    MatchCandidate,
    Provenance,
    SectionState,
    Tier,
    Transaction,
)
from bsx_core.settings import EngineSettings
from bsx_utils.normalizers import (
    clean_description,
    normalize_amount,
    parse_statement_date,
)
from categorizer.service import CategorizerService

log = logging.getLogger("parser")

_SECTION_NOTES = {
    SectionState.DEPOSITS: "Parsed from DEPOSITS & CREDITS section",
    SectionState.WITHDRAWALS: "Parsed from WITHDRAWALS section",
}


def build_transaction(
    cand: MatchCandidate,
    tier: Tier,
    *,
    today: date,
    settings: EngineSettings,
    categorizer: CategorizerService,
    dialect: Optional[str] = None,
) -> Optional[Transaction]:
    amount = normalize_amount(cand.amount_text)
    if amount is None:
        log.debug("line %d: rejected amount %r", cand.line_index, cand.amount_text)
        return None
    if tier is Tier.AGGRESSIVE and amount < settings.aggressive_min_amount:
        log.debug("line %d: amount %s below noise floor", cand.line_index, amount)
        return None

    note = _SECTION_NOTES.get(cand.section, f"Parsed from statement line {cand.line_index}")
    txn_date = parse_statement_date(
        cand.date_text, today=today, window=settings.recency_window_months
    )
    if txn_date is None:
        if tier is Tier.STRICT:
            log.debug("line %d: rejected date %r", cand.line_index, cand.date_text)
            return None
        txn_date = today
        note += "; date not found, used processing date"

    max_len = min(settings.description_max_length, DESCRIPTION_MAX_LENGTH)
    description = clean_description(cand.description, cand.type_label, max_len)
    if not description:
        log.debug("line %d: empty description", cand.line_index)
        return None

    category, direction = categorizer.categorize(description, amount, cand.section)

    return Transaction(
        amount=amount,
        direction=direction,
        category=category,
        description=description,
        date=txn_date,
        provenance=Provenance(
            tier=tier,
            section=cand.section,
            pattern_id=cand.pattern_id,
            line_index=cand.line_index,
            dialect=dialect,
            note=note,
        ),
    )
