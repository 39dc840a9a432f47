# parser/dedup.py
from __future__ import annotations

from typing import List, Tuple

from bsx_core.models import Transaction
from bsx_utils.fingerprint import FINGERPRINT_PREFIX, transaction_fingerprint


def deduplicate(
    txns: List[Transaction], prefix: int = FINGERPRINT_PREFIX
) -> Tuple[List[Transaction], int]:
    """
    Collapse transactions sharing a fingerprint. First-seen wins and order is
    preserved. Returns (kept, number dropped).
    """
    seen = set()
    kept: List[Transaction] = []
    for t in txns:
        key = transaction_fingerprint(t, prefix)
        if key in seen:
            continue
        seen.add(key)
        kept.append(t)
    return kept, len(txns) - len(kept)
