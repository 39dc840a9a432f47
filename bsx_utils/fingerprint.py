# Purpose: stable transaction fingerprint for de-duplication.

from __future__ import annotations
import hashlib
import re

from bsx_core.models import Transaction

FINGERPRINT_PREFIX = 30


def canonicalize_text(s: str) -> str:
    """
    Minimal canonicalization so the same statement line yields the same key.
    - Lowercase
    - Collapse whitespace
    """
    if not isinstance(s, str):
        s = str(s or "")
    s = s.lower()
    s = re.sub(r"\s+", " ", s).strip()
    return s


def transaction_fingerprint(txn: Transaction, prefix: int = FINGERPRINT_PREFIX) -> str:
    """
    Short SHA-1 key over (description prefix, amount, day).
    Direction and category are not part of the key.
    """
    desc = canonicalize_text(txn.description)[:prefix]
    key = f"{desc}|{txn.amount:.2f}|{txn.date.isoformat()}"
    return hashlib.sha1(key.encode("utf-8")).hexdigest()[:20]
