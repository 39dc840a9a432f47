from __future__ import annotations

import calendar
import re
from datetime import date
from decimal import Decimal
from typing import Optional

from bsx_core.models import DESCRIPTION_MAX_LENGTH


# ---------------- Amount normalization ----------------

_CURRENCY_RX = re.compile(r"US\$|USD|\$", re.IGNORECASE)
_PLAIN_NUMBER_RX = re.compile(r"^\d+(?:\.\d+)?$")
_CENTS = Decimal("0.01")


def normalize_amount(raw: Optional[str]) -> Optional[Decimal]:
    """
    Turn an amount token like "$1,234.56" or "+90.93" into an unsigned Decimal.
    Returns None when the token does not parse or is not strictly positive.
    """
    if raw is None:
        return None
    s = _CURRENCY_RX.sub("", str(raw))
    s = s.replace(",", "").replace(" ", "").strip()
    if s.startswith("+"):
        s = s[1:]
    if not _PLAIN_NUMBER_RX.match(s):
        return None
    value = Decimal(s).quantize(_CENTS)
    if value <= 0:
        return None
    return value


# ---------------- Dates ----------------

YMD_RX = re.compile(r"^\s*(\d{4})[./-](\d{1,2})[./-](\d{1,2})\s*$")
FULL_RX = re.compile(r"^\s*(\d{1,2})[/-](\d{1,2})[/-](\d{2}|\d{4})\s*$")
PARTIAL_RX = re.compile(r"^\s*(\d{1,2})[/-](\d{1,2})\s*$")

RECENCY_WINDOW_MONTHS = 3


def _clip_year(y: int) -> int:
    if y < 100:
        return 2000 + y if y < 70 else 1900 + y
    return y


def _safe_date(y: int, m: int, d: int) -> Optional[date]:
    if not 1 <= m <= 12:
        return None
    if not 1 <= d <= calendar.monthrange(y, m)[1]:
        return None
    return date(y, m, d)


def infer_year(month: int, today: date, window: int = RECENCY_WINDOW_MONTHS) -> int:
    """
    Year for a yearless MM/dd date. A month more than `window` months past
    today's month cannot be upcoming, so it belongs to last year's statement
    (a December line read in January). Earlier months are this year.
    """
    if month > today.month + window:
        return today.year - 1
    return today.year


def parse_statement_date(
    raw: Optional[str],
    *,
    today: Optional[date] = None,
    window: int = RECENCY_WINDOW_MONTHS,
) -> Optional[date]:
    """
    Accepts MM/dd, MM/dd/yyyy, yyyy-MM-dd and dd/MM/yyyy.

    dd/MM/yyyy is only used when the first number cannot be a month
    (e.g. 26/08/2025). Returns None when nothing parses.
    """
    if not raw:
        return None
    today = today or date.today()
    s = raw.strip()

    m = YMD_RX.match(s)
    if m:
        return _safe_date(int(m.group(1)), int(m.group(2)), int(m.group(3)))

    m = FULL_RX.match(s)
    if m:
        a, b = int(m.group(1)), int(m.group(2))
        y = _clip_year(int(m.group(3)))
        if a > 12 and b <= 12:
            return _safe_date(y, b, a)
        return _safe_date(y, a, b)

    m = PARTIAL_RX.match(s)
    if m:
        mon, d = int(m.group(1)), int(m.group(2))
        if not 1 <= mon <= 12:
            return None
        return _safe_date(infer_year(mon, today, window), mon, d)

    return None


# ---------------- Descriptions ----------------

_LONG_DIGITS_RX = re.compile(r"\d{10,}")
# Card lines carry "<last4>  <city> <state> <zip>  <terminal>" after the merchant.
_CARD_TAIL_RX = re.compile(r"\s+\d{4}\s+.*$")
_TRAILING_ZIP_RX = re.compile(r"\s+\d{5}$")
_WS_RX = re.compile(r"\s+")


def clean_description(
    description: Optional[str],
    label: Optional[str] = None,
    max_length: int = DESCRIPTION_MAX_LENGTH,
) -> str:
    clean = _LONG_DIGITS_RX.sub("", description or "")
    clean = _WS_RX.sub(" ", clean).strip()
    if label:
        clean = _CARD_TAIL_RX.sub("", clean)
    clean = _TRAILING_ZIP_RX.sub("", clean).strip()

    if label:
        label = _WS_RX.sub(" ", label).strip()
        if not clean:
            clean = label
        elif label.lower() not in clean.lower():
            clean = f"{label} - {clean}"

    return clean[:max_length].rstrip()
