# pipeline/fallback.py
"""
Demonstration dataset returned when no tier could read the statement.
Every record is marked synthetic in its provenance.
"""
from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal
from typing import List, Optional

from bsx_core.models import Category, Direction, Provenance, Tier, Transaction

FALLBACK_NOTE = "Sample data: statement could not be parsed"

# (description, amount, category, direction, days before today)
DEMO_ROWS = [
    ("PAYROLL DEPOSIT - IXANA QUASISTATICS", "2523.88", Category.SALARY, Direction.INCOME, 15),
    ("RENT PAYMENT - APARTMENT COMPLEX", "1200.00", Category.RENT, Direction.EXPENSE, 1),
    ("STUDENT LOAN PAYMENT - GERMAN BANK", "475.00", Category.LOAN_PAYMENT, Direction.EXPENSE, 20),
    ("WALMART SUPERCENTER #1234", "89.50", Category.GROCERIES, Direction.EXPENSE, 3),
    ("VERIZON WIRELESS - MONTHLY PLAN", "45.00", Category.PHONE, Direction.EXPENSE, 10),
    ("SHELL GAS STATION #5678", "25.99", Category.TRANSPORTATION, Direction.EXPENSE, 5),
    ("NETFLIX MONTHLY SUBSCRIPTION", "12.99", Category.SUBSCRIPTIONS, Direction.EXPENSE, 12),
    ("AUTO INSURANCE - GEICO", "150.00", Category.INSURANCE, Direction.EXPENSE, 15),
]


def fallback_transactions(
    today: Optional[date] = None, dialect: Optional[str] = None
) -> List[Transaction]:
    today = today or date.today()
    out: List[Transaction] = []
    for desc, amount, category, direction, days_ago in DEMO_ROWS:
        out.append(
            Transaction(
                amount=Decimal(amount),
                direction=direction,
                category=category,
                description=desc,
                date=today - timedelta(days=days_ago),
                provenance=Provenance(
                    tier=Tier.FALLBACK,
                    dialect=dialect,
                    synthetic=True,
                    note=FALLBACK_NOTE,
                ),
            )
        )
    return out
