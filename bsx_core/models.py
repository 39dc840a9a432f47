from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional
import uuid

DESCRIPTION_MAX_LENGTH = 100


class SectionState(str, Enum):
    NONE = "none"
    DEPOSITS = "deposits"
    WITHDRAWALS = "withdrawals"


class Direction(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class Tier(str, Enum):
    STRICT = "strict"
    AGGRESSIVE = "aggressive"
    FALLBACK = "fallback"


class Category(Enum):
    # income
    SALARY = ("Salary", Direction.INCOME)
    FREELANCE = ("Freelance", Direction.INCOME)
    INVESTMENT_RETURN = ("Investment Returns", Direction.INCOME)
    OTHER_INCOME = ("Other Income", Direction.INCOME)
    # fixed expenses
    RENT = ("Rent", Direction.EXPENSE)
    UTILITIES = ("Utilities", Direction.EXPENSE)
    INTERNET = ("Internet", Direction.EXPENSE)
    PHONE = ("Phone", Direction.EXPENSE)
    SUBSCRIPTIONS = ("Subscriptions", Direction.EXPENSE)
    LOAN_PAYMENT = ("Loan Payment", Direction.EXPENSE)
    INSURANCE = ("Insurance", Direction.EXPENSE)
    # variable expenses
    GROCERIES = ("Groceries", Direction.EXPENSE)
    DINING_OUT = ("Dining Out", Direction.EXPENSE)
    TRANSPORTATION = ("Transportation", Direction.EXPENSE)
    ENTERTAINMENT = ("Entertainment", Direction.EXPENSE)
    CLOTHING = ("Clothing", Direction.EXPENSE)
    PERSONAL_CARE = ("Personal Care", Direction.EXPENSE)
    HEALTHCARE = ("Healthcare", Direction.EXPENSE)
    EDUCATION = ("Education", Direction.EXPENSE)
    # catch-all
    MISCELLANEOUS = ("Miscellaneous", Direction.EXPENSE)

    def __init__(self, display_name: str, direction: Direction):
        self.display_name = display_name
        self.direction = direction

    @classmethod
    def from_name(cls, name: str) -> "Category":
        """Look up by member name or display name ("loan payment", "LOAN_PAYMENT")."""
        key = (name or "").strip().upper().replace(" ", "_").replace("-", "_")
        if key in cls.__members__:
            return cls[key]
        for member in cls:
            if member.display_name.upper() == (name or "").strip().upper():
                return member
        raise ValueError(f"Unknown category: {name!r}")


def income_categories() -> List[Category]:
    return [c for c in Category if c.direction is Direction.INCOME]


def expense_categories() -> List[Category]:
    return [c for c in Category if c.direction is Direction.EXPENSE]


def fixed_expense_categories() -> List[Category]:
    return [
        Category.RENT,
        Category.UTILITIES,
        Category.INTERNET,
        Category.PHONE,
        Category.SUBSCRIPTIONS,
        Category.LOAN_PAYMENT,
        Category.INSURANCE,
    ]


def variable_expense_categories() -> List[Category]:
    return [
        Category.GROCERIES,
        Category.DINING_OUT,
        Category.TRANSPORTATION,
        Category.ENTERTAINMENT,
        Category.CLOTHING,
        Category.PERSONAL_CARE,
        Category.HEALTHCARE,
        Category.EDUCATION,
    ]


@dataclass(frozen=True)
class RawLine:
    text: str
    index: int  # 0-based line number in the original text


@dataclass(frozen=True)
class MatchCandidate:
    date_text: Optional[str]
    description: str
    amount_text: str
    pattern_id: str
    line_index: int
    type_label: Optional[str] = None
    section: SectionState = SectionState.NONE


@dataclass(frozen=True)
class Provenance:
    tier: Tier
    section: SectionState = SectionState.NONE
    pattern_id: Optional[str] = None
    line_index: Optional[int] = None
    dialect: Optional[str] = None
    synthetic: bool = False
    note: str = ""


def new_transaction_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Transaction:
    amount: Decimal
    direction: Direction
    category: Category
    description: str
    date: date
    provenance: Provenance
    id: str = field(default_factory=new_transaction_id)

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.amount <= 0:
            raise ValueError(f"Transaction amount must be positive, got {self.amount}")
        if len(self.description) > DESCRIPTION_MAX_LENGTH:
            raise ValueError(
                f"Description longer than {DESCRIPTION_MAX_LENGTH} chars: {self.description!r}"
            )

    @property
    def signed_amount(self) -> Decimal:
        return self.amount if self.direction is Direction.INCOME else -self.amount

    def as_dict(self) -> Dict[str, Any]:
        """JSON-friendly flat mapping (used by the CLI exporters)."""
        p = self.provenance
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "description": self.description,
            "amount": str(self.amount),
            "direction": self.direction.value,
            "category": self.category.display_name,
            "tier": p.tier.value,
            "section": p.section.value,
            "pattern_id": p.pattern_id,
            "line_index": p.line_index,
            "dialect": p.dialect,
            "synthetic": p.synthetic,
            "note": p.note,
        }


@dataclass
class TierReport:
    tier: Tier
    lines_scanned: int = 0
    candidates: int = 0
    rejected: int = 0
    accepted: int = 0
    duplicates_dropped: int = 0


@dataclass
class ParseTrace:
    dialect: str
    line_count: int = 0
    tiers: List[TierReport] = field(default_factory=list)
    events: List[str] = field(default_factory=list)

    def note(self, message: str) -> None:
        self.events.append(message)

    @property
    def tiers_run(self) -> List[Tier]:
        return [t.tier for t in self.tiers]


@dataclass
class ParseResult:
    transactions: List[Transaction]
    tier: Tier
    trace: ParseTrace

    @property
    def synthetic(self) -> bool:
        return self.tier is Tier.FALLBACK

    def __len__(self) -> int:
        return len(self.transactions)
