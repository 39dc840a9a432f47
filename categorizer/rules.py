"""
Rules engine for statement transaction categorization.

Features:
- Priority ordering (higher priority rules evaluated first)
- Keyword matching on the cleaned, lower-cased description
- Amount conditions (gt, lt, between)
- Direction filter (income-only / expense-only rules)
- Rule name tracking for audit
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from bsx_core.models import Category, Direction, SectionState
from bsx_utils.categories import (
    DEFAULT_RULES,
    INCOME_SIGNAL_EXCEPTIONS,
    INCOME_SIGNALS,
)


def _keyword_pattern(keyword: str) -> re.Pattern:
    # Anchor at a word start only, so "mcdonald" still hits "mcdonalds".
    return re.compile(r"(?<![a-z0-9])" + re.escape(keyword.lower().strip()))


@dataclass
class Rule:
    """A single categorization rule with conditions and an assigned category."""

    name: str
    category: Category
    priority: int = 0  # Higher = evaluated first

    # Conditions
    keywords: List[str] = field(default_factory=list)
    amount_min: Optional[float] = None
    amount_max: Optional[float] = None
    direction: Optional[Direction] = None

    _patterns: List[re.Pattern] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self):
        self._patterns = [_keyword_pattern(k) for k in self.keywords if k.strip()]

    def check_keywords(self, text: str) -> bool:
        if not self._patterns:
            return False
        return any(p.search(text) for p in self._patterns)

    def check_amount(self, amount: float) -> bool:
        if self.amount_min is not None and amount <= self.amount_min:
            return False
        if self.amount_max is not None and amount >= self.amount_max:
            return False
        return True

    def applies(self, text: str, amount: float, direction: Direction) -> bool:
        """
        A rule applies when its direction filter (if any) matches, its keywords
        (if any) match, and the amount is inside its bounds (if any).
        """
        if self.direction is not None and self.direction is not direction:
            return False
        if self.keywords and not self.check_keywords(text):
            return False
        return self.check_amount(amount)


def parse_rule(r: Dict[str, Any]) -> Rule:
    """Parse a rule from a YAML/dict config entry."""
    amount_min = None
    amount_max = None
    if "if_amount_gt" in r:
        amount_min = float(r["if_amount_gt"])
    if "if_amount_lt" in r:
        amount_max = float(r["if_amount_lt"])
    if "if_amount_between" in r:
        between = r["if_amount_between"]
        if isinstance(between, (list, tuple)) and len(between) >= 2:
            amount_min = float(between[0])
            amount_max = float(between[1])

    direction = None
    if r.get("if_direction"):
        direction = Direction(str(r["if_direction"]).lower())

    assign = r.get("assign", {})
    if "category" not in assign:
        raise ValueError(f"Rule {r.get('name', 'unnamed')!r} has no assign.category")

    return Rule(
        name=r.get("name", "unnamed"),
        category=Category.from_name(assign["category"]),
        priority=int(r.get("priority", 0)),
        keywords=[str(k) for k in r.get("if_contains", [])],
        amount_min=amount_min,
        amount_max=amount_max,
        direction=direction,
    )


def compile_rules(cfg: Dict[str, Any]) -> List[Rule]:
    """Compile all rules from config, sorted by priority (highest first)."""
    rules = [parse_rule(r) for r in cfg.get("rules", [])]
    # stable sort keeps config order for equal priorities
    rules.sort(key=lambda r: r.priority, reverse=True)
    return rules


def infer_direction(text: str, section: SectionState) -> Direction:
    """
    Section decides the default; income words override it in every tier.
    """
    low = text.lower()
    scrubbed = low
    for phrase in INCOME_SIGNAL_EXCEPTIONS:
        scrubbed = scrubbed.replace(phrase, " ")
    if any(_keyword_pattern(w).search(scrubbed) for w in INCOME_SIGNALS):
        return Direction.INCOME
    if section is SectionState.DEPOSITS:
        return Direction.INCOME
    return Direction.EXPENSE


def _default_category(cfg: Dict[str, Any], direction: Direction) -> Category:
    d = cfg.get("defaults", {})
    if direction is Direction.INCOME:
        return Category.from_name(d.get("income", "Other Income"))
    return Category.from_name(d.get("expense", "Miscellaneous"))


def apply_rules_with_name(
    rules: List[Rule],
    cfg: Dict[str, Any],
    description: str,
    amount: Decimal,
    section: SectionState,
) -> Tuple[Category, Direction, Optional[str]]:
    """
    Return (category, direction, rule_name). First applicable rule wins;
    rule_name is None when the catch-all default was used.
    """
    text = (description or "").lower()
    direction = infer_direction(text, section)
    value = float(amount)

    for rule in rules:
        if rule.applies(text, value, direction):
            return rule.category, direction, rule.name

    return _default_category(cfg, direction), direction, None


_DEFAULT_COMPILED = compile_rules(DEFAULT_RULES)


def categorize(
    description: str, amount: Decimal, section: SectionState
) -> Tuple[Category, Direction]:
    """Categorize against the built-in table."""
    category, direction, _ = apply_rules_with_name(
        _DEFAULT_COMPILED, DEFAULT_RULES, description, amount, section
    )
    return category, direction
