"""
Categorizer service for statement transactions.
"""
from __future__ import annotations

import logging
import yaml
from decimal import Decimal
from pathlib import Path
from typing import Optional, Tuple

from bsx_core.models import Category, Direction, SectionState
from bsx_utils.categories import DEFAULT_RULES
from categorizer.rules import apply_rules_with_name, compile_rules

log = logging.getLogger("categorizer")


class CategorizerService:
    """Keyword/amount rules with a built-in table, optionally replaced from YAML."""

    def __init__(self, rules_path: Optional[str] = None):
        self.cfg = DEFAULT_RULES
        if rules_path:
            p = Path(rules_path)
            if not p.exists():
                raise FileNotFoundError(f"Rules file not found: {p}")
            with open(p, "r", encoding="utf-8") as f:
                self.cfg = yaml.safe_load(f) or DEFAULT_RULES
            log.info("Loaded %d categorization rules from %s", self.get_rule_count(), p)
        self.rules = compile_rules(self.cfg)

    def categorize(
        self, description: str, amount: Decimal, section: SectionState
    ) -> Tuple[Category, Direction]:
        category, direction, _ = apply_rules_with_name(
            self.rules, self.cfg, description, amount, section
        )
        return category, direction

    def categorize_with_rule(
        self, description: str, amount: Decimal, section: SectionState
    ) -> Tuple[Category, Direction, Optional[str]]:
        """
        Like categorize() but also returns the matching rule name
        (None when the catch-all default was used).
        """
        return apply_rules_with_name(self.rules, self.cfg, description, amount, section)

    def get_rule_count(self) -> int:
        """Return number of rules configured."""
        return len(self.cfg.get("rules", []))
