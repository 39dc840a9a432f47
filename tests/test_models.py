from datetime import date
from decimal import Decimal

import pytest

from bsx_core.models import (
    Category,
    Direction,
    Provenance,
    Tier,
    Transaction,
    expense_categories,
    fixed_expense_categories,
    income_categories,
    variable_expense_categories,
)


def _txn(**kw):
    base = dict(
        amount=Decimal("12.34"),
        direction=Direction.EXPENSE,
        category=Category.GROCERIES,
        description="Kroger",
        date=date(2025, 8, 7),
        provenance=Provenance(tier=Tier.STRICT),
    )
    base.update(kw)
    return Transaction(**base)


def test_amount_must_be_positive():
    with pytest.raises(ValueError):
        _txn(amount=Decimal("0"))
    with pytest.raises(ValueError):
        _txn(amount=Decimal("-1.00"))


def test_description_length_capped():
    with pytest.raises(ValueError):
        _txn(description="x" * 101)
    assert _txn(description="x" * 100).description == "x" * 100


def test_ids_are_unique():
    assert _txn().id != _txn().id


def test_signed_amount():
    assert _txn().signed_amount == Decimal("-12.34")
    assert _txn(direction=Direction.INCOME, category=Category.SALARY).signed_amount == Decimal("12.34")


def test_as_dict_is_flat():
    row = _txn().as_dict()
    assert row["amount"] == "12.34"
    assert row["category"] == "Groceries"
    assert row["direction"] == "expense"
    assert row["tier"] == "strict"
    assert row["synthetic"] is False


def test_category_groups_partition():
    income = set(income_categories())
    expense = set(expense_categories())
    assert not income & expense
    assert income | expense == set(Category)
    assert set(fixed_expense_categories()) | set(variable_expense_categories()) < expense
    assert Category.MISCELLANEOUS in expense
