from datetime import date

import pytest

# Mid-October: August/September statement lines infer the current year.
TODAY = date(2025, 10, 15)

REGIONS_STATEMENT = """\
REGIONS BANK
ACCOUNT # 0123456789
LIFEGREEN CHECKING
Page 1 of 4
SUMMARY
Beginning Balance $1,234.56
Deposits & Credits $2,614.81
Withdrawals $1,368.60
Ending Balance $2,517.96

DEPOSITS & CREDITS
08/26    Oliver Ollesch  Payments Oliver Ollesch 281475400133133        90.93
09/01    Gusto Payroll Ixana Quasistatics                            2,523.88
Total Deposits & Credits                                            $2,614.81

WITHDRAWALS
08/14 Monthly Fee 8.00
07/21 Card Credit  Venmo*ollesch O  4829  New York City Ny 10014    5595 104.49
08/18 Card Purchase  Walmart Supercenter  4829  Austin Tx 78701    1234 56.20
08/20 Rent Payment Apartment Complex 1,200.00
Total Withdrawals $1,368.60
"""

# Headers lost in extraction; only amount-bearing lines survive.
HEADERLESS_STATEMENT = """\
Statement period 08/01/2025 - 08/31/2025
08/05 PAYROLL DEPOSIT ACME CORP 2,100.00
08/07 KROGER #123 ATLANTA 54.32
Coffee purchase at kiosk 0.75
ZELLE TO JANE DOE RENT SHARE 45.00
"""


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def regions_text():
    return REGIONS_STATEMENT


@pytest.fixture
def headerless_text():
    return HEADERLESS_STATEMENT


@pytest.fixture
def statement_txt(tmp_path):
    p = tmp_path / "statement.txt"
    p.write_text(REGIONS_STATEMENT, encoding="utf-8")
    return p
