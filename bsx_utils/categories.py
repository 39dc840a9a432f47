# Default categorization table. Same shape as config/rules.example.yaml,
# so a YAML rules file can replace it wholesale.
# Higher priority is evaluated first; first applicable rule wins.

# Words that force a transaction to Income regardless of section.
INCOME_SIGNALS = ("deposit", "credit", "payroll")
# Phrases that contain an income word but describe spending.
INCOME_SIGNAL_EXCEPTIONS = ("credit card", "card payment", "credit union", "security deposit")

# Income without a keyword above this amount is treated as salary.
SALARY_THRESHOLD = 1000.0

DEFAULT_RULES = {
    "rules": [
        # ---- income ----
        {
            "name": "payroll",
            "priority": 100,
            "if_direction": "income",
            "if_contains": ["payroll", "salary", "direct dep"],
            "assign": {"category": "Salary"},
        },
        {
            "name": "gusto_paycheck",
            "priority": 95,
            "if_direction": "income",
            "if_contains": ["gusto", "adp"],
            "if_amount_gt": SALARY_THRESHOLD,
            "assign": {"category": "Salary"},
        },
        {
            "name": "freelance",
            "priority": 90,
            "if_direction": "income",
            "if_contains": ["freelance", "contract", "upwork", "fiverr"],
            "assign": {"category": "Freelance"},
        },
        {
            "name": "investment",
            "priority": 90,
            "if_direction": "income",
            "if_contains": ["dividend", "interest paid", "interest earned", "brokerage"],
            "assign": {"category": "Investment Returns"},
        },
        {
            "name": "p2p_income",
            "priority": 85,
            "if_direction": "income",
            "if_contains": ["venmo", "zelle", "wise", "paypal", "cash app", "actverify"],
            "assign": {"category": "Other Income"},
        },
        {
            "name": "large_deposit",
            "priority": 10,
            "if_direction": "income",
            "if_amount_gt": SALARY_THRESHOLD,
            "assign": {"category": "Salary"},
        },
        # ---- fixed expenses ----
        {
            "name": "rent",
            "priority": 80,
            "if_direction": "expense",
            "if_contains": ["rent", "apartment", "landlord", "property mgmt"],
            "assign": {"category": "Rent"},
        },
        {
            "name": "loan",
            "priority": 80,
            "if_direction": "expense",
            "if_contains": ["loan", "student", "navient", "nelnet", "sallie mae"],
            "assign": {"category": "Loan Payment"},
        },
        {
            "name": "insurance",
            "priority": 80,
            "if_direction": "expense",
            "if_contains": ["insurance", "geico", "progressive", "state farm", "allstate"],
            "assign": {"category": "Insurance"},
        },
        {
            "name": "subscriptions",
            "priority": 75,
            "if_direction": "expense",
            "if_contains": [
                "subscription",
                "netflix",
                "spotify",
                "hulu",
                "disney+",
                "youtube premium",
                "apple.com/bill",
                "foursqu",
            ],
            "assign": {"category": "Subscriptions"},
        },
        {
            "name": "phone",
            "priority": 70,
            "if_direction": "expense",
            "if_contains": ["phone", "verizon", "at&t", "t-mobile", "tmobile", "wireless"],
            "assign": {"category": "Phone"},
        },
        {
            "name": "internet",
            "priority": 70,
            "if_direction": "expense",
            "if_contains": ["internet", "wifi", "comcast", "xfinity", "spectrum"],
            "assign": {"category": "Internet"},
        },
        {
            "name": "utilities",
            "priority": 65,
            "if_direction": "expense",
            "if_contains": ["electric", "water", "utility", "power co", "energy"],
            "assign": {"category": "Utilities"},
        },
        # ---- variable expenses ----
        {
            "name": "fees",
            "priority": 60,
            "if_direction": "expense",
            "if_contains": ["monthly fee", "service fee", "atm fee", "overdraft"],
            "assign": {"category": "Miscellaneous"},
        },
        {
            "name": "groceries",
            "priority": 50,
            "if_direction": "expense",
            "if_contains": [
                "grocery",
                "walmart",
                "kroger",
                "target",
                "publix",
                "aldi",
                "whole foods",
                "trader joe",
                "safeway",
                "wine",
                "spirit",
            ],
            "assign": {"category": "Groceries"},
        },
        {
            "name": "dining",
            "priority": 50,
            "if_direction": "expense",
            "if_contains": [
                "restaurant",
                "mcdonald",
                "starbucks",
                "pizza",
                "chipotle",
                "doordash",
                "grubhub",
                "cafe",
            ],
            "assign": {"category": "Dining Out"},
        },
        {
            "name": "transportation",
            "priority": 50,
            "if_direction": "expense",
            "if_contains": ["uber", "lyft", "taxi", "shell", "exxon", "chevron", "gas", "fuel", "parking"],
            "assign": {"category": "Transportation"},
        },
        {
            "name": "entertainment",
            "priority": 40,
            "if_direction": "expense",
            "if_contains": ["cinema", "theater", "theatre", "steam games", "ticketmaster"],
            "assign": {"category": "Entertainment"},
        },
        {
            "name": "clothing",
            "priority": 40,
            "if_direction": "expense",
            "if_contains": ["clothing", "apparel", "h&m", "zara", "old navy"],
            "assign": {"category": "Clothing"},
        },
        {
            "name": "personal_care",
            "priority": 40,
            "if_direction": "expense",
            "if_contains": ["salon", "barber", "day spa"],
            "assign": {"category": "Personal Care"},
        },
        {
            "name": "healthcare",
            "priority": 40,
            "if_direction": "expense",
            "if_contains": ["medical", "doctor", "pharmacy", "cvs", "walgreens", "dental"],
            "assign": {"category": "Healthcare"},
        },
        {
            "name": "education",
            "priority": 40,
            "if_direction": "expense",
            "if_contains": ["tuition", "university", "coursera", "udemy", "bookstore"],
            "assign": {"category": "Education"},
        },
        {
            "name": "shopping",
            "priority": 30,
            "if_direction": "expense",
            "if_contains": ["amazon", "shop"],
            "assign": {"category": "Miscellaneous"},
        },
    ],
    "defaults": {
        "income": "Other Income",
        "expense": "Miscellaneous",
    },
}
