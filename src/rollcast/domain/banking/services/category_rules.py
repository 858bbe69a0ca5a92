"""Static categorization rule tables.

Rules are evaluated top to bottom and the first match wins, so a rule with
broad keywords must come after the narrower rules it would otherwise shadow.
"""

from dataclasses import dataclass

OTHER_INCOME = "Other Income"
OTHER_OPERATING_EXPENSES = "Other Operating Expenses"


@dataclass(frozen=True)
class CategoryRule:
    """Maps uppercase description keywords to a category.

    ``subcategories`` pairs a keyword with the label reported when it occurs
    in the description; the first listed pair that matches wins.
    """

    category: str
    keywords: tuple[str, ...]
    subcategories: tuple[tuple[str, str], ...] = ()

    def matches(self, text: str) -> bool:
        return any(keyword in text for keyword in self.keywords)

    def subcategory_for(self, text: str) -> str | None:
        for keyword, label in self.subcategories:
            if keyword in text:
                return label
        return None


_CLIENTS = ("ANTHROPIC", "CANVA", "SPLUNK", "WAYVE", "SIXWORKS", "CGI IT")
_VENDORS = (
    ("OUTREACH", "Outreach"),
    ("PINNACLE", "Pinnacle"),
    ("ANTHROPIC", "Anthropic"),
    ("CBIZ", "Cbiz"),
    ("IT METHODS", "It Methods"),
    ("LEADRABBIT", "Leadrabbit"),
    ("CANVA", "Canva"),
    ("SPLUNK", "Splunk"),
    ("SIXWORKS", "Sixworks"),
)

INFLOW_RULES: tuple[CategoryRule, ...] = (
    CategoryRule("Payment Processing Revenue", ("STRIPE",)),
    CategoryRule(
        "Client Payments",
        _CLIENTS,
        subcategories=tuple((client, client) for client in _CLIENTS),
    ),
    CategoryRule(
        "Expense Reimbursement",
        ("EXPENSES REPAYMENT", "REPAYMENT", "REIMBURSEMENT"),
    ),
    CategoryRule("Investment/Banking", ("PICTET", "BANQUE", "CITIBANK")),
)

OUTFLOW_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        "Reimbursement",
        ("RMPR",),
        subcategories=(
            ("WEATHERFORD", "Weatherford"),
            ("BAYS", "Bays"),
            ("AHR", "Ahr"),
            ("KRAMER", "Kramer"),
            ("BRUHN", "Bruhn"),
        ),
    ),
    CategoryRule("Ramp CC Payment", ("RAMP STATEMENT",)),
    CategoryRule(
        "Payroll",
        ("DEEL", "PEOPLE CENTER", "RIPPLING", "PAYROLL"),
        subcategories=(
            ("PEOPLE CENTER", "Rippling"),
            ("RIPPLING", "Rippling"),
            ("DEEL", "Deel"),
        ),
    ),
    CategoryRule("Vendor Bill Payment", ("RAMP TRN",), subcategories=_VENDORS),
    CategoryRule("Tax Payments", ("TAX", "IRS")),
)
