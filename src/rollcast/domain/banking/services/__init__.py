"""Domain services for statement normalization and categorization."""

from rollcast.domain.banking.services.category_rules import (
    INFLOW_RULES,
    OTHER_INCOME,
    OTHER_OPERATING_EXPENSES,
    OUTFLOW_RULES,
    CategoryRule,
)
from rollcast.domain.banking.services.transaction_categorizer import (
    CategoryMatch,
    CategoryTotal,
    TransactionCategorizer,
    summarize_categories,
)
from rollcast.domain.banking.services.transaction_hash import (
    compute_fuzzy_hash,
    compute_transaction_hash,
    rolling_hash,
)
from rollcast.domain.banking.services.transaction_normalizer import (
    DATE_FORMATS,
    TransactionNormalizer,
    infer_direction,
    parse_amount,
    parse_posting_date,
)

__all__ = [
    "DATE_FORMATS",
    "INFLOW_RULES",
    "OTHER_INCOME",
    "OTHER_OPERATING_EXPENSES",
    "OUTFLOW_RULES",
    "CategoryMatch",
    "CategoryRule",
    "CategoryTotal",
    "TransactionCategorizer",
    "TransactionNormalizer",
    "compute_fuzzy_hash",
    "compute_transaction_hash",
    "infer_direction",
    "parse_amount",
    "parse_posting_date",
    "rolling_hash",
    "summarize_categories",
]
