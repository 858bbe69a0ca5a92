"""Rule-based transaction categorization."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal

from rollcast.domain.banking.services.category_rules import (
    INFLOW_RULES,
    OTHER_INCOME,
    OTHER_OPERATING_EXPENSES,
    OUTFLOW_RULES,
    CategoryRule,
)
from rollcast.domain.banking.value_objects import Transaction, TransactionDirection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryMatch:
    category: str
    subcategory: str | None = None


@dataclass(frozen=True)
class CategoryTotal:
    """Aggregated amount and count for one category."""

    category: str
    direction: TransactionDirection
    count: int
    total: Decimal


class TransactionCategorizer:
    """Assign a category to transactions from ordered keyword rules.

    Inflow and outflow transactions use separate rule tables. The first rule
    whose keywords occur in the uppercased description wins; descriptions
    matching nothing fall back to the direction's "Other" category.
    """

    def __init__(
        self,
        inflow_rules: Sequence[CategoryRule] = INFLOW_RULES,
        outflow_rules: Sequence[CategoryRule] = OUTFLOW_RULES,
    ):
        self._inflow_rules = tuple(inflow_rules)
        self._outflow_rules = tuple(outflow_rules)

    def categorize(self, transaction: Transaction) -> Transaction:
        match = self.resolve(transaction.description, transaction.direction)
        return transaction.with_category(match.category, match.subcategory)

    def categorize_all(self, transactions: Iterable[Transaction]) -> list[Transaction]:
        categorized = [self.categorize(tx) for tx in transactions]
        logger.debug("Categorized %d transactions", len(categorized))
        return categorized

    def resolve(
        self,
        description: str,
        direction: TransactionDirection,
    ) -> CategoryMatch:
        text = description.upper()
        for rule in self._rules_for(direction):
            if rule.matches(text):
                return CategoryMatch(rule.category, rule.subcategory_for(text))
        return CategoryMatch(self._fallback_for(direction))

    def suggest_categories(
        self,
        description: str,
        direction: TransactionDirection,
    ) -> list[str]:
        """All categories whose rules match, in priority order.

        Always ends with the fallback category so the list is never empty.
        """
        text = description.upper()
        suggestions = [
            rule.category for rule in self._rules_for(direction) if rule.matches(text)
        ]
        fallback = self._fallback_for(direction)
        if fallback not in suggestions:
            suggestions.append(fallback)
        return suggestions

    def _rules_for(self, direction: TransactionDirection) -> tuple[CategoryRule, ...]:
        if direction is TransactionDirection.INFLOW:
            return self._inflow_rules
        return self._outflow_rules

    @staticmethod
    def _fallback_for(direction: TransactionDirection) -> str:
        if direction is TransactionDirection.INFLOW:
            return OTHER_INCOME
        return OTHER_OPERATING_EXPENSES


def summarize_categories(transactions: Iterable[Transaction]) -> list[CategoryTotal]:
    """Count and total per (category, direction), largest total first."""
    counts: dict[tuple[str, TransactionDirection], int] = {}
    totals: dict[tuple[str, TransactionDirection], Decimal] = {}
    for tx in transactions:
        key = (tx.category, tx.direction)
        counts[key] = counts.get(key, 0) + 1
        totals[key] = totals.get(key, Decimal("0")) + tx.amount

    summary = [
        CategoryTotal(category=key[0], direction=key[1], count=counts[key], total=total)
        for key, total in totals.items()
    ]
    return sorted(summary, key=lambda item: (-item.total, item.category))
