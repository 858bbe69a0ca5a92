"""Reconciliation domain package.

Detects transactions that were already imported: exact matches through the
stored hash index, near matches through date, amount and description
proximity.
"""
