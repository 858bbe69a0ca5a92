"""Banking domain package.

This package contains the domain model for imported bank statements:
raw statement rows, canonical transactions, identity hashing,
normalization and rule-based categorization.
"""
