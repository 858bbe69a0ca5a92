"""Forecasting domain package.

Rolling week timelines, user estimates and scenarios, receivables
projections and the aggregation that turns them into week buckets with a
running balance.
"""
