"""Aggregation BFF Service - composes FinCloud data sources for the front-ends."""
