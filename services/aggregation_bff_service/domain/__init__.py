"""Domain types for source aggregation."""
