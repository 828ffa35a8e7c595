"""Shared contracts for FinCloud services."""
