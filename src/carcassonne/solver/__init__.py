"""Backtracking search, legality checks and solution deduplication."""
