"""Shared helpers for loaddir core (merging, text parsing)."""
