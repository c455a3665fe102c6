"""Concrete implementations of the `scrivener.interfaces` contracts."""
