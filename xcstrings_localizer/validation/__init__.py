"""Validation helpers for returned translations."""

from .placeholder_validator import PlaceholderIssue, PlaceholderValidator

__all__ = ["PlaceholderIssue", "PlaceholderValidator"]
