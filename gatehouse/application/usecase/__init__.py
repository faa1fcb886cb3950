"""Use cases, one per exposed operation."""
