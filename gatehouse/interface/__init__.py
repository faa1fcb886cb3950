"""Interface layer."""
