"""Gatehouse - invite-gated admission to a media server."""

__version__ = "0.1.0"
