"""Presentation helpers (static figures)."""
