"""Passage - session and token lifecycle engine."""
