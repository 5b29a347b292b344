"""Application layer - commands, queries, handlers and services.

Handlers orchestrate domain entities through injected protocols and return
Result types. No infrastructure imports.
"""
