"""Test suite for Passage.

Test structure follows the test pyramid:
- unit/: Unit tests - domain logic, services and handlers in isolation
- integration/: Integration tests - real adapters (PyJWT, bcrypt,
  structlog, httpx, PostgreSQL)
"""
