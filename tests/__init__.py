"""University API Test Suite.

Test Structure:
    tests/
    ├── conftest.py          # Shared fixtures for all tests
    ├── unit/                # Unit tests (in-memory store, no database)
    └── integration/         # Integration tests (in-memory SQLite database)

Run all tests:
    pytest

Run specific test categories:
    pytest -m unit
    pytest -m integration
"""
