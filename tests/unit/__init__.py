"""Unit tests for University API core functionality.

Unit tests should:
- Not require a database
- Test the service against the in-memory store from conftest.py
- Be fast to execute
"""
