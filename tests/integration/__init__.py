"""Integration tests for University API.

Integration tests:
- Run the FastAPI application against an in-memory SQLite database
- Test API endpoints, the seed script and the migration check

Markers:
- @pytest.mark.integration - All integration tests
"""
