"""University API: CRUD service over a relational universities table."""

__version__ = "0.1.0"
