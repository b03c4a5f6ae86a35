"""Unit test fixtures: an in-memory university store."""

from datetime import datetime, timezone
from typing import Any, Sequence
from uuid import UUID, uuid4

import pytest

from university_api.core.universities.exceptions import UniversityNotFoundError
from university_api.core.universities.models import University


class InMemoryUniversityStore:
    """Dict-backed stand-in for ``UniversityRepository``."""

    def __init__(self) -> None:
        self.rows: dict[UUID, University] = {}
        self.calls: list[str] = []

    async def find_many(self, *, country: str | None, skip: int, take: int) -> Sequence[Any]:
        self.calls.append("find_many")
        rows = sorted(self.rows.values(), key=lambda u: (u.created_at, str(u.id)))
        if country is not None:
            rows = [u for u in rows if u.country.lower() == country.lower()]
        return rows[skip:skip + take]

    async def find_unique(self, university_id: UUID) -> University | None:
        self.calls.append("find_unique")
        return self.rows.get(university_id)

    async def find_first(
        self, *, country: str, state_province: str | None, name: str
    ) -> University | None:
        self.calls.append("find_first")
        for u in self.rows.values():
            if (u.country, u.state_province, u.name) == (country, state_province, name):
                return u
        return None

    async def create(self, data: dict[str, Any]) -> University:
        self.calls.append("create")
        university = University(id=uuid4(), created_at=datetime.now(timezone.utc), **data)
        self.rows[university.id] = university
        return university

    async def update(self, university_id: UUID, data: dict[str, Any]) -> University:
        self.calls.append("update")
        university = self.rows.get(university_id)
        if university is None:
            raise UniversityNotFoundError()
        for field, value in data.items():
            setattr(university, field, value)
        return university

    async def delete(self, university_id: UUID) -> University:
        self.calls.append("delete")
        university = self.rows.pop(university_id, None)
        if university is None:
            raise UniversityNotFoundError()
        return university


@pytest.fixture
def store() -> InMemoryUniversityStore:
    return InMemoryUniversityStore()
