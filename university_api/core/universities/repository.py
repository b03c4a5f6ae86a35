"""Persistence client for universities.

A narrow async interface over an ``AsyncSession``. The service depends on
this interface only, which lets tests swap in an in-memory implementation.
"""

from typing import Any, Protocol, Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from university_api.core.universities.exceptions import (
    UniversityConflictError,
    UniversityNotFoundError,
)
from university_api.core.universities.models import University


class UniversityStore(Protocol):
    """Operations the university service needs from storage."""

    async def find_many(
        self, *, country: str | None, skip: int, take: int
    ) -> Sequence[Any]: ...

    async def find_unique(self, university_id: UUID) -> University | None: ...

    async def find_first(
        self, *, country: str, state_province: str | None, name: str
    ) -> University | None: ...

    async def create(self, data: dict[str, Any]) -> University: ...

    async def update(self, university_id: UUID, data: dict[str, Any]) -> University: ...

    async def delete(self, university_id: UUID) -> University: ...


class UniversityRepository:
    """SQLAlchemy implementation of ``UniversityStore``."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_many(
        self, *, country: str | None, skip: int, take: int
    ) -> Sequence[Any]:
        """Return projected rows (id, name, country, state_province)."""
        query = select(
            University.id,
            University.name,
            University.country,
            University.state_province,
        )
        if country is not None:
            query = query.where(func.lower(University.country) == func.lower(country))

        query = query.order_by(University.created_at, University.id).offset(skip).limit(take)
        result = await self.session.execute(query)
        return result.all()

    async def find_unique(self, university_id: UUID) -> University | None:
        return await self.session.get(University, university_id)

    async def find_first(
        self, *, country: str, state_province: str | None, name: str
    ) -> University | None:
        if state_province is None:
            state_clause = University.state_province.is_(None)
        else:
            state_clause = University.state_province == state_province

        result = await self.session.execute(
            select(University)
            .where(
                University.country == country,
                state_clause,
                University.name == name,
            )
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def create(self, data: dict[str, Any]) -> University:
        university = University(**data)
        self.session.add(university)
        try:
            await self.session.commit()
        except IntegrityError as e:
            # Lost a race against a concurrent insert of the same university
            await self.session.rollback()
            raise UniversityConflictError() from e

        await self.session.refresh(university)
        return university

    async def update(self, university_id: UUID, data: dict[str, Any]) -> University:
        university = await self.find_unique(university_id)
        if university is None:
            raise UniversityNotFoundError()

        for field, value in data.items():
            setattr(university, field, value)

        try:
            await self.session.commit()
        except IntegrityError as e:
            # Renamed onto an existing (country, state_province, name)
            await self.session.rollback()
            raise UniversityConflictError() from e

        await self.session.refresh(university)
        return university

    async def delete(self, university_id: UUID) -> University:
        university = await self.find_unique(university_id)
        if university is None:
            raise UniversityNotFoundError()

        await self.session.delete(university)
        await self.session.commit()
        return university
