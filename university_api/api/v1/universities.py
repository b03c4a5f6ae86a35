"""Universities API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from university_api.config import settings
from university_api.core.database.session import get_db
from university_api.core.universities.repository import UniversityRepository
from university_api.core.universities.schemas import (
    UniversityCreate,
    UniversityCreatedResponse,
    UniversityDeletedResponse,
    UniversityListResponse,
    UniversityResponse,
    UniversityUpdate,
    UniversityUpdatedResponse,
    to_response,
    to_summary,
)
from university_api.core.universities.service import UniversityService

router = APIRouter()

# Largest page whose OFFSET still fits a signed 64-bit integer
MAX_PAGE = (2**63 - 1) // settings.page_size


def get_university_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UniversityService:
    """Build a service bound to the request's database session."""
    return UniversityService(UniversityRepository(db), page_size=settings.page_size)


UniversityServiceDep = Annotated[UniversityService, Depends(get_university_service)]


@router.get("", response_model=UniversityListResponse)
async def list_universities(
    service: UniversityServiceDep,
    country: str | None = Query(None),
    page: int = Query(1, ge=1, le=MAX_PAGE),
) -> UniversityListResponse:
    """List universities, optionally filtered by country (case-insensitive)."""
    universities = await service.list_universities(country=country, page=page)

    return UniversityListResponse(
        page=page,
        universities=[to_summary(u) for u in universities],
        amount=len(universities),
    )


@router.get("/{university_id}", response_model=UniversityResponse)
async def get_university(
    university_id: str,
    service: UniversityServiceDep,
) -> UniversityResponse:
    """Get university by ID."""
    university = await service.get_university(university_id)
    return to_response(university)


@router.post(
    "",
    response_model=UniversityCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_university(
    data: UniversityCreate,
    service: UniversityServiceDep,
) -> UniversityCreatedResponse:
    """Create a university after validating it and checking for duplicates."""
    university = await service.create_university(data)
    return UniversityCreatedResponse(new_university=to_response(university))


@router.api_route(
    "/{university_id}",
    methods=["PATCH", "PUT"],
    response_model=UniversityUpdatedResponse,
)
async def update_university(
    university_id: str,
    data: UniversityUpdate,
    service: UniversityServiceDep,
) -> UniversityUpdatedResponse:
    """Update name, domains and/or web pages."""
    university = await service.update_university(university_id, data)
    return UniversityUpdatedResponse(updated_university=to_response(university))


@router.delete("/{university_id}", response_model=UniversityDeletedResponse)
async def delete_university(
    university_id: str,
    service: UniversityServiceDep,
) -> UniversityDeletedResponse:
    """Delete university and return the removed record."""
    university = await service.delete_university(university_id)
    return UniversityDeletedResponse(deleted_university=to_response(university))
