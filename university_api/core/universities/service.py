"""University operations: validation, duplicate detection and persistence calls."""

from typing import Any, Sequence
from uuid import UUID

from university_api.core.logging import get_logger
from university_api.core.universities.exceptions import (
    ALPHA_TWO_CODE_MESSAGE,
    MISSING_FIELDS_MESSAGE,
    UniversityConflictError,
    UniversityNotFoundError,
    UniversityValidationError,
)
from university_api.core.universities.models import University
from university_api.core.universities.repository import UniversityStore
from university_api.core.universities.schemas import UniversityCreate, UniversityUpdate

logger = get_logger(__name__)

PAGE_SIZE = 20
REQUIRED_FIELDS = ("alpha_two_code", "web_pages", "name", "country", "domains")


def parse_university_id(university_id: str) -> UUID:
    """Parse a public identifier. Anything that is not a UUID matches nothing."""
    try:
        return UUID(university_id)
    except (ValueError, TypeError, AttributeError):
        raise UniversityNotFoundError() from None


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


class UniversityService:
    """
    Handles the five university operations.

    Holds no state besides the injected store, so one instance per request
    is enough.
    """

    def __init__(self, store: UniversityStore, page_size: int = PAGE_SIZE):
        self.store = store
        self.page_size = page_size

    async def list_universities(
        self, country: str | None = None, page: int = 1
    ) -> Sequence[Any]:
        """Return one page of universities, optionally filtered by country."""
        if page < 1:
            raise UniversityValidationError("Page must be a positive integer", page=page)

        return await self.store.find_many(
            country=country,
            skip=(page - 1) * self.page_size,
            take=self.page_size,
        )

    async def get_university(self, university_id: str) -> University:
        university = await self.store.find_unique(parse_university_id(university_id))
        if university is None:
            raise UniversityNotFoundError()
        return university

    async def create_university(self, data: UniversityCreate) -> University:
        """
        Validate and store a new university.

        Raises:
            UniversityValidationError: a required field is missing or
                alpha_two_code is not two characters long
            UniversityConflictError: the same country, state/province and
                name is already stored
        """
        if any(_is_missing(getattr(data, field)) for field in REQUIRED_FIELDS):
            raise UniversityValidationError(
                MISSING_FIELDS_MESSAGE,
                **{field: getattr(data, field) for field in REQUIRED_FIELDS},
            )

        if len(data.alpha_two_code) != 2:
            raise UniversityValidationError(ALPHA_TWO_CODE_MESSAGE)

        existing = await self.store.find_first(
            country=data.country,
            state_province=data.state_province,
            name=data.name,
        )
        if existing is not None:
            logger.info(
                "university_duplicate_rejected",
                name=data.name,
                country=data.country,
                state_province=data.state_province,
            )
            raise UniversityConflictError()

        university = await self.store.create(
            {
                "alpha_two_code": data.alpha_two_code,
                "web_pages": data.web_pages,
                "name": data.name,
                "country": data.country,
                "domains": data.domains,
                "state_province": data.state_province,
            }
        )
        logger.info("university_created", university_id=str(university.id), name=university.name)
        return university

    async def update_university(self, university_id: str, data: UniversityUpdate) -> University:
        """Apply a partial update. Only web_pages, name and domains can change."""
        changes = data.changes()
        university = await self.store.update(parse_university_id(university_id), changes)
        logger.info(
            "university_updated",
            university_id=str(university.id),
            fields=sorted(changes),
        )
        return university

    async def delete_university(self, university_id: str) -> University:
        university = await self.store.delete(parse_university_id(university_id))
        logger.info("university_deleted", university_id=str(university.id))
        return university
