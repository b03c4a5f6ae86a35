"""Request bodies and public response shapes for universities.

The public shape renames two storage fields: ``id`` is exposed as ``_id``
and ``state_province`` as ``state-province``.
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class UniversityCreate(BaseModel):
    """Body of a create request.

    Every field is optional here. Missing values are reported together by
    the service in a single error body.
    """

    alpha_two_code: str | None = None
    web_pages: list[str] | None = None
    name: str | None = None
    country: str | None = None
    domains: list[str] | None = None
    state_province: str | None = Field(
        default=None,
        validation_alias=AliasChoices("state_province", "state-province"),
    )


class UniversityUpdate(BaseModel):
    """Body of an update request. Only these fields can change after creation."""

    web_pages: list[str] | None = None
    name: str | None = None
    domains: list[str] | None = None

    def changes(self) -> dict[str, Any]:
        """Fields that were provided with a value."""
        return self.model_dump(exclude_none=True)


class PublicModel(BaseModel):
    """Response model that renders aliases but can be built from field names."""

    model_config = ConfigDict(populate_by_name=True)


class UniversitySummary(PublicModel):
    """List item."""

    id: str = Field(alias="_id")
    name: str
    country: str
    state_province: str | None = Field(default=None, alias="state-province")


class UniversityResponse(UniversitySummary):
    """Full public record."""

    alpha_two_code: str
    domains: list[str]
    web_pages: list[str]


class UniversityListResponse(PublicModel):
    page: int
    universities: list[UniversitySummary]
    amount: int


class UniversityCreatedResponse(PublicModel):
    message: str = "Created University"
    new_university: UniversityResponse = Field(alias="newUniversity")


class UniversityUpdatedResponse(PublicModel):
    message: str = "Updated University"
    updated_university: UniversityResponse = Field(alias="updatedUniversity")


class UniversityDeletedResponse(PublicModel):
    message: str = "Deleted University"
    deleted_university: UniversityResponse = Field(alias="deletedUniversity")


def to_summary(university: Any) -> UniversitySummary:
    """Reshape a stored row (or projected row) into a list item."""
    return UniversitySummary(
        id=str(university.id),
        name=university.name,
        country=university.country,
        state_province=university.state_province,
    )


def to_response(university: Any) -> UniversityResponse:
    """Reshape a stored row into the full public record."""
    return UniversityResponse(
        id=str(university.id),
        name=university.name,
        country=university.country,
        state_province=university.state_province,
        alpha_two_code=university.alpha_two_code,
        domains=list(university.domains or []),
        web_pages=list(university.web_pages or []),
    )
