"""University model."""

from sqlalchemy import JSON, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from university_api.core.database.base import Base, TimestampMixin, UUIDMixin


class University(Base, UUIDMixin, TimestampMixin):
    """
    A university listed by the API.

    (country, state_province, name) identifies a university. country,
    state_province and alpha_two_code are fixed once the row exists.
    """

    __tablename__ = "universities"
    __table_args__ = (
        UniqueConstraint(
            "country",
            "state_province",
            "name",
            name="uq_universities_country_state_name",
        ),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    country: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    state_province: Mapped[str | None] = mapped_column(String(255))
    alpha_two_code: Mapped[str] = mapped_column(String(2), nullable=False)

    domains: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    web_pages: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<University {self.name} ({self.alpha_two_code})>"
