"""Load universities from a JSON file into the database.

The file uses the public world-universities dataset format: a list of
objects with ``name``, ``country``, ``alpha_two_code``, ``state-province``,
``domains`` and ``web_pages``. Records that already exist are skipped.

Usage:
    python seed_universities.py world_universities_and_domains.json
"""
import argparse
import asyncio
import json
from pathlib import Path

from pydantic import ValidationError

from university_api.config import settings
from university_api.core.database.session import async_session_factory, engine
from university_api.core.logging import get_logger, setup_logging
from university_api.core.universities.exceptions import (
    UniversityConflictError,
    UniversityValidationError,
)
from university_api.core.universities.repository import UniversityRepository
from university_api.core.universities.schemas import UniversityCreate
from university_api.core.universities.service import UniversityService

logger = get_logger("seed_universities")


async def seed_universities(path: Path, session_factory=async_session_factory) -> dict[str, int]:
    """Insert every valid, not yet stored university from ``path``."""
    records = json.loads(path.read_text(encoding="utf-8"))
    counts = {"created": 0, "skipped": 0, "invalid": 0}

    async with session_factory() as session:
        service = UniversityService(UniversityRepository(session))

        for record in records:
            try:
                await service.create_university(UniversityCreate.model_validate(record))
                counts["created"] += 1
            except UniversityConflictError:
                counts["skipped"] += 1
            except (UniversityValidationError, ValidationError) as e:
                counts["invalid"] += 1
                logger.warning(
                    "seed_record_invalid",
                    name=record.get("name") if isinstance(record, dict) else None,
                    error=str(e),
                )

    logger.info("seed_completed", path=str(path), **counts)
    return counts


async def main(path: Path) -> None:
    setup_logging(
        log_level=settings.log_level,
        log_format=settings.log_format,
        is_development=settings.is_development,
    )
    try:
        await seed_universities(path)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("path", type=Path, help="JSON file with universities")
    args = parser.parse_args()
    asyncio.run(main(args.path))
