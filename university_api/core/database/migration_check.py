"""Migration status checker.

This module provides functions to check if database migrations are up to date.
It's designed to be called during application startup to prevent cryptic runtime
errors when migrations haven't been run.
"""

from pathlib import Path
from typing import Any

from alembic import script
from alembic.config import Config
from sqlalchemy import inspect, text
from sqlalchemy.ext.asyncio import AsyncEngine

from university_api.core.logging import get_logger

logger = get_logger(__name__)

ALEMBIC_INI_PATH = Path(__file__).resolve().parents[3] / "alembic.ini"


def get_head_revision(alembic_ini_path: Path = ALEMBIC_INI_PATH) -> str | None:
    """Return the latest revision known to the Alembic script directory."""
    if not alembic_ini_path.exists():
        logger.error("alembic_ini_not_found", path=str(alembic_ini_path))
        return None

    alembic_cfg = Config(str(alembic_ini_path))
    script_dir = script.ScriptDirectory.from_config(alembic_cfg)
    return script_dir.get_current_head()


async def check_migration_status(
    engine: AsyncEngine, alembic_ini_path: Path = ALEMBIC_INI_PATH
) -> dict[str, Any]:
    """Check if database migrations are up to date.

    Args:
        engine: SQLAlchemy async engine
        alembic_ini_path: Location of alembic.ini used to resolve the head revision

    Returns:
        Dictionary with migration status information:
        - alembic_table_exists: bool - whether alembic_version table exists
        - current_revision: Optional[str] - current database revision
        - head_revision: Optional[str] - latest available revision
        - is_up_to_date: bool - whether database is at latest revision
    """
    result: dict[str, Any] = {
        "alembic_table_exists": False,
        "current_revision": None,
        "head_revision": None,
        "is_up_to_date": False,
    }

    async with engine.begin() as conn:
        table_exists = await conn.run_sync(
            lambda sync_conn: inspect(sync_conn).has_table("alembic_version")
        )
        result["alembic_table_exists"] = bool(table_exists)

        if not table_exists:
            logger.warning("alembic_version_table_missing")
            return result

        current_rev = await conn.scalar(text("SELECT version_num FROM alembic_version"))
        result["current_revision"] = current_rev

    head_revision = get_head_revision(alembic_ini_path)
    result["head_revision"] = head_revision

    if head_revision is not None and current_rev == head_revision:
        result["is_up_to_date"] = True
        logger.info("migrations_up_to_date", revision=current_rev)
    else:
        logger.warning(
            "migrations_out_of_date",
            current_revision=current_rev,
            head_revision=head_revision,
        )

    return result


async def require_migrations(
    engine: AsyncEngine,
    fail_on_outdated: bool = True,
    alembic_ini_path: Path = ALEMBIC_INI_PATH,
) -> None:
    """Check migration status and optionally fail if not up to date.

    Args:
        engine: SQLAlchemy async engine
        fail_on_outdated: If True, raises RuntimeError when migrations are outdated.
                         If False, only logs a warning.
        alembic_ini_path: Location of alembic.ini

    Raises:
        RuntimeError: If migrations are not up to date and fail_on_outdated=True
    """
    status = await check_migration_status(engine, alembic_ini_path)

    if not status["alembic_table_exists"]:
        error_msg = (
            "DATABASE NOT INITIALIZED!\n"
            "The alembic_version table does not exist.\n"
            "Migrations have never been run.\n\n"
            "To fix this, run:\n"
            "  alembic upgrade head\n"
        )
        logger.error("database_not_initialized")
        if fail_on_outdated:
            raise RuntimeError(error_msg)
        return

    if not status["is_up_to_date"]:
        error_msg = (
            f"DATABASE MIGRATIONS OUT OF DATE!\n"
            f"Current revision: {status['current_revision']}\n"
            f"Head revision: {status['head_revision']}\n\n"
            f"To fix this, run:\n"
            f"  alembic upgrade head\n"
        )
        logger.error(
            "database_migrations_outdated",
            current_revision=status["current_revision"],
            head_revision=status["head_revision"],
        )
        if fail_on_outdated:
            raise RuntimeError(error_msg)
