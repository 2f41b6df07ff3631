"""Database initialization utilities."""

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.core.database import Base, engine

logger = logging.getLogger(__name__)


async def init_db() -> None:
    """Create the ships table from SQLAlchemy metadata.

    This is a convenience for development. In production,
    use Alembic migrations via `alembic upgrade head`.
    """
    # Registers the Ship mapper on Base.metadata
    import app.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def check_db_connection() -> bool:
    """Verify database connectivity."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True
    except (SQLAlchemyError, OSError):
        logger.warning("Database connectivity check failed", exc_info=True)
        return False
