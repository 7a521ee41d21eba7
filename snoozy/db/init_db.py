"""
Database initialization.

Creates all tables.
"""

import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from snoozy.db.session import engine as default_engine

logger = logging.getLogger(__name__)


def init_db(engine: Optional[Engine] = None) -> None:
    """Create every SQLModel table that does not exist yet."""

    # Import all models so SQLModel.metadata has them
    import snoozy.db.base  # noqa: F401

    target = engine or default_engine
    logger.info("Creating database tables on %s", target.url)
    SQLModel.metadata.create_all(target)
    logger.info("Database initialization complete")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
