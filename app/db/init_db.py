"""
Database initialization.

Creates all tables and seeds the default practice catalog.
"""

import logging

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel

from app.db.repositories.practice import PracticeRepository
from app.db.seed import DEFAULT_PRACTICES
from app.db.session import engine as default_engine
from app.models.practice import PracticeRecord
from app.schemas.practice import PracticeCreate

logger = logging.getLogger(__name__)


def seed_practices(session: Session, practices: list[PracticeCreate] = DEFAULT_PRACTICES) -> int:
    """Insert catalog entries whose ``key`` is not present yet.

    Returns:
        Number of practices inserted.
    """
    repository = PracticeRepository(session)
    inserted = 0
    for practice in practices:
        if repository.get_by_key(practice.key):
            continue
        data = practice.model_dump(mode="json")
        repository.create(PracticeRecord(**data))
        inserted += 1
    return inserted


def init_db(engine: Engine = default_engine, seed: bool = True) -> None:
    """
    Initialize database schema.

    - Creates all SQLModel tables
    - Seeds the default practice catalog (if requested)
    """

    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    logger.info("creating database tables")
    SQLModel.metadata.create_all(engine)

    if seed:
        with Session(engine) as session:
            inserted = seed_practices(session)
        logger.info("seeded %d practices", inserted)


if __name__ == "__main__":
    from app.core.logging import configure_logging

    configure_logging()
    init_db()
