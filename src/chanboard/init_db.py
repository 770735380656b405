"""Create the schema from ORM metadata and seed the default board.

Development shortcut; deployed databases are built with ``chanboard-migrate``.
"""
import logging

from chanboard.core.settings import settings
from chanboard.db.session import SessionLocal, create_tables
from chanboard.repositories.board_repo import BoardRepository

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Initialize the database by creating all tables."""
    create_tables()
    with SessionLocal() as db:
        BoardRepository(db).ensure_default()
        db.commit()


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level)
    init_db()
    logger.info("Database initialized.")
