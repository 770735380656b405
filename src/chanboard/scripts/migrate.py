"""Apply the Alembic migrations to the configured database."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from alembic import command
from alembic.config import Config

from chanboard.core.settings import settings

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parents[3] / "migrations"


def build_config(url: str | None = None) -> Config:
    """Return an Alembic config pointing at the project's migrations folder."""
    cfg = Config(str(MIGRATIONS_DIR / "alembic.ini"))
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    cfg.set_main_option("sqlalchemy.url", url or settings.database_url_sync)
    return cfg


def run_upgrade(revision: str = "head", url: str | None = None) -> None:
    logger.info("Upgrading database to %s", revision)
    command.upgrade(build_config(url), revision)


def run_downgrade(revision: str, url: str | None = None) -> None:
    logger.info("Downgrading database to %s", revision)
    command.downgrade(build_config(url), revision)


def main() -> None:
    parser = argparse.ArgumentParser(description="Apply chanboard schema migrations")
    parser.add_argument("--revision", default="head", help="Target revision (default: head)")
    parser.add_argument(
        "--downgrade",
        action="store_true",
        help="Downgrade to --revision instead of upgrading.",
    )
    parser.add_argument("--url", default=None, help="Override database URL")
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level)
    try:
        if args.downgrade:
            run_downgrade(args.revision, args.url)
        else:
            run_upgrade(args.revision, args.url)
    except Exception:
        logger.exception("Migration failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
