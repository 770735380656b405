"""Run the Alembic history against a scratch SQLite database."""

from pathlib import Path

import pytest
from alembic import command
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.exc import IntegrityError

from chanboard.db.session import Base, enable_sqlite_foreign_keys
from chanboard.scripts.migrate import build_config, run_downgrade, run_upgrade

EXPECTED_TABLES = {"alembic_version", "bans", "boards", "posts", "replies", "sessions", "users"}


@pytest.fixture()
def db_url(tmp_path: Path) -> str:
    return f"sqlite:///{tmp_path / 'migrations.db'}"


def _schema(url: str) -> dict[str, list[str]]:
    engine = create_engine(url)
    try:
        inspector = inspect(engine)
        return {
            table: sorted(col["name"] for col in inspector.get_columns(table))
            for table in inspector.get_table_names()
        }
    finally:
        engine.dispose()


def _scalar(url: str, sql: str):
    engine = create_engine(url)
    try:
        with engine.connect() as conn:
            return conn.execute(text(sql)).scalar_one()
    finally:
        engine.dispose()


def test_upgrade_creates_every_table(db_url):
    run_upgrade(url=db_url)
    schema = _schema(db_url)

    assert set(schema) == EXPECTED_TABLES
    assert "ip" in schema["posts"]
    assert _scalar(db_url, "SELECT title FROM boards WHERE name = 'b'") == "Random"


def test_head_matches_orm_metadata(db_url):
    run_upgrade(url=db_url)
    schema = _schema(db_url)

    for table in Base.metadata.sorted_tables:
        assert schema[table.name] == sorted(c.name for c in table.columns), table.name


def test_upgrade_twice_is_a_noop(db_url):
    run_upgrade(url=db_url)
    before = _schema(db_url)

    run_upgrade(url=db_url)
    assert _schema(db_url) == before


def test_reapplying_every_revision_is_guarded(db_url):
    run_upgrade(url=db_url)
    before = _schema(db_url)

    # Forget the applied history so each revision runs again over existing tables.
    command.stamp(build_config(db_url), "base")
    run_upgrade(url=db_url)

    assert _schema(db_url) == before
    assert _scalar(db_url, "SELECT COUNT(*) FROM boards") == 1


def test_downgrade_to_base_drops_everything(db_url):
    run_upgrade(url=db_url)
    run_downgrade("base", url=db_url)

    assert set(_schema(db_url)) == {"alembic_version"}


def test_downgrade_one_step_removes_replies_only(db_url):
    run_upgrade(url=db_url)
    run_downgrade("-1", url=db_url)

    assert set(_schema(db_url)) == EXPECTED_TABLES - {"replies"}


ROOT_POST = (
    "INSERT INTO posts (id, board, sage, html_content, thread, ip) "
    "VALUES (1, 'b', 0, 'op', 1, '127.0.0.1')"
)


@pytest.mark.parametrize(
    "statement",
    [
        pytest.param(
            "INSERT INTO posts (id, board, sage, html_content, thread, ip) "
            "VALUES (1, 'nope', 0, 'x', 1, '127.0.0.1')",
            id="post-on-missing-board",
        ),
        pytest.param(
            "INSERT INTO users (id, name, password, level) "
            "VALUES ('0123456789abcdef0123456789abcdef', 'root', X'00', 'superuser')",
            id="unknown-privilege-level",
        ),
        pytest.param(
            "INSERT INTO posts (id, board, sage, html_content, thread, ip) "
            "VALUES (2, 'b', 0, 'x', 999, '127.0.0.1')",
            id="dangling-thread",
        ),
        pytest.param(
            "INSERT INTO replies (message_id, message_board, reply_id, reply_board, reply_thread) "
            "VALUES (999, 'b', 1, 'b', 1)",
            id="reply-to-missing-post",
        ),
    ],
)
def test_migrated_schema_enforces_constraints(db_url, statement):
    run_upgrade(url=db_url)
    engine = create_engine(db_url)
    enable_sqlite_foreign_keys(engine)
    try:
        with engine.connect() as conn:
            with conn.begin():
                conn.execute(text(ROOT_POST))

            with pytest.raises(IntegrityError):
                with conn.begin():
                    conn.execute(text(statement))
    finally:
        engine.dispose()


def test_offline_mode_is_rejected(db_url):
    with pytest.raises(RuntimeError, match="offline"):
        command.upgrade(build_config(db_url), "head", sql=True)
