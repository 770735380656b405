# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator, Iterator
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("PYTEST_RUNNING", "true")

from chanboard.db.session import Base, enable_sqlite_foreign_keys
from chanboard.db.session import get_db as app_get_session
from chanboard.main import app as fastapi_app
from chanboard.models import Board, Post
from chanboard.repositories import BoardRepository, PostRepository
from chanboard.schemas import PostCreate

TEST_DB_URL = "sqlite://"


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)

    # Let SQLAlchemy, not pysqlite, emit BEGIN so SAVEPOINTs behave.
    @event.listens_for(engine, "connect")
    def _disable_pysqlite_transactions(dbapi_connection, connection_record) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn) -> None:
        conn.exec_driver_sql("BEGIN")

    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    connection = engine.connect()
    transaction = connection.begin()
    SessionLocal = sessionmaker(
        bind=connection,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    session.begin_nested()

    @event.listens_for(session, "after_transaction_end")
    def restart_savepoint(sess: Session, trans) -> None:  # pragma: no cover - SQLAlchemy internals
        if trans.nested and not getattr(trans._parent, "nested", False):
            session.begin_nested()

    try:
        yield session
    finally:
        event.remove(session, "after_transaction_end", restart_savepoint)
        session.close()

        if transaction.is_active:
            transaction.rollback()
        connection.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def default_board(db_session: Session) -> Board:
    """The pre-seeded ``/b/`` board."""
    return BoardRepository(db_session).ensure_default()


@pytest.fixture()
def posts(db_session: Session) -> PostRepository:
    return PostRepository(db_session)


@pytest.fixture()
def make_post(default_board: Board, posts: PostRepository) -> Any:
    """Factory creating a thread root, or a reply when ``thread`` is given."""

    def _make(
        content: str = "hello",
        *,
        thread: int | None = None,
        board: str | None = None,
        sage: bool = False,
        ip: str = "127.0.0.1",
    ) -> Post:
        data = PostCreate(
            board=board or default_board.name,
            plaintext_content=content,
            html_content=content,
            sage=sage,
        )
        if thread is None:
            return posts.create_thread(data, ip)
        return posts.create_reply(data, thread, ip)

    return _make
