"""Data access helpers for posts, threads and reply edges."""
from __future__ import annotations

import logging

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from chanboard.core.errors import ThreadMismatchError, ThreadNotFoundError
from chanboard.models.post import Post, Reply
from chanboard.repositories.board_repo import BoardRepository
from chanboard.schemas.post import PostCreate
from chanboard.ui.references import parse_reply_targets

__all__ = ["PostRepository"]

logger = logging.getLogger(__name__)


class PostRepository:
    """Thin wrapper around database access for posts."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session
        self.boards = BoardRepository(session)

    def get(self, board: str, post_id: int) -> Post | None:
        """Return a post by its per-board identifier."""
        return self.session.get(Post, (post_id, board))

    def for_thread(self, board: str, thread: int) -> list[Post]:
        """Return every post of a thread, root first.

        Raises:
            ThreadNotFoundError: If the thread has no posts.
        """
        posts = list(
            self.session.scalars(
                select(Post)
                .where(Post.board == board, Post.thread == thread)
                .order_by(Post.id)
            )
        )
        if not posts:
            raise ThreadNotFoundError(board, thread)
        return posts

    def threads_for_board(self, board: str) -> list[Post]:
        """Return thread roots, most recently bumped first.

        A thread is bumped by its root and by every reply not marked sage.
        """
        bumps = (
            select(
                Post.thread.label("thread"),
                func.max(Post.posted_at).label("last_post"),
                func.max(Post.id).label("last_id"),
            )
            .where(Post.board == board, or_(Post.thread == Post.id, Post.sage.is_(False)))
            .group_by(Post.thread)
            .subquery()
        )
        stmt = (
            select(Post)
            .join(bumps, Post.id == bumps.c.thread)
            .where(Post.board == board)
            .order_by(bumps.c.last_post.desc(), bumps.c.last_id.desc())
        )
        return list(self.session.scalars(stmt))

    def create_thread(self, data: PostCreate, ip: str) -> Post:
        """Insert a new thread root; its ``thread`` is its own id."""
        post_id = self.boards.allocate_post_id(data.board)
        post = Post(id=post_id, thread=post_id, ip=ip, **data.model_dump())
        self.session.add(post)
        self.session.flush()
        self._link_references(post)
        logger.info("Created thread /%s/%d", post.board, post.id)
        return post

    def create_reply(self, data: PostCreate, thread: int, ip: str) -> Post:
        """Insert a reply into an existing thread of the same board.

        Raises:
            ThreadNotFoundError: If ``thread`` is not a thread root on the board.
        """
        root = self.get(data.board, thread)
        if root is None or not root.is_thread_root:
            raise ThreadNotFoundError(data.board, thread)

        post_id = self.boards.allocate_post_id(data.board)
        post = Post(id=post_id, thread=root.id, ip=ip, **data.model_dump())
        self.session.add(post)
        self.session.flush()
        self._link_references(post)
        logger.info("Created reply /%s/%d in thread %d", post.board, post.id, root.id)
        return post

    def add_reply(self, message: Post, reply: Post, reply_thread: int | None = None) -> Reply:
        """Record that ``reply`` quotes ``message``.

        ``reply_thread`` defaults to the thread of ``reply``; any other value
        is rejected.
        """
        if reply_thread is None:
            reply_thread = reply.thread
        elif reply_thread != reply.thread:
            raise ThreadMismatchError(
                f"post /{reply.board}/{reply.id} is in thread {reply.thread}, not {reply_thread}"
            )
        edge = Reply(
            message_id=message.id,
            message_board=message.board,
            reply_id=reply.id,
            reply_board=reply.board,
            reply_thread=reply_thread,
        )
        self.session.add(edge)
        self.session.flush()
        return edge

    def replies_to(self, post: Post) -> list[Reply]:
        """Return the reply edges pointing at ``post``."""
        return list(
            self.session.scalars(
                select(Reply)
                .where(Reply.message_id == post.id, Reply.message_board == post.board)
                .order_by(Reply.reply_board, Reply.reply_id)
            )
        )

    def _link_references(self, post: Post) -> None:
        # Only references to existing posts on the same board become edges.
        targets = [t for t in parse_reply_targets(post.plaintext_content) if t != post.id]
        if not targets:
            return
        messages = self.session.scalars(
            select(Post).where(Post.board == post.board, Post.id.in_(targets))
        )
        for message in messages:
            self.add_reply(message, post)
