"""
Adapter: Post persistence.

Implements the PostRepository port.
Each method runs exactly one parameterized statement through Database.
"""

import logging
from typing import Any, Optional

from sqlalchemy import delete, func, insert, or_, select, update

from posts_api.domain.posts.entities import Post
from posts_api.domain.posts.ports import PostRepository
from posts_api.infrastructure.database import Database
from posts_api.infrastructure.posts.tables import posts

logger = logging.getLogger(__name__)

_NEWEST_FIRST = (posts.c.created_at.desc(), posts.c.id.desc())


def _to_entity(row: dict[str, Any]) -> Post:
    return Post(
        id=row["id"],
        title=row["title"],
        content=row["content"],
        author=row["author"],
        created_at=row["created_at"],
        updated_at=row.get("updated_at"),
    )


class PostRepositoryAdapter(PostRepository):
    """Reads and writes the posts table.

    Implements the PostRepository port defined in the domain layer.
    """

    def __init__(self, database: Database) -> None:
        self._db = database

    def find_all(self) -> list[Post]:
        rows = self._db.execute(select(posts).order_by(*_NEWEST_FIRST))
        return [_to_entity(row) for row in rows]

    def find_by_id(self, post_id: int) -> Optional[Post]:
        rows = self._db.execute(select(posts).where(posts.c.id == post_id))
        return _to_entity(rows[0]) if rows else None

    def create(self, title: str, content: str, author: str) -> Post:
        rows = self._db.execute(
            insert(posts)
            .values(title=title, content=content, author=author)
            .returning(*posts.c)
        )
        return _to_entity(rows[0])

    def update(
        self, post_id: int, title: Optional[str], content: Optional[str], author: Optional[str]
    ) -> Optional[Post]:
        rows = self._db.execute(
            update(posts)
            .where(posts.c.id == post_id)
            .values(title=title, content=content, author=author, updated_at=func.now())
            .returning(*posts.c)
        )
        return _to_entity(rows[0]) if rows else None

    def remove(self, post_id: int) -> bool:
        rows = self._db.execute(
            delete(posts).where(posts.c.id == post_id).returning(posts.c.id)
        )
        return bool(rows)

    def search(self, query: str) -> list[Post]:
        """Return posts whose title, content or author contain ``query``.

        Matching is case-insensitive; ``%`` and ``_`` in the query are
        matched literally.
        """
        condition = or_(
            posts.c.title.icontains(query, autoescape=True),
            posts.c.content.icontains(query, autoescape=True),
            posts.c.author.icontains(query, autoescape=True),
        )
        rows = self._db.execute(
            select(posts).where(condition).order_by(*_NEWEST_FIRST)
        )
        logger.debug("Search returned %d rows", len(rows))
        return [_to_entity(row) for row in rows]
