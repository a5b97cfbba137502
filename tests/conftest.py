"""
Pytest configuration and fixtures for the posts API tests.

API tests run the real application against a temporary SQLite file
database, so no PostgreSQL server is needed.
"""

from collections.abc import Callable, Iterator
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from posts_api.core.config import Environment, Settings
from posts_api.domain.posts.entities import Post
from posts_api.domain.posts.ports import PostRepository
from posts_api.infrastructure.database import Database
from posts_api.main import create_app


class InMemoryPostRepository(PostRepository):
    """PostRepository fake that records every call it receives."""

    def __init__(self) -> None:
        self.rows: dict[int, Post] = {}
        self.calls: list[str] = []
        self._next_id = 1
        self._clock = datetime(2024, 1, 1, 12, 0, 0)

    def _tick(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    def find_all(self) -> list[Post]:
        self.calls.append("find_all")
        return sorted(self.rows.values(), key=lambda p: (p.created_at, p.id), reverse=True)

    def find_by_id(self, post_id: int) -> Optional[Post]:
        self.calls.append("find_by_id")
        return self.rows.get(post_id)

    def create(self, title: str, content: str, author: str) -> Post:
        self.calls.append("create")
        now = self._tick()
        post = Post(
            id=self._next_id,
            title=title,
            content=content,
            author=author,
            created_at=now,
            updated_at=now,
        )
        self.rows[post.id] = post
        self._next_id += 1
        return post

    def update(self, post_id, title, content, author) -> Optional[Post]:
        self.calls.append("update")
        current = self.rows.get(post_id)
        if current is None:
            return None
        post = Post(
            id=post_id,
            title=title,
            content=content,
            author=author,
            created_at=current.created_at,
            updated_at=self._tick(),
        )
        self.rows[post_id] = post
        return post

    def remove(self, post_id: int) -> bool:
        self.calls.append("remove")
        return self.rows.pop(post_id, None) is not None

    def search(self, query: str) -> list[Post]:
        self.calls.append("search")
        needle = query.lower()
        return [
            p
            for p in self.find_all()
            if needle in p.title.lower()
            or needle in p.content.lower()
            or needle in p.author.lower()
        ]


@pytest.fixture
def post_repo() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture
def sqlite_url(tmp_path: Path) -> str:
    return f"sqlite:///{tmp_path / 'posts.db'}"


@pytest.fixture
def database(sqlite_url: str) -> Iterator[Database]:
    """A Database on a fresh SQLite file with the posts table created."""
    db = Database.from_dsn(sqlite_url)
    db.create_schema()
    yield db
    db.dispose()


@pytest.fixture
def build_settings(sqlite_url: str) -> Callable[..., Settings]:
    """Factory for isolated settings pointing at the test database."""

    def _build(
        environment: Environment = Environment.TEST,
        database_url: Optional[str] = None,
        **overrides,
    ) -> Settings:
        return Settings(
            _env_file=None,
            database_url=database_url or sqlite_url,
            environment=environment,
            log_level="WARNING",
            **overrides,
        )

    return _build


@pytest.fixture
def client(build_settings: Callable[..., Settings]) -> Iterator[TestClient]:
    """TestClient for an app backed by an empty SQLite database."""
    app = create_app(build_settings())
    with TestClient(app) as test_client:
        yield test_client
