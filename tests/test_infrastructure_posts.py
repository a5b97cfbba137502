"""
Tests for the database wrapper, driver error translation and the
post repository adapter.

Repository tests use a temporary SQLite file; driver errors are
built directly from SQLAlchemy exception classes.
"""

import pytest
from sqlalchemy import exc as sa_exc
from sqlalchemy import insert

from posts_api.infrastructure.database import Database
from posts_api.infrastructure.errors import (
    CONNECTION_FAILURE,
    FOREIGN_KEY_VIOLATION,
    NOT_NULL_VIOLATION,
    UNIQUE_VIOLATION,
    StorageError,
    translate_driver_error,
)
from posts_api.infrastructure.posts.post_repository import PostRepositoryAdapter
from posts_api.infrastructure.posts.tables import posts


class _PgDriverError(Exception):
    """Mimics a psycopg2 error carrying a SQLSTATE."""

    def __init__(self, message: str, pgcode: str) -> None:
        super().__init__(message)
        self.pgcode = pgcode


class TestTranslateDriverError:
    """Tests for translate_driver_error."""

    def test_uses_pgcode_when_present(self) -> None:
        error = sa_exc.IntegrityError(
            "INSERT", {}, _PgDriverError("duplicate key value", UNIQUE_VIOLATION)
        )
        storage_error = translate_driver_error(error)
        assert storage_error.code == UNIQUE_VIOLATION
        assert storage_error.message == "duplicate key value"

    @pytest.mark.parametrize(
        ("message", "code"),
        [
            ("UNIQUE constraint failed: posts.title", UNIQUE_VIOLATION),
            ("FOREIGN KEY constraint failed", FOREIGN_KEY_VIOLATION),
            ("NOT NULL constraint failed: posts.title", NOT_NULL_VIOLATION),
            ("CHECK constraint failed: positive", None),
        ],
    )
    def test_infers_integrity_codes_from_message(self, message, code) -> None:
        error = sa_exc.IntegrityError("INSERT", {}, Exception(message))
        assert translate_driver_error(error).code == code

    @pytest.mark.parametrize(
        "message",
        [
            'connection to server at "localhost" (127.0.0.1), port 5432 failed: Connection refused',
            'could not translate host name "postgres" to address: Name or service not known',
            "unable to open database file",
        ],
    )
    def test_connectivity_failures_map_to_connection_code(self, message) -> None:
        error = sa_exc.OperationalError("SELECT 1", {}, Exception(message))
        storage_error = translate_driver_error(error)
        assert storage_error.code == CONNECTION_FAILURE
        assert storage_error.is_connection_failure

    def test_invalidated_connection_is_a_connection_failure(self) -> None:
        error = sa_exc.DBAPIError(
            "SELECT 1", {}, Exception("server went away"), connection_invalidated=True
        )
        assert translate_driver_error(error).is_connection_failure

    def test_other_operational_errors_have_no_code(self) -> None:
        error = sa_exc.OperationalError("SELECT 1", {}, Exception("no such table: posts"))
        storage_error = translate_driver_error(error)
        assert storage_error.code is None
        assert not storage_error.is_connection_failure


class TestDatabase:
    """Tests for Database.execute and lifecycle helpers."""

    def test_ping_succeeds(self, database: Database) -> None:
        database.ping()

    def test_statement_without_rows_returns_empty_list(self, database: Database) -> None:
        assert database.execute(posts.delete()) == []

    def test_not_null_violation_raises_storage_error(self, database: Database) -> None:
        with pytest.raises(StorageError) as exc_info:
            database.execute(insert(posts).values(title=None, content="c", author="a"))
        assert exc_info.value.code == NOT_NULL_VIOLATION

    def test_unreachable_database_raises_connection_failure(self, tmp_path) -> None:
        db = Database.from_dsn(f"sqlite:///{tmp_path / 'missing' / 'posts.db'}")
        with pytest.raises(StorageError) as exc_info:
            db.ping()
        assert exc_info.value.is_connection_failure
        db.dispose()


class TestPostRepositoryAdapter:
    """Tests for PostRepositoryAdapter against SQLite."""

    def test_create_sets_id_and_timestamps(self, database: Database) -> None:
        repo = PostRepositoryAdapter(database)
        post = repo.create("Título", "Conteúdo", "Autor")
        assert post.id == 1
        assert post.created_at is not None
        assert post.updated_at is not None
        assert repo.find_by_id(post.id) == post

    def test_find_by_id_missing_returns_none(self, database: Database) -> None:
        assert PostRepositoryAdapter(database).find_by_id(123) is None

    def test_find_all_newest_first(self, database: Database) -> None:
        repo = PostRepositoryAdapter(database)
        ids = [repo.create(f"t{i}", "c", "a").id for i in range(3)]
        assert [p.id for p in repo.find_all()] == list(reversed(ids))

    def test_update_overwrites_fields(self, database: Database) -> None:
        repo = PostRepositoryAdapter(database)
        post = repo.create("old", "body", "ana")
        updated = repo.update(post.id, "new", "body", "ana")
        assert updated.title == "new"
        assert updated.created_at == post.created_at

    def test_update_missing_row_returns_none(self, database: Database) -> None:
        assert PostRepositoryAdapter(database).update(9, "t", "c", "a") is None

    def test_remove_reports_whether_row_existed(self, database: Database) -> None:
        repo = PostRepositoryAdapter(database)
        post = repo.create("t", "c", "a")
        assert repo.remove(post.id) is True
        assert repo.remove(post.id) is False

    def test_search_matches_any_text_column(self, database: Database) -> None:
        repo = PostRepositoryAdapter(database)
        repo.create("Python tips", "body", "ana")
        repo.create("Other", "Learning PYTHON", "bob")
        repo.create("Misc", "body", "Pythonista")
        repo.create("Unrelated", "nothing", "carl")
        assert len(repo.search("python")) == 3

    def test_search_treats_wildcards_literally(self, database: Database) -> None:
        repo = PostRepositoryAdapter(database)
        repo.create("100% real", "c", "a")
        repo.create("plain", "c", "a")
        assert [p.title for p in repo.search("%")] == ["100% real"]
        assert repo.search("_") == []
