"""
Port interfaces (ABCs) for the posts bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from posts_api.domain.posts.entities import Post


class PostRepository(ABC):
    """Port for persisting and retrieving posts.

    Every method maps to a single parameterized statement.
    """

    @abstractmethod
    def find_all(self) -> list[Post]:
        """Return every post, newest first."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, post_id: int) -> Optional[Post]:
        """Return a post by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def create(self, title: str, content: str, author: str) -> Post:
        """Insert a post and return it with its generated id and timestamps."""
        raise NotImplementedError

    @abstractmethod
    def update(
        self, post_id: int, title: Optional[str], content: Optional[str], author: Optional[str]
    ) -> Optional[Post]:
        """Overwrite all editable fields of a post.

        Returns:
            The updated post, or None if the row no longer exists.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, post_id: int) -> bool:
        """Delete a post. Returns True if a row was deleted."""
        raise NotImplementedError

    @abstractmethod
    def search(self, query: str) -> list[Post]:
        """Return posts whose title, content or author contain ``query``.

        Matching is case-insensitive and treats LIKE wildcards literally.
        """
        raise NotImplementedError
