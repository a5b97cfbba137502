"""
Use case: Create a post.

Input: CreatePostCommand (title, content, author)
Output: PostResult
Side effects: Inserts one row into the posts table.
Failure cases: ValidationError listing every missing field.
"""

import logging

from posts_api.application.posts.dtos import CreatePostCommand, PostResult
from posts_api.domain.posts.ports import PostRepository
from posts_api.domain.posts.rules import check_required_fields

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Validates the required fields and persists a new post."""

    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, command: CreatePostCommand) -> PostResult:
        """Run the create post use case.

        Args:
            command: Title, content and author supplied by the client.

        Returns:
            The stored post with its generated id and timestamps.

        Raises:
            ValidationError: If any of title, content or author is blank.
        """
        check_required_fields(
            {
                "title": command.title,
                "content": command.content,
                "author": command.author,
            }
        )

        post = self._post_repo.create(
            title=command.title,
            content=command.content,
            author=command.author,
        )
        logger.info("Created post id=%d", post.id)
        return PostResult.from_entity(post)
