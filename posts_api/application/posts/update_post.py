"""
Use case: Partially update a post.

Input: UpdatePostCommand (raw post id, fields sent by the client)
Output: PostResult
Side effects: Rewrites one row of the posts table.
Failure cases: ValidationError (bad id), NotFoundError.
"""

import logging

from posts_api.application.posts.dtos import PostResult, UpdatePostCommand
from posts_api.application.posts.get_post import POST_NOT_FOUND_MESSAGE
from posts_api.domain.posts.errors import NotFoundError
from posts_api.domain.posts.ports import PostRepository
from posts_api.domain.posts.rules import parse_post_id

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("title", "content", "author")


class UpdatePostUseCase:
    """Merges the client's changes over the stored post and saves it.

    The current row is read first so fields the client did not send
    keep their stored values instead of being overwritten with nulls.
    """

    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, command: UpdatePostCommand) -> PostResult:
        """Run the update post use case.

        Args:
            command: Raw id and the subset of fields present in the request.

        Returns:
            The post as stored after the update.

        Raises:
            ValidationError: If the id is not a positive integer.
            NotFoundError: If no post has this id.
        """
        post_id = parse_post_id(command.post_id)

        current = self._post_repo.find_by_id(post_id)
        if current is None:
            raise NotFoundError(POST_NOT_FOUND_MESSAGE)

        merged = {
            name: command.changes[name] if name in command.changes else getattr(current, name)
            for name in EDITABLE_FIELDS
        }

        updated = self._post_repo.update(post_id, **merged)
        if updated is None:
            # Deleted between the read and the write.
            raise NotFoundError(POST_NOT_FOUND_MESSAGE)

        logger.info(
            "Updated post id=%d fields=%s",
            post_id,
            sorted(set(command.changes) & set(EDITABLE_FIELDS)),
        )
        return PostResult.from_entity(updated)
