"""
Use case: Delete a post.

Input: DeletePostCommand (raw post id)
Output: None
Side effects: Removes one row from the posts table.
Failure cases: ValidationError (bad id), NotFoundError.
"""

import logging

from posts_api.application.posts.dtos import DeletePostCommand
from posts_api.application.posts.get_post import POST_NOT_FOUND_MESSAGE
from posts_api.domain.posts.errors import NotFoundError
from posts_api.domain.posts.ports import PostRepository
from posts_api.domain.posts.rules import parse_post_id

logger = logging.getLogger(__name__)


class DeletePostUseCase:
    """Deletes an existing post."""

    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, command: DeletePostCommand) -> None:
        """Run the delete post use case.

        Raises:
            ValidationError: If the id is not a positive integer.
            NotFoundError: If no post has this id.
        """
        post_id = parse_post_id(command.post_id)

        if self._post_repo.find_by_id(post_id) is None:
            raise NotFoundError(POST_NOT_FOUND_MESSAGE)

        if not self._post_repo.remove(post_id):
            raise NotFoundError(POST_NOT_FOUND_MESSAGE)

        logger.info("Deleted post id=%d", post_id)
