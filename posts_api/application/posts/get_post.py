"""
Use case: Retrieve a single post by id.

Input: GetPostQuery (raw post id)
Output: PostResult
Side effects: None (read-only query).
Failure cases: ValidationError (bad id), NotFoundError.
"""

import logging

from posts_api.application.posts.dtos import GetPostQuery, PostResult
from posts_api.domain.posts.errors import NotFoundError
from posts_api.domain.posts.ports import PostRepository
from posts_api.domain.posts.rules import parse_post_id

logger = logging.getLogger(__name__)

POST_NOT_FOUND_MESSAGE = "Post não encontrado"


class GetPostUseCase:
    """Looks up one post after validating its id."""

    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, query: GetPostQuery) -> PostResult:
        """Run the get post use case.

        Raises:
            ValidationError: If the id is not a positive integer.
            NotFoundError: If no post has this id.
        """
        post_id = parse_post_id(query.post_id)
        logger.debug("Fetching post id=%d", post_id)

        post = self._post_repo.find_by_id(post_id)
        if post is None:
            raise NotFoundError(POST_NOT_FOUND_MESSAGE)

        return PostResult.from_entity(post)
