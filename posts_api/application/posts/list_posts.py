"""
Use case: List every post.

Input: None
Output: list[PostResult], newest first
Side effects: None (read-only query).
Failure cases: None. An empty list is turned into a 404 by the router.
"""

import logging

from posts_api.application.posts.dtos import PostResult
from posts_api.domain.posts.ports import PostRepository

logger = logging.getLogger(__name__)


class ListPostsUseCase:
    """Returns all stored posts ordered by creation time, newest first."""

    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self) -> list[PostResult]:
        posts = self._post_repo.find_all()
        logger.debug("Listed %d posts", len(posts))
        return [PostResult.from_entity(post) for post in posts]
