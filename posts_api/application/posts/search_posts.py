"""
Use case: Search posts by substring.

Input: SearchPostsQuery (query text)
Output: list[PostResult], possibly empty
Side effects: None (read-only query).
Failure cases: ValidationError when the query is absent or blank.
"""

import logging

from posts_api.application.posts.dtos import PostResult, SearchPostsQuery
from posts_api.domain.posts.ports import PostRepository
from posts_api.domain.posts.rules import normalize_search_query

logger = logging.getLogger(__name__)


class SearchPostsUseCase:
    """Case-insensitive substring search over title, content and author."""

    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, query: SearchPostsQuery) -> list[PostResult]:
        """Run the search use case.

        Returns:
            Matching posts. No match is an empty list, not an error.

        Raises:
            ValidationError: If the query is missing or blank.
        """
        term = normalize_search_query(query.query)
        posts = self._post_repo.search(term)
        logger.debug("Search matched %d posts", len(posts))
        return [PostResult.from_entity(post) for post in posts]
