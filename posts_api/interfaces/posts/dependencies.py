"""
Dependency injection for the posts bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
The database itself is created once by the application lifespan
and read from ``app.state``.
"""

from fastapi import Depends, Request

from posts_api.application.posts.create_post import CreatePostUseCase
from posts_api.application.posts.delete_post import DeletePostUseCase
from posts_api.application.posts.get_post import GetPostUseCase
from posts_api.application.posts.list_posts import ListPostsUseCase
from posts_api.application.posts.search_posts import SearchPostsUseCase
from posts_api.application.posts.update_post import UpdatePostUseCase
from posts_api.domain.posts.ports import PostRepository
from posts_api.infrastructure.database import Database
from posts_api.infrastructure.posts.post_repository import PostRepositoryAdapter


def get_database(request: Request) -> Database:
    """Return the database opened by the application lifespan."""
    return request.app.state.database


def get_post_repository(database: Database = Depends(get_database)) -> PostRepository:
    """Build the post repository adapter."""
    return PostRepositoryAdapter(database=database)


def get_list_posts_use_case(
    post_repo: PostRepository = Depends(get_post_repository),
) -> ListPostsUseCase:
    return ListPostsUseCase(post_repo=post_repo)


def get_get_post_use_case(
    post_repo: PostRepository = Depends(get_post_repository),
) -> GetPostUseCase:
    return GetPostUseCase(post_repo=post_repo)


def get_create_post_use_case(
    post_repo: PostRepository = Depends(get_post_repository),
) -> CreatePostUseCase:
    return CreatePostUseCase(post_repo=post_repo)


def get_update_post_use_case(
    post_repo: PostRepository = Depends(get_post_repository),
) -> UpdatePostUseCase:
    return UpdatePostUseCase(post_repo=post_repo)


def get_delete_post_use_case(
    post_repo: PostRepository = Depends(get_post_repository),
) -> DeletePostUseCase:
    return DeletePostUseCase(post_repo=post_repo)


def get_search_posts_use_case(
    post_repo: PostRepository = Depends(get_post_repository),
) -> SearchPostsUseCase:
    return SearchPostsUseCase(post_repo=post_repo)
