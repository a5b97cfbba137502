"""
FastAPI router for the posts bounded context.

All routes delegate to use cases. No business logic here.
Error mapping is handled by the centralized error handler.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response, status

from posts_api.application.posts.create_post import CreatePostUseCase
from posts_api.application.posts.delete_post import DeletePostUseCase
from posts_api.application.posts.dtos import (
    CreatePostCommand,
    DeletePostCommand,
    GetPostQuery,
    PostResult,
    SearchPostsQuery,
    UpdatePostCommand,
)
from posts_api.application.posts.get_post import GetPostUseCase
from posts_api.application.posts.list_posts import ListPostsUseCase
from posts_api.application.posts.search_posts import SearchPostsUseCase
from posts_api.application.posts.update_post import UpdatePostUseCase
from posts_api.domain.posts.errors import NotFoundError
from posts_api.interfaces.posts.dependencies import (
    get_create_post_use_case,
    get_delete_post_use_case,
    get_get_post_use_case,
    get_list_posts_use_case,
    get_search_posts_use_case,
    get_update_post_use_case,
)
from posts_api.interfaces.posts.schemas import (
    ErrorResponse,
    PostCreateRequest,
    PostMessageResponse,
    PostResponse,
    PostUpdateRequest,
)

router = APIRouter(prefix="/posts", tags=["Posts"])

POST_CREATED_MESSAGE = "Post criado com sucesso"
POST_UPDATED_MESSAGE = "Post atualizado com sucesso"
NO_POSTS_MESSAGE = "Nenhum post encontrado"

_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Erro de validação"}}
_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Recurso não encontrado"}}


def _to_response(result: PostResult) -> PostResponse:
    return PostResponse(
        id=result.id,
        title=result.title,
        content=result.content,
        author=result.author,
        created_at=result.created_at,
        updated_at=result.updated_at,
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=PostMessageResponse,
    responses=_BAD_REQUEST,
    summary="Criar um novo post",
)
def create_post(
    payload: PostCreateRequest,
    use_case: CreatePostUseCase = Depends(get_create_post_use_case),
) -> PostMessageResponse:
    """Create a post. Every missing field is reported at once."""
    command = CreatePostCommand(
        title=payload.title,
        content=payload.content,
        author=payload.author,
    )
    result = use_case.execute(command)
    return PostMessageResponse(message=POST_CREATED_MESSAGE, post=_to_response(result))


@router.get(
    "",
    response_model=list[PostResponse],
    responses=_NOT_FOUND,
    summary="Listar todos os posts",
)
def list_posts(
    use_case: ListPostsUseCase = Depends(get_list_posts_use_case),
) -> list[PostResponse]:
    """List every post, newest first. An empty store answers 404."""
    results = use_case.execute()
    if not results:
        raise NotFoundError(NO_POSTS_MESSAGE)
    return [_to_response(r) for r in results]


@router.get(
    "/search",
    response_model=list[PostResponse],
    responses=_BAD_REQUEST,
    summary="Buscar posts por termo",
)
def search_posts(
    q: Optional[str] = None,
    query: Optional[str] = None,
    use_case: SearchPostsUseCase = Depends(get_search_posts_use_case),
) -> list[PostResponse]:
    """Search title, content and author. No match answers 200 with []."""
    results = use_case.execute(SearchPostsQuery(query=q or query))
    return [_to_response(r) for r in results]


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    summary="Buscar post por ID",
)
def get_post(
    post_id: str,
    use_case: GetPostUseCase = Depends(get_get_post_use_case),
) -> PostResponse:
    """Return a single post."""
    result = use_case.execute(GetPostQuery(post_id=post_id))
    return _to_response(result)


@router.put(
    "/{post_id}",
    response_model=PostMessageResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    summary="Atualizar um post",
)
def update_post(
    post_id: str,
    payload: PostUpdateRequest,
    use_case: UpdatePostUseCase = Depends(get_update_post_use_case),
) -> PostMessageResponse:
    """Apply the fields present in the body; omitted fields are kept."""
    command = UpdatePostCommand(
        post_id=post_id,
        changes=payload.model_dump(exclude_unset=True),
    )
    result = use_case.execute(command)
    return PostMessageResponse(message=POST_UPDATED_MESSAGE, post=_to_response(result))


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    summary="Remover um post",
)
def delete_post(
    post_id: str,
    use_case: DeletePostUseCase = Depends(get_delete_post_use_case),
) -> Response:
    """Delete a post."""
    use_case.execute(DeletePostCommand(post_id=post_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
