"""
Data Transfer Objects for the posts application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Union

from posts_api.domain.posts.entities import Post

RawPostId = Union[str, int]


@dataclass(frozen=True)
class CreatePostCommand:
    """Input DTO for creating a post.

    Fields are optional here; the create use case reports every
    missing one in a single ValidationError.
    """

    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None


@dataclass(frozen=True)
class UpdatePostCommand:
    """Input DTO for a partial update.

    Attributes:
        post_id: Raw id from the request path.
        changes: Only the fields the client sent. A key mapped to an empty
            string or None still overrides the stored value.
    """

    post_id: RawPostId
    changes: dict[str, Optional[str]] = field(default_factory=dict)


@dataclass(frozen=True)
class GetPostQuery:
    """Input DTO for fetching a single post."""

    post_id: RawPostId


@dataclass(frozen=True)
class DeletePostCommand:
    """Input DTO for deleting a post."""

    post_id: RawPostId


@dataclass(frozen=True)
class SearchPostsQuery:
    """Input DTO for a substring search."""

    query: Optional[str] = None


@dataclass(frozen=True)
class PostResult:
    """Output DTO for a single post.

    Attributes:
        id: Generated post id.
        title: Post title.
        content: Post body.
        author: Author name.
        created_at: Creation timestamp.
        updated_at: Last update timestamp.
    """

    id: int
    title: str
    content: str
    author: str
    created_at: datetime
    updated_at: Optional[datetime]

    @classmethod
    def from_entity(cls, post: Post) -> "PostResult":
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            author=post.author,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
