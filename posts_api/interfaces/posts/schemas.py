"""
Pydantic schemas for posts API request/response validation.

Request fields are all optional strings: required-field checks run in
the business rules so a single response can list every missing field.
No business logic belongs here.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class PostCreateRequest(BaseModel):
    """Request schema for creating a post."""

    title: Optional[str] = Field(default=None, description="Post title", examples=["Título do post"])
    content: Optional[str] = Field(default=None, description="Post body", examples=["Conteúdo do post"])
    author: Optional[str] = Field(default=None, description="Author name", examples=["Autor do post"])


class PostUpdateRequest(BaseModel):
    """Request schema for a partial update.

    Only fields present in the JSON body are applied; omitted fields
    keep their stored values.
    """

    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None


class PostResponse(BaseModel):
    """A single post in the response."""

    id: int
    title: str
    content: str
    author: str
    created_at: datetime
    updated_at: Optional[datetime] = None


class PostMessageResponse(BaseModel):
    """Response schema for create and update endpoints."""

    message: str
    post: PostResponse


class ErrorResponse(BaseModel):
    """Error envelope returned for every failed request."""

    status: str = Field(..., description='"fail" for client errors, "error" for server errors')
    message: str
    errors: Optional[list[str]] = None
    stack: Optional[str] = None


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
