from datetime import datetime
from typing import Literal, Optional

from pydantic import Field, field_validator

from .base import ApiModel, as_utc

PostStatus = Literal['draft', 'published', 'scheduled']


class PostIn(ApiModel):
    title: str = Field(min_length=1)
    excerpt: str = Field(min_length=1)
    content: str = Field(min_length=1)
    category: str = Field(min_length=1)
    status: Optional[PostStatus] = None
    featured_image: Optional[str] = None
    publish_date: Optional[datetime] = None

    @field_validator('featured_image')
    @classmethod
    def blank_image_is_none(cls, v):
        return v or None

    @field_validator('publish_date')
    @classmethod
    def publish_date_utc(cls, v):
        return as_utc(v)


class PostUpdate(ApiModel):
    """Partial post: only the fields present in the request body are applied."""

    title: Optional[str] = Field(default=None, min_length=1)
    excerpt: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = Field(default=None, min_length=1)
    status: Optional[PostStatus] = None
    featured_image: Optional[str] = None
    publish_date: Optional[datetime] = None

    @field_validator('title', 'excerpt', 'content', 'category', 'status')
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError('field may not be null')
        return v

    @field_validator('featured_image')
    @classmethod
    def blank_image_is_none(cls, v):
        return v or None

    @field_validator('publish_date')
    @classmethod
    def publish_date_utc(cls, v):
        return as_utc(v)

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class PostOut(ApiModel):
    id: int
    title: str
    excerpt: str
    content: str
    category: str
    status: PostStatus
    featured_image: Optional[str]
    publish_date: Optional[datetime]
    likes: int
    created_at: datetime
    updated_at: datetime
