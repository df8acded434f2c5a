from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import ApiModel


class CommentIn(ApiModel):
    author: str = Field(min_length=1)
    content: str = Field(min_length=1)
    post_id: Optional[int] = None


class CommentOut(ApiModel):
    id: int
    post_id: Optional[int]
    author: str
    content: str
    created_at: datetime
