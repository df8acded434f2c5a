from typing import Optional

from pydantic import Field

from .base import ApiModel


class UserIn(ApiModel):
    username: str = Field(min_length=1)
    display_name: Optional[str] = None
