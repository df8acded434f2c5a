from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Comment:
    id: int
    post_id: Optional[int]
    author: str
    content: str
    created_at: datetime
