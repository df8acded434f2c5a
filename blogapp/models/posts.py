from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Post:
    id: int
    title: str
    excerpt: str
    content: str
    category: str
    status: str
    featured_image: Optional[str]
    publish_date: Optional[datetime]
    likes: int
    created_at: datetime
    updated_at: datetime

    @property
    def effective_date(self) -> datetime:
        return self.publish_date or self.created_at
