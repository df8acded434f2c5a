"""
Blog storage
Repository interfaces for posts, comments and users, and the in-memory store
that backs them for the lifetime of the process.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from .models import Comment, Post, User
from .schemas import CommentIn, PostIn, PostUpdate, UserIn

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PostRepository(ABC):
    """Posts: CRUD plus the like counter."""

    @abstractmethod
    async def get_all_posts(self) -> List[Post]:
        """All posts, newest effective date (publish date, else creation date) first."""

    @abstractmethod
    async def get_post_by_id(self, post_id: int) -> Optional[Post]:
        """The post, or None if absent."""

    @abstractmethod
    async def create_post(self, draft: PostIn) -> Post:
        """Store a new post under the next id."""

    @abstractmethod
    async def update_post(self, post_id: int, fields: PostUpdate) -> Optional[Post]:
        """Merge the supplied fields onto the post; None if absent."""

    @abstractmethod
    async def delete_post(self, post_id: int) -> bool:
        """Remove the post; False if it did not exist."""

    @abstractmethod
    async def like_post(self, post_id: int) -> Optional[Post]:
        """Add one like; None if absent."""


class CommentRepository(ABC):

    @abstractmethod
    async def get_comments_by_post_id(self, post_id: int) -> List[Comment]:
        """Comments on a post, newest first."""

    @abstractmethod
    async def create_comment(self, draft: CommentIn) -> Comment:
        """Store a new comment under the next id."""


class UserRepository(ABC):

    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[User]:
        ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]:
        ...

    @abstractmethod
    async def create_user(self, draft: UserIn) -> User:
        ...


class Storage(PostRepository, CommentRepository, UserRepository, ABC):
    """Everything the route layer needs from a store."""


class MemStorage(Storage):
    """
    Process-lifetime store kept in plain dicts.
    None of the coroutines await, so each call runs to completion on the
    event loop before another request can touch the maps.
    """

    def __init__(self):
        self.posts: Dict[int, Post] = {}
        self.comments: Dict[int, Comment] = {}
        self.users: Dict[int, User] = {}
        self._next_post_id = 1
        self._next_comment_id = 1
        self._next_user_id = 1

    def load(self, posts: Iterable[Post] = (), comments: Iterable[Comment] = ()) -> None:
        """Insert prebuilt entities keeping their ids; later ids continue past them."""
        for post in posts:
            self.posts[post.id] = post
        for comment in comments:
            self.comments[comment.id] = comment
        # counters only move forward so deleted ids stay retired
        self._next_post_id = max(self._next_post_id, max(self.posts, default=0) + 1)
        self._next_comment_id = max(self._next_comment_id, max(self.comments, default=0) + 1)
        logger.info('store loaded', extra={'posts': len(self.posts), 'comments': len(self.comments)})

    def _take_post_id(self) -> int:
        self._next_post_id += 1
        return self._next_post_id - 1

    def _take_comment_id(self) -> int:
        self._next_comment_id += 1
        return self._next_comment_id - 1

    def _take_user_id(self) -> int:
        self._next_user_id += 1
        return self._next_user_id - 1

    # posts

    async def get_all_posts(self) -> List[Post]:
        # sorted() is stable, so equal dates stay in insertion order
        return sorted(self.posts.values(), key=lambda p: p.effective_date, reverse=True)

    async def get_post_by_id(self, post_id: int) -> Optional[Post]:
        return self.posts.get(post_id)

    async def create_post(self, draft: PostIn) -> Post:
        now = utcnow()
        post = Post(
            id=self._take_post_id(),
            title=draft.title,
            excerpt=draft.excerpt,
            content=draft.content,
            category=draft.category,
            status=draft.status or 'draft',
            featured_image=draft.featured_image or None,
            publish_date=draft.publish_date,
            likes=0,
            created_at=now,
            updated_at=now,
        )
        self.posts[post.id] = post
        logger.info('post created', extra={'post_id': post.id, 'status': post.status})
        return post

    async def update_post(self, post_id: int, fields: PostUpdate) -> Optional[Post]:
        post = self.posts.get(post_id)
        if not post:
            return None
        changes = fields.changes()
        post = replace(post, **changes, updated_at=utcnow())
        self.posts[post_id] = post
        logger.info('post updated', extra={'post_id': post_id, 'fields': sorted(changes)})
        return post

    async def delete_post(self, post_id: int) -> bool:
        if self.posts.pop(post_id, None) is None:
            return False
        logger.info('post deleted', extra={'post_id': post_id})
        return True

    async def like_post(self, post_id: int) -> Optional[Post]:
        post = self.posts.get(post_id)
        if not post:
            return None
        post = replace(post, likes=post.likes + 1, updated_at=utcnow())
        self.posts[post_id] = post
        logger.debug('post liked', extra={'post_id': post_id, 'likes': post.likes})
        return post

    # comments

    async def get_comments_by_post_id(self, post_id: int) -> List[Comment]:
        matching = [c for c in self.comments.values() if c.post_id == post_id]
        return sorted(matching, key=lambda c: c.created_at, reverse=True)

    async def create_comment(self, draft: CommentIn) -> Comment:
        comment = Comment(
            id=self._take_comment_id(),
            post_id=draft.post_id,
            author=draft.author,
            content=draft.content,
            created_at=utcnow(),
        )
        self.comments[comment.id] = comment
        logger.info('comment created', extra={'comment_id': comment.id, 'post_id': comment.post_id})
        return comment

    # users

    async def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.username == username), None)

    async def create_user(self, draft: UserIn) -> User:
        user = User(id=self._take_user_id(), username=draft.username, display_name=draft.display_name)
        self.users[user.id] = user
        return user
