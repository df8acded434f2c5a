from .posts import PostIn, PostUpdate, PostOut  # noqa: F401
from .comments import CommentIn, CommentOut  # noqa: F401
from .users import UserIn  # noqa: F401
