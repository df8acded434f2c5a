from .posts import Post  # noqa: F401
from .comments import Comment  # noqa: F401
from .users import User  # noqa: F401
