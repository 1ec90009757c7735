from blogsphere.models.user import User
from blogsphere.models.post import Post
from blogsphere.models.comment import Comment

__all__ = ["User", "Post", "Comment"]
