"""Use cases for the discussion forum."""

from .comments import create_comment, delete_comment, list_comments
from .posts import create_post, get_post, list_posts, set_post_resolved
from .reactions import react_to_comment, react_to_post

__all__ = [
    "create_comment",
    "create_post",
    "delete_comment",
    "get_post",
    "list_comments",
    "list_posts",
    "react_to_comment",
    "react_to_post",
    "set_post_resolved",
]
