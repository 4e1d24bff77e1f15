"""Collaborator interfaces for the domain layer."""

from .comment_index import CommentIndex
from .content_store import ContentStore

__all__ = [
    "CommentIndex",
    "ContentStore",
]
