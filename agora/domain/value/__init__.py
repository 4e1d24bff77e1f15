"""Domain value objects for discussions."""

from agora.domain.value.identifiers import (
    CommentId,
    ContentId,
    GroupId,
    Nullifier,
    TopicId,
)
from agora.domain.value.types import CommentPermissions, DeletedBy, Viewer

__all__ = [
    # Identifiers
    "GroupId",
    "TopicId",
    "CommentId",
    "ContentId",
    "Nullifier",
    # Types
    "DeletedBy",
    "Viewer",
    "CommentPermissions",
]
