"""Comment use cases."""

from .get_comments import (
    CommentItem,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from .get_revision_history import (
    GetRevisionHistoryRequest,
    GetRevisionHistoryResponse,
    GetRevisionHistoryUseCase,
    RevisionItem,
)

__all__ = [
    "CommentItem",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "GetRevisionHistoryRequest",
    "GetRevisionHistoryResponse",
    "GetRevisionHistoryUseCase",
    "RevisionItem",
]
