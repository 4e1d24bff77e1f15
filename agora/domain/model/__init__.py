"""Domain model entities for discussions."""

from agora.domain.model.anonymizer import AnonymizerMapping, truncate_address
from agora.domain.model.comment import CommentContent, CommentNode, CommentRecord
from agora.domain.model.revision import RevisionEntry, RevisionHistory

__all__ = [
    "CommentRecord",
    "CommentContent",
    "CommentNode",
    "AnonymizerMapping",
    "RevisionEntry",
    "RevisionHistory",
    "truncate_address",
]
