"""Domain services."""

from .anonymizer_index import AnonymizerIndex
from .base import Service
from .comment_service import CommentService
from .comment_tree_builder import CommentTreeBuilder, count_nodes
from .permission_service import PermissionService
from .revision_chain_resolver import RevisionChainResolver

__all__ = [
    "AnonymizerIndex",
    "CommentService",
    "CommentTreeBuilder",
    "PermissionService",
    "RevisionChainResolver",
    "Service",
    "count_nodes",
]
