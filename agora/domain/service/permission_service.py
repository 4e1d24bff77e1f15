"""Viewer permissions on comments."""

from agora.domain.model import CommentNode
from agora.domain.value import CommentPermissions, Viewer

from .base import Service


class PermissionService(Service):
    """Derives what a viewer may do with a comment.

    Only replies to top-level comments are allowed, so threads are at most
    two levels deep when created through the UI.
    """

    def is_own_comment(self, node: CommentNode, viewer: Viewer) -> bool:
        """Whether the viewer wrote the comment, publicly or anonymously."""
        if node.author is not None:
            return viewer.public_key is not None and node.author == viewer.public_key
        return node.nullifier is not None and node.nullifier in viewer.nullifiers

    def permissions_for(self, node: CommentNode, viewer: Viewer) -> CommentPermissions:
        """Compute edit, delete and reply rights for one comment."""
        if node.deleted:
            return CommentPermissions()

        own = self.is_own_comment(node, viewer)
        return CommentPermissions(
            can_edit=own,
            can_delete=own or viewer.is_admin,
            can_reply=node.depth == 0 and viewer.has_membership,
        )
