"""Get comments use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from agora.application.usecase.base import BaseUseCase
from agora.domain.model import AnonymizerMapping, CommentNode
from agora.domain.service import (
    AnonymizerIndex,
    CommentService,
    CommentTreeBuilder,
    PermissionService,
    count_nodes,
)
from agora.domain.value import CommentPermissions, DeletedBy, GroupId, TopicId, Viewer


class CommentItem(BaseModel):
    """Comment item in response, with its replies nested."""

    comment_id: int
    parent_id: int | None
    author: str | None
    author_label: str
    member_number: int | None
    is_anonymous: bool
    body: str | None  # None when deleted or when content failed to load
    content_created_at: datetime | None
    content_loaded: bool
    deleted: bool
    deleted_by: DeletedBy | None
    created_at: int
    updated_at: int
    is_edited: bool
    revision_count: int
    depth: int
    permissions: CommentPermissions | None
    replies: list["CommentItem"] = Field(default_factory=list)


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    group_id: int
    topic_id: int
    viewer: Viewer | None = None  # Permissions are omitted without a viewer


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    group_id: int
    topic_id: int
    comments: list[CommentItem]
    total: int
    members: int  # Distinct anonymous members in the discussion


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading a discussion as an anonymized reply tree."""

    def __init__(
        self,
        comment_service: CommentService,
        tree_builder: CommentTreeBuilder,
        anonymizer_index: AnonymizerIndex,
        permission_service: PermissionService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            tree_builder: Builds the reply tree from flat records
            anonymizer_index: Numbers anonymous members
            permission_service: Derives viewer permissions
        """
        self.comment_service = comment_service
        self.tree_builder = tree_builder
        self.anonymizer_index = anonymizer_index
        self.permission_service = permission_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Steps:
        1. Fetch records (a missing discussion is empty)
        2. Resolve current content of every comment concurrently
        3. Build the reply tree
        4. Number anonymous members over the tree
        5. Convert to response items

        Raises:
            AccessFailureError: If the comment index is unreachable
        """
        group_id = GroupId(request.group_id)
        topic_id = TopicId(request.topic_id)

        records = await self.comment_service.get_records(group_id, topic_id)
        contents = await self.comment_service.resolve_contents(
            record.content_cid for record in records
        )
        roots = self.tree_builder.build(records, contents)
        mapping = self.anonymizer_index.compute(roots)

        return GetCommentsResponse(
            group_id=request.group_id,
            topic_id=request.topic_id,
            comments=self._to_items(roots, mapping, request.viewer),
            total=count_nodes(roots),
            members=len(mapping),
        )

    def _to_items(
        self,
        roots: list[CommentNode],
        mapping: AnonymizerMapping,
        viewer: Viewer | None,
    ) -> list[CommentItem]:
        """Convert the tree to response items without recursion."""
        items = [self._to_item(root, mapping, viewer) for root in roots]
        stack = list(zip(roots, items))
        while stack:
            node, item = stack.pop()
            for reply in node.replies:
                reply_item = self._to_item(reply, mapping, viewer)
                item.replies.append(reply_item)
                stack.append((reply, reply_item))
        return items

    def _to_item(
        self, node: CommentNode, mapping: AnonymizerMapping, viewer: Viewer | None
    ) -> CommentItem:
        content = node.content
        return CommentItem(
            comment_id=node.id,
            parent_id=node.parent_id,
            author=node.author,
            author_label=mapping.label_for(node),
            member_number=mapping.number_for(node.nullifier),
            is_anonymous=node.is_anonymous,
            body=content.body if content and not node.deleted else None,
            content_created_at=content.created_at if content else None,
            content_loaded=content is not None,
            deleted=node.deleted,
            deleted_by=node.deleted_by,
            created_at=node.created_at,
            updated_at=node.updated_at,
            is_edited=node.is_edited,
            revision_count=len(node.revision_cids),
            depth=node.depth,
            permissions=(
                self.permission_service.permissions_for(node, viewer)
                if viewer is not None
                else None
            ),
        )
