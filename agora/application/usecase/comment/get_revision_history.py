"""Get revision history use case."""

from datetime import datetime

from pydantic import BaseModel

from agora.application.usecase.base import BaseUseCase
from agora.domain.error import NotFoundError
from agora.domain.model import RevisionEntry
from agora.domain.repository import ContentStore
from agora.domain.service import CommentService, RevisionChainResolver
from agora.domain.value import CommentId, DeletedBy, GroupId, TopicId


class RevisionItem(BaseModel):
    """One revision in response."""

    version: int
    label: str
    cid: str | None
    body: str | None
    content_created_at: datetime | None
    is_pending: bool
    is_current: bool
    is_deleted: bool
    deleted_by: DeletedBy | None
    deleted_at: int | None
    failed: bool

    @classmethod
    def from_domain(cls, entry: RevisionEntry) -> "RevisionItem":
        """Convert a domain revision entry to a response item."""
        return cls(
            version=entry.version,
            label=entry.label,
            cid=entry.cid,
            body=entry.content.body if entry.content else None,
            content_created_at=entry.content.created_at if entry.content else None,
            is_pending=entry.is_pending,
            is_current=entry.is_current,
            is_deleted=entry.is_deleted,
            deleted_by=entry.deleted_by,
            deleted_at=entry.deleted_at,
            failed=entry.failed,
        )


class GetRevisionHistoryRequest(BaseModel):
    """Get revision history request."""

    group_id: int
    topic_id: int
    comment_id: int


class GetRevisionHistoryResponse(BaseModel):
    """Get revision history response."""

    comment_id: int
    revisions: list[RevisionItem]
    selected_index: int
    total: int


class GetRevisionHistoryUseCase(BaseUseCase):
    """Use case for opening one comment's revision history."""

    def __init__(
        self,
        comment_service: CommentService,
        revision_chain_resolver: RevisionChainResolver,
        content_store: ContentStore,
    ) -> None:
        """Initialize get revision history use case.

        Args:
            comment_service: Comment domain service
            revision_chain_resolver: Builds and resolves the revision list
            content_store: Store for historical payloads
        """
        self.comment_service = comment_service
        self.revision_chain_resolver = revision_chain_resolver
        self.content_store = content_store

    async def execute(
        self, request: GetRevisionHistoryRequest
    ) -> GetRevisionHistoryResponse:
        """Execute get revision history flow.

        Raises:
            NotFoundError: If the comment is not part of the discussion
            AccessFailureError: If the comment index is unreachable
        """
        record = await self.comment_service.find_record(
            GroupId(request.group_id),
            TopicId(request.topic_id),
            CommentId(request.comment_id),
        )
        if record is None:
            raise NotFoundError("Comment", str(request.comment_id))

        current = await self.comment_service.resolve_content(record.content_cid)
        history = self.revision_chain_resolver.build(record, current)
        await self.revision_chain_resolver.resolve_all(history, self.content_store)

        return GetRevisionHistoryResponse(
            comment_id=record.id,
            revisions=[RevisionItem.from_domain(entry) for entry in history.entries],
            selected_index=history.selected_index,
            total=len(history),
        )
