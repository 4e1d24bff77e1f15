"""Comment entities.

Comments are append-only records held by an external index. Every edit
pushes the previous content identifier onto ``revision_cids`` and every
deletion only flags the record, so the full history stays addressable.
"""

from datetime import datetime

from pydantic import Field, field_validator

from agora.domain.model.common import WireModel
from agora.domain.value import CommentId, ContentId, DeletedBy, Nullifier


class CommentContent(WireModel):
    """Comment payload resolved from the content-addressed store."""

    version: int = 1
    body: str  # Markdown
    created_at: datetime  # Payload timestamp, may differ from the record's


class CommentRecord(WireModel):
    """Comment record as returned by the comment index.

    Threading is expressed only through ``parent_id``; a record without a
    parent (or with the contract's 0 marker) is a top-level comment.
    """

    id: CommentId
    parent_id: CommentId | None = None
    author: str | None = None  # Public address, None for anonymous comments
    nullifier: Nullifier | None = None
    content_cid: ContentId
    revision_cids: list[ContentId] = Field(default_factory=list)  # Oldest first
    deleted: bool = False
    deleted_by: DeletedBy | None = None
    created_at: int  # Unix seconds
    updated_at: int  # Unix seconds

    @field_validator("parent_id", mode="before")
    @classmethod
    def normalize_parent_id(cls, v):
        """The contract stores 0 for 'no parent'."""
        if v == 0:
            return None
        return v

    @field_validator("nullifier", "author", mode="before")
    @classmethod
    def normalize_blank(cls, v):
        """Treat empty strings as absent."""
        if v == "":
            return None
        return v

    @field_validator("revision_cids", mode="before")
    @classmethod
    def normalize_revisions(cls, v):
        """Legacy records may carry null instead of an empty list."""
        if v is None:
            return []
        return v

    @field_validator("deleted_by", mode="before")
    @classmethod
    def normalize_deleted_by(cls, v):
        """Accept both the numeric contract code and the string form."""
        return DeletedBy.from_wire(v)

    @property
    def is_anonymous(self) -> bool:
        """Whether the comment was posted without a public author."""
        return self.author is None

    @property
    def is_edited(self) -> bool:
        """Whether the comment was edited after creation (deletions excluded)."""
        return self.updated_at > self.created_at and not self.deleted

    @property
    def has_revisions(self) -> bool:
        """Whether earlier content identifiers exist."""
        return len(self.revision_cids) > 0


class CommentNode(CommentRecord):
    """Comment record with resolved content and nested replies.

    ``replies`` holds only records whose ``parent_id`` equals this node's id,
    in the order the records were supplied. ``content`` is None when the
    payload could not be resolved.
    """

    content: CommentContent | None = None
    replies: list["CommentNode"] = Field(default_factory=list)
    depth: int = Field(default=0, ge=0)

    @classmethod
    def from_record(
        cls,
        record: CommentRecord,
        content: CommentContent | None,
        depth: int = 0,
    ) -> "CommentNode":
        """Wrap a record; replies are attached afterwards by the builder."""
        fields = record.model_dump(include=set(CommentRecord.model_fields))
        return cls(**fields, content=content, depth=depth)
