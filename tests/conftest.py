"""Test configuration and fixtures."""

from datetime import datetime, timezone

from agora.domain.model import CommentContent, CommentRecord
from agora.domain.value import CommentId, ContentId, Nullifier


def make_record(
    comment_id: int,
    parent_id: int | None = None,
    nullifier: str | None = None,
    author: str | None = None,
    content_cid: str | None = None,
    revision_cids: list[str] | None = None,
    deleted: bool = False,
    deleted_by: str | None = None,
    created_at: int = 1_700_000_000,
    updated_at: int | None = None,
) -> CommentRecord:
    """Helper to build comment records with sensible defaults.

    The content CID defaults to ``cid-{comment_id}`` and timestamps advance
    with the id so records read as chronological.
    """
    created = created_at + comment_id
    return CommentRecord(
        id=CommentId(comment_id),
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        author=author,
        nullifier=Nullifier(nullifier) if nullifier is not None else None,
        content_cid=ContentId(content_cid or f"cid-{comment_id}"),
        revision_cids=[ContentId(cid) for cid in revision_cids or []],
        deleted=deleted,
        deleted_by=deleted_by,
        created_at=created,
        updated_at=updated_at if updated_at is not None else created,
    )


def make_content(body: str, created_at: str = "2024-01-01T12:00:00Z") -> CommentContent:
    """Helper to build a resolved comment payload."""
    return CommentContent(
        version=1,
        body=body,
        created_at=datetime.fromisoformat(created_at.replace("Z", "+00:00")).astimezone(
            timezone.utc
        ),
    )
