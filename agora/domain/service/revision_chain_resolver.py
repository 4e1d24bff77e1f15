"""Revision history reconstruction."""

from collections.abc import AsyncIterator

import logfire

from agora.domain.error import ContentResolutionError
from agora.domain.model import (
    CommentContent,
    CommentRecord,
    RevisionEntry,
    RevisionHistory,
)
from agora.domain.repository import ContentStore

from .base import Service


class RevisionChainResolver(Service):
    """Builds a comment's revision list and resolves its historical content."""

    def build(
        self, record: CommentRecord, current_content: CommentContent | None
    ) -> RevisionHistory:
        """Build the ordered revision list for one comment.

        Layout, oldest first:
        - one pending entry per ``revision_cids`` item
        - the ``content_cid`` entry with the already known content
        - a deletion marker, only if the comment is deleted; it carries the
          current status and the ``content_cid`` entry loses it

        The selection starts on the last entry, the most recent state.

        Args:
            record: Comment whose history is shown
            current_content: Resolved payload of ``record.content_cid``, if any

        Returns:
            History with ``len(revision_cids) + 1`` entries, plus one if deleted
        """
        entries = [
            RevisionEntry(version=i + 1, cid=cid, is_pending=True)
            for i, cid in enumerate(record.revision_cids)
        ]
        entries.append(
            RevisionEntry(
                version=len(entries) + 1,
                cid=record.content_cid,
                content=current_content,
                is_current=not record.deleted,
            )
        )
        if record.deleted:
            entries.append(
                RevisionEntry(
                    version=len(entries) + 1,
                    is_current=True,
                    is_deleted=True,
                    deleted_by=record.deleted_by,
                    deleted_at=record.updated_at,
                )
            )

        return RevisionHistory(
            comment_id=record.id,
            entries=entries,
            selected_index=len(entries) - 1,
        )

    async def resolve(
        self, history: RevisionHistory, content_store: ContentStore
    ) -> AsyncIterator[int]:
        """Resolve pending entries one at a time, in ascending order.

        Each entry is replaced in its slot as soon as its fetch finishes and
        its index is yielded, so callers can publish progress oldest to
        newest. A failed fetch leaves the entry without content, marks it
        failed and is not retried.

        Args:
            history: History built by ``build``; updated in place
            content_store: Store used to fetch historical payloads

        Yields:
            Index of each entry after it has been updated
        """
        pending = history.pending_indices
        logfire.info(
            "Resolving revision history",
            comment_id=history.comment_id,
            pending=len(pending),
        )
        for index in pending:
            entry = history.entries[index]
            try:
                content = await content_store.fetch_content(entry.cid)
            except ContentResolutionError as e:
                logfire.warn(
                    "Revision content unavailable",
                    comment_id=history.comment_id,
                    cid=entry.cid,
                    reason=e.reason,
                )
                history.replace(
                    index, entry.model_copy(update={"is_pending": False, "failed": True})
                )
            else:
                history.replace(
                    index,
                    entry.model_copy(update={"content": content, "is_pending": False}),
                )
            yield index

    async def resolve_all(
        self, history: RevisionHistory, content_store: ContentStore
    ) -> RevisionHistory:
        """Resolve every pending entry and return the same history."""
        async for _ in self.resolve(history, content_store):
            pass
        return history
