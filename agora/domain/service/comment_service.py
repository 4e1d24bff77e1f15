"""Comment domain service."""

import asyncio
from collections.abc import Iterable

import logfire

from agora.domain.error import AccessFailureError, ContentResolutionError, ScopeNotFoundError
from agora.domain.model import CommentContent, CommentRecord
from agora.domain.repository import CommentIndex, ContentStore
from agora.domain.value import CommentId, ContentId, GroupId, TopicId

from .base import Service


class CommentService(Service):
    """Domain service for reading discussions from the external collaborators."""

    def __init__(
        self,
        comment_index: CommentIndex,
        content_store: ContentStore,
        max_concurrency: int = 16,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_index: Comment index holding the records
            content_store: Content-addressed store holding the payloads
            max_concurrency: Upper bound on concurrent content fetches
        """
        self.comment_index = comment_index
        self.content_store = content_store
        self.max_concurrency = max_concurrency

    async def get_records(
        self, group_id: GroupId, topic_id: TopicId
    ) -> list[CommentRecord]:
        """Get every comment record of a discussion.

        A discussion without a backing resource is an empty discussion.

        Args:
            group_id: Group owning the discussion
            topic_id: Topic within the group

        Returns:
            Comment records in index order

        Raises:
            AccessFailureError: If the index is unreachable
        """
        with logfire.span(
            "comment_service.get_records", group_id=group_id, topic_id=topic_id
        ):
            try:
                records = await self.comment_index.fetch_comments(group_id, topic_id)
            except ScopeNotFoundError:
                logfire.info(
                    "Discussion not found, treating as empty",
                    group_id=group_id,
                    topic_id=topic_id,
                )
                return []
            except AccessFailureError as e:
                logfire.error(
                    "Comment index unavailable",
                    group_id=group_id,
                    topic_id=topic_id,
                    error=str(e),
                )
                raise

            logfire.info(
                "Comment records retrieved",
                group_id=group_id,
                topic_id=topic_id,
                count=len(records),
            )
            return records

    async def find_record(
        self, group_id: GroupId, topic_id: TopicId, comment_id: CommentId
    ) -> CommentRecord | None:
        """Find one comment of a discussion.

        Returns:
            The last record carrying ``comment_id``, None if absent
        """
        records = await self.get_records(group_id, topic_id)
        found = None
        for record in records:
            if record.id == comment_id:
                found = record
        return found

    async def resolve_content(self, cid: ContentId) -> CommentContent | None:
        """Resolve one payload, None if the store cannot provide it."""
        try:
            return await self.content_store.fetch_content(cid)
        except ContentResolutionError as e:
            logfire.warn("Comment content unavailable", cid=cid, reason=e.reason)
            return None

    async def resolve_contents(
        self, cids: Iterable[ContentId]
    ) -> dict[ContentId, CommentContent | None]:
        """Resolve many payloads concurrently.

        Each distinct identifier is fetched once. Failures are isolated: a
        failed identifier maps to None and the others are unaffected.

        Args:
            cids: Content identifiers, duplicates allowed

        Returns:
            Lookup table keyed by every distinct identifier
        """
        distinct = list(dict.fromkeys(cids))
        with logfire.span("comment_service.resolve_contents", count=len(distinct)):
            semaphore = asyncio.Semaphore(self.max_concurrency)

            async def fetch(cid: ContentId) -> CommentContent | None:
                async with semaphore:
                    return await self.resolve_content(cid)

            contents = await asyncio.gather(*(fetch(cid) for cid in distinct))
            resolved = dict(zip(distinct, contents))

            failed = sum(1 for content in contents if content is None)
            if failed:
                logfire.warn(
                    "Some comment content could not be resolved",
                    failed=failed,
                    total=len(distinct),
                )
            return resolved
