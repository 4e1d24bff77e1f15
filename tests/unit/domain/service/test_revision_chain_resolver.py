"""Unit tests for RevisionChainResolver."""

import pytest

from agora.adapter.ipfs import MockContentStore
from agora.domain.repository import ContentStore
from agora.domain.service import RevisionChainResolver
from agora.domain.value import DeletedBy
from tests.conftest import make_content, make_record
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestBuild:
    """Tests for laying out the revision list."""

    def test_edited_comment_lists_revisions_then_current(self):
        """Two revisions plus the current content should give three entries."""
        # Arrange
        current = make_content("third")
        record = make_record(1, content_cid="c3", revision_cids=["c1", "c2"])

        # Act
        history = RevisionChainResolver().build(record, current)

        # Assert
        assert len(history) == 3
        assert [entry.cid for entry in history.entries] == ["c1", "c2", "c3"]
        assert [entry.version for entry in history.entries] == [1, 2, 3]
        assert history.selected_index == 2
        assert history.entries[0].is_pending
        assert history.entries[1].is_pending
        assert not history.entries[2].is_pending
        assert history.entries[2].content == current
        assert history.entries[2].is_current
        assert [entry.label for entry in history.entries] == ["v1", "v2", "Current"]

    def test_unedited_comment_has_single_entry(self):
        """A never-edited comment should only show its current content."""
        record = make_record(1, content_cid="c1")

        history = RevisionChainResolver().build(record, make_content("only"))

        assert len(history) == 1
        assert history.selected_index == 0
        assert history.pending_indices == []

    def test_deleted_comment_ends_with_deletion_marker(self):
        """Deletion should append a marker that takes the current status."""
        record = make_record(
            1,
            content_cid="c3",
            revision_cids=["c1", "c2"],
            deleted=True,
            deleted_by="admin",
            updated_at=1_800_000_000,
        )

        history = RevisionChainResolver().build(record, make_content("third"))

        assert len(history) == 4
        assert history.selected_index == 3
        marker = history.entries[3]
        assert marker.is_deleted
        assert marker.deleted_by == DeletedBy.ADMIN
        assert marker.deleted_at == 1_800_000_000
        assert marker.cid is None
        assert marker.content is None
        assert marker.is_current
        assert marker.label == "Deleted"
        assert not history.entries[2].is_current
        assert history.entries[2].label == "v3"

    def test_missing_current_content_is_not_pending(self):
        """The current entry is never fetched again by the resolver."""
        record = make_record(1, content_cid="c2", revision_cids=["c1"])

        history = RevisionChainResolver().build(record, None)

        assert history.entries[1].content is None
        assert history.pending_indices == [0]


class TestResolve:
    """Tests for resolving historical content."""

    @pytest.mark.asyncio
    async def test_resolves_in_ascending_order(self, unit_env):
        """Pending entries should be fetched and yielded oldest first."""
        # Arrange
        store = await unit_env.get(ContentStore)
        for cid in ("c1", "c2", "c3"):
            store.put(cid, make_content(f"body {cid}"))
        record = make_record(1, content_cid="c4", revision_cids=["c1", "c2", "c3"])
        resolver = RevisionChainResolver()
        history = resolver.build(record, make_content("current"))

        # Act
        yielded = [index async for index in resolver.resolve(history, store)]

        # Assert
        assert yielded == [0, 1, 2]
        assert store.calls == ["c1", "c2", "c3"]
        assert [entry.content.body for entry in history.entries[:3]] == [
            "body c1",
            "body c2",
            "body c3",
        ]
        assert history.pending_indices == []

    @pytest.mark.asyncio
    async def test_entry_updated_before_index_is_yielded(self):
        """Each yielded index should already point at the updated entry."""
        store = MockContentStore()
        store.put("c1", make_content("first"))
        store.put("c2", make_content("second"))
        resolver = RevisionChainResolver()
        history = resolver.build(
            make_record(1, content_cid="c3", revision_cids=["c1", "c2"]), None
        )

        async for index in resolver.resolve(history, store):
            entry = history.entries[index]
            assert not entry.is_pending
            assert entry.content is not None
            # Later entries are untouched until their turn
            if index == 0:
                assert history.entries[1].is_pending

    @pytest.mark.asyncio
    async def test_failed_fetch_marks_entry_and_continues(self):
        """A failing CID should not block later revisions."""
        store = MockContentStore()
        store.fail("c1")
        store.put("c2", make_content("second"))
        resolver = RevisionChainResolver()
        history = resolver.build(
            make_record(1, content_cid="c3", revision_cids=["c1", "c2"]), None
        )

        await resolver.resolve_all(history, store)

        assert history.entries[0].failed
        assert not history.entries[0].is_pending
        assert history.entries[0].content is None
        assert history.entries[1].content.body == "second"
        assert not history.entries[1].failed

    @pytest.mark.asyncio
    async def test_resolving_twice_fetches_nothing_new(self):
        """Resolved and failed entries are not retried."""
        store = MockContentStore()
        store.fail("c1")
        resolver = RevisionChainResolver()
        history = resolver.build(
            make_record(1, content_cid="c2", revision_cids=["c1"]), None
        )

        await resolver.resolve_all(history, store)
        await resolver.resolve_all(history, store)

        assert store.calls == ["c1"]

    @pytest.mark.asyncio
    async def test_selection_unchanged_by_resolution(self):
        """Resolving content should not move the selection."""
        store = MockContentStore()
        store.put("c1", make_content("first"))
        resolver = RevisionChainResolver()
        history = resolver.build(
            make_record(1, content_cid="c2", revision_cids=["c1"]), None
        )
        history.select(0)

        await resolver.resolve_all(history, store)

        assert history.selected_index == 0
        assert history.selected.content.body == "first"
