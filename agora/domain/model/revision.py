"""Revision history of a single comment."""

from dataclasses import dataclass, field

from agora.domain.error import InvalidSelectionError
from agora.domain.model.comment import CommentContent
from agora.domain.value import CommentId, ContentId, DeletedBy
from agora.domain.value.common import ValueObject


class RevisionEntry(ValueObject):
    """One step in a comment's revision chain.

    Three shapes share this type:
    - historical revision: ``cid`` set, content pending until resolved
    - current revision: the record's ``content_cid``
    - deletion marker: no ``cid`` and no content, ``is_deleted`` set
    """

    version: int  # 1-based position in the history
    cid: ContentId | None = None
    content: CommentContent | None = None
    is_pending: bool = False
    is_current: bool = False
    is_deleted: bool = False
    deleted_by: DeletedBy | None = None
    deleted_at: int | None = None
    failed: bool = False  # Resolution attempted and failed; not retried

    @property
    def label(self) -> str:
        """Short label for the revision list."""
        if self.is_deleted:
            return "Deleted"
        if self.is_current:
            return "Current"
        return f"v{self.version}"


@dataclass
class RevisionHistory:
    """Ordered, navigable revision list, oldest first.

    Entries never move after construction; resolution replaces an entry in
    its slot with an updated copy.
    """

    comment_id: CommentId
    entries: list[RevisionEntry]
    selected_index: int = field(default=0)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def selected(self) -> RevisionEntry:
        """Currently selected entry."""
        return self.entries[self.selected_index]

    @property
    def pending_indices(self) -> list[int]:
        """Indices still waiting for content, ascending."""
        return [i for i, entry in enumerate(self.entries) if entry.is_pending]

    def select(self, index: int) -> RevisionEntry:
        """Move the selection.

        Raises:
            InvalidSelectionError: If index is outside the history
        """
        if index < 0 or index >= len(self.entries):
            raise InvalidSelectionError(index, len(self.entries))
        self.selected_index = index
        return self.selected

    def replace(self, index: int, entry: RevisionEntry) -> None:
        """Swap in an updated entry without touching its siblings."""
        self.entries[index] = entry
