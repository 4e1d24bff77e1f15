"""Comment index interface."""

from abc import ABC, abstractmethod

from agora.domain.model.comment import CommentRecord
from agora.domain.value import GroupId, TopicId


class CommentIndex(ABC):
    """Read access to the comment records of a discussion.

    Implementations live in the adapter layer.
    """

    @abstractmethod
    async def fetch_comments(
        self, group_id: GroupId, topic_id: TopicId
    ) -> list[CommentRecord]:
        """Fetch every comment record of a discussion.

        Records are returned in the index's order, assumed oldest first.

        Args:
            group_id: Group owning the discussion
            topic_id: Topic within the group

        Returns:
            Comment records, possibly empty

        Raises:
            ScopeNotFoundError: If the discussion has no backing resource yet
            AccessFailureError: If the index is unreachable or misbehaving
        """
        pass
