"""Content store interface."""

from abc import ABC, abstractmethod

from agora.domain.model.comment import CommentContent
from agora.domain.value import ContentId


class ContentStore(ABC):
    """Content-addressed store holding comment payloads.

    Must be safe to call concurrently and repeatedly for the same identifier.
    """

    @abstractmethod
    async def fetch_content(self, cid: ContentId) -> CommentContent:
        """Resolve a content identifier to its payload.

        Args:
            cid: Content identifier

        Returns:
            The resolved payload

        Raises:
            ContentResolutionError: If this identifier cannot be resolved.
                Failure for one identifier never affects others.
        """
        pass
