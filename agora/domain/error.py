"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ScopeNotFoundError(NotFoundError):
    """Raised by the comment index when a discussion has no backing resource yet.

    Callers render this as an empty discussion, not as a failure.
    """

    def __init__(self, group_id: int, topic_id: int):
        self.group_id = group_id
        self.topic_id = topic_id
        super().__init__("Discussion", f"{group_id}/{topic_id}")


class AccessFailureError(DomainError):
    """Raised when the comment index or content store cannot be reached.

    Retryable by the caller; nothing in the core retries automatically.
    """

    pass


class ContentResolutionError(DomainError):
    """Raised when a single content identifier cannot be resolved."""

    def __init__(self, cid: str, reason: str):
        self.cid = cid
        self.reason = reason
        super().__init__(f"Failed to resolve content {cid}: {reason}")


class InvalidSelectionError(DomainError):
    """Raised when selecting a revision index outside the history."""

    def __init__(self, index: int, size: int):
        super().__init__(f"Revision index {index} out of range for {size} revisions")
