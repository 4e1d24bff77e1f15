"""Domain value objects for discussions."""

from enum import Enum

from pydantic import Field

from agora.domain.value.common import ValueObject
from agora.domain.value.identifiers import Nullifier


class DeletedBy(str, Enum):
    """Who removed a comment."""

    USER = "user"
    ADMIN = "admin"

    @classmethod
    def from_wire(cls, value: "str | int | DeletedBy | None") -> "DeletedBy | None":
        """Normalize the index's deletion marker.

        The relayer forwards either the contract's numeric code
        (0 = not deleted, 1 = user, 2 = admin) or the string form.

        Args:
            value: Raw ``deletedBy`` value

        Returns:
            DeletedBy member, or None when the comment was not deleted

        Raises:
            ValueError: If the value is not a known marker
        """
        if value is None or isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Unknown deletedBy marker: {value!r}")
        if isinstance(value, int):
            codes = {0: None, 1: cls.USER, 2: cls.ADMIN}
            if value not in codes:
                raise ValueError(f"Unknown deletedBy code: {value}")
            return codes[value]
        if value in ("", "none"):
            return None
        return cls(value)


class Viewer(ValueObject):
    """Whoever is looking at a discussion.

    ``is_admin`` is trusted as supplied; authorization happens upstream.
    """

    public_key: str | None = None
    nullifiers: frozenset[Nullifier] = Field(default_factory=frozenset)
    is_admin: bool = False
    has_membership: bool = False


class CommentPermissions(ValueObject):
    """Actions a viewer may take on one comment."""

    can_edit: bool = False
    can_delete: bool = False
    can_reply: bool = False
