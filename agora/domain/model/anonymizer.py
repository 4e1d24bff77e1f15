"""Anonymous member numbering."""

from pydantic import Field

from agora.domain.model.comment import CommentRecord
from agora.domain.value import Nullifier
from agora.domain.value.common import ValueObject

ANONYMOUS_LABEL = "Anonymous"


def truncate_address(address: str) -> str:
    """Shorten a public address for display (first 6 + last 4 characters)."""
    if len(address) <= 12:
        return address
    return f"{address[:6]}...{address[-4:]}"


class AnonymizerMapping(ValueObject):
    """Nullifier to member number mapping for one rendered discussion.

    Numbers are dense, start at 1 and follow first appearance in tree order.
    The mapping is recomputed on every build and carries no identity across
    computations.
    """

    numbers: dict[Nullifier, int] = Field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.numbers)

    def __contains__(self, nullifier: object) -> bool:
        return nullifier in self.numbers

    def number_for(self, nullifier: Nullifier | None) -> int | None:
        """Member number for a nullifier, None if absent or unknown."""
        if nullifier is None:
            return None
        return self.numbers.get(nullifier)

    def label_for(self, record: CommentRecord) -> str:
        """Display name for a comment's author."""
        if record.author is not None:
            return truncate_address(record.author)
        number = self.number_for(record.nullifier)
        if number is None:
            return ANONYMOUS_LABEL
        return f"{ANONYMOUS_LABEL} Member #{number}"
