"""Anonymous member numbering."""

from collections.abc import Sequence

import logfire

from agora.domain.model import AnonymizerMapping, CommentNode
from agora.domain.value import Nullifier

from .base import Service


class AnonymizerIndex(Service):
    """Assigns display numbers to nullifiers in first-seen tree order."""

    def compute(self, roots: Sequence[CommentNode]) -> AnonymizerMapping:
        """Number every distinct nullifier in a comment tree.

        Pre-order walk with an explicit stack: each root in order, and every
        node's replies in order before its next sibling. A nullifier's number
        is fixed the first time it is seen; comments without a nullifier are
        skipped and consume no number.

        Order is structural, not chronological: a reply inserted earlier in
        the tree may renumber later members on the next computation.

        Args:
            roots: Top-level nodes as returned by CommentTreeBuilder

        Returns:
            Mapping with numbers 1..k for the k distinct nullifiers
        """
        numbers: dict[Nullifier, int] = {}
        stack = list(reversed(roots))
        while stack:
            node = stack.pop()
            if node.nullifier is not None and node.nullifier not in numbers:
                numbers[node.nullifier] = len(numbers) + 1
            stack.extend(reversed(node.replies))

        logfire.debug("Anonymizer mapping computed", members=len(numbers))
        return AnonymizerMapping(numbers=numbers)
