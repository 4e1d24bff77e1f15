"""Comment tree construction."""

from collections import defaultdict
from collections.abc import Mapping, Sequence

import logfire

from agora.domain.model import CommentContent, CommentNode, CommentRecord
from agora.domain.value import CommentId, ContentId

from .base import Service


class CommentTreeBuilder(Service):
    """Turns a flat list of comment records into a nested reply tree.

    Pure transform: no I/O, no state kept between calls.
    """

    def build(
        self,
        records: Sequence[CommentRecord],
        contents: Mapping[ContentId, CommentContent | None],
    ) -> list[CommentNode]:
        """Build the reply tree of one discussion.

        Algorithm:
        1. Collapse duplicate ids: the later record's data wins, the first
           occurrence keeps its position
        2. Partition into roots (no parent, self-parent, or parent missing
           from the set) and replies grouped by parent id
        3. Walk each root with an explicit stack, attaching replies in the
           order the records were supplied
        4. Promote any record still unreached (a parent cycle) to the top
           level so nothing is dropped

        Args:
            records: Comment records, assumed oldest first; not re-sorted
            contents: Resolved payloads keyed by CID; a miss or None leaves
                the node's content empty

        Returns:
            Top-level nodes in supplied order, each with its replies attached
        """
        with logfire.span("comment_tree_builder.build", records=len(records)):
            unique: dict[CommentId, CommentRecord] = {}
            for record in records:
                if record.id in unique:
                    logfire.warn(
                        "Duplicate comment id, keeping later record",
                        comment_id=record.id,
                    )
                unique[record.id] = record

            position = {comment_id: i for i, comment_id in enumerate(unique)}

            children: dict[CommentId, list[CommentId]] = defaultdict(list)
            root_ids: list[CommentId] = []
            orphans = 0
            for comment_id, record in unique.items():
                parent_id = record.parent_id
                if parent_id is None or parent_id == comment_id:
                    root_ids.append(comment_id)
                elif parent_id not in unique:
                    orphans += 1
                    root_ids.append(comment_id)
                else:
                    children[parent_id].append(comment_id)

            if orphans:
                logfire.info("Orphaned comments promoted to top level", count=orphans)

            nodes: dict[CommentId, CommentNode] = {}
            roots: list[CommentNode] = []

            def attach(root_id: CommentId) -> None:
                root = CommentNode.from_record(
                    unique[root_id], contents.get(unique[root_id].content_cid)
                )
                nodes[root_id] = root
                roots.append(root)

                stack = [root]
                while stack:
                    node = stack.pop()
                    for child_id in children.get(node.id, ()):
                        # Only a cycle member promoted to root can be seen twice
                        if child_id in nodes:
                            continue
                        child_record = unique[child_id]
                        child = CommentNode.from_record(
                            child_record,
                            contents.get(child_record.content_cid),
                            depth=node.depth + 1,
                        )
                        nodes[child_id] = child
                        node.replies.append(child)
                        stack.append(child)

            for root_id in root_ids:
                attach(root_id)

            if len(nodes) < len(unique):
                for comment_id in unique:
                    if comment_id in nodes:
                        continue
                    head = _cycle_head(comment_id, unique, position)
                    logfire.warn(
                        "Comment parent cycle, promoting to top level",
                        comment_id=head,
                        parent_id=unique[head].parent_id,
                    )
                    attach(head)
                roots.sort(key=lambda node: position[node.id])

            logfire.info(
                "Comment tree built",
                roots=len(roots),
                total=len(nodes),
            )
            return roots


def count_nodes(roots: Sequence[CommentNode]) -> int:
    """Count every node in a tree without recursion."""
    total = 0
    stack = list(roots)
    while stack:
        node = stack.pop()
        total += 1
        stack.extend(node.replies)
    return total


def _cycle_head(
    comment_id: CommentId,
    unique: Mapping[CommentId, CommentRecord],
    position: Mapping[CommentId, int],
) -> CommentId:
    """Earliest supplied member of the parent cycle above an unreached record."""
    chain: list[CommentId] = []
    seen: set[CommentId] = set()
    current = comment_id
    while current not in seen:
        chain.append(current)
        seen.add(current)
        current = unique[current].parent_id
    cycle = chain[chain.index(current) :]
    return min(cycle, key=lambda member: position[member])
