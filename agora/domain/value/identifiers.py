"""Strongly typed identifiers for discussion entities.

Using NewType for strong typing prevents mixing up group, topic and comment
numbers, which all arrive from the index as plain integers.
"""

from typing import NewType

# Discussion scope: a group (e.g. a DAO) and a topic within it (e.g. a proposal)
GroupId = NewType("GroupId", int)
TopicId = NewType("TopicId", int)

CommentId = NewType("CommentId", int)

# Content identifier in the content-addressed store
ContentId = NewType("ContentId", str)

# Opaque pseudonymous author token
Nullifier = NewType("Nullifier", str)
