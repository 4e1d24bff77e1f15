"""Relayer comment index adapter."""

from .client import MockCommentIndex, RelayerCommentIndex

__all__ = ["RelayerCommentIndex", "MockCommentIndex"]
