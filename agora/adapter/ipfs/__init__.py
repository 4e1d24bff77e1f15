"""IPFS content store adapter."""

from .client import IpfsContentStore, MockContentStore

__all__ = ["IpfsContentStore", "MockContentStore"]
