"""Mock providers for testing."""

from .ipfs import MockIpfsProvider
from .relayer import MockRelayerProvider
from .container import build_test_container

__all__ = [
    "MockIpfsProvider",
    "MockRelayerProvider",
    "build_test_container",
]
