"""Infrastructure providers."""

# Import bases
from .ipfs import IpfsProvider
from .relayer import RelayerProvider

# Import implementations (needed for __subclasses__())
from .ipfs import ProdIpfsProvider  # noqa: F401
from .relayer import ProdRelayerProvider  # noqa: F401

__all__ = [
    "IpfsProvider",
    "ProdIpfsProvider",
    "ProdRelayerProvider",
    "RelayerProvider",
]
