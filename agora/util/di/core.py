"""Core DI providers (non-mockable)."""

from dishka import Scope, from_context, provide

from agora.config import IpfsSettings, RelayerSettings, Settings
from agora.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Configuration provider - concrete, no mocks needed.

    ``Settings`` is passed in as container context so the app factory and the
    container share one instance; the sections are derived from it.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def provide_relayer_settings(self, settings: Settings) -> RelayerSettings:
        """Provide relayer settings."""
        return settings.relayer

    @provide(scope=Scope.APP)
    def provide_ipfs_settings(self, settings: Settings) -> IpfsSettings:
        """Provide IPFS settings."""
        return settings.ipfs
