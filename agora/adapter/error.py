"""Adapter layer errors.

Adapters translate these into domain errors before they leave the adapter,
so nothing above ``agora.adapter`` catches them.
"""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ProviderError(AdapterError):
    """An upstream service answered with a body the adapter cannot use."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"{provider}: {message}")
