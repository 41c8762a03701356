"""Dummy provider backend."""

from mailprefs.providers.backends import ProviderOutcome

from .base import BaseBackend


class DummyBackend(BaseBackend):
    """Dummy provider backend accepting every action without calling any API."""

    display_name = "Dummy"

    def __init__(self, provider: str = "dummy", **kwargs):
        """Configure the dummy backend, it is always considered configured."""
        kwargs.setdefault("api_key", "dummy")
        super().__init__(**kwargs)
        self.provider = provider

    def subscribe(self, email: str) -> ProviderOutcome:
        """Subscribe a contact."""
        return ProviderOutcome.ok(self.provider)

    def unsubscribe(self, email: str, campaign_id: str = "", campaign_name: str = "") -> ProviderOutcome:
        """Unsubscribe a contact from a campaign."""
        return ProviderOutcome.ok(self.provider)

    def unsubscribe_all(self, email: str) -> ProviderOutcome:
        """Unsubscribe a contact from everything."""
        return ProviderOutcome.ok(self.provider)
