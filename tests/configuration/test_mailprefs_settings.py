"""Tests for the preference center settings."""

from types import SimpleNamespace

from mailprefs.configuration.settings import MailPrefsSettingsMixin, build_providers_setting
from mailprefs.providers.backends.hubspot import HubSpotBackend
from mailprefs.providers.backends.reachinbox import ReachInboxBackend
from mailprefs.providers.handler import ProviderHandler


def test_build_providers_setting():
    """Test the providers setting feeds the provider handler."""
    providers = ProviderHandler(
        providers=build_providers_setting(
            hubspot_api_key="hubspot-api-key",
            hubspot_subscription_id="222",
            reachinbox_api_key=None,
            timeout=5,
        )
    )()

    assert isinstance(providers.hubspot, HubSpotBackend)
    assert providers.hubspot.is_configured is True
    assert providers.hubspot.subscription_id == "222"
    assert providers.hubspot.timeout == 5
    assert isinstance(providers.reachinbox, ReachInboxBackend)
    assert providers.reachinbox.is_configured is False


def test_mixin_providers_property():
    """Test the MAILPREFS_PROVIDERS property reads the loaded credentials."""
    loaded = SimpleNamespace(
        HUBSPOT_API_KEY="hubspot-api-key",
        HUBSPOT_SUBSCRIPTION_ID=None,
        REACHINBOX_API_KEY="reachinbox-api-key",
        MAILPREFS_TIMEOUT=10,
    )

    setting = MailPrefsSettingsMixin.MAILPREFS_PROVIDERS.fget(loaded)

    assert setting["hubspot"]["PARAMETERS"] == {
        "api_key": "hubspot-api-key",
        "subscription_id": None,
        "timeout": 10,
    }
    assert setting["reachinbox"]["PARAMETERS"] == {"api_key": "reachinbox-api-key", "timeout": 10}
