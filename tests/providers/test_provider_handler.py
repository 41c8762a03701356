"""Test the provider handler."""

import pytest
from django.core.exceptions import ImproperlyConfigured

from mailprefs.providers.backends.dummy import DummyBackend
from mailprefs.providers.backends.hubspot import HubSpotBackend
from mailprefs.providers.backends.reachinbox import ReachInboxBackend
from mailprefs.providers.exceptions import ProviderInvalidBackendError
from mailprefs.providers.handler import ProviderHandler


def test_provider_handler_from_settings(settings):
    """Test the provider handler from the settings."""
    settings.MAILPREFS_PROVIDERS = {
        "hubspot": {
            "BACKEND": "mailprefs.providers.backends.dummy.DummyBackend",
            "PARAMETERS": {"provider": "hubspot"},
        },
        "reachinbox": {
            "BACKEND": "mailprefs.providers.backends.reachinbox.ReachInboxBackend",
            "PARAMETERS": {"api_key": "reachinbox-api-key", "timeout": 3},
        },
    }
    providers = ProviderHandler()()

    assert isinstance(providers.hubspot, DummyBackend)
    assert providers.hubspot.provider == "hubspot"
    assert isinstance(providers.reachinbox, ReachInboxBackend)
    assert providers.reachinbox.is_configured is True
    assert providers.reachinbox.timeout == 3


def test_provider_handler_from_providers():
    """Test the provider handler from an explicit configuration."""
    handler = ProviderHandler(
        providers={
            "hubspot": {
                "PARAMETERS": {"api_key": "hubspot-api-key", "subscription_id": "222"},
            },
        }
    )
    providers = handler()

    assert isinstance(providers.hubspot, HubSpotBackend)
    assert providers.hubspot.subscription_id == "222"
    assert providers.hubspot.timeout == 10
    assert handler() is providers


def test_provider_handler_missing_provider_is_not_configured():
    """Test a provider absent from the configuration gets an unconfigured backend."""
    providers = ProviderHandler(providers={})()

    assert isinstance(providers.hubspot, HubSpotBackend)
    assert providers.hubspot.is_configured is False
    assert isinstance(providers.reachinbox, ReachInboxBackend)
    assert providers.reachinbox.is_configured is False


def test_provider_handler_invalid_backend():
    """Test an unknown backend raises."""
    handler = ProviderHandler(providers={"hubspot": {"BACKEND": "mailprefs.providers.backends.unknown.Backend"}})

    with pytest.raises(ProviderInvalidBackendError, match="Could not find backend"):
        handler()


def test_provider_handler_no_config(settings):
    """Test the provider handler when no config set should raise an error."""
    settings.MAILPREFS_PROVIDERS = None
    handler = ProviderHandler()
    with pytest.raises(ImproperlyConfigured):
        handler()
