"""Fixtures for the test suite."""

import pytest

from mailprefs.providers.backends.hubspot import HubSpotBackend
from mailprefs.providers.backends.reachinbox import ReachInboxBackend
from mailprefs.providers.handler import Providers


@pytest.fixture(name="hubspot")
def fixture_hubspot():
    """Generate a configured HubSpot backend."""
    return HubSpotBackend(api_key="hubspot-api-key")


@pytest.fixture(name="reachinbox")
def fixture_reachinbox():
    """Generate a configured ReachInbox backend."""
    return ReachInboxBackend(api_key="reachinbox-api-key")


@pytest.fixture(name="live_providers")
def fixture_live_providers(hubspot, reachinbox):
    """Bundle the configured backends like the provider handler does."""
    return Providers(hubspot=hubspot, reachinbox=reachinbox)
