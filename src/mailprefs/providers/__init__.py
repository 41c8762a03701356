"""Providers module."""

from django.utils.functional import LazyObject

from .handler import ProviderHandler


class DefaultProviders(LazyObject):
    """Lazy object to handle the provider backends."""

    def _setup(self):
        """Configure the provider backends."""
        self._wrapped = provider_handler()


provider_handler = ProviderHandler()
providers = DefaultProviders()
