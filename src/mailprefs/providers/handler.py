"""Provider backends handler."""

from dataclasses import dataclass

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.functional import cached_property
from django.utils.module_loading import import_string

from mailprefs.providers.backends.base import BaseBackend
from mailprefs.providers.exceptions import ProviderInvalidBackendError

DEFAULT_BACKENDS = {
    "hubspot": "mailprefs.providers.backends.hubspot.HubSpotBackend",
    "reachinbox": "mailprefs.providers.backends.reachinbox.ReachInboxBackend",
}


@dataclass(frozen=True)
class Providers:
    """The configured backend of each provider."""

    hubspot: BaseBackend
    reachinbox: BaseBackend


class ProviderHandler:
    """Provider handler managing the backends instantiation."""

    def __init__(self, providers=None):
        """Initialize the provider handler."""
        # providers is an optional dict of provider backend definitions
        # (structured like settings.MAILPREFS_PROVIDERS).
        self._providers_config = providers
        self._providers = None

    @cached_property
    def config(self):
        """Put in cache the providers definitions from the settings."""
        if self._providers_config is None:
            try:
                self._providers_config = settings.MAILPREFS_PROVIDERS.copy()
            except AttributeError as e:
                raise ImproperlyConfigured("settings.MAILPREFS_PROVIDERS is not configured") from e
        return self._providers_config

    def __call__(self):
        """Create if not existing the backends and then return them."""
        if self._providers is None:
            self._providers = Providers(
                **{name: self.create_backend(name, self.config.get(name)) for name in DEFAULT_BACKENDS}
            )
        return self._providers

    def create_backend(self, name, params):
        """
        Instantiate and configure the backend of a provider.

        A provider missing from the configuration gets its default backend
        without credentials, its actions are then skipped.
        """
        params = (params or {}).copy()
        backend = params.pop("BACKEND", DEFAULT_BACKENDS[name])
        parameters = params.pop("PARAMETERS", {})
        try:
            klass = import_string(backend)
        except ImportError as e:
            raise ProviderInvalidBackendError(f"Could not find backend {backend!r}: {e}") from e
        return klass(**parameters)
