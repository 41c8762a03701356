"""Preference center settings for django-configurations projects."""

from configurations import values

from .values import ApiKeyValue


def build_providers_setting(
    hubspot_api_key=None,
    hubspot_subscription_id=None,
    reachinbox_api_key=None,
    timeout=None,
):
    """Build the MAILPREFS_PROVIDERS setting from the provider credentials."""
    return {
        "hubspot": {
            "BACKEND": "mailprefs.providers.backends.hubspot.HubSpotBackend",
            "PARAMETERS": {
                "api_key": hubspot_api_key,
                "subscription_id": hubspot_subscription_id,
                "timeout": timeout,
            },
        },
        "reachinbox": {
            "BACKEND": "mailprefs.providers.backends.reachinbox.ReachInboxBackend",
            "PARAMETERS": {
                "api_key": reachinbox_api_key,
                "timeout": timeout,
            },
        },
    }


class MailPrefsSettingsMixin:
    """
    Settings of the preference center, to mix in a `Configuration` class.

    Credentials are read once, when the settings are loaded.
    """

    HUBSPOT_API_KEY = ApiKeyValue(environ_prefix=None)
    HUBSPOT_SUBSCRIPTION_ID = values.Value(None, environ_prefix=None)
    REACHINBOX_API_KEY = ApiKeyValue(environ_prefix=None)
    MAILPREFS_TIMEOUT = values.PositiveIntegerValue(10, environ_prefix=None)

    @property
    def MAILPREFS_PROVIDERS(self):  # noqa: N802
        """Provider backends built from the credentials."""
        return build_providers_setting(
            hubspot_api_key=self.HUBSPOT_API_KEY,
            hubspot_subscription_id=self.HUBSPOT_SUBSCRIPTION_ID,
            reachinbox_api_key=self.REACHINBOX_API_KEY,
            timeout=self.MAILPREFS_TIMEOUT,
        )
