"""Provider backend base module."""

import logging
from abc import ABC, abstractmethod

import requests

from mailprefs.providers.backends import ProviderOutcome
from mailprefs.providers.exceptions import ProviderRequestError

logger = logging.getLogger(__name__)


class BaseBackend(ABC):
    """Base class for all provider backends."""

    provider = ""
    display_name = ""
    default_base_url = ""

    def __init__(self, api_key: str | None = None, base_url: str | None = None, timeout: int | None = None):
        """Configure the backend, an empty api key leaves it unconfigured."""
        self._api_key = api_key or None
        self.base_url = (base_url or self.default_base_url).rstrip("/")
        self.timeout = timeout or 10

    @property
    def is_configured(self) -> bool:
        """Return True when the backend holds credentials."""
        return self._api_key is not None

    def not_configured(self) -> ProviderOutcome:
        """Return the soft outcome used when the backend has no credentials."""
        logger.warning("%s API key not configured", self.display_name)
        return ProviderOutcome.soft_failure(self.provider, f"{self.display_name} not configured", skipped=True)

    @property
    def _headers(self):
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        """Send a request to the provider, network failures become ProviderRequestError."""
        try:
            return requests.request(
                method,
                f"{self.base_url}{path}",
                headers=self._headers,
                timeout=self.timeout,
                **kwargs,
            )
        except requests.RequestException as err:
            raise ProviderRequestError(f"{self.display_name} request failed: {err}") from err

    def _check(self, response: requests.Response, action: str) -> None:
        """Raise ProviderRequestError if the response is not a success."""
        if response.ok:
            return
        logger.error("[%s] %s failed: %s", self.display_name, action, response.text)
        raise ProviderRequestError(
            f"{self.display_name} {action} failed: {response.status_code}",
            status_code=response.status_code,
            body=response.text,
        )

    def _json(self, response: requests.Response) -> dict:
        """Decode a provider JSON body, an empty body decodes to an empty dict."""
        if not response.content:
            return {}
        try:
            payload = response.json()
        except ValueError as err:
            raise ProviderRequestError(
                f"{self.display_name} returned an invalid JSON body",
                status_code=response.status_code,
                body=response.text,
            ) from err
        return payload if isinstance(payload, dict) else {"data": payload}

    @abstractmethod
    def unsubscribe(self, email: str, campaign_id: str = "", campaign_name: str = "") -> ProviderOutcome:
        """
        Unsubscribe a contact from a single campaign.

        Args:
            email: Contact email address
            campaign_id: Provider specific campaign or subscription identifier
            campaign_name: Campaign display name, used when no identifier is known

        Returns:
            ProviderOutcome: Normalized provider result

        Raises:
            ProviderRequestError: If the provider call fails

        """

    @abstractmethod
    def unsubscribe_all(self, email: str) -> ProviderOutcome:
        """
        Stop every email communication to a contact.

        Args:
            email: Contact email address

        Returns:
            ProviderOutcome: Normalized provider result

        Raises:
            ProviderRequestError: If the provider call fails

        """
